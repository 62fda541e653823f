"""
Normalization Tests - Unit Tests for Extension and Currency Canonicalization

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- domain_quotes.shared.normalize (normalize_extension, normalize_currency, extension_for_domain)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from domain_quotes.shared.normalize import (
    extension_for_domain,
    normalize_currency,
    normalize_extension,
)


class TestNormalizeExtension:
    @pytest.mark.parametrize("raw", [".COM", "..com", "com", "  .Com  ", "COM"])
    def test_variants_collapse_to_one_form(self, raw):
        assert normalize_extension(raw) == "com"

    def test_strips_all_leading_dots(self):
        assert normalize_extension("..NG") == "ng"
        assert normalize_extension("...com.ng") == "com.ng"

    def test_keeps_inner_dots(self):
        assert normalize_extension(".COM.NG") == "com.ng"

    @pytest.mark.parametrize("raw", ["", None])
    def test_falsy_passes_through(self, raw):
        assert normalize_extension(raw) == raw


class TestNormalizeCurrency:
    def test_uppercases(self):
        assert normalize_currency("ngn") == "NGN"
        assert normalize_currency(" usd ") == "USD"

    def test_empty(self):
        assert normalize_currency("") == ""
        assert normalize_currency(None) == ""


class TestExtensionForDomain:
    KNOWN = {"com", "ng", "com.ng", "co.uk"}

    def test_longest_suffix_wins(self):
        assert extension_for_domain("shop.example.com.ng", self.KNOWN) == "com.ng"
        assert extension_for_domain("example.ng", self.KNOWN) == "ng"

    def test_bare_extension(self):
        assert extension_for_domain(".COM", self.KNOWN) == "com"

    def test_normalizes_before_matching(self):
        assert extension_for_domain("..Example.CO.UK", self.KNOWN) == "co.uk"

    def test_falls_back_to_last_label(self):
        assert extension_for_domain("example.xyz", self.KNOWN) == "xyz"

    def test_empty_input(self):
        assert extension_for_domain("", self.KNOWN) == ""
        assert extension_for_domain(None, self.KNOWN) is None
