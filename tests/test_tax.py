"""
Tax Policy Tests - Flat Rate and Per-Country VAT

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- domain_quotes.application.tax (FlatTax, CountryVat)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from domain_quotes.application.tax import DEFAULT_VAT_RATE, CountryVat, FlatTax
from domain_quotes.domain.errors import UnsupportedCurrencyError


class TestFlatTax:
    def test_same_rate_everywhere(self):
        policy = FlatTax(0.2)
        assert policy.rate_for("USD") == 0.2
        assert policy.rate_for("NGN") == 0.2

    def test_default_rate(self):
        assert FlatTax().rate_for("USD") == DEFAULT_VAT_RATE == 0.075


class TestCountryVat:
    @pytest.mark.parametrize("currency,rate", [("USD", 0.0), ("GBP", 0.2), ("EUR", 0.19), ("NGN", 0.075)])
    def test_default_tables(self, currency, rate):
        assert CountryVat().rate_for(currency) == rate

    def test_unmapped_currency(self):
        with pytest.raises(UnsupportedCurrencyError, match="JPY"):
            CountryVat().rate_for("JPY")

    def test_country_without_rate(self):
        policy = CountryVat(rates={"US": 0.0}, currency_countries={"USD": "US", "GBP": "GB"})
        with pytest.raises(UnsupportedCurrencyError):
            policy.rate_for("GBP")

    def test_custom_tables(self):
        policy = CountryVat(rates={"FR": 0.2}, currency_countries={"EUR": "FR"})
        assert policy.rate_for("EUR") == 0.2
