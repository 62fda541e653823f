"""
Formatter Tests - Unit Tests for Quote Formatting

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- domain_quotes.adapters.formatting.formatter (format_amount, format_quote, format_quote_json)
- domain_quotes.domain.models (Quote for test data)
- pytest (testing framework)
"""
import json

import pytest  # Testing framework for writing and running tests

from domain_quotes.adapters.formatting.formatter import format_amount, format_quote, format_quote_json
from domain_quotes.domain.models import Quote


@pytest.fixture
def ngn_quote():
    return Quote(
        extension="com.ng",
        currency="NGN",
        base_price=15000.0,
        discount=1500.0,
        subtotal=13500.0,
        tax=1013.0,
        total_price=14513.0,
        symbol="₦",
        transaction="renew",
    )


class TestFormatAmount:
    def test_whole_units(self):
        assert format_amount(15000, "₦") == "₦15,000"

    def test_fractional(self):
        assert format_amount(9.9, "$", allow_fractional=True) == "$9.90"


class TestFormatQuote:
    def test_lines(self, ngn_quote):
        text = format_quote(ngn_quote)
        lines = text.splitlines()
        assert lines[0] == ".com.ng (renew) in NGN"
        assert "Base price  ₦15,000" in lines[1]
        assert lines[2].endswith("-₦1,500")
        assert lines[-1].endswith("₦14,513")
        assert len(lines) == 6

    def test_json(self, ngn_quote):
        data = json.loads(format_quote_json(ngn_quote))
        assert data["basePrice"] == 15000
        assert data["totalPrice"] == 14513
        assert data["domainTransaction"] == "renew"
        assert data["symbol"] == "₦"
