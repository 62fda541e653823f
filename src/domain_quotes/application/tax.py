# src/domain_quotes/application/tax.py
"""
Tax Policies - Flat Rate and Per-Country VAT

Two interchangeable policies implement the TaxPolicy protocol:
- FlatTax: one rate for every supported currency
- CountryVat: currency -> country -> rate, through an explicit mapping

Files that USE this module:
- domain_quotes.application.quote_service (resolves the tax rate per quote)
- domain_quotes.application.defaults (DEFAULT_VAT_RATE)
- tests.test_tax (unit tests)

Files that this module USES:
- domain_quotes.domain.errors (UnsupportedCurrencyError for unmapped currencies)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from domain_quotes.domain.errors import UnsupportedCurrencyError

DEFAULT_VAT_RATE = 0.075

DEFAULT_CURRENCY_COUNTRIES: Mapping[str, str] = {
    "USD": "US",
    "GBP": "GB",
    "EUR": "DE",
    "NGN": "NG",
}

DEFAULT_COUNTRY_VAT_RATES: Mapping[str, float] = {
    "US": 0.0,
    "GB": 0.2,
    "DE": 0.19,
    "NG": 0.075,
}


@dataclass(frozen=True)
class FlatTax:
    """Single tax rate applied regardless of currency."""
    rate: float = DEFAULT_VAT_RATE

    def rate_for(self, currency: str) -> float:
        return self.rate


@dataclass(frozen=True)
class CountryVat:
    """
    VAT resolved through the country a currency is billed in.

    Attributes:
        rates: VAT rate by ISO country code
        currency_countries: Country code by currency code
    """
    rates: Mapping[str, float] = field(default_factory=lambda: dict(DEFAULT_COUNTRY_VAT_RATES))
    currency_countries: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_CURRENCY_COUNTRIES))

    def rate_for(self, currency: str) -> float:
        """
        Look up the VAT rate for a currency.

        Raises:
            UnsupportedCurrencyError: If the currency has no country or the country no rate
        """
        country = self.currency_countries.get(currency)
        if country is None:
            raise UnsupportedCurrencyError(currency)
        rate = self.rates.get(country)
        if rate is None:
            raise UnsupportedCurrencyError(currency)
        return rate
