"""
Shared Test Fixtures

Builds small, deterministic quote configurations: four extensions priced in
USD, an NGN exchange rate of 1000 and a 10% flat VAT.
"""
import asyncio
from datetime import datetime, timezone

import pytest

from domain_quotes.application.quote_service import DomainQuotes
from domain_quotes.domain.models import DomainQuoteConfig, ExchangeRateData

NGN_RATE = ExchangeRateData(
    country_code="NG",
    currency_name="Nigerian Naira",
    currency_symbol="₦",
    currency_code="NGN",
    exchange_rate=1000.0,
    inverse_rate=0.001,
)

JAN_2024 = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
JUN_2024 = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)
DEC_2024 = datetime(2024, 12, 15, 12, 0, tzinfo=timezone.utc)


def build_config(**overrides) -> DomainQuoteConfig:
    values = dict(
        create_prices={"com": 10, "net": 12, "org": 15, "info": 8},
        exchange_rates=[NGN_RATE],
        vat_rate=0.1,
        discounts={},
        supported_currencies=["USD", "NGN"],
    )
    values.update(overrides)
    return DomainQuoteConfig(**values)


def quote(engine: DomainQuotes, extension: str, currency: str, **options):
    return asyncio.run(engine.get_quote(extension, currency, **options))


@pytest.fixture
def make_engine():
    def _make(**overrides) -> DomainQuotes:
        return DomainQuotes(build_config(**overrides))
    return _make
