"""
Pricing Data Sources

Adapters that load price tables and exchange rates for the quote engine.
"""

from domain_quotes.adapters.providers.base import PricingDataSource
from domain_quotes.adapters.providers.local import LocalPricingSource
from domain_quotes.adapters.providers.parsers import parse_exchange_rates, parse_unified_prices_csv
from domain_quotes.adapters.providers.remote import RemotePricingSource

__all__ = [
    "PricingDataSource",
    "LocalPricingSource",
    "RemotePricingSource",
    "parse_exchange_rates",
    "parse_unified_prices_csv",
]
