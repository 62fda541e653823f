# src/domain_quotes/adapters/providers/base.py
"""
Base Interface for Pricing Data Sources

This module defines the abstract base class for everything that supplies the
quote engine with price tables and exchange rates.

Files that USE this module:
- domain_quotes.adapters.providers.remote (RemotePricingSource implements PricingDataSource)
- domain_quotes.adapters.providers.local (LocalPricingSource implements PricingDataSource)
- domain_quotes.application.defaults (builds the default config from a source)

Files that this module USES:
- domain_quotes.domain.models (PriceTable, ExchangeRateData)
"""
from abc import ABC, abstractmethod

from domain_quotes.domain.models import ExchangeRateData, PriceTable


class PricingDataSource(ABC):
    @abstractmethod
    def create_prices(self) -> PriceTable:
        """Return the create (registration) price table."""
        raise NotImplementedError

    @abstractmethod
    def renew_prices(self) -> PriceTable:
        raise NotImplementedError

    @abstractmethod
    def transfer_prices(self) -> PriceTable:
        raise NotImplementedError

    @abstractmethod
    def restore_prices(self) -> PriceTable:
        raise NotImplementedError

    @abstractmethod
    def exchange_rates(self) -> list[ExchangeRateData]:
        """Return exchange rates against USD."""
        raise NotImplementedError
