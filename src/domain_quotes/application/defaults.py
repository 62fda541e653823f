# src/domain_quotes/application/defaults.py
"""
Default Configuration - Once-per-process Pricing Bundle

Builds the DomainQuoteConfig used when callers don't supply their own. This
is the only place where data acquisition meets the engine: the bundle is
loaded explicitly on first use, cached for the life of the process, and then
passed by reference to DomainQuotes.

Files that USE this module:
- domain_quotes.app (CLI quotes use the default bundle)
- tests.test_defaults (unit tests)

Files that this module USES:
- domain_quotes.adapters.providers (RemotePricingSource / LocalPricingSource)
- domain_quotes.application.quote_service (DomainQuotes)
- domain_quotes.config (settings for VAT rate, currencies and data location)
- domain_quotes.domain.models (DomainQuoteConfig, Quote)
"""
from __future__ import annotations

import logging
import threading
from typing import Optional

from domain_quotes.adapters.providers import (
    LocalPricingSource,
    PricingDataSource,
    RemotePricingSource,
)
from domain_quotes.application.quote_service import DomainQuotes
from domain_quotes.config import settings
from domain_quotes.domain.models import DomainQuoteConfig, Quote
from domain_quotes.shared.normalize import normalize_currency

log = logging.getLogger(__name__)

_lock = threading.Lock()
_default_config: Optional[DomainQuoteConfig] = None


def default_source() -> PricingDataSource:
    """Pick the local data directory when configured, otherwise the remote price lists."""
    if settings.data_dir:
        return LocalPricingSource(settings.data_dir)
    return RemotePricingSource()


def build_config(source: PricingDataSource) -> DomainQuoteConfig:
    """
    Load every dataset from ``source`` into a fresh config.

    Raises:
        PricingDataError: If any dataset cannot be loaded
    """
    config = DomainQuoteConfig(
        create_prices=source.create_prices(),
        renew_prices=source.renew_prices(),
        transfer_prices=source.transfer_prices(),
        restore_prices=source.restore_prices() or None,
        exchange_rates=source.exchange_rates(),
        vat_rate=settings.vat_rate,
        discounts={},
        supported_currencies=settings.supported_currencies,
    )
    log.info(
        "Default pricing loaded: %d extensions, %d exchange rates",
        len(config.create_prices), len(config.exchange_rates),
    )
    return config


def get_default_config(source: Optional[PricingDataSource] = None) -> DomainQuoteConfig:
    """
    Return the process-wide default config, loading it on first call.

    Args:
        source: Data source used for the first load (defaults to default_source())
    """
    global _default_config
    with _lock:
        if _default_config is None:
            _default_config = build_config(source or default_source())
        return _default_config


def reset_default_config() -> None:
    """Drop the cached default config so the next call reloads it."""
    global _default_config
    with _lock:
        _default_config = None


async def get_default_quote(extension: str, currency_code: str, **options) -> Quote:
    """Compute a quote against the default config (see DomainQuotes.get_quote)."""
    return await DomainQuotes(get_default_config()).get_quote(extension, currency_code, **options)


def list_supported_currencies() -> list[str]:
    return list(settings.supported_currencies)


def is_supported_currency(code: Optional[str]) -> bool:
    if not code:
        return False
    return normalize_currency(code) in settings.supported_currencies


def list_supported_extensions() -> list[str]:
    return DomainQuotes(get_default_config()).list_supported_extensions()


def is_supported_extension(value: Optional[str]) -> bool:
    return DomainQuotes(get_default_config()).is_supported_extension(value)
