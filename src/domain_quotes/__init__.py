# src/domain_quotes/__init__.py
"""
Domain Quotes - Domain Extension Price Quotes

Computes deterministic price quotes for registering, renewing, transferring
or restoring a domain extension: multi-currency conversion, markup, discount
codes (max or stacked) and VAT, with explicit rounding at every step.
"""

__version__ = "1.0.0"

from domain_quotes.application import DomainQuotes, get_default_config, get_default_quote
from domain_quotes.domain import (
    DiscountConfig,
    DomainQuoteConfig,
    DomainQuoteError,
    ExchangeRateData,
    Markup,
    Quote,
    UnsupportedCurrencyError,
    UnsupportedExtensionError,
)
from domain_quotes.shared import normalize_extension

__all__ = [
    "DomainQuotes",
    "get_default_config",
    "get_default_quote",
    "DiscountConfig",
    "DomainQuoteConfig",
    "DomainQuoteError",
    "ExchangeRateData",
    "Markup",
    "Quote",
    "UnsupportedCurrencyError",
    "UnsupportedExtensionError",
    "normalize_extension",
]
