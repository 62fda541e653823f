"""
Application Layer - Quote Engine and Services

This package contains the quote engine and the default configuration bootstrap.
The engine itself performs no I/O.
"""

from domain_quotes.application.quote_service import DomainQuotes
from domain_quotes.application.tax import CountryVat, FlatTax, DEFAULT_VAT_RATE
from domain_quotes.application.defaults import (
    build_config,
    get_default_config,
    get_default_quote,
    is_supported_currency,
    is_supported_extension,
    list_supported_currencies,
    list_supported_extensions,
    reset_default_config,
)

__all__ = [
    "DomainQuotes",
    "CountryVat",
    "FlatTax",
    "DEFAULT_VAT_RATE",
    "build_config",
    "get_default_config",
    "get_default_quote",
    "is_supported_currency",
    "is_supported_extension",
    "list_supported_currencies",
    "list_supported_extensions",
    "reset_default_config",
]
