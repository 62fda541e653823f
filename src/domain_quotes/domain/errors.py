# src/domain_quotes/domain/errors.py
"""
Domain Errors - Quote Computation Exceptions

This module defines the exceptions raised while computing a quote.
Every error carries a stable machine-readable ``code`` so callers can
branch on the kind without parsing messages.

Files that USE this module:
- domain_quotes.application.quote_service (raises unsupported extension/currency)
- domain_quotes.application.tax (raises UnsupportedCurrencyError for unmapped currencies)
- domain_quotes.adapters.providers.* (raise PricingDataError)
- domain_quotes.app (maps errors to an exit status)

Files that this module USES:
- None (pure domain layer)
"""
from typing import Optional


class DomainQuoteError(Exception):
    """Base exception for quote errors."""

    code = "ERR_DOMAIN_QUOTE"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        if code is not None:
            self.code = code


class UnsupportedExtensionError(DomainQuoteError):
    """Raised when an extension has no valid positive price for the requested transaction."""

    code = "ERR_UNSUPPORTED_EXTENSION"

    def __init__(self, extension: str):
        super().__init__(f"Unsupported extension: {extension}")
        self.extension = extension


class UnsupportedCurrencyError(DomainQuoteError):
    """Raised when a currency is not allowed or has no exchange rate / tax mapping."""

    code = "ERR_UNSUPPORTED_CURRENCY"

    def __init__(self, currency: str):
        super().__init__(f"Unsupported currency: {currency}")
        self.currency = currency


class PricingDataError(DomainQuoteError):
    """Raised by data sources when a price list or rate table cannot be loaded."""

    code = "ERR_PRICING_DATA"

    def __init__(self, message: str):
        super().__init__(f"domain-quotes: failed to load remote pricing data: {message}")
