"""
Domain Layer - Pure Pricing Objects

This package contains domain models and errors.
No dependencies on infrastructure or external systems.
"""

from domain_quotes.domain.models import (
    DEFAULT_DISCOUNT_POLICY,
    DEFAULT_TRANSACTION,
    DISCOUNT_POLICIES,
    TRANSACTION_TYPES,
    USD_RATE,
    DiscountConfig,
    DiscountEligibilityContext,
    DomainQuoteConfig,
    Eligibility,
    ExchangeRateData,
    FlatUsd,
    Markup,
    PerCurrency,
    Quote,
    TaxPolicy,
)
from domain_quotes.domain.errors import (
    DomainQuoteError,
    PricingDataError,
    UnsupportedCurrencyError,
    UnsupportedExtensionError,
)

__all__ = [
    "DEFAULT_DISCOUNT_POLICY",
    "DEFAULT_TRANSACTION",
    "DISCOUNT_POLICIES",
    "TRANSACTION_TYPES",
    "USD_RATE",
    "DiscountConfig",
    "DiscountEligibilityContext",
    "DomainQuoteConfig",
    "Eligibility",
    "ExchangeRateData",
    "FlatUsd",
    "Markup",
    "PerCurrency",
    "Quote",
    "TaxPolicy",
    "DomainQuoteError",
    "PricingDataError",
    "UnsupportedCurrencyError",
    "UnsupportedExtensionError",
]
