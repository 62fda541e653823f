# src/domain_quotes/domain/models.py
"""
Domain Models - Pure Pricing Objects

This module contains domain models representing core pricing concepts:
- Price entries and price tables
- Exchange rates
- Markup and discount definitions
- The quote configuration bundle and the resulting quote

Files that USE this module:
- domain_quotes.application.* (the engine consumes config and produces quotes)
- domain_quotes.adapters.* (data sources build price tables and exchange rates)
- tests.* (tests build configs from these models)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import enum  # Enumerations for eligibility outcomes
from dataclasses import dataclass, field  # Decorator for creating data classes
from datetime import datetime  # Discount windows may be given as datetimes
from typing import (  # Type hints
    Awaitable,
    Callable,
    Literal,
    Mapping,
    Optional,
    Protocol,
    Sequence,
    Union,
)

TransactionType = Literal["create", "renew", "restore", "transfer"]
DiscountPolicy = Literal["max", "stack"]
MarkupType = Literal["percentage", "fixedUsd"]

TRANSACTION_TYPES: tuple[str, ...] = ("create", "renew", "restore", "transfer")
DISCOUNT_POLICIES: tuple[str, ...] = ("max", "stack")
DEFAULT_TRANSACTION = "create"
DEFAULT_DISCOUNT_POLICY = "max"


@dataclass(frozen=True)
class FlatUsd:
    """A single USD amount for an extension."""
    amount: float


@dataclass(frozen=True)
class PerCurrency:
    """Amounts keyed by currency code (e.g. {"USD": 10.5, "NGN": 15000})."""
    prices: Mapping[str, float]


# Raw numbers and plain mappings are accepted as shorthand for the two variants.
PriceEntry = Union[FlatUsd, PerCurrency, float, int, Mapping[str, float]]
PriceTable = Mapping[str, PriceEntry]


@dataclass(frozen=True)
class ExchangeRateData:
    """
    Exchange rate of one currency against USD.

    Attributes:
        country_code: ISO country code the record was sourced for
        currency_name: Display name (e.g. "Nigerian Naira")
        currency_symbol: Display symbol (e.g. "₦")
        currency_code: Uppercase currency code
        exchange_rate: Units of this currency per 1 USD
        inverse_rate: USD per 1 unit of this currency
    """
    country_code: str
    currency_name: str
    currency_symbol: str
    currency_code: str
    exchange_rate: float
    inverse_rate: float


USD_RATE = ExchangeRateData(
    country_code="US",
    currency_name="United States Dollar",
    currency_symbol="$",
    currency_code="USD",
    exchange_rate=1.0,
    inverse_rate=1.0,
)


@dataclass(frozen=True)
class Markup:
    """
    Markup added to the USD price before conversion.

    Attributes:
        type: "percentage" (value is a fraction, 0.15 = +15%) or "fixedUsd"
        value: Markup amount; non-positive or non-finite values are ignored
    """
    type: MarkupType
    value: float


@dataclass(frozen=True)
class DiscountEligibilityContext:
    """Context handed to a discount's custom eligibility callback."""
    extension: str
    currency: str
    transaction: str
    base_price: float
    discount_code: str


EligibilityCallback = Callable[
    [DiscountEligibilityContext], Union[bool, Awaitable[bool]]
]


class Eligibility(enum.Enum):
    """Outcome of a custom eligibility check; ERRORED counts as not eligible."""
    ELIGIBLE = "eligible"
    NOT_ELIGIBLE = "not_eligible"
    ERRORED = "errored"


@dataclass(frozen=True)
class DiscountConfig:
    """
    A discount code definition.

    Attributes:
        rate: Fraction of the base price (clamped to [0, 1] when applied)
        extensions: Extensions the code applies to (normalized before comparison)
        start_at: Start of the active window, ISO-8601 string, datetime or epoch ms (inclusive)
        end_at: End of the active window, ISO-8601 string, datetime or epoch ms (inclusive)
        transactions: Eligible transaction types; None or empty means all
        is_eligible: Optional sync or async callback, invoked last
    """
    rate: float
    extensions: Sequence[str]
    start_at: Union[str, datetime, float]
    end_at: Union[str, datetime, float]
    transactions: Optional[Sequence[str]] = None
    is_eligible: Optional[EligibilityCallback] = None


class TaxPolicy(Protocol):
    """Resolves the tax rate applied to a quote in a given currency."""
    def rate_for(self, currency: str) -> float:  # raises UnsupportedCurrencyError
        ...


@dataclass(frozen=True)
class DomainQuoteConfig:
    """
    Everything the engine needs to price a request. Built once by the caller
    (see application.defaults) and never modified by the engine.

    Attributes:
        create_prices: Base price table (required)
        exchange_rates: Rates against USD; USD itself is implicit
        vat_rate: Flat tax rate used when no explicit tax policy is given
        discounts: Discount definitions keyed by uppercase code
        renew_prices: Optional renew overrides merged over create prices
        restore_prices: Optional restore overrides
        transfer_prices: Optional transfer overrides
        markup: Optional markup applied to the USD price
        supported_currencies: Currency allow-list (defaults to USD, NGN)
        tax: Optional tax policy (e.g. per-country VAT) overriding vat_rate
        prefer_direct_currency_price: Honour explicit target-currency prices
    """
    create_prices: PriceTable
    exchange_rates: Sequence[ExchangeRateData] = ()
    vat_rate: Optional[float] = None
    discounts: Mapping[str, DiscountConfig] = field(default_factory=dict)
    renew_prices: Optional[PriceTable] = None
    restore_prices: Optional[PriceTable] = None
    transfer_prices: Optional[PriceTable] = None
    markup: Optional[Markup] = None
    supported_currencies: Optional[Sequence[str]] = None
    tax: Optional[TaxPolicy] = None
    prefer_direct_currency_price: bool = True


@dataclass(frozen=True)
class Quote:
    """
    Price breakdown for one extension in one currency.

    Attributes:
        extension: Normalized extension
        currency: Uppercase currency code
        base_price: Price after markup and conversion, before discount
        discount: Aggregated discount, never above base_price
        subtotal: base_price - discount
        tax: Tax on the subtotal
        total_price: subtotal + tax
        symbol: Currency symbol
        transaction: Transaction type that was priced
    """
    extension: str
    currency: str
    base_price: float
    discount: float
    subtotal: float
    tax: float
    total_price: float
    symbol: str
    transaction: str

    def to_dict(self) -> dict:
        """Return the quote with the camelCase keys used by the JSON output."""
        return {
            "extension": self.extension,
            "currency": self.currency,
            "basePrice": self.base_price,
            "discount": self.discount,
            "subtotal": self.subtotal,
            "tax": self.tax,
            "totalPrice": self.total_price,
            "symbol": self.symbol,
            "domainTransaction": self.transaction,
        }
