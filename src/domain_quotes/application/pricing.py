# src/domain_quotes/application/pricing.py
"""
Pricing - Price Resolution, Markup and Currency Conversion

This module holds the first half of the quote pipeline:
- ``to_price_map``: normalizes any PriceEntry variant into {CURRENCY: amount}
- ``resolve_price_map``: merges a transaction override over the create entry
- ``apply_markup``: inflates a USD amount by a percentage or fixed USD value
- ``convert_price``: turns the marked-up USD amount into the target currency

Files that USE this module:
- domain_quotes.application.quote_service (DomainQuotes.get_quote)
- tests.test_pricing (unit tests)

Files that this module USES:
- domain_quotes.domain.models (price entry variants, Markup, ExchangeRateData)
- domain_quotes.domain.errors (UnsupportedExtensionError)
- domain_quotes.shared.normalize (currency key normalization)
"""
from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Optional

from domain_quotes.domain.errors import UnsupportedExtensionError
from domain_quotes.domain.models import (
    ExchangeRateData,
    FlatUsd,
    Markup,
    PerCurrency,
    PriceEntry,
    PriceTable,
)
from domain_quotes.shared.normalize import normalize_currency

log = logging.getLogger(__name__)


def _valid_amount(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


def to_price_map(entry: Optional[PriceEntry]) -> Optional[dict[str, float]]:
    """
    Normalize a price entry into an uppercase currency -> amount map.

    Plain numbers and FlatUsd mean USD. Missing, zero, negative and non-finite
    amounts are dropped; when two keys collapse to the same currency the lower
    amount is kept.

    Returns:
        Price map, or None when the entry has no usable amount
    """
    if entry is None:
        return None
    if isinstance(entry, FlatUsd):
        entry = entry.amount
    elif isinstance(entry, PerCurrency):
        entry = entry.prices

    if not isinstance(entry, Mapping):
        return {"USD": float(entry)} if _valid_amount(entry) else None

    prices: dict[str, float] = {}
    for code, value in entry.items():
        currency = normalize_currency(code) if isinstance(code, str) else ""
        if not currency or not _valid_amount(value):
            continue
        existing = prices.get(currency)
        prices[currency] = float(value) if existing is None else min(existing, float(value))
    return prices or None


def has_valid_price(entry: Optional[PriceEntry]) -> bool:
    return to_price_map(entry) is not None


def resolve_price_map(
    extension: str,
    create_prices: PriceTable,
    override_prices: Optional[PriceTable] = None,
) -> tuple[dict[str, float], dict[str, float]]:
    """
    Resolve the per-currency price map for an extension.

    Args:
        extension: Normalized extension
        create_prices: Base (create) price table
        override_prices: Transaction-specific table (renew/restore/transfer)

    Returns:
        (merged map, create map). The merged map is the create map with the
        override's currencies written over it.

    Raises:
        UnsupportedExtensionError: If the create table has no valid entry
    """
    create_map = to_price_map(create_prices.get(extension))
    if not create_map:
        raise UnsupportedExtensionError(extension)

    merged = dict(create_map)
    if override_prices:
        override = to_price_map(override_prices.get(extension))
        if override:
            merged.update(override)
    return merged, create_map


def apply_markup(amount: float, markup: Optional[Markup]) -> float:
    """
    Apply a markup to a USD amount.

    Unknown types, non-positive or non-finite values, and markups that
    overflow the amount leave it unchanged.
    """
    if markup is None:
        return amount
    value = markup.value
    if not _valid_amount(value):
        return amount
    if markup.type == "percentage":
        marked = amount + amount * value
    elif markup.type == "fixedUsd":
        marked = amount + value
    else:
        log.debug("Ignoring unknown markup type %r", markup.type)
        return amount
    if not math.isfinite(marked):
        log.debug("Markup %r overflows %s, ignoring it", markup, amount)
        return amount
    return marked


def convert_price(
    extension: str,
    currency: str,
    price_map: Mapping[str, float],
    create_map: Mapping[str, float],
    rate_info: ExchangeRateData,
    markup: Optional[Markup] = None,
    prefer_direct: bool = True,
) -> float:
    """
    Compute the unrounded base price in the target currency.

    The USD base comes from the merged map, then the create map, and finally
    from a direct target-currency price divided by the nominal rate. When a
    direct target-currency price exists (and ``prefer_direct`` is set), the
    marked-up USD amount is multiplied by the implied rate direct/usd instead
    of the nominal rate, so an unmarked direct price is reproduced exactly.

    Raises:
        UnsupportedExtensionError: If no USD base can be established
    """
    base_usd = price_map.get("USD")
    if base_usd is None:
        base_usd = create_map.get("USD")

    direct = price_map.get(currency) if prefer_direct else None
    if base_usd is None and direct is not None:
        base_usd = direct / rate_info.exchange_rate
    if base_usd is None or base_usd <= 0:
        raise UnsupportedExtensionError(extension)

    marked_usd = apply_markup(base_usd, markup)

    if direct is not None:
        implied_rate = direct / base_usd
        log.debug("Pricing .%s in %s via implied rate %s", extension, currency, implied_rate)
        return marked_usd * implied_rate

    log.debug("Pricing .%s in %s via table rate %s", extension, currency, rate_info.exchange_rate)
    return marked_usd * rate_info.exchange_rate
