# src/domain_quotes/application/discounts.py
"""
Discount Engine - Discount Code Evaluation and Aggregation

Filters requested discount codes against the request context and folds the
surviving ones into a single discount amount:

1. Codes are deduplicated case-insensitively (uppercase canonical form).
2. Unknown codes are skipped.
3. The active window [start_at, end_at] is inclusive on both ends; an
   unparseable bound makes the discount permanently inactive.
4. The request extension must be in the discount's (normalized) extension list.
5. A non-empty transaction list must contain the requested transaction.
6. The custom eligibility callback runs last; errors count as "not eligible".

Each survivor contributes round(base_price * rate). The "max" policy keeps the
largest contribution, "stack" sums them; both are capped at the base price.

Files that USE this module:
- domain_quotes.application.quote_service (DomainQuotes.get_quote)
- tests.test_discounts (unit tests)

Files that this module USES:
- domain_quotes.domain.models (DiscountConfig, DiscountEligibilityContext, Eligibility)
- domain_quotes.shared.normalize (extension normalization)
- domain_quotes.shared.rounding (round_amount)
"""
from __future__ import annotations

import asyncio
import inspect
import logging
import math
from datetime import datetime, timedelta, timezone
from typing import Iterable, Mapping, Optional, Sequence, Union

from domain_quotes.domain.models import (
    DiscountConfig,
    DiscountEligibilityContext,
    Eligibility,
)
from domain_quotes.shared.normalize import normalize_extension
from domain_quotes.shared.rounding import round_amount

log = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

Instant = Union[datetime, int, float]


def _as_utc(value: datetime) -> datetime:
    # Naive datetimes are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def parse_instant(value) -> Optional[datetime]:
    """
    Parse a discount window bound.

    Accepts datetimes, epoch milliseconds and ISO-8601 strings (a trailing
    "Z" is accepted). Returns None for anything unparseable.
    """
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            return None
        try:
            return EPOCH + timedelta(milliseconds=value)
        except (OverflowError, ValueError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return _as_utc(datetime.fromisoformat(text))
        except ValueError:
            return None
    return None


def resolve_now(now: Optional[Instant] = None) -> datetime:
    """Return ``now`` as an aware datetime, defaulting to the wall clock."""
    if now is None:
        return datetime.now(timezone.utc)
    parsed = parse_instant(now)
    if parsed is None:
        raise TypeError(f"now must be a datetime or epoch milliseconds, got {now!r}")
    return parsed


def dedupe_codes(codes: Optional[Iterable[str]]) -> list[str]:
    """Uppercase and deduplicate codes, keeping first-seen order."""
    unique: list[str] = []
    for code in codes or ():
        if not code:
            continue
        upper = code.strip().upper()
        if upper and upper not in unique:
            unique.append(upper)
    return unique


def is_active(conf: DiscountConfig, now: datetime) -> bool:
    start = parse_instant(conf.start_at)
    end = parse_instant(conf.end_at)
    if start is None or end is None:
        return False
    return start <= now <= end


def matches_request(conf: DiscountConfig, extension: str, transaction: str, now: datetime) -> bool:
    """Cheap filters: active window, extension membership, transaction type."""
    if not is_active(conf, now):
        return False
    extensions = {normalize_extension(ext) for ext in conf.extensions or ()}
    if extension not in extensions:
        return False
    if conf.transactions and transaction not in conf.transactions:
        return False
    return True


async def check_eligibility(conf: DiscountConfig, context: DiscountEligibilityContext) -> Eligibility:
    """
    Run a discount's custom eligibility callback, sync or async.

    Exceptions raised by the callback are logged and reported as ERRORED.
    """
    if conf.is_eligible is None:
        return Eligibility.ELIGIBLE
    try:
        result = conf.is_eligible(context)
        if inspect.isawaitable(result):
            result = await result
    except Exception as e:
        log.debug("Eligibility check for %s raised, skipping: %s", context.discount_code, e)
        return Eligibility.ERRORED
    return Eligibility.ELIGIBLE if result else Eligibility.NOT_ELIGIBLE


def _clamped_rate(rate) -> float:
    if isinstance(rate, bool) or not isinstance(rate, (int, float)) or not math.isfinite(rate):
        return 0.0
    return min(max(float(rate), 0.0), 1.0)


async def _evaluate_code(
    code: str,
    conf: DiscountConfig,
    *,
    extension: str,
    currency: str,
    transaction: str,
    base_price: float,
    now: datetime,
    allow_fractional: bool,
) -> Optional[float]:
    if not matches_request(conf, extension, transaction, now):
        log.debug("Discount %s does not match .%s/%s at %s", code, extension, transaction, now)
        return None
    context = DiscountEligibilityContext(
        extension=extension,
        currency=currency,
        transaction=transaction,
        base_price=base_price,
        discount_code=code,
    )
    if await check_eligibility(conf, context) is not Eligibility.ELIGIBLE:
        return None
    return round_amount(base_price * _clamped_rate(conf.rate), allow_fractional)


async def evaluate_discounts(
    codes: Optional[Iterable[str]],
    discounts: Mapping[str, DiscountConfig],
    *,
    extension: str,
    currency: str,
    transaction: str,
    base_price: float,
    now: datetime,
    allow_fractional: bool = False,
) -> list[float]:
    """
    Return the rounded contribution of every applicable code, in request order.

    Codes are checked concurrently; custom callbacks only run for codes that
    pass the window, extension and transaction filters.
    """
    by_code = {key.upper(): conf for key, conf in discounts.items()}
    pending = []
    for code in dedupe_codes(codes):
        conf = by_code.get(code)
        if conf is None:
            log.debug("Unknown discount code %s", code)
            continue
        pending.append(
            _evaluate_code(
                code,
                conf,
                extension=extension,
                currency=currency,
                transaction=transaction,
                base_price=base_price,
                now=now,
                allow_fractional=allow_fractional,
            )
        )
    if not pending:
        return []
    results = await asyncio.gather(*pending)
    return [amount for amount in results if amount is not None]


def aggregate_discount(
    amounts: Sequence[float],
    base_price: float,
    policy: str = "max",
    allow_fractional: bool = False,
) -> float:
    """
    Fold per-code discounts into one amount, never exceeding ``base_price``.

    Args:
        amounts: Rounded per-code contributions
        base_price: Rounded base price
        policy: "stack" sums contributions; anything else keeps the largest
        allow_fractional: Rounding mode for the stacked sum
    """
    if not amounts:
        return 0.0
    if policy == "stack":
        discount = round_amount(sum(amounts), allow_fractional)
    else:
        discount = max(amounts)
    return min(discount, base_price)
