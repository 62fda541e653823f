# src/domain_quotes/shared/rounding.py
"""
Rounding Policy - Monetary Rounding for Quote Amounts

Every monetary intermediate of a quote is rounded where it is produced,
either to 2 decimal places (fractional mode) or to whole units (integer mode).

Rounding goes through ``decimal.Decimal(float)``, which captures the exact
binary value of the float, followed by ``quantize(..., ROUND_HALF_UP)``.
Ties are therefore broken away from zero *at the exact binary value*:
0.675 is stored as 0.67500000000000004... and rounds to 0.68, while 1.005 is
stored as 1.00499999999999989... and rounds to 1.00. This matches the
behaviour of standard fixed-point decimal formatting of floats.

Files that USE this module:
- domain_quotes.application.quote_service (base price, subtotal, tax, total)
- domain_quotes.application.discounts (per-code and aggregated discounts)
- tests.test_rounding (unit tests)

Files that this module USES:
- None (standard library decimal only)
"""
from decimal import ROUND_HALF_UP, Decimal

_CENTS = Decimal("0.01")
_UNITS = Decimal("1")


def round2(amount: float) -> float:
    """Round to 2 decimal places, half away from zero."""
    return float(Decimal(amount).quantize(_CENTS, rounding=ROUND_HALF_UP))


def round_whole(amount: float) -> float:
    """Round to the nearest whole unit, half away from zero."""
    return float(Decimal(amount).quantize(_UNITS, rounding=ROUND_HALF_UP))


def round_amount(amount: float, allow_fractional: bool = False) -> float:
    """
    Round a monetary amount according to the active mode.

    Args:
        amount: Unrounded amount
        allow_fractional: True keeps 2 decimals, False rounds to whole units

    Returns:
        Rounded amount as float (-0.0 is normalized to 0.0)
    """
    rounded = round2(amount) if allow_fractional else round_whole(amount)
    return rounded + 0.0
