# src/domain_quotes/adapters/formatting/formatter.py
"""
Quote Formatter - Text and JSON Presentation of Quotes

Renders a Quote for the command line, either as aligned plain-text lines or
as a JSON document with camelCase keys.

Files that USE this module:
- domain_quotes.app (prints the computed quote)
- tests.test_formatter (unit tests)

Files that this module USES:
- domain_quotes.domain.models (Quote)
"""
from __future__ import annotations

import json
from domain_quotes.domain.models import Quote


def format_amount(amount: float, symbol: str, allow_fractional: bool = False) -> str:
    """
    Format a money amount with its symbol and thousands separators.

    Args:
        amount: Rounded amount
        symbol: Currency symbol (e.g. "$", "₦")
        allow_fractional: Show 2 decimals instead of whole units

    Returns:
        e.g. "₦15,000" or "$9.90"
    """
    if allow_fractional:
        return f"{symbol}{amount:,.2f}"
    return f"{symbol}{amount:,.0f}"


def format_quote(quote: Quote, allow_fractional: bool = False) -> str:
    """
    Format a quote as plain text lines.

    Returns:
        Multi-line breakdown: header, base price, discount, subtotal, tax, total
    """
    def money(value: float) -> str:
        return format_amount(value, quote.symbol, allow_fractional)

    rows = [
        ("Base price", money(quote.base_price)),
        ("Discount", f"-{money(quote.discount)}"),
        ("Subtotal", money(quote.subtotal)),
        ("Tax", money(quote.tax)),
        ("Total", money(quote.total_price)),
    ]
    width = max(len(label) for label, _ in rows)
    lines = [f".{quote.extension} ({quote.transaction}) in {quote.currency}"]
    lines.extend(f"  {label.ljust(width)}  {value}" for label, value in rows)
    return "\n".join(lines)


def format_quote_json(quote: Quote) -> str:
    """Format a quote as an indented JSON document."""
    return json.dumps(quote.to_dict(), ensure_ascii=False, indent=2)
