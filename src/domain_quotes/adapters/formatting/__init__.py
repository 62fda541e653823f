"""
Formatting Adapters - Quote Formatting

This package contains quote formatting adapters for console output.
"""

from domain_quotes.adapters.formatting.formatter import (
    format_amount,
    format_quote,
    format_quote_json,
)

__all__ = [
    "format_amount",
    "format_quote",
    "format_quote_json",
]
