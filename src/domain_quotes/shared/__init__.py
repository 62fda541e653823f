"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Extension / currency normalization
- Monetary rounding
- Logging configuration
"""

from domain_quotes.shared.normalize import (
    extension_for_domain,
    normalize_currency,
    normalize_extension,
)
from domain_quotes.shared.rounding import round2, round_amount, round_whole

__all__ = [
    "extension_for_domain",
    "normalize_currency",
    "normalize_extension",
    "round2",
    "round_amount",
    "round_whole",
]
