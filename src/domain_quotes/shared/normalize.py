# src/domain_quotes/shared/normalize.py
"""
Input Normalization - Extension and Currency Canonicalization

This module turns user-supplied extensions, domain names and currency codes
into the canonical forms used for every lookup and comparison:
- extensions: trimmed, lowercase, no leading dots (".COM", "..com" -> "com")
- currencies: uppercase ISO-4217-like codes

Files that USE this module:
- domain_quotes.application.quote_service (normalizes request inputs)
- domain_quotes.application.discounts (normalizes discount extension lists)
- domain_quotes.application.pricing (normalizes currency keys of price entries)
- tests.test_normalize (unit tests)

Files that this module USES:
- None (pure utility functions)
"""
import re
from typing import Iterable, Optional

_LEADING_DOTS = re.compile(r"^\.+")


def normalize_extension(extension: Optional[str]) -> Optional[str]:
    """
    Canonicalize an extension.

    Falsy input is returned unchanged so callers can decide how to report it.

    Args:
        extension: Raw extension such as ".COM", " ..ng " or "com.ng"

    Returns:
        Lowercase extension without leading dots
    """
    if not extension:
        return extension
    return _LEADING_DOTS.sub("", extension.strip().lower())


def normalize_currency(code: Optional[str]) -> str:
    """Uppercase a currency code; None and blank input become ""."""
    if not code:
        return ""
    return code.strip().upper()


def extension_for_domain(value: Optional[str], known_extensions: Iterable[str]) -> Optional[str]:
    """
    Resolve a domain name (or bare extension) to its registrable extension.

    The longest dot-separated suffix that is a known extension wins, so
    "shop.example.com.ng" resolves to "com.ng" when both "ng" and "com.ng"
    are known. When nothing matches the last label is returned.

    Args:
        value: Domain name or extension, in any case, with optional leading dots
        known_extensions: Canonical extensions to match against

    Returns:
        Canonical extension, or the falsy input unchanged
    """
    normalized = normalize_extension(value)
    if not normalized:
        return normalized
    known = set(known_extensions)
    labels = normalized.split(".")
    for start in range(len(labels)):
        candidate = ".".join(labels[start:])
        if candidate in known:
            return candidate
    return labels[-1]
