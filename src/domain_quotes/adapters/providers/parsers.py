# src/domain_quotes/adapters/providers/parsers.py
"""
Dataset Parsers - Unified Price CSV and Exchange-Rate JSON

Turns the raw registrar price-list datasets into domain objects:
- ``parse_unified_prices_csv``: "tld,provider,currency,amount" rows -> PriceTable (tld keys normalized)
- ``parse_exchange_rates``: list of rate records -> list[ExchangeRateData]

Price lists usually carry one row per provider; the lowest amount per
(tld, currency) wins.

Files that USE this module:
- domain_quotes.adapters.providers.remote (parses fetched datasets)
- domain_quotes.adapters.providers.local (parses files from disk)
- tests.test_providers (unit tests)

Files that this module USES:
- domain_quotes.domain.models (ExchangeRateData)
- domain_quotes.shared.normalize (extension keys)
"""
from __future__ import annotations

import logging
import math
from typing import Any

from domain_quotes.domain.models import ExchangeRateData
from domain_quotes.shared.normalize import normalize_extension

log = logging.getLogger(__name__)


def _to_float(value: Any) -> float:
    try:
        return float(str(value).strip())
    except (TypeError, ValueError):
        return math.nan


def parse_unified_prices_csv(text: str) -> dict[str, dict[str, float]]:
    """
    Parse a unified price list.

    Args:
        text: CSV with header "tld,provider,currency,amount"

    Returns:
        {tld: {CURRENCY: lowest amount}}
    """
    lines = [line.strip() for line in text.splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        return {}

    table: dict[str, dict[str, float]] = {}
    skipped = 0
    for line in lines[1:]:  # first line is the header
        parts = line.split(",")
        if len(parts) < 4:
            skipped += 1
            continue
        tld = normalize_extension(parts[0].strip())
        currency = parts[2].strip().upper()
        amount = _to_float(parts[3])
        if not tld or not currency or not math.isfinite(amount) or amount <= 0:
            skipped += 1
            continue
        prices = table.setdefault(tld, {})
        previous = prices.get(currency)
        prices[currency] = amount if previous is None else min(previous, amount)

    if skipped:
        log.warning("Skipped %d malformed price rows", skipped)
    return table


def parse_exchange_rates(payload: Any) -> list[ExchangeRateData]:
    """
    Parse exchange-rate records.

    Args:
        payload: JSON list of {countryCode, currencyName, currencySymbol,
                 currencyCode, exchangeRate, inverseRate}

    Returns:
        Rates with a currency code and a positive exchange rate
    """
    if not isinstance(payload, list):
        raise ValueError(f"expected a list of exchange rates, got {type(payload).__name__}")

    rates: list[ExchangeRateData] = []
    for record in payload:
        if not isinstance(record, dict):
            continue
        code = str(record.get("currencyCode") or "").strip().upper()
        rate = _to_float(record.get("exchangeRate"))
        if not code or not math.isfinite(rate) or rate <= 0:
            log.debug("Skipping exchange rate record %s", record)
            continue
        inverse = _to_float(record.get("inverseRate"))
        rates.append(
            ExchangeRateData(
                country_code=str(record.get("countryCode") or ""),
                currency_name=str(record.get("currencyName") or code),
                currency_symbol=str(record.get("currencySymbol") or code),
                currency_code=code,
                exchange_rate=rate,
                inverse_rate=inverse if math.isfinite(inverse) and inverse > 0 else 1.0 / rate,
            )
        )
    return rates
