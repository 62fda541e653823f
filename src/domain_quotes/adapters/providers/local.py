# src/domain_quotes/adapters/providers/local.py
"""
Local Pricing Source - Price Lists from a Data Directory

Reads the same datasets as RemotePricingSource from disk, for offline use
and for pinning a known snapshot of the price lists.

Expected files (any of the price lists may be missing and then yields an
empty table, except the create list):
- unified-create-prices.csv
- unified-renew-prices.csv
- unified-transfer-prices.csv
- unified-restore-prices.csv
- exchange-rates.json

Files that USE this module:
- domain_quotes.application.defaults (when settings.data_dir is set)
- tests.test_providers (unit tests)

Files that this module USES:
- domain_quotes.adapters.providers.base (PricingDataSource interface)
- domain_quotes.adapters.providers.parsers (CSV / JSON parsing)
- domain_quotes.domain.errors (PricingDataError)
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from domain_quotes.adapters.providers.base import PricingDataSource
from domain_quotes.adapters.providers.parsers import parse_exchange_rates, parse_unified_prices_csv
from domain_quotes.domain.errors import PricingDataError
from domain_quotes.domain.models import ExchangeRateData, PriceTable

log = logging.getLogger(__name__)

CREATE_FILE = "unified-create-prices.csv"
RENEW_FILE = "unified-renew-prices.csv"
TRANSFER_FILE = "unified-transfer-prices.csv"
RESTORE_FILE = "unified-restore-prices.csv"
EXCHANGE_RATES_FILE = "exchange-rates.json"


class LocalPricingSource(PricingDataSource):
    def __init__(self, data_dir: Union[str, Path]):
        self.data_dir = Path(data_dir)

    def _read(self, name: str, required: bool) -> str:
        path = self.data_dir / name
        if not path.exists():
            if required:
                raise PricingDataError(f"{path} not found")
            log.info("Optional dataset %s not found, using empty table", path)
            return ""
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise PricingDataError(f"cannot read {path}: {e}") from e

    def _price_table(self, name: str, required: bool = False) -> PriceTable:
        table = parse_unified_prices_csv(self._read(name, required))
        log.info("Loaded %d extensions from %s", len(table), self.data_dir / name)
        return table

    def create_prices(self) -> PriceTable:
        return self._price_table(CREATE_FILE, required=True)

    def renew_prices(self) -> PriceTable:
        return self._price_table(RENEW_FILE)

    def transfer_prices(self) -> PriceTable:
        return self._price_table(TRANSFER_FILE)

    def restore_prices(self) -> PriceTable:
        return self._price_table(RESTORE_FILE)

    def exchange_rates(self) -> list[ExchangeRateData]:
        text = self._read(EXCHANGE_RATES_FILE, required=True)
        try:
            return parse_exchange_rates(json.loads(text))
        except ValueError as e:
            raise PricingDataError(f"invalid {EXCHANGE_RATES_FILE}: {e}") from e
