# src/domain_quotes/adapters/providers/remote.py
"""
Remote Pricing Source - Registrar Price Lists over HTTP

Fetches the unified create/renew/transfer price lists (CSV) and the
exchange-rate table (JSON) published alongside them.

Files that USE this module:
- domain_quotes.application.defaults (default data source when no data_dir is set)
- tests.test_providers (unit tests)

Files that this module USES:
- domain_quotes.adapters.providers.base (PricingDataSource interface)
- domain_quotes.adapters.providers.parsers (CSV / JSON parsing)
- domain_quotes.config (settings for URLs and HTTP timeout)
- domain_quotes.domain.errors (PricingDataError)
"""
import logging
from typing import Optional

import requests

from domain_quotes.adapters.providers.base import PricingDataSource
from domain_quotes.adapters.providers.parsers import parse_exchange_rates, parse_unified_prices_csv
from domain_quotes.config import settings
from domain_quotes.domain.errors import PricingDataError
from domain_quotes.domain.models import ExchangeRateData, PriceTable

log = logging.getLogger(__name__)


class RemotePricingSource(PricingDataSource):
    def __init__(
        self,
        create_url: Optional[str] = None,
        renew_url: Optional[str] = None,
        transfer_url: Optional[str] = None,
        restore_url: Optional[str] = None,
        exchange_rates_url: Optional[str] = None,
        timeout: Optional[int] = None,
    ):
        """
        Initialize the remote source.

        Args:
            create_url: Create price CSV (defaults to settings.create_prices_url)
            renew_url: Renew price CSV (defaults to settings.renew_prices_url)
            transfer_url: Transfer price CSV (defaults to settings.transfer_prices_url)
            restore_url: Restore price CSV; empty means no restore table
            exchange_rates_url: Exchange-rate JSON (defaults to settings.exchange_rates_url)
            timeout: HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
        """
        self.create_url = create_url or settings.create_prices_url
        self.renew_url = renew_url or settings.renew_prices_url
        self.transfer_url = transfer_url or settings.transfer_prices_url
        self.restore_url = restore_url if restore_url is not None else settings.restore_prices_url
        self.exchange_rates_url = exchange_rates_url or settings.exchange_rates_url
        self.timeout = timeout or settings.http_timeout_seconds

    def _get(self, url: str) -> requests.Response:
        try:
            resp = requests.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.exceptions.Timeout as e:
            log.warning("Timed out after %ss fetching %s", self.timeout, url)
            raise PricingDataError(f"timeout fetching {url}") from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            log.error("HTTP %s fetching %s", status, url)
            raise PricingDataError(f"Failed to fetch {url}: {status}") from e
        except requests.exceptions.RequestException as e:
            log.error("Request failed for %s: %s", url, e)
            raise PricingDataError(f"Failed to fetch {url}: {e}") from e
        return resp

    def _price_table(self, url: str) -> PriceTable:
        if not url:
            return {}
        table = parse_unified_prices_csv(self._get(url).text)
        log.info("Loaded %d extensions from %s", len(table), url)
        return table

    def create_prices(self) -> PriceTable:
        return self._price_table(self.create_url)

    def renew_prices(self) -> PriceTable:
        return self._price_table(self.renew_url)

    def transfer_prices(self) -> PriceTable:
        return self._price_table(self.transfer_url)

    def restore_prices(self) -> PriceTable:
        return self._price_table(self.restore_url)

    def exchange_rates(self) -> list[ExchangeRateData]:
        resp = self._get(self.exchange_rates_url)
        try:
            rates = parse_exchange_rates(resp.json())
        except ValueError as e:
            log.error("Invalid exchange-rate payload from %s: %s", self.exchange_rates_url, e)
            raise PricingDataError(f"invalid exchange rates from {self.exchange_rates_url}: {e}") from e
        log.info("Loaded %d exchange rates from %s", len(rates), self.exchange_rates_url)
        return rates
