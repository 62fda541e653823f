# src/domain_quotes/application/quote_service.py
"""
Quote Service - Domain Price Quote Computation

This module contains the quote engine. DomainQuotes wraps a read-only
DomainQuoteConfig and computes one Quote per call through a linear pipeline:

    normalize -> resolve prices -> markup -> convert -> discount -> tax

Every monetary intermediate is rounded where it is produced (see
shared.rounding), so total_price == round(subtotal + tax) with
subtotal == round(base_price - discount) and tax == round(subtotal * rate).

The engine performs no I/O and keeps no state between calls; only the
optional discount eligibility callbacks may suspend, which is why
``get_quote`` is a coroutine.

Files that USE this module:
- domain_quotes.application.defaults (get_default_quote)
- domain_quotes.app (CLI entry point)
- tests.test_quote_service, tests.test_discounts, tests.test_transaction_pricing

Files that this module USES:
- domain_quotes.application.pricing (price map resolution, markup, conversion)
- domain_quotes.application.discounts (discount evaluation and aggregation)
- domain_quotes.application.tax (FlatTax default policy)
- domain_quotes.domain.models (config and Quote models)
- domain_quotes.domain.errors (UnsupportedExtensionError, UnsupportedCurrencyError)
- domain_quotes.shared.normalize, domain_quotes.shared.rounding
"""
from __future__ import annotations

import asyncio
import logging
import math
from typing import Iterable, Optional

from domain_quotes.application.discounts import (
    Instant,
    aggregate_discount,
    evaluate_discounts,
    resolve_now,
)
from domain_quotes.application.pricing import (
    convert_price,
    has_valid_price,
    resolve_price_map,
)
from domain_quotes.application.tax import DEFAULT_VAT_RATE, FlatTax
from domain_quotes.domain.errors import UnsupportedCurrencyError
from domain_quotes.domain.models import (
    DEFAULT_DISCOUNT_POLICY,
    DEFAULT_TRANSACTION,
    USD_RATE,
    DiscountPolicy,
    DomainQuoteConfig,
    ExchangeRateData,
    PriceTable,
    Quote,
    TaxPolicy,
    TransactionType,
)
from domain_quotes.shared.normalize import (
    extension_for_domain,
    normalize_currency,
    normalize_extension,
)
from domain_quotes.shared.rounding import round_amount

log = logging.getLogger(__name__)

DEFAULT_SUPPORTED_CURRENCIES: tuple[str, ...] = ("USD", "NGN")


class DomainQuotes:
    """
    Stateless quote calculator over a fixed configuration.

    Instances are safe to share between concurrent callers; the configuration
    is only ever read.
    """

    def __init__(self, config: DomainQuoteConfig):
        """
        Initialize the calculator.

        Args:
            config: Price tables, exchange rates, tax and discount definitions
        """
        self.config = config

    # --- Lookups ---

    def list_supported_currencies(self) -> list[str]:
        """Return a copy of the configured currency allow-list."""
        supported = self.config.supported_currencies
        if supported is None:
            supported = DEFAULT_SUPPORTED_CURRENCIES
        return [normalize_currency(code) for code in supported]

    def is_supported_currency(self, code: Optional[str]) -> bool:
        if not code:
            return False
        return normalize_currency(code) in self.list_supported_currencies()

    def list_supported_extensions(self) -> list[str]:
        """Return the sorted extensions that carry a valid create price."""
        return sorted(
            ext for ext, entry in self.config.create_prices.items() if has_valid_price(entry)
        )

    def is_supported_extension(self, value: Optional[str]) -> bool:
        """
        Check whether an extension, or the extension of a full domain name, can be quoted.

        The value is treated as a possible domain name and resolved by longest
        known suffix, falling back to its last label. With only "ng" priced,
        "com.ng" is therefore supported here, whereas get_quote takes an exact
        extension and rejects it. Resolve names with extension_for_domain
        before quoting them.

        Args:
            value: Extension (".com", "COM") or domain ("example.com.ng")
        """
        ext = extension_for_domain(value, self.config.create_prices.keys())
        if not ext:
            return False
        return has_valid_price(self.config.create_prices.get(ext))

    # --- Internals ---

    def _transaction_table(self, transaction: str) -> Optional[PriceTable]:
        if transaction == "renew":
            return self.config.renew_prices
        if transaction == "restore":
            return self.config.restore_prices
        if transaction == "transfer":
            return self.config.transfer_prices
        return None

    def _find_rate_info(self, currency: str) -> ExchangeRateData:
        if currency == "USD":
            return USD_RATE
        for rate in self.config.exchange_rates:
            if rate.currency_code == currency:
                if not math.isfinite(rate.exchange_rate) or rate.exchange_rate <= 0:
                    break
                return rate
        raise UnsupportedCurrencyError(currency)

    def _tax_policy(self) -> TaxPolicy:
        if self.config.tax is not None:
            return self.config.tax
        vat_rate = self.config.vat_rate
        return FlatTax(vat_rate if vat_rate is not None else DEFAULT_VAT_RATE)

    # --- Quote ---

    async def get_quote(
        self,
        extension: str,
        currency_code: str,
        *,
        discount_codes: Optional[Iterable[str]] = None,
        now: Optional[Instant] = None,
        discount_policy: DiscountPolicy = DEFAULT_DISCOUNT_POLICY,
        transaction: Optional[TransactionType] = None,
        allow_fractional_amounts: bool = False,
    ) -> Quote:
        """
        Compute a quote for one extension in one currency.

        Args:
            extension: Extension in any case, with or without leading dots
            currency_code: Target currency code, any case
            discount_codes: Codes to try (case-insensitive, duplicates ignored)
            now: Evaluation instant (datetime or epoch ms); defaults to now
            discount_policy: "max" (best single discount) or "stack" (sum)
            transaction: "create" (default), "renew", "restore" or "transfer"
            allow_fractional_amounts: Keep 2 decimals instead of whole units

        Returns:
            Quote with independently rounded amounts

        Raises:
            UnsupportedExtensionError: If the extension has no valid price
            UnsupportedCurrencyError: If the currency is not allowed or has no rate / tax mapping
        """
        ext = normalize_extension(extension)
        tx = transaction or DEFAULT_TRANSACTION
        allow_fractional = bool(allow_fractional_amounts)

        price_map, create_map = resolve_price_map(
            ext, self.config.create_prices, self._transaction_table(tx)
        )

        currency = normalize_currency(currency_code)
        if currency not in self.list_supported_currencies():
            raise UnsupportedCurrencyError(currency_code)
        rate_info = self._find_rate_info(currency)
        tax_rate = self._tax_policy().rate_for(currency)

        base_price = round_amount(
            convert_price(
                ext,
                currency,
                price_map,
                create_map,
                rate_info,
                markup=self.config.markup,
                prefer_direct=self.config.prefer_direct_currency_price,
            ),
            allow_fractional,
        )

        amounts = await evaluate_discounts(
            discount_codes,
            self.config.discounts,
            extension=ext,
            currency=currency,
            transaction=tx,
            base_price=base_price,
            now=resolve_now(now),
            allow_fractional=allow_fractional,
        )
        discount = aggregate_discount(amounts, base_price, discount_policy, allow_fractional)

        subtotal = round_amount(base_price - discount, allow_fractional)
        tax = round_amount(subtotal * tax_rate, allow_fractional)
        total_price = round_amount(subtotal + tax, allow_fractional)

        log.debug(
            "Quote .%s %s %s: base=%s discount=%s tax=%s total=%s",
            ext, tx, currency, base_price, discount, tax, total_price,
        )
        return Quote(
            extension=ext,
            currency=currency,
            base_price=base_price,
            discount=discount,
            subtotal=subtotal,
            tax=tax,
            total_price=total_price,
            symbol=rate_info.currency_symbol,
            transaction=tx,
        )

    def get_quote_sync(self, extension: str, currency_code: str, **options) -> Quote:
        """
        Run ``get_quote`` to completion for synchronous callers.

        Must not be called from inside a running event loop.
        """
        return asyncio.run(self.get_quote(extension, currency_code, **options))
