# src/domain_quotes/app.py
"""
Application Entry Point - Command-line Quotes

This module is the composition root for the command-line tool: it loads
settings, configures logging, builds the default pricing bundle and prints
one quote.

    python -m domain_quotes com NGN --discount SAVE10 --transaction renew

Files that USE this module:
- domain_quotes.__main__ (python -m domain_quotes)
- the "domain-quotes" console script

Files that this module USES:
- domain_quotes.shared.logging_conf (setup_logging)
- domain_quotes.config (settings)
- domain_quotes.application (DomainQuotes, get_default_config)
- domain_quotes.adapters.formatting (format_quote, format_quote_json)
"""
from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
import sys
from typing import Optional, Sequence

from domain_quotes.adapters.formatting import format_quote, format_quote_json
from domain_quotes.application import DomainQuotes, get_default_config
from domain_quotes.application.discounts import parse_instant
from domain_quotes.config import settings
from domain_quotes.domain.errors import DomainQuoteError
from domain_quotes.domain.models import DISCOUNT_POLICIES, TRANSACTION_TYPES, Markup
from domain_quotes.shared.logging_conf import setup_logging
from domain_quotes.shared.normalize import extension_for_domain

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="domain-quotes",
        description="Quote the price of a domain extension in a given currency.",
    )
    parser.add_argument("extension", help="extension or domain, e.g. com, .com.ng")
    parser.add_argument("currency", help="currency code, e.g. USD, NGN")
    parser.add_argument("--transaction", choices=TRANSACTION_TYPES, default="create")
    parser.add_argument("--discount", action="append", default=[], metavar="CODE",
                        help="discount code (repeatable)")
    parser.add_argument("--policy", choices=DISCOUNT_POLICIES, default="max",
                        help="how multiple discounts combine")
    parser.add_argument("--fractional", action="store_true", default=None,
                        help="keep 2 decimal places instead of whole units")
    markup = parser.add_mutually_exclusive_group()
    markup.add_argument("--markup-percent", type=float, metavar="FRACTION",
                        help="percentage markup as a fraction, e.g. 0.15")
    markup.add_argument("--markup-usd", type=float, metavar="AMOUNT",
                        help="fixed USD markup")
    parser.add_argument("--now", help="evaluation instant (ISO-8601) for discount windows")
    parser.add_argument("--json", action="store_true", help="print the quote as JSON")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser


def _markup_from_args(args: argparse.Namespace) -> Optional[Markup]:
    if args.markup_percent is not None:
        return Markup(type="percentage", value=args.markup_percent)
    if args.markup_usd is not None:
        return Markup(type="fixedUsd", value=args.markup_usd)
    return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the command-line tool.

    Returns:
        0 on success, 2 when the quote cannot be computed
    """
    args = build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    setup_logging(level=level, log_file=settings.log_file, log_dir=settings.log_dir)

    now = None
    if args.now:
        now = parse_instant(args.now)
        if now is None:
            print(f"error: invalid --now value: {args.now}", file=sys.stderr)
            return 2

    allow_fractional = settings.allow_fractional_amounts if args.fractional is None else args.fractional

    try:
        config = get_default_config()
        markup = _markup_from_args(args)
        if markup is not None:
            config = dataclasses.replace(config, markup=markup)
        engine = DomainQuotes(config)
        # Full domain names are reduced to their longest known extension
        ext = extension_for_domain(args.extension, config.create_prices.keys())
        quote = asyncio.run(
            engine.get_quote(
                ext,
                args.currency,
                discount_codes=args.discount,
                now=now,
                discount_policy=args.policy,
                transaction=args.transaction,
                allow_fractional_amounts=allow_fractional,
            )
        )
    except DomainQuoteError as e:
        log.debug("Quote failed with %s", e.code)
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(format_quote_json(quote))
    else:
        print(format_quote(quote, allow_fractional))
    return 0
