"""Command line entry point for querying dataroma investor holdings."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from datetime import date
from typing import Any, Iterable, Sequence

from .config import Settings
from .errors import DataromaError
from .logging_utils import configure_logging
from .models import Holding, Investor
from .sources import InvestorSource, create_source

LOGGER = logging.getLogger(__name__)


def _json_default(value: Any) -> str:
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _dump(records: Sequence[Investor] | Sequence[Holding]) -> str:
    return json.dumps([asdict(record) for record in records], default=_json_default, indent=2)


def format_investor(investor: Investor) -> str:
    return f"{investor.name} (Updated: {investor.update_date.isoformat()})"


def format_holding(holding: Holding) -> str:
    return f"{holding.symbol} ({holding.name}): {holding.portfolio_weight * 100:.2f}%"


def run_list(source: InvestorSource, as_json: bool = False) -> str:
    """Render the investor directory."""

    investors = source.list_investors()
    if as_json:
        return _dump(investors)
    return "\n".join(format_investor(investor) for investor in investors)


def run_portfolio(source: InvestorSource, name: str, as_json: bool = False) -> str:
    """Render the holdings of the investor matching ``name``."""

    holdings = source.get_portfolio(name)
    if as_json:
        return _dump(holdings)
    return "\n".join(format_holding(holding) for holding in holdings)


def parse_args(args: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging output",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print records as JSON instead of text lines",
    )
    # Also accepted after the subcommand; SUPPRESS keeps a leading --json intact.
    output_options = argparse.ArgumentParser(add_help=False)
    output_options.add_argument(
        "--json",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Print records as JSON instead of text lines",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("list", parents=[output_options], help="List all tracked investors")
    portfolio = subparsers.add_parser(
        "portfolio", parents=[output_options], help="Show one investor's holdings"
    )
    portfolio.add_argument("name", help="Part of the investor's name, e.g. 'ackman'")
    return parser.parse_args(args=None if args is None else list(args))


def main(argv: Iterable[str] | None = None, source: InvestorSource | None = None) -> int:
    options = parse_args(argv)
    configure_logging(logging.DEBUG if options.verbose else None)
    source = source or create_source(settings=Settings.load())

    try:
        if options.command == "portfolio":
            output = run_portfolio(source, options.name, as_json=options.json)
        else:
            output = run_list(source, as_json=options.json)
    except DataromaError as exc:
        LOGGER.debug("Query failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if output:
        print(output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
