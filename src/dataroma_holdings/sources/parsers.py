"""Extraction of investor listings and holdings tables from dataroma pages.

Both parsers work on an already fetched :class:`~bs4.BeautifulSoup` document and
never touch the network. A listing item or table row that does not have the
expected shape is dropped and reported as a :class:`RowIssue`; only a missing
markup region aborts the whole parse.
"""
from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag

from ..config import DEFAULT_SITE_ORIGIN
from ..errors import DateParseError, DocumentStructureError
from ..models import Holding, Investor, ParseResult, RowIssue
from .utils import parse_date, parse_number, split_symbol_name

LOGGER = logging.getLogger(__name__)

DIRECTORY_CONTAINER_SELECTOR = "#port_body"
DIRECTORY_ITEM_SELECTOR = "#port_body li"
HOLDINGS_TABLE_SELECTOR = "#grid"
HOLDINGS_ROW_SELECTOR = "#grid tr"
UPDATED_LABEL = "Updated"
MIN_HOLDING_CELLS = 5


class _RowRejected(ValueError):
    """Signals that a single item must be dropped."""


def _parse_listing_item(item: Tag, origin: str) -> Investor:
    text = item.get_text().strip()
    parts = text.split(UPDATED_LABEL)
    if len(parts) != 2:
        raise _RowRejected(f"missing {UPDATED_LABEL!r} label")

    name = parts[0].strip()
    date_text = parts[1].strip()
    try:
        update_date = parse_date(date_text)
    except DateParseError as exc:
        LOGGER.warning("Failed to parse date %s: %s", date_text, exc)
        raise _RowRejected("invalid update date") from exc

    anchor = item.find("a")
    href = anchor.get("href") if anchor is not None else None
    if href is None:
        raise _RowRejected("missing profile link")

    return Investor(name=name, update_date=update_date, profile_url=origin + href)


def _parse_holding_row(row: Tag) -> Holding:
    cells = [cell.get_text().strip() for cell in row.find_all("td")]
    if len(cells) < MIN_HOLDING_CELLS:
        raise _RowRejected(f"expected at least {MIN_HOLDING_CELLS} cells, found {len(cells)}")

    try:
        symbol, name = split_symbol_name(cells[0])
    except ValueError as exc:
        raise _RowRejected("unsplittable symbol/name") from exc

    return Holding(
        symbol=symbol,
        name=name,
        portfolio_weight=parse_number(cells[1]) / 100,
        shares=parse_number(cells[2]),
        cost_price=parse_number(cells[3]),
        value=parse_number(cells[4]),
    )


def parse_directory(soup: BeautifulSoup, origin: str = DEFAULT_SITE_ORIGIN) -> ParseResult[Investor]:
    """Extract every well formed investor listing, in document order."""

    if soup.select_one(DIRECTORY_CONTAINER_SELECTOR) is None:
        raise DocumentStructureError(
            f"Directory container {DIRECTORY_CONTAINER_SELECTOR!r} not found"
        )

    investors: list[Investor] = []
    issues: list[RowIssue] = []
    for index, item in enumerate(soup.select(DIRECTORY_ITEM_SELECTOR)):
        try:
            investors.append(_parse_listing_item(item, origin))
        except _RowRejected as exc:
            LOGGER.debug("Skipping directory item %d: %s", index, exc)
            issues.append(RowIssue(index=index, reason=str(exc), text=item.get_text().strip()))
    return ParseResult(records=tuple(investors), issues=tuple(issues))


def parse_portfolio(soup: BeautifulSoup) -> ParseResult[Holding]:
    """Extract holdings from an investor's detail page, in row order.

    The first row of the table is always treated as the header.
    """

    if soup.select_one(HOLDINGS_TABLE_SELECTOR) is None:
        raise DocumentStructureError(f"Holdings table {HOLDINGS_TABLE_SELECTOR!r} not found")

    holdings: list[Holding] = []
    issues: list[RowIssue] = []
    for index, row in enumerate(soup.select(HOLDINGS_ROW_SELECTOR)):
        if index == 0:
            continue
        try:
            holdings.append(_parse_holding_row(row))
        except _RowRejected as exc:
            LOGGER.debug("Skipping holdings row %d: %s", index, exc)
            issues.append(RowIssue(index=index, reason=str(exc), text=row.get_text(" ", strip=True)))
    return ParseResult(records=tuple(holdings), issues=tuple(issues))


__all__ = [
    "parse_directory",
    "parse_portfolio",
    "DIRECTORY_ITEM_SELECTOR",
    "HOLDINGS_ROW_SELECTOR",
    "UPDATED_LABEL",
    "MIN_HOLDING_CELLS",
]
