"""Utility helpers for scraping."""
from __future__ import annotations

import math
import re
from datetime import date

from dateutil import parser

from ..errors import DateParseError


NON_DIGIT = re.compile(r"[^0-9.]")
DAY_MONTH_YEAR = re.compile(r"(?P<day>[0-9]{2})/(?P<month>[0-9]{2})/(?P<year>[0-9]{4})")
SYMBOL_DELIMITER = "-"


def parse_number(value: str | None) -> float:
    """Parse a loosely formatted number such as ``$1,234.56`` or ``12.5%``.

    Everything except digits and the decimal point is discarded, so signs and
    exponents are lost. Text that still does not form a number yields ``0.0``.
    """

    if not value:
        return 0.0
    cleaned = NON_DIGIT.sub("", value)
    try:
        number = float(cleaned)
    except ValueError:
        return 0.0
    # Overflowing digit runs come back as inf.
    return number if math.isfinite(number) else 0.0


def parse_date(value: str | None) -> date:
    """Parse a ``DD/MM/YYYY`` date, rejecting every other layout."""

    text = (value or "").strip()
    match = DAY_MONTH_YEAR.fullmatch(text)
    if not match:
        raise DateParseError(f"Expected DD/MM/YYYY date, got {value!r}")
    try:
        parsed = parser.parse(text, dayfirst=True).date()
    except (ValueError, OverflowError) as exc:
        raise DateParseError(f"Invalid calendar date {value!r}") from exc
    # dateutil falls back to month-first when the day-first reading is impossible.
    if (parsed.day, parsed.month) != (int(match["day"]), int(match["month"])):
        raise DateParseError(f"Invalid calendar date {value!r}")
    return parsed


def split_symbol_name(value: str) -> tuple[str, str]:
    """Split ``"AAPL - Apple Inc."`` into ``("AAPL", "Apple Inc.")``."""

    parts = value.split(SYMBOL_DELIMITER)
    if len(parts) != 2:
        raise ValueError(f"Expected exactly one {SYMBOL_DELIMITER!r} in {value!r}")
    symbol, name = (part.strip() for part in parts)
    if not symbol or not name:
        raise ValueError(f"Missing symbol or name in {value!r}")
    return symbol, name


__all__ = ["parse_number", "parse_date", "split_symbol_name"]
