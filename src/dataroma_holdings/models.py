"""Domain models representing investor data."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Investor:
    """A tracked investor as listed on the directory page."""

    name: str
    update_date: date
    profile_url: str


@dataclass(frozen=True, slots=True)
class Holding:
    """Represents a single stock holding."""

    symbol: str
    name: str
    portfolio_weight: float  # fraction of the portfolio, 0.1234 for 12.34%
    shares: float
    cost_price: float
    value: float


@dataclass(frozen=True, slots=True)
class RowIssue:
    """A listing item or table row that was dropped during parsing."""

    index: int
    reason: str
    text: str


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Records extracted from one document plus the rows that were skipped."""

    records: tuple[T, ...] = ()
    issues: tuple[RowIssue, ...] = ()

    def __iter__(self) -> Iterator[T]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    @property
    def complete(self) -> bool:
        """True when no row had to be dropped."""

        return not self.issues


__all__ = ["Investor", "Holding", "RowIssue", "ParseResult"]
