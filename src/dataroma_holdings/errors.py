"""Exceptions raised while retrieving investor data."""
from __future__ import annotations


class DataromaError(RuntimeError):
    """Base class for failures that abort a whole query."""


class FetchError(DataromaError):
    """Raised when a page cannot be downloaded."""

    def __init__(self, url: str, message: str | None = None) -> None:
        self.url = url
        super().__init__(message or f"Failed to fetch {url}")


class DocumentStructureError(DataromaError):
    """Raised when a page lacks the markup region the parser relies on."""


class InvestorNotFoundError(DataromaError, LookupError):
    """Raised when no tracked investor matches a name fragment."""

    def __init__(self, fragment: str) -> None:
        self.fragment = fragment
        super().__init__(f"Investor {fragment} not found")


class DateParseError(ValueError):
    """Raised when a date is not in DD/MM/YYYY form."""


__all__ = [
    "DataromaError",
    "FetchError",
    "DocumentStructureError",
    "InvestorNotFoundError",
    "DateParseError",
]
