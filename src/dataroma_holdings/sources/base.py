"""Base classes for scraping investor data."""
from __future__ import annotations

from abc import ABC, abstractmethod

from ..models import Holding, Investor, ParseResult
from ..resolver import resolve_investor


class InvestorSource(ABC):
    """Abstract source that can list investors and load their holdings."""

    @abstractmethod
    def fetch_directory(self) -> ParseResult[Investor]:
        """Download and parse the investor directory."""

    @abstractmethod
    def fetch_portfolio(self, url: str) -> ParseResult[Holding]:
        """Download and parse the holdings on one investor's detail page."""

    def list_investors(self) -> list[Investor]:
        """Return every well formed investor in the directory."""

        return list(self.fetch_directory())

    def find_investor(self, fragment: str) -> Investor:
        """Resolve a name fragment against a freshly fetched directory."""

        return resolve_investor(fragment, self.fetch_directory())

    def get_portfolio(self, fragment: str) -> list[Holding]:
        """Return the holdings of the first investor matching ``fragment``."""

        investor = self.find_investor(fragment)
        return list(self.fetch_portfolio(investor.profile_url))


__all__ = ["InvestorSource"]
