"""Dataroma data source implementation."""
from __future__ import annotations

import logging

import requests
from bs4 import BeautifulSoup

from ..config import Settings
from ..errors import FetchError
from ..models import Holding, Investor, ParseResult
from .base import InvestorSource
from .parsers import parse_directory, parse_portfolio

LOGGER = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8",
    "accept-language": "en-US,en;q=0.9",
    "cache-control": "max-age=0",
    "upgrade-insecure-requests": "1",
}


class DataromaSource(InvestorSource):
    """Scraper for dataroma.com superinvestor pages."""

    def __init__(self, settings: Settings | None = None, session: requests.Session | None = None) -> None:
        self.settings = settings or Settings()
        self.session = session or requests.Session()
        # Dataroma rejects the default python-requests user agent.
        self.session.headers.update(DEFAULT_HEADERS)
        self.session.headers["user-agent"] = self.settings.user_agent

    def _get_soup(self, url: str) -> BeautifulSoup:
        LOGGER.debug("Requesting %s", url)
        try:
            response = self.session.get(url, timeout=self.settings.request_timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise FetchError(url, f"Failed to fetch {url}: {exc}") from exc
        return BeautifulSoup(response.text, "html.parser")

    def fetch_directory(self) -> ParseResult[Investor]:
        soup = self._get_soup(self.settings.homepage_url)
        result = parse_directory(soup, origin=self.settings.site_origin)
        LOGGER.info(
            "Parsed %d investors from directory (%d items skipped)",
            len(result.records),
            len(result.issues),
        )
        return result

    def fetch_portfolio(self, url: str) -> ParseResult[Holding]:
        soup = self._get_soup(url)
        result = parse_portfolio(soup)
        LOGGER.info(
            "Parsed %d holdings from %s (%d rows skipped)",
            len(result.records),
            url,
            len(result.issues),
        )
        return result


__all__ = ["DataromaSource"]
