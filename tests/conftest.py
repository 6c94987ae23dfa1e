"""
Pytest configuration and shared fixtures for dataroma_holdings tests.
"""

from unittest.mock import MagicMock

import pytest
import requests
from bs4 import BeautifulSoup

from dataroma_holdings.config import Settings

HOMEPAGE_URL = "https://www.dataroma.com/m/home.php"

DIRECTORY_HTML = """
<html><body>
<div id="port_body">
<ul>
<li><a href="/m/holdings.php?m=psc">Bill Ackman - Pershing Square Capital Management<span>Updated 15/11/2023</span></a></li>
<li><a href="/m/holdings.php?m=BRK">Warren Buffett - Berkshire Hathaway<span>Updated 14/02/2024</span></a></li>
<li><a href="/m/holdings.php?m=GLRE">David Einhorn - Greenlight Capital<span>Updated 31/12/2023</span></a></li>
<li><a href="/m/holdings.php?m=nolabel">No Label Fund</a></li>
<li><a href="/m/holdings.php?m=baddate">Bad Date Fund<span>Updated 12/31/2023</span></a></li>
<li>Linkless Fund<span>Updated 01/01/2024</span></li>
</ul>
</div>
</body></html>
"""

PORTFOLIO_HTML = """
<html><body>
<table id="grid">
<thead><tr><th>Stock</th><th>% of portfolio</th><th>Shares</th><th>Cost</th><th>Value</th></tr></thead>
<tbody>
<tr><td>AAPL - Apple Inc.</td><td>12.34%</td><td>1,000</td><td>$1,234.56</td><td>$1,234,560</td></tr>
<tr><td>CMG - Chipotle Mexican Grill</td><td>N/A</td><td>2,500</td><td>$50.00</td><td>$125,000</td></tr>
<tr><td>Short row</td><td>1%</td></tr>
<tr><td>BRK-B - Berkshire Hathaway</td><td>5%</td><td>10</td><td>$300</td><td>$3,000</td></tr>
<tr><td>NOSEPARATOR</td><td>5%</td><td>10</td><td>$300</td><td>$3,000</td></tr>
</tbody>
</table>
</body></html>
"""

HEADER_ONLY_PORTFOLIO_HTML = """
<html><body>
<table id="grid"><tr><th>Stock</th><th>% of portfolio</th><th>Shares</th><th>Cost</th><th>Value</th></tr></table>
</body></html>
"""


def make_response(text: str = "", error: Exception | None = None) -> MagicMock:
    """Build a mock ``requests.Response``."""
    response = MagicMock()
    response.text = text
    if error is not None:
        response.raise_for_status.side_effect = error
    return response


def make_session(pages: dict) -> MagicMock:
    """Build a mock session serving ``pages`` keyed by URL.

    Values may be HTML strings, prepared responses, or exceptions to raise.
    """
    session = MagicMock()

    def _get(url, timeout=None):
        page = pages[url]
        if isinstance(page, Exception):
            raise page
        if isinstance(page, str):
            return make_response(page)
        return page

    session.get.side_effect = _get
    return session


@pytest.fixture
def settings():
    """Default settings, independent of the caller's environment."""
    return Settings()


@pytest.fixture
def directory_soup():
    return BeautifulSoup(DIRECTORY_HTML, "html.parser")


@pytest.fixture
def portfolio_soup():
    return BeautifulSoup(PORTFOLIO_HTML, "html.parser")


@pytest.fixture
def site_session():
    """Mock session serving the directory and Ackman's detail page."""
    return make_session(
        {
            HOMEPAGE_URL: DIRECTORY_HTML,
            "https://www.dataroma.com/m/holdings.php?m=psc": PORTFOLIO_HTML,
            "https://www.dataroma.com/m/holdings.php?m=BRK": HEADER_ONLY_PORTFOLIO_HTML,
            "https://www.dataroma.com/m/holdings.php?m=GLRE": requests.ConnectionError("reset"),
        }
    )


@pytest.fixture
def directory_html():
    return DIRECTORY_HTML


@pytest.fixture
def portfolio_html():
    return PORTFOLIO_HTML


@pytest.fixture
def header_only_html():
    return HEADER_ONLY_PORTFOLIO_HTML


@pytest.fixture
def session_factory():
    """Factory for mock sessions, see ``make_session``."""
    return make_session
