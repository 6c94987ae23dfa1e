"""FastAPI application exposing the investor directory and portfolios as JSON."""
from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from fastapi import Depends, FastAPI, HTTPException, status

from .config import Settings
from .errors import DocumentStructureError, FetchError, InvestorNotFoundError
from .logging_utils import configure_logging
from .models import ParseResult
from .sources import InvestorSource, create_source

configure_logging()

LOGGER = logging.getLogger(__name__)

settings = Settings.load()


def get_source() -> InvestorSource:
    """Provide a fresh source per request."""

    return create_source(settings=settings)


def _skipped(result: ParseResult[Any]) -> list[dict[str, Any]]:
    return [asdict(issue) for issue in result.issues]


app = FastAPI(title="Dataroma Holdings")


@app.get("/investors")
def list_investors(source: InvestorSource = Depends(get_source)) -> dict[str, Any]:
    LOGGER.debug("Serving investor directory")
    try:
        directory = source.fetch_directory()
    except (FetchError, DocumentStructureError) as exc:
        LOGGER.warning("Directory query failed: %s", exc)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    return {
        "investors": [asdict(investor) for investor in directory],
        "skipped": _skipped(directory),
    }


@app.get("/investors/{name}/portfolio")
def investor_portfolio(name: str, source: InvestorSource = Depends(get_source)) -> dict[str, Any]:
    LOGGER.debug("Serving portfolio for %r", name)
    try:
        investor = source.find_investor(name)
        portfolio = source.fetch_portfolio(investor.profile_url)
    except InvestorNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except (FetchError, DocumentStructureError) as exc:
        LOGGER.warning("Portfolio query for %r failed: %s", name, exc)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    return {
        "investor": asdict(investor),
        "holdings": [asdict(holding) for holding in portfolio],
        "skipped": _skipped(portfolio),
    }


__all__ = ["app", "get_source"]
