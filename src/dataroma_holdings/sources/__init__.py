"""Source factory for investor scrapers."""
from __future__ import annotations

import logging

import requests

from ..config import Settings
from .base import InvestorSource
from .dataroma import DataromaSource

LOGGER = logging.getLogger(__name__)


def create_source(
    name: str = "dataroma",
    settings: Settings | None = None,
    session: requests.Session | None = None,
) -> InvestorSource:
    """Instantiate the source implementation registered under ``name``."""

    if name.lower() == "dataroma":
        LOGGER.debug("Selected DataromaSource")
        return DataromaSource(settings=settings, session=session)
    raise ValueError(f"Unsupported source: {name}")


__all__ = ["create_source", "InvestorSource", "DataromaSource"]
