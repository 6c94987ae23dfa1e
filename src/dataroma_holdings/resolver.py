"""Name lookup against the investor directory."""
from __future__ import annotations

import logging
from typing import Iterable

from .errors import InvestorNotFoundError
from .models import Investor

LOGGER = logging.getLogger(__name__)


def normalize_name(fragment: str) -> str:
    """Title-case a name fragment the way directory names are written.

    Every letter that follows a non-letter starts a new word, so ``"bill ACKMAN"``
    becomes ``"Bill Ackman"`` and ``"o'neil"`` becomes ``"O'Neil"``. Names with
    inner capitals such as ``McDonald`` do not survive this and will not match.
    """

    return fragment.strip().title()


def resolve_investor(fragment: str, investors: Iterable[Investor]) -> Investor:
    """Return the first investor whose name contains the normalized fragment.

    A blank fragment is contained in every name and resolves to the first
    investor listed.
    """

    needle = normalize_name(fragment)
    for investor in investors:
        if needle in investor.name:
            LOGGER.debug("Resolved %r to %s", fragment, investor.name)
            return investor
    raise InvestorNotFoundError(needle)


__all__ = ["normalize_name", "resolve_investor"]
