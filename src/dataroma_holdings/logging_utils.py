"""Console logging setup shared by the CLI and the web app."""
from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "DATAROMA_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# HTTP stack loggers that repeat every request at DEBUG/INFO.
NOISY_LOGGERS = ("urllib3", "charset_normalizer")


def resolve_level(level: str | int | None) -> int:
    """Map a level name or number to a logging level, defaulting to INFO.

    ``None`` reads ``DATAROMA_LOG_LEVEL``. Unknown names fall back to INFO.
    """

    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: str | int | None = None, *, force: bool = False) -> None:
    """Send log records to the console at the requested level.

    An already configured root logger only has its level changed unless
    ``force`` is set. The HTTP client's own loggers stay at WARNING except
    when debugging, so INFO output only carries scrape summaries.
    """

    resolved_level = resolve_level(level)

    root_logger = logging.getLogger()
    if root_logger.handlers and not force:
        root_logger.setLevel(resolved_level)
    else:
        logging.basicConfig(level=resolved_level, format=LOG_FORMAT, force=force)

    noisy_level = logging.NOTSET if resolved_level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)


__all__ = ["configure_logging", "resolve_level"]
