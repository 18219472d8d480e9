"""Logging setup for the serverless entry point."""

from __future__ import annotations

import logging
import os
from typing import Any

LOG_LEVEL_ENV = "LOG_LEVEL"
_PACKAGE_LOGGER = "src"


def configure_logging() -> None:
    """Apply ``LOG_LEVEL`` to the package loggers.

    The hosting runtime owns the root handler, so only the level is set.
    Unknown level names fall back to INFO.
    """
    level_name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    level = logging.getLevelNamesMapping().get(level_name)
    if level is None:
        logging.getLogger(__name__).warning(
            "Unknown %s %r, using INFO", LOG_LEVEL_ENV, level_name,
        )
        level = logging.INFO
    logging.getLogger(_PACKAGE_LOGGER).setLevel(level)


def log_safely(logger: logging.Logger, level: int, msg: str, *args: Any) -> None:
    """Emit a diagnostic line; a failing handler never reaches the caller."""
    try:
        logger.log(level, msg, *args)
    except Exception:  # diagnostics are fire-and-forget
        return
