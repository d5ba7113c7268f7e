"""Logging setup shared by the library and the command line."""

from __future__ import annotations

import logging

from conversio.config import CONVERSIO_LOG_LEVEL

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a module logger."""
    return logging.getLogger(name)


def configure_logging(level: str | int | None = None) -> None:
    """Configure the root ``conversio`` logger once.

    Args:
        level: Logging level name or number. Falls back to
            ``CONVERSIO_LOG_LEVEL`` when omitted.
    """
    resolved = level if level is not None else CONVERSIO_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
        if not isinstance(resolved, int):
            resolved = logging.WARNING

    logger = logging.getLogger("conversio")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(resolved)
