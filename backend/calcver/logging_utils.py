"""Helpers for consistent package logging."""

from __future__ import annotations

import logging
import os
from typing import Final, Optional

LOGGER_NAME: Final[str] = "calcver"
HANDLER_NAME: Final[str] = "calcver-stream"
PRIMARY_LEVEL_ENV: Final[str] = "CALCVER_LOG_LEVEL"
FALLBACK_LEVEL_ENV: Final[str] = "LOG_LEVEL"


def _resolve_log_level() -> int:
    """Return the log level configured via environment variables."""
    raw = os.getenv(PRIMARY_LEVEL_ENV) or os.getenv(FALLBACK_LEVEL_ENV)
    if not raw:
        return logging.INFO

    candidate = raw.strip()
    if not candidate:
        return logging.INFO

    # Support numeric levels and string names (case-insensitive).
    try:
        numeric_level = int(candidate)
    except ValueError:
        level = getattr(logging, candidate.upper(), None)
        if isinstance(level, int):
            return level
    else:
        return numeric_level

    return logging.INFO


def _package_handler(logger: logging.Logger) -> Optional[logging.Handler]:
    for handler in logger.handlers:
        if handler.get_name() == HANDLER_NAME:
            return handler
    return None


def configure_logging() -> logging.Logger:
    """Attach the package stream handler once and apply the configured level."""
    logger = logging.getLogger(LOGGER_NAME)
    level = _resolve_log_level()

    # Other handlers (e.g. test capture) may already sit on the logger.
    handler = _package_handler(logger)
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                "%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
        logger.propagate = False

    handler.setLevel(level)
    logger.setLevel(level)
    return logger


def get_logger(child: Optional[str] = None) -> logging.Logger:
    """Return the package logger, optionally a named child of it."""
    base = configure_logging()
    return base.getChild(child) if child else base
