"""Central logging configuration for build-noti."""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "build_noti"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Return the package logger, attaching the stderr handler on first use.

    ``level`` is applied on every call so the CLI can raise or lower
    verbosity after settings are loaded; module-level callers pass nothing.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        # stdout carries the console summary only
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False

    if level is not None:
        logger.setLevel(level)
    return logger
