"""Console logging for the classifyit command line."""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

from .config import Config

PACKAGE_LOGGER = "classifyit"
LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
DATE_FORMAT = "%H:%M:%S"


def resolve_level(level: str | int | None) -> int:
    """Turn a level name or number into a ``logging`` level.

    ``None`` reads ``$CLASSIFYIT_LOG_LEVEL``. Names Python does not know map
    to INFO.
    """
    if level is None:
        level = os.environ.get(Config.LOG_LEVEL_ENV) or "INFO"
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def _console_handler(logger: logging.Logger) -> logging.StreamHandler | None:
    for handler in logger.handlers:
        if getattr(handler, "name", None) == PACKAGE_LOGGER:
            return handler
    return None


def setup_logging(
    level: str | int | None = None, stream: IO[str] | None = None
) -> logging.Logger:
    """Route ``classifyit.*`` records to a console stream.

    Calling this again retargets the existing console handler rather than
    stacking a second one, so the CLI and tests can both call it freely.

    Args:
        level: Level name or number; ``None`` falls back to the environment.
        stream: Where records go. Defaults to stdout.

    Returns:
        The ``classifyit`` package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(resolve_level(level))

    handler = _console_handler(logger)
    if handler is None:
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.set_name(PACKAGE_LOGGER)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(handler)
    else:
        handler.setStream(stream or sys.stdout)

    # Pillow reports each plugin it tries at DEBUG
    logging.getLogger("PIL").setLevel(logging.WARNING)
    return logger
