"""
Loggers for labelops.

Every module logs to a child of the ``labelops`` logger, which carries only a
NullHandler until an application calls :func:`configure_logging`. The
analysis reports one INFO summary per run; slice positions, helper setup and
regions without contour vertices are reported at DEBUG.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

LIBRARY_LOGGER_NAME = "labelops"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``labelops`` itself for None, otherwise a logger under it.

    Names already starting with ``labelops`` are used as given, so module
    loggers created from ``__name__`` are not nested twice.
    """
    if name is None:
        return logging.getLogger(LIBRARY_LOGGER_NAME)

    if name.startswith(LIBRARY_LOGGER_NAME):
        return logging.getLogger(name)

    return logging.getLogger(f"{LIBRARY_LOGGER_NAME}.{name}")


def configure_logging(
    level: Union[int, str] = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
    stream: Optional[object] = None,
) -> None:
    """
    Send labelops log records to one handler at the given level.

    Existing handlers on the ``labelops`` logger are replaced, so calling this
    more than once never duplicates output.

    Args:
        level: Numeric level or case-insensitive level name
        format_string: Record format, DEFAULT_FORMAT when None
        handler: Handler to install; a StreamHandler when None
        stream: Target of that StreamHandler, sys.stderr when None

    Raises:
        ValueError: If a string level is not a known logging level name
    """
    if format_string is None:
        format_string = DEFAULT_FORMAT

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level: {level!r}")
        level = resolved

    logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    logger.setLevel(level)

    if handler is None:
        handler = logging.StreamHandler(stream or sys.stderr)

    if handler.formatter is None:
        handler.setFormatter(logging.Formatter(format_string))

    handler.setLevel(level)

    logger.handlers.clear()
    logger.addHandler(handler)


def _setup_library_logging() -> None:
    """Attach a NullHandler to the library logger if it has no handlers."""
    logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())


_setup_library_logging()
