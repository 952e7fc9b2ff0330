"""Logging utilities for unity-responsive.

Stdlib logging routed through the active reporter.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator
from .reporting import get_reporter

_LOGGER_NAME = "unity_responsive"

__all__ = [
    "get_logger",
    "configure_logging",
    "section",
]


class _ReporterHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:  # noqa: D401
        rep = get_reporter()
        msg = record.getMessage()
        lvl = record.levelno
        if lvl >= logging.ERROR:
            rep.error(msg)
        elif lvl >= logging.WARNING:
            rep.warning(msg)
        elif lvl >= logging.INFO:
            rep.status(msg)
        else:
            rep.verbose(msg)


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)


def configure_logging(verbosity: int = 0) -> None:
    logger = get_logger()
    logger.setLevel(logging.DEBUG if verbosity >= 1 else logging.INFO)

    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = _ReporterHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)


@contextmanager
def section(title: str) -> Iterator[logging.Logger]:
    logger = get_logger()
    get_reporter().section(title)
    try:
        yield logger
    finally:
        logger.debug("end section: %s", title)
