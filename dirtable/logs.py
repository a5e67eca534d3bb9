"""Diagnostic logger setup.

Diagnostics go to stderr so stdout carries only the table.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "dirtable"


def setup_logger(verbose: bool, stream: TextIO | None = None) -> logging.Logger:
    """Configure and return the package logger.

    Level is DEBUG with ``verbose`` and WARNING otherwise. Handlers from a
    previous call are replaced, so repeated ``main`` invocations in one
    process do not duplicate lines.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False

    logger.handlers.clear()

    handler = logging.StreamHandler(stream=stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(handler)
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


__all__ = [
    "LOGGER_NAME",
    "setup_logger",
    "get_logger",
]
