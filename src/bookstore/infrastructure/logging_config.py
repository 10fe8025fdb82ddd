"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "WARNING") -> None:
    """Send log records to stderr and set the bookstore loggers to *level*.

    ``basicConfig`` leaves an already-configured root logger alone, so an
    embedding application keeps its own handlers.
    """
    logging.basicConfig(format=LOG_FORMAT, datefmt=DATE_FORMAT)
    logging.getLogger("bookstore").setLevel(level.upper())
