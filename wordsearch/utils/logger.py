"""Logging setup shared by the generator, the session and the console loop."""

from __future__ import annotations

import logging
from typing import Optional


def configure_logging(level: int = logging.WARNING) -> None:
    """Route log records to stderr with a timestamped formatter.

    The console game prints the board on stdout, so the default level only
    lets warnings through (for example a board hitting its size cap). Raise
    it to INFO to see board growth and found words, or DEBUG to follow each
    placement attempt and answer.
    """

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a ``wordsearch`` logger, installing the quiet default on first use."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "wordsearch")
