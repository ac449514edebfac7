"""Parsing of two-letter board coordinates such as ``AF`` (row A, column F)."""

from __future__ import annotations

from typing import Tuple

from ..core.constants import LABEL_ALPHABET
from ..core.exceptions import CoordinateError


def parse_coordinate(text: str, size: int) -> Tuple[int, int]:
    """Return ``(x, y)`` for a row-letter/column-letter pair on a ``size`` board."""

    cleaned = text.strip().upper()
    if len(cleaned) != 2:
        raise CoordinateError(f"Expected two letters, got '{text}'")
    row_label, col_label = cleaned
    y = LABEL_ALPHABET.find(row_label)
    x = LABEL_ALPHABET.find(col_label)
    if not 0 <= y < size or not 0 <= x < size:
        raise CoordinateError(f"'{cleaned}' is outside the {size}x{size} board")
    return x, y


def format_coordinate(x: int, y: int) -> str:
    return f"{LABEL_ALPHABET[y]}{LABEL_ALPHABET[x]}"
