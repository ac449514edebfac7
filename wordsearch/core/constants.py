"""Shared constants and enumerations for the word search generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


EMPTY_CELL = " "

# Each letter's multiplicity is its relative filler frequency.
FILLER_ALPHABET = "aaabbccddeeeffgghhiijjkkllmmnnooppqrrrssstttuuvvwwxyyz"

LABEL_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
MAX_LABELED_SIZE = len(LABEL_ALPHABET)

DEFAULT_PLACEMENT_ATTEMPTS = 1000

# (dx, dy) unit steps, clockwise from east.
DIRECTION_STEPS: Tuple[Tuple[int, int], ...] = (
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
)


class Difficulty(str, Enum):
    """Difficulty tiers derived from the board side length."""

    VERY_EASY = "Very Easy"
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"
    VERY_HARD = "Very Hard"
    EXTREMELY_HARD = "Extremely Hard"

    @classmethod
    def for_size(cls, size: int) -> "Difficulty":
        for limit, tier in _DIFFICULTY_THRESHOLDS:
            if size <= limit:
                return tier
        return cls.EXTREMELY_HARD


_DIFFICULTY_THRESHOLDS: Tuple[Tuple[int, Difficulty], ...] = (
    (6, Difficulty.VERY_EASY),
    (9, Difficulty.EASY),
    (15, Difficulty.MEDIUM),
    (18, Difficulty.HARD),
    (21, Difficulty.VERY_HARD),
)


@dataclass(frozen=True)
class Bounds:
    """Square board bounds helper."""

    size: int

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size
