"""Grid representation and helper utilities."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..core.constants import (
    DEFAULT_PLACEMENT_ATTEMPTS,
    DIRECTION_STEPS,
    EMPTY_CELL,
    FILLER_ALPHABET,
    Bounds,
)
from ..core.exceptions import PlacementError
from ..core.models import Placement
from ..data.normalization import fold_lower, upper_letter
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class GridConfig:
    """Configuration values driving a single board attempt."""

    size: int
    rng_seed: Optional[int] = None
    placement_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS
    filler_alphabet: str = FILLER_ALPHABET

    def bounds(self) -> Bounds:
        return Bounds(size=self.size)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class WordSearchGrid:
    """Encapsulates the square letter grid with placement helpers.

    Cells are addressed as ``(x, y)`` where ``x`` is the column and ``y`` the
    row; storage is row-major (``cells[y][x]``).
    """

    def __init__(self, config: GridConfig) -> None:
        if config.size < 1:
            raise ValueError(f"Grid size must be positive, got {config.size}")
        self.config = config
        self.bounds = config.bounds()
        self.rng = random.Random(config.rng_seed)
        self.cells: List[List[str]] = [
            [EMPTY_CELL for _ in range(self.bounds.size)] for _ in range(self.bounds.size)
        ]
        self.placements: List[Placement] = []

    @property
    def size(self) -> int:
        return self.bounds.size

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def contains(self, x: int, y: int) -> bool:
        return self.bounds.contains(x, y)

    def cell(self, x: int, y: int) -> str:
        return self.cells[y][x]

    def is_empty(self, x: int, y: int) -> bool:
        """True when ``(x, y)`` is on the board and holds the empty marker."""

        return self.contains(x, y) and self.cells[y][x] == EMPTY_CELL

    @property
    def empty_count(self) -> int:
        return sum(row.count(EMPTY_CELL) for row in self.cells)

    def row(self, y: int) -> List[str]:
        return list(self.cells[y])

    def can_place(self, word: str, x: int, y: int, dx: int, dy: int) -> bool:
        for i in range(len(word)):
            if not self.is_empty(x + i * dx, y + i * dy):
                return False
        return True

    # ------------------------------------------------------------------
    # Word placement
    # ------------------------------------------------------------------
    def place_word(self, placement: Placement) -> None:
        """Write ``placement`` into the grid.

        Every cell of the run must be on the board and empty; letters are
        written lowercase, one character per cell.
        """

        for x, y in placement.cells:
            if not self.contains(x, y):
                raise PlacementError(f"Word '{placement.word}' extends outside grid at {(x, y)}")
            if self.cells[y][x] != EMPTY_CELL:
                raise PlacementError(f"Word '{placement.word}' overlaps occupied cell {(x, y)}")

        # All checks passed, mutate grid
        for letter, (x, y) in zip(fold_lower(placement.word), placement.cells):
            self.cells[y][x] = letter
        self.placements.append(placement)

    def try_place_word(self, word: str, attempts: Optional[int] = None) -> Optional[Placement]:
        """Try random anchors and directions until ``word`` fits.

        Returns the placement on success, or ``None`` once the attempt budget
        is spent.
        """

        budget = self.config.placement_attempts if attempts is None else attempts
        for attempt in range(1, budget + 1):
            x = self.rng.randrange(self.size)
            y = self.rng.randrange(self.size)
            dx, dy = self.rng.choice(DIRECTION_STEPS)
            if not self.can_place(word, x, y, dx, dy):
                continue
            placement = Placement(word=word, start_x=x, start_y=y, dx=dx, dy=dy)
            self.place_word(placement)
            LOGGER.debug(
                "Placed '%s' at (%s,%s) step (%s,%s) after %s attempts",
                word,
                x,
                y,
                dx,
                dy,
                attempt,
            )
            return placement
        LOGGER.debug("Could not place '%s' on %sx%s board", word, self.size, self.size)
        return None

    def fill_empty(self, alphabet: Optional[str] = None) -> int:
        """Fill every empty cell with a weighted random letter; return the count."""

        alphabet = alphabet or self.config.filler_alphabet
        filled = 0
        for y in range(self.size):
            for x in range(self.size):
                if self.cells[y][x] == EMPTY_CELL:
                    self.cells[y][x] = self.rng.choice(alphabet)
                    filled += 1
        return filled

    # ------------------------------------------------------------------
    # Line helpers used by match checking
    # ------------------------------------------------------------------
    def line_between(self, x1: int, y1: int, x2: int, y2: int) -> List[Tuple[int, int]]:
        """Cells from ``(x1, y1)`` to ``(x2, y2)`` stepping by the sign of each delta.

        Each axis moves independently, so endpoints that are neither straight
        nor a true diagonal produce a bent path instead of an error.
        """

        path: List[Tuple[int, int]] = []
        x, y = x1, y1
        while (x, y) != (x2, y2):
            path.append((x, y))
            x += _sign(x2 - x)
            y += _sign(y2 - y)
        path.append((x, y))
        return path

    def spell(self, path: Sequence[Tuple[int, int]]) -> str:
        return "".join(self.cells[y][x] for x, y in path)

    def uppercase(self, path: Sequence[Tuple[int, int]]) -> int:
        """Uppercase the cells along ``path``; return how many changed."""

        changed = 0
        for x, y in path:
            current = self.cells[y][x]
            upper = upper_letter(current)
            if upper != current:
                self.cells[y][x] = upper
                changed += 1
        return changed

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> dict:
        return {
            "size": self.size,
            "rows": ["".join(row) for row in self.cells],
            "placements": [placement.to_jsonable() for placement in self.placements],
        }
