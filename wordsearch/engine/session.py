"""Puzzle session state: match checking, found words, timing."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence, Tuple

from ..core.constants import Difficulty
from ..data.normalization import fold_lower
from .grid import WordSearchGrid
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from .generator import BoardResult

LOGGER = get_logger(__name__)


class PuzzleSession:
    """Owns a generated grid and tracks which words the player has found.

    Uppercasing found cells is the only grid mutation allowed once
    generation has finished, and it happens only in :meth:`answer`.
    """

    def __init__(
        self,
        grid: WordSearchGrid,
        words: Sequence[str],
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.grid = grid
        self.words: Tuple[str, ...] = tuple(words)
        self.found_words: List[str] = []
        self._clock = clock
        self.start_time = clock()

    @classmethod
    def from_result(
        cls, result: BoardResult, clock: Optional[Callable[[], float]] = None
    ) -> "PuzzleSession":
        if clock is None:
            return cls(result.grid, result.words)
        return cls(result.grid, result.words, clock=clock)

    # ------------------------------------------------------------------
    # Match checking
    # ------------------------------------------------------------------
    def answer(self, x1: int, y1: int, x2: int, y2: int) -> bool:
        """Check whether the line between two cells spells a listed word.

        The path is read forward and backward; a match uppercases the path
        and records the word once.
        """

        if not self.grid.contains(x1, y1) or not self.grid.contains(x2, y2):
            return False
        path = self.grid.line_between(x1, y1, x2, y2)
        spelled = fold_lower(self.grid.spell(path))
        reverse = spelled[::-1]

        for word in self.words:
            target = fold_lower(word)
            if spelled == target or reverse == target:
                self.grid.uppercase(path)
                if word not in self.found_words:
                    self.found_words.append(word)
                    LOGGER.info("Found '%s' (%s/%s)", word, len(self.found_words), len(self.words))
                return True
        LOGGER.debug("No word spelled by '%s' from (%s,%s) to (%s,%s)", spelled, x1, y1, x2, y2)
        return False

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_found(self, word: str) -> bool:
        return word in self.found_words

    @property
    def is_complete(self) -> bool:
        return all(word in self.found_words for word in self.words)

    def word_status(self) -> List[Tuple[str, bool]]:
        return [(word, self.is_found(word)) for word in self.words]

    @property
    def elapsed_seconds(self) -> int:
        return int(self._clock() - self.start_time)

    @property
    def difficulty(self) -> Difficulty:
        return Difficulty.for_size(self.grid.size)
