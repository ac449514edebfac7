"""Main word search generator orchestration.

Board generation is randomized restart rather than backtracking:

  1. Scramble the word list and place each word at a random anchor and
     direction, giving every word a fixed budget of attempts.
  2. If any word cannot be placed, throw the board away and start again one
     size larger.
  3. Once every word fits, fill the remaining cells with weighted filler
     letters and validate the result.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.constants import DEFAULT_PLACEMENT_ATTEMPTS, EMPTY_CELL, FILLER_ALPHABET
from ..core.exceptions import BoardSizeError, ValidationError
from ..core.models import Placement
from .grid import GridConfig, WordSearchGrid
from ..utils.logger import get_logger
from .validator import GridValidator


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    size: Optional[int] = None
    seed: Optional[int] = None
    placement_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS
    max_size: Optional[int] = None
    rescramble_on_retry: bool = True
    filler_alphabet: str = FILLER_ALPHABET

    def to_grid_config(self, size: int, seed_override: Optional[int] = None) -> GridConfig:
        return GridConfig(
            size=size,
            rng_seed=seed_override if seed_override is not None else self.seed,
            placement_attempts=self.placement_attempts,
            filler_alphabet=self.filler_alphabet,
        )


@dataclass
class BoardResult:
    grid: WordSearchGrid
    words: Tuple[str, ...]
    placement_order: List[str]
    board_attempts: int = 1
    seed: Optional[int] = None

    @property
    def size(self) -> int:
        return self.grid.size

    @property
    def placements(self) -> List[Placement]:
        return self.grid.placements


def scramble_words(words: Sequence[str], rng: random.Random) -> List[str]:
    """Return an unbiased Fisher-Yates permutation of ``words``.

    The input sequence is left untouched.
    """

    scrambled = list(words)
    for i in range(len(scrambled) - 1, 0, -1):
        j = rng.randint(0, i)
        scrambled[i], scrambled[j] = scrambled[j], scrambled[i]
    return scrambled


def initial_board_size(words: Iterable[str]) -> int:
    """Longest word length, never less than one."""

    return max((len(word) for word in words), default=0) or 1


class BoardGenerator:
    """Places a word list on the smallest board the random search reaches."""

    def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
        self.config = config or GeneratorConfig()
        self.rng = random.Random(self.config.seed)
        self.validator = GridValidator()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, words: Sequence[str], size: Optional[int] = None) -> BoardResult:
        """Generate a filled board holding every word.

        ``size`` (or ``config.size``) forces the starting side length; without
        it the board starts at the length of the longest word.
        """

        words = tuple(words)
        self._check_words(words)
        board_size = size if size is not None else self.config.size
        if board_size is None:
            board_size = initial_board_size(words)
        self._check_size(board_size)

        order = scramble_words(words, self.rng)
        attempt = 0
        while True:
            attempt += 1
            if attempt > 1 and self.config.rescramble_on_retry:
                order = scramble_words(words, self.rng)
            grid_seed = self.rng.randint(0, 1_000_000)
            grid = WordSearchGrid(self.config.to_grid_config(board_size, seed_override=grid_seed))
            failed_word = self._place_all(grid, order)
            if failed_word is None:
                break
            LOGGER.info(
                "Could not place '%s' on %sx%s board, growing to %s",
                failed_word,
                board_size,
                board_size,
                board_size + 1,
            )
            board_size += 1
            self._check_size(board_size)

        filled = grid.fill_empty()
        validation = self.validator.validate(grid, words)
        if not validation.ok:
            raise ValidationError(f"Grid validation failed: {validation.messages}")
        LOGGER.info(
            "Generated %sx%s board with %s words (%s filler cells, %s board attempts)",
            board_size,
            board_size,
            len(words),
            filled,
            attempt,
        )
        return BoardResult(
            grid=grid,
            words=words,
            placement_order=order,
            board_attempts=attempt,
            seed=self.config.seed,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _place_all(grid: WordSearchGrid, order: Sequence[str]) -> Optional[str]:
        """Place words in ``order``; return the first word that did not fit."""

        for word in order:
            if grid.try_place_word(word) is None:
                return word
        return None

    def _check_size(self, board_size: int) -> None:
        max_size = self.config.max_size
        if max_size is not None and board_size > max_size:
            LOGGER.warning("Board size %s exceeds maximum %s", board_size, max_size)
            raise BoardSizeError(
                f"Words do not fit on a board of at most {max_size}x{max_size}"
            )

    @staticmethod
    def _check_words(words: Sequence[str]) -> None:
        for word in words:
            if not word:
                raise ValueError("Word list contains an empty word")
            if EMPTY_CELL in word:
                raise ValueError(f"Word '{word}' contains the empty cell marker")
