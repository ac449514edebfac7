"""Deterministic rule validation for generated word search boards."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from ..core.constants import EMPTY_CELL
from ..core.exceptions import ValidationError
from ..data.normalization import fold_lower
from .grid import WordSearchGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Runs deterministic validation over a freshly generated grid."""

    def validate(self, grid: WordSearchGrid, words: Sequence[str]) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_all_words_placed(grid, words)
            self._check_placements_spell_words(grid)
            self._check_no_shared_cells(grid)
            self._check_filled(grid)
            self._check_lowercase(grid)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_all_words_placed(self, grid: WordSearchGrid, words: Sequence[str]) -> None:
        expected = Counter(words)
        placed = Counter(placement.word for placement in grid.placements)
        missing = expected - placed
        if missing:
            raise ValidationError(f"Words missing from grid: {sorted(missing)}")
        extra = placed - expected
        if extra:
            raise ValidationError(f"Unexpected words placed: {sorted(extra)}")

    def _check_placements_spell_words(self, grid: WordSearchGrid) -> None:
        for placement in grid.placements:
            for x, y in placement.cells:
                if not grid.contains(x, y):
                    raise ValidationError(
                        f"Word '{placement.word}' leaves the grid at ({x},{y})"
                    )
            spelled = grid.spell(placement.cells)
            if fold_lower(spelled) != fold_lower(placement.word):
                raise ValidationError(
                    f"Cells spell '{spelled}' instead of '{placement.word}' "
                    f"at ({placement.start_x},{placement.start_y})"
                )

    def _check_no_shared_cells(self, grid: WordSearchGrid) -> None:
        owners: Dict[Tuple[int, int], str] = {}
        for placement in grid.placements:
            for cell in placement.cells:
                if cell in owners:
                    raise ValidationError(
                        f"Words '{owners[cell]}' and '{placement.word}' share cell {cell}"
                    )
                owners[cell] = placement.word

    def _check_filled(self, grid: WordSearchGrid) -> None:
        for y in range(grid.size):
            for x in range(grid.size):
                if grid.cell(x, y) == EMPTY_CELL:
                    raise ValidationError(f"Unfilled cell at ({x},{y})")

    def _check_lowercase(self, grid: WordSearchGrid) -> None:
        for y in range(grid.size):
            for x in range(grid.size):
                letter = grid.cell(x, y)
                if letter != fold_lower(letter):
                    raise ValidationError(f"Uppercase letter '{letter}' at ({x},{y})")
