"""Data models supporting the word search generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class Placement:
    """A word laid out from an anchor cell along a direction vector."""

    word: str
    start_x: int
    start_y: int
    dx: int
    dy: int
    _cells: Optional[List[Tuple[int, int]]] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.dx not in (-1, 0, 1) or self.dy not in (-1, 0, 1):
            raise ValueError(f"Direction components must be -1, 0 or 1: {(self.dx, self.dy)}")
        if self.dx == 0 and self.dy == 0:
            raise ValueError("Direction vector cannot be (0, 0)")

    @property
    def direction(self) -> Tuple[int, int]:
        return self.dx, self.dy

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def end(self) -> Tuple[int, int]:
        steps = max(self.length - 1, 0)
        return self.start_x + steps * self.dx, self.start_y + steps * self.dy

    @property
    def cells(self) -> List[Tuple[int, int]]:
        if self._cells is None:
            self._cells = [
                (self.start_x + i * self.dx, self.start_y + i * self.dy)
                for i in range(self.length)
            ]
        return self._cells

    def to_jsonable(self) -> dict:
        return {
            "word": self.word,
            "start": [self.start_x, self.start_y],
            "direction": [self.dx, self.dy],
        }
