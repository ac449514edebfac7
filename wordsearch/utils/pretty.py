"""Pretty-print helpers for word search boards."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterable, Tuple

from ..core.constants import LABEL_ALPHABET, MAX_LABELED_SIZE, Difficulty

if TYPE_CHECKING:
    from ..engine.generator import BoardResult
    from ..engine.grid import WordSearchGrid
    from ..engine.session import PuzzleSession


HELP_TEXT = (
    "When asked for an answer, type in the coordinate pair of one end of a word you find in the puzzle.\n"
    "Coordinates are done row, then column. For a character in row D and column C, the answer would be DC.\n"
    "Then type the pair of the letter at the end of the word, and if it's right, you will have completed that word."
)


def format_row(grid: WordSearchGrid, y: int) -> str:
    return " ".join(grid.row(y))


def format_grid(grid: WordSearchGrid) -> str:
    """Unlabeled board, one row per line."""

    return "\n".join(format_row(grid, y) for y in range(grid.size))


def format_labeled_grid(grid: WordSearchGrid) -> str:
    """Board with column letters along the top and row letters down the left."""

    if grid.size > MAX_LABELED_SIZE:
        raise ValueError(
            f"Cannot label a {grid.size}x{grid.size} board; at most {MAX_LABELED_SIZE} rows are supported"
        )
    labels = LABEL_ALPHABET[: grid.size]
    lines = ["  " + "_".join(labels)]
    for y, label in enumerate(labels):
        lines.append(f"{label}|{format_row(grid, y)}")
    return "\n".join(lines)


def format_board_info(grid: WordSearchGrid) -> str:
    difficulty = Difficulty.for_size(grid.size)
    return f"Size: {grid.size}x{grid.size}\nDifficulty: {difficulty.value}"


def format_word_list(status: Iterable[Tuple[str, bool]]) -> str:
    """Each word prefixed by X when found and O otherwise."""

    return "\n".join(f"{'X' if found else 'O'} {word}" for word, found in status)


def pretty_print_grid(grid: WordSearchGrid, *, stream=None) -> None:
    """Print the labeled board in a human-friendly format."""

    stream = stream or sys.stdout
    print(format_labeled_grid(grid), file=stream)


def print_board_stats(result: BoardResult, *, stream=None) -> None:
    """Print the unlabeled board followed by its generation stats."""

    stream = stream or sys.stdout
    print(format_grid(result.grid), file=stream)
    print(file=stream)
    print(format_board_info(result.grid), file=stream)
    print(f"Words: {len(result.words)}", file=stream)
    if result.board_attempts > 1:
        print(f"Board attempts: {result.board_attempts}", file=stream)
    if result.seed is not None:
        print(f"Seed: {result.seed}", file=stream)


def print_win_summary(session: PuzzleSession, *, stream=None) -> None:
    stream = stream or sys.stdout
    print(file=stream)
    print("***You win!***", file=stream)
    print(f"Difficulty: {session.difficulty.value}", file=stream)
    print(f"Words completed: {len(session.words)}", file=stream)
    print(f"Time: {session.elapsed_seconds} seconds", file=stream)
