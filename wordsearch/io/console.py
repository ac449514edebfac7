"""Interactive console loop around a puzzle session.

Input and output are injected so the loop can be driven by scripted answers
in tests: ``input_fn`` behaves like :func:`input` and ``stream`` is any text
stream accepted by :func:`print`.
"""

from __future__ import annotations

import sys
from typing import Callable, Optional, Sequence

from ..core.exceptions import CoordinateError
from ..engine.generator import BoardGenerator, BoardResult
from ..engine.session import PuzzleSession
from ..utils.logger import get_logger
from ..utils.pretty import (
    HELP_TEXT,
    format_board_info,
    format_grid,
    format_word_list,
    pretty_print_grid,
    print_win_summary,
)
from .coordinates import format_coordinate, parse_coordinate

LOGGER = get_logger(__name__)

HELP_COMMAND = "?"
LIST_COMMAND = "L"
REGENERATE_COMMAND = "r"


class ConsoleGame:
    """Prompts for coordinate pairs until every word has been found."""

    def __init__(
        self,
        session: PuzzleSession,
        input_fn: Callable[[str], str] = input,
        stream=None,
    ) -> None:
        self.session = session
        self.input_fn = input_fn
        self.stream = stream or sys.stdout

    def _print(self, text: str = "") -> None:
        print(text, file=self.stream)

    def _read(self, prompt: str) -> str:
        return self.input_fn(prompt)

    def enter_to_continue(self) -> None:
        self._print("Please press enter to continue.")
        self._read("")

    def prompt_answer(self) -> Optional[bool]:
        """Run one turn.

        Returns whether the entered pair spelled a word, or ``None`` when the
        turn was a command or invalid input.
        """

        first = self._read("First coords (eg. AF, DB) (?,L): ").strip().upper()
        if len(first) != 2:
            if first == HELP_COMMAND:
                self._print(HELP_TEXT)
            elif first == LIST_COMMAND:
                self._print(format_word_list(self.session.word_status()))
            else:
                self._print("Invalid input")
            self.enter_to_continue()
            return None

        second = self._read("Second coords: ").strip().upper()
        size = self.session.grid.size
        try:
            x1, y1 = parse_coordinate(first, size)
            x2, y2 = parse_coordinate(second, size)
        except CoordinateError as exc:
            LOGGER.debug("Rejected coordinates: %s", exc)
            self._print("Invalid input")
            return None

        correct = self.session.answer(x1, y1, x2, y2)
        LOGGER.debug(
            "Answer %s to %s: %s", format_coordinate(x1, y1), format_coordinate(x2, y2), correct
        )
        if correct:
            self._print("Nice job! You found one!")
        else:
            self._print("No dice.")
        self.enter_to_continue()
        return correct

    def run(self) -> PuzzleSession:
        """Loop until the session is complete, then print the win summary."""

        while not self.session.is_complete:
            self._print()
            pretty_print_grid(self.session.grid, stream=self.stream)
            self.prompt_answer()
        print_win_summary(self.session, stream=self.stream)
        return self.session


def choose_board(
    generator: BoardGenerator,
    words: Sequence[str],
    input_fn: Callable[[str], str] = input,
    stream=None,
    size: Optional[int] = None,
) -> BoardResult:
    """Generate boards until the player accepts one."""

    stream = stream or sys.stdout
    while True:
        result = generator.generate(words, size=size)
        print(file=stream)
        print(format_grid(result.grid), file=stream)
        print(file=stream)
        print(format_board_info(result.grid), file=stream)
        answer = input_fn("Press Enter to start or enter R to generate a new board. ")
        if answer.strip().lower() != REGENERATE_COMMAND:
            return result
        LOGGER.info("Regenerating board on request")
