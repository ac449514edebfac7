"""CLI entrypoint for the word search puzzle game."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from wordsearch.core.constants import DEFAULT_PLACEMENT_ATTEMPTS, MAX_LABELED_SIZE
from wordsearch.core.exceptions import BoardSizeError, WordListLoadError
from wordsearch.data.wordlist import DEFAULT_WORD_LIST, load_word_list
from wordsearch.engine.generator import BoardGenerator, GeneratorConfig
from wordsearch.engine.session import PuzzleSession
from wordsearch.io.console import ConsoleGame, choose_board
from wordsearch.utils.logger import configure_logging
from wordsearch.utils.pretty import print_board_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a word search puzzle and play it in the terminal",
    )
    parser.add_argument(
        "words_file",
        nargs="?",
        type=Path,
        default=DEFAULT_WORD_LIST,
        help="File with one word per line (default: default.txt)",
    )
    parser.add_argument(
        "--size",
        type=int,
        help="Starting board side length (default: longest word length)",
    )
    parser.add_argument(
        "--max-size",
        type=int,
        default=MAX_LABELED_SIZE,
        help="Largest board side length to try before giving up",
    )
    parser.add_argument(
        "--attempts",
        type=int,
        default=DEFAULT_PLACEMENT_ATTEMPTS,
        help="Random placement attempts per word before the board grows",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--no-play",
        action="store_true",
        help="Print the generated board as JSON and exit",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    if args.size is not None and args.size < 1:
        parser.error("--size must be positive")
    if args.max_size > MAX_LABELED_SIZE and not args.no_play:
        parser.error(f"--max-size above {MAX_LABELED_SIZE} cannot be labeled for play")

    try:
        words = load_word_list(args.words_file)
    except WordListLoadError as exc:
        parser.error(str(exc))

    config = GeneratorConfig(
        size=args.size,
        seed=args.seed,
        placement_attempts=args.attempts,
        max_size=args.max_size,
    )
    generator = BoardGenerator(config)

    try:
        if args.no_play:
            result = generator.generate(words)
        else:
            result = choose_board(generator, words)
    except (BoardSizeError, ValueError) as exc:
        parser.error(str(exc))
    except (EOFError, KeyboardInterrupt):
        print()
        return

    if args.no_play:
        print_board_stats(result, stream=sys.stderr)
        print(json.dumps(result.grid.to_jsonable(), ensure_ascii=False, indent=2))
        return

    try:
        ConsoleGame(PuzzleSession.from_result(result)).run()
    except (EOFError, KeyboardInterrupt):
        print()


if __name__ == "__main__":  # pragma: no cover
    main()
