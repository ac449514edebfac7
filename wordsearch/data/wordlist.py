"""Word list loading."""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

from ..core.exceptions import WordListLoadError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

DEFAULT_WORD_LIST = Path("default.txt")


def parse_word_list(text: str) -> Tuple[str, ...]:
    """Split newline-delimited text into words.

    Line terminators are dropped and blank lines skipped; each remaining
    line is kept verbatim.
    """

    return tuple(line for line in text.splitlines() if line)


def load_word_list(path: Path | str = DEFAULT_WORD_LIST) -> Tuple[str, ...]:
    """Read the word list at ``path``, one word per line."""

    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise WordListLoadError(f"Cannot read word list {source}: {exc}") from exc
    words = parse_word_list(text)
    LOGGER.info("Loaded %s words from %s", len(words), source)
    return words
