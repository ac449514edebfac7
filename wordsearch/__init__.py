"""Word search puzzle generator and console game.

This package exposes the public API surface via:

- ``wordsearch.engine.generator.BoardGenerator``: places a word list on a
  square board, growing the board until every word fits.
- ``wordsearch.engine.session.PuzzleSession``: checks coordinate answers
  against the board and tracks found words.
- ``wordsearch.data.wordlist.load_word_list``: reads newline-delimited word
  lists.
"""

from .engine.generator import BoardGenerator, BoardResult, GeneratorConfig, scramble_words
from .engine.session import PuzzleSession
from .data.wordlist import load_word_list

__all__ = [
    "BoardGenerator",
    "BoardResult",
    "GeneratorConfig",
    "PuzzleSession",
    "load_word_list",
    "scramble_words",
]

__version__ = "0.1.0"
