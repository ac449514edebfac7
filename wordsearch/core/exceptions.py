"""Custom exception hierarchy for word search generation and play."""


class WordSearchError(Exception):
    """Base exception for generator and session failures."""


class WordListLoadError(WordSearchError):
    """Raised when the word list file cannot be read."""


class PlacementError(WordSearchError):
    """Raised when a placement leaves the grid or overlaps an occupied cell."""


class BoardSizeError(WordSearchError):
    """Raised when the board would grow past the configured maximum size."""


class CoordinateError(WordSearchError):
    """Raised when coordinate input is malformed or off the board."""


class ValidationError(WordSearchError):
    """Raised when the finished grid fails its integrity checks."""
