"""Per-letter case helpers that keep one character per grid cell."""

from __future__ import annotations


def lower_letter(char: str) -> str:
    """Lowercase ``char`` unless that would produce more than one character."""

    lowered = char.lower()
    return lowered if len(lowered) == 1 else char


def upper_letter(char: str) -> str:
    """Uppercase ``char`` only when the result is one character that lowercases back."""

    raised = char.upper()
    if len(raised) != 1 or lower_letter(raised) != lower_letter(char):
        return char
    return raised


def fold_lower(text: str) -> str:
    """Lowercase ``text`` letter by letter, preserving its length."""

    return "".join(lower_letter(char) for char in text)


__all__ = ["fold_lower", "lower_letter", "upper_letter"]
