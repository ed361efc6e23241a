"""
Error taxonomy for the word game core.

Everything subclasses ValueError so callers that already guard bad
arguments with `except ValueError` keep working.
"""

from __future__ import annotations


class WordGameError(ValueError):
    """Base class for errors raised by the game core."""


class InvalidLengthError(WordGameError):
    """An answer or guess does not have the required word length."""

    def __init__(self, word: str, expected: int):
        self.word = word
        self.expected = expected
        super().__init__(f"word {word!r} must have {expected} characters, not {len(word)}")


class EmptyDictionaryError(WordGameError):
    """No word of the required length is available to pick an answer from."""
