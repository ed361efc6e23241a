"""
Word shape checks shared by the engine and the game session.

A word is any token of exactly WORD_LENGTH characters; case is folded to
lower-case. Whitespace is not trimmed, so "crane " is six characters and
rejected. No alphabet check is made: the dictionary decides what counts as
a word, not this module.
"""

from __future__ import annotations

from typing import Container

from wordgame.errors import InvalidLengthError

# Single source of truth for the game's word length.
WORD_LENGTH = 5


def normalize_word(word: str) -> str:
    """Canonical form used everywhere in the core: lower-case."""
    return word.lower()


def require_length(word: str, N: int = WORD_LENGTH) -> str:
    """
    Return the normalized `word`, or raise InvalidLengthError if it is not
    exactly N characters long.
    """
    if len(word) != N:
        raise InvalidLengthError(word, N)
    return normalize_word(word)


def validate_guess(word: str, allowed: Container[str], N: int = WORD_LENGTH) -> bool:
    """
    Return True if `word` has the right shape and is a member of `allowed`.

    Args:
      word    : proposed guess
      allowed : set of normalized dictionary words (membership is O(1) for sets)
      N       : required word length

    Unlike require_length, a wrong-shaped word is simply reported as invalid.
    """
    if not isinstance(word, str) or len(word) != N:
        return False
    return normalize_word(word) in allowed
