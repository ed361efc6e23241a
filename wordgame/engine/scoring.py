"""
Per-letter feedback for a single (guess, answer) pair.

Conventions (the enum values double as pattern characters):
  - EXACT   'G' : correct letter in the correct position
  - PRESENT 'Y' : letter occurs in the answer, but not here
  - ABSENT  '-' : letter not in the answer, or all of its copies are
                  already claimed by other positions of the guess

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all EXACT positions and counts the answer letters that
     were not matched exactly.
  2) Second pass walks the guess left to right and marks PRESENT only while
     the letter still has an unconsumed copy; each PRESENT consumes one.

A plain `letter in answer` test would over-report repeated letters, e.g.
"speed" against "erase" must yield only two PRESENT 'e's if the answer had
two, and only one if it had one.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Iterable, Tuple

from .validation import WORD_LENGTH, require_length


class LetterFeedback(str, Enum):
    EXACT = "G"
    PRESENT = "Y"
    ABSENT = "-"

    def __str__(self) -> str:
        return self.value


# A full evaluation: one LetterFeedback per position, aligned with the guess.
Feedback = Tuple[LetterFeedback, ...]


def evaluate(guess: str, answer: str) -> Feedback:
    """
    Compute feedback for `guess` against `answer`.

    Both words are lower-cased; either one having the wrong length
    raises InvalidLengthError.

    Examples:
      pattern_string(evaluate("belle", "level")) -> "-GYYY"
      pattern_string(evaluate("speed", "erase")) -> "Y-YY-"
    """
    guess = require_length(guess)
    answer = require_length(answer)

    out = [LetterFeedback.ABSENT] * WORD_LENGTH

    # Pass 1: exact matches; everything else in the answer stays available.
    remaining: Counter[str] = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            out[i] = LetterFeedback.EXACT
        else:
            remaining[a] += 1

    # Pass 2: left-to-right present assignment, capped by multiplicity.
    for i, g in enumerate(guess):
        if out[i] is LetterFeedback.EXACT:
            continue
        if remaining[g] > 0:
            out[i] = LetterFeedback.PRESENT
            remaining[g] -= 1

    return tuple(out)


def is_solved(feedback: Iterable[LetterFeedback]) -> bool:
    fb = tuple(feedback)
    return len(fb) == WORD_LENGTH and all(f is LetterFeedback.EXACT for f in fb)


def pattern_string(feedback: Iterable[LetterFeedback]) -> str:
    """Join feedback into a compact pattern such as "--G-G"."""
    return "".join(f.value for f in feedback)


def parse_pattern(pattern: str) -> Feedback:
    """
    Inverse of pattern_string. Accepts G/Y/- (case-insensitive).

    Raises ValueError on an unknown character or a wrong length.
    """
    p = pattern.strip().upper()
    if len(p) != WORD_LENGTH:
        raise ValueError(f"pattern {pattern!r} must have {WORD_LENGTH} characters")
    try:
        return tuple(LetterFeedback(ch) for ch in p)
    except ValueError as e:
        raise ValueError(f"pattern {pattern!r} may only contain 'G', 'Y' or '-'") from e
