"""
Candidate filtering given game history.

Given:
  - a dictionary of words
  - a history of observations (guess, feedback)

Return:
  - the dictionary words consistent with ALL feedback seen so far.

The history is first folded into a ConstraintSet:
  - exact        : position -> letter, from every EXACT cell
  - min_counts   : letter -> lower bound, the number of non-ABSENT copies of
                   the letter within a single guess (max over all guesses)
  - exact_counts : letter -> true count, recorded once a guess shows an
                   ABSENT copy of the letter; the non-ABSENT copies in that
                   guess are then all the answer has (0 for an all-ABSENT
                   letter)

A word matches iff it has every exact letter in place, and every letter
count satisfies its bound (>= min, == exact where known).
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, NamedTuple, Optional, Sequence, Set

from .scoring import Feedback, LetterFeedback, evaluate, parse_pattern
from .validation import WORD_LENGTH, normalize_word, require_length

log = logging.getLogger(__name__)


class Observation(NamedTuple):
    guess: str
    feedback: Feedback


@dataclass
class ConstraintSet:
    exact: Dict[int, str] = field(default_factory=dict)
    min_counts: Dict[str, int] = field(default_factory=dict)
    exact_counts: Dict[str, int] = field(default_factory=dict)
    # Set when observations contradict each other; nothing matches then.
    inconsistent: bool = False

    def add(self, guess: str, feedback: Sequence[LetterFeedback] | str) -> None:
        """
        Fold one observation into the set.

        `feedback` may be a pattern string such as "--G-G" or any sequence of
        LetterFeedback / 'G', 'Y', '-' cells; an unknown cell raises ValueError.
        """
        if isinstance(feedback, str):
            cells = parse_pattern(feedback)
        else:
            try:
                cells = tuple(LetterFeedback(fb) for fb in feedback)
            except ValueError as e:
                raise ValueError(f"feedback {feedback!r} may only hold 'G', 'Y' or '-'") from e
        if len(guess) != WORD_LENGTH or len(cells) != WORD_LENGTH:
            raise ValueError(
                f"observation ({guess!r}, {feedback!r}) must have {WORD_LENGTH} positions")
        guess = normalize_word(guess)

        revealed: Counter[str] = Counter()
        saw_absent: Set[str] = set()

        for i, (ch, fb) in enumerate(zip(guess, cells)):
            if fb is LetterFeedback.EXACT:
                prev = self.exact.setdefault(i, ch)
                if prev != ch:
                    log.debug("position %d required both %r and %r", i, prev, ch)
                    self.inconsistent = True
                revealed[ch] += 1
            elif fb is LetterFeedback.PRESENT:
                revealed[ch] += 1
            else:
                saw_absent.add(ch)

        for ch, k in revealed.items():
            if k > self.min_counts.get(ch, 0):
                self.min_counts[ch] = k

        # An ABSENT copy means every copy the answer has was revealed here.
        for ch in saw_absent:
            k = revealed[ch]
            prev = self.exact_counts.setdefault(ch, k)
            if prev != k:
                log.debug("letter %r counted both %d and %d times", ch, prev, k)
                self.inconsistent = True

    def bounds(self) -> Dict[str, tuple]:
        """
        Per-letter (low, high) occurrence bounds; high is None when open.
        """
        out: Dict[str, tuple] = {}
        for ch, lo in self.min_counts.items():
            out[ch] = (lo, None)
        for ch, n in self.exact_counts.items():
            lo = max(n, self.min_counts.get(ch, 0))
            out[ch] = (lo, n)
        return out

    def matches(self, word: str, bounds: Optional[Dict[str, tuple]] = None) -> bool:
        """
        True if `word` satisfies every constraint. Pass `bounds` (from
        bounds()) when testing many words so it is not rebuilt per word.
        """
        if self.inconsistent or len(word) != WORD_LENGTH:
            return False

        for i, ch in self.exact.items():
            if word[i] != ch:
                return False

        counts = Counter(word)
        for ch, (lo, hi) in (self.bounds() if bounds is None else bounds).items():
            n = counts[ch]
            if n < lo or (hi is not None and n != hi):
                return False
        return True


def build_constraints(observations: Iterable[Observation]) -> ConstraintSet:
    cs = ConstraintSet()
    for guess, feedback in observations:
        cs.add(guess, feedback)
    return cs


def filter_candidates(words: Iterable[str], constraints: ConstraintSet) -> Set[str]:
    """Keep the words that satisfy `constraints` (no particular order)."""
    bounds = constraints.bounds()
    return {w for w in words if constraints.matches(w, bounds)}


def candidates_from_feedback(observations: Iterable[Observation],
                             dictionary: Iterable[str]) -> Set[str]:
    """
    Filter `dictionary` against recorded feedback. This is the entry point
    for callers that never saw the answer, e.g. when solving someone else's
    game from the colours they report.
    """
    return filter_candidates(dictionary, build_constraints(observations))


def candidates(history: Iterable[str], answer: str, dictionary: Iterable[str]) -> Set[str]:
    """
    All dictionary words consistent with the feedback each guess in
    `history` produced against `answer`.
    """
    observations = [Observation(require_length(g), evaluate(g, answer)) for g in history]
    return candidates_from_feedback(observations, dictionary)
