"""
Vectorised dictionary index.

WordIndex keeps the dictionary as an (n, WORD_LENGTH) matrix of code points
so a ConstraintSet can be applied as a handful of boolean masks instead of a
Python loop per word. The result is always the same set that
filter_candidates() returns for the same words and constraints.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Set

import numpy as np

from .constraints import ConstraintSet
from .validation import WORD_LENGTH


class WordIndex:
    def __init__(self, words: Iterable[str]):
        # Sorted for a stable row order; lengths other than WORD_LENGTH are dropped.
        self.words: List[str] = sorted({w for w in words if len(w) == WORD_LENGTH})
        self.codes = np.array(
            [[ord(ch) for ch in w] for w in self.words], dtype=np.int32
        ).reshape(-1, WORD_LENGTH)
        self._count_cache: Dict[str, np.ndarray] = {}

    def __len__(self) -> int:
        return len(self.words)

    def _letter_counts(self, ch: str) -> np.ndarray:
        """Occurrences of `ch` in every word (cached per letter)."""
        counts = self._count_cache.get(ch)
        if counts is None:
            counts = (self.codes == ord(ch)).sum(axis=1)
            self._count_cache[ch] = counts
        return counts

    def mask(self, constraints: ConstraintSet) -> np.ndarray:
        n = len(self.words)
        if constraints.inconsistent:
            return np.zeros(n, dtype=bool)

        keep = np.ones(n, dtype=bool)
        for i, ch in constraints.exact.items():
            keep &= self.codes[:, i] == ord(ch)

        for ch, (lo, hi) in constraints.bounds().items():
            counts = self._letter_counts(ch)
            keep &= counts >= lo
            if hi is not None:
                keep &= counts == hi
        return keep

    def filter(self, constraints: ConstraintSet) -> Set[str]:
        return {self.words[i] for i in np.flatnonzero(self.mask(constraints))}
