"""
Game session: the hidden answer, the dictionary, and the guesses so far.

A session is created once per game and then driven by two calls:
  - guess(word): score a guess; dictionary words are recorded as evidence
  - search():    every dictionary word still consistent with that evidence

Randomness for picking an answer is injected (random.Random), so a seeded
generator gives a reproducible game. Sessions hold no locks; one caller
drives one session.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Set, Tuple

from wordgame.engine import (
    Feedback,
    Observation,
    WordIndex,
    build_constraints,
    evaluate,
    is_solved,
    normalize_word,
    require_length,
    validate_guess,
)
from wordgame.engine.validation import WORD_LENGTH
from wordgame.errors import EmptyDictionaryError

log = logging.getLogger(__name__)


class GameState(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"


@dataclass(frozen=True)
class GuessOutcome:
    """
    Result of one guess.

    `feedback` is always computed, even for words outside the dictionary, so
    the caller can display it. `board` is the recorded history (with
    feedback) right after this guess; a rejected word is not on it.
    """
    guess: str
    in_dictionary: bool
    won: bool
    feedback: Feedback
    board: Tuple[Observation, ...]


class GameSession:
    def __init__(self, dictionary: Iterable[str], answer: Optional[str] = None, *,
                 rng: Optional[random.Random] = None):
        words = frozenset(
            w for w in (normalize_word(d) for d in dictionary) if len(w) == WORD_LENGTH
        )

        if answer is None:
            if not words:
                raise EmptyDictionaryError(
                    f"no {WORD_LENGTH}-letter words to choose an answer from")
            rng = rng or random.Random()
            # Sorted so that a seeded generator picks the same word every run.
            answer = rng.choice(sorted(words))
        else:
            answer = require_length(answer)
            if answer not in words:
                log.warning("answer is not in the dictionary; adding it")
                words = words | {answer}

        self._answer: str = answer
        self._dictionary: frozenset = words
        self._history: List[str] = []
        self._state = GameState.IN_PROGRESS
        self._index = WordIndex(words)
        log.debug("new session: %d words, answer=%r", len(words), answer)

    # -------------------------
    # Core API
    # -------------------------
    def guess(self, word: str) -> GuessOutcome:
        w = require_length(word)
        feedback = evaluate(w, self._answer)

        in_dictionary = validate_guess(w, self._dictionary)
        if in_dictionary:
            self._history.append(w)

        won = is_solved(feedback)
        if won:
            self._state = GameState.WON

        log.debug("guess %r in_dictionary=%s won=%s history=%d",
                  w, in_dictionary, won, len(self._history))
        return GuessOutcome(
            guess=w,
            in_dictionary=in_dictionary,
            won=won,
            feedback=feedback,
            board=self.observations(),
        )

    def search(self) -> Set[str]:
        """
        Dictionary words consistent with every recorded guess. Before the
        first guess this is the whole dictionary.
        """
        constraints = build_constraints(self.observations())
        return self._index.filter(constraints)

    # -------------------------
    # Introspection helpers
    # -------------------------
    def observations(self) -> Tuple[Observation, ...]:
        return tuple(Observation(g, evaluate(g, self._answer)) for g in self._history)

    @property
    def answer(self) -> str:
        return self._answer

    @property
    def dictionary(self) -> frozenset:
        return self._dictionary

    @property
    def history(self) -> Tuple[str, ...]:
        return tuple(self._history)

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def won(self) -> bool:
        return self._state is GameState.WON


def new_session(dictionary: Iterable[str], answer: Optional[str] = None, *,
                rng: Optional[random.Random] = None) -> GameSession:
    """Factory mirroring GameSession(...)."""
    return GameSession(dictionary, answer, rng=rng)
