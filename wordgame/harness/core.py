"""
Audit harness primitives.

- run_case:  play one seeded game against a fixed answer and check the
             search invariants after every guess.
- run_batch: run many cases in sequence (optionally a sample prefix).

Checked after each recorded guess:
  - sound:    the answer is still among session.search()
  - monotone: the candidate count never grows

Guess strategies:
  - "consistent": pick uniformly from the current candidates (finishes fast)
  - "random":     pick uniformly from the whole dictionary (probes more)

These functions are UI-agnostic so they can be reused by the CLI, a
notebook, or the test-suite.
"""

from __future__ import annotations
import logging
import random
import time
from typing import Dict, Iterable, List, Tuple

from wordgame.engine import pattern_string
from wordgame.game import GameSession

log = logging.getLogger(__name__)

STRATEGIES = ("consistent", "random")
DEFAULT_TURNS = 6


def run_case(
        answer: str,
        *,
        dictionary: Iterable[str],
        turns: int = DEFAULT_TURNS,
        strategy: str = "consistent",
        seed: int | None = None,
) -> Dict:
    """
    Play one game until it is won or `turns` guesses were made.

    Returns:
        dict with keys:
            answer, strategy, won (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), remaining (list[int], candidate
            count before the first guess and after each one), sound, monotone
    """
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown strategy: {strategy}. Available: {list(STRATEGIES)}")
    if turns < 1:
        raise ValueError(f"turns must be >= 1; got {turns}")

    rng = random.Random(seed)
    session = GameSession(dictionary, answer, rng=rng)
    pool = sorted(session.dictionary)

    history: List[Tuple[str, str]] = []
    cands = session.search()
    remaining = [len(cands)]
    sound = session.answer in cands
    monotone = True

    t0 = time.perf_counter()
    for _ in range(turns):
        choices = sorted(cands) if strategy == "consistent" and cands else pool
        guess = rng.choice(choices)
        outcome = session.guess(guess)
        history.append((outcome.guess, pattern_string(outcome.feedback)))

        cands = session.search()
        if session.answer not in cands:
            sound = False
            log.warning("answer %r dropped from candidates after %r", session.answer, guess)
        if len(cands) > remaining[-1]:
            monotone = False
            log.warning("candidates grew from %d to %d after %r",
                        remaining[-1], len(cands), guess)
        remaining.append(len(cands))

        if outcome.won:
            break
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "answer": session.answer,
        "strategy": strategy,
        "won": session.won,
        "guesses": len(history),
        "time_ms": dt,
        "history": history,
        "remaining": remaining,
        "sound": sound,
        "monotone": monotone,
    }


def run_batch(
        answers: List[str],
        *,
        dictionary: Iterable[str],
        turns: int = DEFAULT_TURNS,
        strategy: str = "consistent",
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers are used to speed up quick checks.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    words = frozenset(dictionary)
    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, ans in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(ans, dictionary=words, turns=turns,
                            strategy=strategy, seed=case_seed))
    return out
