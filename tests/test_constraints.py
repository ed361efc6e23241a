import itertools

import pytest
from wordgame.errors import InvalidLengthError
from wordgame.engine import (
    ConstraintSet,
    Observation,
    WordIndex,
    build_constraints,
    candidates,
    candidates_from_feedback,
    evaluate,
    filter_candidates,
    parse_pattern,
)

WORDS = [
    "crane", "slate", "trace", "grape", "raise", "stare", "cared", "racer",
    "those", "verse", "geese", "prose", "these", "chose", "horse", "sense",
    "lease", "level", "lever", "belle", "hello", "speed", "erase", "eases",
    "total", "allot", "stoal", "tally", "alloy", "atoll", "scoop", "cools",
]


def test_slate_against_crane_scenario():
    dictionary = {"crane", "slate", "trace", "grape"}
    fb = evaluate("slate", "crane")
    assert [f.value for f in fb] == ["-", "-", "G", "-", "G"]

    result = candidates(["slate"], "crane", dictionary)
    # "slate" and "trace" contain letters shown absent (s, l, t)
    assert result == {"crane", "grape"}


def test_no_history_keeps_whole_dictionary():
    assert candidates([], "crane", WORDS) == set(WORDS)


def test_exact_letter_exhausted_by_green():
    # "geese" vs "those": only the final 'e' is in the answer
    cs = build_constraints([Observation("geese", evaluate("geese", "those"))])
    assert cs.exact == {3: "s", 4: "e"}
    assert cs.exact_counts == {"g": 0, "e": 1}
    assert cs.min_counts == {"e": 1, "s": 1}

    result = filter_candidates(WORDS, cs)
    assert result == {"those", "prose", "chose", "horse", "raise"}


def test_lower_bound_then_exact_count():
    cs = build_constraints([Observation("speed", parse_pattern("Y-YY-"))])
    assert cs.min_counts == {"s": 1, "e": 2}
    assert cs.exact_counts == {"p": 0, "d": 0}
    assert cs.matches("erase")
    # three e's still satisfy a lower bound of two
    assert cs.matches("geese")

    # an ABSENT 'e' pins the count to exactly the revealed copies
    cs.add("eeeee", parse_pattern("G---G"))
    assert cs.exact_counts["e"] == 2
    assert cs.matches("erase")
    assert not cs.matches("geese")
    assert not cs.matches("eases")


def test_max_lower_bound_wins_across_guesses():
    cs = ConstraintSet()
    cs.add("lemon", parse_pattern("GG---"))
    cs.add("belle", parse_pattern("-GYYY"))
    assert cs.min_counts["l"] == 2
    assert cs.min_counts["e"] == 2
    assert filter_candidates(WORDS, cs) == {"level"}


def test_contradictory_feedback_matches_nothing():
    cs = ConstraintSet()
    cs.add("aaaaa", parse_pattern("G----"))
    cs.add("aaaaa", parse_pattern("GG---"))
    assert cs.inconsistent
    assert not cs.matches("aaaaa")
    assert filter_candidates(WORDS + ["aaaaa", "aabcd"], cs) == set()
    assert WordIndex(WORDS).filter(cs) == set()


def test_candidates_from_feedback_without_answer():
    obs = [Observation("raise", parse_pattern("YY--G"))]
    cand = candidates_from_feedback(obs, WORDS)
    assert "crane" in cand
    assert "stare" not in cand and "scoop" not in cand


def test_observation_shape_is_checked():
    cs = ConstraintSet()
    with pytest.raises(ValueError):
        cs.add("cran", parse_pattern("GGGGG"))


@pytest.mark.parametrize("answer", ["crane", "those", "level", "total", "erase"])
def test_answer_survives_and_candidates_shrink(answer):
    history = []
    prev = candidates(history, answer, WORDS)
    assert answer in prev
    for g in ["speed", "allot", "horse", "slate", "belle", "cools"]:
        history.append(g)
        cur = candidates(history, answer, WORDS)
        assert answer in cur
        assert cur <= prev
        prev = cur


def test_index_agrees_with_reference_filter():
    index = WordIndex(WORDS)
    assert len(index) == len(set(WORDS))
    for answer, guesses in itertools.product(["crane", "geese", "level", "atoll"],
                                             [("slate",), ("speed", "lever"), ("allot", "belle", "chose")]):
        cs = build_constraints(Observation(g, evaluate(g, answer)) for g in guesses)
        assert index.filter(cs) == filter_candidates(WORDS, cs)


def test_index_handles_empty_dictionary():
    index = WordIndex([])
    assert index.filter(ConstraintSet()) == set()


def test_history_case_is_folded():
    dictionary = {"crane", "slate", "trace", "grape"}
    assert candidates(["SLATE"], "crane", dictionary) == {"crane", "grape"}
    assert candidates(["Slate", "GRAPE"], "CRANE", dictionary) == {"crane"}


def test_padded_history_word_is_rejected():
    with pytest.raises(InvalidLengthError):
        candidates([" slate"], "crane", {"crane", "slate"})


@pytest.mark.parametrize("feedback", ["--G-G", "--g-g", ["-", "-", "G", "-", "G"]])
def test_plain_pattern_feedback_is_understood(feedback):
    cs = ConstraintSet()
    cs.add("slate", feedback)
    assert cs.exact == {2: "a", 4: "e"}
    assert cs.exact_counts == {"s": 0, "l": 0, "t": 0}
    assert candidates_from_feedback([("slate", feedback)], WORDS) == \
        candidates(["slate"], "crane", WORDS)


@pytest.mark.parametrize("feedback", ["--X-G", ["-", "-", "B", "-", "G"], "--G-"])
def test_unknown_feedback_is_rejected(feedback):
    with pytest.raises(ValueError):
        ConstraintSet().add("slate", feedback)


def test_filter_builds_bounds_once(monkeypatch):
    cs = build_constraints([Observation("speed", evaluate("speed", "erase"))])
    calls = []
    original = ConstraintSet.bounds

    def counting(self):
        calls.append(1)
        return original(self)

    monkeypatch.setattr(ConstraintSet, "bounds", counting)
    assert filter_candidates(WORDS, cs) == {w for w in WORDS if cs.matches(w, original(cs))}
    assert len(calls) == 1
