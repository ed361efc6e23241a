import random

import pytest
from wordgame import (
    EmptyDictionaryError,
    GameSession,
    GameState,
    InvalidLengthError,
    LetterFeedback,
    new_session,
)

DICTIONARY = {"crane", "slate", "trace", "grape"}


@pytest.fixture
def session():
    return GameSession(DICTIONARY, "crane")


def test_search_before_any_guess_is_whole_dictionary(session):
    assert session.search() == DICTIONARY
    assert session.state is GameState.IN_PROGRESS
    assert session.history == ()


def test_guess_records_dictionary_word(session):
    out = session.guess("slate")
    assert out.guess == "slate"
    assert out.in_dictionary is True
    assert out.won is False
    assert [f.value for f in out.feedback] == ["-", "-", "G", "-", "G"]
    assert session.history == ("slate",)
    assert [o.guess for o in out.board] == ["slate"]
    assert session.search() == {"crane", "grape"}


def test_wrong_length_guess_changes_nothing(session):
    session.guess("slate")
    before = session.search()
    with pytest.raises(InvalidLengthError):
        session.guess("cran")
    with pytest.raises(InvalidLengthError):
        session.guess("cranes")
    with pytest.raises(InvalidLengthError):
        session.guess("crane ")
    assert session.history == ("slate",)
    assert session.search() == before


def test_non_dictionary_guess_is_not_evidence(session):
    before = session.search()
    out = session.guess("zzzzz")
    assert out.in_dictionary is False
    assert out.won is False
    assert out.feedback == (LetterFeedback.ABSENT,) * 5
    assert out.board == ()
    assert session.history == ()
    assert session.search() == before


def test_winning_guess(session):
    out = session.guess("CRANE")
    assert out.won is True and out.in_dictionary is True
    assert session.won and session.state is GameState.WON
    assert "crane" in session.search()


def test_won_is_terminal(session):
    session.guess("crane")
    out = session.guess("slate")
    assert out.won is False
    assert session.state is GameState.WON
    assert session.history == ("crane", "slate")


def test_search_is_idempotent(session):
    session.guess("grape")
    assert session.search() == session.search()


def test_seeded_answer_is_reproducible():
    words = {"crane", "slate", "trace", "grape", "raise", "stare"}
    a = GameSession(words, rng=random.Random(42))
    b = GameSession(words, rng=random.Random(42))
    assert a.answer == b.answer
    assert a.answer in words


def test_dictionary_is_normalized():
    s = GameSession(["CRANE", "Slate", "cat", "cranes", "crane"], "crane")
    assert s.dictionary == frozenset({"crane", "slate"})


def test_answer_outside_dictionary_is_added():
    s = new_session({"slate", "grape"}, "Crane")
    assert s.answer == "crane"
    assert "crane" in s.dictionary
    assert s.guess("crane").in_dictionary is True


def test_invalid_answer_length():
    with pytest.raises(InvalidLengthError):
        GameSession(DICTIONARY, "cat")


@pytest.mark.parametrize("words", [set(), {"cat", "horses"}])
def test_empty_dictionary_without_answer(words):
    with pytest.raises(EmptyDictionaryError):
        GameSession(words)


def test_empty_dictionary_with_answer_is_fine():
    s = GameSession(set(), "crane")
    assert s.search() == {"crane"}
