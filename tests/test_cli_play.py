import builtins
from pathlib import Path

import pytest
from apps.cli import play
from wordgame.game import GameSession
from wordgame.render import create_renderer


@pytest.fixture
def session():
    return GameSession({"crane", "slate", "trace", "grape"}, "crane")


@pytest.fixture
def plain():
    return create_renderer("plain")


def test_search_command_lists_sorted_candidates(session, plain):
    assert play.handle_line(session, "search", plain) == "crane\ngrape\nslate\ntrace\n"
    play.handle_line(session, "slate", plain)
    assert play.handle_line(session, "search", plain) == "crane\ngrape\n"


def test_guess_command(session, plain):
    assert play.handle_line(session, "trace", plain).startswith("trace is not correct.")
    assert play.handle_line(session, "crane", plain).startswith("crane is correct!")


def test_bad_input_keeps_going(session, plain):
    assert play.handle_line(session, "cat", plain) == "'cat' does not have 5 characters\n"
    assert play.handle_line(session, "two words", plain) == "usage: <word>\n"
    assert play.handle_line(session, "'oops", plain).startswith("could not parse input")
    assert play.handle_line(session, "   ", plain) == ""
    assert session.history == ()


def test_quit_and_help(session, plain):
    assert play.handle_line(session, "quit", plain) is None
    assert play.handle_line(session, "q", plain) is None
    assert "search" in play.handle_line(session, "help", plain)


def _dictionary(tmp_path: Path) -> str:
    p = tmp_path / "words"
    p.write_text("crane\nslate\ntrace\ngrape\ncat\n", encoding="utf-8")
    return str(p)


def test_main_plays_until_eof(tmp_path, monkeypatch, capsys):
    lines = iter(["slate", "search", "crane"])

    def fake_input(prompt=""):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr(builtins, "input", fake_input)
    rc = play.main(["--dictionary", _dictionary(tmp_path), "--answer", "crane",
                    "--renderer", "plain"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "slate is not correct." in out
    assert "grape\n" in out
    assert "crane is correct!" in out


def test_main_stops_on_ctrl_c(tmp_path, monkeypatch):
    def interrupted(prompt=""):
        raise KeyboardInterrupt

    monkeypatch.setattr(builtins, "input", interrupted)
    assert play.main(["--dictionary", _dictionary(tmp_path), "--seed", "1",
                      "--renderer", "plain"]) == 0


def test_main_missing_dictionary(tmp_path):
    assert play.main(["--dictionary", str(tmp_path / "missing")]) == 1


def test_main_rejects_bad_answer(tmp_path):
    assert play.main(["--dictionary", _dictionary(tmp_path), "--answer", "cat"]) == 1
