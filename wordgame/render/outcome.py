"""
Human-readable report of a guess.

format_outcome() produces a status line followed by the board:
  "<word> is correct!"      the guess won; board is the emoji share grid
  "<word> is not correct."  a dictionary word that is not the answer
  "<word> is not a word."   outside the dictionary; not on the board
"""

from __future__ import annotations

from wordgame.game import GuessOutcome
from .base import BaseRenderer
from .emoji import EmojiRenderer


def status_line(outcome: GuessOutcome) -> str:
    if outcome.won:
        return f"{outcome.guess} is correct!"
    if outcome.in_dictionary:
        return f"{outcome.guess} is not correct."
    return f"{outcome.guess} is not a word."


def format_outcome(outcome: GuessOutcome, renderer: BaseRenderer) -> str:
    board_renderer = EmojiRenderer() if outcome.won else renderer
    board = board_renderer.render_board(outcome.board)
    return status_line(outcome) + "\n" + board + "\n"
