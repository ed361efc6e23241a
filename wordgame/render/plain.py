"""
Plain-text renderer.

Each cell is the upper-case letter followed by a marker, e.g. "C= R_ A-":
  =  exact
  -  present elsewhere
  _  absent (or all copies already claimed)
Works on any terminal and in logs.
"""

from __future__ import annotations

from wordgame.engine import LetterFeedback
from .base import BaseRenderer, register

MARKERS = {
    LetterFeedback.EXACT: "=",
    LetterFeedback.PRESENT: "-",
    LetterFeedback.ABSENT: "_",
}


@register
class PlainRenderer(BaseRenderer):
    id = "plain"
    name = "Plain text"

    def cell(self, letter: str, feedback: LetterFeedback) -> str:
        return letter.upper() + MARKERS[feedback]
