from __future__ import annotations

from wordgame.engine import LetterFeedback
from .base import BaseRenderer, register

SQUARES = {
    LetterFeedback.EXACT: "\N{LARGE GREEN SQUARE}",
    LetterFeedback.PRESENT: "\N{LARGE YELLOW SQUARE}",
    LetterFeedback.ABSENT: "\N{WHITE LARGE SQUARE}",
}


@register
class EmojiRenderer(BaseRenderer):
    """Share grid: colours only, letters hidden."""
    id = "emoji"
    name = "Emoji share grid"
    sep = ""

    def cell(self, letter: str, feedback: LetterFeedback) -> str:
        return SQUARES[feedback]
