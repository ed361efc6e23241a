"""
ANSI colour renderer (colorama).

Cells are " X " on a green / yellow / white background with black text.
colorama translates the escape codes on Windows consoles; on other
platforms they pass through unchanged.
"""

from __future__ import annotations

from colorama import Back, Fore, Style, just_fix_windows_console

from wordgame.engine import LetterFeedback
from .base import BaseRenderer, register

BACKGROUNDS = {
    LetterFeedback.EXACT: Back.GREEN,
    LetterFeedback.PRESENT: Back.YELLOW,
    LetterFeedback.ABSENT: Back.WHITE,
}


@register
class AnsiRenderer(BaseRenderer):
    id = "ansi"
    name = "ANSI colour"

    def __init__(self):
        just_fix_windows_console()

    def cell(self, letter: str, feedback: LetterFeedback) -> str:
        return f"{BACKGROUNDS[feedback]}{Fore.BLACK} {letter.upper()} {Style.RESET_ALL}"
