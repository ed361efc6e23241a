# apps/cli/play.py
"""
Interactive word game in the terminal.

This script:
  1) Loads a dictionary (every 5-letter token, lower-cased) and prints a
     one-line report about it.
  2) Starts a session with a random (or given) answer.
  3) Reads commands until EOF, Ctrl-C or `quit`:
       <word>   guess a word
       search   list every dictionary word still consistent with the guesses
       help     show the commands

Run:
  python -m apps.cli.play --dictionary /usr/share/dict/words --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random
import shlex
import sys
from typing import List, Optional

try:
    import readline  # noqa: F401  (line editing and history for input())
except ImportError:
    pass

from wordgame.datasets import DEFAULT_DICTIONARY, load_dictionary, pretty_summary, validate_dictionary
from wordgame.engine.validation import WORD_LENGTH
from wordgame.errors import InvalidLengthError, WordGameError
from wordgame.game import GameSession
from wordgame.render import BaseRenderer, create_renderer, format_outcome, get_renderer_ids

log = logging.getLogger(__name__)

PROMPT = "> "
QUIT_COMMANDS = ("quit", "exit", "q")
HELP_TEXT = (
    "commands:\n"
    f"  <word>   guess a {WORD_LENGTH}-letter word\n"
    "  search   list the words still consistent with your guesses\n"
    "  help     show this message\n"
    "  quit     leave the game\n"
)


def handle_line(session: GameSession, line: str, renderer: BaseRenderer) -> Optional[str]:
    """
    Run one input line against the session and return the text to print.
    Returns None when the user asked to quit.
    """
    try:
        args = shlex.split(line)
    except ValueError as e:
        return f"could not parse input: {e}\n"
    if not args:
        return ""

    cmd = args[0].lower()
    if cmd in QUIT_COMMANDS and len(args) == 1:
        return None
    if cmd == "help":
        return HELP_TEXT
    if cmd == "search":
        # "search" has 6 letters, so it can never collide with a guess.
        words = sorted(session.search())
        return "".join(w + "\n" for w in words)

    if len(args) != 1:
        return "usage: <word>\n"
    try:
        outcome = session.guess(args[0])
    except InvalidLengthError as e:
        return f"{e.word!r} does not have {e.expected} characters\n"
    return format_outcome(outcome, renderer)


def run(session: GameSession, renderer: BaseRenderer) -> int:
    print(f"Guess a {WORD_LENGTH}-letter word. Type 'help' for commands.")
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            return 0
        except KeyboardInterrupt:
            print()
            log.debug("interrupted")
            return 0

        out = handle_line(session, line, renderer)
        if out is None:
            return 0
        sys.stdout.write(out)
        sys.stdout.flush()


def _default_renderer() -> str:
    return "ansi" if sys.stdout.isatty() else "plain"


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="wordgame — guess the hidden word")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY,
                    help="path to a word list (any whitespace-separated tokens)")
    ap.add_argument("--answer", help="fix the answer instead of drawing one at random")
    ap.add_argument("--seed", type=int, help="RNG seed for the answer draw (reproducible games)")
    ap.add_argument("--renderer", choices=get_renderer_ids(),
                    help="feedback style (default: ansi on a terminal, plain otherwise)")
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    rep = validate_dictionary(args.dictionary, WORD_LENGTH)
    log.info(pretty_summary(rep))

    try:
        words = load_dictionary(args.dictionary, WORD_LENGTH)
        session = GameSession(words, args.answer, rng=random.Random(args.seed))
    except FileNotFoundError as e:
        log.error("dictionary not found: %s", e)
        return 1
    except WordGameError as e:
        log.error("%s", e)
        return 1

    renderer = create_renderer(args.renderer or _default_renderer())
    return run(session, renderer)


if __name__ == "__main__":
    sys.exit(main())
