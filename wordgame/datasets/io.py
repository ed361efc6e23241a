from __future__ import annotations
from pathlib import Path
from typing import FrozenSet, List

from wordgame.engine.validation import WORD_LENGTH

# Where most Unix systems keep a word list.
DEFAULT_DICTIONARY = "/usr/share/dict/words"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def read_tokens(p: Path | str) -> List[str]:
    """All whitespace-separated tokens of a text file, in file order."""
    return [tok for ln in read_lines(p) for tok in ln.split()]


def load_dictionary(p: Path | str, N: int = WORD_LENGTH) -> FrozenSet[str]:
    """
    Build a game dictionary from a word list.

    Every whitespace-separated token of length N is a word; tokens are
    lower-cased and de-duplicated. No alphabet check: "o'er" would count.
    Raises FileNotFoundError if the path doesn't exist.
    """
    return frozenset(t.lower() for t in read_tokens(p) if len(t) == N)
