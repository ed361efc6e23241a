"""
Dictionary report for wordgame.

What this module does:
- Inspect a word list the way load_dictionary() will read it.
- Count tokens, usable N-letter words, duplicates (after lower-casing) and
  skipped tokens; compute the SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordgame.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("/usr/share/dict/words")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List
import hashlib

from wordgame.engine.validation import WORD_LENGTH
from .io import read_tokens


@dataclass
class DictionaryReport:
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    N: int               # required word length
    tokens: int          # whitespace-separated tokens in the file
    count: int           # tokens of length N (before dedupe)
    unique_count: int    # distinct words after lower-casing
    skipped: int         # tokens dropped for having the wrong length
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_dictionary(path: str, N: int = WORD_LENGTH) -> Dict:
    """
    Inspect the word list at `path` for length-N words.

    Returns a JSON-serializable dict (see DictionaryReport). `passed` is True
    when the file exists and holds at least one usable word; duplicates and
    skipped tokens are reported as issues but do not fail the check, since
    loading removes them anyway.
    """
    p = Path(path)
    if not p.exists():
        rep = DictionaryReport(
            path=path, exists=False, N=N, tokens=0, count=0, unique_count=0,
            skipped=0, sha256="", passed=False,
            issues=[f"dictionary file not found: {path}"],
        )
        return asdict(rep)

    tokens = read_tokens(p)
    words = [t.lower() for t in tokens if len(t) == N]
    unique = set(words)

    issues: List[str] = []
    if not words:
        issues.append(f"dictionary contains 0 words of length {N}")
    if len(words) != len(unique):
        issues.append(f"dictionary has {len(words) - len(unique)} duplicate word(s)")
    skipped = len(tokens) - len(words)
    if skipped:
        issues.append(f"{skipped} token(s) skipped (length != {N})")

    rep = DictionaryReport(
        path=str(p),
        exists=True,
        N=N,
        tokens=len(tokens),
        count=len(words),
        unique_count=len(unique),
        skipped=skipped,
        sha256=_sha256_file(p),
        passed=bool(words),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | words=10230 (uniq=9875, sha=abc123def456) | skipped=225911 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| skipped={report['skipped']} | {status}"
    )
