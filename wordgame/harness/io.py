"""
I/O utilities for audit runs.

Responsibilities:
- write_csv:     flatten per-game results into a tidy CSV (one row per game).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Patterns are prefixed with an apostrophe to keep Excel from interpreting
  strings like "-GYY-" as formulas (which would display as #NAME?).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def _excel_safe_pattern(patt: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "-GYY-" -> "'-GYY-"
    """
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, turns: int) -> str:
    """
    Serialize a batch of audit results to CSV.

    Schema (columns):
      answer, strategy, won, guesses, sound, monotone, time_ms, left_0,
      guess_1, patt_1, left_1, ..., guess_turns, patt_turns, left_turns

    left_i is the candidate count after guess i (left_0: before any guess).
    Returns the path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["answer", "strategy", "won", "guesses", "sound", "monotone", "time_ms", "left_0"]
    for i in range(1, turns + 1):
        fields += [f"guess_{i}", f"patt_{i}", f"left_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            remaining = r.get("remaining", [])
            row = {
                "answer": r["answer"],
                "strategy": r.get("strategy", "?"),
                "won": r["won"],
                "guesses": r["guesses"],
                "sound": r["sound"],
                "monotone": r["monotone"],
                "time_ms": round(float(r["time_ms"]), 3),
                "left_0": remaining[0] if remaining else "",
            }

            # Expand history into fixed columns (Excel-safe patterns)
            hist = r.get("history", [])
            for i in range(1, turns + 1):
                if i <= len(hist):
                    g, patt = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"patt_{i}"] = _excel_safe_pattern(patt)
                    row[f"left_{i}"] = remaining[i] if i < len(remaining) else ""
                else:
                    row[f"guess_{i}"] = ""
                    row[f"patt_{i}"] = ""
                    row[f"left_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dictionary report.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (dictionary, sample, turns, seed, outdir)
      - dictionary: output of datasets.validate_dictionary(...)
      - num_cases, violations
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
