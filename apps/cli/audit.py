# apps/cli/audit.py
"""
Audit the search invariants against a real dictionary.

This script:
  1) Validates and loads the dictionary (prints counts + SHA).
  2) Plays seeded games (one per sampled answer) through the harness,
     checking after every guess that the answer is still a candidate and
     that the candidate count did not grow.
  3) Writes:
       - CSV:  per-game results + guess/pattern/remaining columns
       - JSON: manifest with config, dictionary report, git commit, etc.
  Exits with status 1 if any game broke an invariant.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

# Optional rich progress bar
try:
    from tqdm import tqdm  # pip install tqdm
    _HAS_TQDM = True
except ImportError:
    _HAS_TQDM = False

from wordgame.datasets import DEFAULT_DICTIONARY, load_dictionary, pretty_summary, validate_dictionary
from wordgame.engine.validation import WORD_LENGTH
from wordgame.harness import DEFAULT_TURNS, STRATEGIES, run_case
from wordgame.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown

log = logging.getLogger(__name__)


def main(argv=None) -> int:
    """
    Parse CLI args, validate the dictionary, run the audit with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordgame — audit search soundness and monotonicity")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY, help="path to a word list")
    ap.add_argument("--sample", type=int, default=200,
                    help="number of answers to play (deterministic by seed; 0 = all)")
    ap.add_argument("--turns", type=int, default=DEFAULT_TURNS, help="max guesses per game")
    ap.add_argument("--strategy", choices=STRATEGIES, default="consistent",
                    help="how guesses are drawn")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar if tqdm available, else plain text)."
    )
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # 1) Validate and load the dictionary
    rep = validate_dictionary(args.dictionary, WORD_LENGTH)
    print(pretty_summary(rep))
    if not rep["passed"]:
        log.error("dictionary unusable: %s", "; ".join(rep["issues"]))
        return 1
    words = load_dictionary(args.dictionary, WORD_LENGTH)

    # 2) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    pool = sorted(words)
    if args.sample and args.sample < len(pool):
        rng.shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = pool
    total = len(cases)

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if (_HAS_TQDM and sys.stderr.isatty()) else "plain"
    if mode == "bar" and not _HAS_TQDM:
        mode = "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Auditing", unit="game") if mode == "bar" else cases

    for idx, ans in enumerate(iterator, 1):
        r = run_case(ans, dictionary=words, turns=args.turns,
                     strategy=args.strategy, seed=args.seed + idx)
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    violations = [r["answer"] for r in results if not (r["sound"] and r["monotone"])]

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"audit_{run_id}.csv"
    manifest_path = outdir / f"audit_{run_id}_manifest.json"

    write_csv(results, str(csv_path), turns=args.turns)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": rep,
        "num_cases": len(results),
        "won": sum(1 for r in results if r["won"]),
        "violations": violations,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")

    if violations:
        log.error("%d game(s) broke an invariant, e.g. %s", len(violations), violations[:5])
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
