# apps/cli/run_batch.py
"""
Batch evaluation: play every target in a word list (or a seeded sample of
them) with one selector and a fixed initial guess.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Plays one session per target with a progress bar.
  3) Writes:
       - CSV:  per-game results + guess/pattern/candidates-left columns
       - JSON: manifest with config, word list report, git commit, summary
"""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import List

from tqdm import tqdm

from wordle_solver.config import (
    DEFAULT_MODE, DEFAULT_OUTDIR, DEFAULT_SEED, DEFAULT_SELECTOR, SCORING_MODES,
)
from wordle_solver.datasets import load_words, pretty_summary, validate_wordlist
from wordle_solver.engine import SolverError
from wordle_solver.harness import run_batch
from wordle_solver.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordle_solver.logging_utils import get_logger, set_verbosity
from wordle_solver.solvers import create_selector, get_selector_ids

log = get_logger("cli.run_batch")


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="wordle_solver — evaluate a selector over many targets")
    ap.add_argument("wordfile", help="word list, one word per line")
    ap.add_argument("init_guess", help="first word played in every game")
    ap.add_argument("--selector", default=DEFAULT_SELECTOR,
                    help=f"selector id (one of: {', '.join(get_selector_ids())})")
    ap.add_argument("--mode", choices=SCORING_MODES, default=DEFAULT_MODE)
    ap.add_argument("--sample", type=int, help="play only this many targets (chosen by seed)")
    ap.add_argument("--seed", type=int, default=DEFAULT_SEED, help="base RNG seed")
    ap.add_argument("--max-turns", type=int, help="turn budget per game (default: unlimited)")
    ap.add_argument("--outdir", default=DEFAULT_OUTDIR, help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)
    set_verbosity(args.verbose)

    init_guess = args.init_guess.strip().lower()
    N = len(init_guess)

    # 1) Validate and load
    rep = validate_wordlist(N, args.wordfile)
    print(pretty_summary(rep))
    if not rep["passed"]:
        for issue in rep["issues"]:
            log.error(issue)
        return 1
    words = load_words(args.wordfile, N)

    # 2) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(words):
        pool = list(words)
        rng.shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = list(words)

    try:
        selector = create_selector(args.selector)
    except ValueError as e:
        log.error(str(e))
        return 1

    # 3) Play
    bar = tqdm(total=len(cases), ncols=80, desc=selector.id, unit="game",
               disable=args.no_progress or not sys.stderr.isatty())
    try:
        results = run_batch(
            selector, cases, words=words, initial_guess=init_guess, mode=args.mode,
            max_turns=args.max_turns, seed=args.seed, on_result=lambda r: bar.update(1),
        )
    except SolverError as e:
        log.error("batch aborted: %s", e)
        return 1
    finally:
        bar.close()

    solved = [r for r in results if r["success"]]
    mean_guesses = (sum(r["guesses"] for r in solved) / len(solved)) if solved else None
    print(f"Solved {len(solved)}/{len(results)}"
          + (f", mean {mean_guesses:.3f} guesses" if mean_guesses is not None else ""))

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), N=N, max_turns=args.max_turns)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_cases": len(results),
        "solved": len(solved),
        "mean_guesses": mean_guesses,
        "selector_id": selector.id,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
