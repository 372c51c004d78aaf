# apps/cli/run.py
"""
CLI entry point for playing one session.

This script:
  1) Reads the word list and keeps the words as long as the target.
  2) Plays the initial guess, then lets the selector pick until the target
     is found or no candidates are left.
  3) Prints every guess with its result squares and the number of
     candidates still in play.

Usage:
  python -m apps.cli.run words.txt crane --target skirt --seed 7
"""

from __future__ import annotations

import argparse
import sys
from typing import List

from wordle_solver.config import (
    DEFAULT_MODE, DEFAULT_SELECTOR, DEFAULT_TARGET, SCORING_MODES,
)
from wordle_solver.datasets import load_words
from wordle_solver.engine import SolverError, is_valid_word
from wordle_solver.harness import run_case
from wordle_solver.logging_utils import get_logger, set_verbosity
from wordle_solver.solvers import create_selector, get_selector_ids

log = get_logger("cli.run")

EXIT_SOLVED = 0
EXIT_ERROR = 1
EXIT_EXHAUSTED = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordle_solver — play one session")
    ap.add_argument("wordfile", help="word list, one word per line")
    ap.add_argument("init_guess", help="first word to play")
    ap.add_argument("--target", default=DEFAULT_TARGET, help="hidden word to solve for")
    ap.add_argument("--mode", choices=SCORING_MODES, default=DEFAULT_MODE,
                    help="scoring mode (naive = single-pass membership, strict = duplicate-safe)")
    ap.add_argument("--selector", default=DEFAULT_SELECTOR,
                    help=f"selector id (one of: {', '.join(get_selector_ids())})")
    ap.add_argument("--seed", type=int, help="RNG seed for reproducible picks")
    ap.add_argument("--max-turns", type=int, help="stop after this many guesses")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    set_verbosity(args.verbose)

    target = args.target.strip().lower()
    N = len(target)
    if not is_valid_word(target, N):
        log.error("target %r is not an alphabetic word", args.target)
        return EXIT_ERROR

    try:
        words = load_words(args.wordfile, N)
    except FileNotFoundError:
        log.error("no such word list: %s", args.wordfile)
        return EXIT_ERROR
    print(f"Read {len(words)} words of length {N} from {args.wordfile}")

    def _show(session, guess):
        label = "Initial guess" if len(session.guesses) == 1 else f"Guess {len(session.guesses)}"
        print(f"{label}: {guess.word}")
        print(f"Result: {guess.formatted()}  ({session.candidate_count} candidates left)")

    try:
        selector = create_selector(args.selector)
        r = run_case(
            selector, target, words=words, initial_guess=args.init_guess,
            mode=args.mode, max_turns=args.max_turns, seed=args.seed, on_guess=_show,
        )
    except (SolverError, ValueError) as e:
        log.error("session aborted: %s", e)
        return EXIT_ERROR

    if r["success"]:
        print(f"Solved '{r['target']}' in {r['guesses']} guesses")
        return EXIT_SOLVED
    print(f"Gave up after {r['guesses']} guesses ({r['candidates_left']} candidates left)")
    return EXIT_EXHAUSTED


if __name__ == "__main__":
    sys.exit(main())
