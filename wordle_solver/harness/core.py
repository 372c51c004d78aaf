"""
Driver loop primitives.

- run_case:  play one session (one hidden target) with a given selector.
- run_batch: play many targets in sequence (optionally a sample prefix).

A session ends when the target is found or the candidate dictionary runs
dry. `max_turns` adds an optional turn budget on top of that.

These functions are UI-agnostic so they can be reused by the CLI apps,
a notebook or tests without changes.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List

from wordle_solver.config import DEFAULT_MODE
from wordle_solver.engine.errors import SolverError
from wordle_solver.logging_utils import get_logger
from .session import Session

log = get_logger(__name__)


def run_case(
        selector,
        target: str,
        *,
        words: Iterable[str],
        initial_guess: str | None = None,
        mode: str = DEFAULT_MODE,
        max_turns: int | None = None,
        seed: int | None = None,
        on_guess=None,
) -> Dict:
    """
    Play until solved, out of candidates or out of turns.

    Args:
        selector:      a BaseSelector (choose_next(dictionary))
        target:        the hidden word
        words:         candidate dictionary, already filtered to len(target)
        initial_guess: first word to play; picked by the selector if None
        mode:          scoring mode ("naive" or "strict")
        max_turns:     optional turn budget (None = unlimited)
        seed:          reseeds the selector for reproducible runs
        on_guess:      optional callback(session, guess) after every turn

    Returns:
        dict with keys:
            target, initial_guess, success, guesses, time_ms,
            history (list[(guess, pattern, candidates_left)]), candidates_left
    """
    if max_turns is not None and max_turns < 1:
        raise ValueError(f"max_turns must be >= 1; got {max_turns}")

    selector.reset(seed=seed)
    session = Session(words, target, mode=mode)
    history = []

    t0 = time.perf_counter()
    next_word = initial_guess
    while True:
        if next_word is None:
            next_word = selector.choose_next(session.dictionary)

        g = session.guess(next_word)
        history.append((g.word, g.pattern(), session.candidate_count))
        if on_guess is not None:
            on_guess(session, g)

        if session.is_solved():
            break
        if session.exhausted:
            log.info("candidates exhausted after %d guesses (target %r)", len(history), target)
            break
        if max_turns is not None and len(history) >= max_turns:
            break
        next_word = None

    return {
        "target": session.target,
        "initial_guess": history[0][0],
        "success": session.is_solved(),
        "guesses": len(history),
        "time_ms": (time.perf_counter() - t0) * 1000.0,
        "history": history,
        "candidates_left": session.candidate_count,
    }


def run_batch(
        selector,
        targets: List[str],
        *,
        words: List[str],
        initial_guess: str | None = None,
        mode: str = DEFAULT_MODE,
        max_turns: int | None = None,
        seed: int | None = None,
        sample: int | None = None,
        on_result=None,
) -> List[Dict]:
    """
    Play many cases back-to-back. If 'sample' is provided, only the first K
    targets are used to speed up quick experiments.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across cases. `on_result(result)` is
    called after every case (progress bars hook in here).
    """
    pool = list(targets)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, target in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        try:
            r = run_case(
                selector, target, words=words, initial_guess=initial_guess, mode=mode,
                max_turns=max_turns, seed=case_seed,
            )
        except SolverError:
            log.error("case %d (target %r) aborted", idx, target)
            raise
        r["selector_id"] = selector.id
        out.append(r)
        if on_result is not None:
            on_result(r)
    return out
