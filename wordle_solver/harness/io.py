"""
Run reports for batch evaluation.

A batch produces two files side by side: a CSV with one row per session
(target, first guess, outcome, and for every turn the word played, its
G/Y/- pattern and how many candidates were left afterwards) and a JSON
manifest describing how the run was configured.

Pattern cells start with an apostrophe: "-GYY-" would otherwise be read as
a formula by spreadsheet apps.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def _excel_safe_pattern(patt: str) -> str:
    """Turn "-GYY-" into "'-GYY-"; empty cells stay empty."""
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, N: int, max_turns: int | None = None) -> str:
    """
    Write one row per session result from run_case / run_batch.

    Schema (columns):
      selector, N, target, initial_guess, success, guesses, time_ms, candidates_left,
      guess_1, patt_1, left_1, ..., guess_T, patt_T, left_T

    T is `max_turns` if given, else the longest game in `results`.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    turns = max_turns if max_turns is not None else max(
        (len(r.get("history", [])) for r in results), default=0)

    fields = ["selector", "N", "target", "initial_guess", "success", "guesses", "time_ms",
              "candidates_left"]
    for i in range(1, turns + 1):
        fields += [f"guess_{i}", f"patt_{i}", f"left_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "selector": r.get("selector_id", "?"),
                "N": N,
                "target": r["target"],
                "initial_guess": r.get("initial_guess", ""),
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
                "candidates_left": r.get("candidates_left", ""),
            }

            # One guess/patt/left triple per turn, blank past the end of the game
            hist = r.get("history", [])
            for i in range(1, turns + 1):
                if i <= len(hist):
                    g, patt, left = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"patt_{i}"] = _excel_safe_pattern(patt)
                    row[f"left_{i}"] = left
                else:
                    row[f"guess_{i}"] = ""
                    row[f"patt_{i}"] = ""
                    row[f"left_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Dump `manifest` as indented JSON next to the CSV of the same run.

    run_batch.py writes:
      - run_id, git_commit
      - config: CLI args (selector, mode, paths, seed, sample, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - num_cases, solved, mean_guesses
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """UTC time as a file-name friendly run id, e.g. 20261018T091500Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short HEAD hash for the manifest, or 'unknown' outside a git checkout."""
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
