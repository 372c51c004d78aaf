"""
Default settings shared by the engine, selectors and CLI apps.

Edit these to change the defaults of every entry point at once; the CLI
flags override them for a single run.
"""

from __future__ import annotations

# ==== Game ==================================================================

# Target word used by the single-game CLI when --target is not given
DEFAULT_TARGET: str = "adieu"

# Scoring modes: "naive" keeps the single-pass membership test,
# "strict" is the duplicate-safe two-pass algorithm
SCORING_MODES = ("naive", "strict")
DEFAULT_MODE: str = "naive"

# ==== Guess selection =======================================================

DEFAULT_SELECTOR: str = "avoid_doubles"

# Below this many candidates any sampled word is accepted as-is
SMALL_DICTIONARY_THRESHOLD: int = 10

# How many double-letter samples are thrown away before taking the next one
MAX_DOUBLE_LETTER_REJECTIONS: int = 4

# ==== Runs ==================================================================

DEFAULT_SEED: int = 123
DEFAULT_OUTDIR: str = "reports"
