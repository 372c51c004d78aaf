"""Word-guessing game solver: scorer, constraint filter and guess selectors."""

__version__ = "0.1.0"
