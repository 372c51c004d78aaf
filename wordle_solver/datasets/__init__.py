from .validator import validate_wordlist, pretty_summary
from .io import read_lines, clean_words, load_words

__all__ = ["validate_wordlist", "pretty_summary", "read_lines", "clean_words", "load_words"]
