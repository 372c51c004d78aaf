"""
Lightweight word hygiene.

A word can enter a session (as target, initial guess or dictionary entry)
iff it is a string of ASCII letters a-z (any case) with the session's
length N.
"""


def is_valid_word(word: str, N: int) -> bool:
    if not isinstance(word, str):
        return False
    w = word.strip().lower()
    return len(w) == N and w.isascii() and w.isalpha()
