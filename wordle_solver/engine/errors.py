"""
Error kinds raised by the engine, selectors and session.

All of them derive from SolverError so a driver can catch one type, log a
diagnostic and end the session. Each also derives from the closest builtin
so callers that only know about ValueError / LookupError / IndexError still
catch them.
"""


class SolverError(Exception):
    """Base class for every solver-core error."""


class InvalidLength(SolverError, ValueError):
    """Guess and target (or guess and result) lengths differ."""

    def __init__(self, expected: int, got: int, what: str = "guess"):
        self.expected = expected
        self.got = got
        super().__init__(f"{what} has length {got}, expected {expected}")


class EmptyCandidateSet(SolverError, LookupError):
    """A selector was asked to choose from an empty dictionary."""

    def __init__(self, msg: str = "no candidate words left to choose from"):
        super().__init__(msg)


class IndexOutOfRange(SolverError, IndexError):
    """A pinned letter refers to a position outside the word."""

    def __init__(self, position: int, length: int):
        self.position = position
        self.length = length
        super().__init__(f"pinned position {position} is outside a word of length {length}")
