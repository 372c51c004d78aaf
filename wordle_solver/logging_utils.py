"""
Logging setup shared by the whole package.

Every module asks for `get_logger(__name__)`; the handler lives on the
package logger and is installed only once.
"""

from __future__ import annotations

import logging

LOGGER_NAME = "wordle_solver"
LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return the package logger, or a child of it for `name`.

    If the package logger has no handler yet, attach a StreamHandler
    (stderr) at INFO level.
    """
    root = logging.getLogger(LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.INFO)

    if not name or name == LOGGER_NAME:
        return root
    if name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return root.getChild(name)


def set_verbosity(verbose: bool) -> None:
    """Switch the package logger between DEBUG and INFO."""
    get_logger().setLevel(logging.DEBUG if verbose else logging.INFO)
