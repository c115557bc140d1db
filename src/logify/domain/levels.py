from __future__ import annotations

"""
Severity Levels and Console Colors.

Defines the four semantic levels exposed by the facade, their one-character
display codes and ANSI colors, and the bridge to the numeric levels of the
standard 'logging' package.
"""

import enum
import logging
from typing import Dict

# -----------------------------------------------------------------------------
# ANSI COLOR SEQUENCES
# -----------------------------------------------------------------------------
RESET_COLOR = "\x1b[0m"
DEBUG_COLOR = "\x1b[38;2;41;153;153m"
INFO_COLOR = "\x1b[32m"
WARN_COLOR = "\x1b[33m"
ERROR_COLOR = "\x1b[31m"


class Level(enum.Enum):
    """
    Semantic log level.

    Attributes:
        code: One-character code rendered between brackets.
        color: ANSI escape sequence used by the colored console output.
    """
    DEBUG = ("D", DEBUG_COLOR)
    INFO = ("I", INFO_COLOR)
    WARNING = ("W", WARN_COLOR)
    ERROR = ("E", ERROR_COLOR)

    def __init__(self, code: str, color: str) -> None:
        self.code = code
        self.color = color

    def to_logging_level(self) -> int:
        """Return the equivalent numeric level of the 'logging' package."""
        return _TO_NATIVE[self]

    @classmethod
    def from_logging_level(cls, level_int: int) -> "Level":
        """Map a numeric 'logging' level back; unknown values become INFO."""
        return _FROM_NATIVE.get(level_int, cls.INFO)


_TO_NATIVE: Dict[Level, int] = {
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARNING: logging.WARNING,
    Level.ERROR: logging.ERROR,
}

_FROM_NATIVE: Dict[int, Level] = {v: k for k, v in _TO_NATIVE.items()}

# Accepted spellings when levels come from text (CLI, env, config files)
LEVEL_CODES: Dict[str, Level] = {
    "D": Level.DEBUG,
    "DEBUG": Level.DEBUG,
    "I": Level.INFO,
    "INFO": Level.INFO,
    "W": Level.WARNING,
    "WARN": Level.WARNING,
    "WARNING": Level.WARNING,
    "E": Level.ERROR,
    "ERROR": Level.ERROR,
}


def parse_level(value: str) -> Level:
    """
    Resolve a level from its code or name (case-insensitive).

    Raises:
        ValueError: If the text does not name a known level.
    """
    key = str(value or "").strip().upper()
    try:
        return LEVEL_CODES[key]
    except KeyError:
        raise ValueError(f"Unknown log level: {value!r}") from None
