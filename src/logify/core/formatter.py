from __future__ import annotations

"""
Record Rendering.

Builds the text of a record: message assembly from format arguments and
exceptions, the '<tag> -> <message>' body, the full file line and its
colored console variant.
"""

import logging
import traceback
from datetime import datetime
from typing import Any, Optional, Sequence

from logify.domain.config import TIMESTAMP_FMT
from logify.domain.levels import RESET_COLOR, Level

# -----------------------------------------------------------------------------
# LINE RENDERING
# -----------------------------------------------------------------------------

def format_timestamp(ts: datetime) -> str:
    """Render 'YYYY-MM-DD HH:mm:ss.mmm'."""
    return f"{ts.strftime(TIMESTAMP_FMT)}.{ts.microsecond // 1000:03d}"


def render_body(tag: Optional[str], message: str) -> str:
    return f"{tag} -> {message}"


def render_line(level: Level, base_tag: str, body: str, ts: Optional[datetime] = None) -> str:
    """
    Render a persisted line: '<timestamp> [<code>] <base_tag>: <body>'.

    Args:
        level: Level of the record.
        base_tag: Application-wide tag.
        body: Output of render_body().
        ts: Record time; defaults to now.
    """
    ts = ts or datetime.now()
    return f"{format_timestamp(ts)} [{level.code}] {base_tag}: {body}"


def colorize(level: Level, line: str) -> str:
    return f"{level.color}{line}{RESET_COLOR}"


class LogifyFormatter(logging.Formatter):
    """
    Console formatter producing the colored variant of the persisted line.

    The record message is expected to already hold the '<tag> -> <message>'
    body.
    """

    def __init__(self, base_tag: str) -> None:
        super().__init__()
        self.base_tag = base_tag

    def format(self, record: logging.LogRecord) -> str:
        level = Level.from_logging_level(record.levelno)
        ts = datetime.fromtimestamp(record.created)
        line = render_line(level, self.base_tag, record.getMessage(), ts)
        return colorize(level, line)


# -----------------------------------------------------------------------------
# MESSAGE ASSEMBLY
# -----------------------------------------------------------------------------

def render_exception(exc: BaseException) -> str:
    """Return the printable traceback of an exception (class, message, frames)."""
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


def format_message(message: str, args: Sequence[Any]) -> str:
    """
    Apply printf-style arguments.

    Raises:
        TypeError, ValueError: On placeholder/argument mismatch.
    """
    return message % tuple(args)


def build_message(
        message: Optional[str],
        args: Sequence[Any],
        exc: Optional[BaseException],
        formatter=format_message,
) -> Optional[str]:
    """
    Assemble the final message of a call.

    Returns:
        Optional[str]: The message, or None when there is nothing to log
        (empty message and no exception).
    """
    if not message:
        if exc is None:
            return None
        return render_exception(exc)

    if args:
        message = formatter(message, args)
    if exc is not None:
        message += "\n" + render_exception(exc)
    return message
