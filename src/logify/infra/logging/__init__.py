from __future__ import annotations

from .file_sink import DailyRotatingFileSink
from .handlers import _HANDLER_TAG_ATTR, ConsoleSink

__all__ = [
    "ConsoleSink",
    "DailyRotatingFileSink",
    "_HANDLER_TAG_ATTR",
]
