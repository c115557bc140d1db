from __future__ import annotations

"""
Logify: leveled, tagged logging to the console and daily rotating files.

Initialize once, then log from anywhere:

    import logify

    logify.initialize("MyApp", "out/logs")
    logify.d("debug %s", 42)
    logify.tag("Network").e(exc, "request failed")
"""

from .core.loggers import BaseLogger, DebugLogger
from .domain.config import LoggerConfig
from .domain.errors import FileIOError, LogifyError, NotInitializedError
from .domain.levels import Level
from .facade import Logify, default_logify

__version__ = "1.0.0"

initialize = default_logify.initialize
set_loggable_levels = default_logify.set_loggable_levels
set_loggable_tags = default_logify.set_loggable_tags
enable_logging = default_logify.enable_logging
disable_logging = default_logify.disable_logging
tag = default_logify.tag
d = default_logify.d
i = default_logify.i
w = default_logify.w
e = default_logify.e
stack_trace = default_logify.stack_trace
measure_time_millis = default_logify.measure_time_millis
timed = default_logify.timed

__all__ = [
    "BaseLogger",
    "DebugLogger",
    "FileIOError",
    "Level",
    "Logify",
    "LogifyError",
    "LoggerConfig",
    "NotInitializedError",
    "d",
    "default_logify",
    "disable_logging",
    "e",
    "enable_logging",
    "i",
    "initialize",
    "measure_time_millis",
    "set_loggable_levels",
    "set_loggable_tags",
    "stack_trace",
    "tag",
    "timed",
    "w",
]
