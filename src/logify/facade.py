from __future__ import annotations

"""
Global Logging Entry Point.

The Logify facade holds the active logger and the process-wide filters.
Until initialize() is called every call is reported as a usage error on
the 'logify.facade' logger and otherwise ignored: logging never raises
into the host application, except for bad format arguments.

A default instance backs the module-level functions exported by the
'logify' package, so applications can log without passing anything
around.
"""

import functools
import logging
import os
import threading
import time
from typing import Any, Callable, Iterable, Optional, TypeVar, Union

from logify.core.filter import LogFilters
from logify.core.loggers import BaseLogger, DebugLogger
from logify.domain.config import DEFAULT_BASE_TAG, DEFAULT_STACK_TRACE_TAG, LoggerConfig
from logify.domain.errors import NotInitializedError
from logify.domain.levels import Level

logger = logging.getLogger(__name__)

T = TypeVar("T")

TIME_TAKEN_MESSAGE = "Time taken: %d milliseconds"


class Logify:
    """
    Dispatcher owning the active logger.

    Attributes:
        filters: Level/tag allow-lists shared by every logger installed
            through this facade; they survive re-initialization.
    """

    def __init__(self) -> None:
        self.filters = LogFilters()
        self._logger: Optional[BaseLogger] = None
        self._lock = threading.Lock()

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def initialize(
            self,
            base_tag: Union[str, bool, BaseLogger, None] = None,
            log_path: Optional[Union[str, os.PathLike]] = None,
            use_system_style: Optional[bool] = False,
    ) -> BaseLogger:
        """
        Install a new active logger, replacing any previous one.

        Accepted forms: initialize(), initialize(base_tag),
        initialize(base_tag, log_path), initialize(base_tag,
        use_system_style=True), initialize(base_tag, log_path,
        use_system_style), initialize(base_tag, use_system_style),
        initialize(use_system_style) and initialize(custom_logger).

        Args:
            base_tag: Application tag (default 'Logify'), a bool selecting
                the console style, or a ready BaseLogger instance.
            log_path: Root directory for daily rotating log files.
            use_system_style: Defer console rendering to the host's
                'logging' handlers instead of the colored formatter.

        Returns:
            BaseLogger: The installed logger.
        """
        if isinstance(base_tag, BaseLogger):
            new_logger = base_tag
        else:
            if isinstance(base_tag, bool):
                base_tag, use_system_style = None, base_tag
            elif isinstance(log_path, bool):
                log_path, use_system_style = None, log_path
            config = LoggerConfig(
                base_tag=base_tag or DEFAULT_BASE_TAG,
                log_path=log_path or None,
                use_system_style=bool(use_system_style),
            )
            new_logger = DebugLogger(config)

        new_logger.filters = self.filters
        with self._lock:
            self._logger = new_logger
        return new_logger

    @property
    def is_initialized(self) -> bool:
        return self._logger is not None

    @property
    def current_logger(self) -> Optional[BaseLogger]:
        return self._logger

    def _active(self) -> Optional[BaseLogger]:
        active = self._logger
        if active is None:
            logger.error(str(NotInitializedError()))
        return active

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def set_loggable_levels(self, levels: Iterable[Union[Level, str]]) -> None:
        """Only records whose level is listed are emitted (empty: all)."""
        self.filters.set_levels(levels)

    def set_loggable_tags(self, tags: Iterable[str]) -> None:
        """Only records whose resolved tag is listed are emitted (empty: all)."""
        self.filters.set_tags(tags)

    def enable_logging(self) -> None:
        active = self._active()
        if active is not None:
            active.is_logging_enabled = True

    def disable_logging(self) -> None:
        active = self._active()
        if active is not None:
            active.is_logging_enabled = False

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------

    def tag(self, tag: str) -> "Logify":
        """Tag the next call on the current thread; returns self for chaining."""
        active = self._active()
        if active is not None:
            active.set_tag(tag)
        return self

    def d(self, message: Any = None, *args: Any) -> None:
        active = self._active()
        if active is not None:
            active.d(message, *args)

    def i(self, message: Any = None, *args: Any) -> None:
        active = self._active()
        if active is not None:
            active.i(message, *args)

    def w(self, message: Any = None, *args: Any) -> None:
        active = self._active()
        if active is not None:
            active.w(message, *args)

    def e(self, message: Any = None, *args: Any) -> None:
        active = self._active()
        if active is not None:
            active.e(message, *args)

    def stack_trace(self, tag: str = DEFAULT_STACK_TRACE_TAG) -> str:
        active = self._active()
        if active is None:
            return ""
        return active.stack_trace(tag)

    # -------------------------------------------------------------------------
    # Timing
    # -------------------------------------------------------------------------

    def measure_time_millis(self, work: Callable[[], Any], tag: Optional[str] = None) -> int:
        """
        Run 'work' once on the calling thread and log how long it took.

        The work runs even when the facade is not initialized or logging is
        disabled.

        Args:
            work: Zero-argument callable.
            tag: Explicit tag for the timing line only.

        Returns:
            int: Elapsed wall-clock milliseconds.
        """
        start = time.perf_counter()
        work()
        elapsed = int((time.perf_counter() - start) * 1000)

        if tag:
            self.tag(tag).i(TIME_TAKEN_MESSAGE, elapsed)
            active = self._logger
            if active is not None:
                # The timing tag never outlives the timing line
                active.pop_explicit_tag()
        else:
            self.i(TIME_TAKEN_MESSAGE, elapsed)
        return elapsed

    def timed(self, tag: Optional[str] = None) -> Callable[[Callable[..., T]], Callable[..., T]]:
        """Decorator form of measure_time_millis() keeping the return value."""

        def decorator(func: Callable[..., T]) -> Callable[..., T]:
            @functools.wraps(func)
            def wrapper(*args: Any, **kwargs: Any) -> T:
                result = []
                self.measure_time_millis(lambda: result.append(func(*args, **kwargs)), tag)
                return result[0]

            return wrapper

        return decorator


default_logify = Logify()
