from __future__ import annotations

"""
Logger Implementations.

BaseLogger carries everything that does not depend on a destination: the
twelve d/i/w/e call shapes, the thread-local pending tag, the enabled
switch, filtering and message assembly. DebugLogger is the default
implementation writing to the console and, when a log directory is
configured, to daily rotating files.
"""

import abc
import sys
import threading
import traceback
from typing import IO, Any, Optional, Tuple

from logify.core import callsite
from logify.core.chunking import split_message
from logify.core.filter import LogFilters
from logify.core.formatter import build_message, format_message, render_body
from logify.domain.config import DEFAULT_BASE_TAG, DEFAULT_STACK_TRACE_TAG, LoggerConfig
from logify.domain.levels import Level
from logify.infra.logging.file_sink import DailyRotatingFileSink
from logify.infra.logging.handlers import ConsoleSink


def _split_call(first: Any, args: Tuple[Any, ...]) -> Tuple[Optional[BaseException], Optional[str], Tuple[Any, ...]]:
    """Map '(message, *args)', '(exc, message, *args)' and '(exc)' to their parts."""
    if isinstance(first, BaseException):
        if not args:
            return first, None, ()
        message = args[0]
        return first, None if message is None else str(message), args[1:]
    return None, None if first is None else str(first), args


class BaseLogger(abc.ABC):
    """
    Destination-agnostic logger.

    Subclasses implement log(). Tag resolution can be customized by
    overriding resolve_tag().

    Attributes:
        filters: Level/tag allow-lists consulted for every record.
        is_logging_enabled: Master switch checked before anything else.
    """

    def __init__(self, filters: Optional[LogFilters] = None) -> None:
        self.filters = filters if filters is not None else LogFilters()
        self.is_logging_enabled = True
        self._explicit_tag = threading.local()

    # -------------------------------------------------------------------------
    # Pending tag
    # -------------------------------------------------------------------------

    def set_tag(self, tag: str) -> "BaseLogger":
        """Tag the next log call made on the current thread."""
        self._explicit_tag.value = tag
        return self

    def pop_explicit_tag(self) -> Optional[str]:
        """Read and clear the current thread's pending tag."""
        tag = getattr(self._explicit_tag, "value", None)
        if tag is not None:
            del self._explicit_tag.value
        return tag

    def resolve_tag(self) -> Optional[str]:
        return self.pop_explicit_tag()

    # -------------------------------------------------------------------------
    # Call shapes
    # -------------------------------------------------------------------------

    def d(self, message: Any = None, *args: Any) -> None:
        self.prepare_log(Level.DEBUG, *_split_call(message, args))

    def i(self, message: Any = None, *args: Any) -> None:
        self.prepare_log(Level.INFO, *_split_call(message, args))

    def w(self, message: Any = None, *args: Any) -> None:
        self.prepare_log(Level.WARNING, *_split_call(message, args))

    def e(self, message: Any = None, *args: Any) -> None:
        self.prepare_log(Level.ERROR, *_split_call(message, args))

    def stack_trace(self, tag: str = DEFAULT_STACK_TRACE_TAG) -> str:
        """
        Log the current call stack at INFO and return it.

        Args:
            tag: Header line printed above the frames.

        Returns:
            str: The formatted stack, outermost frame first.
        """
        stack = "".join(traceback.format_stack(sys._getframe(1))).rstrip("\n")
        self.i(f"{tag}\n{stack}")
        return stack

    # -------------------------------------------------------------------------
    # Pipeline
    # -------------------------------------------------------------------------

    def prepare_log(
            self,
            level: Level,
            exc: Optional[BaseException],
            message: Optional[str],
            args: Tuple[Any, ...] = (),
    ) -> None:
        """
        Apply the enabled switch and filters, then assemble and emit.

        Raises:
            TypeError, ValueError: If 'args' do not match the placeholders.
        """
        if not self.is_logging_enabled:
            return

        tag = self.resolve_tag()
        if not self.filters.allows(tag, level):
            return

        text = build_message(message, args, exc, self.format_message)
        if text is None:
            return
        self.log(level, tag, text, exc)

    def format_message(self, message: str, args: Tuple[Any, ...]) -> str:
        return format_message(message, args)

    @abc.abstractmethod
    def log(self, level: Level, tag: Optional[str], message: str, exc: Optional[BaseException]) -> None:
        """Deliver an assembled message to the destinations."""


class DebugLogger(BaseLogger):
    """
    Default logger: console always, daily rotating files when configured.

    Auto-derived tags come from the first frame outside the modules listed
    in 'internal_modules'. Subclasses defined elsewhere that override any
    method on the dispatch path should add their own module to it.
    """

    internal_modules = callsite.INTERNAL_MODULES

    def __init__(
            self,
            config: Optional[LoggerConfig] = None,
            filters: Optional[LogFilters] = None,
            stream: Optional[IO[str]] = None,
    ) -> None:
        super().__init__(filters)
        self.config = config or LoggerConfig()
        self.console = ConsoleSink(
            self.config.base_tag,
            use_system_style=self.config.use_system_style,
            stream=stream,
        )
        self.file_sink: Optional[DailyRotatingFileSink] = None
        if self.config.writes_files:
            self.file_sink = DailyRotatingFileSink(
                self.config.log_path,
                base_tag=self.config.base_tag,
                max_file_size=self.config.max_file_size,
            )

    @property
    def base_tag(self) -> str:
        return self.config.base_tag

    def resolve_tag(self) -> Optional[str]:
        tag = super().resolve_tag()
        if tag is not None:
            return tag
        site = callsite.find_call_site(self.internal_modules)
        if site is None:
            return DEFAULT_BASE_TAG
        return self.create_tag(site)

    def create_tag(self, site: callsite.CallSite) -> str:
        return callsite.create_stack_element_tag(
            site,
            self.config.max_tag_length,
            detail=self.config.tag_detail,
        )

    def log(self, level: Level, tag: Optional[str], message: str, exc: Optional[BaseException]) -> None:
        for part in split_message(message, self.config.max_log_length):
            self.emit(level, render_body(tag, part))

    def emit(self, level: Level, body: str) -> None:
        self.console.write(level, body)
        if self.file_sink is not None:
            self.file_sink.append(level, body)

    def close(self) -> None:
        self.console.close()
