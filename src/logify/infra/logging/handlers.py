from __future__ import annotations

"""
Console Sink and Handler Utilities.

Binds the facade to a named logger of the standard 'logging' package. In
plain mode the logger owns a tagged stream handler rendering colored lines;
in system mode records propagate to whatever handlers the host application
configured. Handler tagging lets re-initialization replace our own handlers
without touching external ones.
"""

import logging
import sys
from typing import IO, Optional

from logify.core.formatter import LogifyFormatter
from logify.domain.levels import Level

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_logify_handler"


# ==============================================================================
# INTERNAL LOGGING UTILITIES
# ==============================================================================

def _tag_handler(handler: logging.Handler) -> None:
    """Mark a handler as managed by this package."""
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _remove_our_handlers(logger: logging.Logger) -> None:
    """Detach and close every handler this package attached to 'logger'."""
    for h in list(logger.handlers):
        if _is_our_handler(h):
            logger.removeHandler(h)
            h.close()


def _create_console_handler(
        base_tag: str,
        stream: Optional[IO[str]] = None,
) -> logging.StreamHandler:
    sh = logging.StreamHandler(stream if stream is not None else sys.stderr)
    sh.setLevel(logging.DEBUG)
    sh.setFormatter(LogifyFormatter(base_tag))
    _tag_handler(sh)
    return sh


# ==============================================================================
# CONSOLE SINK
# ==============================================================================

class ConsoleSink:
    """
    Console destination of the pipeline.

    Attributes:
        base_tag: Name of the underlying 'logging' logger.
        use_system_style: When True, no own handler is attached and records
            propagate to the host's handlers.
        logger: The configured 'logging.Logger'.
    """

    def __init__(
            self,
            base_tag: str,
            use_system_style: bool = False,
            stream: Optional[IO[str]] = None,
    ) -> None:
        self.base_tag = base_tag
        self.use_system_style = use_system_style
        self.logger = logging.getLogger(base_tag)
        self.logger.setLevel(logging.DEBUG)

        _remove_our_handlers(self.logger)
        if use_system_style:
            self.logger.propagate = True
        else:
            self.logger.propagate = False
            self.logger.addHandler(_create_console_handler(base_tag, stream))

    def write(self, level: Level, body: str) -> None:
        """Emit a '<tag> -> <message>' body at the given level."""
        self.logger.log(level.to_logging_level(), body)

    def close(self) -> None:
        _remove_our_handlers(self.logger)
