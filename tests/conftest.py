from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Reset of the default facade and of the 'logging' loggers it configures.
3. A recording logger used to observe the pipeline without real sinks.
"""

import logging
import os
import sys
from typing import Any, List, Optional, Tuple

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from logify.core.loggers import BaseLogger  # noqa: E402
from logify.domain.levels import Level  # noqa: E402
from logify.facade import default_logify  # noqa: E402
from logify.infra.logging.handlers import _remove_our_handlers  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Helpers
# -----------------------------------------------------------------------------
class RecordingLogger(BaseLogger):
    """BaseLogger that stores what reaches log() instead of writing it."""

    def __init__(self) -> None:
        super().__init__()
        self.records: List[Tuple[Level, Optional[str], str, Optional[BaseException]]] = []

    def log(self, level: Level, tag: Optional[str], message: str, exc: Optional[BaseException]) -> None:
        self.records.append((level, tag, message, exc))

    @property
    def messages(self) -> List[str]:
        return [r[2] for r in self.records]

    @property
    def tags(self) -> List[Any]:
        return [r[1] for r in self.records]


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def reset_logify() -> None:
    """Return the default facade to its uninitialized state after each test."""
    yield
    active = default_logify.current_logger
    if active is not None and hasattr(active, "close"):
        active.close()
    default_logify._logger = None
    default_logify.filters.clear()

    for name in list(logging.root.manager.loggerDict):
        lg = logging.getLogger(name)
        _remove_our_handlers(lg)


@pytest.fixture
def recorder() -> RecordingLogger:
    return RecordingLogger()
