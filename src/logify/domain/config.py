from __future__ import annotations

"""
Logger Configuration Model.

Holds the immutable settings a logger instance is built from, together
with the constants that drive tag derivation, message chunking and file
rotation.
"""

import os
from dataclasses import dataclass
from typing import Optional, Union

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_BASE_TAG = "Logify"
DEFAULT_STACK_TRACE_TAG = "stackTrace"

MAX_LOG_LENGTH = 4000
MAX_TAG_LENGTH = 24
MAX_FILE_SIZE = 1024 * 1024  # 1 MiB

LOG_FILE_PREFIX = "log-"
LOG_FILE_SUFFIX = ".log"

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S"
DAY_BUCKET_FMT = "%Y-%m-%d"
FILE_STAMP_FMT = "%Y%m%d_%H%M%S"


@dataclass(frozen=True)
class LoggerConfig:
    """
    Immutable settings of a logger instance.

    Attributes:
        base_tag: Application-wide tag printed before every per-call tag.
        log_path: Root directory for persisted logs. None disables files.
        use_system_style: Defer console rendering to the host's handlers.
        tag_detail: Append ':<function>:<line>' to auto-derived tags.
        max_log_length: Longest single emitted line before chunking.
        max_tag_length: Truncation limit for auto-derived tags.
        max_file_size: Size at which a new log file is started.
    """
    base_tag: str = DEFAULT_BASE_TAG
    log_path: Optional[Union[str, os.PathLike]] = None
    use_system_style: bool = False

    tag_detail: bool = True
    max_log_length: int = MAX_LOG_LENGTH
    max_tag_length: int = MAX_TAG_LENGTH
    max_file_size: int = MAX_FILE_SIZE

    @property
    def writes_files(self) -> bool:
        return bool(self.log_path)
