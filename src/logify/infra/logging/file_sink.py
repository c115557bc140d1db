from __future__ import annotations

"""
Daily Rotating File Sink.

Persists rendered lines under '<root>/<YYYY-MM-DD>/log-<YYYYMMDD_HHmmss>.log'.
The target file is rediscovered on every write from the directory listing,
so rotation state survives process restarts. Files roll over once the
current one reaches the size budget.

Writing is best-effort: failures are reported on stderr and never raised.
"""

import os
import sys
import traceback
from datetime import datetime
from typing import Callable, Optional, Union

from logify.core.formatter import render_line
from logify.domain.config import DEFAULT_BASE_TAG, MAX_FILE_SIZE
from logify.domain.errors import FileIOError
from logify.domain.levels import Level
from logify.infra.fs import (
    day_bucket_name,
    ensure_dir,
    find_last_log_file,
    new_log_file_name,
    normalize_path,
)


class DailyRotatingFileSink:
    """
    Append-only sink with day buckets and size-bounded files.

    Attributes:
        log_path: Absolute root log directory ('~' and variables expanded);
            empty or None disables the sink.
        base_tag: Application-wide tag written on every line.
        max_file_size: Size in bytes at which a new file is started.
    """

    def __init__(
            self,
            log_path: Optional[Union[str, os.PathLike]],
            base_tag: str = DEFAULT_BASE_TAG,
            max_file_size: int = MAX_FILE_SIZE,
            clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.log_path = normalize_path(log_path) if log_path else None
        self.base_tag = base_tag
        self.max_file_size = max_file_size
        self._clock = clock

    def append(self, level: Level, body: str) -> Optional[str]:
        """
        Render and append one line.

        Args:
            level: Level of the record.
            body: '<tag> -> <message>' body.

        Returns:
            Optional[str]: Path written to, or None if disabled or failed.
        """
        if not self.log_path:
            return None

        try:
            now = self._clock()
            target = self.resolve_target(now)
            self._write_line(target, render_line(level, self.base_tag, body, now))
            return target
        except FileIOError as e:
            sys.stderr.write(f"WARNING: Log persistence failure at '{e.path}': {e}\n")
            traceback.print_exc(file=sys.stderr)
            return None

    def resolve_target(self, now: datetime) -> str:
        """
        Pick the file the next line goes to, creating directories as needed.

        Raises:
            FileIOError: If the log directories cannot be created or listed.
        """
        root = str(self.log_path)
        try:
            ensure_dir(root)
            folder = ensure_dir(os.path.join(root, day_bucket_name(now)))
            last_file = find_last_log_file(folder)
            if last_file is None or os.path.getsize(last_file) >= self.max_file_size:
                last_file = os.path.join(folder, new_log_file_name(now))
        except (OSError, ValueError) as e:
            raise FileIOError(str(e), path=root) from e
        return last_file

    @staticmethod
    def _write_line(path: str, line: str) -> None:
        try:
            with open(path, "a", encoding="utf-8") as f:
                f.write(line)
                f.write("\n")
        except (OSError, ValueError) as e:
            raise FileIOError(str(e), path=path) from e
