from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Path resolution and directory inspection used by the file sink: log root
normalization, day bucket creation and discovery of the current log file.
Everything here raises OSError; callers decide how failures are reported.
"""

import os
from datetime import datetime
from typing import Optional, Union

from logify.domain.config import (
    DAY_BUCKET_FMT,
    FILE_STAMP_FMT,
    LOG_FILE_PREFIX,
    LOG_FILE_SUFFIX,
)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Union[str, os.PathLike]) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/).
    """
    return os.path.abspath(os.path.expandvars(os.path.expanduser(os.fspath(path).strip())))


def day_bucket_name(now: datetime) -> str:
    return now.strftime(DAY_BUCKET_FMT)


def new_log_file_name(now: datetime) -> str:
    """Name of a freshly started log file: 'log-<YYYYMMDD_HHmmss>.log'."""
    return f"{LOG_FILE_PREFIX}{now.strftime(FILE_STAMP_FMT)}{LOG_FILE_SUFFIX}"


# -----------------------------------------------------------------------------
# DIRECTORY API
# -----------------------------------------------------------------------------

def ensure_dir(path: str) -> str:
    """Recursively create 'path' if missing and return it."""
    if not os.path.isdir(path):
        os.makedirs(path, exist_ok=True)
    return path


def find_last_log_file(folder: str) -> Optional[str]:
    """
    Select the most recently modified log file directly inside 'folder'.

    Only regular files whose name starts with the log prefix are
    considered. Ties on modification time keep the first entry seen.

    Args:
        folder: Day bucket directory to scan.

    Returns:
        Optional[str]: Absolute path of the candidate, or None.
    """
    last_path: Optional[str] = None
    last_mtime = 0.0
    with os.scandir(folder) as entries:
        for entry in entries:
            if not entry.name.startswith(LOG_FILE_PREFIX) or not entry.is_file():
                continue
            mtime = entry.stat().st_mtime
            if last_path is None or mtime > last_mtime:
                last_path = entry.path
                last_mtime = mtime
    return last_path
