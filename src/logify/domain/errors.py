from __future__ import annotations

"""
Error taxonomy of the logging pipeline.

None of these reach the host application: they are reported through a
side channel and swallowed. Caller misuse of format placeholders is the
only fault surfaced, as the plain TypeError/ValueError raised by '%'.
"""

NOT_INITIALIZED_MESSAGE = (
    "Error: Logify has not been initialized! Please ensure that the logging "
    "system is properly initialized before attempting to use it. You can "
    "initialize Logify by calling the initialize() method before logging "
    "any messages."
)


class LogifyError(Exception):
    """Base class for failures internal to the logging pipeline."""


class NotInitializedError(LogifyError):
    """A logging or control call arrived before initialize()."""

    def __init__(self, message: str = NOT_INITIALIZED_MESSAGE) -> None:
        super().__init__(message)


class FileIOError(LogifyError):
    """
    Persisting a line failed (directory creation, listing or append).

    Attributes:
        path: Filesystem location involved in the failure, when known.
    """

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path
