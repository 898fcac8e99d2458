"""Exception hierarchy for safe-folder.

Operation failures carry an ``ErrorKind`` tag so callers can branch on the
kind of failure without parsing messages. I/O failures keep the underlying
``OSError`` both as ``os_error`` and as the exception's ``__cause__``.
"""

from __future__ import annotations

from enum import Enum

__all__ = [
    "AuditLogError",
    "ConfigError",
    "ErrorKind",
    "FileIOError",
    "InvalidPathError",
    "NotFoundError",
    "OperationError",
    "SafeFolderError",
]


class ErrorKind(str, Enum):
    """Outcome taxonomy for file operations."""

    INVALID_PATH = "invalid_path"
    NOT_FOUND = "not_found"
    IO_ERROR = "io_error"
    USER_CANCELLED = "user_cancelled"


class SafeFolderError(Exception):
    """Base class for all safe-folder errors."""

    pass


class OperationError(SafeFolderError):
    """A file operation failed after its outcome was recorded.

    Attributes:
        kind: Failure kind.
        action: Name of the action that failed (backup, retrieve, delete).
    """

    kind: ErrorKind

    def __init__(self, message: str, action: str) -> None:
        super().__init__(message)
        self.action = action


class InvalidPathError(OperationError):
    """Path was rejected by the traversal check."""

    kind = ErrorKind.INVALID_PATH


class NotFoundError(OperationError):
    """Source file does not exist or is not a regular file."""

    kind = ErrorKind.NOT_FOUND


class FileIOError(OperationError):
    """Open, read, write or delete failed."""

    kind = ErrorKind.IO_ERROR

    def __init__(self, message: str, action: str, os_error: OSError) -> None:
        super().__init__(message, action)
        self.os_error = os_error


class AuditLogError(SafeFolderError):
    """The audit log could not be opened or appended.

    Not an OperationError: operations never handle it, and the CLI aborts.
    """

    pass


class ConfigError(SafeFolderError):
    """Configuration file or environment value is invalid."""

    pass
