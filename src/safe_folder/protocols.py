"""Protocol definitions for core abstractions.

Operations depend on these interfaces rather than on concrete classes so
tests can substitute an in-memory audit sink, a scripted confirmer, or a
filesystem double that fails on demand.

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Protocol, runtime_checkable

if TYPE_CHECKING:
    from safe_folder.audit import LogEntry


@runtime_checkable
class AuditLog(Protocol):
    """Protocol for the append-only audit trail."""

    def record(self, action: str, status: str) -> LogEntry:
        """Append one entry for an action attempt.

        Args:
            action: Action name (backup, retrieve, delete).
            status: Human-readable outcome.

        Returns:
            The entry that was appended.

        Raises:
            AuditLogError: If the log cannot be opened or appended.
        """
        ...

    def entries(self) -> list[LogEntry]:
        """Return all recorded entries, oldest first."""
        ...


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem operations.

    Abstracts filesystem access to enable testing failures without real I/O.
    Every method may raise OSError.
    """

    def is_file(self, path: Path) -> bool:
        """Check if a path is an existing regular file.

        Args:
            path: Path to check.

        Returns:
            True if path is a regular file, False otherwise.
        """
        ...

    def open_read(self, path: Path) -> BinaryIO:
        """Open a file for binary reading.

        Args:
            path: Path to the file.

        Returns:
            Open binary file handle.

        Raises:
            FileNotFoundError: If file does not exist.
        """
        ...

    def open_write(self, path: Path) -> BinaryIO:
        """Create or truncate a file for binary writing.

        Args:
            path: Path to the file.

        Returns:
            Open binary file handle.
        """
        ...

    def unlink(self, path: Path) -> None:
        """Remove a file.

        Args:
            path: Path to remove.
        """
        ...


@runtime_checkable
class Confirmer(Protocol):
    """Protocol for interactive yes/no confirmation."""

    def confirm(self, message: str) -> bool:
        """Ask the operator to confirm an action.

        Args:
            message: Question shown to the operator.

        Returns:
            True only if the operator answered "yes".
        """
        ...
