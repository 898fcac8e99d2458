"""Shared data types for safe-folder."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from safe_folder.errors import ErrorKind

__all__ = ["BackupResult", "DeleteResult", "RetrieveResult"]


@dataclass(frozen=True)
class BackupResult:
    """Result of a backup operation.

    Attributes:
        source: Validated source file path.
        destination: Path the content was written to.
        size: Number of bytes copied.
    """

    source: Path
    destination: Path
    size: int

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.size < 0:
            raise ValueError("size cannot be negative")


@dataclass(frozen=True)
class RetrieveResult:
    """Result of reading back a backup file.

    Attributes:
        path: Validated backup file path.
        content: Raw file content.
        encoding: Encoding used for the text view.
    """

    path: Path
    content: bytes
    encoding: str = "utf-8"

    @property
    def size(self) -> int:
        """Number of bytes read."""
        return len(self.content)

    @property
    def text(self) -> str:
        """Content decoded as text, invalid sequences replaced with U+FFFD."""
        return self.content.decode(self.encoding, errors="replace")


@dataclass(frozen=True)
class DeleteResult:
    """Result of a delete operation.

    Attributes:
        path: Validated target path.
        deleted: True if the file was removed, False if the operator declined.
    """

    path: Path
    deleted: bool

    @property
    def cancelled(self) -> bool:
        """True if the operator declined the confirmation."""
        return not self.deleted

    @property
    def outcome(self) -> ErrorKind | None:
        """USER_CANCELLED for a declined delete, None otherwise."""
        return ErrorKind.USER_CANCELLED if self.cancelled else None
