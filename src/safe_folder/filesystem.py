"""Filesystem abstraction for testability.

The RealFileSystem implementation wraps standard library Path operations.
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO


class RealFileSystem:
    """Production filesystem implementation.

    Satisfies the FileSystem protocol structurally.
    """

    def is_file(self, path: Path) -> bool:
        """Check if a path is an existing regular file."""
        return path.is_file()

    def open_read(self, path: Path) -> BinaryIO:
        """Open a file for binary reading."""
        return path.open("rb")

    def open_write(self, path: Path) -> BinaryIO:
        """Create or truncate a file for binary writing."""
        return path.open("wb")

    def unlink(self, path: Path) -> None:
        """Remove a file."""
        path.unlink()
