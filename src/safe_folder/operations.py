"""Backup, retrieve and delete operations.

Each operation follows the same linear path: validate the path arguments,
check preconditions, touch the filesystem, record exactly one audit entry,
then return a result or raise. Any failure is recorded before it is raised.

Pattern: Template Method - FileOperation holds the shared validation and
failure-recording steps, subclasses implement ``execute``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from safe_folder.errors import FileIOError, InvalidPathError, NotFoundError
from safe_folder.protocols import AuditLog, Confirmer, FileSystem
from safe_folder.types import BackupResult, DeleteResult, RetrieveResult
from safe_folder.validation import TRAVERSAL_STATUS, validate_path

logger = logging.getLogger(__name__)

SUCCESS_STATUS = "Success"
MISSING_STATUS = "Invalid input - file does not exist"
CANCELLED_STATUS = "Cancelled by user"


class FileOperation:
    """Base class for audited file operations.

    Follows Separate Use from Creation: the constructor requires all
    dependencies, which AppContext wires for production use.
    """

    action: str

    def __init__(self, filesystem: FileSystem, audit: AuditLog) -> None:
        """Initialize with required dependencies.

        Args:
            filesystem: Filesystem implementation.
            audit: Audit log every outcome is recorded to.
        """
        self.fs = filesystem
        self.audit = audit

    def _record(self, status: str) -> None:
        logger.debug("%s finished: %s", self.action, status)
        self.audit.record(self.action, status)

    def _validate(self, value: str) -> Path:
        """Validate a path argument, recording the rejection if it fails."""
        try:
            path = validate_path(value, self.action)
        except InvalidPathError:
            self._record(TRAVERSAL_STATUS)
            raise
        logger.debug("%s: validated %s", self.action, path)
        return path

    def _io_failure(self, what: str, error: OSError) -> FileIOError:
        """Record an I/O failure and build the error to raise."""
        status = f"{what}: {error}"
        self._record(status)
        return FileIOError(status, self.action, error)

    def _read_all(self, path: Path, label: str) -> bytes:
        """Read a whole file into memory.

        Args:
            path: Validated path to read.
            label: Word used in the failure status ("source", "backup").

        Raises:
            FileIOError: If the file cannot be opened or read.
        """
        try:
            handle = self.fs.open_read(path)
        except OSError as e:
            raise self._io_failure(f"Failed to open {label} file", e) from e
        try:
            with handle:
                return handle.read()
        except OSError as e:
            raise self._io_failure(f"Failed to read {label} file", e) from e


class BackupOperation(FileOperation):
    """Copy a file into a backup directory.

    Only the file name is kept; an existing file of the same name in the
    backup directory is overwritten without warning. The backup directory
    must already exist.
    """

    action = "backup"

    def execute(self, source: str, backup_dir: str) -> BackupResult:
        """Copy ``source`` to ``backup_dir/<source name>``.

        Args:
            source: Path of the file to back up.
            backup_dir: Directory to copy the file into.

        Returns:
            BackupResult with the destination path.

        Raises:
            InvalidPathError: If either path fails validation.
            NotFoundError: If the source is not an existing regular file.
            FileIOError: If reading the source or writing the copy fails.
        """
        source_path = self._validate(source)
        backup_path = self._validate(backup_dir)

        if not self.fs.is_file(source_path):
            self._record(MISSING_STATUS)
            raise NotFoundError("Source file does not exist or is not a file", self.action)

        content = self._read_all(source_path, "source")
        destination = backup_path / source_path.name

        try:
            handle = self.fs.open_write(destination)
        except OSError as e:
            raise self._io_failure("Failed to create backup file", e) from e
        try:
            with handle:
                handle.write(content)
        except OSError as e:
            raise self._io_failure("Failed to write backup file", e) from e

        self._record(SUCCESS_STATUS)
        return BackupResult(source=source_path, destination=destination, size=len(content))


class RetrieveOperation(FileOperation):
    """Read back the full content of a backup file."""

    action = "retrieve"

    def __init__(self, filesystem: FileSystem, audit: AuditLog, encoding: str = "utf-8") -> None:
        super().__init__(filesystem, audit)
        self.encoding = encoding

    def execute(self, backup_file: str) -> RetrieveResult:
        """Read ``backup_file`` into memory.

        Raises:
            InvalidPathError: If the path fails validation.
            FileIOError: If the file cannot be opened or read, including
                when it does not exist.
        """
        path = self._validate(backup_file)
        content = self._read_all(path, "backup")
        self._record(SUCCESS_STATUS)
        return RetrieveResult(path=path, content=content, encoding=self.encoding)


class DeleteOperation(FileOperation):
    """Delete a file after interactive confirmation."""

    action = "delete"

    def __init__(self, filesystem: FileSystem, audit: AuditLog, confirmer: Confirmer) -> None:
        super().__init__(filesystem, audit)
        self.confirmer = confirmer

    def execute(self, target: str) -> DeleteResult:
        """Ask for confirmation, then delete ``target``.

        A declined confirmation is recorded and returned as a cancelled
        result; it is not an error.

        Raises:
            InvalidPathError: If the path fails validation.
            FileIOError: If the file cannot be removed.
        """
        path = self._validate(target)

        if not self.confirmer.confirm(f"Are you sure you want to delete '{target}'? (yes/no)"):
            self._record(CANCELLED_STATUS)
            return DeleteResult(path=path, deleted=False)

        try:
            self.fs.unlink(path)
        except OSError as e:
            raise self._io_failure("Failed to delete file", e) from e

        self._record(SUCCESS_STATUS)
        return DeleteResult(path=path, deleted=True)
