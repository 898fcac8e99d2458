"""Application context for dependency injection.

This module separates object creation from object use, enabling testability
and reducing coupling in CLI commands.

Dependencies are typed using Protocols rather than concrete implementations,
so tests can pass an in-memory audit log or a scripted confirmer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from safe_folder.operations import BackupOperation, DeleteOperation, RetrieveOperation
from safe_folder.protocols import AuditLog, Confirmer, FileSystem

if TYPE_CHECKING:
    from safe_folder.config import Settings


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from safe_folder.filesystem import RealFileSystem
    return RealFileSystem()


def _default_confirmer() -> Confirmer:
    """Create the default terminal confirmer."""
    from safe_folder.console import ConsoleConfirmer
    return ConsoleConfirmer()


@dataclass
class AppContext:
    """Container for application dependencies.

    Provides a single injection point for all services used by CLI commands.
    """

    audit: AuditLog
    filesystem: FileSystem = field(default_factory=_default_filesystem)
    confirmer: Confirmer = field(default_factory=_default_confirmer)
    encoding: str = "utf-8"

    @property
    def backup(self) -> BackupOperation:
        """Backup operation wired to this context."""
        return BackupOperation(self.filesystem, self.audit)

    @property
    def retrieve(self) -> RetrieveOperation:
        """Retrieve operation wired to this context."""
        return RetrieveOperation(self.filesystem, self.audit, encoding=self.encoding)

    @property
    def delete(self) -> DeleteOperation:
        """Delete operation wired to this context."""
        return DeleteOperation(self.filesystem, self.audit, self.confirmer)


def create_context(settings: Settings) -> AppContext:
    """Factory for application dependencies.

    Creates all services with proper wiring and checks the audit log can be
    opened before any operation runs. For tests, construct AppContext
    directly with test doubles.

    Args:
        settings: Effective configuration.

    Returns:
        Configured AppContext.

    Raises:
        AuditLogError: If the audit log cannot be opened for append.
    """
    from safe_folder.audit import FileAuditLogger
    from safe_folder.console import ConsoleConfirmer
    from safe_folder.filesystem import RealFileSystem

    audit = FileAuditLogger(settings.log_file)
    audit.ensure_writable()

    return AppContext(
        audit=audit,
        filesystem=RealFileSystem(),
        confirmer=ConsoleConfirmer(),
        encoding=settings.encoding,
    )
