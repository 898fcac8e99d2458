"""Audited file backup, retrieval and deletion with path-traversal checks."""

__version__ = "0.1.0"

# Export protocol interfaces for type hints and dependency injection
from safe_folder.protocols import (
    AuditLog,
    Confirmer,
    FileSystem,
)

__all__ = [
    "__version__",
    "AuditLog",
    "Confirmer",
    "FileSystem",
]
