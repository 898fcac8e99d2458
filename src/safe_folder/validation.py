"""Path validation for safe-folder.

Every operation runs caller-supplied paths through ``validate_path`` before
touching the filesystem. This is the only traversal defense.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath, PureWindowsPath

from safe_folder.errors import InvalidPathError

PARENT_DIR = ".."

TRAVERSAL_STATUS = "Invalid input - path traversal detected"


def is_valid_path(value: str) -> bool:
    """Check that a path string is safe to use.

    Rejects the literal ``..`` marker anywhere in the string, any ``..``
    component under POSIX or Windows decomposition, the empty string, and
    strings containing NUL.

    Args:
        value: Untrusted path string.

    Returns:
        True if the path may be used, False otherwise.

    Example:
        >>> is_valid_path("backups/a.txt")
        True
        >>> is_valid_path("../etc/passwd")
        False
    """
    if not value or "\x00" in value:
        return False
    if PARENT_DIR in value:
        return False
    for flavour in (PurePosixPath, PureWindowsPath):
        if PARENT_DIR in flavour(value).parts:
            return False
    return True


def is_affirmative(response: str) -> bool:
    """Check a confirmation response.

    Only "yes" is accepted, ignoring surrounding whitespace and letter case.
    "y" and anything else count as a decline.
    """
    return response.strip().casefold() == "yes"


def validate_path(value: str, action: str) -> Path:
    """Convert an untrusted string into a validated Path.

    Args:
        value: Untrusted path string.
        action: Name of the calling action, attached to the error.

    Returns:
        The validated path.

    Raises:
        InvalidPathError: If the path fails ``is_valid_path``.
    """
    if not is_valid_path(value):
        raise InvalidPathError(f"Invalid file path: {value!r}", action)
    return Path(value)
