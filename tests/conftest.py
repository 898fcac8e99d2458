"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from safe_folder.audit import MemoryAuditLogger
from safe_folder.context import AppContext
from safe_folder.filesystem import RealFileSystem
from safe_folder.validation import is_affirmative

FIXED_TIME = datetime(2026, 10, 19, 14, 30, 0, tzinfo=timezone(timedelta(hours=2)))


class ScriptedConfirmer:
    """Confirmer that answers from a list of canned responses."""

    def __init__(self, *responses: str) -> None:
        self.responses = list(responses)
        self.messages: list[str] = []

    def confirm(self, message: str) -> bool:
        self.messages.append(message)
        return is_affirmative(self.responses.pop(0))


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock that always returns the same offset-aware time."""
    return lambda: FIXED_TIME


@pytest.fixture
def memory_audit(fixed_clock: Callable[[], datetime]) -> MemoryAuditLogger:
    """In-memory audit sink."""
    return MemoryAuditLogger(clock=fixed_clock)


@pytest.fixture
def confirmer_factory() -> Callable[..., ScriptedConfirmer]:
    """Build a confirmer that replays the given responses."""
    return ScriptedConfirmer


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """A small text file to back up."""
    path = tmp_path / "data" / "a.txt"
    path.parent.mkdir()
    path.write_bytes(b"hi")
    return path


@pytest.fixture
def backup_dir(tmp_path: Path) -> Path:
    """An existing, empty backup directory."""
    path = tmp_path / "bk"
    path.mkdir()
    return path


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for failure injection.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.is_file.return_value = True
    return fs


# ============================================================================
# App Context Fixtures
# ============================================================================


@pytest.fixture
def app_context(memory_audit: MemoryAuditLogger) -> AppContext:
    """Context with a real filesystem, in-memory audit log and a 'no' confirmer."""
    return AppContext(
        audit=memory_audit,
        filesystem=RealFileSystem(),
        confirmer=ScriptedConfirmer("no"),
    )
