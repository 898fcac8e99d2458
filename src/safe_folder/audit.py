"""Append-only audit trail of every attempted file operation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from safe_folder.errors import AuditLogError

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ", "


def local_now() -> datetime:
    """Current local time with its UTC offset."""
    return datetime.now().astimezone()


class LogEntry(BaseModel):
    """One line of the audit log."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    action: str
    status: str

    @field_validator("timestamp")
    @classmethod
    def _require_offset(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            raise ValueError("timestamp must carry a UTC offset")
        return value

    def to_line(self) -> str:
        """Format as ``<RFC3339 timestamp>, <action>, <status>``.

        Line breaks inside the status are flattened so one entry is one line.
        """
        status = " ".join(self.status.splitlines())
        return FIELD_SEPARATOR.join([self.timestamp.isoformat(), self.action, status])

    @classmethod
    def from_line(cls, line: str) -> LogEntry:
        """Parse a line written by ``to_line``.

        Args:
            line: One audit log line, with or without trailing newline.

        Returns:
            Parsed LogEntry.

        Raises:
            ValueError: If the line does not have three fields or the
                timestamp is not valid ISO-8601 with an offset.
        """
        parts = line.rstrip("\r\n").split(FIELD_SEPARATOR, 2)
        if len(parts) != 3:
            raise ValueError(f"Malformed audit log line: {line!r}")
        timestamp, action, status = parts
        return cls(timestamp=datetime.fromisoformat(timestamp), action=action, status=status)


class FileAuditLogger:
    """Audit log persisted as a plain text file.

    The file is reopened in append mode for every entry and never truncated.
    Satisfies the AuditLog protocol structurally.
    """

    def __init__(self, log_file: Path, clock: Callable[[], datetime] | None = None) -> None:
        """Initialize the logger.

        Args:
            log_file: Path of the log file. Created on first write.
            clock: Source of timestamps. Defaults to local time with offset.
        """
        self.log_file = log_file
        self.clock = clock or local_now

    def ensure_writable(self) -> None:
        """Open the log for append without writing anything.

        Raises:
            AuditLogError: If the log cannot be opened.
        """
        try:
            with self.log_file.open("a", encoding="utf-8"):
                pass
        except OSError as e:
            raise AuditLogError(f"Could not open {self.log_file}: {e}") from e

    def record(self, action: str, status: str) -> LogEntry:
        """Append one entry and flush it to disk."""
        entry = LogEntry(timestamp=self.clock(), action=action, status=status)
        try:
            with self.log_file.open("a", encoding="utf-8") as handle:
                handle.write(entry.to_line() + "\n")
                handle.flush()
        except OSError as e:
            raise AuditLogError(f"Could not write to {self.log_file}: {e}") from e
        logger.debug("Recorded %s: %s", action, status)
        return entry

    def entries(self) -> list[LogEntry]:
        """Read all entries back, oldest first.

        Lines that do not parse are skipped with a warning.
        """
        if not self.log_file.exists():
            return []
        try:
            lines = self.log_file.read_text(encoding="utf-8", errors="replace").splitlines()
        except OSError as e:
            raise AuditLogError(f"Could not read {self.log_file}: {e}") from e

        entries = []
        for lineno, line in enumerate(lines, 1):
            if not line.strip():
                continue
            try:
                entries.append(LogEntry.from_line(line))
            except (ValueError, ValidationError):
                logger.warning("Skipping malformed line %d in %s", lineno, self.log_file)
        return entries


class MemoryAuditLogger:
    """Audit log kept in memory.

    Used where nothing should be persisted, such as tests and dry runs.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self.clock = clock or local_now
        self._entries: list[LogEntry] = []

    def record(self, action: str, status: str) -> LogEntry:
        """Append one entry."""
        entry = LogEntry(timestamp=self.clock(), action=action, status=status)
        self._entries.append(entry)
        return entry

    def entries(self) -> list[LogEntry]:
        """Return a copy of all entries, oldest first."""
        return list(self._entries)
