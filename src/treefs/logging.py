"""Shell logging — an in-memory record of what the simulator did.

Every journal event and shell-level notice ends up here as a structured
entry.  The buffer lives for the lifetime of the shell and is shown by
the ``log`` command.

- **LogLevel** — severity levels ordered for filtering (DEBUG < ERROR).
- **LogEntry** — a single immutable record (level, message, source, time).
- **Logger** — an append-only buffer with filtering and clearing.

Design choices:
    - **IntEnum for levels** so they compare naturally with ``<``.
    - **Frozen dataclass for entries** — log records should be immutable.
    - **Filter returns a list, not a generator** — the buffer is small
      and callers usually iterate more than once.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from time import time


class LogLevel(IntEnum):
    """Severity levels for log entries."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """A single structured log record.

    Attributes:
        level: The severity of this event.
        message: A human-readable description of what happened.
        source: The component that produced the event (e.g. "journal").
        timestamp: Wall-clock time the entry was recorded.

    """

    level: LogLevel
    message: str
    source: str
    timestamp: float = field(default_factory=time)

    def __str__(self) -> str:
        """Format as ``[LEVEL] source: message``."""
        return f"[{self.level.name}] {self.source}: {self.message}"


class Logger:
    """Append-only log buffer with filtering."""

    def __init__(self) -> None:
        """Create an empty logger."""
        self._entries: list[LogEntry] = []

    @property
    def entries(self) -> list[LogEntry]:
        """Return all log entries in chronological order."""
        return list(self._entries)

    def __len__(self) -> int:
        """Return the number of recorded entries."""
        return len(self._entries)

    def log(self, level: LogLevel, message: str, *, source: str) -> None:
        """Append a new entry to the log.

        Args:
            level: Severity of the event.
            message: Human-readable event description.
            source: Component that generated the event.

        """
        self._entries.append(LogEntry(level=level, message=message, source=source))

    def since(self, index: int) -> list[LogEntry]:
        """Return the entries recorded at or after position *index*.

        Callers note ``len(logger)`` before an action and pass it here
        afterwards to see only what that action produced.
        """
        return self._entries[index:]

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
    ) -> list[LogEntry]:
        """Return entries matching the given criteria.

        Args:
            min_level: If set, only return entries at or above this level.
            source: If set, only return entries from this source.

        Returns:
            A filtered list of log entries.

        """
        result = list(self._entries)
        if min_level is not None:
            result = [e for e in result if e.level >= min_level]
        if source is not None:
            result = [e for e in result if e.source == source]
        return result

    def clear(self) -> None:
        """Remove all log entries."""
        self._entries.clear()
