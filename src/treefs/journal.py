"""Operation journal — start/commit/error events around every mutation.

Before changing the tree, the filesystem announces *what it is about to
do*; afterwards it reports whether the change went through.  Each
mutating operation produces exactly one ``start`` followed by exactly
one of ``commit`` or ``error``.  Queries (``ls``, ``cd``) produce none.

This journal is advisory only.  Nothing is buffered for replay and
nothing survives the process: it exists so that people and tests can
watch the filesystem work.

Why an injected sink instead of printing?  The filesystem knows nothing
about consoles.  It talks to an ``OperationLog``, and the caller decides
where events go:

- ``NullJournal`` drops them (the default, so nothing accumulates).
- ``RecordingJournal`` keeps them in memory for inspection.
- ``LoggingJournal`` forwards them to a ``Logger`` for the shell.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from time import monotonic, strftime
from typing import TYPE_CHECKING, Protocol

from treefs.logging import LogLevel

if TYPE_CHECKING:
    from treefs.logging import Logger


class JournalOp(StrEnum):
    """Represent the type of tree mutation being journaled."""

    MKDIR = "mkdir"
    TOUCH = "touch"
    RM = "rm"
    RENAME = "rename"
    CP = "cp"


class EventKind(StrEnum):
    """The three journal event kinds."""

    START = "start"
    COMMIT = "commit"
    ERROR = "error"


class OperationLog(Protocol):
    """The sink a ``FileSystem`` reports its mutations to.

    Emission is fire-and-forget: no return value, no failure mode.
    """

    def start(self, operation: str, target: str) -> None:
        """Record that *operation* is about to act on *target*."""
        ...

    def commit(self, operation: str) -> None:
        """Record that *operation* completed."""
        ...

    def error(self, operation: str, detail: str) -> None:
        """Record that *operation* failed, leaving the tree untouched."""
        ...


@dataclass(frozen=True)
class JournalEvent:
    """A single journal event.

    ``detail`` is the target for ``start``, the failure message for
    ``error`` and empty for ``commit``.
    """

    kind: EventKind
    operation: str
    detail: str
    timestamp: float


class NullJournal:
    """Discard every event."""

    def start(self, operation: str, target: str) -> None:
        """Ignore a START event."""

    def commit(self, operation: str) -> None:
        """Ignore a COMMIT event."""

    def error(self, operation: str, detail: str) -> None:
        """Ignore an ERROR event."""


class RecordingJournal:
    """Keep journal events in memory, in emission order."""

    def __init__(self) -> None:
        """Create an empty journal."""
        self._events: list[JournalEvent] = []

    @property
    def events(self) -> list[JournalEvent]:
        """Return all recorded events (read-only snapshot)."""
        return list(self._events)

    def start(self, operation: str, target: str) -> None:
        """Record a START event."""
        self._record(EventKind.START, operation, target)

    def commit(self, operation: str) -> None:
        """Record a COMMIT event."""
        self._record(EventKind.COMMIT, operation, "")

    def error(self, operation: str, detail: str) -> None:
        """Record an ERROR event."""
        self._record(EventKind.ERROR, operation, detail)

    def _record(self, kind: EventKind, operation: str, detail: str) -> None:
        self._events.append(
            JournalEvent(kind=kind, operation=operation, detail=detail, timestamp=monotonic())
        )

    def clear(self) -> None:
        """Forget every recorded event."""
        self._events.clear()


class LoggingJournal:
    """Forward journal events to a ``Logger`` under the ``journal`` source.

    START and COMMIT are logged at INFO, ERROR at ERROR, so
    ``logger.filter(min_level=LogLevel.ERROR)`` yields just the failures.
    """

    SOURCE = "journal"
    TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

    def __init__(self, logger: Logger) -> None:
        """Create a journal writing into *logger*."""
        self._logger = logger

    def start(self, operation: str, target: str) -> None:
        """Log ``START OP: <OP> on '<target>' - <local time>``."""
        self._logger.log(
            LogLevel.INFO,
            f"START OP: {operation.upper()} on '{target}' - {strftime(self.TIME_FORMAT)}",
            source=self.SOURCE,
        )

    def commit(self, operation: str) -> None:
        """Log ``COMMIT: <OP> succeeded``."""
        self._logger.log(LogLevel.INFO, f"COMMIT: {operation.upper()} succeeded", source=self.SOURCE)

    def error(self, operation: str, detail: str) -> None:
        """Log ``ERROR: <OP> failed: <detail>``."""
        self._logger.log(
            LogLevel.ERROR,
            f"ERROR: {operation.upper()} failed: {detail}",
            source=self.SOURCE,
        )
