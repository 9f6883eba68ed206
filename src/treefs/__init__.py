"""treefs — an in-memory hierarchical file system driven by a small shell.

Re-exports public symbols so callers can write::

    from treefs import FileSystem, RecordingJournal
"""

from treefs.filesystem import DirEntry, FileSystem, FsError, OpResult
from treefs.journal import (
    EventKind,
    JournalEvent,
    JournalOp,
    LoggingJournal,
    NullJournal,
    OperationLog,
    RecordingJournal,
)
from treefs.nodes import DirectoryNode, FileNode, Node, NodeKind

__all__ = [
    "DirEntry",
    "DirectoryNode",
    "EventKind",
    "FileNode",
    "FileSystem",
    "FsError",
    "JournalEvent",
    "JournalOp",
    "LoggingJournal",
    "Node",
    "NodeKind",
    "NullJournal",
    "OpResult",
    "OperationLog",
    "RecordingJournal",
]
