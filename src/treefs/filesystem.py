"""In-memory file system with a current-directory cursor.

The file system owns a single root directory named ``/`` and a cursor,
``current_directory``, that starts at the root and is moved only by
``cd``.  Every other operation works on the cursor's direct children:

- ``mkdir`` / ``touch`` create a child.
- ``rm`` detaches a child together with its subtree.
- ``rename`` changes a child's name in place.
- ``cp`` deep-copies a child under a new name beside the original.
- ``ls`` lists the children; ``cd`` moves the cursor.

Expected failures (a name already taken, a missing child, ...) are not
exceptions.  Each operation returns an ``OpResult`` describing what
happened, and mutating operations also report the failure through the
journal.  Every precondition is checked before the tree is touched, so
a failed call never leaves a half-applied change.

Operand names are single path components.  Because nothing can reach
outside the cursor's children, ``rm`` can never remove an ancestor of
the cursor and ``cp`` can never place a directory inside itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from treefs.journal import JournalOp, NullJournal
from treefs.nodes import DirectoryNode, FileNode, NodeKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from treefs.journal import OperationLog
    from treefs.nodes import Node

ROOT_NAME = "/"
PARENT_TOKEN = ".."

_RESERVED_NAMES = frozenset({"", ".", PARENT_TOKEN})


class FsError(StrEnum):
    """Reported failure outcomes; each value is the human-readable message."""

    ALREADY_EXISTS = "already exists"
    NOT_FOUND = "not found"
    NOT_A_DIRECTORY = "not a directory"
    NAME_TAKEN = "destination name already exists"
    DESTINATION_EXISTS = "destination already exists"
    SOURCE_NOT_FOUND = "source not found"
    INVALID_NAME = "invalid name"


@dataclass(frozen=True)
class OpResult:
    """The outcome of a single file system operation."""

    operation: str
    target: str
    error: FsError | None = None

    @property
    def ok(self) -> bool:
        """Return True if the operation succeeded."""
        return self.error is None

    def __str__(self) -> str:
        """Format as ``<target>: <message>`` for failures, empty otherwise."""
        if self.error is None:
            return ""
        return f"{self.target}: {self.error}"


@dataclass(frozen=True)
class DirEntry:
    """One line of a directory listing."""

    name: str
    kind: NodeKind


def is_valid_name(name: str) -> bool:
    """Return True if *name* can be used for a new or renamed node."""
    return name not in _RESERVED_NAMES and "/" not in name


class FileSystem:
    """A tree of files and directories with a current-directory cursor.

    Single-threaded: callers sharing one instance between threads must
    serialise access themselves.
    """

    def __init__(self, journal: OperationLog | None = None) -> None:
        """Create a file system holding only the root directory.

        Args:
            journal: Sink for start/commit/error events.  Events are
                discarded by a ``NullJournal`` when not provided; pass a
                ``RecordingJournal`` to keep them.

        """
        self._journal: OperationLog = journal if journal is not None else NullJournal()
        self._root = DirectoryNode(ROOT_NAME)
        self._cwd = self._root

    @property
    def journal(self) -> OperationLog:
        """Return the journal sink (for inspection/testing)."""
        return self._journal

    @property
    def root(self) -> DirectoryNode:
        """Return the root directory."""
        return self._root

    @property
    def current_directory(self) -> DirectoryNode:
        """Return the directory the cursor points at."""
        return self._cwd

    # -- Queries ------------------------------------------------------------

    def get_current_path(self) -> str:
        """Return the absolute path of the current directory.

        The root is rendered as ``/``; anything else as ``/a/b``.
        """
        if self._cwd is self._root:
            return ROOT_NAME
        parts: list[str] = []
        node: DirectoryNode | None = self._cwd
        while node is not None and node is not self._root:
            parts.append(node.name)
            node = node.parent
        return "/" + "/".join(reversed(parts))

    @property
    def current_path(self) -> str:
        """Return the absolute path of the current directory."""
        return self.get_current_path()

    def ls(self) -> list[DirEntry]:
        """List the current directory's children in insertion order."""
        return [DirEntry(name=node.name, kind=node.kind) for node in self._cwd.children]

    def cd(self, name: str) -> OpResult:
        """Move the cursor.

        ``..`` goes up one level (a no-op at the root), ``/`` jumps to
        the root, and anything else must name a child directory.
        """
        if name == PARENT_TOKEN:
            parent = self._cwd.parent
            if parent is not None:
                self._cwd = parent
            return OpResult("cd", name)
        if name == ROOT_NAME:
            self._cwd = self._root
            return OpResult("cd", name)

        target = self._cwd.child(name)
        if target is None:
            return OpResult("cd", name, FsError.NOT_FOUND)
        match target:
            case DirectoryNode():
                self._cwd = target
                return OpResult("cd", name)
            case FileNode():
                return OpResult("cd", name, FsError.NOT_A_DIRECTORY)

    # -- Journaled mutations ------------------------------------------------

    def mkdir(self, name: str) -> OpResult:
        """Create an empty directory in the current directory."""
        return self._create(JournalOp.MKDIR, name, lambda: DirectoryNode(name))

    def touch(self, name: str, content: str = "") -> OpResult:
        """Create a file holding *content* in the current directory."""
        return self._create(JournalOp.TOUCH, name, lambda: FileNode(name, content=content))

    def _create(self, op: JournalOp, name: str, factory: Callable[[], Node]) -> OpResult:
        """Check *name* is free, then attach the node built by *factory*."""
        self._journal.start(op, name)
        if not is_valid_name(name):
            return self._fail(op, name, FsError.INVALID_NAME)
        if self._cwd.child(name) is not None:
            return self._fail(op, name, FsError.ALREADY_EXISTS)
        self._cwd.attach(factory())
        return self._succeed(op, name)

    def rm(self, name: str) -> OpResult:
        """Detach a child, and its whole subtree, from the current directory."""
        op = JournalOp.RM
        self._journal.start(op, name)
        target = self._cwd.child(name)
        if target is None:
            return self._fail(op, name, FsError.NOT_FOUND)
        self._cwd.detach(target)
        return self._succeed(op, name)

    def rename(self, old_name: str, new_name: str) -> OpResult:
        """Rename a child in place; parent, children, and content are untouched."""
        op = JournalOp.RENAME
        self._journal.start(op, f"{old_name} -> {new_name}")
        target = self._cwd.child(old_name)
        if target is None:
            return self._fail(op, old_name, FsError.NOT_FOUND)
        if not is_valid_name(new_name):
            return self._fail(op, new_name, FsError.INVALID_NAME)
        if self._cwd.child(new_name) is not None:
            return self._fail(op, new_name, FsError.NAME_TAKEN)
        target.name = new_name
        return self._succeed(op, old_name)

    def cp(self, source_name: str, dest_name: str) -> OpResult:
        """Deep-copy a child under *dest_name* in the same directory."""
        op = JournalOp.CP
        self._journal.start(op, f"{source_name} -> {dest_name}")
        source = self._cwd.child(source_name)
        if source is None:
            return self._fail(op, source_name, FsError.SOURCE_NOT_FOUND)
        if not is_valid_name(dest_name):
            return self._fail(op, dest_name, FsError.INVALID_NAME)
        if self._cwd.child(dest_name) is not None:
            return self._fail(op, dest_name, FsError.DESTINATION_EXISTS)
        duplicate = source.copy(self._cwd)
        duplicate.name = dest_name
        self._cwd.attach(duplicate)
        return self._succeed(op, dest_name)

    def _succeed(self, op: JournalOp, target: str) -> OpResult:
        self._journal.commit(op)
        return OpResult(op, target)

    def _fail(self, op: JournalOp, target: str, error: FsError) -> OpResult:
        self._journal.error(op, error)
        return OpResult(op, target, error)
