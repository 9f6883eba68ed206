"""Tree entries — files and directories.

A node is one of exactly two variants, tagged by ``NodeKind``:

- **FileNode**: a leaf holding an opaque string payload.
- **DirectoryNode**: an ordered collection of child nodes with
  lookup by name.

Ownership runs strictly downward.  A directory's ``children`` list is
the only strong reference to a child; the child's ``parent`` is a
weak back-reference used for path walking.  Dropping a node from its
parent's list is therefore enough to release the whole subtree.

Why a two-variant union instead of an open class hierarchy?  There are
exactly two kinds of entry, and callers dispatch on them with a
``match`` statement.  A third variant would be a design change, not an
extension point.
"""

from __future__ import annotations

import weakref
from enum import StrEnum
from time import time
from typing import TypeAlias


class NodeKind(StrEnum):
    """The variant tag of a tree node."""

    FILE = "file"
    DIRECTORY = "directory"


class _NodeBase:
    """Identity and metadata shared by both node variants."""

    kind: NodeKind

    def __init__(self, name: str, parent: DirectoryNode | None = None) -> None:
        """Create a node.

        The node is *not* attached to ``parent``'s children; use
        ``DirectoryNode.attach`` for that.
        """
        self._name = name
        self._parent_ref: weakref.ref[DirectoryNode] | None = None
        self.parent = parent
        self._created_at: float = time()

    @property
    def name(self) -> str:
        """Return the node's name within its parent."""
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        """Rename the node in place.

        Raises:
            FileExistsError: If a sibling already uses *value*.

        """
        parent = self.parent
        if parent is not None and value != self._name:
            existing = parent.child(value)
            if existing is not None:
                msg = f"Already exists: {value}"
                raise FileExistsError(msg)
        self._name = value

    @property
    def created_at(self) -> float:
        """Return the wall-clock time the node was constructed."""
        return self._created_at

    @property
    def parent(self) -> DirectoryNode | None:
        """Return the owning directory, or None for the root or a detached node."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, value: DirectoryNode | None) -> None:
        self._parent_ref = weakref.ref(value) if value is not None else None

    def __repr__(self) -> str:
        """Show the variant and name."""
        return f"{type(self).__name__}({self._name!r})"


class FileNode(_NodeBase):
    """A leaf node with string content."""

    kind = NodeKind.FILE

    def __init__(self, name: str, parent: DirectoryNode | None = None, content: str = "") -> None:
        """Create a file node holding *content*."""
        super().__init__(name, parent)
        self.content = content

    def copy(self, new_parent: DirectoryNode | None) -> FileNode:
        """Return a duplicate parented under *new_parent*."""
        return FileNode(self.name, new_parent, self.content)


class DirectoryNode(_NodeBase):
    """A node owning an insertion-ordered list of children."""

    kind = NodeKind.DIRECTORY

    def __init__(self, name: str, parent: DirectoryNode | None = None) -> None:
        """Create an empty directory."""
        super().__init__(name, parent)
        self._children: list[Node] = []

    @property
    def children(self) -> list[Node]:
        """Return the children in insertion order (snapshot)."""
        return list(self._children)

    def child(self, name: str) -> Node | None:
        """Return the child called *name*, or None."""
        for node in self._children:
            if node.name == name:
                return node
        return None

    def owns(self, node: Node) -> bool:
        """Return True if *node* is one of this directory's children."""
        return any(candidate is node for candidate in self._children)

    def attach(self, node: Node) -> None:
        """Append *node* as a child and point its parent link here.

        Raises:
            ValueError: If another directory already owns *node*.
            FileExistsError: If a child already uses the node's name.

        """
        owner = node.parent
        if owner is not None and owner is not self and owner.owns(node):
            msg = f"Already attached to {owner.name}: {node.name}"
            raise ValueError(msg)
        if self.child(node.name) is not None:
            msg = f"Already exists: {node.name}"
            raise FileExistsError(msg)
        self._children.append(node)
        node.parent = self

    def detach(self, node: Node) -> None:
        """Remove *node* from the children and clear its parent link.

        Raises:
            ValueError: If *node* is not a child of this directory.

        """
        for i, candidate in enumerate(self._children):
            if candidate is node:
                del self._children[i]
                node.parent = None
                return
        msg = f"Not a child of {self.name}: {node.name}"
        raise ValueError(msg)

    def copy(self, new_parent: DirectoryNode | None) -> DirectoryNode:
        """Return a deep duplicate of this subtree parented under *new_parent*.

        Every descendant is copied and gets a fresh creation time.
        """
        duplicate = DirectoryNode(self.name, new_parent)
        for node in self._children:
            duplicate.attach(node.copy(duplicate))
        return duplicate


Node: TypeAlias = FileNode | DirectoryNode
