"""Context-aware tab completer for the treefs shell.

The completer separates **what to complete** (pure logic, fully
testable) from **how to wire it** (readline integration in the REPL).

The ``complete(text, state)`` method is the readline callback.  It
delegates to ``completions(text, line)`` which analyses the input
context and returns a list of candidate strings.
"""

from __future__ import annotations

import readline
from typing import TYPE_CHECKING

from treefs.nodes import NodeKind

if TYPE_CHECKING:
    from treefs.shell import Shell

# Commands whose arguments name children of the current directory.
_NAME_COMMANDS: frozenset[str] = frozenset(["rm", "ren", "mv", "cp"])

# Completions offered for the first argument of ``log``.
_LOG_FILTERS: list[str] = ["errors"]


class Completer:
    """Context-aware tab completer for the treefs shell."""

    def __init__(self, shell: Shell) -> None:
        """Create a completer attached to a shell instance.

        Args:
            shell: The shell whose commands and file system are used to
                   generate completion candidates.

        """
        self._shell = shell

    def complete(self, text: str, state: int) -> str | None:
        """Readline callback — return the *state*-th candidate for *text*.

        Args:
            text: The partial word being completed.
            state: Index into the candidate list (0, 1, 2, …).

        Returns:
            The candidate at *state*, or ``None`` when exhausted.

        """
        line = readline.get_line_buffer()
        candidates = self.completions(text, line)
        if state < len(candidates):
            return candidates[state]
        return None

    def completions(self, text: str, line: str) -> list[str]:
        """Return completion candidates based on context.

        Args:
            text: The partial word under the cursor.
            line: The full input line so far.

        Returns:
            Sorted list of matching candidates.

        """
        words = line.lstrip().split()

        # No words yet, or still typing the first word → command completion
        if not words or (len(words) == 1 and not line.endswith(" ")):
            return [cmd for cmd in self._shell.command_names if cmd.startswith(text)]

        cmd = words[0].lower()
        if cmd == "cd":
            return self._complete_children(text, only=NodeKind.DIRECTORY)
        if cmd in _NAME_COMMANDS:
            return self._complete_children(text)
        if cmd == "log":
            return [f for f in _LOG_FILTERS if f.startswith(text)]
        return []

    def _complete_children(self, text: str, *, only: NodeKind | None = None) -> list[str]:
        """Complete names of the current directory's children."""
        return sorted(
            entry.name
            for entry in self._shell.fs.ls()
            if entry.name.startswith(text) and (only is None or entry.kind is only)
        )
