"""The shell — command interpreter for the simulated file system.

The shell reads a command string, splits it into a command name and
arguments, dispatches to the matching handler, and returns a string
result.  Handlers talk to the ``FileSystem`` through its public
operations only.

Design choices:
    - **Returns strings, not prints.**  This keeps the shell fully
      testable; the REPL decides how to display output.
    - **Command dispatch via a dict.**  Adding a command means writing
      a method and adding one dict entry.
    - **Journal lines ride along with the output.**  The file system
      journals into the shell's ``Logger``; when ``ECHO_JOURNAL`` is on,
      whatever a command logged is printed ahead of its result.
"""

from collections.abc import Callable
from typing import TypeAlias

from treefs.env import Environment
from treefs.filesystem import FileSystem, OpResult
from treefs.journal import LoggingJournal
from treefs.logging import Logger, LogLevel
from treefs.nodes import NodeKind

# Type alias for a command handler: takes a list of args, returns output.
_Handler: TypeAlias = Callable[[list[str]], str]

_KIND_TAGS: dict[NodeKind, str] = {
    NodeKind.DIRECTORY: "[DIR]",
    NodeKind.FILE: "[FILE]",
}


class Shell:
    """Command interpreter bound to one file system."""

    EXIT_SENTINEL = "__EXIT__"

    def __init__(
        self,
        *,
        fs: FileSystem | None = None,
        env: Environment | None = None,
        logger: Logger | None = None,
    ) -> None:
        """Create a shell.

        Args:
            fs: The file system to drive.  A fresh one journaling into
                *logger* is created if not provided.
            env: Shell variables.  Defaults are used if not provided.
            logger: Log buffer shown by ``log`` and echoed after each
                command.

        """
        self._logger = logger if logger is not None else Logger()
        self._env = env if env is not None else Environment()
        self._fs = fs if fs is not None else FileSystem(journal=LoggingJournal(self._logger))

        # Command dispatch table: maps command names to handler methods.
        self._commands: dict[str, _Handler] = {
            "help": self._cmd_help,
            "ls": self._cmd_ls,
            "mkdir": self._cmd_mkdir,
            "touch": self._cmd_touch,
            "rm": self._cmd_rm,
            "cd": self._cmd_cd,
            "ren": self._cmd_rename,
            "mv": self._cmd_rename,
            "cp": self._cmd_cp,
            "pwd": self._cmd_pwd,
            "log": self._cmd_log,
            "env": self._cmd_env,
            "export": self._cmd_export,
            "exit": self._cmd_exit,
        }

    @property
    def fs(self) -> FileSystem:
        """Return the file system this shell drives."""
        return self._fs

    @property
    def env(self) -> Environment:
        """Return the shell variables."""
        return self._env

    @property
    def logger(self) -> Logger:
        """Return the shell's log buffer."""
        return self._logger

    @property
    def command_names(self) -> list[str]:
        """Return the sorted list of command names."""
        return sorted(self._commands)

    def execute(self, command: str) -> str:
        """Parse and execute one command line.

        Args:
            command: The raw command string (e.g. "mkdir docs").

        Returns:
            The command output, an ``Error:``/``Usage:`` message, or
            ``EXIT_SENTINEL``.

        """
        parts = command.strip().split()
        if not parts:
            return ""

        name = parts[0].lower()
        args = parts[1:]

        handler = self._commands.get(name)
        if handler is None:
            return f"Unknown command: {name}"

        mark = len(self._logger)
        output = handler(args)
        if output == self.EXIT_SENTINEL or not self._env.flag("ECHO_JOURNAL"):
            return output

        echoed = [str(entry) for entry in self._logger.since(mark)]
        return "\n".join([*echoed, output] if output else echoed)

    @staticmethod
    def _report(result: OpResult) -> str:
        """Turn an operation outcome into shell output."""
        return "" if result.ok else f"Error: {result}"

    # -- Command handlers ------------------------------------------------

    def _cmd_help(self, _args: list[str]) -> str:
        """List available commands."""
        return "Available commands: " + ", ".join(self.command_names)

    def _cmd_ls(self, _args: list[str]) -> str:
        """List the current directory."""
        lines = [f"Contents of {self._fs.current_path}:"]
        entries = self._fs.ls()
        if not entries:
            lines.append("(empty)")
        lines.extend(f"{_KIND_TAGS[entry.kind]}\t{entry.name}" for entry in entries)
        return "\n".join(lines)

    def _cmd_mkdir(self, args: list[str]) -> str:
        """Create a directory."""
        if not args:
            return "Usage: mkdir <name>"
        return self._report(self._fs.mkdir(args[0]))

    def _cmd_touch(self, args: list[str]) -> str:
        """Create a file, with the remaining words as its content."""
        if not args:
            return "Usage: touch <name> [content...]"
        content = " ".join(args[1:]) if len(args) > 1 else self._env.get("TOUCH_CONTENT", "")
        return self._report(self._fs.touch(args[0], content or ""))

    def _cmd_rm(self, args: list[str]) -> str:
        """Delete a file or directory (with everything under it)."""
        if not args:
            return "Usage: rm <name>"
        return self._report(self._fs.rm(args[0]))

    def _cmd_cd(self, args: list[str]) -> str:
        """Change the current directory."""
        if not args:
            return "Usage: cd <directory> | cd .. | cd /"
        return self._report(self._fs.cd(args[0]))

    def _cmd_rename(self, args: list[str]) -> str:
        """Rename a file or directory in place."""
        if len(args) < 2:  # noqa: PLR2004
            return "Usage: ren <old_name> <new_name>"
        return self._report(self._fs.rename(args[0], args[1]))

    def _cmd_cp(self, args: list[str]) -> str:
        """Copy a file or directory tree beside the original."""
        if len(args) < 2:  # noqa: PLR2004
            return "Usage: cp <source> <new_name>"
        return self._report(self._fs.cp(args[0], args[1]))

    def _cmd_pwd(self, _args: list[str]) -> str:
        """Print the current path."""
        return self._fs.current_path

    def _cmd_log(self, args: list[str]) -> str:
        """Show log entries; ``log errors`` shows only failures."""
        if args and args[0] != "errors":
            return "Usage: log [errors]"
        min_level = LogLevel.ERROR if args else None
        entries = self._logger.filter(min_level=min_level)
        return "\n".join(str(e) for e in entries) if entries else "No log entries."

    def _cmd_env(self, _args: list[str]) -> str:
        """List all shell variables."""
        return "\n".join(f"{k}={v}" for k, v in sorted(self._env.items()))

    def _cmd_export(self, args: list[str]) -> str:
        """Set a shell variable (KEY=VALUE)."""
        if not args or "=" not in args[0]:
            return "Usage: export KEY=VALUE"
        key, value = args[0].split("=", 1)
        self._env.set(key, value)
        return ""

    def _cmd_exit(self, _args: list[str]) -> str:
        """Signal the REPL to stop."""
        return self.EXIT_SENTINEL
