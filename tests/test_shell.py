"""Tests for the shell module.

The shell is the command interpreter — it parses user input, dispatches
to built-in commands, and returns string output.  Journal lines are
echoed ahead of the result unless ``ECHO_JOURNAL`` is off.
"""

from treefs.env import Environment
from treefs.filesystem import FileSystem
from treefs.journal import RecordingJournal
from treefs.nodes import FileNode
from treefs.shell import Shell


def _quiet_shell() -> Shell:
    """Create a shell that does not echo journal lines."""
    return Shell(env=Environment({"ECHO_JOURNAL": "off"}))


class TestShellExecute:
    """Verify command parsing and dispatch."""

    def test_empty_command_returns_empty(self) -> None:
        """An empty command should produce no output."""
        assert _quiet_shell().execute("") == ""

    def test_whitespace_only_returns_empty(self) -> None:
        """Whitespace-only input should produce no output."""
        assert _quiet_shell().execute("   ") == ""

    def test_unknown_command_returns_error(self) -> None:
        """An unknown command should name itself in the error."""
        result = _quiet_shell().execute("foobar")
        assert result == "Unknown command: foobar"

    def test_command_names_are_case_insensitive(self) -> None:
        """MKDIR works like mkdir."""
        shell = _quiet_shell()
        shell.execute("MKDIR docs")
        assert shell.fs.root.child("docs") is not None

    def test_help_lists_commands(self) -> None:
        """help mentions every command."""
        shell = _quiet_shell()
        result = shell.execute("help")
        for name in shell.command_names:
            assert name in result

    def test_exit_returns_sentinel(self) -> None:
        """exit signals the REPL to stop."""
        assert _quiet_shell().execute("exit") == Shell.EXIT_SENTINEL


class TestUsage:
    """Missing arguments produce usage strings."""

    def test_usage_messages(self) -> None:
        """Each argument-taking command explains itself."""
        shell = _quiet_shell()
        for command in ("mkdir", "touch", "rm", "cd", "ren a", "mv", "cp a", "export", "log x"):
            assert shell.execute(command).startswith("Usage:"), command


class TestFileCommands:
    """Verify the file system commands end to end."""

    def test_ls_empty(self) -> None:
        """An empty directory is reported explicitly."""
        result = _quiet_shell().execute("ls")
        assert result == "Contents of /:\n(empty)"

    def test_ls_tags_entries(self) -> None:
        """Entries are tagged [DIR] or [FILE] in insertion order."""
        shell = _quiet_shell()
        shell.execute("mkdir docs")
        shell.execute("touch a.txt")
        assert shell.execute("ls") == "Contents of /:\n[DIR]\tdocs\n[FILE]\ta.txt"

    def test_touch_uses_placeholder_content(self) -> None:
        """Without content words, TOUCH_CONTENT is used."""
        shell = _quiet_shell()
        shell.execute("touch a.txt")
        node = shell.fs.root.child("a.txt")
        assert isinstance(node, FileNode)
        assert node.content == "empty"

    def test_touch_with_content(self) -> None:
        """Words after the name become the content."""
        shell = _quiet_shell()
        shell.execute("touch note.txt hello  world")
        node = shell.fs.root.child("note.txt")
        assert isinstance(node, FileNode)
        assert node.content == "hello world"

    def test_cd_and_pwd(self) -> None:
        """pwd follows cd."""
        shell = _quiet_shell()
        shell.execute("mkdir a")
        shell.execute("cd a")
        shell.execute("mkdir b")
        shell.execute("cd b")
        assert shell.execute("pwd") == "/a/b"
        shell.execute("cd /")
        assert shell.execute("pwd") == "/"

    def test_errors_are_reported(self) -> None:
        """Failures come back as Error: lines."""
        shell = _quiet_shell()
        shell.execute("touch f")
        assert shell.execute("cd f") == "Error: f: not a directory"
        assert shell.execute("cd nope") == "Error: nope: not found"
        assert shell.execute("touch f") == "Error: f: already exists"
        assert shell.execute("rm ghost") == "Error: ghost: not found"

    def test_rename_and_alias(self) -> None:
        """ren and mv both rename in place."""
        shell = _quiet_shell()
        shell.execute("touch a")
        assert shell.execute("ren a b") == ""
        assert shell.execute("mv b c") == ""
        assert [e.name for e in shell.fs.ls()] == ["c"]

    def test_cp_and_rm(self) -> None:
        """cp duplicates beside the source; rm removes."""
        shell = _quiet_shell()
        shell.execute("mkdir src")
        shell.execute("cp src dup")
        assert [e.name for e in shell.fs.ls()] == ["src", "dup"]
        assert shell.execute("cp src dup") == "Error: dup: destination already exists"
        shell.execute("rm src")
        assert [e.name for e in shell.fs.ls()] == ["dup"]

    def test_injected_file_system(self) -> None:
        """A caller-supplied file system is driven as-is."""
        journal = RecordingJournal()
        fs = FileSystem(journal=journal)
        shell = Shell(fs=fs)
        shell.execute("mkdir docs")
        assert shell.fs is fs
        expected_events = 2
        assert len(journal.events) == expected_events


class TestJournalEcho:
    """Verify journal lines in the output."""

    def test_echo_on_by_default(self) -> None:
        """A mutation prints its START and COMMIT lines."""
        shell = Shell()
        result = shell.execute("mkdir docs")
        start, commit = result.splitlines()
        assert start.startswith("[INFO] journal: START OP: MKDIR on 'docs' - ")
        assert commit == "[INFO] journal: COMMIT: MKDIR succeeded"

    def test_echo_precedes_error(self) -> None:
        """On failure the journal lines come before the Error: line."""
        shell = Shell()
        result = shell.execute("rm ghost")
        lines = result.splitlines()
        assert lines[0].startswith("[INFO] journal: START OP: RM on 'ghost' - ")
        assert lines[1] == "[ERROR] journal: ERROR: RM failed: not found"
        assert lines[-1] == "Error: ghost: not found"

    def test_queries_echo_nothing(self) -> None:
        """pwd is not journaled, so only the path is printed."""
        assert Shell().execute("pwd") == "/"

    def test_export_turns_echo_off(self) -> None:
        """ECHO_JOURNAL can be switched off at the prompt."""
        shell = Shell()
        shell.execute("export ECHO_JOURNAL=off")
        assert shell.execute("mkdir docs") == ""


class TestLogAndEnv:
    """Verify the log and env commands."""

    def test_log_empty(self) -> None:
        """A fresh shell has nothing to show."""
        assert _quiet_shell().execute("log") == "No log entries."

    def test_log_shows_history(self) -> None:
        """log lists every journal line; log errors only the failures."""
        shell = _quiet_shell()
        shell.execute("mkdir a")
        shell.execute("mkdir a")
        full = shell.execute("log").splitlines()
        expected_lines = 4
        assert len(full) == expected_lines
        assert shell.execute("log errors") == "[ERROR] journal: ERROR: MKDIR failed: already exists"

    def test_env_and_export(self) -> None:
        """export sets a variable that env then lists."""
        shell = _quiet_shell()
        assert shell.execute("export USER=alice") == ""
        assert "USER=alice" in shell.execute("env").splitlines()
