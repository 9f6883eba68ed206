"""Tests for the REPL (Read-Eval-Print Loop).

The REPL is the interactive terminal interface.  Its helpers are pure
and tested directly; the loop itself is driven with patched ``input``.
"""

from unittest.mock import patch

import pytest

from treefs.env import Environment
from treefs.repl import build_prompt, format_banner, run
from treefs.shell import Shell


class TestREPLHelpers:
    """Verify REPL helper functions."""

    def test_prompt_at_root(self) -> None:
        """The prompt shows user, host, and the root path."""
        shell = Shell()
        assert build_prompt(shell) == "user@treefs:/$ "

    def test_prompt_follows_cwd_and_env(self) -> None:
        """The prompt reflects the current directory and USER/HOSTNAME."""
        shell = Shell(env=Environment({"USER": "alice", "HOSTNAME": "box"}))
        shell.execute("mkdir docs")
        shell.execute("cd docs")
        assert build_prompt(shell) == "alice@box:/docs$ "

    def test_banner_lists_commands(self) -> None:
        """The banner advertises the commands it is given."""
        banner = format_banner(["ls", "mkdir"])
        assert "treefs" in banner
        assert "ls, mkdir" in banner


class TestRun:
    """Drive the loop with scripted input."""

    def test_exit_stops_loop(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Commands run until exit, then the shutdown line is printed."""
        script = iter(["mkdir docs", "ls", "exit"])
        with patch("builtins.input", side_effect=lambda _prompt: next(script)):
            run()
        out = capsys.readouterr().out
        assert "COMMIT: MKDIR succeeded" in out
        assert "[DIR]\tdocs" in out
        assert out.rstrip().endswith("Shutting down...")

    def test_eof_stops_loop(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Ctrl+D ends the session gracefully."""
        with patch("builtins.input", side_effect=EOFError):
            run()
        assert "Shutting down..." in capsys.readouterr().out

    def test_interrupt_stops_loop(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Ctrl+C ends the session gracefully."""
        with patch("builtins.input", side_effect=KeyboardInterrupt):
            run()
        out = capsys.readouterr().out
        assert "Interrupted." in out
        assert "Shutting down..." in out
