"""Interactive REPL (Read-Eval-Print Loop) for the file system simulator.

The REPL is the terminal interface.  It creates a shell and enters the
classic loop:

    1. **Read** — display a prompt and read user input.
    2. **Eval** — pass the command to ``shell.execute()``.
    3. **Print** — display the result.
    4. **Loop** — repeat until the shell returns the exit sentinel.

The helper functions (``build_prompt``, ``format_banner``) are pure
and testable.  The ``run()`` function is the I/O entrypoint.
"""

import readline

from treefs.completer import Completer
from treefs.shell import Shell

_BANNER_WIDTH = 44


def format_banner(command_names: list[str]) -> str:
    """Format the start-up banner listing the available commands.

    Args:
        command_names: Names to advertise.

    Returns:
        A formatted string suitable for printing to the console.

    """
    border = "=" * _BANNER_WIDTH
    header = f"\n  {border}\n     treefs: in-memory file system shell\n  {border}\n\n"
    body = "Commands: " + ", ".join(command_names)
    footer = "\nType 'help' for commands, 'exit' to quit.\n"
    return header + body + footer


def build_prompt(shell: Shell) -> str:
    """Build the prompt string showing user, host, and current path.

    Args:
        shell: The running shell.

    Returns:
        A prompt string like ``user@treefs:/docs$ ``.

    """
    user = shell.env.get("USER", "user")
    host = shell.env.get("HOSTNAME", "treefs")
    return f"{user}@{host}:{shell.fs.current_path}$ "


def run() -> None:
    """Create a shell and run the interactive REPL.

    This is the main entrypoint.  It handles:
    - Shell creation and tab completion.
    - The read-eval-print loop.
    - Graceful handling of Ctrl+C and Ctrl+D.
    """
    shell = Shell()

    completer = Completer(shell)
    readline.set_completer(completer.complete)
    readline.set_completer_delims(" \t")
    readline.parse_and_bind("tab: complete")

    print(format_banner(shell.command_names))  # noqa: T201

    try:
        while True:
            try:
                command = input(build_prompt(shell))
            except EOFError:
                # Ctrl+D: graceful exit
                print()  # noqa: T201
                break

            result = shell.execute(command)
            if result == Shell.EXIT_SENTINEL:
                break
            if result:
                print(result)  # noqa: T201

    except KeyboardInterrupt:
        # Ctrl+C: graceful exit
        print("\nInterrupted.")  # noqa: T201

    finally:
        print("Shutting down...")  # noqa: T201


if __name__ == "__main__":
    run()
