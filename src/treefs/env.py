"""Shell variables — runtime configuration via key-value pairs.

The shell reads a handful of string variables to decide how it
behaves.  They start from ``DEFAULTS`` and can be changed at the
prompt with ``export KEY=VALUE``:

    - ``USER`` / ``HOSTNAME`` — shown in the prompt.
    - ``TOUCH_CONTENT`` — placeholder content for ``touch <name>``.
    - ``ECHO_JOURNAL`` — ``on`` to print journal lines after each command.

Both keys and values are plain strings; flags are parsed by
``Environment.flag``.
"""

DEFAULTS: dict[str, str] = {
    "USER": "user",
    "HOSTNAME": "treefs",
    "TOUCH_CONTENT": "empty",
    "ECHO_JOURNAL": "on",
}

_TRUTHY = frozenset({"1", "on", "yes", "true"})


class Environment:
    """A key-value store for shell variables.

    Each instance is an independent copy — modifying one does not
    affect any other.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        """Create an environment seeded with ``DEFAULTS``.

        Args:
            initial: Overrides applied on top of the defaults (copied,
                not referenced).

        """
        self._vars: dict[str, str] = dict(DEFAULTS)
        if initial:
            self._vars.update(initial)

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value for *key*, or *default* if not set."""
        return self._vars.get(key, default)

    def set(self, key: str, value: str) -> None:
        """Set *key* to *value* (creates or overwrites)."""
        self._vars[key] = value

    def flag(self, key: str) -> bool:
        """Return True if *key* holds a truthy value such as ``on`` or ``1``."""
        value = self._vars.get(key, "")
        return value.lower() in _TRUTHY

    def items(self) -> list[tuple[str, str]]:
        """Return all (key, value) pairs."""
        return list(self._vars.items())

