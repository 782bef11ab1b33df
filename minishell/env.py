"""Shell environment variables, kept in the order the shell defines them."""

from __future__ import annotations

import os
import re
from collections.abc import Iterator, Mapping

from .strutil import atoi, itoa

_LOOKUP_NAME = re.compile(r"[^ \t]*")
_REFERENCE = re.compile(r"\$([A-Za-z0-9_]*)")


def trim_quotes(value: str) -> str:
    """Drop one matching pair of surrounding single or double quotes."""
    if len(value) >= 2 and value[0] in ("'", '"') and value[0] == value[-1]:
        return value[1:-1]
    return value


class Environment:
    """An ordered set of shell variables; a value may be None (declared only)."""

    def __init__(self) -> None:
        self._vars: dict[str, str | None] = {}

    def get(self, name: str) -> str | None:
        """Return the value of the variable called exactly ``name``."""
        return self._vars.get(name)

    def lookup(self, text: str) -> str | None:
        """Return the value of the variable named by ``text`` up to its first blank."""
        match = _LOOKUP_NAME.match(text)
        return self._vars.get(match.group() if match else text)

    def set(self, name: str, value: str | None) -> None:
        """Define or update a variable, stripping one pair of quotes from the value.

        A lone quote character assigned to ``_`` is stored as it is.
        """
        keep_as_is = name == "_" and value in ('"', "'")
        if value is not None and not keep_as_is:
            value = trim_quotes(value)
        self._vars[name] = value

    def delete(self, name: str) -> None:
        """Remove a variable; removing one that does not exist does nothing."""
        self._vars.pop(name, None)

    def items(self) -> Iterator[tuple[str, str | None]]:
        """Yield ``(name, value)`` pairs in definition order."""
        yield from self._vars.items()

    def is_null_reference(self, arg: str) -> bool:
        """True if ``arg`` starts with ``$`` and every reference in it is unset or empty.

        A ``$`` not followed by a name character makes the argument non-null.
        """
        if not arg.startswith("$"):
            return False
        for match in _REFERENCE.finditer(arg):
            name = match.group(1)
            if not name or self.lookup(name):
                return False
        return True


def init_shlvl(environ: Mapping[str, str] | None = None) -> str:
    """Return the nesting level for a new shell: one more than SHLVL, or 1."""
    if environ is None:
        environ = os.environ
    level = environ.get("SHLVL")
    if level is not None:
        return itoa(atoi(level) + 1)
    return "1"


def from_environ(environ: Mapping[str, str], exit_status: int = 0) -> Environment:
    """Build the shell environment from an inherited one.

    Inherited variables are stored in reverse order and unmodified; ``?`` and
    an incremented ``SHLVL`` are then set.
    """
    env = Environment()
    for name, value in reversed(list(environ.items())):
        env._vars[name] = value
    env.set("?", itoa(exit_status))
    env.set("SHLVL", init_shlvl(environ))
    return env


def default_environment(
    cwd: str | None, environ: Mapping[str, str] | None = None
) -> Environment:
    """Build the minimal environment used when none was inherited.

    ``cwd`` is the working directory, or None when it cannot be determined.
    """
    env = Environment()
    env.set("SHLVL", init_shlvl(environ))
    if cwd is not None:
        env.set("PWD", cwd)
        env.set("OLDPWD", "")
    env.set("HOME", "/")
    env.set("_", "")
    env.set("?", "0")
    return env