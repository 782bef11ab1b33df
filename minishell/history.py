"""Command history kept in memory and appended to a file in the user's home."""

from __future__ import annotations

import os
from collections.abc import Mapping

from .linereader import LineReader

HISTORY_FILE_NAME = "minishell_history"

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def default_history_path(environ: Mapping[str, str] | None = None) -> str | None:
    """Return ``$HOME/minishell_history``, or None when HOME is not set."""
    if environ is None:
        environ = os.environ
    home = environ.get("HOME")
    if home is None:
        return None
    return f"{home}/{HISTORY_FILE_NAME}"


class History:
    """Lines entered in the shell, mirrored to a history file when one is set."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = path
        self._entries: list[str] = []

    def load(self) -> None:
        """Replace the entries with the complete lines of the history file.

        A missing or unreadable file leaves the entries as they are. A final
        line without a newline is ignored.
        """
        if self.path is None:
            return
        try:
            with open(self.path, encoding=_ENCODING, errors=_ERRORS, newline="") as stream:
                loaded = [line[:-1] for line in LineReader(stream)]
        except OSError:
            return
        self._entries = loaded

    def add(self, line: str) -> None:
        """Record ``line`` and append it to the history file.

        The line is kept in memory even if writing the file fails; the
        OSError is then raised.
        """
        self._entries.append(line)
        if self.path is None:
            return
        with open(self.path, "a", encoding=_ENCODING, errors=_ERRORS, newline="") as stream:
            stream.write(line + "\n")

    def entries(self) -> list[str]:
        """Return a copy of the recorded lines, oldest first."""
        return list(self._entries)