"""The shell's per-session state and the commands parsed from one line."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from .env import Environment, default_environment, from_environ
from .expansion import delete_quotes, delete_quotes_all
from .history import History, default_history_path
from .strutil import itoa

INTERRUPTED_STATUS = 130


@dataclass
class Command:
    """One simple command of a pipeline with its redirections."""

    cmd: str | None = None
    args: list[str] = field(default_factory=list)
    is_pipe: bool = False
    infile: str | None = None
    outfile: str | None = None
    outfiles: list[str] = field(default_factory=list)
    is_heredoc: bool = False
    heredoc_delims: list[str] = field(default_factory=list)
    outfile_modes: int = 0


def _current_dir() -> str | None:
    try:
        return os.getcwd()
    except OSError:
        return None


class Shell:
    """State shared by everything the shell does during one session."""

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        history_path: str | os.PathLike[str] | None = None,
    ) -> None:
        if environ is None:
            environ = os.environ
        self.env: Environment = (
            from_environ(environ) if environ else default_environment(_current_dir(), environ)
        )
        if history_path is None:
            history_path = default_history_path(environ)
        self.history = History(history_path)
        self.input: str | None = None
        self.commands: list[Command] = []
        self.last_exit_status = 0

    def append_command(self, command: Command) -> None:
        """Add a command to the end of the current pipeline."""
        self.commands.append(command)

    def clear_commands(self) -> None:
        """Forget the current pipeline."""
        self.commands.clear()

    def set_exit_status(self, code: int) -> None:
        """Record ``code`` as the status reported by ``$?``."""
        self.last_exit_status = code
        self.env.set("?", itoa(code))

    def set_special_var(self, signal_status: int = 0) -> int:
        """Set ``_`` to the last argument of the pipeline and ``?`` after an interrupt.

        Nothing happens when there is no current input. Returns the signal
        status still pending: 0 once an interrupt (130) has been recorded.
        """
        if self.input is None:
            return signal_status
        last_arg = next(
            (command.args[-1] for command in reversed(self.commands) if command.args),
            "",
        )
        self.env.set("_", last_arg)
        if signal_status == INTERRUPTED_STATUS:
            self.env.set("?", itoa(signal_status))
            return 0
        return signal_status

    def strip_command_quotes(self, command: Command) -> None:
        """Expand variables in a command and remove its quote marks, in place.

        Here-document delimiters are only unquoted, never expanded, and only
        when the command has a here-document.
        """
        if command.cmd is not None:
            command.cmd = delete_quotes(self.env, command.cmd, True)
        if command.infile is not None:
            command.infile = delete_quotes(self.env, command.infile, True)
        if command.outfile is not None:
            command.outfile = delete_quotes(self.env, command.outfile, True)
        command.args = delete_quotes_all(self.env, command.args, True)
        command.outfiles = delete_quotes_all(self.env, command.outfiles, True)
        if command.is_heredoc:
            command.heredoc_delims = delete_quotes_all(self.env, command.heredoc_delims, False)