"""Input and output redirection of the standard file descriptors."""

from __future__ import annotations

import os
from typing import Protocol, Union

StrPath = Union[str, "os.PathLike[str]"]

_STDIN = 0
_STDOUT = 1


class RedirectionError(Exception):
    """A redirection file could not be opened or installed."""

    def __init__(self, message: str, path: StrPath) -> None:
        super().__init__(message)
        self.path = path


class _Redirected(Protocol):
    infile: str | None
    outfile: str | None


def open_infile(path: StrPath) -> int:
    """Open ``path`` for reading and return the file descriptor."""
    try:
        return os.open(path, os.O_RDONLY)
    except FileNotFoundError as exc:
        raise RedirectionError(
            f"Error: file '{os.fspath(path)}' does not exist for input redirection.",
            path,
        ) from exc
    except PermissionError as exc:
        raise RedirectionError(
            f"Error: insufficient permissions to read file '{os.fspath(path)}'.",
            path,
        ) from exc
    except OSError as exc:
        raise RedirectionError(f"Error opening input file: {exc.strerror}", path) from exc


def _install(fd: int, target: int, stream: str, path: StrPath) -> None:
    try:
        os.dup2(fd, target)
    except OSError as exc:
        raise RedirectionError(
            f"Error redirecting standard {stream}: {exc.strerror}", path
        ) from exc
    finally:
        os.close(fd)


def redirect_stdin(path: StrPath) -> None:
    """Make ``path`` the process's standard input."""
    _install(open_infile(path), _STDIN, "input", path)


def redirect_stdout(path: StrPath) -> None:
    """Truncate or create ``path`` (mode 0644) and make it the standard output."""
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except PermissionError as exc:
        raise RedirectionError(
            f"Error: insufficient permissions to write file '{os.fspath(path)}'.",
            path,
        ) from exc
    except OSError as exc:
        raise RedirectionError(f"Error opening output file: {exc.strerror}", path) from exc
    _install(fd, _STDOUT, "output", path)


def handle_redirection(command: _Redirected) -> None:
    """Apply a command's input file, then its output file, where set."""
    if command.infile is not None:
        redirect_stdin(command.infile)
    if command.outfile is not None:
        redirect_stdout(command.outfile)