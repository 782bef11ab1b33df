"""Buffered reading of newline-terminated lines from a text stream."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TextIO

DEFAULT_BUFFER_SIZE = 10


class LineReader:
    """Read a text stream one line at a time in fixed-size chunks.

    Each line keeps its trailing newline. Text after the last newline is
    discarded once the stream runs out, and reading then stops.
    """

    def __init__(self, stream: TextIO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""

    def readline(self) -> str | None:
        """Return the next line with its newline, or None at end of input."""
        while "\n" not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._pending = ""
                return None
            self._pending += chunk
        line, _, self._pending = self._pending.partition("\n")
        return line + "\n"

    def __iter__(self) -> Iterator[str]:
        while (line := self.readline()) is not None:
            yield line


def read_lines(stream: TextIO) -> list[str]:
    """Read every complete line from ``stream``."""
    return list(LineReader(stream))