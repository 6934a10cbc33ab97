"""Writing to text streams and reading input line by line."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, Any, Optional, Union

BUFFER_SIZE = 42

Chunk = Union[str, bytes]


def putchar_fd(c: str, stream: IO[str]) -> None:
    """Write the single character ``c`` to ``stream``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def putstr_fd(s: Optional[str], stream: IO[str]) -> None:
    """Write ``s`` to ``stream``; None writes nothing."""
    if s is not None:
        stream.write(s)


def putendl_fd(s: Optional[str], stream: IO[str]) -> None:
    """Write ``s`` and a newline to ``stream``; None writes nothing."""
    if s is not None:
        stream.write(s)
        stream.write("\n")


def putnbr_fd(n: int, stream: IO[str]) -> None:
    """Write the decimal representation of ``n`` to ``stream``."""
    stream.write(str(int(n)))


def _newline_of(chunk: Chunk) -> Chunk:
    return b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"


class LineReader:
    """Read a stream one line at a time in fixed-size chunks.

    Text left over after a line stays buffered for the next call. Works
    with text and binary streams alike.
    """

    def __init__(self, stream: IO[Any], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be at least 1, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[Chunk] = None

    def _has_line(self) -> bool:
        pending = self._pending
        return pending is not None and _newline_of(pending) in pending

    def next_line(self) -> Optional[Chunk]:
        """Return the next line with its newline, the unterminated rest, or None."""
        while not self._has_line():
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._pending = None
                return None
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk

        pending = self._pending
        if not pending:
            self._pending = None
            return None
        index = pending.find(_newline_of(pending))
        if index < 0:
            self._pending = None
            return pending
        line, rest = pending[: index + 1], pending[index + 1 :]
        self._pending = rest or None
        return line

    def __iter__(self) -> Iterator[Chunk]:
        while (line := self.next_line()) is not None:
            yield line


def get_next_line(reader: LineReader) -> Optional[Chunk]:
    """Return the next line from ``reader``, or None at the end of input."""
    return reader.next_line()