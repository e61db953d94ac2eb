"""Reading a stream line by line."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional


class LineReader(Generic[AnyStr]):
    """Split the content of a stream into lines without their newlines.

    The stream is read whole on the first request. A final newline does
    not produce an empty last line.
    """

    def __init__(self, stream: IO[AnyStr]) -> None:
        self._stream = stream
        self._buffer: Optional[AnyStr] = None

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or ``None`` when the content is used up."""
        if self._buffer is None:
            self._buffer = self._stream.read()
        buffer = self._buffer
        newline = b"\n" if isinstance(buffer, bytes) else "\n"
        line, found, rest = buffer.partition(newline)
        if not found:
            if not buffer:
                return None
            self._buffer = buffer[:0]
            return buffer
        self._buffer = rest
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr]) -> list[AnyStr]:
    """Return every line of ``stream`` without newlines."""
    return list(LineReader(stream))