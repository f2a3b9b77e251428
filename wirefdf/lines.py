"""Reading a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional, Union

DEFAULT_BUFFER_SIZE = 42

Chunk = Union[str, bytes]


def _newline(chunk: Chunk) -> Chunk:
    return b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"


class LineReader:
    """Read lines from a text or binary stream in chunks of buffer_size.

    Lines keep their trailing newline; a final line without one is
    returned as it is. Text left over after a newline is kept for the
    next call.
    """

    def __init__(self, stream: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[Chunk] = None

    def _next_chunk(self) -> Chunk:
        if self._pending:
            chunk, self._pending = self._pending, None
            return chunk
        return self._stream.read(self._buffer_size)

    def read_line(self) -> Optional[Chunk]:
        """Return the next line, or None once the stream is exhausted."""
        parts: list[Chunk] = []
        while True:
            chunk = self._next_chunk()
            if not chunk:
                self._pending = None
                break
            end = chunk.find(_newline(chunk))
            if end >= 0:
                parts.append(chunk[: end + 1])
                self._pending = chunk[end + 1:] or None
                return parts[0][:0].join(parts)
            parts.append(chunk)
        if not parts:
            return None
        return parts[0][:0].join(parts)

    def reset(self) -> None:
        """Discard any text read ahead of the last returned line."""
        self._pending = None

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line