"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, AnyStr, Generic

BUFFER_SIZE = 42


def _line_end(data: str | bytes) -> int:
    """Return the index of the first newline in data, or -1 if there is none."""
    if isinstance(data, str):
        return data.find("\n")
    return data.find(b"\n")


class LineReader(Generic[AnyStr]):
    """Return successive lines of a text or binary stream.

    Each line keeps its trailing newline; the last line may lack one. The
    stream is read in chunks of buffer_size, and text past the returned line
    is kept for the next call.
    """

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        pending = self._pending
        while pending is None or _line_end(pending) < 0:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = None
            return None
        end = _line_end(pending)
        if end < 0:
            self._pending = None
            return pending
        self._pending = pending[end + 1:]
        return pending[: end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line