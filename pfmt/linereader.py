"""Read a stream one line at a time, keeping unread data between calls."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator

BUFFER_SIZE = 4092


class LineReader(Generic[AnyStr]):
    """Yield newline-terminated lines from a text or binary stream.

    Each line keeps its trailing newline; the last line of the stream may
    lack one. Once the stream is exhausted :meth:`next_line` returns
    ``None``, but a later call reads from the stream again.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def _take_line(self) -> AnyStr | None:
        pending = self._pending
        if not pending:
            return None
        if isinstance(pending, bytes):
            end = pending.find(b"\n")
        else:
            end = pending.find("\n")
        if end < 0:
            return None
        self._pending = pending[end + 1 :]
        return pending[: end + 1]

    def next_line(self) -> AnyStr | None:
        """Return the next line, or ``None`` when nothing is left to read."""
        while True:
            line = self._take_line()
            if line is not None:
                return line
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                tail, self._pending = self._pending, None
                return tail or None
            self._pending = chunk if self._pending is None else self._pending + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr]) -> list[AnyStr]:
    """Read every remaining line of ``stream``."""
    return list(LineReader(stream))