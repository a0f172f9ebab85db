"""Buffered line-by-line reading from a stream."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Reads lines from a text or binary stream in fixed-size chunks.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.stream = stream
        self.buffer_size = buffer_size
        self._storage: AnyStr | None = None
        self._eof = False

    def _newline(self) -> AnyStr:
        assert self._storage is not None
        return b"\n" if isinstance(self._storage, bytes) else "\n"  # type: ignore[return-value]

    def _fill(self) -> None:
        while not self._eof:
            if self._storage is not None and self._newline() in self._storage:
                return
            chunk = self.stream.read(self.buffer_size)
            if not chunk:
                self._eof = True
                return
            self._storage = chunk if self._storage is None else self._storage + chunk

    def next_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        if not self._storage:
            self._storage = None
            return None
        index = self._storage.find(self._newline())
        end = len(self._storage) if index < 0 else index + 1
        line = self._storage[:end]
        rest = self._storage[end:]
        self._storage = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line