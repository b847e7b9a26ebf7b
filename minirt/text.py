"""Small text helpers: word splitting, bounded comparison and line reading."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 1


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep`` and on newlines, dropping empty words."""
    return [word for line in text.split("\n") for word in line.split(sep) if word]


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; the end of a string counts as NUL.

    Returns the difference of the first mismatching character codes, or 0.
    """
    for i in range(n):
        a = ord(first[i]) if i < len(first) else 0
        b = ord(second[i]) if i < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


class LineReader(Generic[AnyStr]):
    """Reads a stream line by line in chunks of ``buffer_size``.

    Lines keep their trailing newline; the last line may lack one.
    Works with both text and binary streams.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE):
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _take_line(self, newline: AnyStr) -> AnyStr:
        pending = self._pending
        end = pending.find(newline)
        cut = len(pending) if end < 0 else end + 1
        line, rest = pending[:cut], pending[cut:]
        self._pending = rest or None
        return line

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        while True:
            if self._pending is not None:
                newline = "\n" if isinstance(self._pending, str) else b"\n"
                if newline in self._pending:
                    return self._take_line(newline)
            try:
                chunk = self._stream.read(self._buffer_size)
            except Exception:
                self._pending = None
                raise
            if not chunk:
                if self._pending is None:
                    return None
                newline = "\n" if isinstance(self._pending, str) else b"\n"
                return self._take_line(newline)
            self._pending = chunk if self._pending is None else self._pending + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line