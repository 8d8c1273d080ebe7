"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Union

BUFFER_SIZE = 42

Chunk = Union[str, bytes]


def _find_newline(data: Chunk) -> int:
    """Index of the first newline in ``data``, or -1 if there is none."""
    newline: Chunk = "\n" if isinstance(data, str) else b"\n"
    return data.find(newline)


class LineReader:
    """Reads lines from a stream, ``buffer_size`` characters or bytes at a time.

    Each line keeps its trailing newline; the last line may lack one.
    Works with text and binary streams alike.
    """

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[Chunk] = None

    def _has_line(self) -> bool:
        return self._pending is not None and _find_newline(self._pending) >= 0

    def _fill(self) -> None:
        while True:
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._pending = None
                raise
            if not chunk:
                return
            if isinstance(chunk, bytearray):
                chunk = bytes(chunk)
            self._pending = chunk if self._pending is None else self._pending + chunk
            if _find_newline(chunk) >= 0:
                return

    def readline(self) -> Optional[Chunk]:
        """Return the next line, or None once the stream is exhausted."""
        if not self._has_line():
            self._fill()
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        index = _find_newline(pending)
        if index < 0:
            self._pending = None
            return pending
        line, rest = pending[: index + 1], pending[index + 1:]
        self._pending = rest or None
        return line

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line