from __future__ import annotations

from typing import Iterator, Protocol


class SeekableLineSource(Protocol):
    """Byte stream that can report/restore its position and read one line.

    Binary file objects and ``io.BytesIO`` both qualify.
    """

    def seek(self, offset: int, whence: int = 0) -> int: ...

    def tell(self) -> int: ...

    def readline(self) -> bytes: ...


class LineIndexer:
    """Single-pass iterator of ``(offset, length)`` for every line of a stream.

    ``offset`` is the stream position before the line is read and ``length``
    the number of bytes consumed, line terminator included. Iteration stops
    on the first empty read. An ``OSError`` raised by the stream ends the
    iteration; pairs yielded before it stay valid.
    """

    def __init__(self, source: SeekableLineSource) -> None:
        self._source = source
        self._done = False

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return self

    def __next__(self) -> tuple[int, int]:
        if self._done:
            raise StopIteration
        try:
            offset = self._source.tell()
            line = self._source.readline()
        except OSError:
            self._done = True
            raise
        if not line:
            self._done = True
            raise StopIteration
        return offset, len(line)


def build_index(source: SeekableLineSource) -> dict[int, int]:
    return dict(LineIndexer(source))
