from __future__ import annotations

from typing import Iterable, Iterator

from .indexer import SeekableLineSource


class IndexedReader:
    """Yield the line starting at each requested byte offset, in request order.

    Offsets are not required to be increasing, so callers that want file order
    must sort them first. Reading nothing at an offset (at or past EOF) ends the
    sequence; later offsets are not tried.
    """

    def __init__(self, source: SeekableLineSource, offsets: Iterable[int]) -> None:
        self._source = source
        self._offsets = iter(offsets)
        self._done = False

    def __iter__(self) -> Iterator[bytes]:
        return self

    def __next__(self) -> bytes:
        if self._done:
            raise StopIteration
        offset = next(self._offsets, None)
        if offset is None:
            self._done = True
            raise StopIteration
        try:
            self._source.seek(offset)
            line = self._source.readline()
        except OSError:
            self._done = True
            raise
        if not line:
            self._done = True
            raise StopIteration
        return line
