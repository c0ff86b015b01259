"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import os
from typing import Any, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Return successive lines of a file descriptor or file-like object.

    Lines keep their trailing newline; the last line may lack one.
    ``read_line`` returns ``None`` once the input is exhausted.
    """

    def __init__(self, source: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(source, int) and source < 0:
            raise ValueError("invalid file descriptor")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.source = source
        self.buffer_size = buffer_size
        self._rest: Optional[AnyStr] = None

    def _read_chunk(self) -> AnyStr:
        if isinstance(self.source, int):
            return os.read(self.source, self.buffer_size)  # type: ignore[return-value]
        return self.source.read(self.buffer_size)

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or ``None`` at end of input."""
        try:
            chunk = self._read_chunk()
            while chunk:
                newline = b"\n" if isinstance(chunk, bytes) else "\n"
                self._rest = chunk if self._rest is None else self._rest + chunk
                if newline in self._rest:  # type: ignore[operator]
                    break
                chunk = self._read_chunk()
        except OSError:
            self._rest = None
            raise
        rest = self._rest
        if not rest:
            self._rest = None
            return None
        newline = b"\n" if isinstance(rest, bytes) else "\n"
        cut = rest.find(newline)  # type: ignore[arg-type]
        if cut < 0:
            self._rest = None
            return rest
        self._rest = rest[cut + 1:] or None
        return rest[: cut + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line