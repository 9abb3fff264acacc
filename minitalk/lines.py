"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

DEFAULT_BUFFER_SIZE = 42

_NEWLINE = b"\n"


class LineReader:
    """Reads lines from file descriptors, keeping leftover data per descriptor.

    Each call to :meth:`read_line` returns the next line including its
    newline, the final line without one if the data does not end in a
    newline, and None once the descriptor is exhausted.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self.buffer_size = buffer_size
        self._stash: Dict[int, bytes] = {}

    def _fill(self, fd: int, stash: bytes) -> bytes:
        """Read until ``stash`` holds a newline or the descriptor is at EOF."""
        chunks = [stash]
        found = _NEWLINE in stash
        while not found:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            chunks.append(chunk)
            found = _NEWLINE in chunk
        return b"".join(chunks)

    def read_line(self, fd: int) -> Optional[bytes]:
        """Return the next line from ``fd``, or None at end of input.

        Raises ValueError for a negative descriptor. A read error discards
        whatever was buffered for ``fd`` and is raised as OSError.
        """
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        stash = self._stash.pop(fd, b"")
        data = self._fill(fd, stash)
        if not data:
            return None
        end = data.find(_NEWLINE)
        if end < 0:
            return data
        line, rest = data[: end + 1], data[end + 1:]
        if rest:
            self._stash[fd] = rest
        return line

    def discard(self, fd: int) -> None:
        """Forget any data buffered for ``fd``."""
        self._stash.pop(fd, None)


_default_reader = LineReader()


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line from ``fd`` using a shared reader, or None at EOF."""
    return _default_reader.read_line(fd)


def iter_lines(fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[bytes]:
    """Yield every remaining line of ``fd``."""
    reader = LineReader(buffer_size)
    while True:
        line = reader.read_line(fd)
        if line is None:
            return
        yield line