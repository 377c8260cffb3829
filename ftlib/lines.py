"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

BUFFER_SIZE = 40
MAXFD = 2000


class LineReader:
    """Reads lines from a file descriptor in chunks of ``buffer_size`` bytes.

    Each line keeps its trailing newline; the last line of the input may
    lack one. Unread data past a newline is held for the next call.
    """

    def __init__(
        self,
        fd: int,
        buffer_size: int = BUFFER_SIZE,
        encoding: str = "utf-8",
        errors: str = "strict",
    ) -> None:
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self.encoding = encoding
        self.errors = errors
        self._stash = bytearray()

    def read_line(self) -> Optional[str]:
        """Return the next line, or ``None`` when no data is left.

        A read error discards any held data and propagates ``OSError``.
        """
        while b"\n" not in self._stash:
            try:
                data = os.read(self.fd, self.buffer_size)
            except OSError:
                self._stash.clear()
                raise
            if not data:
                break
            self._stash += data
        if not self._stash:
            return None
        end = self._stash.find(b"\n")
        end = len(self._stash) if end < 0 else end + 1
        line = bytes(self._stash[:end])
        del self._stash[:end]
        return line.decode(self.encoding, self.errors)

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[str]:
    """Return the next line of ``fd``, keeping separate state per descriptor.

    Returns ``None`` at end of input, on a read error, or for a descriptor
    outside ``0 .. MAXFD - 1``.
    """
    if fd < 0 or fd >= MAXFD:
        return None
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line = reader.read_line()
    except OSError:
        line = None
    if line is None:
        _readers.pop(fd, None)
    return line