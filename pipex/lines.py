"""Line-at-a-time reading from a file descriptor."""

from __future__ import annotations

import os
from typing import Iterator

DEFAULT_BUFFER_SIZE = 42


class LineReader:
    """Read newline-terminated lines from a raw file descriptor.

    Data is read in chunks of *buffer_size* bytes; anything read past the end
    of a line is kept for the next call.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self._fd = fd
        self._buffer_size = buffer_size
        self._pending = b""

    def read_line(self) -> bytes | None:
        """Return the next line, newline included, or None at end of input.

        The last line is returned without a newline if the input lacks one.
        """
        line = self._pending
        while b"\n" not in line:
            try:
                chunk = os.read(self._fd, self._buffer_size)
            except OSError:
                self._pending = b""
                raise
            if not chunk:
                break
            line += chunk
        if not line:
            self._pending = b""
            return None
        end = line.find(b"\n")
        if end < 0:
            self._pending = b""
            return line
        self._pending = line[end + 1:]
        return line[:end + 1]

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line