"""Reading a file descriptor one line at a time, with a buffer kept per descriptor."""

from __future__ import annotations

import os

DEFAULT_BUFFER_SIZE = 1


class LineReader:
    """Return successive lines from file descriptors.

    Data read past the end of a line is kept for the next call on the same
    descriptor. Reads happen ``buffer_size`` bytes at a time; a NUL byte
    ends the useful part of the chunk it arrives in.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._buffers: dict[int, bytes] = {}

    def _fill(self, fd: int) -> bytes:
        chunks = []
        while True:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            data = chunk.split(b"\0", 1)[0]
            chunks.append(data)
            if b"\n" in data:
                break
        return b"".join(chunks)

    def read_line(self, fd: int) -> str | None:
        """Return the next line of ``fd``, newline included, or None at the end.

        The last line comes back without a newline when the data has none.
        """
        if fd < 0:
            raise ValueError(f"file descriptor must not be negative, got {fd}")
        stored = self._buffers.get(fd, b"") + self._fill(fd)
        if not stored:
            self._buffers.pop(fd, None)
            return None
        newline = stored.find(b"\n")
        cut = len(stored) if newline < 0 else newline + 1
        line, rest = stored[:cut], stored[cut:]
        if rest:
            self._buffers[fd] = rest
        else:
            self._buffers.pop(fd, None)
        return line.decode("utf-8", errors="replace")

    def pending(self) -> dict[int, bytes]:
        """Data already read but not yet returned, by descriptor."""
        return dict(self._buffers)


_default_reader = LineReader(DEFAULT_BUFFER_SIZE)


def get_next_line(fd: int) -> str | None:
    """Return the next line of ``fd`` using a shared reader."""
    return _default_reader.read_line(fd)