"""Writing characters, strings and integers to file descriptors."""

from __future__ import annotations

import os


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char(c: str | int, fd: int) -> None:
    """Write one character to ``fd``: a one-character str, or a byte value as int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode()
    else:
        data = bytes([c & 0xFF])
    _write_all(fd, data)


def put_str(text: str | None, fd: int) -> None:
    """Write ``text`` to ``fd``; nothing is written for None."""
    if text is not None:
        _write_all(fd, text.encode())


def put_endl(text: str | None, fd: int) -> None:
    """Write ``text`` followed by a newline; nothing at all for None."""
    if text is not None:
        _write_all(fd, text.encode() + b"\n")


def put_nbr(n: int, fd: int) -> None:
    """Write the decimal form of ``n`` to ``fd``."""
    _write_all(fd, str(n).encode())