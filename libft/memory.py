"""Byte-buffer helpers: zeroing, allocation, search, comparison, copy and fill."""

from __future__ import annotations

from collections.abc import Sequence

Buffer = bytearray


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for length in lengths:
        if n > length:
            raise IndexError(f"byte count {n} exceeds buffer length {length}")


def bzero(buffer: Buffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero, in place."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)


def memchr(data: bytes | bytearray | memoryview, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` (taken modulo 256) among the first ``n``.

    Returns None when no such byte is found.
    """
    _check_count(n, len(data))
    target = c & 0xFF
    for index, byte in enumerate(memoryview(data)[:n]):
        if byte == target:
            return index
    return None


def memcmp(a: Sequence[int], b: Sequence[int], n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_count(n, len(a), len(b))
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0


def memcpy(dest: Buffer, src: bytes | bytearray | memoryview, n: int) -> Buffer:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``; return ``dest``."""
    _check_count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Move ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    Overlapping ranges are handled; the buffer is returned.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buffer) - dest, len(buffer) - src)
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memset(buffer: Buffer, c: int, n: int) -> Buffer:
    """Fill the first ``n`` bytes of ``buffer`` with ``c`` (taken modulo 256)."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer