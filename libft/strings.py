"""C-style string helpers: parsing, formatting, searching, comparing and bounded copies.

Text arguments are treated like C strings: anything after the first NUL
character is ignored. Searches return an index, or None where nothing is found.
"""

from __future__ import annotations

_INT_BITS = 32
_LONG_LIMIT = 2 ** 63

Text = str | bytes | bytearray


def _cstring(text: str) -> str:
    """Return ``text`` up to its first NUL character."""
    end = text.find("\0")
    return text if end < 0 else text[:end]


def _cbytes(text: Text) -> bytes:
    """Return ``text`` as bytes, UTF-8 encoded when it is a str, cut at the first NUL."""
    data = text.encode() if isinstance(text, str) else bytes(text)
    end = data.find(0)
    return data if end < 0 else data[:end]


def _c_len(buffer: bytearray) -> int:
    """Length of the C string held in ``buffer``: bytes before its first NUL."""
    end = buffer.find(0)
    return len(buffer) if end < 0 else end


def _char(c: str | int) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return chr(c & 0xFF)


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to the range of a signed 32-bit integer, wrapping around."""
    span = 1 << _INT_BITS
    half = span >> 1
    return (value + half) % span - half


def _is_space(ch: str) -> bool:
    return ch == " " or "\t" <= ch <= "\r"


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped and one sign is accepted; parsing stops at
    the first non-digit. A magnitude past the 64-bit range gives -1 for a
    positive number and 0 for a negative one; otherwise the result wraps to
    a signed 32-bit integer.
    """
    s = _cstring(text)
    i = 0
    while i < len(s) and _is_space(s[i]):
        i += 1
    negative = False
    if i < len(s) and s[i] in "+-":
        negative = s[i] == "-"
        i += 1
    magnitude = 0
    while i < len(s) and "0" <= s[i] <= "9":
        magnitude = magnitude * 10 + (ord(s[i]) - ord("0"))
        if magnitude > _LONG_LIMIT:
            return 0 if negative else -1
        i += 1
    return _wrap_int(-magnitude if negative else magnitude)


def itoa(n: int) -> str:
    """Return the decimal form of ``n``."""
    return str(n)


def strchr(text: str | None, c: str | int) -> int | None:
    """Index of the first ``c`` in ``text``.

    Searching for NUL gives the length of the string. A missing text or a
    character that is not present gives None.
    """
    if text is None:
        return None
    s = _cstring(text)
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: str | int) -> int | None:
    """Index of the last ``c`` in ``text``; NUL gives the length, absence gives None."""
    if text is None:
        raise TypeError("text must not be None")
    s = _cstring(text)
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strcmp(a: Text, b: Text) -> int:
    """Compare two strings byte by byte.

    Returns the difference of the first differing bytes (as unsigned values,
    with the end of a string counting as 0), or 0 when they are equal.
    """
    left, right = _cbytes(a), _cbytes(b)
    for x, y in zip(left, right):
        if x != y:
            return x - y
    if len(left) == len(right):
        return 0
    common = min(len(left), len(right))
    return (left[common] if len(left) > common else 0) - (right[common] if len(right) > common else 0)


def strncmp(a: Text, b: Text, n: int) -> int:
    """Compare at most the first ``n`` bytes of two strings, like :func:`strcmp`."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    if n == 0:
        return 0
    return strcmp(_cbytes(a)[:n], _cbytes(b)[:n])


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of the first ``little`` in ``big`` lying wholly within its first ``length`` characters.

    An empty ``little`` matches at 0; no match gives None.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    haystack = _cstring(big)
    needle = _cstring(little)
    if not needle:
        return 0
    i = 0
    while i < len(haystack) and i + len(needle) <= length:
        if haystack.startswith(needle, i):
            return i
        i += 1
    return None


def strlcpy(dst: bytearray | None, src: Text | None, size: int) -> int:
    """Copy ``src`` into ``dst`` as a NUL-terminated string of at most ``size`` bytes.

    Returns the length of ``src``; with a missing ``dst`` or ``src`` nothing
    is copied and 0 is returned.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if src is None or dst is None:
        return 0
    data = _cbytes(src)
    if size > 0:
        count = min(size - 1, len(data))
        if count >= len(dst):
            raise IndexError(f"{count + 1} bytes do not fit a buffer of {len(dst)}")
        dst[:count] = data[:count]
        dst[count] = 0
    return len(data)


def strlcat(dst: bytearray, src: Text, size: int) -> int:
    """Append ``src`` to the string in ``dst`` so the result takes at most ``size`` bytes.

    Returns the length of the string it tried to build: the length of
    ``dst`` plus that of ``src``, or ``size`` plus the length of ``src``
    when ``size`` does not exceed the length of ``dst``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    dst_len = _c_len(dst)
    data = _cbytes(src)
    if size <= dst_len:
        return size + len(data)
    count = min(len(data), size - 1 - dst_len)
    if dst_len + count >= len(dst):
        raise IndexError(f"{dst_len + count + 1} bytes do not fit a buffer of {len(dst)}")
    dst[dst_len:dst_len + count] = data[:count]
    dst[dst_len + count] = 0
    return dst_len + len(data)