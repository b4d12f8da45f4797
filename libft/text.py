"""String building helpers: splitting, slicing, trimming, joining and mapping.

Text arguments are treated like C strings: anything after the first NUL
character is ignored.
"""

from __future__ import annotations

from collections.abc import Callable


def _cstring(text: str) -> str:
    """Return ``text`` up to its first NUL character."""
    if not isinstance(text, str):
        raise TypeError(f"expected a str, got {type(text).__name__}")
    end = text.find("\0")
    return text if end < 0 else text[:end]


def _char(c: str | int) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return chr(c & 0xFF)


def split(text: str, sep: str | int) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces.

    Splitting on NUL gives the whole string as one piece, or no piece
    when the string is empty.
    """
    s = _cstring(text)
    ch = _char(sep)
    return [piece for piece in s.split(ch) if piece]


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from index ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    s = _cstring(text)
    if start >= len(s):
        return ""
    return s[start:start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character of ``text`` found in ``charset``."""
    s = _cstring(text)
    chars = set(_cstring(charset))
    start = 0
    while start < len(s) and s[start] in chars:
        start += 1
    end = len(s) - 1
    while end >= start and s[end] in chars:
        end -= 1
    return s[start:end + 1]


def strjoin(a: str, b: str) -> str:
    """Return the concatenation of ``a`` and ``b``."""
    return _cstring(a) + _cstring(b)


def strmapi(text: str, f: Callable[[int, str], str]) -> str:
    """Build a string from ``f(index, char)`` applied to each character of ``text``.

    Each call must return a single character; a NUL returned by ``f`` ends
    the result there.
    """
    s = _cstring(text)
    mapped = "".join(_char(f(index, ch)) for index, ch in enumerate(s))
    return _cstring(mapped)


def striteri(text: str, f: Callable[[int, str], str | None]) -> str:
    """Call ``f(index, char)`` on each character of ``text`` in order.

    When ``f`` returns a character it replaces the one it was given; when it
    returns None the character is kept. The resulting string is returned.
    """
    s = _cstring(text)
    result = []
    for index, ch in enumerate(s):
        replacement = f(index, ch)
        result.append(ch if replacement is None else _char(replacement))
    return _cstring("".join(result))