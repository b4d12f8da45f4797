"""Small integer helpers: absolute value, average, extremes and their positions."""

from __future__ import annotations

from collections.abc import Sequence


def abs_value(value: int) -> int:
    """Return the absolute value of ``value``."""
    return -value if value < 0 else value


def average(a: int, b: int) -> int:
    """Return the mean of two integers, truncated toward zero."""
    total = a + b
    half = abs(total) // 2
    return -half if total < 0 else half


def maximum(a: int, b: int) -> int:
    """Return the larger of two values; ``a`` on a tie."""
    return b if a < b else a


def minimum(a: int, b: int) -> int:
    """Return the smaller of two values; ``a`` on a tie."""
    return b if a > b else a


def largest_index(values: Sequence[int] | None) -> int:
    """Index of the first largest element; 0 for an empty or missing sequence."""
    if not values:
        return 0
    best = 0
    for index, value in enumerate(values):
        if values[best] < value:
            best = index
    return best


def smallest_index(values: Sequence[int] | None) -> int:
    """Index of the first smallest element; 0 for an empty or missing sequence."""
    if not values:
        return 0
    best = 0
    for index, value in enumerate(values):
        if values[best] > value:
            best = index
    return best