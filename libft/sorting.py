"""In-place merge sort and quick sort over an inclusive index range."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def _check_range(values: MutableSequence[Any], low: int, high: int) -> None:
    if low < 0 or high >= len(values):
        raise IndexError(f"range [{low}, {high}] is outside a sequence of length {len(values)}")


def _merge(values: MutableSequence[Any], start: int, mid: int, end: int) -> None:
    left = list(values[start:mid + 1])
    right = list(values[mid + 1:end + 1])
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    values[start:end + 1] = merged


def merge_sort(values: MutableSequence[Any], start: int, end: int) -> None:
    """Sort ``values[start..end]`` (both ends included) in place by merge sort."""
    if start >= end:
        return
    _check_range(values, start, end)
    mid = (start + end) // 2
    merge_sort(values, start, mid)
    merge_sort(values, mid + 1, end)
    _merge(values, start, mid, end)


def _partition(values: MutableSequence[Any], first: int, last: int) -> int:
    pivot = values[last]
    store = first
    for i in range(first, last):
        if values[i] < pivot:
            values[store], values[i] = values[i], values[store]
            store += 1
    values[store], values[last] = values[last], values[store]
    return store


def quick_sort(values: MutableSequence[Any], first: int, last: int) -> None:
    """Sort ``values[first..last]`` (both ends included) in place by quick sort.

    The last element of each range is the pivot.
    """
    if first >= last:
        return
    _check_range(values, first, last)
    pending = [(first, last)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(values, low, high)
            pending.append((pivot + 1, high))
            pending.append((low, pivot - 1))