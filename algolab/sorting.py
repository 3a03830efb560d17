"""Binary search, merge sort and quicksort."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def binary_search(items: Sequence[Any], key: Any) -> int | None:
    """Return an index of ``key`` in the sorted ``items``, or ``None``.

    The search halves the range ``[start, last]`` and probes its midpoint,
    rounding down.
    """
    start, last = 0, len(items) - 1
    while start <= last:
        mid = (start + last) // 2
        probe = items[mid]
        if key == probe:
            return mid
        if key < probe:
            last = mid - 1
        else:
            start = mid + 1
    return None


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
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
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items in ascending order, sorted by merging halves."""
    values = list(items)
    if len(values) <= 1:
        return values
    mid = (len(values) - 1) // 2 + 1
    return _merge(merge_sort(values[:mid]), merge_sort(values[mid:]))


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items in ascending order, partitioning on the first element."""
    values = list(items)

    def partition(low: int, high: int) -> int:
        pivot = values[low]
        i, j = low, high
        while i < j:
            while i < high and values[i] <= pivot:
                i += 1
            while values[j] > pivot:
                j -= 1
            if i < j:
                values[i], values[j] = values[j], values[i]
        values[low], values[j] = values[j], values[low]
        return j

    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = partition(low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return values