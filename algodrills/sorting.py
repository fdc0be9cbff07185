"""Sorting and searching routines."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from typing import Any


def _merge(left: list, right: list) -> list:
    merged: list = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list:
    """Return a new, stably sorted list of ``values`` using merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list, start: int, stop: int) -> int:
    """Partition ``items[start:stop]`` around its first element; return the pivot's index."""
    pivot = items[start]
    boundary = start
    for j in range(start + 1, stop):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary], items[start] = items[start], items[boundary]
    return boundary


def quick_sort(values: Iterable[Any]) -> list:
    """Return a new sorted list of ``values`` using quicksort with a first-element pivot."""
    items = list(values)
    pending = [(0, len(items))]
    while pending:
        start, stop = pending.pop()
        if stop - start > 1:
            pivot = _partition(items, start, stop)
            pending.append((start, pivot))
            pending.append((pivot + 1, stop))
    return items


def binary_search(values: Sequence[Any], key: Any) -> int | None:
    """Return the index of ``key`` in the sorted ``values``, or ``None`` if absent."""
    index = bisect_left(values, key)
    if index < len(values) and values[index] == key:
        return index
    return None