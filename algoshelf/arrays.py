"""Searching, sorting and maximum-subarray routines for integer sequences."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence

__all__ = [
    "max_subarray_sum",
    "linear_search",
    "binary_search",
    "bubble_sort",
    "insertion_sort",
    "quick_sort",
    "counting_sort",
]


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a contiguous run, never less than 0."""
    best = 0
    running = 0
    for value in values:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def linear_search(values: Iterable[int], target: int) -> int | None:
    """Return the index of the first element equal to ``target``, or None."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return None


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in the sorted ``values``, or None."""
    index = bisect_left(values, target)
    if index < len(values) and values[index] == target:
        return index
    return None


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` using bubble sort."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` using insertion sort."""
    items = list(values)
    for c in range(1, len(items)):
        d = c
        while d > 0 and items[d - 1] > items[d]:
            items[d - 1], items[d] = items[d], items[d - 1]
            d -= 1
    return items


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[low]
    i = low
    j = high + 1
    while True:
        i += 1
        while i <= high and items[i] < pivot:
            i += 1
        j -= 1
        while pivot < items[j]:
            j -= 1
        if i >= j:
            break
        items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], pivot
    return j


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``values`` using quicksort with a first-element pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(items, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of the non-negative integers in ``values``."""
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]