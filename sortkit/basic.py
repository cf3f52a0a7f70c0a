"""Elementary in-place sorting algorithms for mutable sequences."""

from __future__ import annotations

import heapq
from collections.abc import MutableSequence
from concurrent.futures import ThreadPoolExecutor
from itertools import islice, pairwise
from typing import Any

MERGESORT_THRESHOLD = 10_000


def _swap(values: MutableSequence[Any], i: int, j: int) -> None:
    values[i], values[j] = values[j], values[i]


def is_sorted(values: MutableSequence[Any], low: int = 0, high: int | None = None) -> bool:
    """Return True if values[low..high] (inclusive) is in non-decreasing order."""
    if high is None:
        high = len(values) - 1
    if high <= low:
        return True
    window = islice(values, low, high + 1)
    return all(a <= b for a, b in pairwise(window))


def find_min_index(values: MutableSequence[Any], start: int = 0) -> int:
    """Return the index of the first smallest element at or after ``start``."""
    if not 0 <= start < len(values):
        raise IndexError(f"start index {start} out of range for length {len(values)}")
    return min(range(start, len(values)), key=values.__getitem__)


def selection_sort(values: MutableSequence[Any]) -> None:
    """Sort in place by repeatedly moving the minimum of the unsorted tail forward."""
    for i in range(len(values) - 1):
        _swap(values, i, find_min_index(values, i))


def bubble_sort(values: MutableSequence[Any]) -> None:
    """Sort in place with full bubble passes until a pass makes no swap."""
    swapped = True
    while swapped:
        swapped = False
        for i in range(len(values) - 1):
            if values[i] > values[i + 1]:
                _swap(values, i, i + 1)
                swapped = True


def bubble_sort_improved(values: MutableSequence[Any]) -> None:
    """Bubble sort that shrinks each pass and stops early once nothing moves."""
    n = len(values)
    for done in range(n - 1):
        swapped = False
        for j in range(n - 1 - done):
            if values[j] > values[j + 1]:
                _swap(values, j, j + 1)
                swapped = True
        if not swapped:
            break


def insertion_sort(
    values: MutableSequence[Any], left: int = 0, right: int | None = None
) -> None:
    """Insertion-sort values[left..right] (inclusive) in place."""
    if right is None:
        right = len(values) - 1
    for i in range(left + 1, right + 1):
        key = values[i]
        j = i - 1
        while j >= left and values[j] > key:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = key


def heapify(values: MutableSequence[Any], n: int, i: int) -> None:
    """Sift values[i] down so the subtree rooted at i is a max-heap within values[:n]."""
    while True:
        largest = i
        left, right = 2 * i + 1, 2 * i + 2
        if left < n and values[left] > values[largest]:
            largest = left
        if right < n and values[right] > values[largest]:
            largest = right
        if largest == i:
            return
        _swap(values, i, largest)
        i = largest


def heap_sort(values: MutableSequence[Any]) -> None:
    """Sort in place with a max-heap."""
    n = len(values)
    for i in range(n // 2 - 1, -1, -1):
        heapify(values, n, i)
    for end in range(n - 1, 0, -1):
        _swap(values, 0, end)
        heapify(values, end, 0)


def merge(values: MutableSequence[Any], left: int, mid: int, right: int) -> None:
    """Stably merge the sorted runs values[left..mid] and values[mid+1..right]."""
    first = values[left : mid + 1]
    second = values[mid + 1 : right + 1]
    values[left : right + 1] = list(heapq.merge(first, second))


def _merge_sort_range(values: MutableSequence[Any], left: int, right: int) -> None:
    if left < right:
        mid = (left + right) // 2
        _merge_sort_range(values, left, mid)
        _merge_sort_range(values, mid + 1, right)
        merge(values, left, mid, right)


def merge_sort(values: MutableSequence[Any]) -> None:
    """Stable top-down merge sort, in place."""
    _merge_sort_range(values, 0, len(values) - 1)


def _merge_sort_par_range(
    values: MutableSequence[Any], left: int, right: int, threshold: int
) -> None:
    if left >= right:
        return
    mid = (left + right) // 2
    if right - left > threshold:
        with ThreadPoolExecutor(max_workers=2) as pool:
            halves = [
                pool.submit(_merge_sort_par_range, values, left, mid, threshold),
                pool.submit(_merge_sort_par_range, values, mid + 1, right, threshold),
            ]
            for half in halves:
                half.result()
    else:
        _merge_sort_range(values, left, mid)
        _merge_sort_range(values, mid + 1, right)
    merge(values, left, mid, right)


def merge_sort_par(values: MutableSequence[Any], threshold: int = MERGESORT_THRESHOLD) -> None:
    """Merge sort that sorts both halves in threads when a range spans more than ``threshold``."""
    _merge_sort_par_range(values, 0, len(values) - 1, threshold)