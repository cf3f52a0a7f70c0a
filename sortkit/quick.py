"""Quicksort variants and introsort, all sorting mutable sequences in place."""

from __future__ import annotations

import heapq
import math
from collections.abc import MutableSequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from sortkit.basic import insertion_sort, is_sorted

QUICKSORT_THRESHOLD = 10_000
INTROSORT_THRESHOLD = 10_000
_INSERTION_LIMIT = 16


def _swap(values: MutableSequence[Any], i: int, j: int) -> None:
    values[i], values[j] = values[j], values[i]


def partition(values: MutableSequence[Any], low: int, high: int) -> int:
    """Lomuto partition of values[low..high] around values[high]; return the pivot's index."""
    pivot = values[high]
    store = low - 1
    for i in range(low, high):
        if values[i] <= pivot:
            store += 1
            _swap(values, i, store)
    _swap(values, store + 1, high)
    return store + 1


def median_of_three(values: MutableSequence[Any], a: int, b: int, c: int) -> int:
    """Return whichever of the indices a, b, c holds the middle value (c on ties)."""
    va, vb, vc = values[a], values[b], values[c]
    if va < vb < vc or vc < vb < va:
        return b
    if vb < va < vc or vc < va < vb:
        return a
    return c


def _two_calls(values: MutableSequence[Any], low: int, high: int) -> None:
    if low < high:
        p = partition(values, low, high)
        _two_calls(values, low, p - 1)
        _two_calls(values, p + 1, high)


def quick_sort_two_calls(values: MutableSequence[Any]) -> None:
    """Plain recursive quicksort; recursion depth follows the partition balance."""
    _two_calls(values, 0, len(values) - 1)


def _one_call(values: MutableSequence[Any], low: int, high: int) -> None:
    while low < high:
        p = partition(values, low, high)
        if p - low < high - p:
            _one_call(values, low, p - 1)
            low = p + 1
        else:
            _one_call(values, p + 1, high)
            high = p - 1


def quick_sort_one_call(values: MutableSequence[Any]) -> None:
    """Quicksort that recurses only into the smaller part and loops over the larger."""
    _one_call(values, 0, len(values) - 1)


def quick_sort_iterative(values: MutableSequence[Any]) -> None:
    """Quicksort driven by an explicit stack of pending ranges."""
    pending = [(0, len(values) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        p = partition(values, low, high)
        pending.append((low, p - 1))
        pending.append((p + 1, high))


def _quick_par(values: MutableSequence[Any], low: int, high: int, threshold: int) -> None:
    with ThreadPoolExecutor() as pool:
        spawned = []
        while low < high and high - low > threshold:
            p = partition(values, low, high)
            if p - low < high - p:
                spawned.append(pool.submit(_quick_par, values, low, p - 1, threshold))
                low = p + 1
            else:
                spawned.append(pool.submit(_quick_par, values, p + 1, high, threshold))
                high = p - 1
        _one_call(values, low, high)
        for task in spawned:
            task.result()


def quick_sort_par(values: MutableSequence[Any], threshold: int = QUICKSORT_THRESHOLD) -> None:
    """Quicksort that hands parts to worker threads while a range spans more than ``threshold``."""
    _quick_par(values, 0, len(values) - 1, threshold)


def _heap_sort_range(values: MutableSequence[Any], begin: int, end: int) -> None:
    heap = list(values[begin : end + 1])
    heapq.heapify(heap)
    values[begin : end + 1] = [heapq.heappop(heap) for _ in range(len(heap))]


def _introsort(
    values: MutableSequence[Any],
    begin: int,
    end: int,
    depth: int,
    threshold: int | None,
) -> None:
    size = end - begin
    if size <= 0:
        return
    if size < _INSERTION_LIMIT:
        insertion_sort(values, begin, end)
        return
    if depth == 0:
        _heap_sort_range(values, begin, end)
        return

    point = partition(values, begin, end)
    halves = [
        (lo, hi)
        for lo, hi in ((begin, point), (point + 1, end))
        if not is_sorted(values, lo, hi)
    ]
    if threshold is not None and size > threshold:
        with ThreadPoolExecutor(max_workers=2) as pool:
            tasks = [
                pool.submit(_introsort, values, lo, hi, depth - 1, threshold)
                for lo, hi in halves
            ]
            for task in tasks:
                task.result()
    else:
        for lo, hi in halves:
            _introsort(values, lo, hi, depth - 1, threshold)


def _depth_limit(values: MutableSequence[Any]) -> int:
    return int(2 * math.log(len(values))) if values else 0


def introsort(values: MutableSequence[Any]) -> None:
    """Quicksort that falls back to heap sort past a depth limit and insertion sort for small ranges."""
    _introsort(values, 0, len(values) - 1, _depth_limit(values), None)


def introsort_par(values: MutableSequence[Any], threshold: int = INTROSORT_THRESHOLD) -> None:
    """Introsort that sorts both halves in threads while a range spans more than ``threshold``."""
    _introsort(values, 0, len(values) - 1, _depth_limit(values), threshold)