# sortkit

A small collection of classic sorting algorithms. Every function sorts a
mutable sequence, such as a list, in place and returns `None`. The elements
only need to support `<`, `<=` and `>` comparisons. Some of the sorts also
have a threaded variant that hands large ranges to worker threads.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Simple sorts: `sortkit.basic`

```python
from sortkit.basic import selection_sort, bubble_sort, bubble_sort_improved, heap_sort

values = [5, 3, 1, 77, -1]
selection_sort(values)
assert values == [-1, 1, 3, 5, 77]
```

The sorts:

- `selection_sort(values)` repeatedly moves the minimum of the unsorted tail to the front.
- `bubble_sort(values)` makes full passes until a pass swaps nothing.
- `bubble_sort_improved(values)` shortens each pass and stops early once a pass swaps nothing.
- `insertion_sort(values, left=0, right=None)` sorts the closed range `values[left..right]`. When `right` is omitted, the range runs to the last element.
- `heap_sort(values)` sorts using a max-heap.
- `merge_sort(values)` is a stable top-down merge sort.
- `merge_sort_par(values, threshold=10_000)` is the same merge sort. When a range spans more than `threshold` positions, its two halves are sorted in two threads.

The helpers:

- `heapify(values, n, i)` sifts `values[i]` down. Only the first `n` elements count as the heap.
- `merge(values, left, mid, right)` stably merges the sorted runs `values[left..mid]` and `values[mid+1..right]`.
- `is_sorted(values, low=0, high=None)` tells whether the closed range `values[low..high]` is non-decreasing. Ranges of one element or none count as sorted.
- `find_min_index(values, start=0)` returns the index of the first smallest element at or after `start`. It raises `IndexError` if `start` is out of range.

## Quicksort and introsort: `sortkit.quick`

```python
from sortkit.quick import quick_sort_iterative, introsort

values = [-4, 122, -1000, 222, 45, 66]
introsort(values)
assert values == [-1000, -4, 45, 66, 122, 222]
```

The building blocks:

- `partition(values, low, high)` is a Lomuto partition of `values[low..high]`. The pivot is the last element, and the function returns the pivot's final index.
- `median_of_three(values, a, b, c)` returns whichever of the indices `a`, `b` and `c` holds the middle value. When values tie, it returns `c`.

The quicksorts:

- `quick_sort_two_calls(values)` is a plain recursive quicksort with two recursive calls.
- `quick_sort_one_call(values)` recurses into the smaller part and loops over the larger one.
- `quick_sort_iterative(values)` keeps the pending ranges on an explicit stack and does not recurse.
- `quick_sort_par(values, threshold=10_000)` gives partitioned parts to a thread pool for as long as a range spans more than `threshold` positions. It sorts the remainder in the calling thread.

The introsorts:

- `introsort(values)` partitions like quicksort. It uses insertion sort for ranges shorter than 16 elements. It switches to a heap sort once the depth limit of `2 * ln(len(values))` is used up. A half that is already in order is skipped.
- `introsort_par(values, threshold=10_000)` is the same algorithm. When a range spans more than `threshold` positions, its two halves are sorted in two threads.

## What this package does not do

sortkit is a library only. It has no command-line interface, and it has no
functions that return a new sorted copy. Every function changes the sequence
it is given.