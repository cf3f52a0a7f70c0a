import random
from functools import partial

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortkit.basic import (
    bubble_sort,
    bubble_sort_improved,
    find_min_index,
    heap_sort,
    heapify,
    insertion_sort,
    is_sorted,
    merge,
    merge_sort,
    merge_sort_par,
    selection_sort,
)

SORTERS = {
    "selection": selection_sort,
    "bubble": bubble_sort,
    "bubble_improved": bubble_sort_improved,
    "insertion": insertion_sort,
    "heap": heap_sort,
    "merge": merge_sort,
    "merge_par": partial(merge_sort_par, threshold=8),
}

FIXED_CASES = [
    ([1, 11, 2, 5, 12, 9, 4, 10], [1, 2, 4, 5, 9, 10, 11, 12]),
    ([], []),
    ([3], [3]),
    ([5, 3, 1, 77, -1], [-1, 1, 3, 5, 77]),
    ([5, 4, 3, 2, 1], [1, 2, 3, 4, 5]),
    ([5, 4, 3, 2, 1, 0], [0, 1, 2, 3, 4, 5]),
    (
        [-4, 122, -1000, 222, 45, 66, 97, 1, 23, 44, 23, 100, 244, 456, -1000, 22],
        [-1000, -1000, -4, 1, 22, 23, 23, 44, 45, 66, 97, 100, 122, 222, 244, 456],
    ),
    ([1], [1]),
    ([5, 3, 1, 77], [1, 3, 5, 77]),
    ([-4, 122, -1000, -4, 122], [-1000, -4, -4, 122, 122]),
    ([-4, 122, -1000, -4, 122, -1000], [-1000, -1000, -4, -4, 122, 122]),
]


def _random_list(seed, size):
    rng = random.Random(seed)
    return [rng.randint(0, 2**31 - 1) for _ in range(size)]


@pytest.fixture(params=list(SORTERS), ids=list(SORTERS))
def sorter(request):
    return SORTERS[request.param]


@pytest.mark.parametrize("data, expected", FIXED_CASES)
def test_fixed_cases(sorter, data, expected):
    values = list(data)
    sorter(values)
    assert values == expected
    assert len(values) == len(expected)


@pytest.mark.parametrize("seed", [0, 2, 4, 6, 8])
def test_random_inputs(sorter, seed):
    values = _random_list(seed, 300)
    expected = sorted(values)
    sorter(values)
    assert values == expected


@pytest.mark.parametrize("seed", [0, 2, 4])
def test_already_sorted_inputs(sorter, seed):
    values = sorted(_random_list(seed, 300))
    expected = list(values)
    sorter(values)
    assert values == expected


@pytest.mark.parametrize("seed", [0, 2, 4])
def test_reverse_sorted_inputs(sorter, seed):
    values = sorted(_random_list(seed, 300), reverse=True)
    expected = sorted(values)
    sorter(values)
    assert values == expected


@given(st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60))
def test_all_sorters_agree_with_builtin(data):
    for sort_func in SORTERS.values():
        values = list(data)
        sort_func(values)
        assert values == sorted(data)


def test_merge_sort_par_large_input():
    values = _random_list(11, 5000)
    expected = sorted(values)
    merge_sort_par(values, threshold=500)
    assert values == expected


def test_is_sorted_whole_and_ranges():
    assert is_sorted([1, 2, 2, 3])
    assert not is_sorted([1, 3, 2])
    assert is_sorted([])
    assert is_sorted([5, 1, 2, 3, 0], 1, 3)
    assert not is_sorted([5, 1, 2, 3, 0], 0, 3)
    assert is_sorted([3, 2, 1], 1, 1)


def test_find_min_index_returns_first_minimum():
    assert find_min_index([4, 1, 3, 1], 0) == 1
    assert find_min_index([4, 1, 3, 1], 2) == 3
    assert find_min_index([7], 0) == 0


def test_find_min_index_out_of_range():
    with pytest.raises(IndexError):
        find_min_index([1, 2, 3], 3)
    with pytest.raises(IndexError):
        find_min_index([], 0)


def test_insertion_sort_subrange_leaves_rest_untouched():
    values = [9, 5, 4, 3, 0]
    insertion_sort(values, 1, 3)
    assert values == [9, 3, 4, 5, 0]


def test_heapify_builds_max_heap():
    values = [1, 9, 8, 7, 6, 5]
    n = len(values)
    for i in range(n // 2 - 1, -1, -1):
        heapify(values, n, i)
    assert values[0] == 9
    for i in range(n):
        for child in (2 * i + 1, 2 * i + 2):
            if child < n:
                assert values[i] >= values[child]
    assert sorted(values) == [1, 5, 6, 7, 8, 9]


def test_merge_combines_sorted_runs_in_range():
    values = [100, 1, 4, 9, 2, 3, 10, -5]
    merge(values, 1, 3, 6)
    assert values == [100, 1, 2, 3, 4, 9, 10, -5]


def test_merge_sort_par_propagates_comparison_errors():
    values = [3, "x", 1, 2] * 10
    with pytest.raises(TypeError):
        merge_sort_par(values, threshold=2)