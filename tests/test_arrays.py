import pytest

from dsakit.arrays import (
    all_pairs,
    all_subarrays,
    binary_search,
    brute_force_max_sum,
    kadane_max_sum,
    linear_search,
    prefix_max_sum,
    reverse_in_place,
    subarray_sums,
)

SORTED = [1, 2, 5, 10, 19, 21, 30, 45]
UNSORTED = [32, 56, 32, 4, 1, 0, 55, 21]
MIXED = [-2, 30, 54, 10, 23, 32, -10, 48, -99, 117, 32]
POSITIVE = [10, 20, 30, 40, 50, 70, 80, 90, 100]


def test_all_subarrays_count_and_contiguity():
    subs = all_subarrays(POSITIVE)
    n = len(POSITIVE)
    assert len(subs) == n * (n + 1) // 2
    assert subs[0] == [POSITIVE[0]]
    assert subs[n - 1] == POSITIVE
    for sub in subs:
        start = POSITIVE.index(sub[0])
        assert POSITIVE[start : start + len(sub)] == sub


def test_all_subarrays_empty():
    assert all_subarrays([]) == []


def test_all_pairs_order_and_count():
    pairs = all_pairs(POSITIVE)
    n = len(POSITIVE)
    assert len(pairs) == n * (n - 1) // 2
    assert pairs[0] == (POSITIVE[0], POSITIVE[1])
    assert pairs[-1] == (POSITIVE[-2], POSITIVE[-1])
    assert all(POSITIVE.index(x) < POSITIVE.index(y) for x, y in pairs)


@pytest.mark.parametrize("key", SORTED)
def test_binary_search_finds_every_element(key):
    index = binary_search(SORTED, key)
    assert SORTED[index] == key


@pytest.mark.parametrize("key", [0, 3, 46, -5])
def test_binary_search_missing(key):
    assert binary_search(SORTED, key) is None


def test_binary_search_empty():
    assert binary_search([], 1) is None


@pytest.mark.parametrize("key", UNSORTED)
def test_linear_search_returns_first_index(key):
    assert linear_search(UNSORTED, key) == UNSORTED.index(key)


def test_linear_search_missing():
    assert linear_search(UNSORTED, 999) is None


@pytest.mark.parametrize(
    "values",
    [MIXED, POSITIVE, [5], [-1, -2, 3, -1, 2], [4, -10, 4]],
)
def test_max_sum_algorithms_agree(values):
    expected = max(sum(sub) for sub in all_subarrays(values))
    assert kadane_max_sum(values) == expected
    assert prefix_max_sum(values) == expected
    assert brute_force_max_sum(values) == expected


def test_max_sum_of_all_positive_is_total():
    assert kadane_max_sum(POSITIVE) == sum(POSITIVE)
    assert prefix_max_sum(POSITIVE) == sum(POSITIVE)
    assert brute_force_max_sum(POSITIVE) == sum(POSITIVE)


def test_subarray_sums_pairs_each_subarray_with_its_sum():
    result = subarray_sums(POSITIVE)
    assert [sub for sub, _ in result] == all_subarrays(POSITIVE)
    assert all(total == sum(sub) for sub, total in result)


@pytest.mark.parametrize("values", [POSITIVE, [1], [], [1, 2], UNSORTED])
def test_reverse_in_place(values):
    data = list(values)
    assert reverse_in_place(data) is None
    assert data == values[::-1]
    reverse_in_place(data)
    assert data == values