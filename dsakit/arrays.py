"""Searching, pairing and maximum-sum routines over one-dimensional sequences."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence
from itertools import accumulate


def all_subarrays(values: Sequence[int]) -> list[list[int]]:
    """Return every contiguous subarray, ordered by start then by end."""
    return [
        list(values[start : end + 1])
        for start in range(len(values))
        for end in range(start, len(values))
    ]


def all_pairs(values: Sequence[int]) -> list[tuple[int, int]]:
    """Return every pair (x, y) where x comes before y in the sequence."""
    return [
        (first, second)
        for index, first in enumerate(values)
        for second in values[index + 1 :]
    ]


def binary_search(values: Sequence[int], key: int) -> int | None:
    """Return the index of ``key`` in the ascending sequence, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == key:
            return mid
        if key < values[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return None


def linear_search(values: Sequence[int], key: int) -> int | None:
    """Return the index of the first element equal to ``key``, or None."""
    return next((index for index, value in enumerate(values) if value == key), None)


def kadane_max_sum(values: Sequence[int]) -> int:
    """Largest contiguous sum in linear time; never less than zero."""
    current = best = 0
    for value in values:
        current = max(current + value, 0)
        best = max(best, current)
    return best


def prefix_max_sum(values: Sequence[int]) -> int:
    """Largest contiguous sum using prefix sums; never less than zero."""
    prefix = [0, *accumulate(values)]
    return max(
        (
            prefix[end + 1] - prefix[start]
            for start in range(len(values))
            for end in range(start, len(values))
        ),
        default=0,
    ) if values else 0 if not values else 0


def _subarray_sums(values: Sequence[int]) -> Iterator[tuple[list[int], int]]:
    for subarray in all_subarrays(values):
        yield subarray, sum(subarray)


def subarray_sums(values: Sequence[int]) -> list[tuple[list[int], int]]:
    """Return each contiguous subarray together with its sum."""
    return list(_subarray_sums(values))


def brute_force_max_sum(values: Sequence[int]) -> int:
    """Largest contiguous sum by summing every subarray; never less than zero."""
    return max((total for _, total in _subarray_sums(values)), default=0, key=int) if values else 0


def reverse_in_place(values: MutableSequence[int]) -> None:
    """Reverse the sequence in place."""
    low, high = 0, len(values) - 1
    while low < high:
        values[low], values[high] = values[high], values[low]
        low += 1
        high -= 1