"""Classic recursive algorithms: sorting, counting, searching and powers."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def bubble_sort(values: MutableSequence[int]) -> None:
    """Sort in place, each pass bubbling the largest remaining value to the end."""
    for end in range(len(values) - 1, 0, -1):
        for j in range(end):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]


def bubble_sort_stepwise(values: MutableSequence[int]) -> Iterator[tuple[int, bool]]:
    """Sort in place one comparison at a time.

    Yields ``(index, swapped)`` after comparing ``values[index]`` with
    ``values[index + 1]``; the sequence is sorted once the generator is exhausted.
    """
    for end in range(len(values) - 1, 0, -1):
        for j in range(end):
            swapped = values[j] > values[j + 1]
            if swapped:
                values[j], values[j + 1] = values[j + 1], values[j]
            yield j, swapped


def decreasing(n: int) -> list[int]:
    """Return n, n-1, ..., 1."""
    _require_non_negative("n", n)
    return list(range(n, 0, -1))


def increasing(n: int) -> list[int]:
    """Return 1, 2, ..., n."""
    _require_non_negative("n", n)
    return list(range(1, n + 1))


def factorial(n: int) -> int:
    """Return n!."""
    _require_non_negative("n", n)
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1."""
    _require_non_negative("n", n)
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def first_occurrence(values: Sequence[int], key: int) -> int | None:
    """Return the index of the first element equal to ``key``, or None."""
    return next((index for index, value in enumerate(values) if value == key), None)


def last_occurrence(values: Sequence[int], key: int) -> int | None:
    """Return the index of the last element equal to ``key``, or None."""
    return next(
        (index for index in range(len(values) - 1, -1, -1) if values[index] == key),
        None,
    )


def power(base: int, exponent: int) -> int:
    """Return base ** exponent by repeated multiplication."""
    _require_non_negative("exponent", exponent)
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def fast_power(base: int, exponent: int) -> int:
    """Return base ** exponent by repeated squaring."""
    _require_non_negative("exponent", exponent)
    if exponent == 0:
        return 1
    half = fast_power(base, exponent // 2)
    squared = half * half
    return base * squared if exponent & 1 else squared


def is_strictly_increasing(values: Sequence[int]) -> bool:
    """Return True if every element is strictly less than the one after it."""
    return all(left < right for left, right in zip(values, values[1:]))