"""Least-significant-digit radix sort for non-negative integers."""

from __future__ import annotations

from collections.abc import Iterable


def digit_count(number: int) -> int:
    """Number of decimal digits in ``number``; zero has one digit."""
    number = abs(number)
    count = 1
    while number >= 10:
        number //= 10
        count += 1
    return count


def radix_passes(values: Iterable[int]) -> list[list[int]]:
    """Return the list after each stable pass, one pass per digit of the maximum.

    Raises ValueError if any value is negative.
    """
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("radix sort needs non-negative integers")
    if not items:
        return []

    passes = []
    exp = 1
    for _ in range(digit_count(max(items))):
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // exp) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        passes.append(items)
        exp *= 10
    return passes


def radix_sort(values: Iterable[int]) -> list[int]:
    """Return the non-negative integers in ascending order."""
    passes = radix_passes(values)
    return passes[-1] if passes else []