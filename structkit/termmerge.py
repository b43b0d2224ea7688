"""Addition of polynomials given as term lists sorted by descending degree."""

from __future__ import annotations

from collections.abc import Iterable


def add_sorted_terms(
    first: Iterable[tuple[int, int]], second: Iterable[tuple[int, int]]
) -> list[tuple[int, int]]:
    """Merge two ``(coeff, deg)`` lists that are sorted by descending degree.

    Terms of equal degree have their coefficients summed (a zero sum is
    kept); otherwise the term of higher degree comes first. Whatever is left
    of either list once the other runs out is appended unchanged.
    """
    left = list(first)
    right = list(second)
    result: list[tuple[int, int]] = []
    i = j = 0
    while i < len(left) and j < len(right):
        (c1, d1), (c2, d2) = left[i], right[j]
        if d1 == d2:
            result.append((c1 + c2, d1))
            i += 1
            j += 1
        elif d1 > d2:
            result.append((c1, d1))
            i += 1
        else:
            result.append((c2, d2))
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result