"""Addition of polynomials in two variables, x and y."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class BivariateTerm:
    """One term ``coeff * x**exp_x * y**exp_y``."""

    coeff: int
    exp_x: int
    exp_y: int

    @property
    def exponents(self) -> tuple[int, int]:
        return self.exp_x, self.exp_y

    def __str__(self) -> str:
        return f"{self.coeff}x^{self.exp_x}y^{self.exp_y}"


def add_bivariate(
    first: Iterable[BivariateTerm], second: Iterable[BivariateTerm]
) -> list[BivariateTerm]:
    """Merge two term sequences, summing terms whose exponents match.

    The sequences are walked side by side. When the current exponent pairs
    are equal the coefficients are summed; otherwise the term with the
    larger ``(exp_x, exp_y)`` pair is taken first. Each merged term is
    pushed onto the front of the result, so the returned list is the merge
    order reversed: inputs in descending exponent order give a result in
    ascending order, and the other way round.
    """
    left = list(first)
    right = list(second)
    merged: list[BivariateTerm] = []
    i = j = 0
    while i < len(left) and j < len(right):
        a, b = left[i], right[j]
        if a.exponents == b.exponents:
            merged.append(BivariateTerm(a.coeff + b.coeff, a.exp_x, a.exp_y))
            i += 1
            j += 1
        elif a.exponents > b.exponents:
            merged.append(a)
            i += 1
        else:
            merged.append(b)
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    merged.reverse()
    return merged


def format_bivariate(terms: Iterable[BivariateTerm]) -> str:
    """Render terms as ``3x^2y^2 + 2x^1y^1``; no terms give an empty string."""
    return " + ".join(str(term) for term in terms)