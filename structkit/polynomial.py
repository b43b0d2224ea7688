"""Univariate integer polynomials kept as terms in descending exponent order."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import Optional, TextIO


class Polynomial:
    """A polynomial held as a collection of ``(coeff, exp)`` terms.

    Terms with equal exponents are combined when they are added, and terms
    whose coefficient becomes zero are dropped. Iteration yields the terms
    from the highest exponent down.
    """

    def __init__(self, terms: Iterable[tuple[int, int]] = ()) -> None:
        self._terms: dict[int, int] = {}
        for coeff, exp in terms:
            self.add_term(coeff, exp)

    def add_term(self, coeff: int, exp: int) -> None:
        """Add ``coeff * x**exp``, merging it with any term of the same exponent."""
        if coeff == 0:
            return
        total = self._terms.get(exp, 0) + coeff
        if total == 0:
            del self._terms[exp]
        else:
            self._terms[exp] = total

    def __iter__(self) -> Iterator[tuple[int, int]]:
        """Yield ``(coeff, exp)`` pairs in descending exponent order."""
        for exp in sorted(self._terms, reverse=True):
            yield self._terms[exp], exp

    def __len__(self) -> int:
        return len(self._terms)

    def __add__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial([*self, *other])

    def __sub__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial([*self, *((-coeff, exp) for coeff, exp in other)])

    def __mul__(self, other: object) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(
            (c1 * c2, e1 + e2) for c1, e1 in self for c2, e2 in other
        )

    def derivative(self) -> Polynomial:
        """Return the derivative; constant terms vanish."""
        return Polynomial((coeff * exp, exp - 1) for coeff, exp in self if exp != 0)

    def drop_odd_coefficients(self) -> Polynomial:
        """Return a copy without the terms whose coefficient is odd."""
        return Polynomial((coeff, exp) for coeff, exp in self if coeff % 2 == 0)

    def __str__(self) -> str:
        """Render as ``3x^2 + 5x^1 -6x^0``; the empty polynomial is ``0``."""
        terms = list(self)
        if not terms:
            return "0"
        parts = [f"{terms[0][0]}x^{terms[0][1]}"]
        for coeff, exp in terms[1:]:
            separator = " + " if coeff > 0 else " "
            parts.append(f"{separator}{coeff}x^{exp}")
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Polynomial({list(self)!r})"


_MENU = (
    "\nChoose an operation:\n"
    "1. Add Polynomials\n"
    "2. Subtract Polynomials\n"
    "3. Multiply Polynomials\n"
    "4. Differentiate First Polynomial\n"
    "5. Exit\n"
    "Enter choice: "
)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_polynomial(ordinal: str, numbers: Iterator[int], out: TextIO) -> Polynomial:
    out.write(f"Enter number of terms in the {ordinal} polynomial: ")
    count = next(numbers)
    out.write(f"Enter terms for {ordinal} polynomial (coefficient and exponent):\n")
    poly = Polynomial()
    for index in range(1, count + 1):
        out.write(f"Term {index}: ")
        coeff = next(numbers)
        exp = next(numbers)
        poly.add_term(coeff, exp)
    return poly


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read two polynomials from standard input and run the operations menu."""
    out = sys.stdout
    numbers = (int(token) for token in _tokens(sys.stdin))
    try:
        first = _read_polynomial("first", numbers, out)
        second = _read_polynomial("second", numbers, out)
        operations = {
            1: ("Addition", lambda: first + second),
            2: ("Subtraction", lambda: first - second),
            3: ("Multiplication", lambda: first * second),
            4: ("Differentiation of First Polynomial", first.derivative),
        }
        while True:
            out.write(_MENU)
            choice = next(numbers)
            if choice == 5:
                out.write("Exiting...\n")
                break
            if choice in operations:
                label, operation = operations[choice]
                result = operation()
                out.write(f"Resultant Polynomial after {label}:\n")
                out.write(f"{str(result) if len(result) else ''}\n")
            else:
                out.write("Invalid choice. Try again.\n")
    except StopIteration:
        out.write("\n")
    except ValueError as error:
        print(f"invalid input: {error}", file=sys.stderr)
        return 1
    return 0