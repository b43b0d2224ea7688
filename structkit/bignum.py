"""Arbitrary-length addition of non-negative decimal numbers given as strings."""

from __future__ import annotations

from itertools import zip_longest


def add_decimal_strings(first: str, second: str) -> str:
    """Add two strings of decimal digits digit by digit, with carry.

    Leading zeros in the longer operand are kept. Raises ValueError if
    either string holds anything other than the digits 0-9.
    """
    for text in (first, second):
        if not all(ch in "0123456789" for ch in text):
            raise ValueError(f"not a string of decimal digits: {text!r}")

    digits: list[str] = []
    carry = 0
    for a, b in zip_longest(reversed(first), reversed(second), fillvalue="0"):
        carry, digit = divmod(int(a) + int(b) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append(str(carry))
    return "".join(reversed(digits))