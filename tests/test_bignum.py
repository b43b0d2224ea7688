import pytest

from structkit.bignum import add_decimal_strings


@pytest.mark.parametrize(
    "first, second",
    [
        ("1", "2"),
        ("999", "1"),
        ("123456789012345678901234567890", "987654321098765432109876543210"),
        ("5", "99999999999999999999"),
        ("0", "0"),
    ],
)
def test_matches_integer_addition(first, second):
    assert add_decimal_strings(first, second) == str(int(first) + int(second))


def test_commutative():
    a, b = "4821", "97"
    assert add_decimal_strings(a, b) == add_decimal_strings(b, a)


def test_carry_out_extends_length():
    assert add_decimal_strings("999", "1") == "1000"


def test_leading_zeros_kept():
    assert add_decimal_strings("007", "1") == "008"


def test_empty_operands():
    assert add_decimal_strings("", "") == ""
    assert add_decimal_strings("", "42") == "42"


@pytest.mark.parametrize("bad", ["12a", "-5", "1.0", " 3"])
def test_rejects_non_digits(bad):
    with pytest.raises(ValueError):
        add_decimal_strings(bad, "1")