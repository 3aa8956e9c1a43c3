from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

import pytest

from exact_money.errors import AmountOutOfRange, InvalidAmount
from exact_money.utils.decimal_tools import MAX_EXPONENT, as_decimal, as_finite_decimal, as_fraction, fraction_digits


def test_as_decimal_uses_shortest_float_repr():
    assert as_decimal(10.01) == Decimal("10.01")
    value = Decimal("1.5")
    assert as_decimal(value) is value


@pytest.mark.parametrize("value", [True, None, object(), "1.2.3", float("inf"), Decimal("NaN"), b"1"])
def test_as_finite_decimal_rejects(value):
    with pytest.raises(InvalidAmount):
        as_finite_decimal(value)


def test_as_finite_decimal_names_parameter():
    with pytest.raises(InvalidAmount, match=r"\$factor"):
        as_finite_decimal("x", "factor")


def test_as_fraction_is_exact():
    long_value = Decimal("0." + "9" * 60)

    assert as_fraction(long_value) == Fraction(10**60 - 1, 10**60)
    assert as_fraction(Decimal("10.01")) == Fraction(1001, 100)
    assert as_fraction(Decimal("1E+3")) == 1000


def test_as_fraction_accepts_zero_with_any_exponent():
    assert as_fraction(Decimal("0E+999999999")) == 0
    assert as_fraction(Decimal("-0E-999999999")) == 0


def test_as_fraction_bounds_exponent():
    assert as_fraction(Decimal(f"1E+{MAX_EXPONENT}")) == 10**MAX_EXPONENT
    assert as_fraction(Decimal(f"1E-{MAX_EXPONENT}")) == Fraction(1, 10**MAX_EXPONENT)

    with pytest.raises(AmountOutOfRange):
        as_fraction(Decimal("1E+999999999"))
    with pytest.raises(InvalidAmount):
        as_fraction(Decimal("1E-999999999"))


@pytest.mark.parametrize(
    "value,expected",
    [
        ("10", 0),
        ("10.1", 1),
        ("10.100", 1),
        ("10.01", 2),
        ("0.000", 0),
        ("1E+3", 0),
        ("1.5E+1", 0),
        ("1E-999999999", 999999999),
        ("10." + "0" * 60 + "1", 61),
    ],
)
def test_fraction_digits(value, expected):
    assert fraction_digits(Decimal(value)) == expected
