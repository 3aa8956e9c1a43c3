from __future__ import annotations

from decimal import Decimal

import pytest

from exact_money.currency_registry import BHD, EUR, JPY, USD
from exact_money.errors import (
    AmountOutOfRange,
    InvalidAmount,
    InvalidCurrency,
    InvalidOperand,
    MoneyError,
    NonIntegerAmount,
    TooManyDecimalPlaces,
)
from exact_money.money import Money
from exact_money.rounding import RoundingMode


# region Minor units


def test_create_from_integer():
    money = Money(1000, EUR)

    assert money.amount == 1000
    assert money.currency == "EUR"
    assert money.currency_info is EUR


def test_create_from_string_currency():
    money = Money(1042, "EUR")

    assert money.amount == 1042
    assert money.currency == "EUR"


@pytest.mark.parametrize("amount", [0, 1, -1, 123456789, Money.MAX_AMOUNT, Money.MIN_AMOUNT])
def test_from_minor_units_keeps_amount(amount):
    for currency in (EUR, JPY, BHD):
        money = Money.from_minor_units(amount, currency)
        assert money.amount == amount
        assert money.currency == currency.code


def test_whole_float_and_decimal_are_accepted_as_minor_units():
    assert Money(1000.0, EUR).amount == 1000
    assert isinstance(Money(1000.0, EUR).amount, int)
    assert Money(Decimal("1000"), EUR).amount == 1000
    assert Money(Decimal("1E+3"), EUR).amount == 1000


@pytest.mark.parametrize("amount", [10.42, 10.423456, Decimal("0.5")])
def test_fractional_minor_units_are_rejected(amount):
    with pytest.raises(NonIntegerAmount):
        Money(amount, EUR)


def test_fractional_minor_units_raise_type_error():
    with pytest.raises(TypeError):
        Money(10.42, EUR)


@pytest.mark.parametrize("amount", ["1000", None, True, [1000], float("nan"), float("inf"), Decimal("-Infinity")])
def test_non_numeric_amounts_are_rejected(amount):
    with pytest.raises(InvalidAmount):
        Money(amount, EUR)


def test_unknown_currency_is_rejected():
    with pytest.raises(InvalidCurrency):
        Money(10, "XYZ")

    with pytest.raises(TypeError):
        Money(10, "XYZ")


@pytest.mark.parametrize("amount", [Money.MAX_AMOUNT + 1, Money.MIN_AMOUNT - 1, 10**30])
def test_out_of_range_amounts_are_rejected(amount):
    with pytest.raises(AmountOutOfRange):
        Money(amount, EUR)


def test_all_errors_share_base_class():
    with pytest.raises(MoneyError):
        Money(1.5, EUR)
    with pytest.raises(MoneyError):
        Money(1, "XYZ")


def test_from_integer_positional_and_record():
    assert Money.from_integer(1151, EUR) == Money(1151, "EUR")
    assert Money.from_integer(0, EUR).amount == 0

    money = Money.from_integer({"amount": 1151, "currency": "EUR"})
    assert money.amount == 1151
    assert money.currency == "EUR"


def test_from_integer_record_with_currency_object():
    assert Money.from_integer({"amount": 5, "currency": USD}).currency == "USD"


def test_from_integer_record_missing_key():
    with pytest.raises(InvalidOperand):
        Money.from_integer({"amount": 1151})


def test_from_integer_record_and_currency_argument_conflict():
    with pytest.raises(InvalidOperand):
        Money.from_integer({"amount": 1151, "currency": "EUR"}, "USD")


def test_from_integer_without_currency():
    with pytest.raises(InvalidCurrency):
        Money.from_integer(1151)


def test_zero():
    zero = Money.zero("JPY")
    assert zero.amount == 0
    assert zero.currency == "JPY"
    assert zero.is_zero()


# endregion

# region Decimal


def test_from_decimal():
    assert Money.from_decimal(10.01, EUR).amount == 1001
    assert Money.from_decimal(10.1, EUR).amount == 1010
    assert Money.from_decimal(10, EUR).amount == 1000
    assert Money.from_decimal(10.01, EUR).currency == "EUR"


def test_from_decimal_string():
    assert Money.from_decimal("10.01", EUR).amount == 1001
    assert Money.from_decimal("10", EUR).amount == 1000
    assert Money.from_decimal(" -0.05 ", "EUR").amount == -5


def test_from_decimal_object():
    assert Money.from_decimal(Decimal("19.99"), USD).amount == 1999


def test_from_decimal_record():
    money = Money.from_decimal({"amount": 11.5, "currency": "EUR"})
    assert money.amount == 1150
    assert money.currency == "EUR"

    money = Money.from_decimal({"amount": 11.51, "currency": EUR})
    assert money.amount == 1151


@pytest.mark.parametrize("amount", [10.421, "10.421", Decimal("0.001")])
def test_from_decimal_rejects_too_many_decimal_places(amount):
    with pytest.raises(TooManyDecimalPlaces):
        Money.from_decimal(amount, EUR)


def test_from_decimal_accepts_trailing_zeros():
    assert Money.from_decimal("10.100", EUR).amount == 1010


def test_from_decimal_respects_currency_precision():
    assert Money.from_decimal(1234, JPY).amount == 1234
    assert Money.from_decimal("1.234", BHD).amount == 1234

    with pytest.raises(TooManyDecimalPlaces):
        Money.from_decimal(12.5, JPY)


def test_from_decimal_with_rounding():
    assert Money.from_decimal(10.421, EUR, rounding=RoundingMode.NEAREST).amount == 1042
    assert Money.from_decimal(10.421, EUR, rounding=RoundingMode.CEILING).amount == 1043
    assert Money.from_decimal("10.425", EUR, rounding=RoundingMode.NEAREST).amount == 1043
    assert Money.from_decimal("10.425", EUR, rounding=RoundingMode.HALF_EVEN).amount == 1042
    assert Money.from_decimal("-10.425", EUR, rounding=RoundingMode.NEAREST).amount == -1043


@pytest.mark.parametrize("amount", ["ten", None, float("nan"), float("inf")])
def test_from_decimal_rejects_non_numeric(amount):
    with pytest.raises(InvalidAmount):
        Money.from_decimal(amount, EUR)


def test_from_decimal_rejects_unknown_currency():
    with pytest.raises(InvalidCurrency):
        Money.from_decimal(10, "XYZ")


@pytest.mark.parametrize("amount", ["10.01", "0", "-3.5", "123456.78", "0.1"])
def test_from_decimal_to_decimal_round_trip(amount):
    money = Money.from_decimal(amount, EUR)
    assert money.to_decimal() == Decimal(amount)
    assert Money.from_decimal(money.to_decimal(), EUR) == money


def test_from_decimal_rejects_precision_beyond_any_context():
    # 61 fractional digits, the last one non-zero
    with pytest.raises(TooManyDecimalPlaces):
        Money.from_decimal("10." + "0" * 60 + "1", EUR)


def test_from_decimal_rejects_tiny_amount():
    with pytest.raises(TooManyDecimalPlaces):
        Money.from_decimal("1e-999999999", EUR)


def test_from_decimal_rounds_long_fraction_exactly():
    long_amount = "10." + "0" * 60 + "1"

    assert Money.from_decimal(long_amount, EUR, rounding=RoundingMode.CEILING).amount == 1001
    assert Money.from_decimal(long_amount, EUR, rounding=RoundingMode.FLOOR).amount == 1000


def test_from_decimal_accepts_long_trailing_zeros():
    assert Money.from_decimal("10.1" + "0" * 80, EUR).amount == 1010


def test_from_decimal_huge_exponent_is_out_of_range():
    with pytest.raises(AmountOutOfRange):
        Money.from_decimal("1e999999999", EUR)
    with pytest.raises(AmountOutOfRange):
        Money.from_decimal("1e100", EUR)


def test_from_decimal_extreme_exponents_stay_in_error_taxonomy():
    for amount in ("1e999999999", "-1e999999999", "1e-999999999"):
        with pytest.raises(MoneyError):
            Money.from_decimal(amount, EUR)

    with pytest.raises(InvalidAmount):
        Money.from_decimal("1e-999999999", EUR, rounding=RoundingMode.CEILING)


def test_minor_units_with_huge_exponent_are_out_of_range():
    with pytest.raises(AmountOutOfRange):
        Money(Decimal("1e999999999"), EUR)

# endregion

# region Immutability


def test_money_is_immutable():
    money = Money(1000, EUR)

    with pytest.raises(AttributeError):
        money.amount = 5  # type: ignore[misc]
    with pytest.raises(AttributeError):
        money._amount = 5  # type: ignore[attr-defined]
    with pytest.raises(AttributeError):
        del money._currency

    assert money.amount == 1000


# endregion
