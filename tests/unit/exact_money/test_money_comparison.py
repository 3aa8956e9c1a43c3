from __future__ import annotations

import pytest

from exact_money.currency_registry import EUR, USD
from exact_money.errors import CurrencyMismatch, InvalidOperand
from exact_money.money import Money


def test_equals():
    first = Money(1000, EUR)

    assert first.equals(Money(1000, EUR))
    assert not first.equals(Money(1000, USD))
    assert not first.equals(Money(100, EUR))


@pytest.mark.parametrize("other", [None, 1000, "10.00", {"amount": 1000, "currency": "EUR"}])
def test_equals_non_money_is_false(other):
    assert Money(1000, EUR).equals(other) is False
    assert (Money(1000, EUR) == other) is False


def test_equality_operator_and_hash():
    assert Money(1000, EUR) == Money(1000, "eur")
    assert Money(1000, EUR) != Money(1000, USD)
    assert hash(Money(1000, EUR)) == hash(Money(1000, "EUR"))
    assert len({Money(1000, EUR), Money(1000, "EUR"), Money(1000, USD)}) == 2


def test_compare():
    subject = Money(1000, EUR)

    assert subject.compare(Money(1500, EUR)) == -1
    assert subject.compare(Money(500, EUR)) == 1
    assert subject.compare(Money(1000, EUR)) == 0


def test_compare_different_currencies():
    with pytest.raises(CurrencyMismatch):
        Money(1000, EUR).compare(Money(1000, USD))


def test_compare_non_money():
    with pytest.raises(InvalidOperand):
        Money(1000, EUR).compare(1000)


def test_compare_is_consistent_with_integer_order():
    amounts = [5, -3, 0, 1000, -1000, 7]
    moneys = sorted(Money(amount, EUR) for amount in amounts)

    assert [money.amount for money in moneys] == sorted(amounts)


def test_named_comparisons():
    small = Money(100, EUR)
    big = Money(200, EUR)

    assert big.greater_than(small)
    assert not small.greater_than(small)
    assert small.greater_than_or_equal(small)
    assert small.less_than(big)
    assert not big.less_than(small)
    assert big.less_than_or_equal(big)


def test_comparison_operators():
    small = Money(100, EUR)
    big = Money(200, EUR)

    assert small < big
    assert small <= small
    assert big > small
    assert big >= big

    with pytest.raises(CurrencyMismatch):
        small < Money(200, USD)  # noqa: B015
    with pytest.raises(TypeError):
        small < 200  # noqa: B015


def test_zero_check():
    assert not Money(1000, "EUR").is_zero()
    assert Money(0, "EUR").is_zero()
    assert not Money(0, "EUR")
    assert Money(-1, "EUR")


def test_positive_check():
    assert Money(1000, "EUR").is_positive()
    assert not Money(-1000, "EUR").is_positive()
    assert not Money(0, "EUR").is_positive()


def test_negative_check():
    assert not Money(1000, "EUR").is_negative()
    assert Money(-1000, "EUR").is_negative()
    assert not Money(0, "EUR").is_negative()
