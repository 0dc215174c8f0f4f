"""
Tests for Money value type.
"""

from decimal import Decimal

import pytest

from pizzeria import ValidationError
from pizzeria.money import Currency, Money, to_decimal, total

from conftest import expect_error, expect_ok, usd


class TestCreate:
    def test_amount_is_kept_exactly(self):
        money = expect_ok(Money.create("16.99", Currency.USD))
        assert money.amount == Decimal("16.99")
        assert money.currency is Currency.USD

    def test_float_goes_through_str(self):
        money = expect_ok(Money.create(1.3, Currency.EUR))
        assert money.amount == Decimal("1.3")

    def test_currency_string_accepted(self):
        assert expect_ok(Money.create(5, "RUB")).currency is Currency.RUB

    def test_negative_amount_rejected(self):
        error = expect_error(Money.create(-1, Currency.USD), ValidationError)
        assert error.field == "amount"
        assert error.code == "VALIDATION_ERROR"

    @pytest.mark.parametrize("value", ["NaN", "Infinity", "abc", float("inf")])
    def test_non_finite_or_garbage_rejected(self, value):
        expect_error(Money.create(value, Currency.USD), ValidationError)

    def test_unknown_currency_rejected(self):
        error = expect_error(Money.create(1, "GBP"), ValidationError)
        assert error.field == "currency"

    def test_from_cents(self):
        assert expect_ok(Money.from_cents(2430, Currency.USD)).amount == Decimal("24.30")
        expect_error(Money.from_cents(-1, Currency.USD), ValidationError)

    def test_from_cents_unknown_currency_rejected(self):
        assert expect_ok(Money.from_cents(100, "EUR")).currency is Currency.EUR
        error = expect_error(Money.from_cents(100, "GBP"), ValidationError)
        assert error.field == "currency"

    def test_direct_negative_construction_raises(self):
        with pytest.raises(ValueError):
            Money(Decimal("-0.01"), Currency.USD)

    def test_zero(self):
        zero = Money.zero(Currency.EUR)
        assert zero.is_zero
        assert zero.currency is Currency.EUR


class TestArithmetic:
    def test_add_then_subtract_restores_value(self):
        a, b = usd("12.34"), usd("0.66")
        restored = expect_ok(a.add(b).then(lambda s: s.subtract(b)))
        assert restored.equals(a)

    def test_cross_currency_add_fails(self):
        eur = expect_ok(Money.create(1, Currency.EUR))
        error = expect_error(usd(1).add(eur), ValidationError)
        assert error.field == "currency"

    def test_subtract_below_zero_fails(self):
        error = expect_error(usd(1).subtract(usd(2)), ValidationError)
        assert "subtract" in error.message

    def test_multiply_by_zero_keeps_currency(self):
        product = expect_ok(usd("9.99").multiply(0))
        assert product.is_zero
        assert product.currency is Currency.USD

    def test_multiply_negative_factor_fails(self):
        error = expect_error(usd(1).multiply(-2), ValidationError)
        assert error.field == "factor"

    def test_operations_do_not_mutate(self):
        price = usd("10")
        price.multiply(3)
        price.add(usd(1))
        assert price.amount == Decimal("10")


class TestComparison:
    def test_equals_is_by_value(self):
        assert usd("1.50").equals(usd(1.5))
        assert not usd("1.50").equals(expect_ok(Money.create("1.50", Currency.EUR)))
        assert not usd(1).equals("1 USD")

    def test_greater_and_less(self):
        assert expect_ok(usd(2).is_greater_than(usd(1))) is True
        assert expect_ok(usd(2).is_less_than(usd(1))) is False

    def test_comparison_across_currencies_fails(self):
        rub = expect_ok(Money.create(1, Currency.RUB))
        expect_error(usd(1).is_greater_than(rub), ValidationError)
        expect_error(usd(1).is_less_than(rub), ValidationError)


class TestCentsAndFormatting:
    @pytest.mark.parametrize(
        ("amount", "cents"),
        [("24.2957", 2430), ("0.005", 1), ("0.004", 0), ("22.087", 2209), ("10", 1000)],
    )
    def test_to_cents_rounds_half_up(self, amount, cents):
        assert usd(amount).to_cents() == cents

    def test_str(self):
        assert str(usd("22.087")) == "$22.09"
        assert str(usd("1234.5")) == "$1,234.50"
        assert str(expect_ok(Money.create(3, Currency.EUR))) == "€3.00"


class TestHelpers:
    def test_to_decimal(self):
        assert expect_ok(to_decimal(0.1)) == Decimal("0.1")
        expect_error(to_decimal("nope"), ValidationError)

    def test_total_sums_in_currency(self):
        assert expect_ok(total([usd(1), usd("2.50")], Currency.USD)).amount == Decimal("3.50")
        assert expect_ok(total([], Currency.USD)).is_zero

    def test_total_rejects_mixed_currencies(self):
        eur = expect_ok(Money.create(1, Currency.EUR))
        expect_error(total([usd(1), eur], Currency.USD), ValidationError)
