"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from vending.domain.exceptions import NegativeResultError, ValidationError
from vending.domain.model.value_objects import Money


class TestMoney:

    def test_creation_from_cents(self):
        m = Money(1050)
        assert m.cents == 1050
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        assert Money.of("25.99").cents == 2599

    def test_of_factory_from_int(self):
        assert Money.of(10).cents == 1000

    def test_of_factory_from_float_is_exact(self):
        assert Money.of(0.1) + Money.of(0.2) == Money.of("0.30")

    def test_of_factory_from_decimal(self):
        assert Money.of(Decimal("7.5")) == Money(750)

    def test_of_returns_money_unchanged(self):
        m = Money.of("1.00")
        assert Money.of(m) is m

    def test_fractional_cents_rejected(self):
        with pytest.raises(ValidationError, match="fractional cents"):
            Money.of("0.125")

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("a lot")

    def test_infinity_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("Infinity")

    @pytest.mark.parametrize("value", ["1e30", 10**30, Decimal("1E+40")])
    def test_amount_too_large_to_quantize_rejected(self, value):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of(value)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money.of("-1")

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_addition_is_associative_for_coins(self):
        a, b, c = Money.of(0.25), Money.of(0.50), Money.of(2.00)
        assert (a + b) + c == a + (b + c) == c + b + a

    def test_subtraction(self):
        assert Money.of("10") - Money.of("3") == Money.of("7")

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(NegativeResultError, match="negative"):
            Money.of("5") - Money.of("10")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("1") * 1.5

    def test_is_zero(self):
        assert Money.zero().is_zero()
        assert not Money.of("0.25").is_zero()

    def test_str_formatting(self):
        assert str(Money.of("15")) == "15.00"
        assert str(Money.of("9.5")) == "9.50"
        assert str(Money.zero()) == "0.00"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") <= Money.of("10")

    def test_usable_as_dict_key(self):
        counts = {Money.of("0.50"): 1}
        assert counts[Money.of(0.5)] == 1
