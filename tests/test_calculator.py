"""
test_calculator.py — Test per i calculator interi e il kernel di arrotondamento
"""

from decimal import Decimal

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from scaled_money import (
    DECIMAL,
    INT,
    INT64,
    SAFE_INTEGER,
    USD,
    BoundedIntCalculator,
    DecimalCalculator,
    RoundingMode,
    ScaledAmount,
    UnsafeOperationError,
    add,
    create,
    multiply,
)
from scaled_money.rounding import divide_integers


class TestIntCalculator:

    @pytest.mark.parametrize("a, b, expected", [
        (7, 2, (3, 1)),
        (-7, 2, (-3, -1)),
        (7, -2, (-3, 1)),
        (-7, -2, (3, -1)),
        (6, 3, (2, 0)),
    ])
    def test_divide_truncates_toward_zero(self, a, b, expected):
        assert INT.divide_with_remainder(a, b) == expected

    def test_divide_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            INT.divide_with_remainder(1, 0)

    def test_compare(self):
        assert INT.compare(1, 2) == -1
        assert INT.compare(2, 2) == 0
        assert INT.compare(3, 2) == 1

    def test_power(self):
        assert INT.power(10, 0) == 1
        assert INT.power(5, 3) == 125

    def test_coerce_rejects_float(self):
        with pytest.raises(TypeError):
            INT.coerce(1.0)

    def test_coerce_rejects_bool(self):
        with pytest.raises(TypeError):
            INT.coerce(False)

    def test_coerce_accepts_integral_decimal(self):
        assert INT.coerce(Decimal("42")) == 42
        assert type(INT.coerce(Decimal("42"))) is int

    def test_no_overflow(self):
        big = create(2 ** 200, USD)
        assert (big * 2 ** 200).amount == 2 ** 400


class TestBoundedIntCalculator:

    def test_within_range(self):
        assert INT64.add(2 ** 62, 2 ** 62 - 1) == 2 ** 63 - 1

    def test_add_overflow(self):
        with pytest.raises(UnsafeOperationError):
            INT64.add(2 ** 63 - 1, 1)

    def test_multiply_overflow(self):
        with pytest.raises(UnsafeOperationError):
            INT64.multiply(2 ** 32, 2 ** 32)

    def test_unsafe_is_arithmetic_error(self):
        with pytest.raises(ArithmeticError):
            INT64.subtract(-(2 ** 63), 1)

    def test_min_divided_by_minus_one(self):
        with pytest.raises(UnsafeOperationError):
            INT64.divide_with_remainder(-(2 ** 63), -1)

    def test_power_overflow(self):
        with pytest.raises(UnsafeOperationError):
            INT64.power(10, 19)

    def test_coerce_out_of_range(self):
        with pytest.raises(UnsafeOperationError):
            create(2 ** 53, USD, calculator=SAFE_INTEGER)

    def test_scale_raise_overflow(self):
        a = create(2 ** 52, USD, calculator=SAFE_INTEGER)
        b = create(1, USD, scale=4, calculator=SAFE_INTEGER)
        with pytest.raises(UnsafeOperationError):
            add(a, b)

    def test_multiply_overflow_through_money(self):
        price = create(2 ** 40, USD, calculator=INT64)
        with pytest.raises(UnsafeOperationError):
            multiply(price, ScaledAmount(2 ** 30, 2))

    def test_range_must_contain_zero(self):
        with pytest.raises(ValueError):
            BoundedIntCalculator(1, 10)


class TestDecimalCalculator:

    def test_divide_truncates_toward_zero(self):
        assert DECIMAL.divide_with_remainder(Decimal(-7), Decimal(2)) == (Decimal(-3), Decimal(-1))

    def test_divide_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            DECIMAL.divide_with_remainder(Decimal(1), Decimal(0))

    def test_coerce_normalizes_exponent(self):
        assert DECIMAL.coerce(Decimal("5.0")) == Decimal(5)
        assert DECIMAL.coerce(Decimal("5.0")).as_tuple().exponent == 0

    @pytest.mark.parametrize("value", [Decimal("5.5"), Decimal("NaN"), Decimal("Infinity"), 5.0])
    def test_coerce_rejects(self, value):
        with pytest.raises(TypeError):
            DECIMAL.coerce(value)

    def test_coerce_too_wide(self):
        with pytest.raises(UnsafeOperationError):
            DecimalCalculator(precision=5).coerce(123456)

    def test_multiply_loses_precision(self):
        calc = DecimalCalculator(precision=5)
        with pytest.raises(UnsafeOperationError):
            calc.multiply(Decimal(999), Decimal(999))

    def test_exact_within_precision(self):
        calc = DecimalCalculator(precision=5)
        assert calc.multiply(Decimal(99), Decimal(999)) == Decimal(98901)

    def test_power(self):
        assert DECIMAL.power(10, 5) == Decimal(100000)

    def test_invalid_precision(self):
        with pytest.raises(ValueError):
            DecimalCalculator(precision=0)


class TestRoundingKernel:

    @pytest.mark.parametrize("mode, expected", [
        (RoundingMode.HALF_EVEN, [2, 2, 3, -2, -2, -3]),
        (RoundingMode.HALF_UP, [2, 3, 3, -2, -2, -3]),
        (RoundingMode.HALF_DOWN, [2, 2, 3, -2, -2, -3]),
        (RoundingMode.HALF_ODD, [2, 3, 3, -2, -3, -3]),
        (RoundingMode.HALF_AWAY_FROM_ZERO, [2, 3, 3, -2, -3, -3]),
        (RoundingMode.UP, [3, 3, 3, -3, -3, -3]),
        (RoundingMode.DOWN, [2, 2, 2, -2, -2, -2]),
        (RoundingMode.FLOOR, [2, 2, 2, -3, -3, -3]),
        (RoundingMode.CEILING, [3, 3, 3, -2, -2, -2]),
    ])
    def test_modes(self, mode, expected):
        # 2.4, 2.5, 2.6, -2.4, -2.5, -2.6
        numerators = [24, 25, 26, -24, -25, -26]
        assert [divide_integers(INT, n, 10, mode) for n in numerators] == expected

    def test_negative_denominator(self):
        assert divide_integers(INT, 25, -10, RoundingMode.HALF_UP) == -2
        assert divide_integers(INT, 25, -10, RoundingMode.FLOOR) == -3

    def test_exact(self):
        for mode in RoundingMode:
            assert divide_integers(INT, 30, 10, mode) == 3

    @given(
        n=st.integers(min_value=-10**9, max_value=10**9),
        d=st.integers(min_value=1, max_value=10**6),
        mode=st.sampled_from(list(RoundingMode)),
    )
    @settings(max_examples=500)
    def test_decimal_matches_int(self, n, d, mode):
        assert divide_integers(DECIMAL, Decimal(n), Decimal(d), mode) == divide_integers(INT, n, d, mode)

    @given(
        n=st.integers(min_value=-10**9, max_value=10**9),
        d=st.integers(min_value=1, max_value=10**6),
    )
    @settings(max_examples=500)
    def test_floor_and_ceiling_match_python(self, n, d):
        assert divide_integers(INT, n, d, RoundingMode.FLOOR) == n // d
        assert divide_integers(INT, n, d, RoundingMode.CEILING) == -(-n // d)
