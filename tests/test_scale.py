"""
test_scale.py — Test per normalizzazione, trasformazione e trim della scale
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from scaled_money import (
    USD,
    InvalidScaleError,
    RoundingMode,
    create,
    normalize_scale,
    raise_scale,
    transform_scale,
    trim_scale,
)
from scaled_money.comparison import equal
from scaled_money.currencies import JPY, KWD, MGA


class TestNormalizeScale:

    def test_raises_lower_scale(self):
        low, high = create(400, USD), create(104545, USD, scale=4)
        a, b = normalize_scale([low, high])

        assert a == create(40000, USD, scale=4)
        assert b is high

    def test_same_scale_is_no_op(self):
        values = [create(1, USD), create(2, USD)]
        result = normalize_scale(values)
        assert all(r is v for r, v in zip(result, values))

    def test_empty(self):
        assert normalize_scale([]) == []

    def test_never_lowers(self):
        values = normalize_scale([create(3000000, USD, scale=6), create(1, USD)])
        assert [v.scale for v in values] == [6, 6]
        assert values[0].amount == 3000000
        assert values[1].amount == 10000

    def test_raise_scale_cannot_lower(self):
        with pytest.raises(InvalidScaleError):
            raise_scale(create(100, USD), 1)

    def test_raise_scale_non_decimal_base(self):
        assert raise_scale(create(3, MGA), 3) == create(75, MGA, scale=3)


class TestTransformScale:

    def test_raise_is_exact(self):
        assert transform_scale(create(500, USD), 4) == create(50000, USD, scale=4)

    def test_lower_exact(self):
        assert transform_scale(create(50000, USD, scale=4), 2) == create(500, USD)

    def test_lower_rounds_half_even_by_default(self):
        assert transform_scale(create(104550, USD, scale=4), 2).amount == 1046
        assert transform_scale(create(104650, USD, scale=4), 2).amount == 1046

    def test_lower_with_explicit_rounding(self):
        value = create(104550, USD, scale=4)
        assert value.transform_scale(2, RoundingMode.DOWN).amount == 1045
        assert value.transform_scale(2, RoundingMode.UP).amount == 1046

    def test_lower_below_exponent(self):
        # dollari interi
        assert transform_scale(create(1050, USD), 0, RoundingMode.HALF_UP) == create(11, USD, scale=0)

    def test_negative_scale_raises(self):
        with pytest.raises(InvalidScaleError):
            transform_scale(create(100, USD), -1)

    def test_explicit_rounding(self):
        assert transform_scale(create(-1051, USD), 1, RoundingMode.FLOOR).amount == -106

    def test_default_is_half_even(self):
        assert transform_scale(create(-1051, USD), 1).amount == -105
        assert transform_scale(create(-1055, USD), 1).amount == -106
        assert transform_scale(create(1045, USD), 1).amount == 104

    def test_result_independent_of_environment(self, monkeypatch):
        expected = transform_scale(create(1045, USD), 1)
        monkeypatch.setenv("SCALED_MONEY_ROUNDING", "up")
        assert transform_scale(create(1045, USD), 1) == expected


class TestTrimScale:

    def test_trims_to_exponent(self):
        assert trim_scale(create(3000000, USD, scale=6)) == create(300, USD)

    def test_not_divisible_is_unchanged(self):
        value = create(35, USD, scale=3)
        assert trim_scale(value) == create(35, USD, scale=3)

    def test_partial_trim(self):
        assert trim_scale(create(104500, USD, scale=5)) == create(1045, USD, scale=3)

    def test_never_below_exponent(self):
        assert trim_scale(create(100000, USD, scale=5)) == create(100, USD, scale=2)

    def test_never_raises_scale(self):
        value = create(5, USD, scale=0)
        assert trim_scale(value) == value

    def test_negative(self):
        assert trim_scale(create(-3000000, USD, scale=6)) == create(-300, USD)

    def test_zero(self):
        assert trim_scale(create(0, USD, scale=8)) == create(0, USD)

    def test_zero_exponent_currency(self):
        assert trim_scale(create(1500, JPY, scale=2)) == create(15, JPY, scale=0)

    def test_three_decimal_currency(self):
        assert trim_scale(create(1500000, KWD, scale=6)) == create(1500, KWD, scale=3)

    def test_non_decimal_base(self):
        assert trim_scale(create(25, MGA, scale=3)) == create(1, MGA, scale=1)

    def test_method(self):
        assert create(3000000, USD, scale=6).trim_scale() == create(300, USD)


# ==============================================================================
# PROPERTY-BASED TESTS (Hypothesis)
# ==============================================================================

@st.composite
def usd_strategy(draw):
    amount = draw(st.integers(min_value=-10**12, max_value=10**12))
    scale = draw(st.integers(min_value=USD.exponent, max_value=10))
    return create(amount, USD, scale)


class TestScaleProperties:

    @given(v=usd_strategy(), extra=st.integers(min_value=0, max_value=10))
    @settings(max_examples=500)
    def test_raise_then_trim_equals_trim(self, v, extra):
        assert trim_scale(raise_scale(v, v.scale + extra)) == trim_scale(v)

    @given(v=usd_strategy())
    @settings(max_examples=500)
    def test_trim_idempotent(self, v):
        once = trim_scale(v)
        assert trim_scale(once) == once

    @given(v=usd_strategy())
    @settings(max_examples=500)
    def test_trim_preserves_value(self, v):
        trimmed = trim_scale(v)
        assert equal(trimmed, v)
        assert USD.exponent <= trimmed.scale <= v.scale

    @given(v=usd_strategy(), extra=st.integers(min_value=0, max_value=6))
    @settings(max_examples=300)
    def test_transform_round_trip(self, v, extra):
        raised = transform_scale(v, v.scale + extra)
        assert transform_scale(raised, v.scale) == v
