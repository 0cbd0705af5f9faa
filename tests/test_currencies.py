"""
test_currencies.py — Test per il descrittore di valuta e la tabella ISO 4217
"""

import pytest

from scaled_money import (
    CURRENCIES,
    USD,
    Currency,
    create,
    define_currency,
    from_snapshot,
    get_currency,
    to_snapshot,
)


class TestCurrencyTable:

    def test_lookup(self):
        assert get_currency("usd") is USD
        assert CURRENCIES["HUF"] == Currency("HUF", 10, 2)
        assert CURRENCIES["BSD"] == Currency("BSD", 10, 2)

    def test_exponents(self):
        assert CURRENCIES["JPY"].exponent == 0
        assert CURRENCIES["KWD"].exponent == 3
        assert CURRENCIES["CLF"].exponent == 4

    def test_non_decimal(self):
        assert CURRENCIES["MGA"] == Currency("MGA", 5, 1)
        assert CURRENCIES["MRU"].multiplier == 5

    def test_unknown_code(self):
        with pytest.raises(KeyError):
            get_currency("XYZ")

    def test_read_only(self):
        with pytest.raises(TypeError):
            CURRENCIES["XYZ"] = Currency("XYZ")

    def test_every_entry_is_well_formed(self):
        for code, currency in CURRENCIES.items():
            assert currency.code == code
            assert define_currency(code, currency.base, currency.exponent) == currency


class TestDefineCurrency:

    def test_custom_currency(self):
        btc = define_currency("BTC", exponent=8)
        assert btc == Currency("BTC", 10, 8)
        assert create(1, btc).scale == 8

    @pytest.mark.parametrize("code, base, exponent", [
        ("BAD", 1, 2),
        ("BAD", 10, -1),
        ("BAD", 10.0, 2),
        ("BAD", True, 2),
        ("", 10, 2),
    ])
    def test_invalid_descriptor(self, code, base, exponent):
        with pytest.raises(ValueError):
            define_currency(code, base, exponent)


class TestCurrencyDescriptor:

    def test_descriptor_is_plain_data(self):
        # il motore usa i descrittori così come sono
        xts = Currency("XTS", 10, 2)
        assert xts.to_dict() == {"code": "XTS", "base": 10, "exponent": 2}
        assert str(xts) == "XTS"

    def test_snapshot_carries_descriptor(self):
        value = create(105, Currency("XTS", 10, 2))
        assert from_snapshot(to_snapshot(value)) == value

    def test_descriptor_frozen(self):
        with pytest.raises(AttributeError):
            USD.exponent = 3
