"""
comparison.py — Comparatori e predicati

Ordinamento e uguaglianza normalizzano prima entrambi gli operandi a una
scale comune: 1.00 USD (100, 2) è uguale a 1.000 USD (1000, 3). Confrontare
valute diverse solleva CurrencyMismatchError; nessuna conversione implicita.

I predicati di segno guardano solo l'amount: zero è zero a qualsiasi scale.
"""

from __future__ import annotations

from typing import Sequence

from .core import Money
from .errors import CurrencyMismatchError
from .scale import normalize_scale


def assert_same_currency(a: Money, b: Money, operation: str = "comparison") -> None:
    if a.currency != b.currency:
        raise CurrencyMismatchError(a.currency.code, b.currency.code, operation)


def compare(a: Money, b: Money) -> int:
    """Restituisce -1, 0 o 1 se a è minore, uguale o maggiore di b."""
    assert_same_currency(a, b, "compare")
    na, nb = normalize_scale([a, b])
    return a.calculator.compare(na.amount, nb.amount)


def equal(a: Money, b: Money) -> bool:
    return compare(a, b) == 0


def greater_than(a: Money, b: Money) -> bool:
    return compare(a, b) > 0


def greater_than_or_equal(a: Money, b: Money) -> bool:
    return compare(a, b) >= 0


def less_than(a: Money, b: Money) -> bool:
    return compare(a, b) < 0


def less_than_or_equal(a: Money, b: Money) -> bool:
    return compare(a, b) <= 0


def _extreme(values: Sequence[Money], sign: int, name: str) -> Money:
    if not values:
        raise ValueError(f"{name}() richiede almeno un valore")
    first = values[0]
    for v in values[1:]:
        assert_same_currency(first, v, name)
    normalized = normalize_scale(values)
    best = normalized[0]
    for v in normalized[1:]:
        if first.calculator.compare(v.amount, best.amount) == sign:
            best = v
    return best


def minimum(values: Sequence[Money]) -> Money:
    """Valore minimo, espresso alla scale comune del gruppo."""
    return _extreme(values, -1, "minimum")


def maximum(values: Sequence[Money]) -> Money:
    """Valore massimo, espresso alla scale comune del gruppo."""
    return _extreme(values, 1, "maximum")


def is_zero(value: Money) -> bool:
    return value.is_zero()


def is_positive(value: Money) -> bool:
    return value.is_positive()


def is_negative(value: Money) -> bool:
    return value.is_negative()


def has_sub_units(value: Money) -> bool:
    """True se il valore non è un numero intero di major unit."""
    calc = value.calculator
    _, remainder = calc.divide_with_remainder(
        value.amount, calc.power(value.currency.base, value.scale)
    )
    return calc.compare(remainder, calc.zero()) != 0


def have_same_currency(values: Sequence[Money]) -> bool:
    return all(v.currency == values[0].currency for v in values[1:])


def have_same_amount(values: Sequence[Money]) -> bool:
    """
    True se tutti i valori rappresentano lo stesso numero, ignorando la valuta.

    Le scale vengono prima normalizzate: (100, 2) e (1000, 3) coincidono.
    """
    if not values:
        return True
    normalized = normalize_scale(values)
    calc = values[0].calculator
    return all(calc.compare(v.amount, normalized[0].amount) == 0 for v in normalized[1:])
