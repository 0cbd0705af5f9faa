"""
scale.py — Normalizzazione, trasformazione e trim della scale

Alzare la scale moltiplica l'amount per base ** delta: sempre esatto.
Abbassarla divide: esatto solo quando il resto è zero.

- normalize_scale: porta un gruppo di valori alla scale massima comune.
  Non abbassa mai.
- trim_scale: abbassa il più possibile senza perdere nulla, mai sotto
  l'exponent della valuta.
- transform_scale: passa a una scale esplicita, arrotondando se abbassa.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .core import Money, _check_scale
from .errors import InvalidScaleError
from .rounding import RoundingMode, divide_integers

logger = logging.getLogger(__name__)


def raise_scale(value: Money, new_scale: int) -> Money:
    """
    Restituisce `value` espresso a `new_scale` (>= value.scale).

    Stesso oggetto se la scale coincide già.
    """
    _check_scale(new_scale)
    if new_scale == value.scale:
        return value
    if new_scale < value.scale:
        raise InvalidScaleError(
            f"impossibile alzare la scale da {value.scale} a {new_scale}; "
            f"usare trim_scale() o transform_scale() per abbassarla"
        )
    calc = value.calculator
    factor = calc.power(value.currency.base, new_scale - value.scale)
    return value._with(calc.multiply(value.amount, factor), new_scale)


def normalize_scale(values: Sequence[Money]) -> list[Money]:
    """
    Porta ogni valore alla scale più alta del gruppo.

    I valori già a quella scale sono restituiti invariati.
    """
    if not values:
        return []
    highest = max(v.scale for v in values)
    return [raise_scale(v, highest) for v in values]


def transform_scale(
    value: Money,
    new_scale: int,
    rounding: RoundingMode = RoundingMode.HALF_EVEN,
) -> Money:
    """
    Esprime `value` a `new_scale`.

    Alzare è esatto. Abbassare divide per base ** delta e arrotonda il
    quoziente con `rounding`.
    """
    _check_scale(new_scale)
    if new_scale >= value.scale:
        return raise_scale(value, new_scale)

    calc = value.calculator
    divisor = calc.power(value.currency.base, value.scale - new_scale)
    amount = divide_integers(calc, value.amount, divisor, rounding)
    result = value._with(amount, new_scale)
    if logger.isEnabledFor(logging.DEBUG):
        _, remainder = calc.divide_with_remainder(value.amount, divisor)
        if calc.compare(remainder, calc.zero()) != 0:
            logger.debug("transform_scale rounded %r to %r (%s)", value, result, rounding.value)
    return result


def trim_scale(value: Money) -> Money:
    """
    Abbassa la scale il più possibile senza cambiare il valore.

    Si ferma a currency.exponent. Idempotente.

        (3000000, USD, 6) -> (300, USD, 2)
        (35, USD, 3)      -> (35, USD, 3)
    """
    calc = value.calculator
    zero = calc.zero()
    base = calc.power(value.currency.base, 1)
    amount, scale = value.amount, value.scale

    while scale > value.currency.exponent:
        quotient, remainder = calc.divide_with_remainder(amount, base)
        if calc.compare(remainder, zero) != 0:
            break
        amount, scale = quotient, scale - 1

    if scale == value.scale:
        return value
    return value._with(amount, scale)
