"""
arithmetic.py — Motore aritmetico

add / subtract       normalizza le scale, poi combina gli importi. Esatto.
multiply             gli importi si moltiplicano, le scale si sommano. Esatto.
divide               divisione intera a una scala di destinazione esplicita;
                     il resto è risolto da un RoundingMode (default HALF_EVEN).
apply_percentage     multiply, poi divide per 100.
convert              moltiplica per un tasso fornito dal chiamante verso un'altra valuta.

Nessuna operazione qui usa un tipo intero concreto: ogni operazione sugli
importi passa dal calculator del valore.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .comparison import assert_same_currency
from .core import Factor, Money, _check_scale, as_scaled
from .currency import Currency
from .rounding import RoundingMode, divide_integers
from .scale import normalize_scale, raise_scale

logger = logging.getLogger(__name__)


# ==============================================================================
# ADDITION / SUBTRACTION
# ==============================================================================

def add(augend: Money, addend: Money) -> Money:
    """
    Somma di due valori della stessa valuta, alla più alta delle due scale.

        (400, USD, 2) + (104545, USD, 4) -> (144545, USD, 4)
    """
    assert_same_currency(augend, addend, "add")
    a, b = normalize_scale([augend, addend])
    return a._with(augend.calculator.add(a.amount, b.amount))


def subtract(minuend: Money, subtrahend: Money) -> Money:
    assert_same_currency(minuend, subtrahend, "subtract")
    a, b = normalize_scale([minuend, subtrahend])
    return a._with(minuend.calculator.subtract(a.amount, b.amount))


def negate(value: Money) -> Money:
    calc = value.calculator
    return value._with(calc.subtract(calc.zero(), value.amount))


def absolute(value: Money) -> Money:
    return negate(value) if value.is_negative() else value


# ==============================================================================
# MULTIPLICATION / DIVISION
# ==============================================================================

def multiply(value: Money, multiplier: Factor) -> Money:
    """
    Moltiplica per un int o uno ScaledAmount.

    Importo risultante = value.amount * multiplier.amount
    Scala risultante   = value.scale + multiplier.scale

        (1995, EUR, 2) * ScaledAmount(55, 3) -> (109725, EUR, 5)

    Raises:
        TypeError: se multiplier è un float (o un non intero)
    """
    calc = value.calculator
    amount, scale = as_scaled(multiplier, calc)
    return value._with(calc.multiply(value.amount, amount), value.scale + scale)


def divide(
    value: Money,
    divisor: Factor,
    scale: Optional[int] = None,
    rounding: RoundingMode = RoundingMode.HALF_EVEN,
) -> Money:
    """
    Divide per un int o uno ScaledAmount.

    La divisione intera può essere inesatta: il risultato è prodotto a una
    scala esplicita (di default value.scale) e il resto è arrotondato con
    `rounding`.

        divide((1000, USD, 2), 3)                              -> (333, USD, 2)
        divide((1000, USD, 2), 3, scale=4)                     -> (33333, USD, 4)
        divide((1000, USD, 2), 6, rounding=RoundingMode.UP)    -> (167, USD, 2)

    Raises:
        InvalidScaleError: se scale è negativa
        ZeroDivisionError: se divisor è zero
        TypeError: se divisor è un float
    """
    calc = value.calculator
    target = value.scale if scale is None else _check_scale(scale)

    divisor_amount, divisor_scale = as_scaled(divisor, calc)
    if calc.compare(divisor_amount, calc.zero()) == 0:
        raise ZeroDivisionError(f"impossibile dividere {value!r} per zero")

    # amount / b**s  /  (d / b**ds)  *  b**t  =  amount * b**(ds + t) / (d * b**s)
    numerator_exp = divisor_scale + target
    denominator_exp = value.scale
    common = min(numerator_exp, denominator_exp)
    base = value.currency.base
    numerator = calc.multiply(value.amount, calc.power(base, numerator_exp - common))
    denominator = calc.multiply(divisor_amount, calc.power(base, denominator_exp - common))

    amount = divide_integers(calc, numerator, denominator, rounding)
    result = value._with(amount, target)
    if logger.isEnabledFor(logging.DEBUG):
        _, remainder = calc.divide_with_remainder(numerator, denominator)
        if calc.compare(remainder, calc.zero()) != 0:
            logger.debug("divide %r by %r rounded to %r (%s)", value, divisor, result, rounding.value)
    return result


def apply_percentage(
    value: Money,
    percent: Factor,
    scale: Optional[int] = None,
    rounding: RoundingMode = RoundingMode.HALF_EVEN,
) -> Money:
    """
    Il `percent` % di value.

    Esempio: apply_percentage(amount, 15) per il 15 %, oppure
    apply_percentage(amount, ScaledAmount(225, 1)) per il 22.5 %.

    Il risultato è a value.scale salvo `scale` esplicita; passare una scala
    più alta per non perdere cifre.
    """
    target = value.scale if scale is None else scale
    return divide(multiply(value, percent), 100, scale=target, rounding=rounding)


# ==============================================================================
# CONVERSION
# ==============================================================================

def convert(value: Money, currency: Currency, rates: Mapping[str, Any]) -> Money:
    """
    Converte in `currency` con un tasso fornito dal chiamante.

    `rates` mappa codici valuta a un int o ScaledAmount; viene letta solo la
    voce della valuta di destinazione. Il risultato conserva ogni cifra: la
    sua scala è value.scale + rate.scale, portata almeno all'exponent della
    valuta di destinazione.

        convert((500, USD, 2), EUR, {"EUR": ScaledAmount(89, 2)}) -> (44500, EUR, 4)

    Raises:
        KeyError: se rates non ha una voce per currency.code
        ValueError: se le due valute hanno basi diverse
    """
    try:
        rate = rates[currency.code]
    except KeyError:
        raise KeyError(f"nessun tasso per {currency.code} in {sorted(rates)}") from None
    if value.currency.base != currency.base:
        raise ValueError(
            f"impossibile convertire {value.currency.code} (base {value.currency.base}) "
            f"in {currency.code} (base {currency.base})"
        )

    calc = value.calculator
    rate_amount, rate_scale = as_scaled(rate, calc)
    converted = Money(
        amount=calc.multiply(value.amount, rate_amount),
        currency=currency,
        scale=value.scale + rate_scale,
        calculator=calc,
    )
    if converted.scale < currency.exponent:
        converted = raise_scale(converted, currency.exponent)
    logger.debug("converted %r to %r", value, converted)
    return converted
