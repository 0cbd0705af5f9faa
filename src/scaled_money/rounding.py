"""
rounding.py — Strategie di arrotondamento per la divisione intera

La divisione è l'unico punto in cui il motore può dover perdere informazione.
Il quoziente è calcolato con la divisione troncata del calculator, poi il
resto decide se spostarsi di un'unità lontano da zero. Nessun float: i casi
a metà si riconoscono confrontando 2 * |remainder| con |divisor|.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from .calculator import Calculator

T = TypeVar("T")


class RoundingMode(Enum):
    """
    Strategie di arrotondamento.

    La scelta ha impatto reale:
    - HALF_EVEN: banker's rounding, nessun bias statistico (default)
    - HALF_UP: metà verso +infinito (arrotondamento commerciale per i positivi)
    - HALF_DOWN: metà verso zero
    - HALF_ODD: metà verso il vicino dispari
    - HALF_AWAY_FROM_ZERO: metà lontano da zero
    - DOWN: sempre verso zero (troncamento)
    - UP: sempre lontano da zero
    - FLOOR / CEILING: verso -infinito / +infinito

    In contesti finanziari, spesso la normativa impone una specifica strategia.
    """
    HALF_EVEN = "half_even"
    HALF_UP = "half_up"
    HALF_DOWN = "half_down"
    HALF_ODD = "half_odd"
    HALF_AWAY_FROM_ZERO = "half_away_from_zero"
    DOWN = "down"
    UP = "up"
    FLOOR = "floor"
    CEILING = "ceiling"


def _is_odd(calculator: Calculator[T], value: T) -> bool:
    two = calculator.add(calculator.one(), calculator.one())
    _, remainder = calculator.divide_with_remainder(value, two)
    return calculator.compare(remainder, calculator.zero()) != 0


def _absolute(calculator: Calculator[T], value: T) -> T:
    if calculator.compare(value, calculator.zero()) < 0:
        return calculator.subtract(calculator.zero(), value)
    return value


def divide_integers(
    calculator: Calculator[T],
    numerator: T,
    denominator: T,
    mode: RoundingMode,
) -> T:
    """
    Divide due interi e arrotonda il quoziente con `mode`.

    Args:
        calculator: provider della rappresentazione intera
        numerator, denominator: interi in quella rappresentazione
        mode: strategia applicata a un resto non nullo

    Returns:
        Il quoziente arrotondato.

    Raises:
        ZeroDivisionError: se denominator è zero
        UnsafeOperationError: se il calculator è limitato e va in overflow
    """
    zero = calculator.zero()
    quotient, remainder = calculator.divide_with_remainder(numerator, denominator)
    if calculator.compare(remainder, zero) == 0:
        return quotient

    positive = (calculator.compare(numerator, zero) > 0) == (calculator.compare(denominator, zero) > 0)
    one = calculator.one()

    def away_from_zero() -> T:
        if positive:
            return calculator.add(quotient, one)
        return calculator.subtract(quotient, one)

    if mode is RoundingMode.DOWN:
        return quotient
    if mode is RoundingMode.UP:
        return away_from_zero()
    if mode is RoundingMode.FLOOR:
        return quotient if positive else away_from_zero()
    if mode is RoundingMode.CEILING:
        return away_from_zero() if positive else quotient

    twice_remainder = calculator.multiply(_absolute(calculator, remainder), calculator.add(one, one))
    half = calculator.compare(twice_remainder, _absolute(calculator, denominator))
    if half > 0:
        return away_from_zero()
    if half < 0:
        return quotient

    # exact tie
    if mode is RoundingMode.HALF_AWAY_FROM_ZERO:
        return away_from_zero()
    if mode is RoundingMode.HALF_DOWN:
        return quotient
    if mode is RoundingMode.HALF_UP:
        return away_from_zero() if positive else quotient
    if mode is RoundingMode.HALF_EVEN:
        return away_from_zero() if _is_odd(calculator, quotient) else quotient
    if mode is RoundingMode.HALF_ODD:
        return quotient if _is_odd(calculator, quotient) else away_from_zero()
    raise ValueError(f"RoundingMode sconosciuto: {mode}")
