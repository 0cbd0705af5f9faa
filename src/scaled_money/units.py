"""
units.py — Scomposizione in major/minor unit
"""

from __future__ import annotations

from typing import Any

from .core import Money


def to_units(value: Money) -> tuple[Any, Any]:
    """
    Scompone un valore negli interi (major, fraction).

    La fraction è espressa alla scale del valore e, come la parte major, è
    troncata verso zero: entrambe hanno il segno del valore.

        (1050, USD, 2)    -> (10, 50)
        (-1050, USD, 2)   -> (-10, -50)
        (104545, USD, 4)  -> (10, 4545)
        (7, MGA, 1)       -> (1, 2)      # base 5
    """
    calc = value.calculator
    return calc.divide_with_remainder(value.amount, calc.power(value.currency.base, value.scale))
