"""
calculator.py — Integer Operations Provider

================================================================================
DESIGN
================================================================================

Il motore non usa mai un tipo intero concreto. Tutto ciò che gli serve passa
da un Calculator:

    zero, one, add, subtract, multiply, divide_with_remainder,
    compare, power, coerce

Il package include tre rappresentazioni:

- IntCalculator         int Python, precisione arbitraria, mai overflow.
- BoundedIntCalculator  int Python vincolato a un range fisso (int64,
                        safe integer IEEE-754, ...). Uscire dal range
                        solleva UnsafeOperationError invece del wrap.
- DecimalCalculator     decimal.Decimal intero a precisione fissa.
                        Qualsiasi arrotondamento, overflow o perdita di
                        precisione solleva UnsafeOperationError.

divide_with_remainder tronca verso zero e dà al resto il segno del dividendo,
per ogni calculator. Decimal lo fa nativamente; l'int Python arrotonda verso
-infinito, quindi IntCalculator corregge.

================================================================================
"""

from __future__ import annotations

import decimal
import logging
from decimal import Decimal
from typing import Any, Protocol, TypeVar

from .errors import UnsafeOperationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Calculator(Protocol[T]):
    """Insieme di operazioni su cui è scritto il motore."""

    name: str

    def zero(self) -> T: ...

    def one(self) -> T: ...

    def coerce(self, value: Any) -> T: ...

    def add(self, a: T, b: T) -> T: ...

    def subtract(self, a: T, b: T) -> T: ...

    def multiply(self, a: T, b: T) -> T: ...

    def divide_with_remainder(self, a: T, b: T) -> tuple[T, T]: ...

    def compare(self, a: T, b: T) -> int: ...

    def power(self, base: int, exponent: int) -> T: ...


def _truncated_divmod(a: int, b: int) -> tuple[int, int]:
    """divmod() con il quoziente troncato verso zero."""
    if b == 0:
        raise ZeroDivisionError("divisione intera per zero")
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


def _coerce_int(value: Any) -> int:
    # bool is an int subclass, but True/False are never amounts
    if isinstance(value, bool):
        raise TypeError("bool non è un amount valido")
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal):
        if not value.is_finite() or value != value.to_integral_value():
            raise TypeError(f"un amount Decimal deve essere intero, ricevuto: {value}")
        return int(value)
    raise TypeError(
        f"gli amount devono essere interi, non {type(value).__name__}. "
        f"Usare uno ScaledAmount per valori frazionari."
    )


# ==============================================================================
# ARBITRARY PRECISION
# ==============================================================================

class IntCalculator:
    """int Python. Precisione arbitraria: nessuna operazione è mai unsafe."""

    name = "int"

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def coerce(self, value: Any) -> int:
        return _coerce_int(value)

    def add(self, a: int, b: int) -> int:
        return a + b

    def subtract(self, a: int, b: int) -> int:
        return a - b

    def multiply(self, a: int, b: int) -> int:
        return a * b

    def divide_with_remainder(self, a: int, b: int) -> tuple[int, int]:
        return _truncated_divmod(a, b)

    def compare(self, a: int, b: int) -> int:
        return (a > b) - (a < b)

    def power(self, base: int, exponent: int) -> int:
        if exponent < 0:
            raise ValueError(f"exponent deve essere >= 0, ricevuto: {exponent}")
        return base ** exponent

    def __repr__(self) -> str:
        return "IntCalculator()"


# ==============================================================================
# FIXED WIDTH
# ==============================================================================

class BoundedIntCalculator(IntCalculator):
    """
    int Python ristretto a [minimum, maximum].

    Replica un intero macchina a larghezza fissa, ma rifiuta il wrap: ogni
    operando o risultato fuori range solleva UnsafeOperationError.
    """

    def __init__(self, minimum: int, maximum: int, name: str = "bounded"):
        if minimum > 0 or maximum < 0:
            raise ValueError("il range deve contenere lo zero")
        self.minimum = minimum
        self.maximum = maximum
        self.name = name

    def _check(self, value: int, operation: str) -> int:
        if value < self.minimum or value > self.maximum:
            logger.warning(
                "%s: %s result %d outside [%d, %d]",
                self.name, operation, value, self.minimum, self.maximum,
            )
            raise UnsafeOperationError(
                f"{operation}: risultato {value} fuori dal range {self.name} "
                f"[{self.minimum}, {self.maximum}]"
            )
        return value

    def coerce(self, value: Any) -> int:
        return self._check(_coerce_int(value), "coerce")

    def add(self, a: int, b: int) -> int:
        return self._check(a + b, "add")

    def subtract(self, a: int, b: int) -> int:
        return self._check(a - b, "subtract")

    def multiply(self, a: int, b: int) -> int:
        return self._check(a * b, "multiply")

    def divide_with_remainder(self, a: int, b: int) -> tuple[int, int]:
        quotient, remainder = _truncated_divmod(a, b)
        # minimum // -1 overflows in two's complement
        return self._check(quotient, "divide"), remainder

    def power(self, base: int, exponent: int) -> int:
        return self._check(super().power(base, exponent), "power")

    def __repr__(self) -> str:
        return f"BoundedIntCalculator({self.minimum}, {self.maximum}, name={self.name!r})"


# ==============================================================================
# DECIMAL
# ==============================================================================

class DecimalCalculator:
    """
    Valori decimal.Decimal interi calcolati in un contesto privato.

    Inexact, Rounded, Overflow e InvalidOperation sono tutti intercettati: un
    risultato che non sta in `precision` cifre solleva UnsafeOperationError
    invece di essere arrotondato.
    """

    def __init__(self, precision: int = 38):
        if precision < 1:
            raise ValueError(f"precision deve essere >= 1, ricevuto: {precision}")
        self.precision = precision
        self.name = f"decimal{precision}"
        self._context = decimal.Context(
            prec=precision,
            rounding=decimal.ROUND_HALF_EVEN,
            traps=[
                decimal.Inexact,
                decimal.Rounded,
                decimal.Overflow,
                decimal.InvalidOperation,
                decimal.DivisionByZero,
            ],
        )

    def _run(self, operation: str, func, *args):
        try:
            with decimal.localcontext(self._context):
                return func(*args)
        except (decimal.Inexact, decimal.Rounded, decimal.Overflow, decimal.InvalidOperation) as exc:
            logger.warning("%s: %s would lose precision (%s)", self.name, operation, type(exc).__name__)
            raise UnsafeOperationError(
                f"{operation} non rappresentabile esattamente con {self.precision} cifre"
            ) from exc

    def zero(self) -> Decimal:
        return Decimal(0)

    def one(self) -> Decimal:
        return Decimal(1)

    def coerce(self, value: Any) -> Decimal:
        if isinstance(value, bool):
            raise TypeError("bool non è un amount valido")
        if isinstance(value, int):
            value = Decimal(value)
        if not isinstance(value, Decimal):
            raise TypeError(
                f"gli amount devono essere int o Decimal interi, non {type(value).__name__}"
            )
        if not value.is_finite() or value != value.to_integral_value():
            raise TypeError(f"un amount Decimal deve essere intero, ricevuto: {value}")
        # quantize to exponent 0; values wider than the precision fail here
        return self._run("coerce", lambda v: v.quantize(Decimal(1)), value)

    def add(self, a: Decimal, b: Decimal) -> Decimal:
        return self._run("add", lambda x, y: x + y, a, b)

    def subtract(self, a: Decimal, b: Decimal) -> Decimal:
        return self._run("subtract", lambda x, y: x - y, a, b)

    def multiply(self, a: Decimal, b: Decimal) -> Decimal:
        return self._run("multiply", lambda x, y: x * y, a, b)

    def divide_with_remainder(self, a: Decimal, b: Decimal) -> tuple[Decimal, Decimal]:
        if b == 0:
            raise ZeroDivisionError("divisione decimale per zero")
        return self._run("divide", divmod, a, b)

    def compare(self, a: Decimal, b: Decimal) -> int:
        return (a > b) - (a < b)

    def power(self, base: int, exponent: int) -> Decimal:
        if exponent < 0:
            raise ValueError(f"exponent deve essere >= 0, ricevuto: {exponent}")
        return self._run("power", lambda b, e: Decimal(b) ** e, base, exponent)

    def __repr__(self) -> str:
        return f"DecimalCalculator(precision={self.precision})"


INT = IntCalculator()
INT64 = BoundedIntCalculator(-(2 ** 63), 2 ** 63 - 1, name="int64")
SAFE_INTEGER = BoundedIntCalculator(-(2 ** 53 - 1), 2 ** 53 - 1, name="safe_integer")
DECIMAL = DecimalCalculator()
