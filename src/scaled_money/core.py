"""
core.py — Domain Primitive Money e API di costruzione

================================================================================
DESIGN PRINCIPLES
================================================================================

1. RAPPRESENTAZIONE INTERNA
   Un amount intero, una scale e una valuta. Il valore è
   amount / currency.base ** scale. Mai floating point.

2. TYPE SAFETY
   Operazioni tra valute diverse sollevano CurrencyMismatchError
   (un TypeError). I float sono rifiutati ovunque con TypeError; i fattori
   frazionari viaggiano come ScaledAmount.

3. IMMUTABILITA
   Frozen dataclass. Ogni operazione restituisce nuova istanza.
   Nessun side effect, safe per concorrenza.

4. SCALE VARIABILE
   Ogni valore porta la sua scale. 1.00 USD può essere (100, 2) o (1000, 3);
   le operazioni normalizzano alla scale più alta, sempre senza perdite.

5. INTERI PLUGGABLE
   L'amount vive nella rappresentazione gestita dal calculator del valore
   (int, int limitato, Decimal). Il motore parla solo con il calculator.

6. ROUNDING ESPLICITO
   Nessun arrotondamento implicito. Dove serve, il default è HALF_EVEN e il
   chiamante può scegliere un'altra strategia per singola chiamata.

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Union

from .calculator import INT, Calculator
from .currency import Currency
from .errors import InvalidScaleError
from .rounding import RoundingMode


# ==============================================================================
# SCALED AMOUNT
# ==============================================================================

@dataclass(frozen=True, slots=True)
class ScaledAmount:
    """
    Un intero con una scale: amount / base ** scale.

    L'unico modo per passare un moltiplicatore, tasso, ratio o percentuale
    frazionario. La base è quella della valuta a cui viene applicato.

        ScaledAmount(55, 3)  ->  0.055 in una valuta decimale
    """
    amount: Any
    scale: int = 0

    def __post_init__(self):
        _check_scale(self.scale)


Factor = Union[int, ScaledAmount]


def _check_scale(scale: Any) -> int:
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise InvalidScaleError(f"scale deve essere un intero, ricevuto: {type(scale).__name__}")
    if scale < 0:
        raise InvalidScaleError(f"scale deve essere >= 0, ricevuto: {scale}")
    return scale


def as_scaled(value: Any, calculator: Calculator) -> tuple[Any, int]:
    """Scompone un int o uno ScaledAmount in (amount, scale) per `calculator`."""
    if isinstance(value, ScaledAmount):
        return calculator.coerce(value.amount), value.scale
    return calculator.coerce(value), 0


# ==============================================================================
# MONEY
# ==============================================================================

@dataclass(frozen=True, slots=True)
class Money:
    """
    Domain Primitive per importi monetari.

    INVARIANTI:
    1. amount è sempre un intero esatto nella rappresentazione del calculator
    2. scale è sempre un int >= 0
    3. operazioni tra valute diverse sollevano CurrencyMismatchError
    4. == e hash sono strutturali: (400, USD, 2) != (4000, USD, 3).
       Per l'uguaglianza di valore tra scale usare comparison.equal().

    USAGE:
        price = create(1995, EUR)               # 19.95 EUR
        tax = price * ScaledAmount(55, 3)       # 5.5 %
        total = price + tax                     # 21.04725 EUR, scale 5

    SERIALIZATION:
        Usare to_snapshot() e from_snapshot(). L'amount resta intero.
        MAI serializzare come float.
    """
    amount: Any
    currency: Currency
    scale: int
    calculator: Calculator = field(default=INT, compare=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.currency, Currency):
            raise TypeError(f"currency deve essere una Currency, ricevuto: {type(self.currency).__name__}")
        _check_scale(self.scale)
        object.__setattr__(self, "amount", self.calculator.coerce(self.amount))

    # -------------------------------------------------------------------------
    # Costruttori
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, amount: Any, currency: Currency, scale: Optional[int] = None,
           calculator: Calculator = INT) -> Money:
        """Equivalente a create()."""
        return create(amount, currency, scale, calculator)

    @classmethod
    def zero(cls, currency: Currency, scale: Optional[int] = None,
             calculator: Calculator = INT) -> Money:
        """Zero per una data valuta. Utile come valore iniziale per sum()."""
        return create(calculator.zero(), currency, scale, calculator)

    @classmethod
    def from_snapshot(cls, data: dict, calculator: Calculator = INT) -> Money:
        return from_snapshot(data, calculator)

    def _with(self, amount: Any, scale: Optional[int] = None) -> Money:
        return Money(
            amount=amount,
            currency=self.currency,
            scale=self.scale if scale is None else scale,
            calculator=self.calculator,
        )

    # -------------------------------------------------------------------------
    # Aritmetica (type-safe)
    # -------------------------------------------------------------------------

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            raise TypeError(
                f"Operazione non consentita: Money + {type(other).__name__}. "
                f"Usare create() per costruire prima un Money."
            )
        from .arithmetic import add
        return add(self, other)

    def __radd__(self, other: Any) -> Money:
        # sum() starts from int 0
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            raise TypeError(f"Operazione non consentita: Money - {type(other).__name__}.")
        from .arithmetic import subtract
        return subtract(self, other)

    def __neg__(self) -> Money:
        from .arithmetic import negate
        return negate(self)

    def __abs__(self) -> Money:
        from .arithmetic import absolute
        return absolute(self)

    def __mul__(self, factor: Factor) -> Money:
        """
        Moltiplica per un int (quantità) o uno ScaledAmount (frazione).

        I float sollevano TypeError.
        """
        from .arithmetic import multiply
        return multiply(self, factor)

    def __rmul__(self, factor: Factor) -> Money:
        return self.__mul__(factor)

    def divide(self, divisor: Factor, scale: Optional[int] = None,
               rounding: RoundingMode = RoundingMode.HALF_EVEN) -> Money:
        from .arithmetic import divide
        return divide(self, divisor, scale=scale, rounding=rounding)

    def apply_percentage(self, percent: Factor, scale: Optional[int] = None,
                         rounding: RoundingMode = RoundingMode.HALF_EVEN) -> Money:
        from .arithmetic import apply_percentage
        return apply_percentage(self, percent, scale=scale, rounding=rounding)

    def convert(self, currency: Currency, rates: dict) -> Money:
        from .arithmetic import convert
        return convert(self, currency, rates)

    # -------------------------------------------------------------------------
    # Scala
    # -------------------------------------------------------------------------

    def trim_scale(self) -> Money:
        from .scale import trim_scale
        return trim_scale(self)

    def transform_scale(self, new_scale: int,
                        rounding: RoundingMode = RoundingMode.HALF_EVEN) -> Money:
        from .scale import transform_scale
        return transform_scale(self, new_scale, rounding)

    # -------------------------------------------------------------------------
    # Ripartizione
    # -------------------------------------------------------------------------

    def allocate(self, ratios: list, scale: int = 0) -> list[Money]:
        from .allocation import allocate
        return allocate(self, ratios, scale=scale)

    def distribute(self, n: int) -> list[Money]:
        from .allocation import distribute
        return distribute(self, n)

    # -------------------------------------------------------------------------
    # Confronto
    # -------------------------------------------------------------------------

    def __lt__(self, other: Money) -> bool:
        from .comparison import less_than
        return less_than(self, _require_money(other))

    def __le__(self, other: Money) -> bool:
        from .comparison import less_than_or_equal
        return less_than_or_equal(self, _require_money(other))

    def __gt__(self, other: Money) -> bool:
        from .comparison import greater_than
        return greater_than(self, _require_money(other))

    def __ge__(self, other: Money) -> bool:
        from .comparison import greater_than_or_equal
        return greater_than_or_equal(self, _require_money(other))

    def is_zero(self) -> bool:
        return self.calculator.compare(self.amount, self.calculator.zero()) == 0

    def is_positive(self) -> bool:
        return self.calculator.compare(self.amount, self.calculator.zero()) > 0

    def is_negative(self) -> bool:
        return self.calculator.compare(self.amount, self.calculator.zero()) < 0

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def to_snapshot(self) -> dict:
        return to_snapshot(self)

    def __repr__(self) -> str:
        return f"Money(amount={self.amount!r}, currency={self.currency.code!r}, scale={self.scale})"


def _require_money(other: Any) -> Money:
    if not isinstance(other, Money):
        raise TypeError(f"Impossibile confrontare Money con {type(other).__name__}")
    return other


# ==============================================================================
# CONSTRUCTION API
# ==============================================================================

def create(
    amount: Any,
    currency: Currency,
    scale: Optional[int] = None,
    calculator: Calculator = INT,
) -> Money:
    """
    Costruisce un Money da un amount intero.

    Args:
        amount: numeratore intero (int, o Decimal intero per DECIMAL)
        currency: descrittore di valuta
        scale: precisione di `amount`; default currency.exponent
        calculator: rappresentazione intera; default int Python

    Raises:
        InvalidScaleError: se scale è negativa o non è un int
        TypeError: se amount è un float o non è intero
    """
    if scale is None:
        scale = currency.exponent
    return Money(amount=amount, currency=currency, scale=_check_scale(scale), calculator=calculator)


def money_factory(calculator: Calculator) -> Callable[..., Money]:
    """
    Restituisce un create() legato a un calculator.

    Un'applicazione sceglie la rappresentazione intera una volta sola:

        money = money_factory(INT64)
        price = money(1995, EUR)
    """
    def create_money(amount: Any, currency: Currency, scale: Optional[int] = None) -> Money:
        return create(amount, currency, scale, calculator)

    create_money.calculator = calculator
    return create_money


# ==============================================================================
# SNAPSHOT
# ==============================================================================

def to_snapshot(value: Money) -> dict:
    """
    Proiezione in dati semplici di un valore.

    Formato: {"amount": int, "currency": {"code", "base", "exponent"}, "scale": int}
    """
    return {
        "amount": value.amount,
        "currency": value.currency.to_dict(),
        "scale": value.scale,
    }


def from_snapshot(data: dict, calculator: Calculator = INT) -> Money:
    """Ricostruisce un Money dall'output di to_snapshot()."""
    return create(
        data["amount"],
        Currency.from_dict(data["currency"]),
        data["scale"],
        calculator,
    )
