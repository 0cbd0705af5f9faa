"""
scaled_money — Exact, scale-aware monetary arithmetic

An amount of money is an integer, a scale and a currency. Arithmetic never
goes through floating point, and the integer representation is pluggable.

================================================================================
QUICK START
================================================================================

Basic usage:

    from scaled_money import create, ScaledAmount, EUR, USD

    price = create(1995, EUR)                 # 19.95 EUR
    tax = price * ScaledAmount(55, 3)         # 5.5 %, exact
    total = price + tax                       # amount 2104725, scale 5

    # Mixed scales normalize automatically
    create(400, USD) + create(104545, USD, scale=4)   # amount 144545, scale 4

    # Split without losing a cent
    parts = create(400, USD).allocate([505, 495], scale=1)
    assert sum(parts) == create(4000, USD, scale=3)

    # Back to the smallest exact scale
    create(3000000, USD, scale=6).trim_scale()        # amount 300, scale 2

Other integer representations:

    from scaled_money import money_factory, INT64, DECIMAL

    money = money_factory(INT64)      # overflow raises UnsafeOperationError
    price = money(1995, EUR)

================================================================================
"""

import logging

from .allocation import allocate, distribute
from .arithmetic import (
    absolute,
    add,
    apply_percentage,
    convert,
    divide,
    multiply,
    negate,
    subtract,
)
from .calculator import (
    DECIMAL,
    INT,
    INT64,
    SAFE_INTEGER,
    BoundedIntCalculator,
    Calculator,
    DecimalCalculator,
    IntCalculator,
)
from .comparison import (
    compare,
    equal,
    greater_than,
    greater_than_or_equal,
    has_sub_units,
    have_same_amount,
    have_same_currency,
    is_negative,
    is_positive,
    is_zero,
    less_than,
    less_than_or_equal,
    maximum,
    minimum,
)
from .core import Money, ScaledAmount, create, from_snapshot, money_factory, to_snapshot
from .currencies import CURRENCIES, EUR, GBP, JPY, USD, define_currency, get_currency
from .currency import Currency
from .errors import (
    CurrencyMismatchError,
    InvalidRatiosError,
    InvalidScaleError,
    MoneyError,
    UnsafeOperationError,
)
from .rounding import RoundingMode
from .scale import normalize_scale, raise_scale, transform_scale, trim_scale
from .units import to_units

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Values
    "Money",
    "ScaledAmount",
    "Currency",
    "CURRENCIES",
    "get_currency",
    "define_currency",
    "USD",
    "EUR",
    "GBP",
    "JPY",
    # Construction
    "create",
    "money_factory",
    "to_snapshot",
    "from_snapshot",
    "to_units",
    # Calculators
    "Calculator",
    "IntCalculator",
    "BoundedIntCalculator",
    "DecimalCalculator",
    "INT",
    "INT64",
    "SAFE_INTEGER",
    "DECIMAL",
    # Arithmetic
    "add",
    "subtract",
    "multiply",
    "divide",
    "apply_percentage",
    "convert",
    "negate",
    "absolute",
    "allocate",
    "distribute",
    "RoundingMode",
    # Scale
    "normalize_scale",
    "raise_scale",
    "transform_scale",
    "trim_scale",
    # Comparison
    "compare",
    "equal",
    "greater_than",
    "greater_than_or_equal",
    "less_than",
    "less_than_or_equal",
    "minimum",
    "maximum",
    "is_zero",
    "is_positive",
    "is_negative",
    "has_sub_units",
    "have_same_currency",
    "have_same_amount",
    # Errors
    "MoneyError",
    "CurrencyMismatchError",
    "InvalidScaleError",
    "InvalidRatiosError",
    "UnsafeOperationError",
]
