#!/usr/bin/env python3
"""
scale_arithmetic_demo.py — Walkthrough of scale-aware money arithmetic

================================================================================
THE PROBLEM
================================================================================

    >>> 19.95 * 0.055
    1.0972499999999999

A 5.5 % tax on 19.95 is 1.09725, exactly. Floats cannot say so.

================================================================================
THE APPROACH
================================================================================

Keep every amount an integer and track its scale:

    19.95    = (1995, scale 2)
    0.055    = (55,   scale 3)
    product  = (109725, scale 5)      amounts multiply, scales add

Nothing is rounded until a caller explicitly asks for it.

================================================================================
"""

import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from scaled_money import (
    EUR,
    INT64,
    SAFE_INTEGER,
    USD,
    CurrencyMismatchError,
    RoundingMode,
    ScaledAmount,
    UnsafeOperationError,
    create,
    money_factory,
)


def show(label: str, value) -> None:
    print(f"  {label:<24} amount={value.amount!s:<12} scale={value.scale}")


def demonstrate_float_bug():
    print("=" * 60)
    print("THE BUG")
    print("=" * 60)
    print()
    print(">>> 19.95 * 0.055")
    print(f"{19.95 * 0.055}")
    print()


def demonstrate_exact_tax():
    print("=" * 60)
    print("EXACT TAX")
    print("=" * 60)
    print()

    price = create(1995, EUR)
    tax = price * ScaledAmount(55, 3)
    total = price + tax
    show("price", price)
    show("tax (5.5 %)", tax)
    show("total", total)
    show("total, rounded to cents", total.transform_scale(2, RoundingMode.HALF_EVEN))
    print()


def demonstrate_mixed_scales():
    print("=" * 60)
    print("MIXED SCALES")
    print("=" * 60)
    print()

    a = create(400, USD)
    b = create(104545, USD, scale=4)
    show("4.00 USD", a)
    show("10.4545 USD", b)
    show("sum", a + b)
    show("trimmed 3.000000 USD", create(3000000, USD, scale=6).trim_scale())
    print()


def demonstrate_allocation():
    print("=" * 60)
    print("ALLOCATION")
    print("=" * 60)
    print()

    fee = create(400, USD)
    parts = fee.allocate([505, 495], scale=1)
    for label, part in zip(("50.5 %", "49.5 %"), parts):
        show(label, part)
    show("sum of parts", sum(parts))
    print()

    budget = create(202600, EUR)
    monthly = budget.distribute(12)
    print(f"  2026 EUR over 12 months: {[p.amount for p in monthly]}")
    print(f"  Sum equals budget: {sum(monthly) == budget}")
    print()


def demonstrate_safety():
    print("=" * 60)
    print("SAFETY")
    print("=" * 60)
    print()

    print(">>> create(100, EUR) + create(100, USD)")
    try:
        create(100, EUR) + create(100, USD)
    except CurrencyMismatchError as e:
        print(f"CurrencyMismatchError: {e}")
    print()

    print(">>> create(100, EUR) * 1.5")
    try:
        create(100, EUR) * 1.5
    except TypeError as e:
        print(f"TypeError: {e}")
    print()

    money = money_factory(SAFE_INTEGER)
    print(">>> money(2 ** 52, USD) * 4   # SAFE_INTEGER")
    try:
        money(2 ** 52, USD) * 4
    except UnsafeOperationError as e:
        print(f"UnsafeOperationError: {e}")
    print()

    wide = money_factory(INT64)(2 ** 52, USD) * 4
    show("same on INT64", wide)
    print()


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    demonstrate_float_bug()
    demonstrate_exact_tax()
    demonstrate_mixed_scales()
    demonstrate_allocation()
    demonstrate_safety()


if __name__ == "__main__":
    main()
