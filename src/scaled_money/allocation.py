"""
allocation.py — Ripartizione con somma esatta

INVARIANTE: sum(allocate(v, ratios)) == v, sempre, alla scala di output.

ALGORITMO (largest remainder):
1. share_i = amount * ratio_i // total      (divisione intera, verso zero)
2. remainder = amount - sum(share_i)          (|remainder| < numero di ratio non nulli)
3. il resto viene assegnato una minor unit alla volta ai ratio non nulli,
   dal ratio più grande, a parità per posizione originale

Il passo 1 tronca verso zero: un importo negativo si ripartisce come
l'immagine speculare del caso positivo,
allocate(-v, r) == [-p for p in allocate(v, r)].
"""

from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Any, Sequence

from .core import Money, ScaledAmount, _check_scale
from .errors import InvalidRatiosError
from .scale import raise_scale

logger = logging.getLogger(__name__)

# Maximum parts for distribute() (DoS protection)
MAX_DISTRIBUTION_PARTS: int = 10_000


def _parse_ratios(value: Money, ratios: Sequence[Any], scale: int) -> tuple[list, int]:
    """Converte i ratio nella rappresentazione del valore, alla scala comune più alta."""
    calc = value.calculator
    zero = calc.zero()
    parsed = []
    for ratio in ratios:
        if isinstance(ratio, ScaledAmount):
            amount, ratio_scale = calc.coerce(ratio.amount), ratio.scale
        else:
            amount, ratio_scale = calc.coerce(ratio), scale
        if calc.compare(amount, zero) < 0:
            raise InvalidRatiosError(f"i ratio non possono essere negativi, ricevuto: {ratio!r}")
        parsed.append((amount, ratio_scale))

    highest = max(s for _, s in parsed)
    base = value.currency.base
    normalized = [
        a if s == highest else calc.multiply(a, calc.power(base, highest - s))
        for a, s in parsed
    ]
    return normalized, highest


def allocate(value: Money, ratios: Sequence[Any], scale: int = 0) -> list[Money]:
    """
    Ripartisce `value` in len(ratios) parti proporzionali a `ratios`.

    Args:
        value: importo da ripartire
        ratios: int o ScaledAmount non negativi, non tutti zero
        scale: scala dei ratio int semplici (505 a scala 1 vale 50.5)

    Returns:
        Un Money per ratio, nello stesso ordine, a scala
        value.scale + scala dei ratio, con somma esattamente value.

        allocate((400, USD, 2), [505, 495], scale=1)
            -> [(2020, USD, 3), (1980, USD, 3)]

    Raises:
        InvalidRatiosError: se ratios è vuoto, tutto zero o con negativi
    """
    _check_scale(scale)
    if not ratios:
        raise InvalidRatiosError("ratios non può essere vuoto")

    calc = value.calculator
    zero, one = calc.zero(), calc.one()
    weights, ratio_scale = _parse_ratios(value, ratios, scale)

    total = zero
    for w in weights:
        total = calc.add(total, w)
    if calc.compare(total, zero) == 0:
        raise InvalidRatiosError("i ratio non possono essere tutti zero")

    source = raise_scale(value, value.scale + ratio_scale)
    amount = source.amount

    shares = []
    allocated = zero
    for w in weights:
        share, _ = calc.divide_with_remainder(calc.multiply(amount, w), total)
        shares.append(share)
        allocated = calc.add(allocated, share)

    remainder = calc.subtract(amount, allocated)
    if calc.compare(remainder, zero) != 0:
        negative = calc.compare(remainder, zero) < 0
        order = sorted(
            (i for i, w in enumerate(weights) if calc.compare(w, zero) > 0),
            key=cmp_to_key(lambda i, j: calc.compare(weights[j], weights[i]) or (i - j)),
        )
        position = 0
        while calc.compare(remainder, zero) != 0:
            i = order[position % len(order)]
            if negative:
                shares[i] = calc.subtract(shares[i], one)
                remainder = calc.add(remainder, one)
            else:
                shares[i] = calc.add(shares[i], one)
                remainder = calc.subtract(remainder, one)
            position += 1
        logger.debug("allocate %r: distributed %d remainder unit(s)", value, position)

    return [source._with(share) for share in shares]


def distribute(value: Money, n: int) -> list[Money]:
    """
    Distribuisce l'importo in n parti con somma ESATTA.

    Le parti differiscono al massimo di una minor unit; le prime ricevono
    il resto. Stesso risultato di allocate(value, [1] * n).

    Args:
        n: Numero di parti (1 <= n <= MAX_DISTRIBUTION_PARTS)

    Raises:
        TypeError: se n non è un int
        ValueError: se n <= 0 o n > MAX_DISTRIBUTION_PARTS
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n deve essere un int, ricevuto: {type(n).__name__}")
    if n <= 0:
        raise ValueError(f"n deve essere > 0, ricevuto: {n}")
    if n > MAX_DISTRIBUTION_PARTS:
        raise ValueError(f"n supera il limite di {MAX_DISTRIBUTION_PARTS}")

    calc = value.calculator
    zero, one = calc.zero(), calc.one()
    base, remainder = calc.divide_with_remainder(value.amount, calc.coerce(n))
    step = calc.subtract(zero, one) if calc.compare(remainder, zero) < 0 else one

    parts = []
    for _ in range(n):
        if calc.compare(remainder, zero) != 0:
            parts.append(value._with(calc.add(base, step)))
            remainder = calc.subtract(remainder, step)
        else:
            parts.append(value._with(base))
    return parts
