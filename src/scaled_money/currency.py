"""
currency.py — Descrittore di valuta

Una valuta è composta da tre dati statici:

- code:     identificativo (codice alfabetico ISO 4217 per le valute reali)
- base:     radice del sistema di minor unit (10 per quasi tutte)
- exponent: scala naturale; un'unità di amount a scale == exponent è una
            minor unit (un centesimo per USD, uno yen per JPY)

I descrittori sono valori immutabili: due descrittori sono la stessa valuta
quando coincidono tutti e tre i campi. Il motore li consuma e basta; la
validazione avviene dove vengono definiti (currencies.define_currency).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Currency:
    code: str
    base: int = 10
    exponent: int = 2

    @property
    def multiplier(self) -> int:
        """Fattore di conversione major -> minor unit (base ** exponent)."""
        return self.base ** self.exponent

    def to_dict(self) -> dict:
        return {"code": self.code, "base": self.base, "exponent": self.exponent}

    @classmethod
    def from_dict(cls, data: dict) -> Currency:
        return cls(code=data["code"], base=data["base"], exponent=data["exponent"])

    def __str__(self) -> str:
        return self.code
