"""
errors.py — Gerarchia di eccezioni di scaled_money

Ogni errore è sollevato in modo sincrono dalla chiamata che lo rileva. Niente
viene corretto in silenzio, niente viene ritentato.

Gli errori di dominio ereditano anche dall'eccezione built-in che un chiamante
catturerebbe (TypeError per operazioni tra valute, ValueError per argomenti
non validi, ArithmeticError per problemi di range): il codice scritto contro
le eccezioni standard continua a funzionare.
"""

from __future__ import annotations


class MoneyError(Exception):
    """Classe base per tutti gli errori di scaled_money."""


class CurrencyMismatchError(MoneyError, TypeError):
    """Due valori con valute diverse sono stati combinati o confrontati."""

    def __init__(self, left: str, right: str, operation: str = "operation"):
        self.left = left
        self.right = right
        self.operation = operation
        super().__init__(
            f"Valute diverse in {operation}: {left} vs {right}. "
            f"Convertire esplicitamente prima di combinare."
        )


class InvalidScaleError(MoneyError, ValueError):
    """Scale negativa, non intera, o che andrebbe abbassata implicitamente."""


class InvalidRatiosError(MoneyError, ValueError):
    """Ratio di ripartizione vuoti, tutti zero o con valori negativi."""


class UnsafeOperationError(MoneyError, ArithmeticError):
    """Una rappresentazione limitata andrebbe in overflow o perderebbe precisione."""
