"""
currencies.py — Tabella valute ISO 4217

Dati statici in sola lettura: costruiti una volta all'import, esposti tramite
MappingProxyType in modo che nessuno possa modificarli in seguito.

ISO 4217 definisce:
- Codice alfabetico (EUR, USD, ...)
- Codice numerico (978, 840, ...)
- Minor unit (numero di decimali)

Qui si usano solo il codice alfabetico e la minor unit. Due valute, l'ariary
malgascio e l'ouguiya mauritano, non sono decimali: la loro minor unit è un
quinto della major unit, quindi sono in base 5 con exponent 1.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .currency import Currency

_ZERO_DECIMALS = (
    "BIF", "CLP", "DJF", "GNF", "ISK", "JPY", "KMF", "KRW", "PYG", "RWF",
    "UGX", "UYI", "VND", "VUV", "XAF", "XOF", "XPF",
)

_THREE_DECIMALS = ("BHD", "IQD", "JOD", "KWD", "LYD", "OMR", "TND")

_FOUR_DECIMALS = ("CLF", "UYW")

_TWO_DECIMALS = (
    "AED", "AFN", "ALL", "AMD", "ANG", "AOA", "ARS", "AUD", "AWG", "AZN",
    "BAM", "BBD", "BDT", "BGN", "BMD", "BND", "BOB", "BOV", "BRL", "BSD",
    "BTN", "BWP", "BYN", "BZD", "CAD", "CDF", "CHE", "CHF", "CHW", "CNY",
    "COP", "COU", "CRC", "CUC", "CUP", "CVE", "CZK", "DKK", "DOP", "DZD",
    "EGP", "ERN", "ETB", "EUR", "FJD", "FKP", "GBP", "GEL", "GHS", "GIP",
    "GMD", "GTQ", "GYD", "HKD", "HNL", "HRK", "HTG", "HUF", "IDR", "ILS",
    "INR", "IRR", "JMD", "KES", "KGS", "KHR", "KPW", "KYD", "KZT", "LAK",
    "LBP", "LKR", "LRD", "LSL", "MAD", "MDL", "MKD", "MMK", "MNT", "MOP",
    "MUR", "MVR", "MWK", "MXN", "MXV", "MYR", "MZN", "NAD", "NGN", "NIO",
    "NOK", "NPR", "NZD", "PAB", "PEN", "PGK", "PHP", "PKR", "PLN", "QAR",
    "RON", "RSD", "RUB", "SAR", "SBD", "SCR", "SDG", "SEK", "SGD", "SHP",
    "SLL", "SOS", "SRD", "SSP", "STN", "SVC", "SYP", "SZL", "THB", "TJS",
    "TMT", "TOP", "TRY", "TTD", "TWD", "TZS", "UAH", "USD", "USN", "UYU",
    "UZS", "VES", "WST", "XCD", "YER", "ZAR", "ZMW", "ZWL",
)

_FIVE_BASED = ("MGA", "MRU")


def define_currency(code: str, base: int = 10, exponent: int = 2) -> Currency:
    """
    Costruttore validato per un descrittore di valuta.

    Usato per la tabella ISO 4217 e per valute custom (crypto, punti fedeltà).

    Raises:
        ValueError: se code è vuoto, base < 2 o exponent < 0
    """
    if not isinstance(code, str) or not code:
        raise ValueError(f"code deve essere una stringa non vuota, ricevuto: {code!r}")
    if not isinstance(base, int) or isinstance(base, bool) or base < 2:
        raise ValueError(f"base deve essere un intero >= 2, ricevuto: {base!r}")
    if not isinstance(exponent, int) or isinstance(exponent, bool) or exponent < 0:
        raise ValueError(f"exponent deve essere un intero >= 0, ricevuto: {exponent!r}")
    return Currency(code=code, base=base, exponent=exponent)


def _build() -> dict[str, Currency]:
    table: dict[str, Currency] = {}
    for exponent, codes in ((0, _ZERO_DECIMALS), (2, _TWO_DECIMALS),
                            (3, _THREE_DECIMALS), (4, _FOUR_DECIMALS)):
        for code in codes:
            table[code] = define_currency(code, 10, exponent)
    for code in _FIVE_BASED:
        table[code] = define_currency(code, 5, 1)
    return dict(sorted(table.items()))


CURRENCIES: Mapping[str, Currency] = MappingProxyType(_build())


def get_currency(code: str) -> Currency:
    """Cerca una valuta per codice ISO 4217 (case-insensitive)."""
    try:
        return CURRENCIES[code.upper()]
    except KeyError:
        raise KeyError(f"codice valuta sconosciuto: {code!r}") from None


# Shorthand for common currencies
USD = CURRENCIES["USD"]   # US Dollar: 1 USD = 100 cents
EUR = CURRENCIES["EUR"]   # Euro: 1 EUR = 100 cents
GBP = CURRENCIES["GBP"]   # British Pound: 1 GBP = 100 pence
CHF = CURRENCIES["CHF"]
CAD = CURRENCIES["CAD"]
AUD = CURRENCIES["AUD"]
CNY = CURRENCIES["CNY"]
INR = CURRENCIES["INR"]
BSD = CURRENCIES["BSD"]
HUF = CURRENCIES["HUF"]
JPY = CURRENCIES["JPY"]   # Japanese Yen: no minor unit
KRW = CURRENCIES["KRW"]
BHD = CURRENCIES["BHD"]
KWD = CURRENCIES["KWD"]   # Kuwaiti Dinar: 1 KWD = 1000 fils
CLF = CURRENCIES["CLF"]
MGA = CURRENCIES["MGA"]   # Malagasy Ariary: 1 MGA = 5 iraimbilanja
MRU = CURRENCIES["MRU"]
