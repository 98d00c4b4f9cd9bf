"""ISO 4217 currencies accepted by the payment processor."""

from __future__ import annotations

from enum import Enum
from typing import Final

from mp_payhooks.kernel.errors.domain import ValidationError

_ZERO_DECIMAL: Final = frozenset({"JPY", "KRW", "VND", "ISK"})


class Currency(str, Enum):
    """Currencies the processor commonly settles in, valued by ISO code.

    The numeric ISO 4217 code is available via :attr:`numeric_code`.
    """

    EUR = "EUR"
    USD = "USD"
    GBP = "GBP"
    JPY = "JPY"
    CHF = "CHF"
    CAD = "CAD"
    AUD = "AUD"
    NOK = "NOK"
    SEK = "SEK"
    DKK = "DKK"
    PLN = "PLN"
    CZK = "CZK"
    HUF = "HUF"
    BRL = "BRL"
    MXN = "MXN"
    SGD = "SGD"
    HKD = "HKD"
    NZD = "NZD"
    ZAR = "ZAR"
    CNY = "CNY"
    INR = "INR"
    KRW = "KRW"
    RUB = "RUB"
    TRY = "TRY"
    THB = "THB"
    MYR = "MYR"
    IDR = "IDR"
    PHP = "PHP"
    VND = "VND"
    ISK = "ISK"

    def __str__(self) -> str:
        return self.value

    @property
    def decimal_places(self) -> int:
        return 0 if self.value in _ZERO_DECIMAL else 2

    @property
    def minor_unit_multiplier(self) -> int:
        """``10 ** decimal_places``: minor units per major unit."""
        return 10 ** self.decimal_places

    @property
    def numeric_code(self) -> int:
        return _NUMERIC_CODES[self.value]

    @classmethod
    def from_code(cls, code: str) -> "Currency":
        """Return the currency for *code*; raise ``ValidationError`` when unknown."""
        try:
            return cls(code)
        except ValueError:
            raise ValidationError(
                f"Unsupported currency code: {code!r}",
                errors=[{"field": "currency", "value": code}],
            ) from None


_NUMERIC_CODES: Final[dict[str, int]] = {
    "EUR": 978, "USD": 840, "GBP": 826, "JPY": 392, "CHF": 756,
    "CAD": 124, "AUD": 36, "NOK": 578, "SEK": 752, "DKK": 208,
    "PLN": 985, "CZK": 203, "HUF": 348, "BRL": 986, "MXN": 484,
    "SGD": 702, "HKD": 344, "NZD": 554, "ZAR": 710, "CNY": 156,
    "INR": 356, "KRW": 410, "RUB": 643, "TRY": 949, "THB": 764,
    "MYR": 458, "IDR": 360, "PHP": 608, "VND": 704, "ISK": 352,
}


__all__ = ["Currency"]
