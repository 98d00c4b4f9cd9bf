"""Money value object backed by :class:`Currency`."""

from __future__ import annotations

import dataclasses
from decimal import Decimal

from mp_payhooks.kernel.errors.domain import ValidationError
from mp_payhooks.kernel.types.currency import Currency


@dataclasses.dataclass(frozen=True, slots=True)
class Money:
    """Immutable, decimal-aware monetary amount with explicit currency."""

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if not isinstance(self.currency, Currency):
            object.__setattr__(self, "currency", Currency.from_code(self.currency))
        if self.amount < 0:
            raise ValidationError("Money amount must be non-negative")

    def __add__(self, other: "Money") -> "Money":
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: "Money") -> "Money":
        self._assert_same_currency(other)
        result = self.amount - other.amount
        if result < 0:
            raise ValidationError("Subtraction would produce negative Money")
        return Money(result, self.currency)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def _assert_same_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Currency mismatch: {self.currency} vs {other.currency}"
            )

    @classmethod
    def of(cls, amount: "str | int | Decimal", currency: "str | Currency") -> "Money":
        if not isinstance(currency, Currency):
            currency = Currency.from_code(currency.upper())
        return cls(Decimal(str(amount)), currency)

    @classmethod
    def from_minor_units(cls, minor_units: int, currency: "str | Currency") -> "Money":
        """Build from an integer count of minor units (e.g. cents)."""
        if not isinstance(currency, Currency):
            currency = Currency.from_code(currency)
        return cls(Decimal(minor_units).scaleb(-currency.decimal_places), currency)

    def minor_units(self) -> int:
        """Return the amount as an integer count of minor units."""
        scaled = self.amount.scaleb(self.currency.decimal_places)
        if scaled != scaled.to_integral_value():
            raise ValidationError(
                f"{self.amount} has more than {self.currency.decimal_places} decimal places"
            )
        return int(scaled)


__all__ = ["Money"]
