"""Unit tests for Currency and Money."""

from __future__ import annotations

from decimal import Decimal

import pytest

from mp_payhooks.kernel.errors import ValidationError
from mp_payhooks.kernel.types import Currency, Money


class TestCurrency:
    def test_from_code(self) -> None:
        assert Currency.from_code("EUR") is Currency.EUR

    def test_from_code_unknown(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Currency.from_code("XXX")
        assert exc_info.value.errors == [{"field": "currency", "value": "XXX"}]

    def test_from_code_is_case_sensitive(self) -> None:
        with pytest.raises(ValidationError):
            Currency.from_code("eur")

    @pytest.mark.parametrize(("currency", "places"), [(Currency.EUR, 2), (Currency.USD, 2), (Currency.JPY, 0), (Currency.KRW, 0)])
    def test_decimal_places(self, currency: Currency, places: int) -> None:
        assert currency.decimal_places == places
        assert currency.minor_unit_multiplier == 10**places

    def test_numeric_code(self) -> None:
        assert Currency.EUR.numeric_code == 978
        assert Currency.USD.numeric_code == 840

    def test_every_currency_has_numeric_code(self) -> None:
        for currency in Currency:
            assert isinstance(currency.numeric_code, int)

    def test_str(self) -> None:
        assert str(Currency.GBP) == "GBP"


class TestMoney:
    def test_of(self) -> None:
        money = Money.of("10.50", "eur")
        assert money.amount == Decimal("10.50")
        assert money.currency is Currency.EUR

    def test_string_currency_is_converted(self) -> None:
        assert Money(Decimal("1"), "USD").currency is Currency.USD  # type: ignore[arg-type]

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Money(Decimal("-0.01"), Currency.EUR)

    def test_add(self) -> None:
        assert Money.of("1.25", "EUR") + Money.of("2.75", "EUR") == Money.of("4.00", "EUR")

    def test_add_currency_mismatch(self) -> None:
        with pytest.raises(ValidationError):
            Money.of("1", "EUR") + Money.of("1", "USD")

    def test_sub(self) -> None:
        assert Money.of("5", "EUR") - Money.of("2", "EUR") == Money.of("3", "EUR")

    def test_sub_negative_result(self) -> None:
        with pytest.raises(ValidationError):
            Money.of("1", "EUR") - Money.of("2", "EUR")

    def test_minor_units_round_trip(self) -> None:
        money = Money.from_minor_units(1050, Currency.EUR)
        assert money.amount == Decimal("10.50")
        assert money.minor_units() == 1050

    def test_minor_units_zero_decimal(self) -> None:
        assert Money.from_minor_units(500, "JPY").minor_units() == 500

    def test_minor_units_too_precise(self) -> None:
        with pytest.raises(ValidationError):
            Money.of("1.005", "EUR").minor_units()

    def test_str(self) -> None:
        assert str(Money.of("10.50", "EUR")) == "10.50 EUR"

    def test_is_frozen(self) -> None:
        money = Money.of("1", "EUR")
        with pytest.raises(AttributeError):
            money.amount = Decimal("2")  # type: ignore[misc]
