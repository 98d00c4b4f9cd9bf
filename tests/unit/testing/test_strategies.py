"""Unit tests for the Hypothesis strategies in ``mp_payhooks.testing``."""
from __future__ import annotations

import sys
from unittest.mock import patch

import pytest
from hypothesis import given

from mp_payhooks.testing import (
    amount_strategy,
    field_text_strategy,
    hex_key_strategy,
    key_value_strategy,
    notification_item_strategy,
    surrogate_text_strategy,
)
from mp_payhooks.testing.strategies import _require_hypothesis
from mp_payhooks.webhooks import Amount, NotificationRequestItem, decode_hex_key


# ===========================================================================
# Import guard
# ===========================================================================


class TestRequireHypothesis:
    def test_returns_strategies_module(self) -> None:
        import hypothesis.strategies as st

        assert _require_hypothesis() is st

    def test_missing_hypothesis_raises_helpful_error(self) -> None:
        with patch.dict(sys.modules, {"hypothesis": None, "hypothesis.strategies": None}):
            with pytest.raises(ImportError, match="pip install hypothesis"):
                _require_hypothesis()


# ===========================================================================
# Generated values
# ===========================================================================


class TestFieldTextStrategy:
    @given(field_text_strategy(allow_separators=False))
    def test_no_separators(self, value: str) -> None:
        assert ":" not in value
        assert "\\" not in value


class TestAmountStrategy:
    @given(amount_strategy(("EUR",), max_value=100))
    def test_bounds(self, amount: Amount) -> None:
        assert amount.currency == "EUR"
        assert 0 <= amount.value <= 100

    @given(amount_strategy())
    def test_converts_to_money(self, amount: Amount) -> None:
        assert amount.to_money().minor_units() == amount.value


class TestNotificationItemStrategy:
    @given(notification_item_strategy())
    def test_items_are_well_formed(self, item: NotificationRequestItem) -> None:
        assert len(item.psp_reference) == 16
        assert item.has_well_formed_success()
        assert item.known_event_code() is not None
        assert item.hmac_signature() is None

    @given(notification_item_strategy(allow_separators=False))
    def test_no_separators_in_signed_text_fields(self, item: NotificationRequestItem) -> None:
        for value in (item.merchant_account_code, item.merchant_reference, item.original_reference or ""):
            assert ":" not in value
            assert "\\" not in value


class TestKeyValueStrategy:
    @given(key_value_strategy(min_size=2, max_size=3))
    def test_size(self, data: dict[str, str]) -> None:
        assert 2 <= len(data) <= 3
        assert all(isinstance(k, str) and isinstance(v, str) for k, v in data.items())


class TestSurrogateTextStrategy:
    @given(surrogate_text_strategy())
    def test_cannot_be_utf8_encoded(self, value: str) -> None:
        assert any(0xD800 <= ord(ch) <= 0xDFFF for ch in value)
        with pytest.raises(UnicodeEncodeError):
            value.encode("utf-8")


class TestHexKeyStrategy:
    @given(hex_key_strategy(min_bytes=32, max_bytes=32))
    def test_decodes_to_requested_length(self, key: str) -> None:
        assert len(decode_hex_key(key)) == 32
