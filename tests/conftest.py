"""Shared fixtures for the mp-payhooks test-suite."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from mp_payhooks.webhooks import Amount, HmacValidator, NotificationRequestItem

TEST_HMAC_KEY = "44782DEF547AAA06C910C43932B1EB0C71FC68D9D0C057550C48EC2ACF6BA056"


@pytest.fixture()
def hmac_key() -> str:
    return TEST_HMAC_KEY


@pytest.fixture()
def validator() -> HmacValidator:
    return HmacValidator(TEST_HMAC_KEY)


@pytest.fixture()
def make_item() -> Callable[..., NotificationRequestItem]:
    """Factory for the reference AUTHORISATION item; keyword overrides win."""

    def _make(**overrides: Any) -> NotificationRequestItem:
        fields: dict[str, Any] = {
            "psp_reference": "8515131751004933",
            "merchant_account_code": "TestMerchant",
            "merchant_reference": "test-payment-123",
            "amount": Amount(1000, "EUR"),
            "event_code": "AUTHORISATION",
            "success": "true",
            "reason": "Approved",
            "payment_method": "visa",
            "original_reference": None,
            "operations": ("CAPTURE", "REFUND"),
            "additional_data": None,
        }
        fields.update(overrides)
        return NotificationRequestItem(**fields)

    return _make


@pytest.fixture()
def make_signed_item(
    validator: HmacValidator,
    make_item: Callable[..., NotificationRequestItem],
) -> Callable[..., NotificationRequestItem]:
    """Like ``make_item`` but embeds a correct ``hmacSignature``."""

    def _make(**overrides: Any) -> NotificationRequestItem:
        extra = dict(overrides.pop("additional_data", None) or {})
        unsigned = make_item(**overrides)
        extra["hmacSignature"] = validator.calculate_notification_signature(unsigned)
        return make_item(additional_data=extra, **overrides)

    return _make
