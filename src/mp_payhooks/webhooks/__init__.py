"""Webhooks – notification model, signing and HMAC verification."""
from mp_payhooks.webhooks.errors import (
    HmacError,
    InvalidKeyError,
    InvalidSignatureError,
    MissingSignatureError,
)
from mp_payhooks.webhooks.model import (
    HMAC_SIGNATURE_KEY,
    Amount,
    EventCode,
    NotificationItem,
    NotificationRequestItem,
    Webhook,
    parse_webhook,
)
from mp_payhooks.webhooks.settings import WebhookSettings
from mp_payhooks.webhooks.signing import (
    calculate_hmac,
    escape_data,
    key_value_data_to_sign,
    notification_data_to_sign,
)
from mp_payhooks.webhooks.validator import HmacValidator, decode_hex_key

__all__ = [
    "HMAC_SIGNATURE_KEY",
    "Amount",
    "EventCode",
    "HmacError",
    "HmacValidator",
    "InvalidKeyError",
    "InvalidSignatureError",
    "MissingSignatureError",
    "NotificationItem",
    "NotificationRequestItem",
    "Webhook",
    "WebhookSettings",
    "calculate_hmac",
    "decode_hex_key",
    "escape_data",
    "key_value_data_to_sign",
    "notification_data_to_sign",
    "parse_webhook",
]
