"""Webhooks – HmacValidator, the authenticity gate for inbound notifications."""
from __future__ import annotations

import binascii
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, NoReturn

from mp_payhooks.kernel.errors import ValidationError
from mp_payhooks.kernel.security import constant_time_equals
from mp_payhooks.observability.logging import get_logger
from mp_payhooks.webhooks.errors import InvalidKeyError
from mp_payhooks.webhooks.model import NotificationRequestItem, Webhook
from mp_payhooks.webhooks.signing import (
    calculate_hmac,
    key_value_data_to_sign,
    notification_data_to_sign,
)

if TYPE_CHECKING:
    from mp_payhooks.webhooks.settings import WebhookSettings

_log = get_logger(__name__)


def decode_hex_key(secret_key: str) -> bytes:
    """Decode a hex-encoded HMAC key.

    Whitespace, odd length and non-hex characters are all rejected.

    Raises:
        InvalidKeyError: *secret_key* is not a valid hex string.
    """
    if not isinstance(secret_key, str):
        raise InvalidKeyError(
            f"HMAC key must be a hex string, got {type(secret_key).__name__}"
        )
    try:
        return binascii.unhexlify(secret_key.encode("ascii"))
    except (UnicodeEncodeError, binascii.Error):
        _log.error("hmac_validator.invalid_key", key_length=len(secret_key))
        # key material must not reach the traceback
        raise InvalidKeyError(
            "HMAC key is not valid hexadecimal",
            detail={"length": len(secret_key)},
        ) from None


class HmacValidator:
    """Verifies processor webhooks with HMAC-SHA256.

    The hex key is decoded once at construction; the instance is immutable
    and can be shared freely across threads and tasks. Every ``validate_*``
    method returns a plain ``bool`` and never raises for bad input: a missing,
    malformed or wrong signature is simply ``False``.

    Example::

        validator = HmacValidator(settings.hmac_key)
        for item in parse_webhook(body).get_notification_items():
            if not validator.validate_notification(item):
                raise InvalidSignatureError(psp_references=[item.psp_reference])

    Raises:
        InvalidKeyError: at construction, when *secret_key* is not valid hex.
    """

    __slots__ = ("_secret_key",)

    def __init__(self, secret_key: str) -> None:
        object.__setattr__(self, "_secret_key", decode_hex_key(secret_key))

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key_bytes={len(self._secret_key)})"

    @classmethod
    def from_settings(cls, settings: "WebhookSettings") -> "HmacValidator":
        return cls(settings.hmac_key)

    @property
    def key_length(self) -> int:
        """Length of the decoded key in bytes (32 for a 256-bit key)."""
        return len(self._secret_key)

    # ------------------------------------------------------------------
    # Signature calculation
    # ------------------------------------------------------------------

    def calculate_notification_signature(self, item: NotificationRequestItem) -> str:
        return calculate_hmac(self._secret_key, notification_data_to_sign(item))

    def calculate_payload_signature(self, payload: str | bytes) -> str:
        """Sign the raw payload exactly as received; no escaping is applied."""
        return calculate_hmac(self._secret_key, payload)

    def calculate_key_value_signature(self, data: Mapping[str, str]) -> str:
        """Raises ``ValidationError`` when *data* is not a str-to-str mapping."""
        return calculate_hmac(self._secret_key, key_value_data_to_sign(data))

    # ------------------------------------------------------------------
    # Verification
    # ------------------------------------------------------------------

    def validate_notification(self, item: NotificationRequestItem) -> bool:
        """Check ``additionalData["hmacSignature"]`` against the item's fields.

        A missing or non-string signature fails closed, as does a signed field
        that cannot be UTF-8 encoded (e.g. a lone surrogate from a ``\\ud800``
        JSON escape).
        """
        signature = item.hmac_signature()
        if signature is None:
            _log.debug(
                "hmac_validator.rejected",
                method="notification",
                reason="missing_signature",
                psp_reference=item.psp_reference,
            )
            return False
        try:
            expected = self.calculate_notification_signature(item)
        except UnicodeEncodeError:
            _log.debug(
                "hmac_validator.rejected",
                method="notification",
                reason="unencodable_input",
                psp_reference=item.psp_reference,
            )
            return False
        if constant_time_equals(expected, signature):
            return True
        _log.debug(
            "hmac_validator.rejected",
            method="notification",
            reason="signature_mismatch",
            psp_reference=item.psp_reference,
        )
        return False

    def validate_payload(self, payload: str | bytes, signature: str) -> bool:
        """Check an out-of-band (e.g. header) signature over the raw body."""
        try:
            expected = self.calculate_payload_signature(payload)
        except UnicodeEncodeError:
            _log.debug("hmac_validator.rejected", method="payload", reason="unencodable_input")
            return False
        if constant_time_equals(expected, signature):
            return True
        _log.debug("hmac_validator.rejected", method="payload", reason="signature_mismatch")
        return False

    def validate_key_value_pairs(self, data: Mapping[str, str], signature: str) -> bool:
        try:
            expected = self.calculate_key_value_signature(data)
        except ValidationError:
            _log.debug("hmac_validator.rejected", method="key_value", reason="malformed_pairs")
            return False
        except UnicodeEncodeError:
            _log.debug("hmac_validator.rejected", method="key_value", reason="unencodable_input")
            return False
        if constant_time_equals(expected, signature):
            return True
        _log.debug("hmac_validator.rejected", method="key_value", reason="signature_mismatch")
        return False

    def validate_webhook(self, webhook: Webhook) -> bool:
        """``True`` only if the envelope has items and every one of them validates."""
        items = webhook.get_notification_items()
        if not items:
            _log.debug("hmac_validator.rejected", method="notification", reason="empty_envelope")
            return False
        # evaluate every item so rejections are logged for each of them
        results = [self.validate_notification(item) for item in items]
        return all(results)


__all__ = ["HmacValidator", "decode_hex_key"]
