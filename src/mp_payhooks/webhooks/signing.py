"""Webhooks – canonical signing strings and HMAC-SHA256 computation.

Two canonical forms are signed by the processor:

* notification items: eight fixed fields, each escaped, joined by ``:``::

      pspReference:originalReference:merchantAccountCode:merchantReference:value:currency:eventCode:success

* key-value maps: keys sorted, then ``k1:k2:...:v1:v2:...`` with every key and
  value escaped once.

Raw payloads (header-signed webhooks) are signed as-is, without escaping.
"""
from __future__ import annotations

import base64
import hashlib
import hmac
from collections.abc import Mapping

from mp_payhooks.kernel.errors import ValidationError
from mp_payhooks.webhooks.errors import HmacError
from mp_payhooks.webhooks.model import NotificationRequestItem

FIELD_SEPARATOR = ":"


def escape_data(value: str) -> str:
    r"""Escape ``\`` as ``\\`` and then ``:`` as ``\:``.

    Backslashes go first so the backslash added in front of a colon is not
    doubled again. Not idempotent.
    """
    return value.replace("\\", "\\\\").replace(":", "\\:")


def notification_data_to_sign(item: NotificationRequestItem) -> str:
    """Build the canonical string for a notification item."""
    fields = (
        item.psp_reference,
        item.original_reference or "",
        item.merchant_account_code,
        item.merchant_reference,
        str(item.amount.value),
        item.amount.currency,
        item.event_code,
        item.success,
    )
    return FIELD_SEPARATOR.join(escape_data(field) for field in fields)


def key_value_data_to_sign(data: Mapping[str, str]) -> str:
    """Build the canonical string for a flat string-to-string mapping.

    Raises:
        ValidationError: a key or value is not a ``str``.
    """
    bad = [
        {"key": repr(key), "value_type": type(value).__name__}
        for key, value in data.items()
        if not isinstance(key, str) or not isinstance(value, str)
    ]
    if bad:
        raise ValidationError("Key-value pairs must map strings to strings", errors=bad)

    # str ordering is by code point, which matches UTF-8 byte order
    keys = sorted(data)
    escaped_keys = FIELD_SEPARATOR.join(escape_data(key) for key in keys)
    escaped_values = FIELD_SEPARATOR.join(escape_data(data[key]) for key in keys)
    return f"{escaped_keys}{FIELD_SEPARATOR}{escaped_values}"


def calculate_hmac(key: bytes, data: str | bytes) -> str:
    """Return base64(HMAC-SHA256(key, data)); ``str`` data is UTF-8 encoded.

    Raises:
        HmacError: *key* is not bytes-like.
        UnicodeEncodeError: *data* is a ``str`` holding a lone surrogate.
    """
    message = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    try:
        mac = hmac.new(key, message, hashlib.sha256)
    except TypeError as exc:
        raise HmacError(f"Failed to create HMAC: {exc}", cause=exc) from exc
    return base64.b64encode(mac.digest()).decode("ascii")


__all__ = [
    "FIELD_SEPARATOR",
    "calculate_hmac",
    "escape_data",
    "key_value_data_to_sign",
    "notification_data_to_sign",
]
