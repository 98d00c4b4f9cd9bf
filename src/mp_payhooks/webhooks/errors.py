"""Webhook errors – key configuration, HMAC defects and rejected signatures."""
from __future__ import annotations

from typing import Any

from mp_payhooks.config.validation import ConfigError
from mp_payhooks.kernel.errors import InfrastructureError, UnauthorizedError


class InvalidKeyError(ConfigError):
    """The configured HMAC secret is not valid hexadecimal.

    Fatal at startup. The message never echoes the key material.
    """

    default_code = "invalid_hmac_key"


class HmacError(InfrastructureError):
    """The keyed hash could not be constructed.

    Cannot happen once an :class:`HmacValidator` exists; treat as a defect.
    """

    default_code = "hmac_error"


class InvalidSignatureError(UnauthorizedError):
    """A webhook failed authentication and must not be processed."""

    default_code = "invalid_signature"

    def __init__(
        self,
        message: str = "Webhook signature is invalid",
        *,
        psp_references: list[str] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.psp_references: list[str] = psp_references or []


class MissingSignatureError(InvalidSignatureError):
    """The webhook carried no signature at all."""

    default_code = "missing_signature"

    def __init__(self, message: str = "Webhook signature is missing", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = [
    "HmacError",
    "InvalidKeyError",
    "InvalidSignatureError",
    "MissingSignatureError",
]
