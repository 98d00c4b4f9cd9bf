"""Webhooks – settings for the HMAC gate."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_payhooks.config import InvalidSettingValueError, Settings


@dataclasses.dataclass
class WebhookSettings(Settings):
    """Secret and header configuration, loaded from ``PAYHOOKS_*`` variables.

    ``PAYHOOKS_HMAC_KEY`` is required; ``PAYHOOKS_SIGNATURE_HEADER`` names the
    header that carries out-of-band signatures.
    """

    _prefix: ClassVar[str] = "PAYHOOKS"

    hmac_key: str = dataclasses.field(repr=False)
    signature_header: str = "HmacSignature"

    def _validate(self) -> None:
        if not self.signature_header.strip():
            raise InvalidSettingValueError(
                "signature_header", self.signature_header, "must not be blank"
            )


__all__ = ["WebhookSettings"]
