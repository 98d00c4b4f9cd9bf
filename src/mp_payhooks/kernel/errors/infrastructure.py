"""Infrastructure errors – wire decoding and primitive failures."""

from __future__ import annotations

from typing import Any

from mp_payhooks.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        field: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type
        self.field = field
        if field is not None:
            self.detail.setdefault("field", field)


__all__ = [
    "InfrastructureError",
    "SerializationError",
]
