"""BaseError – root of every exception raised by mp-payhooks."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Carries a stable ``code`` next to the human-readable message.

    The ``code`` is what HTTP adapters and audit entries key on
    (``invalid_signature``, ``serialization_error``, ...); ``detail`` holds
    JSON-safe context such as the offending field path. Key material and
    signature values never belong in either.

    Args:
        message: Human-readable description.
        code: Overrides the class-level ``default_code``.
        detail: Extra JSON-safe context.
        cause: Underlying exception; also chained as ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self, *, include_cause: bool = True) -> dict[str, Any]:
        """Plain-dict form for logs; pass ``include_cause=False`` for client responses."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if include_cause and self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
