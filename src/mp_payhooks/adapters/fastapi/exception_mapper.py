"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'mp-payhooks[fastapi]' to use the FastAPI adapter"
        ) from exc


def error_body(exc: BaseException) -> dict[str, Any]:
    """Render *exc* as the JSON error body; the cause repr is never exposed."""
    from mp_payhooks.kernel.errors.base import BaseError

    if isinstance(exc, BaseError):
        return exc.to_dict(include_cause=False)
    return {"code": "error", "message": str(exc)}


class FastAPIExceptionMapper:
    """Register mp_payhooks error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"code": "invalid_signature", "message": "...", "detail": {...}}

    Mappings
    --------
    ``UnauthorizedError``   → 401  (``InvalidSignatureError``, ``MissingSignatureError``)
    ``ValidationError``     → 400
    ``SerializationError``  → 400
    ``ConfigError``         → 500  (``InvalidKeyError``)
    ``HmacError``           → 500
    ``DomainError``         → 422
    ``InfrastructureError`` → 503
    """

    def __init__(self) -> None:
        _require_fastapi()
        from mp_payhooks.config.validation import ConfigError
        from mp_payhooks.kernel.errors import (
            DomainError,
            InfrastructureError,
            SerializationError,
            UnauthorizedError,
            ValidationError,
        )
        from mp_payhooks.webhooks.errors import HmacError

        # handlers are resolved along the exception MRO, most specific first
        self._map: list[tuple[type[Exception], int]] = [
            (UnauthorizedError, 401),
            (ValidationError, 400),
            (SerializationError, 400),
            (ConfigError, 500),
            (HmacError, 500),
            (DomainError, 422),
            (InfrastructureError, 503),
        ]

    @property
    def mappings(self) -> dict[type[Exception], int]:
        return dict(self._map)

    def register(self, app: Any) -> None:
        """Register all error handlers on a ``FastAPI`` or ``Starlette`` app."""
        from fastapi.responses import JSONResponse  # type: ignore[import-untyped]

        for exc_type, status in self._map:

            def make_handler(code: int) -> Callable[[Any, Any], Any]:
                def handler(request: Any, exc: Any) -> Any:  # noqa: ARG001
                    return JSONResponse(status_code=code, content=error_body(exc))

                return handler

            app.add_exception_handler(exc_type, make_handler(status))


__all__ = ["FastAPIExceptionMapper", "error_body"]
