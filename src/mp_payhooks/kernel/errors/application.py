"""Application-layer errors – cross-cutting concerns at use-case level."""

from __future__ import annotations

from mp_payhooks.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnauthorizedError(ApplicationError):
    """Missing or invalid credentials."""

    default_code = "unauthorized"


__all__ = [
    "ApplicationError",
    "UnauthorizedError",
]
