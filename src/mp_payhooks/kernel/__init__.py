"""Kernel – framework-agnostic building blocks (errors, money, security)."""

from mp_payhooks.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InfrastructureError,
    SerializationError,
    UnauthorizedError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "SerializationError",
    "UnauthorizedError",
    "ValidationError",
]
