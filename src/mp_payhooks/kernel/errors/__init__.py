"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    ├── ApplicationError     (application.py)
    │   └── UnauthorizedError
    └── InfrastructureError  (infrastructure.py)
        └── SerializationError

Webhook-specific errors (``InvalidKeyError``, ``HmacError``,
``InvalidSignatureError``, ``MissingSignatureError``) extend these in
:mod:`mp_payhooks.webhooks.errors`.
"""

from mp_payhooks.kernel.errors.application import ApplicationError, UnauthorizedError
from mp_payhooks.kernel.errors.base import BaseError
from mp_payhooks.kernel.errors.domain import DomainError, ValidationError
from mp_payhooks.kernel.errors.infrastructure import InfrastructureError, SerializationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "SerializationError",
    "UnauthorizedError",
    "ValidationError",
]
