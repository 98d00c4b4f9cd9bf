"""FastAPI adapter – webhook verification dependencies and exception mapper."""
from mp_payhooks.adapters.fastapi.deps import (
    DEFAULT_SIGNATURE_HEADER,
    notification_webhook_dep,
    signed_payload_dep,
)
from mp_payhooks.adapters.fastapi.exception_mapper import FastAPIExceptionMapper, error_body

__all__ = [
    "DEFAULT_SIGNATURE_HEADER",
    "FastAPIExceptionMapper",
    "error_body",
    "notification_webhook_dep",
    "signed_payload_dep",
]
