"""FastAPI adapter – webhook verification dependencies.

Both factories return an ``async`` dependency for ``Depends``::

    validator = HmacValidator.from_settings(settings)

    @app.post("/webhooks/payments")
    async def payments(webhook: Webhook = Depends(notification_webhook_dep(validator))):
        ...

A request that fails verification never reaches the endpoint: the dependency
raises :class:`InvalidSignatureError` (401 once :class:`FastAPIExceptionMapper`
is registered).
"""
# No ``from __future__ import annotations`` here: FastAPI inspects the
# ``request: Request`` annotation of the inner functions at runtime.
from typing import Awaitable, Callable

from mp_payhooks.observability.logging import AuditLogger, AuditOutcome
from mp_payhooks.webhooks.errors import InvalidSignatureError, MissingSignatureError
from mp_payhooks.webhooks.model import Webhook, parse_webhook
from mp_payhooks.webhooks.validator import HmacValidator

DEFAULT_SIGNATURE_HEADER = "HmacSignature"


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'mp-payhooks[fastapi]' to use the FastAPI adapter"
        ) from exc


def notification_webhook_dep(
    validator: HmacValidator,
    *,
    audit: AuditLogger | None = None,
) -> Callable[..., Awaitable[Webhook]]:
    """Dependency: parse the body and require a valid ``hmacSignature`` on every item.

    Returns the decoded :class:`Webhook`. A body that is not a webhook raises
    ``SerializationError``; an empty envelope or any failing item raises
    :class:`InvalidSignatureError` listing the rejected PSP references.
    """
    _require_fastapi()
    from fastapi import Request  # type: ignore[import-untyped]

    async def verified_notification_webhook(request: Request) -> Webhook:
        webhook = parse_webhook(await request.body())
        items = webhook.get_notification_items()
        references = [item.psp_reference for item in items]
        rejected = [item.psp_reference for item in items if not validator.validate_notification(item)]

        if not items or rejected:
            reason = "empty_envelope" if not items else "signature_mismatch"
            if audit is not None:
                audit.log_verification(
                    "notification",
                    AuditOutcome.DENIED,
                    live=webhook.is_live(),
                    psp_references=rejected,
                    reason=reason,
                )
            raise InvalidSignatureError(
                "Webhook notification failed HMAC verification",
                psp_references=rejected,
                detail={"reason": reason, "rejected": rejected},
            )

        if audit is not None:
            audit.log_verification(
                "notification",
                AuditOutcome.SUCCESS,
                live=webhook.is_live(),
                psp_references=references,
            )
        return webhook

    return verified_notification_webhook


def signed_payload_dep(
    validator: HmacValidator,
    header_name: str = DEFAULT_SIGNATURE_HEADER,
    *,
    audit: AuditLogger | None = None,
) -> Callable[..., Awaitable[bytes]]:
    """Dependency: verify an out-of-band signature header over the raw body.

    Returns the untouched body bytes so the endpoint can decode them itself.
    """
    _require_fastapi()
    from fastapi import Request  # type: ignore[import-untyped]

    def _deny(reason: str) -> None:
        if audit is not None:
            audit.log_verification("payload", AuditOutcome.DENIED, reason=reason, header=header_name)

    async def verified_payload(request: Request) -> bytes:
        body = await request.body()
        signature = request.headers.get(header_name)
        if not signature:
            _deny("missing_signature")
            raise MissingSignatureError(
                f"Missing '{header_name}' header",
                detail={"header": header_name},
            )
        if not validator.validate_payload(body, signature):
            _deny("signature_mismatch")
            raise InvalidSignatureError(
                "Webhook payload failed HMAC verification",
                detail={"header": header_name},
            )
        if audit is not None:
            audit.log_verification("payload", AuditOutcome.SUCCESS, header=header_name)
        return body

    return verified_payload


__all__ = [
    "DEFAULT_SIGNATURE_HEADER",
    "notification_webhook_dep",
    "signed_payload_dep",
]
