"""Observability – AuditLogger.

A dedicated structured-log sink for webhook authentication decisions.
"""
from __future__ import annotations

import datetime
from enum import Enum
from typing import Any

from mp_payhooks.observability.logging.processors import get_logger


class AuditOutcome(str, Enum):
    """Outcome of a webhook verification: accepted or rejected."""

    SUCCESS = "success"
    DENIED = "denied"


class AuditLogger:
    """Dedicated structured-log sink for security-sensitive actions.

    All audit entries are emitted at ``WARNING`` level so they pass through
    even restrictive log-level filters.

    Parameters
    ----------
    service:
        Logical service name injected into every audit entry.
    logger:
        Underlying structlog-style logger. Defaults to ``get_logger("audit")``.
    """

    def __init__(
        self,
        service: str = "unknown",
        logger: Any = None,
    ) -> None:
        self._service = service
        self._log = logger if logger is not None else get_logger("audit")

    def log_verification(
        self,
        method: str,
        outcome: AuditOutcome | str,
        *,
        live: bool | None = None,
        psp_references: list[str] | None = None,
        reason: str | None = None,
        **extra: Any,
    ) -> None:
        """Record the outcome of a webhook signature check.

        Parameters
        ----------
        method:
            Verification path used: ``"notification"``, ``"payload"`` or
            ``"key_value"``.
        outcome:
            ``SUCCESS`` when the webhook was accepted, ``DENIED`` otherwise.
        live:
            Whether the envelope claimed to come from the live environment.
        psp_references:
            Processor references of the items involved.
        reason:
            Short machine-readable rejection reason.
        """
        entry: dict[str, Any] = {
            "event": "audit.webhook_verification",
            "service": self._service,
            "method": method,
            "outcome": outcome.value if isinstance(outcome, AuditOutcome) else str(outcome),
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            **extra,
        }
        if live is not None:
            entry["live"] = live
        if psp_references:
            entry["psp_references"] = psp_references
        if reason is not None:
            entry["reason"] = reason
        self._emit(entry)

    def log_security_event(
        self,
        event_type: str,
        description: str = "",
        **extra: Any,
    ) -> None:
        """Record a generic security event (key rotation, startup rejection, …)."""
        entry: dict[str, Any] = {
            "event": f"audit.{event_type}",
            "service": self._service,
            "event_type": event_type,
            "description": description,
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            **extra,
        }
        self._emit(entry)

    def _emit(self, entry: dict[str, Any]) -> None:
        # structlog bound loggers accept event as first positional arg
        event = entry.pop("event", "audit")
        self._log.warning(event, **entry)


__all__ = ["AuditLogger", "AuditOutcome"]
