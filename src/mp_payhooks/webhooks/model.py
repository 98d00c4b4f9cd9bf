"""Webhooks – envelope, notification items, amounts and event codes.

The model mirrors the processor's JSON body::

    {"live": "false",
     "notificationItems": [{"NotificationRequestItem": {...}}]}

``live`` and ``success`` are string literals on the wire and stay strings
here; use :meth:`Webhook.is_live` and
:meth:`NotificationRequestItem.has_well_formed_success` rather than
coercing them.
"""
from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping, Sequence
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Final

from mp_payhooks.kernel.errors import SerializationError
from mp_payhooks.kernel.types import Currency, Money
from mp_payhooks.observability.logging import get_logger

HMAC_SIGNATURE_KEY: Final = "hmacSignature"
TRUE_LITERAL: Final = "true"
FALSE_LITERAL: Final = "false"
_BOOLEAN_LITERALS: Final = frozenset({TRUE_LITERAL, FALSE_LITERAL})

_TYPE_NAMES: Final[dict[type, str]] = {
    str: "string",
    int: "integer",
    list: "array",
    dict: "object",
}

_log = get_logger(__name__)


class EventCode(str, Enum):
    """Event codes known to this library.

    :attr:`NotificationRequestItem.event_code` stays an open string so that
    codes introduced by the processor later still decode; use
    :meth:`EventCode.parse` for exhaustive matching.
    """

    ACH_NOTIFICATION_OF_CHANGE = "ACH_NOTIFICATION_OF_CHANGE"
    AUTHORISATION = "AUTHORISATION"
    AUTHORISATION_ADJUSTMENT = "AUTHORISATION_ADJUSTMENT"
    AUTORESCUE = "AUTORESCUE"
    AUTORESCUE_NEXT_ATTEMPT = "AUTORESCUE_NEXT_ATTEMPT"
    CANCELLATION = "CANCELLATION"
    CANCEL_AUTORESCUE = "CANCEL_AUTORESCUE"
    CANCEL_OR_REFUND = "CANCEL_OR_REFUND"
    CAPTURE = "CAPTURE"
    CAPTURE_FAILED = "CAPTURE_FAILED"
    CHARGEBACK = "CHARGEBACK"
    CHARGEBACK_REVERSED = "CHARGEBACK_REVERSED"
    EXPIRE = "EXPIRE"
    ISSUER_COMMENTS = "ISSUER_COMMENTS"
    HANDLED_EXTERNALLY = "HANDLED_EXTERNALLY"
    MANUAL_REVIEW_ACCEPT = "MANUAL_REVIEW_ACCEPT"
    MANUAL_REVIEW_REJECT = "MANUAL_REVIEW_REJECT"
    NOTIFICATION_OF_CHARGEBACK = "NOTIFICATION_OF_CHARGEBACK"
    NOTIFICATION_OF_FRAUD = "NOTIFICATION_OF_FRAUD"
    OFFER_CLOSED = "OFFER_CLOSED"
    PAIDOUT_REVERSED = "PAIDOUT_REVERSED"
    PAYOUT_DECLINE = "PAYOUT_DECLINE"
    PAYOUT_EXPIRE = "PAYOUT_EXPIRE"
    PAYOUT_THIRDPARTY = "PAYOUT_THIRDPARTY"
    POSTPONED_REFUND = "POSTPONED_REFUND"
    PREARBITRATION_LOST = "PREARBITRATION_LOST"
    PREARBITRATION_WON = "PREARBITRATION_WON"
    RECURRING_CONTRACT = "RECURRING_CONTRACT"
    REFUND = "REFUND"
    REFUND_FAILED = "REFUND_FAILED"
    REFUND_WITH_DATA = "REFUND_WITH_DATA"
    REFUNDED_REVERSED = "REFUNDED_REVERSED"
    REPORT_AVAILABLE = "REPORT_AVAILABLE"
    REQUEST_FOR_INFORMATION = "REQUEST_FOR_INFORMATION"
    SECOND_CHARGEBACK = "SECOND_CHARGEBACK"
    TECHNICAL_CANCEL = "TECHNICAL_CANCEL"
    VOID_PENDING_REFUND = "VOID_PENDING_REFUND"
    ORDER_CLOSED = "ORDER_CLOSED"
    ORDER_OPENED = "ORDER_OPENED"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, code: str) -> "EventCode | None":
        """Return the matching member, or ``None`` for an unknown code. Never raises."""
        try:
            return cls(code)
        except ValueError:
            return None


# ---------------------------------------------------------------------------
# Decoding helpers
# ---------------------------------------------------------------------------


def _field(
    data: Mapping[str, Any],
    key: str,
    expected: type,
    *,
    path: str,
    payload_type: str,
    required: bool = True,
) -> Any:
    value = data.get(key)
    where = f"{path}.{key}" if path else key
    if value is None:
        if required:
            raise SerializationError(
                f"Missing required field '{where}'",
                payload_type=payload_type,
                field=where,
            )
        return None
    # bool is an int subclass; the wire never uses JSON booleans for these fields
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise SerializationError(
            f"Field '{where}' must be a {_TYPE_NAMES.get(expected, expected.__name__)}, "
            f"got {type(value).__name__}",
            payload_type=payload_type,
            field=where,
        )
    return value


def _require_object(value: Any, *, path: str, payload_type: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise SerializationError(
            f"'{path or '$'}' must be a JSON object, got {type(value).__name__}",
            payload_type=payload_type,
            field=path or "$",
        )
    return value


# ---------------------------------------------------------------------------
# Amount
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True, slots=True)
class Amount:
    """Wire amount: integer minor units plus a currency code string.

    Kept separate from :class:`~mp_payhooks.kernel.types.Money`; use
    :meth:`to_money` for decimal arithmetic.
    """

    value: int
    currency: str

    def minor_units(self) -> int:
        return self.value

    def currency_string(self) -> str:
        return self.currency

    @classmethod
    def from_major_units(cls, major_units: int, currency: Currency) -> "Amount":
        """Create an amount from whole major units (e.g. 10 EUR -> 1000)."""
        return cls(major_units * currency.minor_unit_multiplier, currency.value)

    def to_money(self) -> Money:
        """Convert to :class:`Money`.

        Raises:
            ValidationError: the currency code is not a supported
                :class:`Currency`, or the value is negative.
        """
        return Money.from_minor_units(self.value, Currency.from_code(self.currency))

    @classmethod
    def from_dict(cls, data: Any, *, path: str = "amount") -> "Amount":
        obj = _require_object(data, path=path, payload_type="Amount")
        return cls(
            value=_field(obj, "value", int, path=path, payload_type="Amount"),
            currency=_field(obj, "currency", str, path=path, payload_type="Amount"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"value": self.value, "currency": self.currency}


# ---------------------------------------------------------------------------
# NotificationRequestItem
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True, slots=True)
class NotificationRequestItem:
    """One payment-lifecycle event delivered by the processor."""

    psp_reference: str
    merchant_account_code: str
    merchant_reference: str
    amount: Amount
    event_code: str
    success: str
    reason: str = ""
    payment_method: str = ""
    original_reference: str | None = None
    operations: tuple[str, ...] = ()
    additional_data: Mapping[str, Any] | None = None
    event_date: datetime | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.operations, tuple):
            object.__setattr__(self, "operations", tuple(self.operations))
        if self.additional_data is not None and not isinstance(self.additional_data, MappingProxyType):
            object.__setattr__(self, "additional_data", MappingProxyType(dict(self.additional_data)))

    def __hash__(self) -> int:
        # signed fields only; additional_data is an unhashable mapping
        return hash((
            self.psp_reference,
            self.original_reference,
            self.merchant_account_code,
            self.merchant_reference,
            self.amount,
            self.event_code,
            self.success,
        ))

    def is_success(self) -> bool:
        return self.success == TRUE_LITERAL

    def is_failure(self) -> bool:
        return self.success == FALSE_LITERAL

    def has_well_formed_success(self) -> bool:
        """``True`` when ``success`` is exactly ``"true"`` or ``"false"``."""
        return self.success in _BOOLEAN_LITERALS

    def hmac_signature(self) -> str | None:
        """Return ``additionalData["hmacSignature"]`` if it is a string."""
        value = self.get_additional_data(HMAC_SIGNATURE_KEY)
        return value if isinstance(value, str) else None

    def get_additional_data(self, key: str) -> Any:
        if self.additional_data is None:
            return None
        return self.additional_data.get(key)

    def known_event_code(self) -> EventCode | None:
        return EventCode.parse(self.event_code)

    @classmethod
    def from_dict(cls, data: Any, *, path: str = "NotificationRequestItem") -> "NotificationRequestItem":
        kind = "NotificationRequestItem"
        obj = _require_object(data, path=path, payload_type=kind)

        operations = _field(obj, "operations", list, path=path, payload_type=kind, required=False) or []
        for index, op in enumerate(operations):
            if not isinstance(op, str):
                raise SerializationError(
                    f"Field '{path}.operations[{index}]' must be a string, got {type(op).__name__}",
                    payload_type=kind,
                    field=f"{path}.operations[{index}]",
                )

        raw_date = _field(obj, "eventDate", str, path=path, payload_type=kind, required=False)
        event_date: datetime | None = None
        if raw_date is not None:
            try:
                event_date = datetime.fromisoformat(raw_date)
            except ValueError as exc:
                raise SerializationError(
                    f"Field '{path}.eventDate' is not an ISO 8601 timestamp: {raw_date!r}",
                    payload_type=kind,
                    field=f"{path}.eventDate",
                    cause=exc,
                ) from exc

        return cls(
            psp_reference=_field(obj, "pspReference", str, path=path, payload_type=kind),
            merchant_account_code=_field(obj, "merchantAccountCode", str, path=path, payload_type=kind),
            merchant_reference=_field(obj, "merchantReference", str, path=path, payload_type=kind),
            amount=Amount.from_dict(
                _field(obj, "amount", dict, path=path, payload_type=kind),
                path=f"{path}.amount",
            ),
            event_code=_field(obj, "eventCode", str, path=path, payload_type=kind),
            success=_field(obj, "success", str, path=path, payload_type=kind),
            reason=_field(obj, "reason", str, path=path, payload_type=kind),
            payment_method=_field(obj, "paymentMethod", str, path=path, payload_type=kind),
            original_reference=_field(obj, "originalReference", str, path=path, payload_type=kind, required=False),
            operations=tuple(operations),
            additional_data=_field(obj, "additionalData", dict, path=path, payload_type=kind, required=False),
            event_date=event_date,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "pspReference": self.psp_reference,
            "merchantAccountCode": self.merchant_account_code,
            "merchantReference": self.merchant_reference,
            "amount": self.amount.to_dict(),
            "eventCode": self.event_code,
            "reason": self.reason,
            "success": self.success,
            "paymentMethod": self.payment_method,
            "operations": list(self.operations),
        }
        if self.original_reference is not None:
            data["originalReference"] = self.original_reference
        if self.additional_data is not None:
            data["additionalData"] = dict(self.additional_data)
        if self.event_date is not None:
            data["eventDate"] = self.event_date.isoformat()
        return data


@dataclasses.dataclass(frozen=True, slots=True)
class NotificationItem:
    """Wrapper matching the wire key ``NotificationRequestItem``."""

    notification_request_item: NotificationRequestItem

    @classmethod
    def from_dict(cls, data: Any, *, path: str = "notificationItems[0]") -> "NotificationItem":
        obj = _require_object(data, path=path, payload_type="NotificationItem")
        inner_path = f"{path}.NotificationRequestItem"
        inner = obj.get("NotificationRequestItem")
        if inner is None:
            raise SerializationError(
                f"Missing required field '{inner_path}'",
                payload_type="NotificationItem",
                field=inner_path,
            )
        return cls(NotificationRequestItem.from_dict(inner, path=inner_path))

    def to_dict(self) -> dict[str, Any]:
        return {"NotificationRequestItem": self.notification_request_item.to_dict()}


# ---------------------------------------------------------------------------
# Webhook envelope
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True, slots=True)
class Webhook:
    """Envelope: environment flag plus the ordered notification items."""

    live: str
    notification_items: tuple[NotificationItem, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.notification_items, tuple):
            object.__setattr__(self, "notification_items", tuple(self.notification_items))

    def get_notification_items(self) -> list[NotificationRequestItem]:
        return [item.notification_request_item for item in self.notification_items]

    def is_live(self) -> bool:
        return self.live == TRUE_LITERAL

    def is_test(self) -> bool:
        return self.live == FALSE_LITERAL

    @classmethod
    def from_dict(cls, data: Any) -> "Webhook":
        obj = _require_object(data, path="", payload_type="Webhook")
        raw_items: Sequence[Any] = _field(
            obj, "notificationItems", list, path="", payload_type="Webhook", required=False
        ) or []
        return cls(
            live=_field(obj, "live", str, path="", payload_type="Webhook"),
            notification_items=tuple(
                NotificationItem.from_dict(raw, path=f"notificationItems[{index}]")
                for index, raw in enumerate(raw_items)
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "live": self.live,
            "notificationItems": [item.to_dict() for item in self.notification_items],
        }


def parse_webhook(payload: str | bytes | bytearray) -> Webhook:
    """Decode a raw webhook body into a :class:`Webhook`.

    Performs no signature validation; pass the items to
    :class:`~mp_payhooks.webhooks.validator.HmacValidator` before acting on them.

    Raises:
        SerializationError: the body is not JSON or does not match the
            processor's webhook shape.
    """
    try:
        data = json.loads(payload)
    except ValueError as exc:
        raise SerializationError(
            f"Webhook body is not valid JSON: {exc}",
            payload_type="Webhook",
            cause=exc,
        ) from exc
    webhook = Webhook.from_dict(data)
    _log.debug("webhook.parsed", live=webhook.live, items=len(webhook.notification_items))
    return webhook


__all__ = [
    "HMAC_SIGNATURE_KEY",
    "Amount",
    "EventCode",
    "NotificationItem",
    "NotificationRequestItem",
    "Webhook",
    "parse_webhook",
]
