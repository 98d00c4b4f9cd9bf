"""Unit tests for structured logging: filter, factory, audit logger."""

from __future__ import annotations

import io
import json
import logging
from typing import Any

import pytest
import structlog
from structlog.testing import capture_logs

from mp_payhooks.observability import (
    AuditLogger,
    AuditOutcome,
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)


class _RecordingLogger:
    """Minimal structlog-style logger that records calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def warning(self, event: str, **kw: Any) -> None:
        self.calls.append(("warning", event, kw))


@pytest.fixture()
def json_stream():
    """Configure JSON logging into a buffer; restore global logging afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    JsonLoggerFactory.configure(level=logging.INFO)
    stream = io.StringIO()
    root.handlers[0].setStream(stream)
    yield stream
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


# ---------------------------------------------------------------------------
# SensitiveFieldsFilter
# ---------------------------------------------------------------------------


class TestSensitiveFieldsFilter:
    def test_redacts_default_fields(self) -> None:
        f = SensitiveFieldsFilter()
        result = f.redact({"hmac_key": "AA", "hmacSignature": "sig", "psp_reference": "8515"})
        assert result == {"hmac_key": "[REDACTED]", "hmacSignature": "[REDACTED]", "psp_reference": "8515"}

    def test_custom_fields(self) -> None:
        f = SensitiveFieldsFilter(frozenset({"merchant_reference"}))
        assert f.redact({"merchant_reference": "x", "hmac_key": "y"}) == {
            "merchant_reference": "[REDACTED]",
            "hmac_key": "y",
        }

    def test_redact_deep(self) -> None:
        f = SensitiveFieldsFilter()
        data = {"item": {"additionalData": {"hmacSignature": "sig", "cardSummary": "1111"}}}
        assert f.redact_deep(data) == {
            "item": {"additionalData": {"hmacSignature": "[REDACTED]", "cardSummary": "1111"}}
        }

    def test_original_not_mutated(self) -> None:
        data = {"signature": "sig"}
        SensitiveFieldsFilter().redact_deep(data)
        assert data == {"signature": "sig"}

    def test_acts_as_structlog_processor(self) -> None:
        f = SensitiveFieldsFilter()
        out = f(None, "info", {"event": "e", "secret_key": "s"})
        assert out == {"event": "e", "secret_key": "[REDACTED]"}


# ---------------------------------------------------------------------------
# get_logger
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        log = get_logger("webhooks", service="payments")
        with capture_logs() as logs:
            log.info("webhook.received", items=2)
        assert logs == [{"event": "webhook.received", "log_level": "info", "service": "payments", "items": 2}]


# ---------------------------------------------------------------------------
# JsonLoggerFactory
# ---------------------------------------------------------------------------


class TestJsonLoggerFactory:
    def test_renders_json_with_redaction(self, json_stream: io.StringIO) -> None:
        get_logger("payhooks.test").warning(
            "hmac_validator.configured",
            hmac_key="44782DEF",
            nested={"signature": "c2ln"},
            key_bytes=32,
        )
        line = json_stream.getvalue().strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "hmac_validator.configured"
        assert record["level"] == "warning"
        assert record["logger"] == "payhooks.test"
        assert record["hmac_key"] == "[REDACTED]"
        assert record["nested"] == {"signature": "[REDACTED]"}
        assert record["key_bytes"] == 32
        assert "timestamp" in record
        assert "44782DEF" not in json_stream.getvalue()

    def test_level_filters(self, json_stream: io.StringIO) -> None:
        get_logger("payhooks.test").debug("hmac_validator.rejected")
        assert json_stream.getvalue() == ""

    def test_single_root_handler(self, json_stream: io.StringIO) -> None:
        JsonLoggerFactory.configure()
        assert len(logging.getLogger().handlers) == 1


# ---------------------------------------------------------------------------
# AuditLogger
# ---------------------------------------------------------------------------


class TestAuditLogger:
    def test_log_verification_success(self) -> None:
        rec = _RecordingLogger()
        AuditLogger(service="checkout", logger=rec).log_verification(
            "notification",
            AuditOutcome.SUCCESS,
            live=False,
            psp_references=["8515131751004933"],
        )
        [(level, event, kw)] = rec.calls
        assert level == "warning"
        assert event == "audit.webhook_verification"
        assert kw["service"] == "checkout"
        assert kw["method"] == "notification"
        assert kw["outcome"] == "success"
        assert kw["live"] is False
        assert kw["psp_references"] == ["8515131751004933"]
        assert "reason" not in kw
        assert "timestamp" in kw

    def test_log_verification_denied_with_reason_and_extra(self) -> None:
        rec = _RecordingLogger()
        AuditLogger(logger=rec).log_verification(
            "payload", AuditOutcome.DENIED, reason="signature_mismatch", header="HmacSignature"
        )
        _, _, kw = rec.calls[0]
        assert kw["outcome"] == "denied"
        assert kw["reason"] == "signature_mismatch"
        assert kw["header"] == "HmacSignature"
        assert kw["service"] == "unknown"
        assert "psp_references" not in kw

    def test_string_outcome(self) -> None:
        rec = _RecordingLogger()
        AuditLogger(logger=rec).log_verification("key_value", "custom")
        assert rec.calls[0][2]["outcome"] == "custom"

    def test_outcomes_are_accept_or_deny(self) -> None:
        assert [o.value for o in AuditOutcome] == ["success", "denied"]

    def test_log_security_event(self) -> None:
        rec = _RecordingLogger()
        AuditLogger(service="svc", logger=rec).log_security_event("key_rotated", "new HMAC key loaded", key_bytes=32)
        [(_, event, kw)] = rec.calls
        assert event == "audit.key_rotated"
        assert kw["event_type"] == "key_rotated"
        assert kw["description"] == "new HMAC key loaded"
        assert kw["key_bytes"] == 32

    def test_default_logger_is_structlog(self) -> None:
        with capture_logs() as logs:
            AuditLogger(service="svc").log_verification("notification", AuditOutcome.DENIED)
        assert logs[0]["event"] == "audit.webhook_verification"
        assert logs[0]["log_level"] == "warning"
