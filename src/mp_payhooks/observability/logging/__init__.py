"""Observability – structured logging helpers."""
from mp_payhooks.observability.logging.audit import AuditLogger, AuditOutcome
from mp_payhooks.observability.logging.factory import JsonLoggerFactory
from mp_payhooks.observability.logging.filters import SensitiveFieldsFilter
from mp_payhooks.observability.logging.processors import get_logger

__all__ = [
    "AuditLogger",
    "AuditOutcome",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
