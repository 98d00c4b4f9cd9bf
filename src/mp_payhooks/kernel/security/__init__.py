"""Kernel security – sensitive log fields and timing-safe comparison."""
from mp_payhooks.kernel.security.crypto import constant_time_equals
from mp_payhooks.kernel.security.pii import DEFAULT_SENSITIVE_FIELDS

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "constant_time_equals",
]
