"""Kernel security – default sensitive fields redacted from logs."""
from __future__ import annotations

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "secret", "token", "api_key", "apikey", "authorization",
    "hmac_key", "hmackey", "hmacsignature", "hmac_signature", "signature",
    "secret_key", "card_number", "cvv",
})

__all__ = ["DEFAULT_SENSITIVE_FIELDS"]
