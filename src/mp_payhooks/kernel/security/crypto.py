"""Kernel security – timing-safe comparison helpers."""
from __future__ import annotations

import hmac


def constant_time_equals(expected: str, supplied: object) -> bool:
    """Compare two signature strings in time independent of their contents.

    ``hmac.compare_digest`` rejects non-ASCII ``str`` arguments, so both sides
    are compared as UTF-8 bytes. Anything that is not a ``str``, or a ``str``
    that cannot be UTF-8 encoded (lone surrogates), never matches.
    """
    if not isinstance(supplied, str):
        return False
    try:
        supplied_bytes = supplied.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return hmac.compare_digest(expected.encode("utf-8"), supplied_bytes)


__all__ = ["constant_time_equals"]
