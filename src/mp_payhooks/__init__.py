"""
mp_payhooks – HMAC authentication for payment-processor webhooks.

Import path convention::

    from mp_payhooks.webhooks import HmacValidator, parse_webhook
    from mp_payhooks.kernel.errors import SerializationError
    from mp_payhooks.adapters.fastapi import FastAPIExceptionMapper
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
