"""Testing – property-based strategies for webhook tests."""
from mp_payhooks.testing.strategies import (
    amount_strategy,
    field_text_strategy,
    hex_key_strategy,
    key_value_strategy,
    notification_item_strategy,
    surrogate_text_strategy,
)

__all__ = [
    "amount_strategy",
    "field_text_strategy",
    "hex_key_strategy",
    "key_value_strategy",
    "notification_item_strategy",
    "surrogate_text_strategy",
]
