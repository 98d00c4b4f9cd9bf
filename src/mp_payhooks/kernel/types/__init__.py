"""Kernel value-object types – public re-export surface.

Modules:
  currency.py – Currency
  money.py    – Money
"""

from mp_payhooks.kernel.types.currency import Currency
from mp_payhooks.kernel.types.money import Money

__all__ = [
    "Currency",
    "Money",
]
