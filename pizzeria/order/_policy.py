"""
Order policy — tax, fees, timing, and input limits.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class OrderPolicy:
    """
    Shop rules applied when an order is created and confirmed.

    Example:
        late_night = OrderPolicy(delivery_fee=Decimal("7.50"), buffer_minutes=20)
    """

    tax_rate: Decimal = Decimal("0.10")
    delivery_fee: Decimal = Decimal("5")

    preparation_minutes_per_pizza: int = 20
    delivery_minutes: int = 30
    buffer_minutes: int = 10

    max_item_quantity: int = 20
    max_instructions_length: int = 500


__all__ = ("OrderPolicy",)
