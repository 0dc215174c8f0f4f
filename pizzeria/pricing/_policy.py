"""
Pricing policy — tunable constants for the pricing service.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class PricingPolicy:
    """Bulk discount and demand-surge settings. Defaults match the shop's menu rules."""

    bulk_discount_threshold: int = 3
    bulk_discount_rate: Decimal = Decimal("0.05")

    surge_demand_ratio: Decimal = Decimal("0.8")
    surge_rate: Decimal = Decimal("0.10")
    reference_wait_minutes: Decimal = Decimal("30")
    wait_multiplier_cap: Decimal = Decimal("2")
    long_wait_threshold: Decimal = Decimal("1.5")
    long_wait_rate: Decimal = Decimal("0.05")


__all__ = ("PricingPolicy",)
