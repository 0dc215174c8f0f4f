"""
Pricing types — context, seasonal modifiers, rule variants.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import StrEnum

from pizzeria._types import ID, freeze, require_aware
from pizzeria.menu import PizzaSize
from pizzeria.money import Money

# ═══════════════════════════════════════════════════════════════════════════════
# Context — Ephemeral Input
# ═══════════════════════════════════════════════════════════════════════════════


class CustomerType(StrEnum):
    REGULAR = "REGULAR"
    VIP = "VIP"
    STAFF = "STAFF"


@dataclass(frozen=True, slots=True)
class SeasonalModifier:
    """
    Time-boxed price multiplier.

    Applies when ``valid_from <= order_time <= valid_to`` and, if
    ``applicable_to_sizes`` is set, the ordered size is listed.
    Window bounds must be timezone-aware.
    """

    name: str
    multiplier: Decimal
    valid_from: datetime
    valid_to: datetime
    applicable_to_sizes: frozenset[PizzaSize] | None = None

    def __post_init__(self) -> None:
        require_aware(self.valid_from, "valid_from")
        require_aware(self.valid_to, "valid_to")

    def applies_to(self, order_time: datetime, size: PizzaSize) -> bool:
        in_window = self.valid_from <= order_time <= self.valid_to
        size_ok = self.applicable_to_sizes is None or size in self.applicable_to_sizes
        return in_window and size_ok


@dataclass(frozen=True, slots=True)
class PricingContext:
    """Everything the rules need to adjust one pizza's price. Never persisted."""

    size: PizzaSize
    order_time: datetime
    quantity: int = 1
    customer_type: CustomerType = CustomerType.REGULAR
    is_happy_hour: bool = False
    custom_ingredients: Mapping[ID, int] = field(default_factory=dict, hash=False)
    seasonal_modifiers: tuple[SeasonalModifier, ...] = ()

    def __post_init__(self) -> None:
        require_aware(self.order_time, "order_time")
        object.__setattr__(self, "custom_ingredients", freeze(self.custom_ingredients))


# ═══════════════════════════════════════════════════════════════════════════════
# Rules — Tagged Variants
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class SizeMultiplier:
    """× per-size factor (SMALL 0.8, MEDIUM 1.0, LARGE 1.3, XLARGE 1.6)."""


@dataclass(frozen=True, slots=True)
class VipDiscount:
    """Discount for VIP customers only."""

    rate: Decimal = Decimal("0.10")


@dataclass(frozen=True, slots=True)
class HappyHourDiscount:
    """Discount while the context says it is happy hour."""

    rate: Decimal = Decimal("0.15")


@dataclass(frozen=True, slots=True)
class SeasonalAdjustment:
    """Every applicable seasonal modifier, compounded in declared order."""


type PriceRule = SizeMultiplier | VipDiscount | HappyHourDiscount | SeasonalAdjustment


# ═══════════════════════════════════════════════════════════════════════════════
# Service Inputs / Outputs
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ItemPrice:
    unit_price: Money
    total_price: Money


@dataclass(frozen=True, slots=True)
class DemandMetrics:
    current_orders: int
    average_orders_this_hour: float
    kitchen_capacity: int
    estimated_wait_minutes: float


@dataclass(frozen=True, slots=True)
class MarketConditions:
    seasonal_demand: float
    vip_customer_ratio: float
    is_happy_hour: bool
    competitor_pricing: tuple[Money, ...] = ()
    market_volatility: float = 0.0


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "CustomerType",
    "SeasonalModifier",
    "PricingContext",
    "SizeMultiplier",
    "VipDiscount",
    "HappyHourDiscount",
    "SeasonalAdjustment",
    "PriceRule",
    "ItemPrice",
    "DemandMetrics",
    "MarketConditions",
)
