"""
Placement types — requests and outcomes of the order use cases.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime

from pizzeria._errors import NotFoundError, PersistenceError, ValidationError, BusinessRuleViolationError
from pizzeria._types import ID, freeze
from pizzeria.events import DispatchReport
from pizzeria.menu import PizzaCrust, PizzaSize
from pizzeria.order import Address, CustomerInfo, DeliveryType, Order, OrderEvent
from pizzeria.pricing import CustomerType, SeasonalModifier

# ═══════════════════════════════════════════════════════════════════════════════
# Requests
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ItemRequest:
    recipe_id: ID
    size: PizzaSize
    crust: PizzaCrust
    quantity: int = 1
    custom_ingredients: Mapping[ID, int] = field(default_factory=dict, hash=False)
    special_instructions: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "custom_ingredients", freeze(self.custom_ingredients))


@dataclass(frozen=True, slots=True)
class PlaceOrderRequest:
    """
    Everything needed to place an order.

    Registered customers pass ``customer_id`` and are looked up in the
    customer directory; guests pass ``customer_info`` instead.
    """

    items: Sequence[ItemRequest]
    delivery_type: DeliveryType
    customer_id: ID | None = None
    customer_info: CustomerInfo | None = None
    delivery_address: Address | None = None
    special_instructions: str | None = None
    requested_delivery_time: datetime | None = None
    customer_type: CustomerType = CustomerType.REGULAR
    is_happy_hour: bool = False
    seasonal_modifiers: tuple[SeasonalModifier, ...] = ()


# ═══════════════════════════════════════════════════════════════════════════════
# Outcomes
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class OrderUpdate:
    """Persisted order state, the events behind it, and how their dispatch went."""

    order: Order
    events: tuple[OrderEvent, ...]
    dispatch: DispatchReport


@dataclass(frozen=True, slots=True)
class PlacedOrder(OrderUpdate):
    """Outcome of a successful ``place_order``."""


type PlacementError = ValidationError | NotFoundError | PersistenceError
type UpdateError = BusinessRuleViolationError | NotFoundError | PersistenceError


__all__ = (
    "ItemRequest",
    "PlaceOrderRequest",
    "OrderUpdate",
    "PlacedOrder",
    "PlacementError",
    "UpdateError",
)
