"""
Order types — statuses, value objects, the order record, domain events.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from pizzeria._types import ID, freeze
from pizzeria.menu import PizzaCrust, PizzaSize
from pizzeria.money import Currency, Money

# ═══════════════════════════════════════════════════════════════════════════════
# Enumerations
# ═══════════════════════════════════════════════════════════════════════════════


class OrderStatus(StrEnum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    PREPARING = "PREPARING"
    READY = "READY"
    OUT_FOR_DELIVERY = "OUT_FOR_DELIVERY"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class PaymentStatus(StrEnum):
    PENDING = "PENDING"
    PAID = "PAID"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"


class DeliveryType(StrEnum):
    PICKUP = "PICKUP"
    DELIVERY = "DELIVERY"


TERMINAL_STATUSES: frozenset[OrderStatus] = frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED})

# ═══════════════════════════════════════════════════════════════════════════════
# Value Objects
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Address:
    street: str
    city: str
    postal_code: str
    country: str
    additional_info: str | None = None


@dataclass(frozen=True, slots=True)
class CustomerInfo:
    name: str
    phone: str
    email: str | None = None


@dataclass(frozen=True, slots=True)
class OrderItem:
    """One order line: a configured pizza, its quantity, and the prices it was sold at."""

    recipe_id: ID
    size: PizzaSize
    crust: PizzaCrust
    quantity: int
    unit_price: Money
    total_price: Money
    custom_ingredients: Mapping[ID, int] = field(default_factory=dict, hash=False)
    special_instructions: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "custom_ingredients", freeze(self.custom_ingredients))


# ═══════════════════════════════════════════════════════════════════════════════
# Order Record
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Order:
    """
    Order state at one point of its lifecycle.

    Immutable: transitions in ``pizzeria.order`` return a new record together
    with the events they produced. Amounts are fixed at creation:
    ``grand_total = total_amount + tax + delivery_fee``.
    """

    id: ID
    customer_info: CustomerInfo
    items: tuple[OrderItem, ...]
    delivery_type: DeliveryType
    total_amount: Money
    tax: Money
    delivery_fee: Money
    grand_total: Money
    created_at: datetime
    updated_at: datetime
    order_number: str | None = None
    customer_id: ID | None = None
    delivery_address: Address | None = None
    special_instructions: str | None = None
    requested_delivery_time: datetime | None = None
    status: OrderStatus = OrderStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    estimated_delivery_time: datetime | None = None

    @property
    def currency(self) -> Currency:
        return self.total_amount.currency

    @property
    def pizza_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES


# ═══════════════════════════════════════════════════════════════════════════════
# Domain Events
# ═══════════════════════════════════════════════════════════════════════════════


def new_event_id() -> ID:
    return str(uuid.uuid4())


@dataclass(frozen=True, slots=True)
class OrderCreated:
    event_id: ID
    order_id: ID
    customer_id: ID | None
    total_amount: Money
    occurred_on: datetime
    event_version: int = 1


@dataclass(frozen=True, slots=True)
class OrderStatusChanged:
    event_id: ID
    order_id: ID
    previous_status: OrderStatus
    new_status: OrderStatus
    occurred_on: datetime
    event_version: int = 1


@dataclass(frozen=True, slots=True)
class PaymentStatusChanged:
    event_id: ID
    order_id: ID
    previous_status: PaymentStatus
    new_status: PaymentStatus
    occurred_on: datetime
    event_version: int = 1


type OrderEvent = OrderCreated | OrderStatusChanged | PaymentStatusChanged


@dataclass(frozen=True, slots=True)
class Transition:
    """New order state plus the events that produced it."""

    order: Order
    events: tuple[OrderEvent, ...] = ()


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "OrderStatus",
    "PaymentStatus",
    "DeliveryType",
    "TERMINAL_STATUSES",
    "Address",
    "CustomerInfo",
    "OrderItem",
    "Order",
    "new_event_id",
    "OrderCreated",
    "OrderStatusChanged",
    "PaymentStatusChanged",
    "OrderEvent",
    "Transition",
)
