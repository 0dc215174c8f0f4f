"""
Order — immutable order record and its lifecycle.

    from pizzeria import order as O

    created = O.create_order(draft, at=now)
    confirmed = created.then(lambda t: O.confirm(t.order, at=now))
"""

from __future__ import annotations

from pizzeria.order._types import (
    OrderStatus,
    PaymentStatus,
    DeliveryType,
    TERMINAL_STATUSES,
    Address,
    CustomerInfo,
    OrderItem,
    Order,
    new_event_id,
    OrderCreated,
    OrderStatusChanged,
    PaymentStatusChanged,
    OrderEvent,
    Transition,
)
from pizzeria.order._policy import OrderPolicy
from pizzeria.order._create import OrderDraft, order_item, create_order
from pizzeria.order._lifecycle import (
    TransitionResult,
    estimate_delivery_time,
    confirm,
    start_preparation,
    mark_as_ready,
    start_delivery,
    mark_as_delivered,
    cancel,
    mark_payment_as_paid,
    mark_payment_as_failed,
    refund_payment,
)

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
    "OrderPolicy",
    "OrderDraft",
    "order_item",
    "create_order",
    "TransitionResult",
    "estimate_delivery_time",
    "confirm",
    "start_preparation",
    "mark_as_ready",
    "start_delivery",
    "mark_as_delivered",
    "cancel",
    "mark_payment_as_paid",
    "mark_payment_as_failed",
    "refund_payment",
)
