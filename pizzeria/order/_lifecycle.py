"""
Order lifecycle — pure status and payment transitions.

    PENDING → CONFIRMED → PREPARING → READY → OUT_FOR_DELIVERY → DELIVERED
                                           ↘ (pickup) ─────────→ DELIVERED
    CANCELLED from anything except OUT_FOR_DELIVERY and DELIVERED.

Every transition takes the current record and returns
``Ok(Transition(new_order, events))`` or ``Error(BusinessRuleViolationError)``.
The input record is never modified.

    from pizzeria import order as O

    step = O.confirm(order, at=now).then(lambda t: O.mark_payment_as_paid(t.order, at=now))
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta
from typing import Any

from kungfu import Result, Ok, Error

from pizzeria._errors import BusinessRuleViolationError
from pizzeria.order._policy import OrderPolicy
from pizzeria.order._types import (
    DeliveryType,
    Order,
    OrderStatus,
    OrderStatusChanged,
    PaymentStatus,
    PaymentStatusChanged,
    Transition,
    new_event_id,
)

type TransitionResult = Result[Transition, BusinessRuleViolationError]

_NOT_CANCELLABLE = frozenset({OrderStatus.OUT_FOR_DELIVERY, OrderStatus.DELIVERED})

# ═══════════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════════


def _violation(order: Order, rule: str, **details: Any) -> Error[BusinessRuleViolationError]:
    return Error(
        BusinessRuleViolationError.of(
            rule,
            order_id=order.id,
            status=str(order.status),
            payment_status=str(order.payment_status),
            **details,
        )
    )


def _change_status(order: Order, new_status: OrderStatus, at: datetime, **changes: Any) -> Ok[Transition]:
    event = OrderStatusChanged(
        event_id=new_event_id(),
        order_id=order.id,
        previous_status=order.status,
        new_status=new_status,
        occurred_on=at,
    )
    updated = replace(order, status=new_status, updated_at=at, **changes)
    return Ok(Transition(order=updated, events=(event,)))


def _change_payment(order: Order, new_status: PaymentStatus, at: datetime) -> Ok[Transition]:
    event = PaymentStatusChanged(
        event_id=new_event_id(),
        order_id=order.id,
        previous_status=order.payment_status,
        new_status=new_status,
        occurred_on=at,
    )
    updated = replace(order, payment_status=new_status, updated_at=at)
    return Ok(Transition(order=updated, events=(event,)))


def estimate_delivery_time(order: Order, at: datetime, policy: OrderPolicy = OrderPolicy()) -> datetime:
    """Preparation per pizza, plus travel for deliveries, plus a fixed buffer."""
    minutes = policy.preparation_minutes_per_pizza * order.pizza_count + policy.buffer_minutes
    if order.delivery_type == DeliveryType.DELIVERY:
        minutes += policy.delivery_minutes
    return at + timedelta(minutes=minutes)


# ═══════════════════════════════════════════════════════════════════════════════
# Status Transitions
# ═══════════════════════════════════════════════════════════════════════════════


def confirm(order: Order, *, at: datetime, policy: OrderPolicy = OrderPolicy()) -> TransitionResult:
    """PENDING → CONFIRMED, stamping the estimated delivery time."""
    if order.status != OrderStatus.PENDING:
        return _violation(order, "Order can only be confirmed from pending status")

    return _change_status(
        order,
        OrderStatus.CONFIRMED,
        at,
        estimated_delivery_time=estimate_delivery_time(order, at, policy),
    )


def start_preparation(order: Order, *, at: datetime) -> TransitionResult:
    if order.status != OrderStatus.CONFIRMED:
        return _violation(order, "Order must be confirmed before preparation can start")

    if order.payment_status != PaymentStatus.PAID:
        return _violation(order, "Order must be paid before preparation can start")

    return _change_status(order, OrderStatus.PREPARING, at)


def mark_as_ready(order: Order, *, at: datetime) -> TransitionResult:
    if order.status != OrderStatus.PREPARING:
        return _violation(order, "Order must be in preparation to mark as ready")

    return _change_status(order, OrderStatus.READY, at)


def start_delivery(order: Order, *, at: datetime) -> TransitionResult:
    """READY → OUT_FOR_DELIVERY. Pickup orders fail in every state."""
    if order.delivery_type == DeliveryType.PICKUP:
        return _violation(order, "Pickup orders cannot be delivered")

    if order.status != OrderStatus.READY:
        return _violation(order, "Order must be ready before delivery can start")

    return _change_status(order, OrderStatus.OUT_FOR_DELIVERY, at)


def mark_as_delivered(order: Order, *, at: datetime) -> TransitionResult:
    """Pickup: READY → DELIVERED. Delivery: OUT_FOR_DELIVERY → DELIVERED."""
    if order.delivery_type == DeliveryType.PICKUP and order.status != OrderStatus.READY:
        return _violation(order, "Pickup order must be ready to mark as delivered")

    if order.delivery_type == DeliveryType.DELIVERY and order.status != OrderStatus.OUT_FOR_DELIVERY:
        return _violation(order, "Delivery order must be out for delivery to mark as delivered")

    return _change_status(order, OrderStatus.DELIVERED, at)


def cancel(order: Order, *, at: datetime) -> TransitionResult:
    if order.status in _NOT_CANCELLABLE:
        return _violation(order, "Cannot cancel order that is already delivered or out for delivery")

    return _change_status(order, OrderStatus.CANCELLED, at)


# ═══════════════════════════════════════════════════════════════════════════════
# Payment Transitions
# ═══════════════════════════════════════════════════════════════════════════════


def mark_payment_as_paid(order: Order, *, at: datetime) -> TransitionResult:
    return _change_payment(order, PaymentStatus.PAID, at)


def mark_payment_as_failed(order: Order, *, at: datetime) -> TransitionResult:
    return _change_payment(order, PaymentStatus.FAILED, at)


def refund_payment(order: Order, *, at: datetime) -> TransitionResult:
    """PAID → REFUNDED, only once the order is cancelled."""
    if order.status != OrderStatus.CANCELLED:
        return _violation(order, "Only cancelled orders can be refunded")

    if order.payment_status != PaymentStatus.PAID:
        return _violation(order, "Only paid orders can be refunded")

    return _change_payment(order, PaymentStatus.REFUNDED, at)


__all__ = (
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
