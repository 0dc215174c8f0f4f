"""
Order creation — validated factory for new orders.

    from pizzeria import order as O

    draft = O.OrderDraft(
        id=order_id,
        customer_info=O.CustomerInfo(name="Ada", phone="+1 555 0100"),
        items=(item,),
        delivery_type=O.DeliveryType.PICKUP,
    )
    match O.create_order(draft, at=now):
        case Ok(O.Transition(order=order, events=events)):
            ...
        case Error(e):
            ...
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from kungfu import Result, Ok, Error

from pizzeria._errors import ValidationError
from pizzeria._types import ID
from pizzeria.menu import Pizza
from pizzeria.money import Money, total
from pizzeria.order._policy import OrderPolicy
from pizzeria.order._types import (
    Address,
    CustomerInfo,
    DeliveryType,
    Order,
    OrderCreated,
    OrderItem,
    Transition,
    new_event_id,
)

# ═══════════════════════════════════════════════════════════════════════════════
# Draft
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class OrderDraft:
    """Unvalidated order input."""

    id: ID
    customer_info: CustomerInfo
    items: Sequence[OrderItem]
    delivery_type: DeliveryType
    delivery_address: Address | None = None
    customer_id: ID | None = None
    order_number: str | None = None
    special_instructions: str | None = None
    requested_delivery_time: datetime | None = None


def order_item(pizza: Pizza, quantity: int, unit_price: Money, total_price: Money) -> OrderItem:
    """Order line for a configured pizza."""
    return OrderItem(
        recipe_id=pizza.recipe_id,
        size=pizza.size,
        crust=pizza.crust,
        quantity=quantity,
        unit_price=unit_price,
        total_price=total_price,
        custom_ingredients=dict(pizza.custom_ingredients),
        special_instructions=pizza.special_instructions,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Validation
# ═══════════════════════════════════════════════════════════════════════════════


def _validate(draft: OrderDraft, policy: OrderPolicy) -> ValidationError | None:
    if not draft.customer_info.name.strip():
        return ValidationError("Customer name is required", "customer_info.name")

    if not draft.customer_info.phone.strip():
        return ValidationError("Customer phone is required", "customer_info.phone")

    if not draft.items:
        return ValidationError("Order must contain at least one item", "items")

    for item in draft.items:
        if item.quantity <= 0:
            return ValidationError("Item quantity must be positive", "items.quantity")
        if item.quantity > policy.max_item_quantity:
            return ValidationError(
                f"Item quantity cannot exceed {policy.max_item_quantity}", "items.quantity"
            )

    currency = draft.items[0].total_price.currency
    if any(
        item.unit_price.currency != currency or item.total_price.currency != currency
        for item in draft.items
    ):
        return ValidationError("All order items must use the same currency", "items")

    if draft.delivery_type not in DeliveryType:
        return ValidationError(f"Invalid delivery type: {draft.delivery_type}", "delivery_type")

    if draft.delivery_type == DeliveryType.DELIVERY:
        address = draft.delivery_address
        if address is None:
            return ValidationError(
                "Delivery address is required for delivery orders", "delivery_address"
            )
        for name in ("street", "city", "postal_code", "country"):
            if not getattr(address, name).strip():
                return ValidationError(f"Delivery address {name} is required", f"delivery_address.{name}")

    instructions = draft.special_instructions
    if instructions and len(instructions) > policy.max_instructions_length:
        return ValidationError(
            f"Special instructions too long (max {policy.max_instructions_length} characters)",
            "special_instructions",
        )

    return None


# ═══════════════════════════════════════════════════════════════════════════════
# Charges
# ═══════════════════════════════════════════════════════════════════════════════


def _charges(
    items: Sequence[OrderItem],
    delivery_type: DeliveryType,
    policy: OrderPolicy,
) -> Result[tuple[Money, Money, Money, Money], ValidationError]:
    """(subtotal, tax, delivery fee, grand total) in the items' currency."""
    currency = items[0].total_price.currency
    fee = policy.delivery_fee if delivery_type == DeliveryType.DELIVERY else 0

    return total([item.total_price for item in items], currency).then(
        lambda subtotal: subtotal.multiply(policy.tax_rate).then(
            lambda tax: Money.create(fee, currency).then(
                lambda delivery_fee: subtotal.add(tax)
                .then(delivery_fee.add)
                .map(lambda grand_total: (subtotal, tax, delivery_fee, grand_total))
            )
        )
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Factory
# ═══════════════════════════════════════════════════════════════════════════════


def create_order(
    draft: OrderDraft,
    *,
    at: datetime,
    policy: OrderPolicy = OrderPolicy(),
) -> Result[Transition, ValidationError]:
    """
    Validate a draft and build a PENDING order.

    Emits ``OrderCreated`` carrying the grand total. Pickup orders keep no
    delivery address even if one was supplied.
    """
    if (invalid := _validate(draft, policy)) is not None:
        return Error(invalid)

    match _charges(draft.items, draft.delivery_type, policy):
        case Ok((subtotal, tax, delivery_fee, grand_total)):
            order = Order(
                id=draft.id,
                order_number=draft.order_number,
                customer_id=draft.customer_id,
                customer_info=draft.customer_info,
                items=tuple(draft.items),
                delivery_type=draft.delivery_type,
                delivery_address=(
                    draft.delivery_address if draft.delivery_type == DeliveryType.DELIVERY else None
                ),
                special_instructions=draft.special_instructions,
                requested_delivery_time=draft.requested_delivery_time,
                total_amount=subtotal,
                tax=tax,
                delivery_fee=delivery_fee,
                grand_total=grand_total,
                created_at=at,
                updated_at=at,
            )
            created = OrderCreated(
                event_id=new_event_id(),
                order_id=order.id,
                customer_id=order.customer_id,
                total_amount=order.grand_total,
                occurred_on=at,
            )
            return Ok(Transition(order=order, events=(created,)))
        case Error(e):
            return Error(e)


__all__ = (
    "OrderDraft",
    "order_item",
    "create_order",
)
