"""
Placement — order use cases over catalog, repositories, and the event bus.

    from pizzeria import placement as PL

    service = PL.OrderService(
        catalog=catalog,
        orders=PL.InMemoryOrderRepository(),
        customers=PL.InMemoryCustomerDirectory(),
    )
    placed = await service.place_order(request)
    confirmed = await service.confirm(placed.unwrap().order.id)
"""

from __future__ import annotations

from pizzeria.placement._types import (
    ItemRequest,
    PlaceOrderRequest,
    OrderUpdate,
    PlacedOrder,
    PlacementError,
    UpdateError,
)
from pizzeria.placement._repository import (
    OrderRepository,
    CustomerDirectory,
    InMemoryOrderRepository,
    InMemoryCustomerDirectory,
)
from pizzeria.placement._service import OrderService, order_number

__all__ = (
    "ItemRequest",
    "PlaceOrderRequest",
    "OrderUpdate",
    "PlacedOrder",
    "PlacementError",
    "UpdateError",
    "OrderRepository",
    "CustomerDirectory",
    "InMemoryOrderRepository",
    "InMemoryCustomerDirectory",
    "OrderService",
    "order_number",
)
