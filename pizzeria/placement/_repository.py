"""
Repositories — order storage and customer lookup.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Protocol

from kungfu import Option, Some, Nothing

from pizzeria._types import ID
from pizzeria.money import Currency, Money, total
from pizzeria.order import TERMINAL_STATUSES, CustomerInfo, Order, OrderStatus

# ═══════════════════════════════════════════════════════════════════════════════
# Protocols
# ═══════════════════════════════════════════════════════════════════════════════

class OrderRepository(Protocol):
    """
    Order storage.

    ``save`` upserts by ``order.id``. Implementations raise on storage
    failure; ``OrderService`` turns those into ``PersistenceError``.
    """

    async def save(self, order: Order) -> None: ...

    async def get(self, order_id: ID) -> Option[Order]: ...

    async def get_by_number(self, order_number: str) -> Option[Order]: ...

    async def list_by_customer(self, customer_id: ID) -> list[Order]: ...

    async def list_by_status(self, status: OrderStatus) -> list[Order]: ...

    async def list_active(self) -> list[Order]:
        """Orders not yet delivered or cancelled."""
        ...

    async def count_by_status(self, status: OrderStatus) -> int: ...

    async def delivered_revenue(self, currency: Currency) -> Money:
        """Sum of grand totals of delivered orders in ``currency``."""
        ...


class CustomerDirectory(Protocol):
    async def find(self, customer_id: ID) -> Option[CustomerInfo]: ...


# ═══════════════════════════════════════════════════════════════════════════════
# In-Memory Implementations
# ═══════════════════════════════════════════════════════════════════════════════

class InMemoryOrderRepository:
    """
    Dict-backed ``OrderRepository``. Listing preserves first-save order.

    Example:
        orders = InMemoryOrderRepository()
        await orders.save(order)
        assert (await orders.get(order.id)).unwrap() == order
    """

    def __init__(self, orders: Iterable[Order] = ()) -> None:
        self._orders: dict[ID, Order] = {o.id: o for o in orders}

    def __len__(self) -> int:
        return len(self._orders)

    async def save(self, order: Order) -> None:
        if order.order_number is not None:
            for other in self._orders.values():
                if other.order_number == order.order_number and other.id != order.id:
                    raise ValueError(f"Duplicate order number {order.order_number}")
        self._orders[order.id] = order

    async def get(self, order_id: ID) -> Option[Order]:
        order = self._orders.get(order_id)
        return Some(order) if order is not None else Nothing()

    async def get_by_number(self, order_number: str) -> Option[Order]:
        for order in self._orders.values():
            if order.order_number == order_number:
                return Some(order)
        return Nothing()

    async def list_by_customer(self, customer_id: ID) -> list[Order]:
        return [o for o in self._orders.values() if o.customer_id == customer_id]

    async def list_by_status(self, status: OrderStatus) -> list[Order]:
        return [o for o in self._orders.values() if o.status == status]

    async def list_active(self) -> list[Order]:
        return [o for o in self._orders.values() if o.status not in TERMINAL_STATUSES]

    async def count_by_status(self, status: OrderStatus) -> int:
        return len(await self.list_by_status(status))

    async def delivered_revenue(self, currency: Currency) -> Money:
        delivered = [
            o.grand_total
            for o in self._orders.values()
            if o.status == OrderStatus.DELIVERED and o.currency == currency
        ]
        return total(delivered, currency).unwrap()


class InMemoryCustomerDirectory:
    def __init__(self, customers: Mapping[ID, CustomerInfo] | None = None) -> None:
        self._customers: dict[ID, CustomerInfo] = dict(customers or {})

    def register(self, customer_id: ID, info: CustomerInfo) -> None:
        self._customers[customer_id] = info

    async def find(self, customer_id: ID) -> Option[CustomerInfo]:
        info = self._customers.get(customer_id)
        return Some(info) if info is not None else Nothing()


__all__ = (
    "OrderRepository",
    "CustomerDirectory",
    "InMemoryOrderRepository",
    "InMemoryCustomerDirectory",
)
