"""
Order service — placement and lifecycle use cases.

Each use case is one lazy pipeline: load or build, apply a pure domain
function, persist, publish. Storage exceptions become ``PersistenceError``
values; missing records become ``NotFoundError``.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from combinators import lift as L, traverse
from kungfu import LazyCoroResult, Result, Ok, Error, Option, Some

from pizzeria._errors import DomainError, NotFoundError, PersistenceError, ValidationError
from pizzeria._types import ID, Clock, utcnow
from pizzeria.catalog import MenuCatalog
from pizzeria.events import EventBus
from pizzeria.menu import Ingredient, Pizza, PizzaRecipe, create_pizza
from pizzeria import order as O
from pizzeria.pricing import OrderPricingService, PricingContext
from pizzeria.placement._repository import CustomerDirectory, OrderRepository
from pizzeria.placement._types import (
    ItemRequest,
    OrderUpdate,
    PlacedOrder,
    PlacementError,
    PlaceOrderRequest,
    UpdateError,
)

logger = logging.getLogger(__name__)

type Step = Callable[[O.Order, datetime], O.TransitionResult]


def order_number(order_id: uuid.UUID, at: datetime) -> str:
    """Human-readable order number: ``PZ-<date>-<first 8 hex digits of the id>``."""
    return f"PZ-{at:%Y%m%d}-{order_id.hex[:8].upper()}"


def _storage_failure(action: str) -> Callable[[Exception], PersistenceError]:
    def convert(exc: Exception) -> PersistenceError:
        logger.error("%s failed", action, exc_info=exc)
        return PersistenceError(f"{action} failed: {exc}")

    return convert


def _log_outcome(what: str, result: Result[OrderUpdate, DomainError]) -> None:
    match result:
        case Ok(update):
            logger.info(
                "%s: order %s is %s, payment %s",
                what,
                update.order.order_number or update.order.id,
                update.order.status,
                update.order.payment_status,
            )
        case Error(e):
            level = logging.ERROR if isinstance(e, PersistenceError) else logging.INFO
            logger.log(level, "%s rejected [%s]: %s", what, e.code, e)


@dataclass(frozen=True, slots=True)
class OrderService:
    """
    Application service over the order domain.

    Example:
        service = OrderService(catalog=catalog, orders=orders, customers=customers)

        match await service.place_order(request):
            case Ok(placed):
                print(placed.order.order_number, placed.order.grand_total)
            case Error(NotFoundError() as e):
                ...
            case Error(e):
                ...
    """

    catalog: MenuCatalog
    orders: OrderRepository
    customers: CustomerDirectory
    bus: EventBus = field(default_factory=EventBus)
    pricing: OrderPricingService = field(default_factory=OrderPricingService)
    policy: O.OrderPolicy = field(default_factory=O.OrderPolicy)
    clock: Clock = utcnow

    # ═══════════════════════════════════════════════════════════════════════════
    # Placement
    # ═══════════════════════════════════════════════════════════════════════════

    async def place_order(self, request: PlaceOrderRequest) -> Result[PlacedOrder, PlacementError]:
        """
        Price, create, persist, and announce a new order.

        Fails with ``NotFoundError`` for an unknown customer or recipe,
        ``ValidationError`` for bad input, ``PersistenceError`` when a
        lookup or the save raises.
        """
        at = self.clock()
        order_id = uuid.uuid4()

        flow = (
            self._customer(request)
            .then(
                lambda customer: traverse(
                    list(request.items),
                    lambda item: self._price_line(item, request, at),
                ).map(
                    lambda items: O.OrderDraft(
                        id=str(order_id),
                        order_number=order_number(order_id, at),
                        customer_id=request.customer_id,
                        customer_info=customer,
                        items=items,
                        delivery_type=request.delivery_type,
                        delivery_address=request.delivery_address,
                        special_instructions=request.special_instructions,
                        requested_delivery_time=request.requested_delivery_time,
                    )
                )
            )
            .then(lambda draft: L.from_result(O.create_order(draft, at=at, policy=self.policy)))
            .then(lambda transition: self._commit(transition, PlacedOrder))
        )

        result = await flow
        _log_outcome("Place order", result)
        return result

    # ═══════════════════════════════════════════════════════════════════════════
    # Lifecycle
    # ═══════════════════════════════════════════════════════════════════════════

    async def confirm(self, order_id: ID) -> Result[OrderUpdate, UpdateError]:
        return await self._apply("Confirm", order_id, lambda o, at: O.confirm(o, at=at, policy=self.policy))

    async def record_payment(self, order_id: ID, *, succeeded: bool = True) -> Result[OrderUpdate, UpdateError]:
        if succeeded:
            return await self._apply("Payment", order_id, lambda o, at: O.mark_payment_as_paid(o, at=at))
        return await self._apply("Payment", order_id, lambda o, at: O.mark_payment_as_failed(o, at=at))

    async def refund(self, order_id: ID) -> Result[OrderUpdate, UpdateError]:
        return await self._apply("Refund", order_id, lambda o, at: O.refund_payment(o, at=at))

    async def start_preparation(self, order_id: ID) -> Result[OrderUpdate, UpdateError]:
        return await self._apply("Start preparation", order_id, lambda o, at: O.start_preparation(o, at=at))

    async def mark_ready(self, order_id: ID) -> Result[OrderUpdate, UpdateError]:
        return await self._apply("Mark ready", order_id, lambda o, at: O.mark_as_ready(o, at=at))

    async def start_delivery(self, order_id: ID) -> Result[OrderUpdate, UpdateError]:
        return await self._apply("Start delivery", order_id, lambda o, at: O.start_delivery(o, at=at))

    async def mark_delivered(self, order_id: ID) -> Result[OrderUpdate, UpdateError]:
        return await self._apply("Mark delivered", order_id, lambda o, at: O.mark_as_delivered(o, at=at))

    async def cancel(self, order_id: ID) -> Result[OrderUpdate, UpdateError]:
        return await self._apply("Cancel", order_id, lambda o, at: O.cancel(o, at=at))

    # ═══════════════════════════════════════════════════════════════════════════
    # Steps
    # ═══════════════════════════════════════════════════════════════════════════

    async def _apply(self, what: str, order_id: ID, step: Step) -> Result[OrderUpdate, UpdateError]:
        at = self.clock()
        flow = (
            self._found(
                "Order",
                order_id,
                L.catching_async(lambda: self.orders.get(order_id), on_error=_storage_failure("Order lookup")),
            )
            .then(lambda current: L.from_result(step(current, at)))
            .then(lambda transition: self._commit(transition, OrderUpdate))
        )
        result = await flow
        _log_outcome(what, result)
        return result

    def _customer(self, request: PlaceOrderRequest) -> LazyCoroResult[O.CustomerInfo, PlacementError]:
        if request.customer_id is None:
            return L.optional(
                request.customer_info,
                error=lambda: ValidationError("Customer information is required", "customer_info"),
            )

        customer_id = request.customer_id
        return self._found(
            "Customer",
            customer_id,
            L.catching_async(lambda: self.customers.find(customer_id), on_error=_storage_failure("Customer lookup")),
        )

    def _price_line(self, item: ItemRequest, request: PlaceOrderRequest, at: datetime) -> LazyCoroResult[O.OrderItem, PlacementError]:
        pizza = create_pizza(
            recipe_id=item.recipe_id,
            size=item.size,
            crust=item.crust,
            custom_ingredients=item.custom_ingredients,
            special_instructions=item.special_instructions,
        )
        return L.from_result(pizza).then(
            lambda p: self._recipe(p.recipe_id).then(
                lambda recipe: self._toppings(p).then(
                    lambda toppings: L.from_result(self._quote(p, recipe, toppings, item.quantity, request, at))
                )
            )
        )

    def _quote(
        self,
        pizza: Pizza,
        recipe: PizzaRecipe,
        toppings: dict[ID, Ingredient],
        quantity: int,
        request: PlaceOrderRequest,
        at: datetime,
    ) -> Result[O.OrderItem, ValidationError]:
        context = PricingContext(
            size=pizza.size,
            order_time=at,
            quantity=quantity,
            customer_type=request.customer_type,
            is_happy_hour=request.is_happy_hour,
            custom_ingredients=pizza.custom_ingredients,
            seasonal_modifiers=request.seasonal_modifiers,
        )
        return self.pricing.price_item(recipe, context, toppings).map(
            lambda price: O.order_item(pizza, quantity, price.unit_price, price.total_price)
        )

    def _recipe(self, recipe_id: ID) -> LazyCoroResult[PizzaRecipe, NotFoundError | PersistenceError]:
        return self._found(
            "Recipe",
            recipe_id,
            L.catching_async(lambda: self.catalog.recipe(recipe_id), on_error=_storage_failure("Recipe lookup")),
        )

    def _toppings(self, pizza: Pizza) -> LazyCoroResult[dict[ID, Ingredient], PersistenceError]:
        """Known custom ingredients; unknown ids are left out and priced as free."""
        return traverse(
            list(pizza.custom_ingredients),
            lambda ingredient_id: L.catching_async(
                lambda: self.catalog.ingredient(ingredient_id),
                on_error=_storage_failure("Ingredient lookup"),
            ),
        ).map(lambda found: {o.value.id: o.value for o in found if isinstance(o, Some)})

    def _found[T](
        self,
        resource: str,
        id: ID,
        lookup: LazyCoroResult[Option[T], PersistenceError],
    ) -> LazyCoroResult[T, NotFoundError | PersistenceError]:
        return lookup.then(
            lambda found: L.optional(found.unwrap_or_none(), error=lambda: NotFoundError.of(resource, id))
        )

    async def _commit[U: OrderUpdate](self, transition: O.Transition, kind: type[U]) -> Result[U, PersistenceError]:
        order = transition.order
        saved = await L.catching_async(lambda: self.orders.save(order), on_error=_storage_failure("Order save"))
        match saved:
            case Ok(_):
                report = await self.bus.publish(transition.events)
                return Ok(kind(order=order, events=transition.events, dispatch=report))
            case Error(e):
                return Error(e)


__all__ = ("OrderService", "order_number")
