"""
Place order — from request to doorstep.

Key concepts:
- OrderService = one lazy pipeline per use case (load → pure transition → save → publish)
- Pricing pipelines are values: pick a preset or build your own
- Every failure is a value: NotFoundError, ValidationError, BusinessRuleViolationError

Run: python -m examples.place_order
"""

from decimal import Decimal

from kungfu import Ok, Error

from pizzeria import NotFoundError
from pizzeria import catalog as C
from pizzeria import events as E
from pizzeria import order as O
from pizzeria import placement as PL
from pizzeria import pricing as P
from pizzeria.menu import PizzaCrust, PizzaSize
from pizzeria.money import Currency
from examples._infra import HOME, banner, customers, dollars, menu, run, show


async def notify_kitchen(event: O.OrderStatusChanged) -> None:
    if event.new_status == O.OrderStatus.PREPARING:
        print(f"  [KITCHEN] start order {event.order_id}")


async def main() -> None:
    catalog = C.CachedCatalog(menu())
    orders = PL.InMemoryOrderRepository()

    bus = E.EventBus()
    bus.subscribe(object, E.log_event)
    bus.subscribe(O.OrderStatusChanged, notify_kitchen)

    service = PL.OrderService(catalog=catalog, orders=orders, customers=customers(), bus=bus)

    banner("1. Pricing pipelines")
    context = P.PricingContext(size=PizzaSize.LARGE, order_time=service.clock(), customer_type=P.CustomerType.VIP)
    for preset in P.PRESETS:
        print(f"  {preset.name:<11} {preset.price(dollars('16.99'), context).unwrap()}")

    lunch = P.pipeline().rule(P.SizeMultiplier()).rule(P.HappyHourDiscount(rate=Decimal("0.25"))).build("lunch")
    happy = P.PricingContext(size=PizzaSize.LARGE, order_time=service.clock(), is_happy_hour=True)
    print(f"  {lunch.name:<11} {lunch.price(dollars('16.99'), happy).unwrap()}")

    banner("2. Place order")
    request = PL.PlaceOrderRequest(
        items=[
            PL.ItemRequest("margherita", PizzaSize.LARGE, PizzaCrust.THIN, quantity=2),
            PL.ItemRequest("pepperoni", PizzaSize.MEDIUM, PizzaCrust.STUFFED, custom_ingredients={"mushroom": 2}),
        ],
        delivery_type=O.DeliveryType.DELIVERY,
        customer_id="ada",
        delivery_address=HOME,
    )

    match await service.place_order(request):
        case Ok(placed):
            order = placed.order
            print(f"  {order.order_number}: {order.pizza_count} pizzas, total {order.grand_total}")
        case Error(e):
            print(f"  failed: {e}")
            return

    banner("3. Lifecycle")
    show("confirm", await service.confirm(order.id))
    show("start prep (unpaid)", await service.start_preparation(order.id))
    show("payment", await service.record_payment(order.id))
    show("start preparation", await service.start_preparation(order.id))
    show("ready", await service.mark_ready(order.id))
    show("out for delivery", await service.start_delivery(order.id))
    show("delivered", await service.mark_delivered(order.id))

    banner("4. Failures are values")
    unknown = PL.PlaceOrderRequest(
        items=[PL.ItemRequest("hawaiian", PizzaSize.SMALL, PizzaCrust.THIN)],
        delivery_type=O.DeliveryType.PICKUP,
        customer_id="ada",
    )
    match await service.place_order(unknown):
        case Error(NotFoundError() as e):
            print(f"  not found: {e}")
        case Error(e):
            print(f"  rejected [{e.code}]: {e}")
        case Ok(_):
            print("  unexpectedly placed")

    banner("5. Reporting")
    print(f"  revenue    {await orders.delivered_revenue(Currency.USD)}")
    print(f"  active     {len(await orders.list_active())}")
    print(f"  cache      hits={catalog.stats.hits} misses={catalog.stats.misses}")

    print("\nDone!")


if __name__ == "__main__":
    run(main)
