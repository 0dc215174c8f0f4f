"""Shared infrastructure for examples."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Coroutine
from decimal import Decimal

from kungfu import Result, Ok, Error

from pizzeria import catalog as C
from pizzeria import menu as M
from pizzeria import order as O
from pizzeria import placement as PL
from pizzeria.money import Currency, Money


def dollars(amount: str) -> Money:
    return Money.create(Decimal(amount), Currency.USD).unwrap()


# Menu
def ingredient(id: str, name: str, category: M.IngredientCategory, price: str) -> M.Ingredient:
    return M.create_ingredient(id=id, name=name, category=category, price_per_unit=dollars(price)).unwrap()


INGREDIENTS = [
    ingredient("mozzarella", "Mozzarella", M.IngredientCategory.CHEESE, "1.50"),
    ingredient("basil", "Basil", M.IngredientCategory.VEGETABLES, "0.50"),
    ingredient("pepperoni", "Pepperoni", M.IngredientCategory.MEAT, "2.00"),
    ingredient("mushroom", "Mushroom", M.IngredientCategory.VEGETABLES, "1.00"),
]

RECIPES = [
    M.create_recipe(
        id="margherita",
        name="Margherita",
        description="Tomato, mozzarella, basil",
        ingredients={"mozzarella": 2, "basil": 1},
        base_price=dollars("16.99"),
        preparation_time_minutes=15,
        difficulty=2,
        is_vegetarian=True,
    ).unwrap(),
    M.create_recipe(
        id="pepperoni",
        name="Pepperoni",
        description="Tomato, mozzarella, pepperoni",
        ingredients={"mozzarella": 2, "pepperoni": 3},
        base_price=dollars("18.50"),
        preparation_time_minutes=15,
        difficulty=1,
    ).unwrap(),
]

ADA = O.CustomerInfo(name="Ada Lovelace", phone="+1 555 0100", email="ada@example.com")
HOME = O.Address(street="123 Main St", city="Pizza Town", postal_code="90210", country="USA")


def menu() -> C.InMemoryMenuCatalog:
    return C.InMemoryMenuCatalog(recipes=RECIPES, ingredients=INGREDIENTS)


def customers() -> PL.InMemoryCustomerDirectory:
    return PL.InMemoryCustomerDirectory({"ada": ADA})


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def show(label: str, result: Result[PL.OrderUpdate, Exception]) -> None:
    match result:
        case Ok(update):
            print(f"  {label:<18} status={update.order.status} payment={update.order.payment_status}")
        case Error(e):
            print(f"  {label:<18} rejected: {e}")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)-7s %(name)s: %(message)s")
    asyncio.run(main())
