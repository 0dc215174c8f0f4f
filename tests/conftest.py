"""
Shared fixtures: a small menu, order factories, and Result helpers.
"""

from datetime import UTC, datetime
from decimal import Decimal

import pytest
from kungfu import Error, Ok

from pizzeria import catalog as C
from pizzeria import menu as M
from pizzeria import order as O
from pizzeria.money import Currency, Money

NOW = datetime(2025, 6, 14, 18, 30, tzinfo=UTC)


def expect_ok(result):
    """Unwrap an ``Ok`` or fail the test with the error."""
    match result:
        case Ok(value):
            return value
        case Error(e):
            pytest.fail(f"expected Ok, got Error({e!r})")


def expect_error(result, kind=Exception):
    """Unwrap an ``Error`` of type ``kind`` or fail the test."""
    match result:
        case Error(e):
            assert isinstance(e, kind), f"expected {kind.__name__}, got {type(e).__name__}"
            return e
        case Ok(value):
            pytest.fail(f"expected Error({kind.__name__}), got Ok({value!r})")


def usd(amount) -> Money:
    return expect_ok(Money.create(amount, Currency.USD))


def make_item(
    quantity: int = 1,
    unit: str = "10.00",
    *,
    currency: Currency = Currency.USD,
    recipe_id: str = "margherita",
) -> O.OrderItem:
    unit_price = expect_ok(Money.create(unit, currency))
    return O.OrderItem(
        recipe_id=recipe_id,
        size=M.PizzaSize.MEDIUM,
        crust=M.PizzaCrust.THIN,
        quantity=quantity,
        unit_price=unit_price,
        total_price=expect_ok(unit_price.multiply(quantity)),
    )


def make_draft(**overrides) -> O.OrderDraft:
    fields = {
        "id": "order-1",
        "customer_info": O.CustomerInfo(name="Ada Lovelace", phone="+1 555 0100"),
        "items": (make_item(),),
        "delivery_type": O.DeliveryType.DELIVERY,
        "delivery_address": O.Address(
            street="123 Main St",
            city="Pizza Town",
            postal_code="90210",
            country="USA",
        ),
        "customer_id": "customer-1",
    }
    fields.update(overrides)
    return O.OrderDraft(**fields)


def make_order(**overrides) -> O.Order:
    return expect_ok(O.create_order(make_draft(**overrides), at=NOW)).order


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def cheese() -> M.Ingredient:
    return M.Ingredient(
        id="mozzarella",
        name="Mozzarella",
        category=M.IngredientCategory.CHEESE,
        price_per_unit=usd("1.50"),
        allergens=("milk",),
    )


@pytest.fixture
def basil() -> M.Ingredient:
    return M.Ingredient(
        id="basil",
        name="Basil",
        category=M.IngredientCategory.VEGETABLES,
        price_per_unit=usd("0.50"),
    )


@pytest.fixture
def truffle() -> M.Ingredient:
    return M.Ingredient(
        id="truffle",
        name="Truffle",
        category=M.IngredientCategory.VEGETABLES,
        price_per_unit=usd("8.00"),
        is_available=False,
    )


@pytest.fixture
def margherita() -> M.PizzaRecipe:
    return M.PizzaRecipe(
        id="margherita",
        name="Margherita",
        description="Tomato, mozzarella, basil",
        ingredients={"mozzarella": 2, "basil": 1},
        base_price=usd("16.99"),
        preparation_time_minutes=15,
        difficulty=2,
        is_vegetarian=True,
    )


@pytest.fixture
def ingredients(cheese, basil, truffle) -> dict[str, M.Ingredient]:
    return {i.id: i for i in (cheese, basil, truffle)}


@pytest.fixture
def menu_catalog(margherita, cheese, basil, truffle) -> C.InMemoryMenuCatalog:
    return C.InMemoryMenuCatalog(recipes=[margherita], ingredients=[cheese, basil, truffle])


@pytest.fixture
def pending_delivery() -> O.Order:
    return make_order()


@pytest.fixture
def pending_pickup() -> O.Order:
    return make_order(delivery_type=O.DeliveryType.PICKUP, delivery_address=None)


@pytest.fixture
def tax_rate() -> Decimal:
    return O.OrderPolicy().tax_rate
