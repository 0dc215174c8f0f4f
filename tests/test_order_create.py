"""
Tests for order creation.
"""

from decimal import Decimal

import pytest

from pizzeria import ValidationError
from pizzeria import menu as M
from pizzeria import order as O
from pizzeria.money import Currency

from conftest import NOW, expect_error, expect_ok, make_draft, make_item, make_order, usd


class TestCreateOrder:
    def test_delivery_order_totals(self):
        transition = expect_ok(O.create_order(make_draft(items=(make_item(2, "10.00"),)), at=NOW))
        order = transition.order

        assert order.status is O.OrderStatus.PENDING
        assert order.payment_status is O.PaymentStatus.PENDING
        assert order.total_amount.amount == Decimal("20.00")
        assert order.tax.amount == Decimal("2")
        assert order.delivery_fee.amount == Decimal("5")
        assert order.grand_total.amount == Decimal("27")
        assert order.estimated_delivery_time is None
        assert order.created_at == NOW

    def test_pickup_has_no_delivery_fee(self):
        order = expect_ok(
            O.create_order(make_draft(delivery_type=O.DeliveryType.PICKUP, delivery_address=None), at=NOW)
        ).order
        assert order.delivery_fee.is_zero
        assert order.grand_total.amount == Decimal("11")

    def test_pickup_drops_supplied_address(self):
        order = expect_ok(O.create_order(make_draft(delivery_type=O.DeliveryType.PICKUP), at=NOW)).order
        assert order.delivery_address is None

    def test_fees_follow_order_currency(self):
        draft = make_draft(items=(make_item(currency=Currency.EUR),))
        order = expect_ok(O.create_order(draft, at=NOW)).order
        assert order.delivery_fee.currency is Currency.EUR
        assert order.grand_total.currency is Currency.EUR

    def test_emits_order_created_with_grand_total(self):
        transition = expect_ok(O.create_order(make_draft(), at=NOW))
        (event,) = transition.events

        assert isinstance(event, O.OrderCreated)
        assert event.order_id == "order-1"
        assert event.customer_id == "customer-1"
        assert event.total_amount.equals(transition.order.grand_total)
        assert event.occurred_on == NOW
        assert event.event_version == 1

    def test_custom_policy(self):
        policy = O.OrderPolicy(tax_rate=Decimal("0.20"), delivery_fee=Decimal("7.50"))
        order = expect_ok(O.create_order(make_draft(), at=NOW, policy=policy)).order
        assert order.tax.amount == Decimal("2")
        assert order.delivery_fee.amount == Decimal("7.50")

    def test_order_item_from_pizza(self):
        pizza = expect_ok(
            M.create_pizza(
                recipe_id="margherita",
                size=M.PizzaSize.LARGE,
                crust=M.PizzaCrust.THICK,
                custom_ingredients={"basil": 1},
                special_instructions="Well done",
            )
        )
        item = O.order_item(pizza, 2, usd(5), usd(10))
        assert item.size is M.PizzaSize.LARGE
        assert item.custom_ingredients == {"basil": 1}
        assert item.special_instructions == "Well done"

    def test_item_ingredients_are_read_only(self):
        pizza = expect_ok(
            M.create_pizza(
                recipe_id="margherita",
                size=M.PizzaSize.LARGE,
                crust=M.PizzaCrust.THIN,
                custom_ingredients={"basil": 1},
            )
        )
        order = make_order(items=(O.order_item(pizza, 1, usd(5), usd(5)),))
        (item,) = order.items

        with pytest.raises(TypeError):
            item.custom_ingredients["basil"] = 9
        assert item.custom_ingredients == {"basil": 1}

    def test_orders_are_hashable(self):
        order = make_order()
        assert hash(order) == hash(make_order())
        assert {order: "seen"}[order] == "seen"


class TestValidation:
    @pytest.mark.parametrize(
        ("overrides", "field"),
        [
            ({"customer_info": O.CustomerInfo(name=" ", phone="1")}, "customer_info.name"),
            ({"customer_info": O.CustomerInfo(name="Ada", phone="")}, "customer_info.phone"),
            ({"items": ()}, "items"),
            ({"items": (make_item(0),)}, "items.quantity"),
            ({"items": (make_item(21),)}, "items.quantity"),
            ({"delivery_address": None}, "delivery_address"),
            (
                {"delivery_address": O.Address(street=" ", city="C", postal_code="1", country="US")},
                "delivery_address.street",
            ),
            ({"special_instructions": "x" * 501}, "special_instructions"),
            ({"items": (make_item(), make_item(currency=Currency.EUR))}, "items"),
        ],
    )
    def test_rejected(self, overrides, field):
        error = expect_error(O.create_order(make_draft(**overrides), at=NOW), ValidationError)
        assert error.field == field

    def test_quantity_message_mentions_quantity(self):
        error = expect_error(O.create_order(make_draft(items=(make_item(100),)), at=NOW), ValidationError)
        assert "quantity" in error.message

    def test_max_quantity_is_configurable(self):
        policy = O.OrderPolicy(max_item_quantity=50)
        expect_ok(O.create_order(make_draft(items=(make_item(30),)), at=NOW, policy=policy))
