"""
Tests for pricing rules, pipelines, and presets.
"""

from datetime import timedelta, timezone
from decimal import Decimal

import pytest

from pizzeria import pricing as P
from pizzeria.menu import PizzaSize

from conftest import NOW, expect_ok, usd


def context(**overrides) -> P.PricingContext:
    fields = {"size": PizzaSize.LARGE, "order_time": NOW}
    fields.update(overrides)
    return P.PricingContext(**fields)


def seasonal(multiplier: str, *, starts=-1, ends=1, sizes=None) -> P.SeasonalModifier:
    return P.SeasonalModifier(
        name=f"x{multiplier}",
        multiplier=Decimal(multiplier),
        valid_from=NOW + timedelta(days=starts),
        valid_to=NOW + timedelta(days=ends),
        applicable_to_sizes=frozenset(sizes) if sizes is not None else None,
    )


class TestScenario:
    def test_large_margherita(self):
        price = expect_ok(P.SEASONAL.price(usd("16.99"), context()))
        assert price.amount == Decimal("22.087")

    def test_large_margherita_with_seasonal_modifier(self):
        price = expect_ok(P.SEASONAL.price(usd("16.99"), context(seasonal_modifiers=(seasonal("1.1"),))))
        assert price.amount == Decimal("24.2957")
        assert price.to_cents() == 2430
        assert str(price) == "$24.30"


class TestRules:
    def test_vip_discount_only_for_vip(self):
        regular = expect_ok(P.SEASONAL.price(usd(10), context(size=PizzaSize.MEDIUM)))
        vip = expect_ok(
            P.SEASONAL.price(usd(10), context(size=PizzaSize.MEDIUM, customer_type=P.CustomerType.VIP))
        )
        staff = expect_ok(
            P.SEASONAL.price(usd(10), context(size=PizzaSize.MEDIUM, customer_type=P.CustomerType.STAFF))
        )
        assert regular.amount == Decimal("10")
        assert vip.amount == Decimal("9")
        assert staff.amount == Decimal("10")

    def test_happy_hour_discount(self):
        price = expect_ok(P.SEASONAL.price(usd(10), context(size=PizzaSize.MEDIUM, is_happy_hour=True)))
        assert price.amount == Decimal("8.5")

    def test_vip_and_happy_hour_compound(self):
        price = expect_ok(
            P.SEASONAL.price(
                usd(10),
                context(size=PizzaSize.MEDIUM, customer_type=P.CustomerType.VIP, is_happy_hour=True),
            )
        )
        # 10 * 0.9 * 0.85
        assert price.amount == Decimal("7.65")

    def test_modifier_outside_window_is_ignored(self):
        past = seasonal("2", starts=-10, ends=-5)
        future = seasonal("2", starts=5, ends=10)
        price = expect_ok(P.SEASONAL.price(usd(10), context(size=PizzaSize.MEDIUM, seasonal_modifiers=(past, future))))
        assert price.amount == Decimal("10")

    def test_window_bounds_are_inclusive(self):
        starts_now = seasonal("2", starts=0, ends=1)
        ends_now = seasonal("3", starts=-1, ends=0)
        price = expect_ok(
            P.SEASONAL.price(usd(1), context(size=PizzaSize.MEDIUM, seasonal_modifiers=(starts_now, ends_now)))
        )
        assert price.amount == Decimal("6")

    def test_modifier_size_restriction(self):
        small_only = seasonal("0.5", sizes=[PizzaSize.SMALL])
        large = expect_ok(P.SEASONAL.price(usd(10), context(seasonal_modifiers=(small_only,))))
        small = expect_ok(
            P.SEASONAL.price(usd(10), context(size=PizzaSize.SMALL, seasonal_modifiers=(small_only,)))
        )
        assert large.amount == Decimal("13")
        assert small.amount == Decimal("4")

    def test_modifiers_compound_once_each(self):
        mods = (seasonal("1.1"), seasonal("2"))
        price = expect_ok(P.SEASONAL.price(usd(10), context(size=PizzaSize.MEDIUM, seasonal_modifiers=mods)))
        assert price.amount == Decimal("22")

    def test_rule_does_not_mutate_input(self):
        base = usd("16.99")
        P.SEASONAL.price(base, context(seasonal_modifiers=(seasonal("1.1"),)))
        assert base.amount == Decimal("16.99")


class TestTimestamps:
    @pytest.mark.parametrize("bound", ["valid_from", "valid_to"])
    def test_naive_modifier_window_rejected(self, bound):
        fields = {
            "name": "summer",
            "multiplier": Decimal("1.1"),
            "valid_from": NOW - timedelta(days=1),
            "valid_to": NOW + timedelta(days=1),
        }
        fields[bound] = fields[bound].replace(tzinfo=None)
        with pytest.raises(ValueError, match=bound):
            P.SeasonalModifier(**fields)

    def test_naive_order_time_rejected(self):
        with pytest.raises(ValueError, match="order_time"):
            context(order_time=NOW.replace(tzinfo=None))

    def test_window_in_other_timezone_compares_by_instant(self):
        plus_three = timezone(timedelta(hours=3))
        modifier = P.SeasonalModifier(
            name="evening",
            multiplier=Decimal("2"),
            valid_from=NOW.astimezone(plus_three),
            valid_to=NOW.astimezone(plus_three) + timedelta(hours=1),
        )
        assert modifier.applies_to(NOW, PizzaSize.MEDIUM)

    def test_context_ingredients_are_read_only(self):
        ctx = context(custom_ingredients={"basil": 1})
        with pytest.raises(TypeError):
            ctx.custom_ingredients["basil"] = 2
        assert ctx.custom_ingredients == {"basil": 1}


class TestPresets:
    @pytest.mark.parametrize(
        ("preset", "expected"),
        [
            # VIP + happy hour + seasonal x2 context on a MEDIUM 10.00 pizza
            (P.BASE, Decimal("10")),
            (P.VIP, Decimal("9")),
            (P.HAPPY_HOUR, Decimal("7.65")),
            (P.SEASONAL, Decimal("15.30")),
        ],
    )
    def test_presets_are_cumulative(self, preset, expected):
        ctx = context(
            size=PizzaSize.MEDIUM,
            customer_type=P.CustomerType.VIP,
            is_happy_hour=True,
            seasonal_modifiers=(seasonal("2"),),
        )
        assert expect_ok(preset.price(usd(10), ctx)).amount == expected

    def test_preset_names(self):
        assert [p.name for p in P.PRESETS] == ["base", "vip", "happy_hour", "seasonal"]


class TestBuilder:
    def test_custom_pipeline_runs_rules_in_order(self):
        weekend = (
            P.pipeline()
            .rule(P.SeasonalAdjustment())
            .rule(P.HappyHourDiscount(rate=Decimal("0.5")))
            .build("weekend")
        )
        price = expect_ok(
            weekend.price(usd(10), context(is_happy_hour=True, seasonal_modifiers=(seasonal("3"),)))
        )
        # no size rule in this pipeline
        assert price.amount == Decimal("15")
        assert weekend.name == "weekend"
        assert len(weekend.rules) == 2

    def test_builder_is_immutable(self):
        base = P.pipeline().rule(P.SizeMultiplier())
        base.rule(P.VipDiscount())
        assert len(base.build().rules) == 1

    def test_empty_pipeline_returns_base(self):
        assert expect_ok(P.pipeline().build().price(usd(7), context())).amount == Decimal("7")

    def test_apply_rule_directly(self):
        assert expect_ok(P.apply_rule(P.SizeMultiplier(), usd(10), context())).amount == Decimal("13")
