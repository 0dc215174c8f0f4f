"""
Order pricing service — item totals, demand surcharge, preset selection.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal

from kungfu import Result, Ok, Error

from pizzeria._errors import ValidationError
from pizzeria._types import ID
from pizzeria.menu import Ingredient, PizzaRecipe, size_multiplier
from pizzeria.money import Money
from pizzeria.pricing._pipeline import (
    HAPPY_HOUR,
    PRESETS,
    SEASONAL,
    VIP,
    PricingPipeline,
)
from pizzeria.pricing._policy import PricingPolicy
from pizzeria.pricing._types import (
    DemandMetrics,
    ItemPrice,
    MarketConditions,
    PricingContext,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OrderPricingService:
    """
    Prices order lines with a pipeline plus shop-level adjustments.

    Example:
        service = OrderPricingService()
        match service.price_item(recipe, context, ingredients):
            case Ok(ItemPrice(unit_price=unit, total_price=total)):
                ...
            case Error(e):
                ...
    """

    pipeline: PricingPipeline = SEASONAL
    policy: PricingPolicy = field(default_factory=PricingPolicy)

    def price_item(
        self,
        recipe: PizzaRecipe,
        context: PricingContext,
        ingredients: Mapping[ID, Ingredient],
    ) -> Result[ItemPrice, ValidationError]:
        """
        Unit and line total for ``context.quantity`` pizzas of ``recipe``.

        Extra toppings cost ``price_per_unit × qty × size multiplier``; unknown
        or unavailable ones are skipped. The bulk discount applies to the unit
        price once the quantity reaches the policy threshold.
        """
        if context.quantity <= 0:
            return Error(ValidationError("Quantity must be positive", "quantity"))

        if recipe.base_price.is_zero:
            return Error(ValidationError("Invalid recipe or pricing context", "base_price"))

        unit = self.pipeline.price(recipe.base_price, context).then(
            lambda base: self._custom_ingredients(base, context, ingredients)
        )

        if context.quantity >= self.policy.bulk_discount_threshold:
            unit = unit.then(lambda u: u.multiply(1 - self.policy.bulk_discount_rate))

        match unit:
            case Ok(unit_price):
                return unit_price.multiply(context.quantity).map(
                    lambda total_price: ItemPrice(unit_price=unit_price, total_price=total_price)
                )
            case Error(e):
                return Error(e)

    def dynamic_price(self, base: Money, demand: DemandMetrics) -> Result[Money, ValidationError]:
        """Surcharge ``base`` when the kitchen is busy or the wait is long."""
        if demand.kitchen_capacity <= 0:
            return Error(ValidationError("Kitchen capacity must be positive", "kitchen_capacity"))

        demand_ratio = Decimal(demand.current_orders) / Decimal(demand.kitchen_capacity)
        wait_ratio = min(
            Decimal(str(demand.estimated_wait_minutes)) / self.policy.reference_wait_minutes,
            self.policy.wait_multiplier_cap,
        )

        multiplier = Decimal(1)
        if demand_ratio > self.policy.surge_demand_ratio:
            multiplier += self.policy.surge_rate
        if wait_ratio > self.policy.long_wait_threshold:
            multiplier += self.policy.long_wait_rate

        if multiplier != 1:
            logger.debug("Dynamic pricing surcharge x%s (demand %.2f)", multiplier, demand_ratio)
        return base.multiply(multiplier)

    def select_pipeline(self, conditions: MarketConditions) -> PricingPipeline:
        """Highest-scoring preset for the market; ties go to the earlier preset."""
        best = PRESETS[0]
        best_score = _score(best, conditions)
        for candidate in PRESETS[1:]:
            score = _score(candidate, conditions)
            if score > best_score:
                best, best_score = candidate, score
        return best

    def _custom_ingredients(
        self,
        base: Money,
        context: PricingContext,
        ingredients: Mapping[ID, Ingredient],
    ) -> Result[Money, ValidationError]:
        factor = size_multiplier(context.size)
        price: Result[Money, ValidationError] = Ok(base)

        for ingredient_id, quantity in context.custom_ingredients.items():
            ingredient = ingredients.get(ingredient_id)
            if ingredient is None or not ingredient.is_available:
                continue
            surcharge = ingredient.price_per_unit.multiply(quantity * factor)
            price = price.then(lambda acc, s=surcharge: s.then(acc.add))

        return price


def _score(candidate: PricingPipeline, conditions: MarketConditions) -> int:
    if candidate is VIP and conditions.vip_customer_ratio > 0.3:
        return 10
    if candidate is HAPPY_HOUR and conditions.is_happy_hour:
        return 15
    if candidate is SEASONAL and conditions.seasonal_demand > 1.2:
        return 20
    return 0


__all__ = ("OrderPricingService",)
