"""
Pricing pipeline — ordered, configurable rule chain.

    from pizzeria import pricing as P

    weekend = (
        P.pipeline()
        .rule(P.SizeMultiplier())
        .rule(P.SeasonalAdjustment())
        .build("weekend")
    )
    result = weekend.price(base_price, context)
"""

from __future__ import annotations

from dataclasses import dataclass

from kungfu import Result, Ok, Error

from pizzeria._errors import ValidationError
from pizzeria.menu import size_multiplier
from pizzeria.money import Money
from pizzeria.pricing._types import (
    CustomerType,
    HappyHourDiscount,
    PriceRule,
    PricingContext,
    SeasonalAdjustment,
    SizeMultiplier,
    VipDiscount,
)

# ═══════════════════════════════════════════════════════════════════════════════
# Rule Application
# ═══════════════════════════════════════════════════════════════════════════════


def apply_rule(rule: PriceRule, price: Money, context: PricingContext) -> Result[Money, ValidationError]:
    """Apply one rule. Rules that do not match the context return the price unchanged."""
    match rule:
        case SizeMultiplier():
            return price.multiply(size_multiplier(context.size))

        case VipDiscount(rate=rate):
            if context.customer_type is CustomerType.VIP:
                return price.multiply(1 - rate)
            return Ok(price)

        case HappyHourDiscount(rate=rate):
            if context.is_happy_hour:
                return price.multiply(1 - rate)
            return Ok(price)

        case SeasonalAdjustment():
            adjusted: Result[Money, ValidationError] = Ok(price)
            for modifier in context.seasonal_modifiers:
                if modifier.applies_to(context.order_time, context.size):
                    adjusted = adjusted.then(lambda p, m=modifier.multiplier: p.multiply(m))
            return adjusted


# ═══════════════════════════════════════════════════════════════════════════════
# Builder
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Pipeline:
    """
    Fluent pipeline builder. Each ``.rule()`` returns a new builder.

    Rules run in the order they were added.
    """

    _rules: tuple[PriceRule, ...] = ()

    def rule(self, r: PriceRule) -> Pipeline:
        return Pipeline(_rules=(*self._rules, r))

    def build(self, name: str = "custom") -> PricingPipeline:
        return PricingPipeline(name=name, rules=self._rules)


def pipeline() -> Pipeline:
    """Start an empty pipeline."""
    return Pipeline()


# ═══════════════════════════════════════════════════════════════════════════════
# Executor
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class PricingPipeline:
    """Compiled rule chain."""

    name: str
    rules: tuple[PriceRule, ...]

    def price(self, base: Money, context: PricingContext) -> Result[Money, ValidationError]:
        """Fold every rule over ``base``; the first failing rule stops the chain."""
        current = base
        for rule in self.rules:
            match apply_rule(rule, current, context):
                case Ok(adjusted):
                    current = adjusted
                case Error(e):
                    return Error(e)
        return Ok(current)


# ═══════════════════════════════════════════════════════════════════════════════
# Presets
# ═══════════════════════════════════════════════════════════════════════════════

# Each preset includes everything before it: selecting VIP still applies size
# pricing but skips happy hour and seasonal adjustments.
BASE = pipeline().rule(SizeMultiplier()).build("base")
VIP = pipeline().rule(SizeMultiplier()).rule(VipDiscount()).build("vip")
HAPPY_HOUR = (
    pipeline()
    .rule(SizeMultiplier())
    .rule(VipDiscount())
    .rule(HappyHourDiscount())
    .build("happy_hour")
)
SEASONAL = (
    pipeline()
    .rule(SizeMultiplier())
    .rule(VipDiscount())
    .rule(HappyHourDiscount())
    .rule(SeasonalAdjustment())
    .build("seasonal")
)

PRESETS: tuple[PricingPipeline, ...] = (BASE, VIP, HAPPY_HOUR, SEASONAL)


__all__ = (
    "apply_rule",
    "Pipeline",
    "pipeline",
    "PricingPipeline",
    "BASE",
    "VIP",
    "HAPPY_HOUR",
    "SEASONAL",
    "PRESETS",
)
