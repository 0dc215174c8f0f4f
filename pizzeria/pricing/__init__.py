"""
Pricing — rule pipelines and the order pricing service.

    from pizzeria import pricing as P

    context = P.PricingContext(size=PizzaSize.LARGE, order_time=now)
    price = P.SEASONAL.price(recipe.base_price, context)

    happy = P.pipeline().rule(P.SizeMultiplier()).rule(P.HappyHourDiscount()).build("happy")
"""

from __future__ import annotations

from pizzeria.pricing._types import (
    CustomerType,
    SeasonalModifier,
    PricingContext,
    SizeMultiplier,
    VipDiscount,
    HappyHourDiscount,
    SeasonalAdjustment,
    PriceRule,
    ItemPrice,
    DemandMetrics,
    MarketConditions,
)
from pizzeria.pricing._pipeline import (
    apply_rule,
    Pipeline,
    pipeline,
    PricingPipeline,
    BASE,
    VIP,
    HAPPY_HOUR,
    SEASONAL,
    PRESETS,
)
from pizzeria.pricing._policy import PricingPolicy
from pizzeria.pricing._service import OrderPricingService

__all__ = (
    "CustomerType",
    "SeasonalModifier",
    "PricingContext",
    "SizeMultiplier",
    "VipDiscount",
    "HappyHourDiscount",
    "SeasonalAdjustment",
    "PriceRule",
    "ItemPrice",
    "DemandMetrics",
    "MarketConditions",
    "apply_rule",
    "Pipeline",
    "pipeline",
    "PricingPipeline",
    "BASE",
    "VIP",
    "HAPPY_HOUR",
    "SEASONAL",
    "PRESETS",
    "PricingPolicy",
    "OrderPricingService",
)
