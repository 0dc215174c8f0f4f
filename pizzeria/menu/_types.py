"""
Menu types — sizes, crusts, ingredients, recipes, pizzas.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import StrEnum

from pizzeria._types import ID, freeze
from pizzeria.money import Money

# ═══════════════════════════════════════════════════════════════════════════════
# Enumerations
# ═══════════════════════════════════════════════════════════════════════════════


class PizzaSize(StrEnum):
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"
    XLARGE = "XLARGE"


class PizzaCrust(StrEnum):
    THIN = "THIN"
    THICK = "THICK"
    STUFFED = "STUFFED"


class IngredientCategory(StrEnum):
    CHEESE = "CHEESE"
    MEAT = "MEAT"
    VEGETABLES = "VEGETABLES"
    SAUCE = "SAUCE"
    SPICES = "SPICES"


SIZE_MULTIPLIERS: Mapping[PizzaSize, Decimal] = {
    PizzaSize.SMALL: Decimal("0.8"),
    PizzaSize.MEDIUM: Decimal("1.0"),
    PizzaSize.LARGE: Decimal("1.3"),
    PizzaSize.XLARGE: Decimal("1.6"),
}


def size_multiplier(size: PizzaSize) -> Decimal:
    """Price (and preparation time) factor for a size."""
    return SIZE_MULTIPLIERS[PizzaSize(size)]


# ═══════════════════════════════════════════════════════════════════════════════
# Entities
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Ingredient:
    id: ID
    name: str
    category: IngredientCategory
    price_per_unit: Money
    is_available: bool = True
    allergens: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class PizzaRecipe:
    """
    A menu pizza: base price plus default ingredients.

    ``ingredients`` maps ingredient id to quantity.
    ``difficulty`` is 1..5 and stretches preparation time by 20% per step.
    """

    id: ID
    name: str
    description: str
    ingredients: Mapping[ID, int] = field(hash=False)
    base_price: Money
    preparation_time_minutes: int
    difficulty: int
    is_vegetarian: bool = False
    is_vegan: bool = False
    is_gluten_free: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "ingredients", freeze(self.ingredients))


@dataclass(frozen=True, slots=True)
class Pizza:
    """A recipe as ordered: size, crust, extra toppings."""

    recipe_id: ID
    size: PizzaSize
    crust: PizzaCrust
    custom_ingredients: Mapping[ID, int] = field(default_factory=dict, hash=False)
    special_instructions: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "custom_ingredients", freeze(self.custom_ingredients))

    @property
    def has_custom_ingredients(self) -> bool:
        return len(self.custom_ingredients) > 0


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "PizzaSize",
    "PizzaCrust",
    "IngredientCategory",
    "SIZE_MULTIPLIERS",
    "size_multiplier",
    "Ingredient",
    "PizzaRecipe",
    "Pizza",
)
