"""
Menu factories and derived values.

Factories validate and return ``Result``; the dataclass constructors stay
available for already-trusted data (fixtures, storage rehydration).
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import replace
from decimal import Decimal

from kungfu import Result, Ok, Error

from pizzeria._errors import ValidationError
from pizzeria._types import ID
from pizzeria.money import Money
from pizzeria.menu._types import (
    Ingredient,
    IngredientCategory,
    Pizza,
    PizzaCrust,
    PizzaRecipe,
    PizzaSize,
    size_multiplier,
)

MAX_SPECIAL_INSTRUCTIONS = 500
_DIFFICULTY_STEP = Decimal("0.2")

# ═══════════════════════════════════════════════════════════════════════════════
# Ingredient
# ═══════════════════════════════════════════════════════════════════════════════


def create_ingredient(
    *,
    id: ID,
    name: str,
    category: IngredientCategory,
    price_per_unit: Money,
    is_available: bool = True,
    allergens: Sequence[str] = (),
) -> Result[Ingredient, ValidationError]:
    if not name.strip():
        return Error(ValidationError("Ingredient name cannot be empty", "name"))

    if category not in IngredientCategory:
        return Error(ValidationError(f"Invalid ingredient category: {category}", "category"))

    return Ok(
        Ingredient(
            id=id,
            name=name.strip(),
            category=IngredientCategory(category),
            price_per_unit=price_per_unit,
            is_available=is_available,
            allergens=tuple(allergens),
        )
    )


def mark_unavailable(ingredient: Ingredient) -> Ingredient:
    return replace(ingredient, is_available=False)


def mark_available(ingredient: Ingredient) -> Ingredient:
    return replace(ingredient, is_available=True)


# ═══════════════════════════════════════════════════════════════════════════════
# Recipe
# ═══════════════════════════════════════════════════════════════════════════════


def create_recipe(
    *,
    id: ID,
    name: str,
    description: str,
    ingredients: Mapping[ID, int],
    base_price: Money,
    preparation_time_minutes: int,
    difficulty: int,
    is_vegetarian: bool = False,
    is_vegan: bool = False,
    is_gluten_free: bool = False,
) -> Result[PizzaRecipe, ValidationError]:
    if not name.strip():
        return Error(ValidationError("Pizza name cannot be empty", "name"))

    if preparation_time_minutes <= 0:
        return Error(ValidationError("Preparation time must be positive", "preparation_time_minutes"))

    if not 1 <= difficulty <= 5:
        return Error(ValidationError("Difficulty must be between 1 and 5", "difficulty"))

    if not ingredients:
        return Error(ValidationError("Pizza must have at least one ingredient", "ingredients"))

    if any(qty <= 0 for qty in ingredients.values()):
        return Error(ValidationError("Ingredient quantities must be positive", "ingredients"))

    return Ok(
        PizzaRecipe(
            id=id,
            name=name.strip(),
            description=description.strip(),
            ingredients=dict(ingredients),
            base_price=base_price,
            preparation_time_minutes=preparation_time_minutes,
            difficulty=difficulty,
            is_vegetarian=is_vegetarian,
            is_vegan=is_vegan,
            is_gluten_free=is_gluten_free,
        )
    )


def recipe_price(
    recipe: PizzaRecipe,
    ingredient_prices: Mapping[ID, Money],
    size: PizzaSize,
) -> Result[Money, ValidationError]:
    """
    Menu price of a recipe at a size.

    Base price and every priced default ingredient scale with the size
    multiplier. Ingredients without a known price are free.
    """
    factor = size_multiplier(size)
    price = recipe.base_price.multiply(factor)

    for ingredient_id, quantity in recipe.ingredients.items():
        unit = ingredient_prices.get(ingredient_id)
        if unit is not None:
            price = price.then(
                lambda acc, unit=unit, quantity=quantity: unit.multiply(quantity * factor).then(acc.add)
            )

    return price


def preparation_time(recipe: PizzaRecipe, size: PizzaSize) -> int:
    """Minutes to prepare one pizza, rounded up."""
    difficulty_factor = 1 + (recipe.difficulty - 1) * _DIFFICULTY_STEP
    return math.ceil(recipe.preparation_time_minutes * size_multiplier(size) * difficulty_factor)


# ═══════════════════════════════════════════════════════════════════════════════
# Pizza
# ═══════════════════════════════════════════════════════════════════════════════


def create_pizza(
    *,
    recipe_id: ID,
    size: PizzaSize,
    crust: PizzaCrust,
    custom_ingredients: Mapping[ID, int] | None = None,
    special_instructions: str | None = None,
) -> Result[Pizza, ValidationError]:
    if size not in PizzaSize:
        return Error(ValidationError("Invalid pizza size", "size"))

    if crust not in PizzaCrust:
        return Error(ValidationError("Invalid pizza crust", "crust"))

    if special_instructions and len(special_instructions) > MAX_SPECIAL_INSTRUCTIONS:
        return Error(
            ValidationError(
                f"Special instructions too long (max {MAX_SPECIAL_INSTRUCTIONS} characters)",
                "special_instructions",
            )
        )

    return Ok(
        Pizza(
            recipe_id=recipe_id,
            size=PizzaSize(size),
            crust=PizzaCrust(crust),
            custom_ingredients=dict(custom_ingredients or {}),
            special_instructions=special_instructions,
        )
    )


__all__ = (
    "MAX_SPECIAL_INSTRUCTIONS",
    "create_ingredient",
    "mark_unavailable",
    "mark_available",
    "create_recipe",
    "recipe_price",
    "preparation_time",
    "create_pizza",
)
