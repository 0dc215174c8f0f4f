"""
Menu — ingredients, recipes, ordered pizzas.

    from pizzeria import menu as M

    recipe = M.create_recipe(id="margherita", name="Margherita", ...)
    minutes = M.preparation_time(recipe.unwrap(), M.PizzaSize.LARGE)
"""

from __future__ import annotations

from pizzeria.menu._types import (
    PizzaSize,
    PizzaCrust,
    IngredientCategory,
    SIZE_MULTIPLIERS,
    size_multiplier,
    Ingredient,
    PizzaRecipe,
    Pizza,
)
from pizzeria.menu._create import (
    MAX_SPECIAL_INSTRUCTIONS,
    create_ingredient,
    mark_unavailable,
    mark_available,
    create_recipe,
    recipe_price,
    preparation_time,
    create_pizza,
)

__all__ = (
    "PizzaSize",
    "PizzaCrust",
    "IngredientCategory",
    "SIZE_MULTIPLIERS",
    "size_multiplier",
    "Ingredient",
    "PizzaRecipe",
    "Pizza",
    "MAX_SPECIAL_INSTRUCTIONS",
    "create_ingredient",
    "mark_unavailable",
    "mark_available",
    "create_recipe",
    "recipe_price",
    "preparation_time",
    "create_pizza",
)
