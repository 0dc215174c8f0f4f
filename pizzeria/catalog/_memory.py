"""
In-memory catalog.
"""

from __future__ import annotations

from collections.abc import Iterable

from kungfu import Option, Some, Nothing

from pizzeria._types import ID
from pizzeria.menu import Ingredient, PizzaRecipe


class InMemoryMenuCatalog:
    """
    Dict-backed ``MenuCatalog`` for tests, demos, and small menus.

    Example:
        catalog = InMemoryMenuCatalog(recipes=[margherita], ingredients=[basil])
        match await catalog.recipe("margherita"):
            case Some(recipe):
                ...
            case Nothing():
                ...
    """

    def __init__(
        self,
        recipes: Iterable[PizzaRecipe] = (),
        ingredients: Iterable[Ingredient] = (),
    ) -> None:
        self._recipes: dict[ID, PizzaRecipe] = {r.id: r for r in recipes}
        self._ingredients: dict[ID, Ingredient] = {i.id: i for i in ingredients}

    def put_recipe(self, recipe: PizzaRecipe) -> None:
        self._recipes[recipe.id] = recipe

    def put_ingredient(self, ingredient: Ingredient) -> None:
        self._ingredients[ingredient.id] = ingredient

    async def recipe(self, recipe_id: ID) -> Option[PizzaRecipe]:
        recipe = self._recipes.get(recipe_id)
        return Some(recipe) if recipe is not None else Nothing()

    async def ingredient(self, ingredient_id: ID) -> Option[Ingredient]:
        ingredient = self._ingredients.get(ingredient_id)
        return Some(ingredient) if ingredient is not None else Nothing()


__all__ = ("InMemoryMenuCatalog",)
