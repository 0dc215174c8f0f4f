"""
Read-through catalog cache.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence

from kungfu import Option, Some, Nothing

from pizzeria._types import ID
from pizzeria.catalog._types import CacheStats, LocalTier, MenuCatalog, Tier
from pizzeria.menu import Ingredient, PizzaRecipe

logger = logging.getLogger(__name__)

_RECIPE = "recipe"
_INGREDIENT = "ingredient"


def _key(kind: str, id: ID) -> str:
    return f"{kind}:{id}"


class CachedCatalog:
    """
    ``MenuCatalog`` wrapper that answers from cache tiers before the source.

    Tiers are tried in order. A source hit populates every tier; a source
    miss is not cached, so entries added later become visible immediately.
    A tier that raises is skipped and logged.

    Example:
        catalog = CachedCatalog(source, tiers=(LocalTier(max_size=256),))
        recipe = await catalog.recipe("margherita")
        await catalog.invalidate_recipe("margherita")
    """

    def __init__(self, source: MenuCatalog, tiers: Sequence[Tier[object]] | None = None) -> None:
        self._source = source
        self._tiers: tuple[Tier[object], ...] = tuple(tiers) if tiers is not None else (LocalTier(),)
        self.stats = CacheStats()

    async def recipe(self, recipe_id: ID) -> Option[PizzaRecipe]:
        return await self._lookup(_key(_RECIPE, recipe_id), lambda: self._source.recipe(recipe_id))

    async def ingredient(self, ingredient_id: ID) -> Option[Ingredient]:
        return await self._lookup(_key(_INGREDIENT, ingredient_id), lambda: self._source.ingredient(ingredient_id))

    async def invalidate_recipe(self, recipe_id: ID) -> bool:
        return await self._invalidate(_key(_RECIPE, recipe_id))

    async def invalidate_ingredient(self, ingredient_id: ID) -> bool:
        return await self._invalidate(_key(_INGREDIENT, ingredient_id))

    async def invalidate_all(self) -> int:
        removed = 0
        for tier in self._tiers:
            try:
                removed += await tier.delete_pattern("*")
            except Exception:
                logger.warning("Cache tier %s failed to clear", tier.name, exc_info=True)
        return removed

    async def _lookup[T](self, key: str, fetch: Callable[[], Awaitable[Option[T]]]) -> Option[T]:
        for tier in self._tiers:
            try:
                value = await tier.get(key)
            except Exception:
                logger.warning("Cache tier %s failed on get %s", tier.name, key, exc_info=True)
                continue
            if value is not None:
                self.stats.hits += 1
                logger.debug("Cache hit %s (%s)", key, tier.name)
                return Some(value)  # type: ignore[arg-type]

        self.stats.misses += 1
        logger.debug("Cache miss %s", key)

        match await fetch():
            case Some(value):
                for tier in self._tiers:
                    try:
                        await tier.set(key, value)
                    except Exception:
                        logger.warning("Cache tier %s failed on set %s", tier.name, key, exc_info=True)
                return Some(value)
            case _:
                return Nothing()

    async def _invalidate(self, key: str) -> bool:
        deleted = False
        for tier in self._tiers:
            try:
                deleted = await tier.delete(key) or deleted
            except Exception:
                logger.warning("Cache tier %s failed on delete %s", tier.name, key, exc_info=True)
        return deleted


__all__ = ("CachedCatalog",)
