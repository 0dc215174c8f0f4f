"""
Catalog types — lookup protocol, cache tiers, cache statistics.
"""

from __future__ import annotations

import fnmatch
from collections import OrderedDict
from dataclasses import dataclass
from typing import Protocol

from kungfu import Option

from pizzeria._types import ID
from pizzeria.menu import Ingredient, PizzaRecipe

# ═══════════════════════════════════════════════════════════════════════════════
# Catalog Protocol
# ═══════════════════════════════════════════════════════════════════════════════

class MenuCatalog(Protocol):
    """
    Read access to recipes and ingredients.

    Implement this over whatever stores the menu (database, CMS, file).

    Example:
        class SqlCatalog:
            async def recipe(self, recipe_id: ID) -> Option[PizzaRecipe]:
                row = await self.db.fetch_recipe(recipe_id)
                return Some(to_recipe(row)) if row else Nothing()
    """

    async def recipe(self, recipe_id: ID) -> Option[PizzaRecipe]:
        """Recipe by id, ``Nothing()`` when unknown."""
        ...

    async def ingredient(self, ingredient_id: ID) -> Option[Ingredient]:
        """Ingredient by id, ``Nothing()`` when unknown."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Tier Protocol
# ═══════════════════════════════════════════════════════════════════════════════

class Tier[T](Protocol):
    """Cache storage backend used by ``CachedCatalog``."""

    @property
    def name(self) -> str:
        ...

    async def get(self, key: str) -> T | None:
        """Value or None on miss."""
        ...

    async def set(self, key: str, value: T) -> None:
        ...

    async def delete(self, key: str) -> bool:
        """True if the key existed."""
        ...

    async def delete_pattern(self, pattern: str) -> int:
        """Delete keys matching a glob pattern. Returns count."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Local Tier — In-Memory LRU
# ═══════════════════════════════════════════════════════════════════════════════

class LocalTier[T]:
    """
    In-memory LRU tier.

    Example:
        tier = LocalTier[PizzaRecipe](max_size=256)
    """

    def __init__(self, max_size: int = 1000) -> None:
        if max_size <= 0:
            raise ValueError("max_size must be positive")
        self._max_size = max_size
        self._entries: OrderedDict[str, T] = OrderedDict()

    @property
    def name(self) -> str:
        return "local"

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    async def get(self, key: str) -> T | None:
        if key not in self._entries:
            return None
        self._entries.move_to_end(key)
        return self._entries[key]

    async def set(self, key: str, value: T) -> None:
        if key in self._entries:
            self._entries.move_to_end(key)
        elif len(self._entries) >= self._max_size:
            # Evict least recently used
            self._entries.popitem(last=False)
        self._entries[key] = value

    async def delete(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    async def delete_pattern(self, pattern: str) -> int:
        matched = [key for key in self._entries if fnmatch.fnmatch(key, pattern)]
        for key in matched:
            del self._entries[key]
        return len(matched)


# ═══════════════════════════════════════════════════════════════════════════════
# Statistics
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass(slots=True)
class CacheStats:
    """Running hit/miss counters. Lookups answered by no tier count as misses."""

    hits: int = 0
    misses: int = 0

    @property
    def lookups(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        return self.hits / self.lookups if self.lookups else 0.0


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "MenuCatalog",
    "Tier",
    "LocalTier",
    "CacheStats",
)
