"""
Catalog — recipe and ingredient lookup with optional caching.

    from pizzeria import catalog as C

    source = C.InMemoryMenuCatalog(recipes=[margherita], ingredients=[basil])
    catalog = C.CachedCatalog(source, tiers=(C.LocalTier(max_size=256),))
    recipe = await catalog.recipe("margherita")
"""

from __future__ import annotations

from pizzeria.catalog._types import MenuCatalog, Tier, LocalTier, CacheStats
from pizzeria.catalog._memory import InMemoryMenuCatalog
from pizzeria.catalog._cached import CachedCatalog

__all__ = (
    "MenuCatalog",
    "Tier",
    "LocalTier",
    "CacheStats",
    "InMemoryMenuCatalog",
    "CachedCatalog",
)
