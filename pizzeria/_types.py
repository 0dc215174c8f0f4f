"""
Core types for pizzeria.

Shared aliases and helpers used across the domain packages.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from types import MappingProxyType

# Re-export from combinators
from combinators import LCR

# ═══════════════════════════════════════════════════════════════════════════════
# Identity
# ═══════════════════════════════════════════════════════════════════════════════

type ID = str
"""Entity identifier (UUID string for orders, slug for catalog entries)."""

# ═══════════════════════════════════════════════════════════════════════════════
# Time
# ═══════════════════════════════════════════════════════════════════════════════

type Clock = Callable[[], datetime]
"""Source of "now". Injected so lifecycle timestamps are testable."""


def utcnow() -> datetime:
    """Default clock: timezone-aware UTC now."""
    return datetime.now(UTC)


def require_aware(value: datetime, name: str) -> None:
    """Raise ``ValueError`` for a naive datetime; it cannot be compared with clock time."""
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"{name} must be timezone-aware")


# ═══════════════════════════════════════════════════════════════════════════════
# Records
# ═══════════════════════════════════════════════════════════════════════════════


def freeze[K, V](mapping: Mapping[K, V]) -> Mapping[K, V]:
    """Read-only copy of ``mapping`` for storing inside frozen records."""
    return MappingProxyType(dict(mapping))


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from combinators
    "LCR",
    # Aliases
    "ID",
    "Clock",
    "utcnow",
    "require_aware",
    "freeze",
)
