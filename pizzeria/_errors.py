"""
Domain errors.

Errors are values: fallible operations return ``Error(SomeDomainError(...))``
instead of raising. They still derive from ``Exception`` so callers at the
edge can log them with context or re-raise.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar


@dataclass(frozen=True, slots=True)
class DomainError(Exception):
    message: str

    code: ClassVar[str] = "DOMAIN_ERROR"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class ValidationError(DomainError):
    """Malformed input: currency mismatch, negative amount, empty field, bad quantity."""

    field: str | None = None

    code: ClassVar[str] = "VALIDATION_ERROR"


@dataclass(frozen=True, slots=True)
class BusinessRuleViolationError(DomainError):
    """Illegal state transition."""

    details: Mapping[str, Any] | None = None

    code: ClassVar[str] = "BUSINESS_RULE_VIOLATION"

    @classmethod
    def of(cls, rule: str, **details: Any) -> BusinessRuleViolationError:
        return cls(f"Business rule violation: {rule}", details or None)


@dataclass(frozen=True, slots=True)
class NotFoundError(DomainError):
    resource: str = ""
    id: str | None = None

    code: ClassVar[str] = "NOT_FOUND"

    @classmethod
    def of(cls, resource: str, id: str | None = None) -> NotFoundError:
        suffix = f" with id {id}" if id else ""
        return cls(f"{resource}{suffix} not found", resource, id)


@dataclass(frozen=True, slots=True)
class PersistenceError(DomainError):
    """Storage backend raised while saving or loading."""

    code: ClassVar[str] = "PERSISTENCE_ERROR"


__all__ = (
    "DomainError",
    "ValidationError",
    "BusinessRuleViolationError",
    "NotFoundError",
    "PersistenceError",
)
