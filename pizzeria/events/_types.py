"""
Event bus types.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

type Handler[E] = Callable[[E], Awaitable[None]]
"""Async callable receiving one event. Raising marks the delivery as failed."""


@dataclass(frozen=True, slots=True)
class HandlerFailure:
    """One handler raised while handling one event."""

    event: object
    handler: str
    error: Exception

    @property
    def event_type(self) -> str:
        return type(self.event).__name__


@dataclass(frozen=True, slots=True)
class DispatchReport:
    """Outcome of ``EventBus.publish``: successful deliveries and captured failures."""

    delivered: int = 0
    failures: tuple[HandlerFailure, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.failures

    def merge(self, other: DispatchReport) -> DispatchReport:
        return DispatchReport(
            delivered=self.delivered + other.delivered,
            failures=(*self.failures, *other.failures),
        )


__all__ = (
    "Handler",
    "HandlerFailure",
    "DispatchReport",
)
