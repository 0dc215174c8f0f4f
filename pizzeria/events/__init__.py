"""
Events — in-process publish/subscribe for domain events.

    from pizzeria import events as E

    bus = E.EventBus()
    bus.subscribe(object, E.log_event)
    report = await bus.publish(transition.events)
"""

from __future__ import annotations

from pizzeria.events._types import Handler, HandlerFailure, DispatchReport
from pizzeria.events._bus import EventBus, log_event

__all__ = (
    "Handler",
    "HandlerFailure",
    "DispatchReport",
    "EventBus",
    "log_event",
)
