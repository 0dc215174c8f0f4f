"""
In-process event bus.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from combinators import lift as L, parallel, recover_with
from kungfu import LazyCoroResult

from pizzeria.events._types import DispatchReport, Handler, HandlerFailure

logger = logging.getLogger(__name__)


def _handler_name(handler: Handler[Any]) -> str:
    return getattr(handler, "__qualname__", None) or type(handler).__name__


def _attempt(handler: Handler[Any], event: object) -> LazyCoroResult[HandlerFailure | None, Any]:
    """Deliver one event; a raised exception becomes the ``HandlerFailure`` value."""
    delivery = L.catching_async(
        lambda: handler(event),
        on_error=lambda exc: HandlerFailure(event=event, handler=_handler_name(handler), error=exc),
    )
    return recover_with(delivery.map(lambda _: None), handler=lambda failure: failure)


class EventBus:
    """
    Routes events to async handlers by type.

    A handler subscribed to a base class receives every subclass instance.
    Handlers for one event run concurrently; events are published in order.
    One failing handler never stops the others.

    Example:
        bus = EventBus()
        bus.subscribe(OrderStatusChanged, notify_customer)
        bus.subscribe(object, log_event)

        report = await bus.publish(transition.events)
        if not report.ok:
            ...
    """

    def __init__(self) -> None:
        self._handlers: dict[type, list[Handler[Any]]] = {}

    def subscribe[E](self, event_type: type[E], handler: Handler[E]) -> None:
        self._handlers.setdefault(event_type, []).append(handler)

    def handlers_for(self, event: object) -> tuple[Handler[Any], ...]:
        return tuple(
            handler
            for event_type, handlers in self._handlers.items()
            if isinstance(event, event_type)
            for handler in handlers
        )

    async def publish(self, events: Iterable[object]) -> DispatchReport:
        delivered = 0
        failures: list[HandlerFailure] = []

        for event in events:
            handlers = self.handlers_for(event)
            if not handlers:
                logger.debug("No handlers for %s", type(event).__name__)
                continue

            outcomes = await parallel(*(_attempt(h, event) for h in handlers))
            for outcome in outcomes.unwrap():
                if outcome is None:
                    delivered += 1
                    continue
                logger.warning(
                    "Handler %s failed for %s",
                    outcome.handler,
                    outcome.event_type,
                    exc_info=outcome.error,
                )
                failures.append(outcome)

        return DispatchReport(delivered=delivered, failures=tuple(failures))

    def clear(self) -> None:
        self._handlers.clear()


async def log_event(event: object) -> None:
    """Handler that logs every event it receives at INFO."""
    logger.info("%s: %r", type(event).__name__, event)


__all__ = (
    "EventBus",
    "log_event",
)
