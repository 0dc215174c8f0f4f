"""
pizzeria — pizza ordering domain: money, pricing, order lifecycle.

    from pizzeria import money as MN      # Currency-tagged amounts
    from pizzeria import menu as M        # Ingredients, recipes, pizzas
    from pizzeria import pricing as P     # Pricing pipelines
    from pizzeria import order as O       # Order record and transitions
    from pizzeria import events as E      # In-process event bus
    from pizzeria import catalog as C     # Menu lookup and caching
    from pizzeria import placement as PL  # Order use cases
"""

import logging

from pizzeria import money
from pizzeria import menu
from pizzeria import pricing
from pizzeria import order
from pizzeria import events
from pizzeria import catalog
from pizzeria import placement
from pizzeria._errors import (
    DomainError,
    ValidationError,
    BusinessRuleViolationError,
    NotFoundError,
    PersistenceError,
)
from pizzeria._types import ID, Clock, LCR, utcnow

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = (
    "money",
    "menu",
    "pricing",
    "order",
    "events",
    "catalog",
    "placement",
    "DomainError",
    "ValidationError",
    "BusinessRuleViolationError",
    "NotFoundError",
    "PersistenceError",
    "ID",
    "Clock",
    "LCR",
    "utcnow",
)
