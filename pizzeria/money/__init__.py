"""
Money — currency-tagged decimal amounts.

    from pizzeria.money import Money, Currency

    price = Money.create("16.99", Currency.USD)
"""

from __future__ import annotations

from pizzeria.money._types import Amount, Currency, Money, to_decimal, total

__all__ = (
    "Amount",
    "Currency",
    "Money",
    "to_decimal",
    "total",
)
