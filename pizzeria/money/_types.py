"""
Money — immutable decimal amount tagged with a currency.

Every binary operation requires matching currencies and returns a new
instance wrapped in ``Result``; nothing here raises on bad input except
direct construction with a negative amount, which is a programming error.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import StrEnum

from kungfu import Result, Ok, Error

from pizzeria._errors import ValidationError

type Amount = Decimal | int | float | str
"""Anything convertible to an exact ``Decimal``. Floats go through ``str``."""

# ═══════════════════════════════════════════════════════════════════════════════
# Currency
# ═══════════════════════════════════════════════════════════════════════════════


class Currency(StrEnum):
    USD = "USD"
    EUR = "EUR"
    RUB = "RUB"


_SYMBOLS: dict[Currency, str] = {
    Currency.USD: "$",
    Currency.EUR: "€",
    Currency.RUB: "₽",
}

_CENT = Decimal("0.01")


def to_decimal(value: Amount) -> Result[Decimal, ValidationError]:
    """Convert a numeric value to a finite ``Decimal``."""
    try:
        number = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        return Error(ValidationError(f"Invalid numeric value: {value!r}"))
    if not number.is_finite():
        return Error(ValidationError(f"Amount must be finite, got {value!r}"))
    return Ok(number)


# ═══════════════════════════════════════════════════════════════════════════════
# Money
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Money:
    """
    Value object: compared by amount and currency.

    Build through ``Money.create`` / ``Money.from_cents`` to get validation
    as data.

    Example:
        price = Money.create("16.99", Currency.USD).unwrap()

        match price.multiply("1.3"):
            case Ok(large):
                print(large)          # $22.09
            case Error(e):
                print(e.message)
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @staticmethod
    def create(amount: Amount, currency: Currency | str) -> Result[Money, ValidationError]:
        if currency not in Currency:
            return Error(ValidationError(f"Unsupported currency: {currency}", "currency"))
        match to_decimal(amount):
            case Ok(value):
                if value < 0:
                    return Error(ValidationError("Money amount cannot be negative", "amount"))
                return Ok(Money(value, Currency(currency)))
            case Error(e):
                return Error(e)

    @staticmethod
    def from_cents(cents: int, currency: Currency | str) -> Result[Money, ValidationError]:
        if currency not in Currency:
            return Error(ValidationError(f"Unsupported currency: {currency}", "currency"))
        if cents < 0:
            return Error(ValidationError("Money amount cannot be negative", "amount"))
        return Ok(Money(Decimal(cents) / 100, Currency(currency)))

    @staticmethod
    def zero(currency: Currency) -> Money:
        return Money(Decimal(0), Currency(currency))

    def add(self, other: Money) -> Result[Money, ValidationError]:
        if (mismatch := self._currency_mismatch(other)) is not None:
            return Error(mismatch)
        return Ok(Money(self.amount + other.amount, self.currency))

    def subtract(self, other: Money) -> Result[Money, ValidationError]:
        if (mismatch := self._currency_mismatch(other)) is not None:
            return Error(mismatch)
        remainder = self.amount - other.amount
        if remainder < 0:
            return Error(ValidationError("Cannot subtract more money than available"))
        return Ok(Money(remainder, self.currency))

    def multiply(self, factor: Amount) -> Result[Money, ValidationError]:
        match to_decimal(factor):
            case Ok(value):
                if value < 0:
                    return Error(ValidationError("Cannot multiply money by negative factor", "factor"))
                return Ok(Money(self.amount * value, self.currency))
            case Error(e):
                return Error(e)

    def equals(self, other: object) -> bool:
        if not isinstance(other, Money):
            return False
        return self.amount == other.amount and self.currency == other.currency

    def is_greater_than(self, other: Money) -> Result[bool, ValidationError]:
        if (mismatch := self._currency_mismatch(other)) is not None:
            return Error(mismatch)
        return Ok(self.amount > other.amount)

    def is_less_than(self, other: Money) -> Result[bool, ValidationError]:
        if (mismatch := self._currency_mismatch(other)) is not None:
            return Error(mismatch)
        return Ok(self.amount < other.amount)

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    def to_cents(self) -> int:
        """Nearest integer cent, halves rounded up."""
        return int((self.amount * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP))

    def __str__(self) -> str:
        rounded = self.amount.quantize(_CENT, rounding=ROUND_HALF_UP)
        return f"{_SYMBOLS[self.currency]}{rounded:,.2f}"

    def _currency_mismatch(self, other: Money) -> ValidationError | None:
        if self.currency != other.currency:
            return ValidationError(
                "Cannot perform operation with different currencies: "
                f"{self.currency} and {other.currency}",
                "currency",
            )
        return None


def total(amounts: list[Money] | tuple[Money, ...], currency: Currency) -> Result[Money, ValidationError]:
    """Sum amounts starting from zero in ``currency``; any mismatch fails."""
    acc = Money.zero(currency)
    for amount in amounts:
        match acc.add(amount):
            case Ok(value):
                acc = value
            case Error(e):
                return Error(e)
    return Ok(acc)


__all__ = (
    "Amount",
    "Currency",
    "Money",
    "to_decimal",
    "total",
)
