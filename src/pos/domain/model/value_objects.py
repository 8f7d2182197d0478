"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import secrets
import string
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from pos.domain.exceptions import ValidationError

_ID_ALPHABET = string.digits + string.ascii_lowercase
ID_LENGTH = 7

# Largest quantity accepted from typed input for a single cart line.
MAX_QUANTITY = 9999


def new_id() -> str:
    """Return a short random base-36 identifier (e.g. ``'k3x9q0a'``)."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(ID_LENGTH))


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal
    currency: str = "INR"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int | Decimal) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, (int, Decimal)):
            raise TypeError(
                f"Can only multiply Money by int or Decimal, got {type(factor).__name__}"
            )
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"₹ {self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that a cart line never holds zero or negative
    items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def increment(self) -> Quantity:
        return Quantity(self.value + 1)

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def clamped(raw: object) -> Quantity:
        """Coerce user input to a Quantity, never failing.

        Missing, non-numeric, non-finite and non-positive input all become
        1; fractional input is truncated; anything above ``MAX_QUANTITY``
        is capped.
        """
        try:
            number = Decimal(str(raw))
        except (InvalidOperation, ValueError, TypeError):
            return Quantity(1)
        if not number.is_finite():
            return Quantity(1)
        # Compare before int() so "1e999999999" never becomes a huge integer.
        if number > MAX_QUANTITY:
            return Quantity(MAX_QUANTITY)
        return Quantity(max(1, int(number)))


@dataclass(frozen=True)
class Totals:
    """Subtotal, tax and grand total of a cart or order."""

    subtotal: Money
    tax: Money
    total: Money

    @staticmethod
    def from_subtotal(subtotal: Money, tax_rate: Decimal) -> Totals:
        tax = subtotal * tax_rate
        return Totals(subtotal=subtotal, tax=tax, total=subtotal + tax)
