"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from bookstore.domain.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class Money:
    """A non-negative monetary amount.

    Backed by Decimal so that ``price * quantity`` is exact.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidArgumentError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise InvalidArgumentError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise InvalidArgumentError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Coerce *amount* to Decimal via its string form."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise InvalidArgumentError(f"Invalid money amount: {amount!r}") from exc
