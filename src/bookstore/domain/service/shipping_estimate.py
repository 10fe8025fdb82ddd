"""Domain service: shipping cost estimate for paper books.

A flat base fee plus a per-copy weight charge. The destination does
not influence the price yet.
"""

from __future__ import annotations

from decimal import Decimal

from bookstore.domain.exceptions import InvalidArgumentError
from bookstore.domain.model.book import PaperBook
from bookstore.domain.model.value_objects import Money

BASE_SHIPPING_COST = Money(Decimal("5.00"))
PER_COPY_SHIPPING_COST = Money(Decimal("2.00"))


def estimate_shipping_cost(book: PaperBook, quantity: int, address: str | None = None) -> Money:
    """Estimate what shipping *quantity* copies of *book* would cost."""
    if quantity <= 0:
        raise InvalidArgumentError("Quantity must be greater than 0")
    return BASE_SHIPPING_COST + PER_COPY_SHIPPING_COST * quantity
