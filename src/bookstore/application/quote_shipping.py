"""Application service: Quote Shipping use case (query).

Estimates shipping for a paper book without buying it.
"""

from __future__ import annotations

from bookstore.domain.exceptions import BookNotFoundError, InvalidArgumentError
from bookstore.domain.model.book import PaperBook
from bookstore.domain.model.inventory import Inventory
from bookstore.domain.model.value_objects import Money
from bookstore.domain.service.shipping_estimate import estimate_shipping_cost


class QuoteShippingHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, isbn: str, quantity: int, address: str | None = None) -> Money:
        book = self._inventory.find(isbn)
        if book is None:
            raise BookNotFoundError(f"Book with ISBN {isbn} not found in inventory")
        if not isinstance(book, PaperBook):
            raise InvalidArgumentError(
                f"Only paper books are shipped; '{book.title}' is {book.kind.value}"
            )
        return estimate_shipping_cost(book, quantity, address)
