"""Application service: Buy Book use case.

Thin wrapper over ``Inventory.sell`` that turns the sold entry and the
charged amount into a receipt for display.
"""

from __future__ import annotations

from bookstore.application.dto import PurchaseReceiptDTO
from bookstore.domain.model.inventory import Inventory


class BuyBookHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(
        self,
        isbn: str,
        quantity: int,
        email: str,
        address: str | None = None,
    ) -> PurchaseReceiptDTO:
        sale = self._inventory.sell(isbn, quantity, email, address)
        return PurchaseReceiptDTO(
            isbn=sale.book.isbn,
            title=sale.book.title,
            quantity=sale.quantity,
            email=email,
            total=str(sale.amount),
        )
