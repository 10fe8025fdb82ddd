"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Nothing is persisted: every call to ``build_inventory`` starts from the
sample catalog below.
"""

from __future__ import annotations

from bookstore.domain.model.book import Book, EBook, PaperBook, ShowcaseBook
from bookstore.domain.model.inventory import Inventory
from bookstore.domain.model.value_objects import Money
from bookstore.domain.service.notifiers import Fulfillment
from bookstore.infrastructure.notifiers import (
    LoggingConfirmationNotifier,
    LoggingDeliveryNotifier,
    LoggingShippingNotifier,
)


def sample_catalog() -> list[Book]:
    return [
        PaperBook("978-0134685991", "Effective Java", 2018, Money.of("45.99"), "Joshua Bloch", stock=10),
        PaperBook("978-0201633610", "Design Patterns", 1994, Money.of("54.99"), "Erich Gamma", stock=3),
        EBook("978-0132350884", "Clean Code", 2008, Money.of("29.99"), "Robert C. Martin", file_type="PDF"),
        EBook("978-1491950357", "Fluent Python", 2022, Money.of("49.99"), "Luciano Ramalho", file_type="EPUB"),
        ShowcaseBook("978-0134494166", "Clean Architecture", 2017, Money.of("39.99"), "Robert C. Martin"),
    ]


def build_inventory(seed: bool = True) -> Inventory:
    inventory = Inventory(
        confirmation=LoggingConfirmationNotifier(),
        fulfillment=Fulfillment(
            shipping=LoggingShippingNotifier(),
            delivery=LoggingDeliveryNotifier(),
        ),
    )
    if seed:
        for book in sample_catalog():
            inventory.add(book)
    return inventory
