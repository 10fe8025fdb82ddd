"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from bookstore.application.dto import BookDTO
from bookstore.domain.exceptions import InvalidArgumentError
from bookstore.domain.model.book import BookKind
from bookstore.domain.model.inventory import Inventory


class ShowInventoryHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, kind: str | None = None) -> list[BookDTO]:
        if kind is None:
            books = self._inventory.list_all()
        else:
            try:
                book_kind = BookKind(kind.upper())
            except ValueError as exc:
                raise InvalidArgumentError(f"Unknown book kind '{kind}'") from exc
            books = self._inventory.list_by_kind(book_kind)
        return [BookDTO.from_book(book) for book in books]
