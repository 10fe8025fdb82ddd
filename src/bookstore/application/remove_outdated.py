"""Application service: Remove Outdated Books use case."""

from __future__ import annotations

from bookstore.application.dto import BookDTO
from bookstore.domain.model.inventory import Inventory


class RemoveOutdatedHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self, years_threshold: int, current_year: int | None = None) -> list[BookDTO]:
        removed = self._inventory.remove_outdated(years_threshold, current_year)
        return [BookDTO.from_book(book) for book in removed]
