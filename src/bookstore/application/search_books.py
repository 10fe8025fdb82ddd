"""Application service: Search Books use case (query)."""

from __future__ import annotations

from bookstore.application.dto import BookDTO
from bookstore.domain.model.inventory import Inventory


class SearchBooksHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(
        self,
        title: str | None = None,
        author: str | None = None,
    ) -> list[BookDTO]:
        """Search by title, by author, or by both (results must match both).

        Blank criteria are ignored; with no criteria nothing matches.
        """
        has_title = bool(title and title.strip())
        has_author = bool(author and author.strip())

        if has_title and has_author:
            by_author = {book.isbn for book in self._inventory.search_by_author(author)}
            books = [
                book for book in self._inventory.search_by_title(title)
                if book.isbn in by_author
            ]
        elif has_title:
            books = self._inventory.search_by_title(title)
        else:
            books = self._inventory.search_by_author(author)

        return [BookDTO.from_book(book) for book in books]
