"""Application service: Add Book use case.

Builds the right Book variant from plain CLI-style input and places it
in the catalog, replacing any entry that shares the ISBN.
"""

from __future__ import annotations

from bookstore.application.dto import BookDTO
from bookstore.domain.exceptions import InvalidArgumentError
from bookstore.domain.model.book import Book, BookKind, EBook, PaperBook, ShowcaseBook
from bookstore.domain.model.inventory import Inventory
from bookstore.domain.model.value_objects import Money


class AddBookHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(
        self,
        kind: str,
        isbn: str,
        title: str,
        publish_year: int,
        price: str,
        author_name: str,
        stock: int | None = None,
        file_type: str | None = None,
    ) -> BookDTO:
        if not isbn or not isbn.strip():
            raise InvalidArgumentError("ISBN is required")
        if not title or not title.strip():
            raise InvalidArgumentError("Title is required")
        if not author_name or not author_name.strip():
            raise InvalidArgumentError("Author name is required")

        book = self._build(
            self._parse_kind(kind),
            isbn=isbn.strip(),
            title=title.strip(),
            publish_year=publish_year,
            price=Money.of(price),
            author_name=author_name.strip(),
            stock=stock,
            file_type=file_type,
        )
        self._inventory.add(book)
        return BookDTO.from_book(book)

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _parse_kind(kind: str) -> BookKind:
        try:
            return BookKind(kind.strip().upper())
        except ValueError as exc:
            choices = ", ".join(k.value for k in BookKind)
            raise InvalidArgumentError(
                f"Unknown book kind '{kind}' (expected one of {choices})"
            ) from exc

    @staticmethod
    def _build(
        kind: BookKind,
        *,
        isbn: str,
        title: str,
        publish_year: int,
        price: Money,
        author_name: str,
        stock: int | None,
        file_type: str | None,
    ) -> Book:
        if kind is BookKind.PHYSICAL:
            if stock is None:
                raise InvalidArgumentError("Paper books need an initial stock")
            return PaperBook(isbn, title, publish_year, price, author_name, stock=stock)
        if kind is BookKind.DIGITAL:
            if not file_type or not file_type.strip():
                raise InvalidArgumentError("E-books need a file type")
            return EBook(
                isbn, title, publish_year, price, author_name,
                file_type=file_type.strip().upper(),
            )
        return ShowcaseBook(isbn, title, publish_year, price, author_name)
