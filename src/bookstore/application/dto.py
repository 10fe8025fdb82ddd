"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from bookstore.domain.model.book import Book, EBook, PaperBook


@dataclass(frozen=True)
class BookDTO:
    """Output: one catalog entry as displayed to the user."""

    isbn: str
    kind: str
    title: str
    author_name: str
    publish_year: int
    price: str  # formatted, e.g. "$45.99"
    stock: int | None = None  # paper books only
    file_type: str | None = None  # e-books only

    @staticmethod
    def from_book(book: Book) -> BookDTO:
        return BookDTO(
            isbn=book.isbn,
            kind=book.kind.value,
            title=book.title,
            author_name=book.author_name,
            publish_year=book.publish_year,
            price=str(book.price),
            stock=book.stock if isinstance(book, PaperBook) else None,
            file_type=book.file_type if isinstance(book, EBook) else None,
        )


@dataclass(frozen=True)
class PurchaseReceiptDTO:
    """Output: the outcome of a successful purchase."""

    isbn: str
    title: str
    quantity: int
    email: str
    total: str
