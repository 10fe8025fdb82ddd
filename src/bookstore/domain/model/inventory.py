"""Inventory aggregate: the bookstore's catalog, keyed by ISBN.

The Inventory exclusively owns every Book added to it. It validates
purchase requests, asks the book whether the quantity is available,
lets the book execute the sale and then confirms it with the buyer.

Invariants:
- one entry per ISBN; adding a book with a known ISBN replaces the old one
- a PaperBook's stock never drops below zero, even under concurrent buys
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import date

from bookstore.domain.exceptions import (
    BookNotFoundError,
    InvalidArgumentError,
    UnavailableError,
)
from bookstore.domain.model.book import Book, BookKind
from bookstore.domain.model.value_objects import Money
from bookstore.domain.service.notifiers import ConfirmationNotifier, Fulfillment

logger = logging.getLogger(__name__)


def _is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


@dataclass(frozen=True)
class Sale:
    """The entry that was actually sold, and what it cost."""

    book: Book
    quantity: int
    amount: Money


class Inventory:

    def __init__(
        self,
        confirmation: ConfirmationNotifier,
        fulfillment: Fulfillment,
    ) -> None:
        self._books: dict[str, Book] = {}
        self._confirmation = confirmation
        self._fulfillment = fulfillment
        self._lock = threading.RLock()

    # --- Catalog maintenance --------------------------------------------------

    def add(self, book: Book | None) -> None:
        """Insert *book* under its ISBN, replacing any previous entry."""
        if book is None:
            raise InvalidArgumentError("Book cannot be None")

        with self._lock:
            self._books[book.isbn] = book
        logger.info("Added to inventory: %s", book.describe())

    def remove_outdated(
        self,
        years_threshold: int,
        current_year: int | None = None,
    ) -> list[Book]:
        """Remove and return every book published before the cutoff year.

        The cutoff is ``current_year - years_threshold``; a book published
        exactly in the cutoff year is kept. *current_year* defaults to the
        system clock's year.
        """
        if years_threshold < 0:
            raise InvalidArgumentError("Years threshold cannot be negative")
        if current_year is None:
            current_year = date.today().year
        cutoff_year = current_year - years_threshold

        with self._lock:
            outdated = [
                book for book in self._books.values() if book.publish_year < cutoff_year
            ]
            for book in outdated:
                del self._books[book.isbn]

        for book in outdated:
            logger.info(
                "Removed outdated (cutoff %d): %s", cutoff_year, book.describe()
            )
        return outdated

    # --- Purchase -------------------------------------------------------------

    def buy(
        self,
        isbn: str | None,
        quantity: int,
        email: str | None,
        address: str | None,
    ) -> Money:
        """Sell *quantity* copies of the book stored under *isbn*, return the charge."""
        return self.sell(isbn, quantity, email, address).amount

    def sell(
        self,
        isbn: str | None,
        quantity: int,
        email: str | None,
        address: str | None,
    ) -> Sale:
        """Like ``buy`` but also report which entry was sold.

        The email address is only checked for presence, not format.
        Any error raised by the book itself propagates unchanged, and a
        failed purchase leaves the catalog untouched.
        """
        if _is_blank(isbn):
            raise InvalidArgumentError("ISBN cannot be empty")
        if quantity <= 0:
            raise InvalidArgumentError("Quantity must be greater than 0")
        if _is_blank(email):
            raise InvalidArgumentError("Email cannot be empty")

        with self._lock:
            book = self._books.get(isbn)
            if book is None:
                raise BookNotFoundError(f"Book with ISBN {isbn} not found in inventory")
            if not book.is_available(quantity):
                raise UnavailableError(
                    f"Book '{book.title}' is not available in the requested quantity"
                )
            amount = book.purchase(quantity, email, address, self._fulfillment)

        self._confirmation.notify(email, book.title, amount)
        return Sale(book=book, quantity=quantity, amount=amount)

    # --- Queries --------------------------------------------------------------

    def find(self, isbn: str) -> Book | None:
        return self._books.get(isbn)

    def list_all(self) -> list[Book]:
        """Return a snapshot of every book; later changes do not affect it."""
        with self._lock:
            return list(self._books.values())

    def list_by_kind(self, kind: BookKind) -> list[Book]:
        return [book for book in self.list_all() if book.kind is kind]

    def search_by_title(self, text: str | None) -> list[Book]:
        """Case-insensitive substring search; blank text matches nothing."""
        if _is_blank(text):
            return []
        needle = text.lower()
        return [book for book in self.list_all() if needle in book.title.lower()]

    def search_by_author(self, text: str | None) -> list[Book]:
        if _is_blank(text):
            return []
        needle = text.lower()
        return [book for book in self.list_all() if needle in book.author_name.lower()]

    def size(self) -> int:
        return len(self._books)

    def __len__(self) -> int:
        return self.size()
