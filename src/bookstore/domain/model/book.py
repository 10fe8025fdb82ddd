"""Book entries, the polymorphic unit of the catalog.

The set of variants is closed: ``PaperBook``, ``EBook`` and
``ShowcaseBook``, each tagged with a ``BookKind``. Every variant decides
for itself whether a quantity is available and what a purchase does.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from bookstore.domain.exceptions import (
    InsufficientStockError,
    InvalidArgumentError,
    NotPurchasableError,
)
from bookstore.domain.model.value_objects import Money
from bookstore.domain.service.notifiers import Fulfillment

logger = logging.getLogger(__name__)


class BookKind(Enum):
    PHYSICAL = "PHYSICAL"
    DIGITAL = "DIGITAL"
    DISPLAY = "DISPLAY"


@dataclass
class Book(ABC):
    """Attributes shared by every catalog entry.

    ``isbn`` is the catalog key and must not change once the book has
    been added to an Inventory.
    """

    isbn: str
    title: str
    publish_year: int
    price: Money
    author_name: str

    kind: ClassVar[BookKind]

    @abstractmethod
    def is_available(self, quantity: int) -> bool:
        """Return True if *quantity* copies could be sold right now."""

    @abstractmethod
    def purchase(
        self,
        quantity: int,
        email: str,
        address: str | None,
        fulfillment: Fulfillment,
    ) -> Money:
        """Execute the sale and return the amount charged.

        *quantity* is assumed positive; the Inventory validates it.
        """

    def describe(self) -> str:
        return (
            f"{self.kind.value.lower()} '{self.title}' by {self.author_name} "
            f"({self.publish_year}, ISBN {self.isbn}) at {self.price}"
        )


@dataclass
class PaperBook(Book):
    """A physical book with a finite stock that ships to an address."""

    stock: int

    kind: ClassVar[BookKind] = BookKind.PHYSICAL

    def __post_init__(self) -> None:
        if self.stock < 0:
            raise InvalidArgumentError(
                f"Stock cannot be negative for '{self.title}', got {self.stock}"
            )

    def is_available(self, quantity: int) -> bool:
        return self.stock >= quantity

    def purchase(
        self,
        quantity: int,
        email: str,
        address: str | None,
        fulfillment: Fulfillment,
    ) -> Money:
        # The Inventory checks availability too, but a PaperBook can be
        # bought directly and stock must never go below zero.
        if quantity > self.stock:
            raise InsufficientStockError(
                f"Insufficient stock for '{self.title}' "
                f"(need {quantity}, have {self.stock})"
            )
        self.stock -= quantity
        fulfillment.shipping.notify(self, quantity, address)

        amount = self.price * quantity
        logger.info(
            "Paper book '%s' purchased: quantity=%d total=%s", self.title, quantity, amount
        )
        return amount

    def describe(self) -> str:
        return f"{super().describe()}, {self.stock} in stock"


@dataclass
class EBook(Book):
    """A digital book, delivered by email and never out of stock."""

    file_type: str

    kind: ClassVar[BookKind] = BookKind.DIGITAL

    def is_available(self, quantity: int) -> bool:
        return True

    def purchase(
        self,
        quantity: int,
        email: str,
        address: str | None,
        fulfillment: Fulfillment,
    ) -> Money:
        fulfillment.delivery.notify(self, quantity, email)

        amount = self.price * quantity
        logger.info(
            "E-book '%s' purchased: quantity=%d total=%s", self.title, quantity, amount
        )
        return amount

    def describe(self) -> str:
        return f"{super().describe()}, {self.file_type}"


@dataclass
class ShowcaseBook(Book):
    """A display copy. Browsable, never for sale."""

    kind: ClassVar[BookKind] = BookKind.DISPLAY

    def is_available(self, quantity: int) -> bool:
        return False

    def purchase(
        self,
        quantity: int,
        email: str,
        address: str | None,
        fulfillment: Fulfillment,
    ) -> Money:
        raise NotPurchasableError(
            f"Showcase books are not available for purchase: '{self.title}'"
        )
