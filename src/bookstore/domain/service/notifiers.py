"""Collaborator interfaces invoked by a purchase.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (logging, test doubles)
live elsewhere. None of them return anything the domain relies on.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bookstore.domain.model.book import EBook, PaperBook
    from bookstore.domain.model.value_objects import Money


class ShippingNotifier(ABC):

    @abstractmethod
    def notify(self, book: PaperBook, quantity: int, address: str | None) -> None:
        """Hand *quantity* copies of a paper book to shipping."""


class DeliveryNotifier(ABC):

    @abstractmethod
    def notify(self, book: EBook, quantity: int, email: str) -> None:
        """Send an e-book to the buyer's mailbox."""


class ConfirmationNotifier(ABC):

    @abstractmethod
    def notify(self, email: str, title: str, amount: Money) -> None:
        """Tell the buyer a purchase went through."""


@dataclass(frozen=True)
class Fulfillment:
    """The notifiers a book may call while executing a purchase."""

    shipping: ShippingNotifier
    delivery: DeliveryNotifier
