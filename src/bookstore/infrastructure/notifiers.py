"""Logging-backed notifiers.

Stand-ins for real mail and shipping integrations: each one records
what it would have sent through the standard logging module.
"""

from __future__ import annotations

import logging

from bookstore.domain.model.book import EBook, PaperBook
from bookstore.domain.model.value_objects import Money
from bookstore.domain.service.notifiers import (
    ConfirmationNotifier,
    DeliveryNotifier,
    ShippingNotifier,
)

logger = logging.getLogger(__name__)


class LoggingShippingNotifier(ShippingNotifier):

    def notify(self, book: PaperBook, quantity: int, address: str | None) -> None:
        logger.info(
            "Shipping %d x '%s' (ISBN %s) to %s",
            quantity,
            book.title,
            book.isbn,
            address or "<no address given>",
        )


class LoggingDeliveryNotifier(DeliveryNotifier):

    def notify(self, book: EBook, quantity: int, email: str) -> None:
        logger.info(
            "Mailing %d x '%s' (ISBN %s, %s) to %s",
            quantity,
            book.title,
            book.isbn,
            book.file_type,
            email,
        )


class LoggingConfirmationNotifier(ConfirmationNotifier):

    def notify(self, email: str, title: str, amount: Money) -> None:
        logger.info(
            "Purchase confirmation to %s: '%s', total %s", email, title, amount
        )
