"""Tests for the logging-backed notifiers and the composition root."""

import logging

from bookstore.domain.model.book import BookKind, EBook, PaperBook
from bookstore.domain.model.value_objects import Money
from bookstore.infrastructure.bootstrap import build_inventory, sample_catalog
from bookstore.infrastructure.notifiers import (
    LoggingConfirmationNotifier,
    LoggingDeliveryNotifier,
    LoggingShippingNotifier,
)

NOTIFIER_LOGGER = "bookstore.infrastructure.notifiers"


class TestLoggingNotifiers:

    def test_shipping_logs_destination(self, caplog):
        caplog.set_level(logging.INFO, logger=NOTIFIER_LOGGER)
        book = PaperBook("P1", "Effective Java", 2018, Money.of("45.99"), "Joshua Bloch", stock=1)

        LoggingShippingNotifier().notify(book, 2, "123 Main St")

        assert "Shipping 2 x 'Effective Java' (ISBN P1) to 123 Main St" in caplog.text

    def test_shipping_without_address(self, caplog):
        caplog.set_level(logging.INFO, logger=NOTIFIER_LOGGER)
        book = PaperBook("P1", "Effective Java", 2018, Money.of("45.99"), "Joshua Bloch", stock=1)

        LoggingShippingNotifier().notify(book, 1, None)

        assert "<no address given>" in caplog.text

    def test_delivery_logs_file_type_and_email(self, caplog):
        caplog.set_level(logging.INFO, logger=NOTIFIER_LOGGER)
        book = EBook("E1", "Clean Code", 2008, Money.of("29.99"), "Robert C. Martin", file_type="EPUB")

        LoggingDeliveryNotifier().notify(book, 1, "reader@e.com")

        assert "EPUB" in caplog.text
        assert "to reader@e.com" in caplog.text

    def test_confirmation_logs_total(self, caplog):
        caplog.set_level(logging.INFO, logger=NOTIFIER_LOGGER)

        LoggingConfirmationNotifier().notify("x@e.com", "Clean Code", Money.of("59.98"))

        assert "Purchase confirmation to x@e.com: 'Clean Code', total $59.98" in caplog.text


class TestBootstrap:

    def test_seeded_inventory_holds_sample_catalog(self):
        inventory = build_inventory()
        assert inventory.size() == len(sample_catalog())
        assert {b.kind for b in inventory.list_all()} == set(BookKind)

    def test_unseeded_inventory_is_empty(self):
        assert build_inventory(seed=False).size() == 0

    def test_each_build_starts_fresh(self):
        first = build_inventory()
        first.buy("978-0134685991", 10, "x@e.com", "addr")
        assert build_inventory().find("978-0134685991").stock == 10

    def test_purchase_goes_through_logging_notifiers(self, caplog):
        caplog.set_level(logging.INFO, logger=NOTIFIER_LOGGER)
        inventory = build_inventory()

        inventory.buy("978-0132350884", 2, "x@e.com", None)

        assert "Mailing 2 x 'Clean Code'" in caplog.text
        assert "total $59.98" in caplog.text
