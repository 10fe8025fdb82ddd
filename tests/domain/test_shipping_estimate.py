"""Unit tests for the shipping cost estimate."""

import pytest

from bookstore.domain.exceptions import InvalidArgumentError
from bookstore.domain.model.book import PaperBook
from bookstore.domain.model.value_objects import Money
from bookstore.domain.service.shipping_estimate import estimate_shipping_cost


def _book() -> PaperBook:
    return PaperBook("P", "Effective Java", 2018, Money.of("45.99"), "Joshua Bloch", stock=10)


class TestEstimateShippingCost:

    def test_single_copy(self):
        assert estimate_shipping_cost(_book(), 1, "123 Main St") == Money.of("7.00")

    def test_base_plus_per_copy(self):
        assert estimate_shipping_cost(_book(), 4) == Money.of("13.00")

    def test_does_not_touch_stock(self):
        book = _book()
        estimate_shipping_cost(book, 3)
        assert book.stock == 10

    def test_non_positive_quantity_rejected(self):
        with pytest.raises(InvalidArgumentError, match="greater than 0"):
            estimate_shipping_cost(_book(), 0)
