"""Integration tests for the AddBook use case.

Uses recording fake notifiers, so nothing is logged or sent.
"""

from decimal import Decimal

import pytest

from bookstore.application.add_book import AddBookHandler
from bookstore.domain.exceptions import InvalidArgumentError
from bookstore.domain.model.book import EBook, PaperBook, ShowcaseBook
from tests.fakes import FakeNotifiers


def _setup():
    inventory = FakeNotifiers().inventory()
    return AddBookHandler(inventory), inventory


class TestAddBookHappyPath:

    def test_adds_paper_book(self):
        handler, inventory = _setup()
        dto = handler.handle("physical", "P1", "Effective Java", 2018, "45.99", "Joshua Bloch", stock=10)

        book = inventory.find("P1")
        assert isinstance(book, PaperBook)
        assert book.stock == 10
        assert book.price.amount == Decimal("45.99")
        assert dto.kind == "PHYSICAL"
        assert dto.price == "$45.99"
        assert dto.stock == 10
        assert dto.file_type is None

    def test_adds_ebook_with_normalized_file_type(self):
        handler, inventory = _setup()
        dto = handler.handle("DIGITAL", "E1", "Clean Code", 2008, "29.99", "Robert C. Martin", file_type=" epub ")

        assert isinstance(inventory.find("E1"), EBook)
        assert dto.file_type == "EPUB"
        assert dto.stock is None

    def test_adds_showcase_book(self):
        handler, inventory = _setup()
        handler.handle("display", "S1", "Clean Architecture", 2017, "39.99", "Robert C. Martin")
        assert isinstance(inventory.find("S1"), ShowcaseBook)

    def test_strips_whitespace(self):
        handler, inventory = _setup()
        dto = handler.handle("display", "  S1 ", "  Title ", 2017, "1", " Someone ")
        assert dto.isbn == "S1"
        assert dto.title == "Title"
        assert inventory.find("S1").author_name == "Someone"

    def test_replaces_existing_isbn(self):
        handler, inventory = _setup()
        handler.handle("physical", "X", "First", 2018, "10", "A", stock=1)
        handler.handle("display", "X", "Second", 2019, "20", "B")

        assert inventory.size() == 1
        assert inventory.find("X").title == "Second"


class TestAddBookValidation:

    def test_unknown_kind_rejected(self):
        handler, _ = _setup()
        with pytest.raises(InvalidArgumentError, match="Unknown book kind 'audio'"):
            handler.handle("audio", "A1", "Title", 2020, "10", "Author")

    def test_blank_isbn_rejected(self):
        handler, _ = _setup()
        with pytest.raises(InvalidArgumentError, match="ISBN is required"):
            handler.handle("display", " ", "Title", 2020, "10", "Author")

    def test_blank_title_rejected(self):
        handler, _ = _setup()
        with pytest.raises(InvalidArgumentError, match="Title is required"):
            handler.handle("display", "A1", "", 2020, "10", "Author")

    def test_paper_book_without_stock_rejected(self):
        handler, inventory = _setup()
        with pytest.raises(InvalidArgumentError, match="initial stock"):
            handler.handle("physical", "P1", "Title", 2020, "10", "Author")
        assert inventory.size() == 0

    def test_paper_book_with_negative_stock_rejected(self):
        handler, _ = _setup()
        with pytest.raises(InvalidArgumentError, match="cannot be negative"):
            handler.handle("physical", "P1", "Title", 2020, "10", "Author", stock=-2)

    def test_ebook_without_file_type_rejected(self):
        handler, _ = _setup()
        with pytest.raises(InvalidArgumentError, match="file type"):
            handler.handle("digital", "E1", "Title", 2020, "10", "Author")

    def test_negative_price_rejected(self):
        handler, _ = _setup()
        with pytest.raises(InvalidArgumentError, match="cannot be negative"):
            handler.handle("display", "S1", "Title", 2020, "-1", "Author")

    @pytest.mark.parametrize("author", [None, "", "   "])
    def test_missing_author_rejected(self, author):
        handler, inventory = _setup()
        with pytest.raises(InvalidArgumentError, match="Author name is required"):
            handler.handle("physical", "P1", "Title", 2000, "1", author, stock=1)
        assert inventory.size() == 0
