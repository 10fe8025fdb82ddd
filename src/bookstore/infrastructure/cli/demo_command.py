"""CLI command: scripted walkthrough of the bookstore.

Starts from an empty catalog, adds one book of each kind plus a few old
ones, sweeps the outdated entries, then buys, fails and searches. Run
with ``--log-level INFO`` to see the shipping and mail traffic.
"""

from __future__ import annotations

import click

from bookstore.application.add_book import AddBookHandler
from bookstore.application.buy_book import BuyBookHandler
from bookstore.application.remove_outdated import RemoveOutdatedHandler
from bookstore.application.search_books import SearchBooksHandler
from bookstore.application.show_inventory import ShowInventoryHandler
from bookstore.domain.exceptions import DomainException
from bookstore.infrastructure.bootstrap import build_inventory
from bookstore.infrastructure.cli.formatting import echo_books

_BOOKS = [
    ("PHYSICAL", "978-1111111111", "Java Programming", 2023, "59.99", "Test Author", 5, None),
    ("DIGITAL", "978-2222222222", "Python Guide", 2023, "39.99", "Python Expert", None, "PDF"),
    ("DISPLAY", "978-3333333333", "Display Book", 2023, "49.99", "Display Author", None, None),
    ("PHYSICAL", "978-0000000001", "Old Book 1", 2000, "19.99", "Old Author 1", 5, None),
    ("PHYSICAL", "978-0000000002", "Old Book 2", 1995, "15.99", "Old Author 2", 3, None),
]

_PURCHASES = [
    ("978-1111111111", 2, "customer@email.com", "123 Main St"),
    ("978-2222222222", 1, "reader@email.com", None),
    ("978-3333333333", 1, "customer@email.com", "123 Main St"),
    ("978-1111111111", 10, "customer@email.com", "123 Main St"),
    ("978-9999999999", 1, "customer@email.com", "123 Main St"),
    ("978-1111111111", 0, "customer@email.com", "123 Main St"),
    ("978-2222222222", 1, "   ", None),
]


def _header(message: str) -> None:
    click.echo()
    click.echo(message)
    click.echo("=" * len(message))


@click.command("demo")
@click.option("--years", default=20, show_default=True, type=int, help="Sweep threshold.")
def demo(years: int) -> None:
    """Run a scripted walkthrough against an empty catalog."""
    inventory = build_inventory(seed=False)

    _header("Adding books")
    add = AddBookHandler(inventory)
    for kind, isbn, title, year, price, author, stock, file_type in _BOOKS:
        dto = add.handle(kind, isbn, title, year, price, author, stock=stock, file_type=file_type)
        click.echo(f"Added {dto.kind.lower()} book '{dto.title}' ({dto.isbn})")
    echo_books(ShowInventoryHandler(inventory).handle())

    _header(f"Removing books older than {years} years")
    removed = RemoveOutdatedHandler(inventory).handle(years)
    click.echo(f"Removed {len(removed)} book(s): {', '.join(b.title for b in removed) or '-'}")

    _header("Buying books")
    buy = BuyBookHandler(inventory)
    for isbn, quantity, email, address in _PURCHASES:
        try:
            receipt = buy.handle(isbn, quantity, email, address)
        except DomainException as exc:
            click.echo(f"FAILED  {isbn} x{quantity}: {type(exc).__name__}: {exc}")
        else:
            click.echo(f"OK      {isbn} x{quantity}: '{receipt.title}' for {receipt.total}")

    _header("Searching")
    search = SearchBooksHandler(inventory)
    for title, author in (("python", None), (None, "author"), ("", None)):
        found = search.handle(title=title, author=author)
        label = f"title={title!r}" if author is None else f"author={author!r}"
        click.echo(f"{label}: {len(found)} match(es)")

    _header("Final inventory")
    echo_books(ShowInventoryHandler(inventory).handle())
