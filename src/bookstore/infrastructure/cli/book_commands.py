"""CLI commands for the book catalog.

Each command builds a fresh, seeded Inventory; changes are not kept
between invocations.
"""

from __future__ import annotations

import click

from bookstore.application.buy_book import BuyBookHandler
from bookstore.application.quote_shipping import QuoteShippingHandler
from bookstore.application.remove_outdated import RemoveOutdatedHandler
from bookstore.application.search_books import SearchBooksHandler
from bookstore.application.show_inventory import ShowInventoryHandler
from bookstore.domain.exceptions import DomainException
from bookstore.domain.model.book import BookKind
from bookstore.infrastructure.bootstrap import build_inventory
from bookstore.infrastructure.cli.formatting import echo_books


@click.command("list")
@click.option(
    "--kind",
    type=click.Choice([k.value for k in BookKind], case_sensitive=False),
    default=None,
    help="Only show one kind of book.",
)
def books_list(kind: str | None) -> None:
    """List the catalog."""
    handler = ShowInventoryHandler(inventory=build_inventory())

    try:
        books = handler.handle(kind=kind)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    echo_books(books)


@click.command("search")
@click.option("--title", default=None, help="Case-insensitive title fragment.")
@click.option("--author", default=None, help="Case-insensitive author fragment.")
def books_search(title: str | None, author: str | None) -> None:
    """Search the catalog by title and/or author."""
    if not title and not author:
        raise click.UsageError("Give at least one of --title or --author.")

    handler = SearchBooksHandler(inventory=build_inventory())
    echo_books(handler.handle(title=title, author=author))


@click.command("buy")
@click.option("--isbn", required=True, help="ISBN of the book.")
@click.option("--quantity", required=True, type=int, help="Number of copies.")
@click.option("--email", required=True, help="Buyer's email address.")
@click.option("--address", default=None, help="Shipping address (paper books).")
def books_buy(isbn: str, quantity: int, email: str, address: str | None) -> None:
    """Buy copies of a book."""
    handler = BuyBookHandler(inventory=build_inventory())

    try:
        receipt = handler.handle(isbn=isbn, quantity=quantity, email=email, address=address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Bought {receipt.quantity} x '{receipt.title}' for {receipt.total} "
        f"(confirmation sent to {receipt.email})"
    )


@click.command("sweep")
@click.option("--years", required=True, type=int, help="Maximum age in years.")
@click.option(
    "--current-year",
    type=int,
    default=None,
    help="Year to count from (defaults to this year).",
)
def books_sweep(years: int, current_year: int | None) -> None:
    """Remove books older than the given number of years."""
    handler = RemoveOutdatedHandler(inventory=build_inventory())

    try:
        removed = handler.handle(years_threshold=years, current_year=current_year)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Removed {len(removed)} outdated book(s).")
    if removed:
        echo_books(removed)


@click.command("quote")
@click.option("--isbn", required=True, help="ISBN of a paper book.")
@click.option("--quantity", required=True, type=int, help="Number of copies.")
@click.option("--address", default=None, help="Destination address.")
def books_quote(isbn: str, quantity: int, address: str | None) -> None:
    """Estimate shipping cost for a paper book."""
    handler = QuoteShippingHandler(inventory=build_inventory())

    try:
        cost = handler.handle(isbn=isbn, quantity=quantity, address=address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Estimated shipping for {quantity} copies: {cost}")
