import click

from bookstore.infrastructure.cli.book_commands import (
    books_buy,
    books_list,
    books_quote,
    books_search,
    books_sweep,
)
from bookstore.infrastructure.cli.demo_command import demo
from bookstore.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Verbosity of the notifier and inventory logs.",
)
def cli(log_level: str) -> None:
    """Bookstore catalog, purchases and outdated-stock sweeps"""
    configure_logging(log_level)


@cli.group()
def books() -> None:
    """Browse and buy from the sample catalog."""


# Register subcommands
books.add_command(books_buy)
books.add_command(books_list)
books.add_command(books_quote)
books.add_command(books_search)
books.add_command(books_sweep)
cli.add_command(demo)
