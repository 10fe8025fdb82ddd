"""Shared table formatting for catalog listings."""

from __future__ import annotations

import click

from bookstore.application.dto import BookDTO


def echo_books(books: list[BookDTO]) -> None:
    if not books:
        click.echo("No books found.")
        return

    click.echo(
        f"{'ISBN':<16} {'Kind':<9} {'Title':<24} {'Author':<20} {'Year':>5} {'Price':>9} {'Detail':>8}"
    )
    click.echo("-" * 97)
    for b in books:
        if b.stock is not None:
            detail = str(b.stock)
        else:
            detail = b.file_type or "-"
        click.echo(
            f"{b.isbn:<16} {b.kind:<9} {b.title[:24]:<24} {b.author_name[:20]:<20} "
            f"{b.publish_year:>5} {b.price:>9} {detail:>8}"
        )
