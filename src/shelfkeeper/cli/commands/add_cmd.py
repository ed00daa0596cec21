# ABOUTME: The `shelfkeeper add` command for cataloging a new book.
# ABOUTME: Validates the fields, adds the book, and reports the assigned ID.

import datetime
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from shelfkeeper.catalog.library import Library
from shelfkeeper.cli.options import data_option

console = Console()


def _non_empty(ctx: click.Context, param: click.Parameter, value: str) -> str:
    value = value.strip()
    if not value:
        raise click.BadParameter("must not be empty")
    return value


@click.command("add")
@click.argument("title", callback=_non_empty)
@click.argument("author", callback=_non_empty)
@click.argument("year", type=click.IntRange(0, datetime.date.today().year + 1))
@data_option
def add(title: str, author: str, year: int, data_path: Path | None) -> None:
    """Add a book to the catalog."""
    library = Library(data_path)

    book = library.add_book(title, author, year)
    if book is None:
        console.print("[red]Could not save the catalog; book not added.[/red]")
        raise SystemExit(1)

    console.print(f"Added [bold]{escape(book.title)}[/bold] with ID {book.id}.")
