# ABOUTME: The `shelfkeeper ls` command for listing cataloged books.
# ABOUTME: Displays a Rich table of all books, optionally only available or borrowed ones.

from pathlib import Path

import click
from rich.console import Console

from shelfkeeper.catalog.library import Library
from shelfkeeper.cli.display import books_table
from shelfkeeper.cli.options import data_option

console = Console()


@click.command("ls")
@data_option
@click.option(
    "--available",
    "only_available",
    is_flag=True,
    default=False,
    help="Only show books that can be borrowed.",
)
@click.option(
    "--borrowed",
    "only_borrowed",
    is_flag=True,
    default=False,
    help="Only show books that are out on loan.",
)
def ls(data_path: Path | None, only_available: bool, only_borrowed: bool) -> None:
    """List all books in the catalog."""
    if only_available and only_borrowed:
        raise click.UsageError("--available and --borrowed cannot be combined.")

    library = Library(data_path)

    books = library.list_all()
    if only_available:
        books = [book for book in books if book.available]
    elif only_borrowed:
        books = [book for book in books if not book.available]

    if not books:
        console.print("[yellow]No books in the library.[/yellow]")
        return

    console.print(books_table(books))
    console.print(f"\n[dim]{len(books)} book(s)[/dim]")
