# ABOUTME: The `shelfkeeper info` command for displaying a single book.
# ABOUTME: Shows every stored field for a book looked up by ID.

from pathlib import Path

import click
from rich.console import Console

from shelfkeeper.catalog.library import Library
from shelfkeeper.cli.display import book_detail
from shelfkeeper.cli.options import data_option

console = Console()


@click.command("info")
@click.argument("book_id", type=int)
@data_option
def info(book_id: int, data_path: Path | None) -> None:
    """Show details for a book by ID."""
    library = Library(data_path)

    book = library.find_by_id(book_id)
    if book is None:
        console.print(f"[red]Book {book_id} not found.[/red]")
        raise SystemExit(1)

    console.print(book_detail(book))
