# ABOUTME: The `shelfkeeper rm` command for removing a book from the catalog.
# ABOUTME: Removed IDs are never reused for later additions.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from shelfkeeper.catalog.library import Library
from shelfkeeper.cli.options import data_option

console = Console()


@click.command("rm")
@click.argument("book_id", type=int)
@data_option
def rm(book_id: int, data_path: Path | None) -> None:
    """Remove a book by ID."""
    library = Library(data_path)

    book = library.find_by_id(book_id)
    if book is None:
        console.print(f"[red]Book {book_id} not found.[/red]")
        raise SystemExit(1)

    if not library.remove(book_id):
        console.print(f"[red]Could not save the catalog; book {book_id} not removed.[/red]")
        raise SystemExit(1)

    console.print(f"Removed [bold]{escape(book.title)}[/bold] (ID {book_id}).")
