# ABOUTME: The `shelfkeeper search` command for title and author lookups.
# ABOUTME: Case-sensitive substring match; giving both filters returns their intersection.

from pathlib import Path

import click
from rich.console import Console

from shelfkeeper.catalog.library import Library
from shelfkeeper.cli.display import books_table
from shelfkeeper.cli.options import data_option

console = Console()


@click.command("search")
@click.option("--title", "title", default=None, help="Substring of the title.")
@click.option("--author", "author", default=None, help="Substring of the author.")
@data_option
def search(title: str | None, author: str | None, data_path: Path | None) -> None:
    """Search the catalog by title and/or author."""
    if title is None and author is None:
        raise click.UsageError("Give --title, --author, or both.")

    library = Library(data_path)

    if title is not None:
        results = library.find_by_title(title)
        if author is not None:
            results = [book for book in results if author in book.author]
    else:
        results = library.find_by_author(author or "")

    if not results:
        console.print("[yellow]No results found.[/yellow]")
        return

    console.print(books_table(results))
    console.print(f"\n[dim]{len(results)} result(s)[/dim]")
