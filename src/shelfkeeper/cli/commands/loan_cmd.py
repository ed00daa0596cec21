# ABOUTME: The `shelfkeeper borrow` and `shelfkeeper return` commands.
# ABOUTME: Move a book between the available and borrowed states.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from shelfkeeper.catalog.library import Library
from shelfkeeper.catalog.types import LoanOutcome
from shelfkeeper.cli.display import loan_failure_message
from shelfkeeper.cli.options import data_option

console = Console()


def _report(library: Library, book_id: int, outcome: LoanOutcome, *, borrowing: bool) -> None:
    if outcome is not LoanOutcome.OK:
        console.print(f"[red]{loan_failure_message(outcome, book_id, borrowing=borrowing)}[/red]")
        raise SystemExit(1)

    book = library.find_by_id(book_id)
    title = escape(book.title) if book else str(book_id)
    verb = "Borrowed" if borrowing else "Returned"
    console.print(f"{verb} [bold]{title}[/bold].")


@click.command("borrow")
@click.argument("book_id", type=int)
@data_option
def borrow(book_id: int, data_path: Path | None) -> None:
    """Borrow an available book."""
    library = Library(data_path)
    _report(library, book_id, library.checkout(book_id), borrowing=True)


@click.command("return")
@click.argument("book_id", type=int)
@data_option
def return_book(book_id: int, data_path: Path | None) -> None:
    """Return a borrowed book."""
    library = Library(data_path)
    _report(library, book_id, library.checkin(book_id), borrowing=False)
