# ABOUTME: Rich renderables shared by the interactive menu and one-shot commands.
# ABOUTME: Builds book tables, single-book detail views, and loan failure messages.

from rich.markup import escape
from rich.table import Table

from shelfkeeper.catalog.types import Book, LoanOutcome


def books_table(books: list[Book]) -> Table:
    """Render books as a table in catalog order."""
    table = Table()
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Year", justify="right")
    table.add_column("Available")

    for book in books:
        table.add_row(
            str(book.id),
            escape(book.title),
            escape(book.author) or "[dim]unknown[/dim]",
            str(book.year),
            "[green]Yes[/green]" if book.available else "[red]No[/red]",
        )
    return table


def book_detail(book: Book) -> Table:
    """Render every field of a single book as a two-column listing."""
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=10)
    table.add_column("Value")

    table.add_row("ID", str(book.id))
    table.add_row("Title", escape(book.title))
    table.add_row("Author", escape(book.author))
    table.add_row("Year", str(book.year))
    table.add_row("Available", "Yes" if book.available else "No")
    table.add_row("Status", book.status)
    return table


def loan_failure_message(outcome: LoanOutcome, book_id: int, *, borrowing: bool) -> str:
    """Explain why a borrow (or return) of book_id did not happen."""
    if outcome is LoanOutcome.NOT_FOUND:
        return f"Book {book_id} not found."
    if outcome is LoanOutcome.WRONG_STATE:
        state = "borrowed" if borrowing else "available"
        return f"Book {book_id} is already {state}."
    action = "borrowed" if borrowing else "returned"
    return f"Could not save the catalog; book {book_id} was not {action}."
