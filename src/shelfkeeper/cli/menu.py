# ABOUTME: Interactive numbered-menu session over a Library.
# ABOUTME: Translates menu choices into catalog calls and prints results with Rich.

import datetime
from collections.abc import Callable

import click
from rich.console import Console
from rich.markup import escape

from shelfkeeper.catalog.library import Library
from shelfkeeper.catalog.types import LoanOutcome
from shelfkeeper.cli.display import book_detail, books_table, loan_failure_message

MENU_ENTRIES = (
    (1, "Add a new book"),
    (2, "Search for a book"),
    (3, "Borrow a book"),
    (4, "Return a book"),
    (5, "Display all books"),
    (6, "Remove a book"),
    (0, "Exit"),
)

SEARCH_ENTRIES = (
    (1, "Search by ID"),
    (2, "Search by title"),
    (3, "Search by author"),
)


def _parse_choice(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None


class MenuSession:
    """Console menu loop for managing a catalog.

    Runs until the user picks 0 (or input ends), then returns exit code 0.
    Title, author, and year are validated here before reaching the Library,
    which accepts whatever it is given.
    """

    def __init__(self, library: Library, *, console: Console | None = None) -> None:
        self._library = library
        self._console = console or Console()
        self._actions: dict[int, Callable[[], None]] = {
            1: self._add,
            2: self._search,
            3: self._borrow,
            4: self._return,
            5: self._display_all,
            6: self._remove,
        }

    def run(self) -> int:
        """Show the menu until the user exits. Returns the process exit code."""
        while True:
            self._show_menu("Library Management System", MENU_ENTRIES)
            try:
                choice = _parse_choice(click.prompt("Enter your choice", type=str))
                if choice == 0:
                    self._console.print("Exiting. Goodbye!")
                    return 0
                action = self._actions.get(choice) if choice is not None else None
                if action is None:
                    self._console.print("[red]Invalid choice. Please try again.[/red]")
                    continue
                action()
            except click.Abort:
                # End of input behaves like choosing Exit
                self._console.print("\nExiting. Goodbye!")
                return 0

    def _show_menu(self, heading: str, entries: tuple[tuple[int, str], ...]) -> None:
        self._console.print(f"\n[bold]{heading}[/bold]")
        self._console.print("-" * len(heading))
        for number, label in entries:
            self._console.print(f"{number}. {label}")

    def _heading(self, text: str) -> None:
        self._console.print(f"\n[bold]{text}[/bold]")
        self._console.print("-" * len(text))

    def _prompt_text(self, label: str) -> str:
        """Prompt until the user enters something other than whitespace."""
        while True:
            value = click.prompt(label, type=str, default="", show_default=False).strip()
            if value:
                return value
            self._console.print("[red]A value is required.[/red]")

    def _add(self) -> None:
        self._heading("Add a new book")
        title = self._prompt_text("Enter title")
        author = self._prompt_text("Enter author")
        max_year = datetime.date.today().year + 1
        year = click.prompt("Enter publication year", type=click.IntRange(0, max_year))

        book = self._library.add_book(title, author, year)
        if book is None:
            self._console.print("[red]Failed to add book.[/red]")
            return
        self._console.print(f"[green]Book added successfully[/green] (ID {book.id}).")

    def _search(self) -> None:
        self._show_menu("Search for a book", SEARCH_ENTRIES)
        choice = _parse_choice(click.prompt("Enter your choice", type=str))

        if choice == 1:
            book_id = click.prompt("Enter book ID", type=int)
            book = self._library.find_by_id(book_id)
            if book is None:
                self._console.print("[yellow]Book not found.[/yellow]")
                return
            self._console.print("\n[bold]Book found:[/bold]")
            self._console.print(book_detail(book))
        elif choice == 2:
            title = click.prompt("Enter book title", type=str, default="", show_default=False)
            books = self._library.find_by_title(title)
            if not books:
                self._console.print("[yellow]No books found with that title.[/yellow]")
                return
            self._console.print("\n[bold]Books found:[/bold]")
            self._console.print(books_table(books))
        elif choice == 3:
            author = click.prompt("Enter author name", type=str, default="", show_default=False)
            books = self._library.find_by_author(author)
            if not books:
                self._console.print("[yellow]No books found by that author.[/yellow]")
                return
            self._console.print("\n[bold]Books found:[/bold]")
            self._console.print(books_table(books))
        else:
            self._console.print("[red]Invalid choice.[/red]")

    def _borrow(self) -> None:
        self._heading("Borrow a book")
        book_id = click.prompt("Enter book ID", type=int)
        outcome = self._library.checkout(book_id)
        if outcome is LoanOutcome.OK:
            self._console.print("[green]Book borrowed successfully.[/green]")
            return
        message = loan_failure_message(outcome, book_id, borrowing=True)
        self._console.print(f"[red]Failed to borrow book. {message}[/red]")

    def _return(self) -> None:
        self._heading("Return a book")
        book_id = click.prompt("Enter book ID", type=int)
        outcome = self._library.checkin(book_id)
        if outcome is LoanOutcome.OK:
            self._console.print("[green]Book returned successfully.[/green]")
            return
        message = loan_failure_message(outcome, book_id, borrowing=False)
        self._console.print(f"[red]Failed to return book. {message}[/red]")

    def _display_all(self) -> None:
        books = self._library.list_all()
        if not books:
            self._console.print("[yellow]No books in the library.[/yellow]")
            return
        self._console.print("\n[bold]Library Books:[/bold]")
        self._console.print(books_table(books))
        self._console.print(f"[dim]{len(books)} book(s)[/dim]")

    def _remove(self) -> None:
        self._heading("Remove a book")
        book_id = click.prompt("Enter book ID", type=int)
        book = self._library.find_by_id(book_id)
        if book is None:
            self._console.print("[red]Failed to remove book. It may not exist.[/red]")
            return
        if not self._library.remove(book_id):
            self._console.print("[red]Failed to remove book. Could not save the catalog.[/red]")
            return
        self._console.print(
            f"[green]Book removed successfully:[/green] {escape(book.title)}"
        )
