# ABOUTME: The in-memory book catalog and its JSON persistence contract.
# ABOUTME: Assigns ids, searches, enforces borrow/return, and rewrites the file on every change.

import logging
from dataclasses import replace
from pathlib import Path

from shelfkeeper.catalog.codec import CodecError, decode_all, encode_all
from shelfkeeper.catalog.store import (
    DEFAULT_DATA_PATH,
    create_file_if_missing,
    file_exists,
    read_file,
    write_file,
)
from shelfkeeper.catalog.types import Book, LoanOutcome

logger = logging.getLogger(__name__)


class Library:
    """A catalog of books bound to one JSON file for its whole lifetime.

    Every successful mutation rewrites the full file before returning. If
    the write fails the in-memory change is rolled back and the operation
    reports failure, so memory and disk never disagree after a call.

    Records handed out are snapshot copies. Changing them has no effect on
    the catalog, and they do not follow later changes to it.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or DEFAULT_DATA_PATH
        self._books: list[Book] = []
        self._next_id = 1
        self._load()

    # --- Persistence ---

    def _load(self) -> None:
        """Populate the catalog from disk. Problems leave the catalog empty."""
        if not file_exists(self.path):
            if not create_file_if_missing(self.path, "[]"):
                logger.warning("Could not initialize catalog file %s", self.path)
            return

        content = read_file(self.path)
        if content is None or not content.strip():
            return

        try:
            loaded = decode_all(content)
        except CodecError as exc:
            logger.error("Ignoring unreadable catalog %s: %s", self.path, exc)
            return

        seen: set[int] = set()
        for book in loaded:
            if book.id in seen:
                logger.warning("Skipping duplicate book id %d in %s", book.id, self.path)
                continue
            seen.add(book.id)
            self._books.append(book)

        if self._books:
            self._next_id = max(book.id for book in self._books) + 1
        logger.debug("Loaded %d book(s) from %s", len(self._books), self.path)

    def _save(self) -> bool:
        """Write the full catalog to disk."""
        return write_file(self.path, encode_all(self._books))

    def _index_of(self, book_id: int) -> int | None:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        return None

    # --- Mutations ---

    def add_book(self, title: str, author: str, year: int) -> Book | None:
        """Add a book and return a copy of the stored record.

        Input is not validated here; the interactive layer does that.

        Returns:
            The new record, or None if it could not be saved.
        """
        book = Book(id=self._next_id, title=title, author=author, year=year)
        self._books.append(book)
        self._next_id += 1

        if not self._save():
            self._books.pop()
            self._next_id -= 1
            logger.warning("Add of '%s' rolled back: catalog not saved", title)
            return None

        logger.info("Added book %d: %s", book.id, title)
        return replace(book)

    def add(self, title: str, author: str, year: int) -> bool:
        """Add a book. Returns False only if the catalog could not be saved."""
        return self.add_book(title, author, year) is not None

    def remove(self, book_id: int) -> bool:
        """Remove a book by id. Removed ids are never handed out again."""
        index = self._index_of(book_id)
        if index is None:
            return False

        book = self._books.pop(index)
        if not self._save():
            self._books.insert(index, book)
            logger.warning("Removal of book %d rolled back: catalog not saved", book_id)
            return False

        logger.info("Removed book %d", book_id)
        return True

    def _transition(self, book_id: int, *, to_available: bool) -> LoanOutcome:
        index = self._index_of(book_id)
        if index is None:
            return LoanOutcome.NOT_FOUND

        book = self._books[index]
        if book.available == to_available:
            return LoanOutcome.WRONG_STATE

        if to_available:
            book.return_book()
        else:
            book.borrow()

        if not self._save():
            book.available = not to_available
            logger.warning("Status change of book %d rolled back: catalog not saved", book_id)
            return LoanOutcome.STORAGE_ERROR

        return LoanOutcome.OK

    def checkout(self, book_id: int) -> LoanOutcome:
        """Borrow a book, reporting why the attempt failed if it did."""
        return self._transition(book_id, to_available=False)

    def checkin(self, book_id: int) -> LoanOutcome:
        """Return a borrowed book, reporting why the attempt failed if it did."""
        return self._transition(book_id, to_available=True)

    def borrow(self, book_id: int) -> bool:
        return self.checkout(book_id) is LoanOutcome.OK

    def return_book(self, book_id: int) -> bool:
        return self.checkin(book_id) is LoanOutcome.OK

    # --- Queries ---

    def find_by_id(self, book_id: int) -> Book | None:
        """Return a snapshot of the book with this id, or None."""
        index = self._index_of(book_id)
        return replace(self._books[index]) if index is not None else None

    def find_by_title(self, text: str) -> list[Book]:
        """Books whose title contains text (case-sensitive), in catalog order."""
        return [replace(book) for book in self._books if text in book.title]

    def find_by_author(self, text: str) -> list[Book]:
        """Books whose author contains text (case-sensitive), in catalog order."""
        return [replace(book) for book in self._books if text in book.author]

    def list_all(self) -> list[Book]:
        """All books in catalog order."""
        return [replace(book) for book in self._books]

    def __len__(self) -> int:
        return len(self._books)

    # Defined last: inside the class body this name shadows the builtin.
    def list(self) -> list[Book]:
        return self.list_all()
