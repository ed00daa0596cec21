# ABOUTME: Core record types for the Shelfkeeper catalog.
# ABOUTME: Book is the unit of storage; LoanOutcome tags the result of a borrow or return.

from dataclasses import dataclass
from enum import Enum


@dataclass
class Book:
    """A single book in the catalog.

    The id is assigned by the Library, never by the caller. The availability
    flag starts True and is flipped by borrow/return; the Library decides
    whether a transition is legal, this class only records the state.
    """

    id: int
    title: str
    author: str
    year: int
    available: bool = True

    def borrow(self) -> None:
        self.available = False

    def return_book(self) -> None:
        self.available = True

    @property
    def status(self) -> str:
        """Human-readable availability state for display."""
        return "Available" if self.available else "Borrowed"


class LoanOutcome(Enum):
    """Result of a borrow or return attempt."""

    OK = "ok"
    NOT_FOUND = "not_found"
    WRONG_STATE = "wrong_state"
    STORAGE_ERROR = "storage_error"
