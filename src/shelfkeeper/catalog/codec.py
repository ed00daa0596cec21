# ABOUTME: Converts Book records to and from their JSON storage representation.
# ABOUTME: The storage file is a JSON array of five-field objects, indented by four spaces.

import json
import logging
from collections.abc import Iterable
from typing import Any

from shelfkeeper.catalog.types import Book

logger = logging.getLogger(__name__)

JSON_INDENT = 4

_FIELD_TYPES: dict[str, type] = {
    "id": int,
    "title": str,
    "author": str,
    "year": int,
    "available": bool,
}


class CodecError(Exception):
    """Raised when stored JSON cannot be turned back into Book records."""


def book_to_dict(book: Book) -> dict[str, Any]:
    """Convert a Book to a plain dict with exactly the stored fields."""
    return {
        "id": book.id,
        "title": book.title,
        "author": book.author,
        "year": book.year,
        "available": book.available,
    }


def _check_field(data: dict[str, Any], name: str) -> Any:
    if name not in data:
        raise CodecError(f"Missing field '{name}'")
    value = data[name]
    expected = _FIELD_TYPES[name]
    # bool is a subclass of int; a JSON true must not pass as an id or year
    if expected is int and isinstance(value, bool):
        raise CodecError(f"Field '{name}' must be int, got bool")
    if not isinstance(value, expected):
        raise CodecError(
            f"Field '{name}' must be {expected.__name__}, got {type(value).__name__}"
        )
    return value


def dict_to_book(data: Any) -> Book:
    """Convert a decoded JSON object back to a Book.

    Extra keys are ignored.

    Raises:
        CodecError: If data is not an object, or a field is missing or mistyped.
    """
    if not isinstance(data, dict):
        raise CodecError(f"Record must be an object, got {type(data).__name__}")
    return Book(
        id=_check_field(data, "id"),
        title=_check_field(data, "title"),
        author=_check_field(data, "author"),
        year=_check_field(data, "year"),
        available=_check_field(data, "available"),
    )


def book_to_json(book: Book) -> str:
    """Serialize a single Book as an indented JSON object."""
    return json.dumps(book_to_dict(book), indent=JSON_INDENT, ensure_ascii=False)


def json_to_book(text: str) -> Book:
    """Parse a single JSON object into a Book.

    Raises:
        CodecError: If the text is not valid JSON or not a valid record.
    """
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as exc:
        # JSONDecodeError is a ValueError; so are oversized integer literals
        raise CodecError(f"Invalid JSON: {exc}") from exc
    return dict_to_book(data)


def encode_all(books: Iterable[Book]) -> str:
    """Serialize all records as a JSON array, preserving order."""
    return json.dumps(
        [book_to_dict(book) for book in books],
        indent=JSON_INDENT,
        ensure_ascii=False,
    )


def decode_all(text: str) -> list[Book]:
    """Parse a JSON array into Book records.

    Elements that are not valid records are skipped with a warning so one
    damaged entry does not hide the rest of the catalog.

    Raises:
        CodecError: If the text is not valid JSON or the top level is not an array.
    """
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as exc:
        # JSONDecodeError is a ValueError; so are oversized integer literals
        raise CodecError(f"Invalid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise CodecError(f"Expected a JSON array, got {type(data).__name__}")

    books: list[Book] = []
    for index, entry in enumerate(data):
        try:
            books.append(dict_to_book(entry))
        except CodecError as exc:
            logger.warning("Skipping record %d: %s", index, exc)
    return books
