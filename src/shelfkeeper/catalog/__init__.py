# ABOUTME: Public API for the Shelfkeeper catalog layer.
# ABOUTME: Exports the Library, record types, codec errors, and the default data path.

from shelfkeeper.catalog.codec import CodecError, decode_all, encode_all
from shelfkeeper.catalog.library import Library
from shelfkeeper.catalog.store import DEFAULT_DATA_PATH
from shelfkeeper.catalog.types import Book, LoanOutcome

__all__ = [
    "DEFAULT_DATA_PATH",
    "Book",
    "CodecError",
    "Library",
    "LoanOutcome",
    "decode_all",
    "encode_all",
]
