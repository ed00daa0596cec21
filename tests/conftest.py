# ABOUTME: Shared pytest fixtures for Shelfkeeper tests.
# ABOUTME: Provides temporary catalog paths, pre-seeded catalog files, and Library instances.

import json
from pathlib import Path

import pytest

from shelfkeeper.catalog.library import Library

SEED_RECORDS = [
    {"id": 1, "title": "Dune", "author": "Frank Herbert", "year": 1965, "available": True},
    {"id": 2, "title": "Hyperion", "author": "Dan Simmons", "year": 1989, "available": False},
    {"id": 5, "title": "Dune Messiah", "author": "Frank Herbert", "year": 1969, "available": True},
]


@pytest.fixture
def data_path(tmp_path: Path) -> Path:
    """Path to a catalog file that does not exist yet."""
    return tmp_path / "data" / "books.json"


@pytest.fixture
def seeded_path(tmp_path: Path) -> Path:
    """A catalog file holding three records with a gap in the ids."""
    path = tmp_path / "seeded.json"
    path.write_text(json.dumps(SEED_RECORDS, indent=4), encoding="utf-8")
    return path


@pytest.fixture
def library(data_path: Path) -> Library:
    """An empty Library backed by a temporary file."""
    return Library(data_path)


@pytest.fixture
def seeded_library(seeded_path: Path) -> Library:
    """A Library loaded from the seeded catalog file."""
    return Library(seeded_path)
