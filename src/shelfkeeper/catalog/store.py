# ABOUTME: Plain-file storage primitives backing the Shelfkeeper catalog.
# ABOUTME: Existence checks, whole-file read/write, and parent directory creation.

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path.home() / ".shelfkeeper" / "books.json"


def file_exists(path: Path) -> bool:
    """Check whether a regular file exists at path."""
    return path.is_file()


def ensure_parent_dirs(path: Path) -> bool:
    """Create the parent directories of path if they are missing."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("Could not create directories for %s: %s", path, exc)
        return False
    return True


def read_file(path: Path) -> str | None:
    """Read the whole file as UTF-8 text.

    Returns:
        The file content, or None if the file is missing or unreadable.
    """
    if not file_exists(path):
        logger.debug("File does not exist: %s", path)
        return None
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Could not read %s: %s", path, exc)
        return None


def write_file(path: Path, content: str) -> bool:
    """Write content to path, replacing whatever was there.

    Parent directories are created as needed.

    Returns:
        True if the content was fully written.
    """
    # Encode before opening so unencodable text never truncates the old file
    try:
        data = content.encode("utf-8")
    except UnicodeEncodeError as exc:
        logger.error("Could not encode content for %s: %s", path, exc)
        return False
    if not ensure_parent_dirs(path):
        return False
    try:
        path.write_bytes(data)
    except OSError as exc:
        logger.error("Could not write %s: %s", path, exc)
        return False
    return True


def create_file_if_missing(path: Path, content: str = "") -> bool:
    """Create path with the given content unless it already exists."""
    if file_exists(path):
        return True
    return write_file(path, content)


def delete_file(path: Path) -> bool:
    """Delete the file at path. A missing file counts as deleted."""
    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        logger.error("Could not delete %s: %s", path, exc)
        return False
    return True
