# ABOUTME: End-to-end tests for the one-shot Shelfkeeper CLI commands.
# ABOUTME: Runs add, ls, search, info, borrow, return, and rm through Click's CliRunner.

import json
import logging
from pathlib import Path

from click.testing import CliRunner
from rich.logging import RichHandler

from shelfkeeper.cli import cli


def _invoke(args: list[str], data_path: Path):
    runner = CliRunner()
    return runner.invoke(cli, [*args, "--data", str(data_path)])


class TestCliAdd:
    """E2e tests for `shelfkeeper add`."""

    def test_add_reports_id(self, data_path: Path) -> None:
        """The assigned id is printed and the file written."""
        result = _invoke(["add", "Dune", "Frank Herbert", "1965"], data_path)
        assert result.exit_code == 0
        assert "ID 1" in result.output
        stored = json.loads(data_path.read_text())
        assert stored[0]["title"] == "Dune"

    def test_add_blank_title_rejected(self, data_path: Path) -> None:
        """A blank title is a usage error."""
        result = _invoke(["add", "  ", "Frank Herbert", "1965"], data_path)
        assert result.exit_code == 2
        assert not data_path.exists()

    def test_add_year_out_of_range(self, data_path: Path) -> None:
        """Years far in the future are rejected."""
        result = _invoke(["add", "Dune", "Frank Herbert", "30000"], data_path)
        assert result.exit_code == 2

    def test_add_unwritable_fails(self, tmp_path: Path) -> None:
        """A catalog that cannot be saved exits with status 1."""
        blocker = tmp_path / "blocker"
        blocker.write_text("file")
        result = _invoke(["add", "Dune", "Frank Herbert", "1965"], blocker / "books.json")
        assert result.exit_code == 1
        assert "book not added" in result.output


class TestCliLs:
    """E2e tests for `shelfkeeper ls`."""

    def test_ls_empty(self, data_path: Path) -> None:
        """An empty catalog prints a notice."""
        result = _invoke(["ls"], data_path)
        assert result.exit_code == 0
        assert "No books in the library." in result.output

    def test_ls_all(self, seeded_path: Path) -> None:
        """All books are listed with a count."""
        result = _invoke(["ls"], seeded_path)
        assert result.exit_code == 0
        assert "Hyperion" in result.output
        assert "3 book(s)" in result.output

    def test_ls_borrowed(self, seeded_path: Path) -> None:
        """--borrowed shows only books out on loan."""
        result = _invoke(["ls", "--borrowed"], seeded_path)
        assert result.exit_code == 0
        assert "Hyperion" in result.output
        assert "Dune" not in result.output

    def test_ls_available(self, seeded_path: Path) -> None:
        """--available hides borrowed books."""
        result = _invoke(["ls", "--available"], seeded_path)
        assert result.exit_code == 0
        assert "Hyperion" not in result.output
        assert "2 book(s)" in result.output

    def test_ls_conflicting_filters_rejected(self, seeded_path: Path) -> None:
        """--available and --borrowed together is a usage error."""
        result = _invoke(["ls", "--available", "--borrowed"], seeded_path)
        assert result.exit_code == 2
        assert "cannot be combined" in result.output

    def test_data_from_environment(self, seeded_path: Path) -> None:
        """SHELFKEEPER_DATA selects the catalog when --data is absent."""
        runner = CliRunner()
        result = runner.invoke(cli, ["ls"], env={"SHELFKEEPER_DATA": str(seeded_path)})
        assert result.exit_code == 0
        assert "Hyperion" in result.output


class TestCliSearch:
    """E2e tests for `shelfkeeper search`."""

    def test_search_by_author(self, seeded_path: Path) -> None:
        """Author substring search lists matching books."""
        result = _invoke(["search", "--author", "Herbert"], seeded_path)
        assert result.exit_code == 0
        assert "Dune Messiah" in result.output
        assert "2 result(s)" in result.output

    def test_search_title_and_author(self, seeded_path: Path) -> None:
        """Both filters together narrow the results."""
        result = _invoke(["search", "--title", "Messiah", "--author", "Herbert"], seeded_path)
        assert result.exit_code == 0
        assert "1 result(s)" in result.output

    def test_search_no_results(self, seeded_path: Path) -> None:
        """No match prints a notice."""
        result = _invoke(["search", "--title", "dune"], seeded_path)
        assert result.exit_code == 0
        assert "No results found." in result.output

    def test_search_requires_a_filter(self, seeded_path: Path) -> None:
        """Calling search without filters is a usage error."""
        result = _invoke(["search"], seeded_path)
        assert result.exit_code == 2


class TestCliInfo:
    """E2e tests for `shelfkeeper info`."""

    def test_info_found(self, seeded_path: Path) -> None:
        """Details are shown for a known id."""
        result = _invoke(["info", "2"], seeded_path)
        assert result.exit_code == 0
        assert "Dan Simmons" in result.output
        assert "Borrowed" in result.output

    def test_info_missing(self, seeded_path: Path) -> None:
        """Unknown ids exit with status 1."""
        result = _invoke(["info", "99"], seeded_path)
        assert result.exit_code == 1
        assert "Book 99 not found." in result.output


class TestCliLoans:
    """E2e tests for `shelfkeeper borrow` and `shelfkeeper return`."""

    def test_borrow_available(self, seeded_path: Path) -> None:
        """Borrowing an available book succeeds and is saved."""
        result = _invoke(["borrow", "1"], seeded_path)
        assert result.exit_code == 0
        assert "Borrowed Dune." in result.output
        assert json.loads(seeded_path.read_text())[0]["available"] is False

    def test_borrow_already_borrowed(self, seeded_path: Path) -> None:
        """Borrowing a borrowed book fails and names the cause."""
        result = _invoke(["borrow", "2"], seeded_path)
        assert result.exit_code == 1
        assert "already borrowed" in result.output

    def test_return_borrowed(self, seeded_path: Path) -> None:
        """Returning a borrowed book succeeds."""
        result = _invoke(["return", "2"], seeded_path)
        assert result.exit_code == 0
        assert "Returned Hyperion." in result.output

    def test_return_available(self, seeded_path: Path) -> None:
        """Returning a book that is in fails."""
        result = _invoke(["return", "1"], seeded_path)
        assert result.exit_code == 1
        assert "already available" in result.output

    def test_borrow_missing(self, seeded_path: Path) -> None:
        """Unknown ids fail with a not-found message."""
        result = _invoke(["borrow", "3"], seeded_path)
        assert result.exit_code == 1
        assert "Book 3 not found." in result.output


class TestCliRm:
    """E2e tests for `shelfkeeper rm`."""

    def test_rm_then_add_skips_id(self, data_path: Path) -> None:
        """A removed id is not reused by the next add in a later run."""
        _invoke(["add", "A", "x", "2000"], data_path)
        _invoke(["add", "B", "y", "2001"], data_path)
        result = _invoke(["rm", "1"], data_path)
        assert result.exit_code == 0
        assert "Removed A" in result.output

        result = _invoke(["add", "C", "z", "2002"], data_path)
        assert "ID 3" in result.output

    def test_rm_missing(self, seeded_path: Path) -> None:
        """Removing an unknown id exits with status 1."""
        result = _invoke(["rm", "42"], seeded_path)
        assert result.exit_code == 1
        assert "Book 42 not found." in result.output


class TestCliLogging:
    """E2e tests for the logging setup done by the root group."""

    def test_handler_installed_once(self, data_path: Path) -> None:
        """Repeated invocations reuse a single Rich log handler."""
        _invoke(["ls"], data_path)
        _invoke(["-v", "ls"], data_path)
        _invoke(["ls"], data_path)
        logger = logging.getLogger("shelfkeeper")
        assert sum(isinstance(h, RichHandler) for h in logger.handlers) == 1
        assert logger.level == logging.WARNING
