# ABOUTME: The `shelfkeeper menu` command running the interactive catalog menu.
# ABOUTME: Opens the catalog once and hands it to a MenuSession until the user exits.

from pathlib import Path

import click

from shelfkeeper.catalog.library import Library
from shelfkeeper.cli.menu import MenuSession
from shelfkeeper.cli.options import data_option


@click.command("menu")
@data_option
def menu(data_path: Path | None) -> None:
    """Run the interactive numbered menu."""
    library = Library(data_path)
    exit_code = MenuSession(library).run()
    raise SystemExit(exit_code)
