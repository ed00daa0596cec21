# ABOUTME: CLI package for Shelfkeeper, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from shelfkeeper.cli.commands import (
    add_cmd,
    info_cmd,
    loan_cmd,
    ls_cmd,
    menu_cmd,
    rm_cmd,
    search_cmd,
)
from shelfkeeper.cli.options import data_option


def _configure_logging(verbose: bool) -> None:
    """Send diagnostics to stderr through Rich. Verbose shows debug detail."""
    root = logging.getLogger("shelfkeeper")
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.group(invoke_without_command=True)
@click.version_option(package_name="shelfkeeper")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
@data_option
@click.pass_context
def cli(ctx: click.Context, verbose: bool, data_path: Path | None) -> None:
    """Shelfkeeper - a small book catalog kept in a JSON file.

    Without a subcommand, starts the interactive menu.
    """
    _configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        ctx.invoke(menu_cmd.menu, data_path=data_path)


cli.add_command(menu_cmd.menu)
cli.add_command(add_cmd.add)
cli.add_command(ls_cmd.ls)
cli.add_command(search_cmd.search)
cli.add_command(info_cmd.info)
cli.add_command(loan_cmd.borrow)
cli.add_command(loan_cmd.return_book)
cli.add_command(rm_cmd.rm)
