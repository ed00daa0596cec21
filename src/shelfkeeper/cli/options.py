# ABOUTME: Shared Click options for Shelfkeeper CLI commands.
# ABOUTME: Provides the reusable --data option pointing at the catalog file.

from pathlib import Path

import click

from shelfkeeper.catalog.store import DEFAULT_DATA_PATH

DATA_ENVVAR = "SHELFKEEPER_DATA"

data_option = click.option(
    "--data",
    "data_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar=DATA_ENVVAR,
    help=f"Path to the catalog JSON file (default: {DEFAULT_DATA_PATH}).",
)
