"""Show where readings are stored."""

import typer
from pathlib import Path
from loguru import logger

from ..const import DATA_DIR_ENV
from .common import COMMAND_ERRORS, load_app_config, open_store


def show_path(
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to the configuration TOML file.",
    ),
    data_dir: Path | None = typer.Option(
        None,
        "--data-dir",
        envvar=DATA_DIR_ENV,
        help="Directory holding the readings file. Overrides the config file.",
    ),
) -> None:
    """Print the resolved readings file path without touching it."""
    try:
        store = open_store(load_app_config(config), data_dir)
    except COMMAND_ERRORS as exc:
        logger.error("Failed to resolve data path: {}", exc)
        raise typer.Exit(code=1) from exc

    typer.echo(f"Data Path: {store.path}")
