"""Print the most recent readings."""

import typer
from pathlib import Path
from loguru import logger

from ..const import DATA_DIR_ENV
from .common import COMMAND_ERRORS, load_app_config, open_store


def report(
    limit: int | None = typer.Option(
        None,
        "--limit",
        "-l",
        min=0,
        help="Number of readings to show, newest first. Default: 10 or report.limit from the config.",
    ),
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
    """
    Print up to LIMIT readings, most recent first, one per line.

    Fails when nothing has been recorded yet or when any stored row is malformed.
    """
    try:
        app_config = load_app_config(config)
        if limit is None:
            limit = app_config.report.limit
        store = open_store(app_config, data_dir)
        readings = store.report(limit)
    except COMMAND_ERRORS as exc:
        logger.error("Failed to build report: {}", exc)
        raise typer.Exit(code=1) from exc

    logger.debug("Reporting {} readings from {}", len(readings), store.path)
    for reading in readings:
        typer.echo(reading.format())
