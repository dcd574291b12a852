"""Record a new reading."""

import typer
from pathlib import Path
from loguru import logger

from ..const import DATA_DIR_ENV, U32_MAX
from ..reading import Reading
from .common import COMMAND_ERRORS, load_app_config, open_store


def record(
    top: int = typer.Option(
        ...,
        "--top",
        min=0,
        max=U32_MAX,
        help="Systolic pressure",
    ),
    bottom: int = typer.Option(
        ...,
        "--bottom",
        min=0,
        max=U32_MAX,
        help="Diastolic pressure",
    ),
    pulse: int = typer.Option(
        ...,
        "--pulse",
        min=0,
        max=U32_MAX,
        help="Pulse in bpm",
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
    """Append one reading stamped with the current time."""
    try:
        store = open_store(load_app_config(config), data_dir)
        reading = Reading.now(systolic=top, diastolic=bottom, pulse=pulse)
        store.append(reading)
    except COMMAND_ERRORS as exc:
        logger.error("Failed to record reading: {}", exc)
        raise typer.Exit(code=1) from exc

    logger.info("Recorded {}/{} pulse {} into {}", top, bottom, pulse, store.path)
