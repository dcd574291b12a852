"""Helpers shared by the CLI commands."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from ..config import AppConfig, load_config
from ..errors import DataPathError
from ..paths import default_config_path, resolve_data_dir
from ..storage import ReadingStore

# Anything a command reports as "failed" and turns into exit status 1.
COMMAND_ERRORS = (OSError, ValueError, DataPathError)


def load_app_config(config: Path | None) -> AppConfig:
    """Load ``config`` if given, else the default config file when present."""
    if config is not None:
        logger.info("Loading config from {}", config)
        return load_config(AppConfig, config)

    default_path = default_config_path()
    if default_path.exists():
        logger.info("Loading config from {}", default_path)
        return load_config(AppConfig, default_path)

    logger.debug("No config file at {}, using defaults", default_path)
    return AppConfig()


def open_store(config: AppConfig, data_dir: Path | None = None) -> ReadingStore:
    return ReadingStore(
        resolve_data_dir(config, data_dir),
        filename=config.storage.filename,
    )
