"""Resolve where readings and config live on this machine."""

from __future__ import annotations

from pathlib import Path

from loguru import logger
from platformdirs import user_data_dir

from .config import AppConfig
from .const import APP_NAME, CONFIG_FILENAME
from .errors import DataPathError


def default_data_dir() -> Path:
    """Per-user local data directory for bloodpressure.

    ``$XDG_DATA_HOME/bloodpressure`` (default ``~/.local/share/bloodpressure``)
    on Linux, the matching local data directory elsewhere.
    """
    try:
        app_dir = user_data_dir(APP_NAME, appauthor=False)
    except (KeyError, RuntimeError) as exc:
        raise DataPathError("Could not compute path!") from exc
    if not app_dir:
        raise DataPathError("Could not compute path!")
    return Path(app_dir)


def default_config_path() -> Path:
    return default_data_dir() / CONFIG_FILENAME


def resolve_data_dir(config: AppConfig, override: Path | None = None) -> Path:
    """Pick the data directory: override, then config, then the platform default."""
    if override is not None:
        logger.debug("Using data directory override {}", override)
        return override.expanduser()
    if config.storage.data_dir is not None:
        logger.debug("Using data directory from config {}", config.storage.data_dir)
        return config.storage.data_dir.expanduser()
    return default_data_dir()


__all__ = ["default_data_dir", "default_config_path", "resolve_data_dir"]
