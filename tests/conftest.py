# tests/conftest.py
import pytest
from loguru import logger

from bloodpressure.const import DATA_DIR_ENV
from bloodpressure.storage import ReadingStore


@pytest.fixture(autouse=True)
def _isolate_paths(tmp_path, monkeypatch):
    """
    Keep every test away from the real per-user directory: the data dir
    comes from the environment and no default config file is ever found.
    """
    import bloodpressure.cli.common as common

    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path / "data"))
    monkeypatch.setattr(common, "default_config_path", lambda: tmp_path / "no-config.toml")
    yield
    # The CLI callback binds loguru to the runner's stderr; drop it afterwards.
    logger.remove()


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def store(data_dir):
    return ReadingStore(data_dir)
