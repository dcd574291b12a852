"""Constants shared across the bloodpressure package."""

APP_NAME = "bloodpressure"
DATA_FILENAME = "data.csv"
CONFIG_FILENAME = "config.toml"
DATA_DIR_ENV = "BLOODPRESSURE_DATA_DIR"

DEFAULT_REPORT_LIMIT = 10
U32_MAX = 2**32 - 1
