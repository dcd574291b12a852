from __future__ import annotations

import polars as pl

from ..fields import READING_FIELDS, TIMESTAMP


DELIMITER = ","


# Fields are read as text first so that stray whitespace or signs are rejected
# instead of being coerced by the integer parser.
RAW_READING_SCHEMA: dict[str, pl.DataType] = {name: pl.String for name in READING_FIELDS}

READING_SCHEMA: dict[str, pl.DataType] = {name: pl.Int64 for name in READING_FIELDS}

FIELD_PATTERNS: dict[str, str] = {
    name: (r"^-?\d+$" if name == TIMESTAMP else r"^\d+$") for name in READING_FIELDS
}


def empty_readings_frame() -> pl.DataFrame:
    return pl.DataFrame(schema=READING_SCHEMA)


__all__ = [
    "DELIMITER",
    "RAW_READING_SCHEMA",
    "READING_SCHEMA",
    "FIELD_PATTERNS",
    "empty_readings_frame",
]
