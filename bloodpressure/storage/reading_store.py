from __future__ import annotations

from pathlib import Path
from typing import Iterable

import polars as pl
from loguru import logger

from ..const import DATA_FILENAME, U32_MAX
from ..errors import ReadingParseError
from ..fields import MEASUREMENT_FIELDS, TIMESTAMP
from ..reading import Reading
from .reading_schema import (
    DELIMITER,
    FIELD_PATTERNS,
    RAW_READING_SCHEMA,
    READING_SCHEMA,
    empty_readings_frame,
)

LINE_COLUMN = "line"


class ReadingStore:
    """Append-only CSV file of readings, one headerless row per reading."""

    def __init__(self, data_dir: Path, *, filename: str = DATA_FILENAME) -> None:
        self.data_dir = data_dir
        self.path = data_dir / filename

    def append(self, reading: Reading) -> None:
        """Write ``reading`` as a new row after all existing rows."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        row = DELIMITER.join(str(value) for value in reading.to_row())
        with self.path.open("a", encoding="utf-8", newline="") as wf:
            wf.write(row)
            wf.write("\n")
            wf.flush()
        logger.debug("Appended row {} to {}", row, self.path)

    def load_frame(self) -> pl.DataFrame:
        """Read every stored row into a typed DataFrame, in file order.

        Blank lines are skipped. Raises ``FileNotFoundError`` when nothing has
        been recorded yet and ``ReadingParseError`` when any row is malformed.
        """
        if not self.path.exists():
            raise FileNotFoundError(f"Data file not found: {self.path}")

        line_numbers: list[int] = []
        rows: list[str] = []
        with self.path.open("r", encoding="utf-8", newline="") as rf:
            for number, line in enumerate(rf, start=1):
                line = line.rstrip("\r\n")
                if not line:
                    continue
                line_numbers.append(number)
                rows.append(line)
        if not rows:
            return empty_readings_frame()

        try:
            raw = pl.read_csv(
                "\n".join(rows).encode("utf-8"),
                has_header=False,
                separator=DELIMITER,
                schema=RAW_READING_SCHEMA,
            )
        except pl.exceptions.PolarsError as exc:
            raise ReadingParseError(f"Data file {self.path} is malformed: {exc}") from exc
        if raw.height != len(rows):
            raise ReadingParseError(f"Data file {self.path} is malformed")

        raw = raw.with_columns(pl.Series(LINE_COLUMN, line_numbers))
        self._reject(raw, [~pl.col(name).str.contains(FIELD_PATTERNS[name]) for name in FIELD_PATTERNS])
        try:
            df = raw.with_columns([pl.col(name).cast(dtype) for name, dtype in READING_SCHEMA.items()])
        except pl.exceptions.PolarsError as exc:
            raise ReadingParseError(f"Data file {self.path} has an out of range value: {exc}") from exc
        self._reject(df, [pl.col(name) > U32_MAX for name in MEASUREMENT_FIELDS])

        logger.debug("Loaded {} readings from {}", df.height, self.path)
        return df.drop(LINE_COLUMN)

    def load_all(self) -> list[Reading]:
        """Return all stored readings in the order they were appended."""
        return self._to_readings(self.load_frame().iter_rows())

    def report(self, limit: int) -> list[Reading]:
        """Return at most ``limit`` readings, most recent first.

        Only the timestamp column takes part in the ordering.
        """
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        latest = self.load_frame().sort(TIMESTAMP, descending=True).head(limit)
        return self._to_readings(latest.iter_rows())

    def _to_readings(self, rows: Iterable[tuple[int, ...]]) -> list[Reading]:
        readings: list[Reading] = []
        for row in rows:
            try:
                readings.append(Reading.from_row(row))
            except (OverflowError, OSError, ValueError) as exc:
                raise ReadingParseError(f"Data file {self.path} has an invalid row {row}: {exc}") from exc
        return readings

    def _reject(self, df: pl.DataFrame, conditions: list[pl.Expr]) -> None:
        invalid = pl.any_horizontal(pl.all().is_null()) | pl.any_horizontal(conditions)
        bad = df.filter(invalid)
        if bad.height:
            first = bad.row(0, named=True)
            raise ReadingParseError(
                f"Data file {self.path} has a malformed row at line {first[LINE_COLUMN]}"
            )


__all__ = ["ReadingStore"]
