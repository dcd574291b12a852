from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Sequence

from .fields import MEASUREMENT_FIELDS


@dataclass(frozen=True)
class Reading:
    """One blood pressure / pulse measurement.

    The timestamp is normalised to UTC with second precision on construction.
    Readings are ordered by timestamp only; see ``ReadingStore.report``.
    """

    timestamp: datetime
    systolic: int
    diastolic: int
    pulse: int

    def __post_init__(self) -> None:
        if self.timestamp.tzinfo is None:
            raise ValueError("Reading timestamp must be timezone-aware")
        for name in MEASUREMENT_FIELDS:
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        normalised = self.timestamp.astimezone(timezone.utc).replace(microsecond=0)
        object.__setattr__(self, "timestamp", normalised)

    @classmethod
    def now(cls, systolic: int, diastolic: int, pulse: int) -> "Reading":
        """Create a reading stamped with the current instant."""
        return cls(datetime.now(timezone.utc), systolic, diastolic, pulse)

    @classmethod
    def from_row(cls, row: Sequence[int]) -> "Reading":
        """Build a reading from ``(epoch_seconds, systolic, diastolic, pulse)``."""
        epoch, systolic, diastolic, pulse = row
        return cls(
            timestamp=datetime.fromtimestamp(epoch, tz=timezone.utc),
            systolic=systolic,
            diastolic=diastolic,
            pulse=pulse,
        )

    def to_row(self) -> tuple[int, int, int, int]:
        return (int(self.timestamp.timestamp()), self.systolic, self.diastolic, self.pulse)

    def format(self, tz: tzinfo | None = None) -> str:
        """Render the reading as a report line in ``tz`` (local time by default)."""
        local = self.timestamp.astimezone(tz)
        suffix = "am" if local.hour < 12 else "pm"
        stamp = f"{local:%Y-%m-%d %I:%M}{suffix}"
        return f"{stamp}\tBP: {self.systolic}/{self.diastolic}\tPulse: {self.pulse}"

    def __str__(self) -> str:
        return self.format()


__all__ = ["Reading"]
