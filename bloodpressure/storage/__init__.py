"""Storage helpers for the readings CSV file."""

from .reading_store import ReadingStore

__all__ = ["ReadingStore"]
