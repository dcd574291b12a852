"""Record and report blood pressure readings."""

from .reading import Reading
from .storage import ReadingStore

__all__ = ["Reading", "ReadingStore"]
