class DataPathError(RuntimeError):
    """The per-user data directory could not be determined."""


class ReadingParseError(ValueError):
    """A stored row is not four non-negative integer fields."""


__all__ = ["DataPathError", "ReadingParseError"]
