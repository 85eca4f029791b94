class CalnepError(Exception):
    """Base error."""

class OutOfRangeError(CalnepError, ValueError):
    """Raised when a year, date or ordinal falls outside the month-length table."""

class InvalidDateError(CalnepError, ValueError):
    """Raised when a month index or day does not exist in the given BS year."""

class InvalidInputError(CalnepError, ValueError):
    """Raised for unparseable strings, malformed tuples or malformed tables."""

class InvariantViolationError(CalnepError, RuntimeError):
    """Raised when an internal invariant is broken (a bug upstream, not user error)."""
