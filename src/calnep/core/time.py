from __future__ import annotations
import math
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union

from .errors import InvalidInputError, OutOfRangeError

# Nepal Standard Time, UTC+05:45
NEPAL_TZ = timezone(timedelta(hours=5, minutes=45), "NPT")


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def from_jdn(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return date(year, month, day)

def weekday_from_jdn(jdn: int) -> int:
    """Weekday with 0=Sunday .. 6=Saturday."""
    return (jdn + 1) % 7

def civil_date(value: Union[date, datetime]) -> date:
    """
    Calendar date of a date/datetime, dropping any time of day.

    Aware and naive datetimes alike keep their own wall-clock date; no zone
    shift is applied, so the sub-day part is always truncated toward the
    earlier day.
    """
    if isinstance(value, datetime):
        return value.date()
    return value

def from_timestamp(ts: float, tz: Optional[timezone] = None) -> datetime:
    """POSIX seconds -> aware datetime, in Nepal time unless tz is given."""
    if not math.isfinite(ts):
        raise InvalidInputError(f"Timestamp must be a finite number, got {ts!r}")
    try:
        return datetime.fromtimestamp(ts, tz=tz or NEPAL_TZ)
    except (OverflowError, OSError, ValueError) as e:
        raise OutOfRangeError(f"Timestamp {ts!r} is outside the representable date range") from e

def now(tz: Optional[timezone] = None) -> datetime:
    """Current wall-clock time (Nepal time by default)."""
    return datetime.now(tz or NEPAL_TZ)
