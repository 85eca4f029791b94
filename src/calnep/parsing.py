"""
calnep.parsing
--------------
Raw-value parsing for date construction.

Strings carry 1-based month numbers (``2079-11-05``), tuples carry 0-based
month indexes (``(2079, 10, 5)``), matching how each is usually written.

Field order in strings is never guessed from magnitudes: pass ``order`` or use
a four-digit year, which pins the order unambiguously.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from calnep.core.errors import InvalidInputError
from calnep.formatting import from_devanagari_digits

ORDERS = ("YMD", "DMY")

_DATE_RE = re.compile(r"^(\d+)[-/.](\d+)[-/.](\d+)$", re.ASCII)
_TIME_RE = re.compile(r"^(\d{1,2}):(\d{1,2})(?::(\d{1,2}))?$", re.ASCII)


@dataclass(frozen=True)
class ParsedDate:
    year: int
    month: int  # 1-based, as written
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    @property
    def month_index(self) -> int:
        return self.month - 1

    @property
    def time(self) -> Tuple[int, int, int]:
        return (self.hour, self.minute, self.second)


def _resolve_order(groups: Tuple[str, str, str], order: Optional[str], raw: str) -> str:
    if order is not None:
        o = order.upper()
        if o not in ORDERS:
            raise InvalidInputError(f"Unknown field order '{order}'. Available: {list(ORDERS)}")
        return o
    if len(groups[0]) == 4:
        return "YMD"
    if len(groups[2]) == 4:
        return "DMY"
    raise InvalidInputError(
        f"Ambiguous date string {raw!r}: use a four-digit year or pass order='YMD'/'DMY'"
    )


def parse_date_string(value: str, order: Optional[str] = None) -> ParsedDate:
    """
    Parse ``YYYY-MM-DD`` / ``DD-MM-YYYY`` (``-``, ``/`` or ``.`` separated),
    optionally followed by `` HH:MM[:SS]``. Devanagari digits are accepted.
    """
    if not isinstance(value, str):
        raise InvalidInputError(f"Expected a string, got {type(value).__name__}")
    text = from_devanagari_digits(value.strip())
    parts = text.split()
    if not parts or len(parts) > 2:
        raise InvalidInputError(f"Invalid date string: {value!r}")

    m = _DATE_RE.match(parts[0])
    if m is None:
        raise InvalidInputError(f"Invalid date string: {value!r}")
    groups = m.groups()
    if _resolve_order(groups, order, value) == "YMD":
        year, month, day = (int(g) for g in groups)
    else:
        day, month, year = (int(g) for g in groups)

    hour = minute = second = 0
    if len(parts) == 2:
        t = _TIME_RE.match(parts[1])
        if t is None:
            raise InvalidInputError(f"Invalid time in date string: {value!r}")
        hour, minute = int(t.group(1)), int(t.group(2))
        second = int(t.group(3) or 0)

    return ParsedDate(year, month, day, hour, minute, second)


def coerce_triple(value: Any) -> Tuple[int, int, int]:
    """Validate a 3-item tuple/list of integers."""
    if not isinstance(value, (tuple, list)) or len(value) != 3:
        raise InvalidInputError(f"Expected a 3-tuple (year, month_index, day), got {value!r}")
    if any(isinstance(v, bool) or not isinstance(v, int) for v in value):
        raise InvalidInputError(f"Date tuple must hold integers, got {value!r}")
    y, m, d = value
    return y, m, d
