"""
calnep.date
-----------
NepaliDate: an immutable, validated Bikram Sambat calendar date.

Equality, hashing and ordering use the calendar date alone; the optional
time of day only travels along for rendering and ``to_ad_datetime``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, tzinfo
from functools import cached_property, total_ordering
from typing import Any, Dict, Optional, Tuple

from . import api
from .core.engine import ConverterProtocol
from .core.errors import InvalidDateError, InvalidInputError, OutOfRangeError
from .core.time import from_timestamp, now
from .core.types import YMD
from .formatting import FORMAT_TOKENS, check_locale, render, to_devanagari_digits
from .parsing import coerce_triple, parse_date_string

_TIME_LIMITS = (("hour", 24), ("minute", 60), ("second", 60))


def _engine() -> ConverterProtocol:
    return api.get_engine()


def _ad_date(year: int, month: int, day: int) -> date:
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidInputError(f"Invalid Gregorian date {year}-{month}-{day}: {e}") from e


@total_ordering
@dataclass(frozen=True)
class NepaliDate:
    year: int
    month_index: int
    day: int
    hour: int = field(default=0, compare=False)
    minute: int = field(default=0, compare=False)
    second: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        for name in ("year", "month_index", "day", "hour", "minute", "second"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int):
                raise InvalidInputError(f"{name} must be an int, got {v!r}")

        eng = _engine()
        if not (eng.min_year <= self.year <= eng.max_year):
            raise OutOfRangeError(f"Year {self.year} out of range ({eng.min_year}-{eng.max_year})")
        if not (0 <= self.month_index <= 11):
            raise InvalidDateError(f"Invalid month index: {self.month_index} (expected 0-11)")
        n = eng.month_length(self.year, self.month_index)
        if not (1 <= self.day <= n):
            raise InvalidDateError(f"Invalid day: {self.day} for {self.year}-{self.month_index} (1-{n})")
        for name, limit in _TIME_LIMITS:
            if not (0 <= getattr(self, name) < limit):
                raise InvalidDateError(f"Invalid {name}: {getattr(self, name)}")

    # ---------------- CONSTRUCTION ----------------

    @classmethod
    def _at(cls, ymd: Tuple[int, int, int], time: Tuple[int, int, int] = (0, 0, 0)) -> "NepaliDate":
        return cls(ymd[0], ymd[1], ymd[2], *time)

    @classmethod
    def today(cls, tz: Optional[tzinfo] = None) -> "NepaliDate":
        """Today in Nepal time (or in ``tz``), read from the system clock."""
        return cls.from_ad(now(tz))

    @classmethod
    def from_bs(cls, value: Any = None, *, order: Optional[str] = None) -> "NepaliDate":
        return cls.parse(value, "BS", order=order)

    @classmethod
    def from_ad(cls, value: Any = None, *, order: Optional[str] = None, tz: Optional[tzinfo] = None) -> "NepaliDate":
        return cls.parse(value, "AD", order=order, tz=tz)

    @classmethod
    def parse(
        cls,
        value: Any = None,
        calendar: str = "BS",
        *,
        order: Optional[str] = None,
        tz: Optional[tzinfo] = None,
    ) -> "NepaliDate":
        """
        Build a NepaliDate from a raw value.

        - None: today
        - NepaliDate: a copy
        - date / datetime: a Gregorian value, converted (time of day kept)
        - int / float: POSIX timestamp in seconds (Nepal time unless ``tz``)
        - (y, m, d): fields in ``calendar``; m is a 0-based month index
        - str: ``YYYY-MM-DD`` or ``DD-MM-YYYY`` in ``calendar``; 1-based month
        """
        if calendar not in ("BS", "AD"):
            raise InvalidInputError(f"Unknown calendar '{calendar}'. Available: ['BS', 'AD']")

        if value is None:
            return cls.today(tz)
        if isinstance(value, NepaliDate):
            return value.clone()
        if isinstance(value, datetime):
            return cls._at(_engine().ad_to_bs(value), (value.hour, value.minute, value.second))
        if isinstance(value, date):
            return cls._at(_engine().ad_to_bs(value))
        if isinstance(value, bool):
            raise InvalidInputError(f"Unsupported value for NepaliDate.parse: {value!r}")
        if isinstance(value, (int, float)):
            return cls.parse(from_timestamp(value, tz))
        if isinstance(value, (tuple, list)):
            y, m, d = coerce_triple(value)
            if calendar == "BS":
                return cls(y, m, d)
            return cls._at(_engine().ad_to_bs(_ad_date(y, m + 1, d)))
        if isinstance(value, str):
            p = parse_date_string(value, order)
            if calendar == "BS":
                return cls(p.year, p.month_index, p.day, *p.time)
            return cls._at(_engine().ad_to_bs(_ad_date(p.year, p.month, p.day)), p.time)

        raise InvalidInputError(f"Unsupported value for NepaliDate.parse: {value!r}")

    # ---------------- CONVERSION ----------------

    @cached_property
    def ordinal(self) -> int:
        """Signed day count from the reference date (1970 Baishakh 1)."""
        return _engine().to_ordinal(self.year, self.month_index, self.day)

    def to_ad(self) -> date:
        return _engine().ordinal_to_ad(self.ordinal)

    def to_ad_datetime(self, tz: Optional[tzinfo] = None) -> datetime:
        d = self.to_ad()
        return datetime(d.year, d.month, d.day, self.hour, self.minute, self.second, tzinfo=tz)

    def to_tuple(self) -> YMD:
        return YMD(self.year, self.month_index, self.day)

    @property
    def weekday(self) -> int:
        """0=Sunday .. 6=Saturday."""
        return (self.to_ad().weekday() + 1) % 7

    @property
    def days_in_month(self) -> int:
        return _engine().month_length(self.year, self.month_index)

    # ---------------- ARITHMETIC ----------------

    def add_days(self, n: int) -> "NepaliDate":
        if isinstance(n, bool) or not isinstance(n, int):
            raise InvalidInputError(f"Day count must be an int, got {n!r}")
        ymd = _engine().from_ordinal(self.ordinal + n)
        return self._at(ymd, (self.hour, self.minute, self.second))

    def subtract_days(self, n: int) -> "NepaliDate":
        return self.add_days(-n)

    def diff_days(self, other: "NepaliDate") -> int:
        """Whole days from ``other`` to ``self`` (time of day ignored)."""
        return self.ordinal - other.ordinal

    def __add__(self, other: Any) -> "NepaliDate":
        if isinstance(other, timedelta):
            return self.add_days(other.days)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Any):
        if isinstance(other, timedelta):
            return self.add_days(-other.days)
        if isinstance(other, NepaliDate):
            return timedelta(days=self.diff_days(other))
        return NotImplemented

    # ---------------- COMPARISON ----------------

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, NepaliDate):
            return NotImplemented
        return self.ordinal < other.ordinal

    def before(self, other: "NepaliDate") -> bool:
        return self.ordinal < other.ordinal

    def after(self, other: "NepaliDate") -> bool:
        return self.ordinal > other.ordinal

    def equals(self, other: "NepaliDate") -> bool:
        return self.ordinal == other.ordinal

    # ---------------- FORMATTING ----------------

    def format(
        self,
        fmt: str = "YYYY-MM-DD",
        *,
        calendar: str = "BS",
        locale: str = "en",
        with_time: bool = False,
    ) -> str:
        value = self if calendar == "BS" else self.to_ad()
        out = render(value, fmt, locale=locale, calendar=calendar)
        if with_time and (self.hour or self.minute or self.second):
            t = f" {self.hour:02d}:{self.minute:02d}:{self.second:02d}"
            out += to_devanagari_digits(t) if check_locale(locale) == "ne" else t
        return out

    @staticmethod
    def format_tokens() -> Dict[str, str]:
        return dict(FORMAT_TOKENS)

    def __str__(self) -> str:
        return self.format()

    # ---------------- UTILITIES ----------------

    def clone(self) -> "NepaliDate":
        return NepaliDate(self.year, self.month_index, self.day, self.hour, self.minute, self.second)
