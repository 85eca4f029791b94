"""
calnep.calendar
---------------
Weekday-aligned month grids for one BS year, for UI rendering.

Weeks start on Sunday, the usual layout of Nepali wall calendars. A grid is a
flat sequence of 7*N cells: blanks before day 1, one DayCell per day, blanks
closing the last week.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from . import api
from .core.errors import InvalidDateError, OutOfRangeError
from .date import NepaliDate
from .formatting import ad_month_name, bs_month_name, format_number

Today = Union[NepaliDate, date, None]


@dataclass(frozen=True)
class DayCell:
    day: int
    ad_day: int
    label: str  # day number in Devanagari digits
    date: NepaliDate
    ad_date: date


@dataclass(frozen=True)
class MonthLabel:
    en: str
    ne: str
    ad: str  # Gregorian months spanned, e.g. "Apr/May"


@dataclass(frozen=True)
class MonthGrid:
    year: int
    month_index: int
    month: MonthLabel
    days: Tuple[Optional[DayCell], ...]
    leading_blanks: int

    @property
    def days_in_month(self) -> int:
        return sum(1 for c in self.days if c is not None)

    def weeks(self) -> List[Tuple[Optional[DayCell], ...]]:
        return [self.days[i : i + 7] for i in range(0, len(self.days), 7)]


def _resolve_today(today: Today) -> NepaliDate:
    if today is None:
        return NepaliDate.today()
    if isinstance(today, NepaliDate):
        return today
    return NepaliDate.from_ad(today)


class _TableYears:
    """Class-level view of the default table's year range, read on every access."""

    def __init__(self, pick: Callable[[int, int], Any]):
        self._pick = pick

    def __get__(self, obj: Any, owner: Any = None) -> Any:
        return self._pick(*api.year_range())


class NepaliCalendar:
    """One BS year of month grids. The month cache is owned by the instance."""

    min_year = _TableYears(lambda lo, hi: lo)
    max_year = _TableYears(lambda lo, hi: hi)
    years = _TableYears(lambda lo, hi: range(lo, hi + 1))

    def __init__(self, year: int):
        lo, hi = api.year_range()
        if not (lo <= year <= hi):
            raise OutOfRangeError(f"Year {year} out of range ({lo}-{hi})")
        self.year = year
        self._month_cache: Dict[int, MonthGrid] = {}

    def __repr__(self) -> str:
        return f"NepaliCalendar({self.year})"

    # ---------------------------------------------------------
    # Grids
    # ---------------------------------------------------------

    def get_month(self, month_index: int) -> MonthGrid:
        """Month grid for 0-11 (0 = Baishakh)."""
        if not (0 <= month_index <= 11):
            raise InvalidDateError(f"Invalid month index: {month_index} (expected 0-11)")

        cached = self._month_cache.get(month_index)
        if cached is not None:
            return cached

        days_in_month = api.days_in_month(self.year, month_index)
        first = NepaliDate(self.year, month_index, 1)
        lead = first.weekday

        cells: List[Optional[DayCell]] = [None] * lead
        for d in range(1, days_in_month + 1):
            nd = first if d == 1 else first.add_days(d - 1)
            ad = nd.to_ad()
            cells.append(DayCell(day=d, ad_day=ad.day, label=format_number(d, "ne"), date=nd, ad_date=ad))
        cells.extend([None] * (-len(cells) % 7))

        first_ad = cells[lead].ad_date
        last_ad = cells[lead + days_in_month - 1].ad_date
        ad_label = ad_month_name(first_ad.month - 1, short=True)
        if last_ad.month != first_ad.month:
            ad_label += "/" + ad_month_name(last_ad.month - 1, short=True)

        grid = MonthGrid(
            year=self.year,
            month_index=month_index,
            month=MonthLabel(
                en=bs_month_name(month_index, "en"),
                ne=bs_month_name(month_index, "ne"),
                ad=ad_label,
            ),
            days=tuple(cells),
            leading_blanks=lead,
        )
        self._month_cache[month_index] = grid
        return grid

    def get_all_months(self) -> List[MonthGrid]:
        return [self.get_month(i) for i in range(12)]

    def get_month_ad_year(self, month_index: int) -> int:
        """Gregorian year in which the month starts."""
        grid = self.get_month(month_index)
        return grid.days[grid.leading_blanks].ad_date.year

    def clear_cache(self) -> None:
        self._month_cache = {}

    # ---------------------------------------------------------
    # "Today"
    # ---------------------------------------------------------

    def is_current_year(self, today: Today = None) -> bool:
        return _resolve_today(today).year == self.year

    def get_current_month(self, today: Today = None) -> Optional[MonthGrid]:
        t = _resolve_today(today)
        if t.year == self.year:
            return self.get_month(t.month_index)
        return None

    # ---------------------------------------------------------
    # Navigation
    # ---------------------------------------------------------

    def can_go_next(self) -> bool:
        return self.year < self.max_year

    def can_go_prev(self) -> bool:
        return self.year > self.min_year

    def next_year(self) -> "NepaliCalendar":
        if not self.can_go_next():
            raise OutOfRangeError(f"Cannot go beyond year {self.max_year}")
        return NepaliCalendar(self.year + 1)

    def prev_year(self) -> "NepaliCalendar":
        if not self.can_go_prev():
            raise OutOfRangeError(f"Cannot go before year {self.min_year}")
        return NepaliCalendar(self.year - 1)

    @classmethod
    def current(cls, today: Today = None) -> "NepaliCalendar":
        return cls(_resolve_today(today).year)

    @classmethod
    def from_date(cls, d: NepaliDate) -> "NepaliCalendar":
        return cls(d.year)
