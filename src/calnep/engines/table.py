"""
calnep.engines.table
--------------------
The static month-length table. Bikram Sambat month lengths follow no closed
rule, so every supported year carries its twelve lengths as data.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping, Sequence, Tuple

from calnep.core.errors import InvalidInputError, OutOfRangeError

MONTHS_PER_YEAR = 12


class CalendarTable:
    """
    Read-only mapping of BS year -> twelve month lengths over a contiguous
    year range [min_year, max_year].
    """
    def __init__(self, month_days: Mapping[int, Sequence[int]]):
        if not month_days:
            raise InvalidInputError("Month-length table is empty")

        years = sorted(int(y) for y in month_days)
        expected = list(range(years[0], years[-1] + 1))
        if years != expected:
            missing = sorted(set(expected) - set(years))
            raise InvalidInputError(f"Month-length table is not contiguous; missing years {missing}")

        rows = {}
        for y in years:
            row = tuple(int(n) for n in month_days[y])
            if len(row) != MONTHS_PER_YEAR:
                raise InvalidInputError(f"Year {y} has {len(row)} month lengths, expected {MONTHS_PER_YEAR}")
            if any(n < 1 for n in row):
                raise InvalidInputError(f"Year {y} has a non-positive month length: {row}")
            rows[y] = row

        self._rows: Mapping[int, Tuple[int, ...]] = MappingProxyType(rows)
        self.min_year = years[0]
        self.max_year = years[-1]

    # ---------------------------------------------------------
    # Lookups
    # ---------------------------------------------------------

    def check_year(self, year: int) -> None:
        if year not in self._rows:
            raise OutOfRangeError(f"Year {year} out of range ({self.min_year}-{self.max_year})")

    def month_days(self, year: int) -> Tuple[int, ...]:
        self.check_year(year)
        return self._rows[year]

    def month_length(self, year: int, month_index: int) -> int:
        row = self.month_days(year)
        if not (0 <= month_index < MONTHS_PER_YEAR):
            raise OutOfRangeError(f"Invalid month index: {month_index} (expected 0-11)")
        return row[month_index]

    def year_length(self, year: int) -> int:
        return sum(self.month_days(year))

    def is_valid(self, year: int, month_index: int, day: int) -> bool:
        if year not in self._rows or not (0 <= month_index < MONTHS_PER_YEAR):
            return False
        return 1 <= day <= self._rows[year][month_index]

    def validate(self, year: int, month_index: int, day: int) -> None:
        """Raise OutOfRangeError unless (year, month_index, day) is covered by the table."""
        length = self.month_length(year, month_index)
        if not (1 <= day <= length):
            raise OutOfRangeError(f"Invalid day: {day} for {year}-{month_index} (1-{length})")

    # ---------------------------------------------------------
    # Container protocol
    # ---------------------------------------------------------

    @property
    def years(self) -> range:
        return range(self.min_year, self.max_year + 1)

    def __contains__(self, year: object) -> bool:
        return year in self._rows

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[int]:
        return iter(self.years)

    def __repr__(self) -> str:
        return f"CalendarTable({self.min_year}-{self.max_year})"
