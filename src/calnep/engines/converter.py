"""
calnep.engines.converter
------------------------
The conversion engine. Funnels both directions through a signed ordinal day
counted from a fixed reference point, using prefix sums over the month-length
table that are built once per engine.
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from datetime import date, datetime
from typing import Any, Dict, List, Tuple, Union

from calnep.core.errors import InvariantViolationError, OutOfRangeError
from calnep.core.time import civil_date, from_jdn, to_jdn, weekday_from_jdn
from calnep.core.types import TableSpec, YMD
from calnep.engines.table import MONTHS_PER_YEAR, CalendarTable

logger = logging.getLogger(__name__)


class ConversionEngine:
    """
    Translates BS (year, month_index, day) to ordinal days and Gregorian dates
    and back. Both directions read the same prefix tables, so they are exact
    inverses over the table's coverage.
    """
    def __init__(self, spec: TableSpec):
        self.id = spec.id
        self.reference = spec.reference
        self.meta = dict(spec.meta)
        self.table = CalendarTable(spec.month_days)

        ref = self.reference.bs
        if not self.table.is_valid(ref.year, ref.month_index, ref.day):
            raise InvariantViolationError(
                f"Reference date {tuple(ref)} is not covered by table {self.id.name} "
                f"({self.table.min_year}-{self.table.max_year})"
            )
        self._ref_jdn = to_jdn(self.reference.ad)

        # 1. Month boundaries within each year: 13 entries, [0, ..., year_length]
        self._month_starts: List[Tuple[int, ...]] = []
        for y in self.table.years:
            bounds = [0]
            for n in self.table.month_days(y):
                bounds.append(bounds[-1] + n)
            self._month_starts.append(tuple(bounds))

        # 2. Year starts relative to the start of the reference year.
        #    One trailing sentinel holds the end of the last year.
        starts = [0]
        for bounds in self._month_starts:
            starts.append(starts[-1] + bounds[-1])
        ref_year_start = starts[ref.year - self.table.min_year]
        ref_in_year = self._month_starts[ref.year - self.table.min_year][ref.month_index] + ref.day - 1
        self._year_starts: Tuple[int, ...] = tuple(s - ref_year_start - ref_in_year for s in starts)

        self.min_ordinal = self._year_starts[0]
        self.max_ordinal = self._year_starts[-1] - 1

        logger.debug(
            "built engine %s: years %d-%d, ordinals %d..%d",
            self.id.name, self.min_year, self.max_year, self.min_ordinal, self.max_ordinal,
        )

    # ---------------------------------------------------------
    # Table passthrough
    # ---------------------------------------------------------

    @property
    def min_year(self) -> int:
        return self.table.min_year

    @property
    def max_year(self) -> int:
        return self.table.max_year

    @property
    def min_ad(self) -> date:
        return self.ordinal_to_ad(self.min_ordinal)

    @property
    def max_ad(self) -> date:
        return self.ordinal_to_ad(self.max_ordinal)

    def month_length(self, year: int, month_index: int) -> int:
        return self.table.month_length(year, month_index)

    def year_length(self, year: int) -> int:
        return self.table.year_length(year)

    def year_start(self, year: int) -> int:
        """Ordinal of the first day (Baishakh 1) of a BS year."""
        self.table.check_year(year)
        return self._year_starts[year - self.min_year]

    # ---------------------------------------------------------
    # Forward: BS date to ordinal / Gregorian
    # ---------------------------------------------------------

    def to_ordinal(self, year: int, month_index: int, day: int) -> int:
        self.table.validate(year, month_index, day)
        i = year - self.min_year
        return self._year_starts[i] + self._month_starts[i][month_index] + day - 1

    def bs_to_ad(self, year: int, month_index: int, day: int) -> date:
        return self.ordinal_to_ad(self.to_ordinal(year, month_index, day))

    def weekday(self, year: int, month_index: int, day: int) -> int:
        """Weekday of a BS date, 0=Sunday .. 6=Saturday."""
        return weekday_from_jdn(self._ref_jdn + self.to_ordinal(year, month_index, day))

    # ---------------------------------------------------------
    # Inverse: ordinal / Gregorian to BS date
    # ---------------------------------------------------------

    def from_ordinal(self, ordinal: int) -> YMD:
        if not (self.min_ordinal <= ordinal <= self.max_ordinal):
            raise OutOfRangeError(
                f"Ordinal {ordinal} outside table {self.id.name} "
                f"({self.min_ordinal}..{self.max_ordinal})"
            )
        # 1. Year: last year start <= ordinal (sentinel excluded by the range check)
        i = bisect_right(self._year_starts, ordinal) - 1
        offset = ordinal - self._year_starts[i]

        # 2. Month: twelve boundaries, a linear scan is enough
        bounds = self._month_starts[i]
        for m in range(MONTHS_PER_YEAR):
            if offset < bounds[m + 1]:
                return YMD(self.min_year + i, m, offset - bounds[m] + 1)

        raise InvariantViolationError(f"Offset {offset} beyond month boundaries of year {self.min_year + i}")

    def ad_to_ordinal(self, value: Union[date, datetime]) -> int:
        return to_jdn(civil_date(value)) - self._ref_jdn

    def ordinal_to_ad(self, ordinal: int) -> date:
        return from_jdn(self._ref_jdn + ordinal)

    def ad_to_bs(self, value: Union[date, datetime]) -> YMD:
        return self.from_ordinal(self.ad_to_ordinal(value))

    # ---------------------------------------------------------
    # High-level helpers
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id.__dict__,
            "reference": {"bs": tuple(self.reference.bs), "ad": self.reference.ad.isoformat()},
            "years": (self.min_year, self.max_year),
            "ad_range": (self.min_ad.isoformat(), self.max_ad.isoformat()),
            "meta": dict(self.meta),
        }

    def __repr__(self) -> str:
        return f"ConversionEngine({self.id.name!r}, {self.min_year}-{self.max_year})"
