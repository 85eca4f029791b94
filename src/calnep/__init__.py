"""calnep public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    bs_to_ad,
    ad_to_bs,
    to_ordinal,
    from_ordinal,
    weekday,
    explain,
    list_tables,
    table_info,
    get_engine,
    make_engine,
    register_engine,
    year_range,
    days_in_month,
    days_in_year,
    month_bounds,
    first_day_of_month,
    last_day_of_month,
    new_year_day,
    prev_month,
    next_month,
)
from .core.errors import (
    CalnepError,
    OutOfRangeError,
    InvalidDateError,
    InvalidInputError,
    InvariantViolationError,
)
from .core.time import NEPAL_TZ
from .core.types import YMD
from .date import NepaliDate
from .calendar import NepaliCalendar, MonthGrid, DayCell
from .formatting import render, format_number, FORMAT_TOKENS

# Bounds of the default table as bootstrapped at import
MIN_YEAR, MAX_YEAR = year_range()

__all__ = [
    "bs_to_ad",
    "ad_to_bs",
    "to_ordinal",
    "from_ordinal",
    "weekday",
    "explain",
    "list_tables",
    "table_info",
    "get_engine",
    "make_engine",
    "register_engine",
    "year_range",
    "days_in_month",
    "days_in_year",
    "month_bounds",
    "first_day_of_month",
    "last_day_of_month",
    "new_year_day",
    "prev_month",
    "next_month",
    "CalnepError",
    "OutOfRangeError",
    "InvalidDateError",
    "InvalidInputError",
    "InvariantViolationError",
    "NEPAL_TZ",
    "YMD",
    "NepaliDate",
    "NepaliCalendar",
    "MonthGrid",
    "DayCell",
    "render",
    "format_number",
    "FORMAT_TOKENS",
    "MIN_YEAR",
    "MAX_YEAR",
]
