from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple, Union

from .core.engine import ConverterProtocol, EngineRegistry
from .core.errors import OutOfRangeError
from .core.time import to_jdn, weekday_from_jdn
from .core.types import TableSpec, YMD
from .engines.factory import make_engine as _make_engine
from .engines.specs import DEFAULT_TABLE

_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def get_engine(table: str = DEFAULT_TABLE) -> ConverterProtocol:
    return _reg().get(table)

def list_tables() -> List[str]:
    return _reg().list()

def table_info(table: str = DEFAULT_TABLE) -> Dict[str, Any]:
    return _reg().get(table).info()

def make_engine(spec: TableSpec) -> ConverterProtocol:
    return _make_engine(spec)

def register_engine(name: str, engine: ConverterProtocol, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

def year_range(*, table: str = DEFAULT_TABLE) -> Tuple[int, int]:
    eng = _reg().get(table)
    return eng.min_year, eng.max_year

# ============================================================
# Conversion
# ============================================================

def bs_to_ad(year: int, month_index: int, day: int, *, table: str = DEFAULT_TABLE) -> date:
    return _reg().get(table).bs_to_ad(year, month_index, day)

def ad_to_bs(d: Union[date, datetime], *, table: str = DEFAULT_TABLE) -> YMD:
    return _reg().get(table).ad_to_bs(d)

def to_ordinal(year: int, month_index: int, day: int, *, table: str = DEFAULT_TABLE) -> int:
    return _reg().get(table).to_ordinal(year, month_index, day)

def from_ordinal(ordinal: int, *, table: str = DEFAULT_TABLE) -> YMD:
    return _reg().get(table).from_ordinal(ordinal)

def weekday(year: int, month_index: int, day: int, *, table: str = DEFAULT_TABLE) -> int:
    """0=Sunday .. 6=Saturday."""
    return _reg().get(table).weekday(year, month_index, day)

def explain(d: Union[date, datetime], *, table: str = DEFAULT_TABLE) -> Dict[str, Any]:
    eng = _reg().get(table)
    ordinal = eng.ad_to_ordinal(d)
    bs = eng.from_ordinal(ordinal)
    jdn = to_jdn(eng.ordinal_to_ad(ordinal))
    return {
        "ad": eng.ordinal_to_ad(ordinal),
        "bs": bs,
        "ordinal": ordinal,
        "jdn": jdn,
        "weekday": weekday_from_jdn(jdn),
        "days_in_month": eng.month_length(bs.year, bs.month_index),
        "table": eng.info()["id"],
    }

# ============================================================
# Month / year helpers
# ============================================================

def days_in_month(year: int, month_index: int, *, table: str = DEFAULT_TABLE) -> int:
    return _reg().get(table).month_length(year, month_index)

def days_in_year(year: int, *, table: str = DEFAULT_TABLE) -> int:
    return _reg().get(table).year_length(year)

def month_bounds(year: int, month_index: int, *, table: str = DEFAULT_TABLE, as_date: bool = True) -> dict:
    eng = _reg().get(table)
    n = eng.month_length(year, month_index)
    first = eng.to_ordinal(year, month_index, 1)
    last = first + n - 1

    out = {"Y": year, "M": month_index, "days": n, "first_ordinal": first, "last_ordinal": last}
    if as_date:
        out["first_date"] = eng.ordinal_to_ad(first)
        out["last_date"] = eng.ordinal_to_ad(last)
    return out

def first_day_of_month(year: int, month_index: int, *, table: str = DEFAULT_TABLE) -> date:
    return month_bounds(year, month_index, table=table)["first_date"]

def last_day_of_month(year: int, month_index: int, *, table: str = DEFAULT_TABLE) -> date:
    return month_bounds(year, month_index, table=table)["last_date"]

def new_year_day(year: int, *, table: str = DEFAULT_TABLE, as_date: bool = True) -> dict:
    """Baishakh 1 of a BS year."""
    eng = _reg().get(table)
    ordinal = eng.to_ordinal(year, 0, 1)
    d = eng.ordinal_to_ad(ordinal)
    out = {"Y": year, "ordinal": ordinal, "jdn": to_jdn(d), "weekday": weekday_from_jdn(to_jdn(d))}
    if as_date:
        out["date"] = d
    return out

def prev_month(year: int, month_index: int, *, table: str = DEFAULT_TABLE) -> dict:
    eng = _reg().get(table)
    eng.month_length(year, month_index)
    Y2, M2 = (year, month_index - 1) if month_index > 0 else (year - 1, 11)
    if Y2 < eng.min_year:
        raise OutOfRangeError(f"Cannot go before year {eng.min_year}")
    return {"Y": Y2, "M": M2}

def next_month(year: int, month_index: int, *, table: str = DEFAULT_TABLE) -> dict:
    eng = _reg().get(table)
    eng.month_length(year, month_index)
    Y2, M2 = (year, month_index + 1) if month_index < 11 else (year + 1, 0)
    if Y2 > eng.max_year:
        raise OutOfRangeError(f"Cannot go beyond year {eng.max_year}")
    return {"Y": Y2, "M": M2}
