"""
calnep.engines.specs
--------------------
Pure data specifications for the conversion engines, and the loader for the
month-length table they carry.

The table ships as a CSV snapshot in calnep/data/bs_month_days.csv with
columns ``year, m1, ..., m12``. A different table can be supplied by pointing
the CALNEP_MONTH_TABLE environment variable at a CSV with the same layout.
"""

from __future__ import annotations

import csv
import importlib
import importlib.resources
import logging
import os
from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Tuple

from calnep.core.errors import InvalidInputError
from calnep.core.types import ReferencePoint, TableId, TableSpec, YMD

logger = logging.getLogger(__name__)

ENV_TABLE = "CALNEP_MONTH_TABLE"
DEFAULT_TABLE = "nepal"

# 1970 Baishakh 1 == 1913-04-13 (a Sunday)
REF_BS = YMD(1970, 0, 1)
REF_AD = date(1913, 4, 13)
REFERENCE = ReferencePoint(bs=REF_BS, ad=REF_AD)

_MONTH_COLS = tuple(f"m{i}" for i in range(1, 13))


def _read_csv_rows(rows: Iterable[dict], *, source: str) -> Dict[int, Tuple[int, ...]]:
    out: Dict[int, Tuple[int, ...]] = {}
    for r in rows:
        try:
            year = int(r["year"])
            out[year] = tuple(int(r[c]) for c in _MONTH_COLS)
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidInputError(f"Malformed month table row in {source}: {r!r}") from e
    return out


def read_month_table(path: Path) -> Dict[int, Tuple[int, ...]]:
    """Read a ``year,m1..m12`` CSV file into {year: (12 lengths)}."""
    with path.open("r", encoding="utf-8", newline="") as f:
        return _read_csv_rows(csv.DictReader(f), source=str(path))


@lru_cache(maxsize=1)
def packaged_month_table() -> Mapping[int, Tuple[int, ...]]:
    pkg = importlib.import_module("calnep.data")
    path = importlib.resources.files(pkg).joinpath("bs_month_days.csv")
    with path.open("r", encoding="utf-8", newline="") as f:
        return _read_csv_rows(csv.DictReader(f), source="calnep.data/bs_month_days.csv")


def load_month_table(path: Optional[str] = None) -> Mapping[int, Tuple[int, ...]]:
    """
    Load the month-length table.

    Search order:
      1) explicit ``path`` argument
      2) CALNEP_MONTH_TABLE environment variable (path to CSV)
      3) packaged data (calnep.data/bs_month_days.csv)
    """
    p = (path or os.environ.get(ENV_TABLE, "")).strip()
    if p:
        fp = Path(p).expanduser()
        if not fp.is_file():
            raise InvalidInputError(f"Month table not found: {fp}")
        logger.debug("loading month table from %s", fp)
        return read_month_table(fp)

    logger.debug("loading packaged month table")
    return packaged_month_table()


def nepal_spec(path: Optional[str] = None) -> TableSpec:
    month_days = load_month_table(path)
    years = sorted(month_days)
    return TableSpec(
        id=TableId(name=DEFAULT_TABLE, version=f"{years[0]}-{years[-1]}"),
        reference=REFERENCE,
        month_days=month_days,
        meta={"source": path or os.environ.get(ENV_TABLE) or "packaged"},
    )


def standard_specs() -> Dict[str, TableSpec]:
    return {DEFAULT_TABLE: nepal_spec()}
