from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Dict, Mapping, NamedTuple, Sequence

class YMD(NamedTuple):
    """A bare BS date triple; month_index is 0-based (0 = Baishakh)."""
    year: int
    month_index: int
    day: int

@dataclass(frozen=True)
class TableId:
    name: str
    version: str

@dataclass(frozen=True)
class ReferencePoint:
    """A BS date and its exact Gregorian equivalent; ordinal day 0."""
    bs: YMD
    ad: date

@dataclass(frozen=True)
class TableSpec:
    """Pure data payload for constructing a conversion engine."""
    id: TableId
    reference: ReferencePoint
    month_days: Mapping[int, Sequence[int]]
    meta: Dict[str, Any]

    def tweak(self, **kwargs) -> "TableSpec":
        return replace(self, **kwargs)
