from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Protocol

from .types import YMD

class ConverterProtocol(Protocol):
    min_year: int
    max_year: int
    min_ad: date
    max_ad: date

    def info(self) -> Dict[str, Any]: ...
    def month_length(self, year: int, month_index: int) -> int: ...
    def year_length(self, year: int) -> int: ...
    def to_ordinal(self, year: int, month_index: int, day: int) -> int: ...
    def from_ordinal(self, ordinal: int) -> YMD: ...
    def bs_to_ad(self, year: int, month_index: int, day: int) -> date: ...
    def ad_to_bs(self, value: date) -> YMD: ...
    def ad_to_ordinal(self, value: date) -> int: ...
    def ordinal_to_ad(self, ordinal: int) -> date: ...
    def weekday(self, year: int, month_index: int, day: int) -> int: ...

@dataclass
class EngineRegistry:
    _engines: Dict[str, ConverterProtocol]

    def get(self, name: str) -> ConverterProtocol:
        if name not in self._engines:
            raise KeyError(f"Unknown table '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: ConverterProtocol, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Table '{name}' already exists. Use overwrite=True to replace.")
        self._engines[name] = engine
