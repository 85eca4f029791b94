"""
calnep.engines.factory
----------------------
Transforms pure data specifications into live, executable engine objects.
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence

from calnep.core.types import ReferencePoint, TableId, TableSpec
from calnep.engines.converter import ConversionEngine
from calnep.engines.specs import REFERENCE


def make_engine(spec: TableSpec) -> ConversionEngine:
    """The universal entry point."""
    if not isinstance(spec, TableSpec):
        raise TypeError(f"Unknown spec type: {type(spec)}")
    return ConversionEngine(spec)


def engine_from_table(
    name: str,
    month_days: Mapping[int, Sequence[int]],
    *,
    reference: Optional[ReferencePoint] = None,
    version: str = "custom",
) -> ConversionEngine:
    """Build an engine straight from an in-process table (e.g. a revised one)."""
    spec = TableSpec(
        id=TableId(name=name, version=version),
        reference=reference or REFERENCE,
        month_days=month_days,
        meta={"source": "in-process"},
    )
    return make_engine(spec)
