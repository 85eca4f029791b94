from __future__ import annotations
from calnep.core.engine import EngineRegistry
from calnep.engines.specs import standard_specs
from calnep.engines.factory import make_engine

def build_registry() -> EngineRegistry:
    engines = {}
    for name, spec in standard_specs().items():
        engines[name] = make_engine(spec)
    return EngineRegistry(engines)
