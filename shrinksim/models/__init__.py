# shrinksim/models/__init__.py
from __future__ import annotations
from .params import (
    ScanDirectionT, LONG_AXIS, SHORT_AXIS, SimulationParams, DEFAULT_PARAMS, ParamSession,
)
from .results import Cell, SimulationResults

__all__ = [
    "ScanDirectionT", "LONG_AXIS", "SHORT_AXIS", "SimulationParams",
    "DEFAULT_PARAMS", "ParamSession", "Cell", "SimulationResults",
]
