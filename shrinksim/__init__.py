# shrinksim/__init__.py
"""
ShrinkSim: PI substrate shrinkage after ELA, on a 4 x 10 mother-glass grid.
"""
from __future__ import annotations
from .models.params import (
    ScanDirectionT, LONG_AXIS, SHORT_AXIS, SimulationParams, DEFAULT_PARAMS, ParamSession,
)
from .models.results import Cell, SimulationResults
from .physics.shrinkage import compute, compute_cached

__all__ = [
    "ScanDirectionT", "LONG_AXIS", "SHORT_AXIS", "SimulationParams", "DEFAULT_PARAMS",
    "ParamSession", "Cell", "SimulationResults", "compute", "compute_cached",
]
