# shrinksim/models/params.py
"""
Simulation inputs for the ELA shrinkage calculator.

- Millimetres for glass dimensions; the correction factor is dimensionless.
- Frozen dataclasses: a parameter set is a value, safe to hash and to use as
  a memoization key. "Editing" a field means building a new instance.
- No validation here. Range hints are for the control surface only.

Public API (stable):
    ScanDirectionT, LONG_AXIS, SHORT_AXIS
    SimulationParams
    DEFAULT_PARAMS
    ParamSession
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Literal, Tuple

__all__ = [
    "ScanDirectionT",
    "LONG_AXIS",
    "SHORT_AXIS",
    "SCAN_DIRECTIONS",
    "DEFAULT_EXAGGERATION",
    "DEFAULT_CORRECTION_FACTOR",
    "CORRECTION_FACTOR_RANGE",
    "SimulationParams",
    "DEFAULT_PARAMS",
    "ParamSession",
]

ScanDirectionT = Literal["long_axis", "short_axis"]

LONG_AXIS: ScanDirectionT = "long_axis"    # laser scans along the 1850 mm side
SHORT_AXIS: ScanDirectionT = "short_axis"  # laser scans along the 1500 mm side
SCAN_DIRECTIONS: Tuple[ScanDirectionT, ...] = (LONG_AXIS, SHORT_AXIS)

DEFAULT_EXAGGERATION = 100
DEFAULT_CORRECTION_FACTOR = 1.0

# (min, max, step) of the process-factor slider
CORRECTION_FACTOR_RANGE = (0.5, 2.0, 0.1)


@dataclass(frozen=True, slots=True)
class SimulationParams:
    """
    One set of process inputs.

    Attributes
    ----------
    width_mm, height_mm : float
        Mother-glass outer dimensions [mm].
    has_bml : bool
        Block metal layer present under the panel (heat sink, lower load).
    scan_direction : ScanDirectionT
        Axis the anneal laser scans along; that axis gets the anisotropy boost.
    exaggeration : float
        Reserved display knob. Carried through, never read by the calculator.
    correction_factor : float
        Linear multiplier on the computed strain (UI suggests 0.5..2.0).
    """
    width_mm: float = 1500.0
    height_mm: float = 1850.0
    has_bml: bool = True
    scan_direction: ScanDirectionT = LONG_AXIS
    exaggeration: float = DEFAULT_EXAGGERATION
    correction_factor: float = DEFAULT_CORRECTION_FACTOR

    def replace(self, **changes) -> "SimulationParams":
        return replace(self, **changes)


# 6G mother glass (1500 x 1850 mm), BML on, long-axis scan
DEFAULT_PARAMS = SimulationParams()


@dataclass(slots=True)
class ParamSession:
    """
    Two copies of the inputs: the one being edited and the one last run.

    Only ``commit()`` moves edits into ``committed``; the calculator is fed
    from ``committed`` alone.
    """
    editing: SimulationParams = DEFAULT_PARAMS
    committed: SimulationParams = DEFAULT_PARAMS
    runs: int = field(default=0)

    def edit(self, **changes) -> SimulationParams:
        self.editing = self.editing.replace(**changes)
        return self.editing

    def commit(self) -> SimulationParams:
        self.committed = self.editing
        self.runs += 1
        return self.committed

    def reset(self) -> SimulationParams:
        """Restore defaults on the form; the last run stays on screen."""
        self.editing = DEFAULT_PARAMS
        return self.editing

    @property
    def dirty(self) -> bool:
        return self.editing != self.committed

    def results(self):
        from ..physics.shrinkage import compute_cached
        return compute_cached(self.committed)
