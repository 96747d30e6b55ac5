# shrinksim/physics/shrinkage.py
"""
PI substrate shrinkage after ELA (excimer laser annealing).

Model (illustrative, not calibrated):
  strain_base = (CTE_PI - CTE_GLASS) · ΔT_eff · RELAXATION_FACTOR      [ppm]
  strain      = strain_base · correction_factor
  ppm_axis    = round(strain · m_axis),  m_scan = ANISOTROPY_FACTOR, m_other = 1

ΔT_eff is the reduced thermal load when a BML heat sink sits under the panel.
The ELA scan axis picks up the anisotropy boost: a long-axis scan runs along
the glass height, a short-axis scan along the width.

Public API:
    ShrinkageBreakdown
    shrinkage_breakdown(params) -> ShrinkageBreakdown
    compute(params) -> SimulationResults
    compute_cached(params) -> SimulationResults

Notes
-----
- Pure and total: no logging, no I/O, no exceptions for finite or non-finite
  input. NaN/Inf in the inputs propagate to the outputs.
- ``params.exaggeration`` is not read; cell layout uses the fixed
  VISUAL_EXAGGERATION instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import math
from typing import Tuple

from ..geometry.grid import build_cells, cell_size
from ..models.params import LONG_AXIS, ScanDirectionT, SimulationParams
from ..models.results import SimulationResults
from ..utils.constants import (
    ANISOTROPY_FACTOR,
    CTE_GLASS,
    CTE_PI,
    PPM,
    RELAXATION_FACTOR,
    TEMP_CHANGE_NO_BML,
    TEMP_CHANGE_WITH_BML,
    VISUAL_EXAGGERATION,
)

__all__ = [
    "ShrinkageBreakdown",
    "shrinkage_breakdown",
    "base_strain_ppm",
    "anisotropy_multipliers",
    "round_ppm",
    "visual_factor",
    "real_factor",
    "compute",
    "compute_cached",
]


@dataclass(frozen=True, slots=True)
class ShrinkageBreakdown:
    """Intermediate terms of the strain model, in evaluation order."""
    cte_mismatch: float          # [ppm/K]
    delta_T: float               # effective thermal load
    base_strain_ppm: float
    corrected_strain_ppm: float
    multiplier_w: float
    multiplier_h: float
    shrinkage_width_ppm: int
    shrinkage_height_ppm: int


# ---------------------------------------------------------------------
# Strain terms
# ---------------------------------------------------------------------


def _thermal_load(has_bml: bool) -> float:
    return TEMP_CHANGE_WITH_BML if has_bml else TEMP_CHANGE_NO_BML


def base_strain_ppm(has_bml: bool) -> float:
    return (CTE_PI - CTE_GLASS) * _thermal_load(has_bml) * RELAXATION_FACTOR


def anisotropy_multipliers(scan_direction: ScanDirectionT) -> Tuple[float, float]:
    """
    (width, height) multipliers. Exactly one axis is boosted.

    long_axis  -> height is the scan axis
    short_axis -> width is the scan axis
    """
    if scan_direction == LONG_AXIS:
        return 1.0, ANISOTROPY_FACTOR
    return ANISOTROPY_FACTOR, 1.0


def round_ppm(value: float) -> int | float:
    """Round half away from zero. Non-finite values pass through untouched."""
    if not math.isfinite(value):
        return value
    a = abs(value)
    r = math.floor(a)
    r += (a - r >= 0.5)
    return int(math.copysign(r, value))


def visual_factor(ppm: float) -> float:
    """Exaggerated shrink multiplier, for cell layout only."""
    return 1 - (ppm * VISUAL_EXAGGERATION) / PPM


def real_factor(ppm: float) -> float:
    return 1 - ppm / PPM


def shrinkage_breakdown(params: SimulationParams) -> ShrinkageBreakdown:
    cte_mismatch = CTE_PI - CTE_GLASS
    delta_T = _thermal_load(params.has_bml)
    base = base_strain_ppm(params.has_bml)

    # linear, unclamped: values outside the 0.5..2.0 slider are honoured
    corrected = base * params.correction_factor

    m_w, m_h = anisotropy_multipliers(params.scan_direction)
    return ShrinkageBreakdown(
        cte_mismatch=float(cte_mismatch),
        delta_T=float(delta_T),
        base_strain_ppm=float(base),
        corrected_strain_ppm=float(corrected),
        multiplier_w=m_w,
        multiplier_h=m_h,
        shrinkage_width_ppm=round_ppm(corrected * m_w),
        shrinkage_height_ppm=round_ppm(corrected * m_h),
    )


# ---------------------------------------------------------------------
# Calculator
# ---------------------------------------------------------------------


def compute(params: SimulationParams) -> SimulationResults:
    """
    Map one parameter set to its shrinkage results.

    Reported PPM and the new glass size use the true factor; the ``cells``
    layout scales each axis by the visual factor instead so the change is
    visible at glass scale.
    """
    width, height = params.width_mm, params.height_mm
    bd = shrinkage_breakdown(params)
    ppm_w, ppm_h = bd.shrinkage_width_ppm, bd.shrinkage_height_ppm

    cell_w, cell_h = cell_size(width, height)
    cells = build_cells(
        width,
        height,
        visual_factor_x=visual_factor(ppm_w),
        visual_factor_y=visual_factor(ppm_h),
    )

    return SimulationResults(
        original_width_mm=width,
        original_height_mm=height,
        new_width_mm=width * real_factor(ppm_w),
        new_height_mm=height * real_factor(ppm_h),
        shrinkage_width_ppm=ppm_w,
        shrinkage_height_ppm=ppm_h,
        cells=cells,
        is_width_long_axis=bool(cell_w > cell_h),
        scan_direction=params.scan_direction,
    )


@lru_cache(maxsize=128)
def compute_cached(params: SimulationParams) -> SimulationResults:
    """``compute`` memoized on parameter equality (results are immutable)."""
    return compute(params)
