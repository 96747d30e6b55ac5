# shrinksim/physics/__init__.py
from __future__ import annotations
from .shrinkage import (
    ShrinkageBreakdown, shrinkage_breakdown, base_strain_ppm, anisotropy_multipliers,
    round_ppm, visual_factor, real_factor, compute, compute_cached,
)

__all__ = [
    "ShrinkageBreakdown", "shrinkage_breakdown", "base_strain_ppm",
    "anisotropy_multipliers", "round_ppm", "visual_factor", "real_factor",
    "compute", "compute_cached",
]
