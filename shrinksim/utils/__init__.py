# shrinksim/utils/__init__.py
from __future__ import annotations
from .constants import (
    CTE_PI, CTE_GLASS, TEMP_CHANGE_NO_BML, TEMP_CHANGE_WITH_BML,
    RELAXATION_FACTOR, ANISOTROPY_FACTOR, VISUAL_EXAGGERATION,
    GRID_COLS, GRID_ROWS,
)

__all__ = [
    "CTE_PI", "CTE_GLASS", "TEMP_CHANGE_NO_BML", "TEMP_CHANGE_WITH_BML",
    "RELAXATION_FACTOR", "ANISOTROPY_FACTOR", "VISUAL_EXAGGERATION",
    "GRID_COLS", "GRID_ROWS",
]
