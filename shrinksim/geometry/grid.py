# shrinksim/geometry/grid.py
"""
Mother-glass grid layout (GRID_COLS x GRID_ROWS panels).

- Glass-local millimetres, origin at the top-left corner of the glass.
- Each slot holds one cell, inset by CELL_MARGIN_RATIO of the slot on every side.
- Shrunken cells: the slot-centre → glass-centre vector and the cell size are
  both scaled per axis by the (exaggerated) factor, so every cell moves toward
  the glass centre with one global factor per axis.

Public API:
    slot_size(width, height) -> (slot_w, slot_h)
    cell_size(width, height) -> (cell_w, cell_h)
    build_cells(width, height, *, visual_factor_x, visual_factor_y) -> tuple[Cell, ...]

No physics here: factors come from physics/shrinkage.py.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from ..models.results import Cell
from ..utils.constants import CELL_MARGIN_RATIO, GRID_COLS, GRID_ROWS

__all__ = ["slot_size", "cell_size", "build_cells"]


def slot_size(width: float, height: float) -> Tuple[float, float]:
    return width / GRID_COLS, height / GRID_ROWS


def cell_size(width: float, height: float) -> Tuple[float, float]:
    slot_w, slot_h = slot_size(width, height)
    margin_x = slot_w * CELL_MARGIN_RATIO
    margin_y = slot_h * CELL_MARGIN_RATIO
    return slot_w - 2 * margin_x, slot_h - 2 * margin_y


def build_cells(
    width: float,
    height: float,
    *,
    visual_factor_x: float,
    visual_factor_y: float,
) -> Tuple[Cell, ...]:
    """
    Emit all cells row-major (id = row * GRID_COLS + col).

    Degenerate glass sizes give degenerate rectangles; NaN/Inf propagate.
    """
    slot_w, slot_h = slot_size(width, height)
    cell_w, cell_h = cell_size(width, height)
    glass_cx, glass_cy = width / 2, height / 2

    # (GRID_ROWS, GRID_COLS) index mesh; ravel() is row-major
    rows, cols = np.meshgrid(np.arange(GRID_ROWS), np.arange(GRID_COLS), indexing="ij")
    rows, cols = rows.ravel(), cols.ravel()

    with np.errstate(all="ignore"):
        cx = cols * slot_w + slot_w / 2
        cy = rows * slot_h + slot_h / 2
        x = cx - cell_w / 2
        y = cy - cell_h / 2

        new_cx = glass_cx + (cx - glass_cx) * visual_factor_x
        new_cy = glass_cy + (cy - glass_cy) * visual_factor_y
        new_w = cell_w * visual_factor_x
        new_h = cell_h * visual_factor_y
        sx = new_cx - new_w / 2
        sy = new_cy - new_h / 2

    return tuple(
        Cell(
            id=int(r) * GRID_COLS + int(c),
            row=int(r),
            col=int(c),
            x=float(x[i]),
            y=float(y[i]),
            width=float(cell_w),
            height=float(cell_h),
            shrunken_x=float(sx[i]),
            shrunken_y=float(sy[i]),
            shrunken_width=float(new_w),
            shrunken_height=float(new_h),
        )
        for i, (r, c) in enumerate(zip(rows, cols))
    )
