# -*- coding: utf-8 -*-
"""
Display KPIs derived from a SimulationResults: cell long/short axis PPM and
the flat metrics dict written to metrics.json.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict

from ..models.results import SimulationResults
from ..utils.constants import GRID_COLS, GRID_ROWS

HORIZONTAL = "Horizontal Shrinkage"
VERTICAL = "Vertical Shrinkage"


@dataclass(frozen=True, slots=True)
class AxisSummary:
    long_axis_ppm: int
    short_axis_ppm: int
    long_axis_label: str
    short_axis_label: str


def axis_summary(res: SimulationResults) -> AxisSummary:
    """Map width/height PPM onto the cell's long/short axis (label only)."""
    if res.is_width_long_axis:
        return AxisSummary(res.shrinkage_width_ppm, res.shrinkage_height_ppm, HORIZONTAL, VERTICAL)
    return AxisSummary(res.shrinkage_height_ppm, res.shrinkage_width_ppm, VERTICAL, HORIZONTAL)


def grid_layout_label() -> str:
    return f"{GRID_COLS} x {GRID_ROWS}"


def summary_metrics(res: SimulationResults) -> Dict[str, Any]:
    ax = axis_summary(res)
    return {
        "cell_long_axis_ppm": ax.long_axis_ppm,
        "cell_short_axis_ppm": ax.short_axis_ppm,
        "cell_long_axis_direction": ax.long_axis_label,
        "shrinkage_width_ppm": res.shrinkage_width_ppm,
        "shrinkage_height_ppm": res.shrinkage_height_ppm,
        "original_width_mm": res.original_width_mm,
        "original_height_mm": res.original_height_mm,
        "new_width_mm": res.new_width_mm,
        "new_height_mm": res.new_height_mm,
        "grid_layout": grid_layout_label(),
        "n_cells": len(res.cells),
        "scan_direction": res.scan_direction,
    }
