# -*- coding: utf-8 -*-
"""
Result records of one calculator call.

Cell geometry is glass-local [mm], top-left anchored, y pointing down the
glass (row 0 at the top).
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .params import ScanDirectionT

__all__ = ["Cell", "SimulationResults"]


@dataclass(frozen=True, slots=True)
class Cell:
    id: int
    row: int
    col: int
    # original (un-shrunk) rectangle [mm]
    x: float
    y: float
    width: float
    height: float
    # exaggerated post-shrinkage rectangle [mm]
    shrunken_x: float
    shrunken_y: float
    shrunken_width: float
    shrunken_height: float

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def shrunken_center(self) -> Tuple[float, float]:
        return (
            self.shrunken_x + self.shrunken_width / 2,
            self.shrunken_y + self.shrunken_height / 2,
        )


@dataclass(frozen=True, slots=True)
class SimulationResults:
    """
    Outputs of ``compute``.

    new_width_mm/new_height_mm use the true factor (1 - ppm/1e6); only the
    ``cells`` shrunken fields carry the visual exaggeration.
    is_width_long_axis refers to the *cell* aspect, not the scan direction.
    """
    original_width_mm: float
    original_height_mm: float
    new_width_mm: float
    new_height_mm: float
    shrinkage_width_ppm: int
    shrinkage_height_ppm: int
    cells: Tuple[Cell, ...]
    is_width_long_axis: bool
    scan_direction: ScanDirectionT
