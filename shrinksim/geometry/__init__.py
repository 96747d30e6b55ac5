# shrinksim/geometry/__init__.py
from __future__ import annotations
from .grid import slot_size, cell_size, build_cells

__all__ = ["slot_size", "cell_size", "build_cells"]
