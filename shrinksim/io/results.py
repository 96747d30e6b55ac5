# -*- coding: utf-8 -*-
"""
Results IO helpers.

Write:
  * metrics.json  (glass-level KPIs)
  * cells.csv     (one row per cell, row-major)
  * artifacts     (layout PNG, written by the workflow)

This keeps on-disk layout stable for post-processing and reports.
"""
from __future__ import annotations
import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict

import pandas as pd

from shrinksim.models.results import SimulationResults

CELL_COLUMNS = [
    "id", "row", "col", "x", "y", "width", "height",
    "shrunken_x", "shrunken_y", "shrunken_width", "shrunken_height",
]

def write_metrics(run_dir: Path, metrics: Dict[str, Any]) -> Path:
    run_dir.mkdir(parents=True, exist_ok=True)
    out = run_dir / "metrics.json"
    with open(out, "w") as f:
        json.dump(metrics, f, indent=2, sort_keys=True)
    return out

def cells_frame(res: SimulationResults) -> pd.DataFrame:
    return pd.DataFrame([asdict(c) for c in res.cells], columns=CELL_COLUMNS)

def save_cells_csv(run_dir: Path, res: SimulationResults) -> Path:
    """Cell geometry [mm] for external layout tools."""
    run_dir.mkdir(parents=True, exist_ok=True)
    out = run_dir / "cells.csv"
    cells_frame(res).to_csv(out, index=False)
    return out
