# -*- coding: utf-8 -*-
"""
Parameter sweep / DOE.

Vary one SimulationParams field over a list of values, everything else held
at the base set, and tabulate the shrinkage.
"""
from __future__ import annotations
from dataclasses import fields
from typing import Any, Iterable

import pandas as pd

from shrinksim.models.params import SimulationParams
from shrinksim.physics.shrinkage import compute_cached
from shrinksim.postprocess.metrics import axis_summary
from shrinksim.utils import logger as log

SWEEP_COLUMNS = [
    "value", "shrinkage_width_ppm", "shrinkage_height_ppm",
    "cell_long_axis_ppm", "cell_short_axis_ppm", "new_width_mm", "new_height_mm",
]

def sweepable_fields() -> list[str]:
    return [f.name for f in fields(SimulationParams)]

def run_sweep(base: SimulationParams, field: str, values: Iterable[Any]) -> pd.DataFrame:
    if field not in sweepable_fields():
        raise ValueError(f"Unknown sweep field {field!r}; choose from {sweepable_fields()}")

    rows = []
    for v in values:
        res = compute_cached(base.replace(**{field: v}))
        ax = axis_summary(res)
        rows.append((v, res.shrinkage_width_ppm, res.shrinkage_height_ppm,
                     ax.long_axis_ppm, ax.short_axis_ppm, res.new_width_mm, res.new_height_mm))
    log.info(f"[sweep] {field}: {len(rows)} variants")
    df = pd.DataFrame(rows, columns=SWEEP_COLUMNS)
    return df.rename(columns={"value": field})
