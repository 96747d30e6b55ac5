# -*- coding: utf-8 -*-
"""
Single-run workflow wiring params → calculator → metrics/CSV/plot.

Each run directory gets config.yaml (the exact inputs), metrics.json,
cells.csv and, optionally, layout.png.
"""
from __future__ import annotations
from pathlib import Path
from typing import Any, Mapping, Sequence

import matplotlib.pyplot as plt

from shrinksim.io.config import apply_overrides, build_params, load_config, save_config
from shrinksim.io.results import save_cells_csv, write_metrics
from shrinksim.models.params import SimulationParams
from shrinksim.models.results import SimulationResults
from shrinksim.physics.shrinkage import compute
from shrinksim.postprocess.metrics import summary_metrics
from shrinksim.postprocess.visualization import plot_shrinkage_layout
from shrinksim.utils import diagnostics as diag
from shrinksim.utils import logger as log

def run_params(
    params: SimulationParams,
    out_dir: Path,
    *,
    png: bool = True,
    debug: bool = False,
) -> SimulationResults:
    if debug:
        diag.log_params(params)
    res = compute(params)
    if debug:
        diag.log_results_summary(res)

    save_config(out_dir, params)
    write_metrics(out_dir, summary_metrics(res))
    save_cells_csv(out_dir, res)
    if png:
        fig, _ = plot_shrinkage_layout(res)
        fig.savefig(out_dir / "layout.png", dpi=180)
        plt.close(fig)
    log.info(f"[run] saved results at {out_dir}")
    return res

def default_run_dir(cfg_path: Path) -> Path:
    return Path("runs") / Path(cfg_path).stem

def run_from_config(
    cfg_path: Path,
    out_dir: Path | None = None,
    *,
    overrides: Sequence[str] = (),
    changes: Mapping[str, Any] | None = None,
    png: bool = True,
    debug: bool = False,
) -> SimulationResults:
    """
    Load a YAML config, apply ``section.key=value`` overrides, then field
    ``changes`` (these win), and run. Output defaults to runs/<config stem>/.
    """
    cfg_path = Path(cfg_path)
    params = build_params(apply_overrides(load_config(cfg_path), overrides))
    if changes:
        params = params.replace(**changes)
    out_dir = Path(out_dir) if out_dir is not None else default_run_dir(cfg_path)
    return run_params(params, out_dir, png=png, debug=debug)
