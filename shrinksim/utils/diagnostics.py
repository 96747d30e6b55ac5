"""
shrinksim/utils/diagnostics.py

Low-noise summaries of a shrinkage run. Call from workflows/CLI when debug=True.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np


def _fmt_range(x: np.ndarray, name: str) -> str:
    if x.size == 0:
        return f"{name}: (empty)"
    return f"{name}∈[{np.min(x):+.3e},{np.max(x):+.3e}]"


def log_params(params, *, prefix: str = "[diag]") -> None:
    print(
        f"{prefix} params | glass={params.width_mm:g}x{params.height_mm:g} mm | "
        f"BML={params.has_bml} | scan={params.scan_direction} | "
        f"factor={params.correction_factor:g} | exaggeration={params.exaggeration:g} (unused)"
    )


def log_results_summary(results, *, prefix: str = "[diag]") -> None:
    """One line for the PPM pair, one for the glass size, one for the cell layout."""
    print(
        f"{prefix} shrinkage | W={results.shrinkage_width_ppm} ppm "
        f"H={results.shrinkage_height_ppm} ppm | width_is_long={results.is_width_long_axis}"
    )
    print(
        f"{prefix} glass | {results.original_width_mm:g}x{results.original_height_mm:g} mm -> "
        f"{results.new_width_mm:.4f}x{results.new_height_mm:.4f} mm"
    )
    summarize_cells(results.cells, prefix=prefix)


def summarize_cells(cells: Sequence, *, prefix: str = "[diag]") -> None:
    if not cells:
        print(f"{prefix} cells: none")
        return
    dx = np.array([c.shrunken_x - c.x for c in cells], dtype=np.float64)
    dy = np.array([c.shrunken_y - c.y for c in cells], dtype=np.float64)
    finite = all(math.isfinite(v) for v in (*dx, *dy))
    print(
        f"{prefix} cells: {len(cells)} | {_fmt_range(dx, 'Δx')} | "
        f"{_fmt_range(dy, 'Δy')} mm | finite={finite}"
    )
