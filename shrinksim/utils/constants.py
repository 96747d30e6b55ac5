# shrinksim/utils/constants.py
from __future__ import annotations

__all__ = [
    "CTE_PI", "CTE_GLASS", "TEMP_CHANGE_NO_BML", "TEMP_CHANGE_WITH_BML",
    "RELAXATION_FACTOR", "ANISOTROPY_FACTOR", "VISUAL_EXAGGERATION",
    "GRID_COLS", "GRID_ROWS", "CELL_MARGIN_RATIO", "PPM",
]

# Process model (approximations tuned to ~100-500 PPM, not measured values)
CTE_PI               = 60      # polyimide CTE [ppm/K]
CTE_GLASS            = 3       # carrier glass CTE [ppm/K]
TEMP_CHANGE_NO_BML   = 7.0     # effective thermal load, bare stack
TEMP_CHANGE_WITH_BML = 3.5     # effective thermal load, BML heat sink
RELAXATION_FACTOR    = 0.5
ANISOTROPY_FACTOR    = 2.5     # applied to the ELA scan axis

# Layout
GRID_COLS         = 4
GRID_ROWS         = 10
CELL_MARGIN_RATIO = 0.05       # per side, fraction of slot size

# Display only; never touches the reported PPM
VISUAL_EXAGGERATION = 150

PPM = 1_000_000
