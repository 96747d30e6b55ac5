# shrinksim/postprocess/visualization.py
"""
Before/after layout plot of the mother glass.
"""

from __future__ import annotations

from typing import Tuple

import matplotlib.pyplot as plt
from matplotlib import patches
from matplotlib.lines import Line2D

from ..models.params import LONG_AXIS
from ..models.results import SimulationResults
from .metrics import axis_summary

__all__ = ["plot_shrinkage_layout"]

_GLASS = dict(edgecolor="#90CAF9", facecolor="#F0F9FF")
_ORIGINAL = dict(edgecolor="#BDBDBD", facecolor="none", linestyle="--")
_SHRUNKEN = dict(edgecolor="#1565C0", facecolor=(33 / 255, 150 / 255, 243 / 255, 0.4))
_SCAN = "#D32F2F"


def plot_shrinkage_layout(
    res: SimulationResults,
    *,
    ax: plt.Axes | None = None,
    title: str | None = "Substrate Shrinkage (ELA)",
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Draw glass outline, original cells (dashed), shrunken cells (filled) and
    the ELA scan arrow. Glass coordinates in mm, y axis pointing down.

    Parameters
    ----------
    res : SimulationResults
        Output of ``compute``.
    ax : matplotlib Axes, optional
        If provided, plot into this axes; otherwise create a new figure.
    title : str, optional
        Title for the plot; the axis PPM summary is appended below it.

    Returns
    -------
    fig, ax : matplotlib Figure and Axes
    """
    W, H = res.original_width_mm, res.original_height_mm
    max_dim = max(W, H)
    pad = 0.15 * max_dim
    lw = 0.8

    if ax is None:
        fig, ax = plt.subplots(figsize=(6.0, 7.0), constrained_layout=True)
    else:
        fig = ax.figure

    ax.add_patch(patches.Rectangle((0.0, 0.0), W, H, linewidth=lw, **_GLASS))
    for c in res.cells:
        ax.add_patch(patches.Rectangle((c.x, c.y), c.width, c.height, linewidth=lw, **_ORIGINAL))
        ax.add_patch(patches.Rectangle(
            (c.shrunken_x, c.shrunken_y), c.shrunken_width, c.shrunken_height,
            linewidth=lw, **_SHRUNKEN,
        ))

    # scan indicator sits in the padding, outside the glass
    arrow_len = 0.2 * max_dim
    if res.scan_direction == LONG_AXIS:
        x0, y0 = -pad / 2, H
        ax.annotate("", xy=(x0, y0 - arrow_len), xytext=(x0, y0),
                    arrowprops=dict(arrowstyle="-|>", color=_SCAN, linewidth=2.0))
        ax.text(x0, y0 + pad / 6, "ELA SCAN", color=_SCAN, ha="center", va="top",
                fontweight="bold", fontsize=8)
    else:
        x0, y0 = 0.0, -pad / 2
        ax.annotate("", xy=(x0 + arrow_len, y0), xytext=(x0, y0),
                    arrowprops=dict(arrowstyle="-|>", color=_SCAN, linewidth=2.0))
        ax.text(x0 + arrow_len / 2, y0 - pad / 8, "ELA SCAN", color=_SCAN, ha="center",
                va="bottom", fontweight="bold", fontsize=8)

    ax.text(W / 2, -pad / 5, f"Width: {W:g}mm", ha="center", va="bottom", fontsize=8)
    ax.text(-pad / 5, H / 2, f"Height: {H:g}mm", ha="right", va="center",
            rotation=90, fontsize=8)

    ax.set_xlim(-pad, W + pad)
    ax.set_ylim(H + pad, -pad)
    ax.set_aspect("equal")
    ax.set_axis_off()

    s = axis_summary(res)
    subtitle = (f"cell long axis {s.long_axis_ppm} PPM · "
                f"short axis {s.short_axis_ppm} PPM")
    ax.set_title(f"{title}\n{subtitle}" if title else subtitle, fontsize=10)

    handles = [
        patches.Patch(label="Original Position", **_ORIGINAL),
        patches.Patch(label="Shrunken Position", **_SHRUNKEN),
        Line2D([], [], color=_SCAN, label="ELA Scan Direction"),
    ]
    ax.legend(handles=handles, loc="lower right", fontsize=7, frameon=True)
    return fig, ax
