# shrinksim/io/config.py
# -*- coding: utf-8 -*-
"""
YAML → SimulationParams helpers.

Schema (minimal, example):

glass:
  width_mm: 1500
  height_mm: 1850
process:
  has_bml: true
  scan_direction: long_axis     # long_axis | short_axis
  correction_factor: 1.0
display:
  exaggeration: 100             # reserved, not used by the calculator

Missing keys fall back to DEFAULT_PARAMS. Validation lives here, at the
boundary; the calculator accepts anything numeric.
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

import yaml

from shrinksim.models.params import DEFAULT_PARAMS, SCAN_DIRECTIONS, SimulationParams

@dataclass
class RunConfig:
    raw: dict
    path: Path

def load_config(path: Path) -> RunConfig:
    data = yaml.safe_load(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError("Top-level YAML must be a mapping")
    _validate_minimum(data)
    return RunConfig(raw=data, path=Path(path))

def build_params(cfg: RunConfig) -> SimulationParams:
    d = DEFAULT_PARAMS
    g = cfg.raw.get("glass") or {}
    p = cfg.raw.get("process") or {}
    disp = cfg.raw.get("display") or {}

    has_bml = p.get("has_bml", d.has_bml)
    if not isinstance(has_bml, bool):
        raise ValueError(f"process.has_bml must be true or false, got {has_bml!r}")

    scan = str(p.get("scan_direction", d.scan_direction)).lower()
    if scan not in SCAN_DIRECTIONS:
        raise ValueError(f"process.scan_direction must be one of {SCAN_DIRECTIONS}, got {scan!r}")

    return SimulationParams(
        width_mm=float(g.get("width_mm", d.width_mm)),
        height_mm=float(g.get("height_mm", d.height_mm)),
        has_bml=has_bml,
        scan_direction=scan,
        exaggeration=float(disp.get("exaggeration", d.exaggeration)),
        correction_factor=float(p.get("correction_factor", d.correction_factor)),
    )

def params_to_raw(params: SimulationParams) -> dict:
    """Inverse of build_params."""
    return {
        "glass": {"width_mm": params.width_mm, "height_mm": params.height_mm},
        "process": {
            "has_bml": params.has_bml,
            "scan_direction": params.scan_direction,
            "correction_factor": params.correction_factor,
        },
        "display": {"exaggeration": params.exaggeration},
    }

def save_config(run_dir: Path, params: SimulationParams) -> Path:
    """Write the parameters of a run as config.yaml, loadable by load_config."""
    run_dir.mkdir(parents=True, exist_ok=True)
    out = run_dir / "config.yaml"
    out.write_text(yaml.safe_dump(params_to_raw(params), sort_keys=False))
    return out

def apply_overrides(cfg: RunConfig, overrides: Sequence[str]) -> RunConfig:
    """
    Apply dotted ``section.key=value`` overrides in place; values are parsed
    as YAML scalars (``true``, ``1.5``, ``short_axis``).
    """
    for item in overrides:
        key, sep, value = item.partition("=")
        parts = [k for k in key.strip().split(".") if k]
        if not sep or not parts:
            raise ValueError(f"Bad override {item!r}; expected section.key=value")
        node: Any = cfg.raw
        for k in parts[:-1]:
            node = node.setdefault(k, {})
            if not isinstance(node, dict):
                raise ValueError(f"Override {item!r} descends into a non-mapping at {k!r}")
        node[parts[-1]] = yaml.safe_load(value)
    return cfg

def _validate_minimum(cfg: dict) -> None:
    for key in ("glass",):
        if key not in cfg:
            raise ValueError(f"Missing top-level key: {key}")
