# shrinksim/main.py
"""
ShrinkSim main entrypoint.

Default subcommand: run
Usage examples:
    python -m shrinksim
    python -m shrinksim run --help
    python -m shrinksim run --no-bml --scan short_axis --factor 1.3
    python -m shrinksim run --config configs/6g.yaml            # -> runs/6g/
    python -m shrinksim sweep --field correction_factor --start 0.5 --stop 2.0 --num 16
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence
import argparse
import sys

import numpy as np

from .models.params import (
    CORRECTION_FACTOR_RANGE, DEFAULT_PARAMS, SCAN_DIRECTIONS, SimulationParams,
)
from .postprocess.metrics import axis_summary
from .utils import logger as log
from .workflows.run import default_run_dir, run_from_config, run_params
from .workflows.sweep import run_sweep

__all__ = ["main"]


# ------------------------------ run subcommand ------------------------------


@dataclass(slots=True)
class _RunArgs:
    params: SimulationParams
    config: Optional[Path]
    overrides: list[str]
    changes: dict
    out_dir: Optional[Path]
    png: bool
    debug: bool


def _add_run_subparser(
    subparsers: argparse._SubParsersAction,
) -> argparse.ArgumentParser:
    p = subparsers.add_parser("run", help="Single shrinkage run (metrics, cells CSV, layout PNG)")
    p.add_argument("--config", type=Path, default=None, help="YAML run config")
    p.add_argument(
        "--set", dest="overrides", action="append", default=[],
        metavar="SECTION.KEY=VALUE", help="Config override (repeatable, needs --config)",
    )
    p.add_argument("--width", type=float, default=None, help="Glass width [mm]")
    p.add_argument("--height", type=float, default=None, help="Glass height [mm]")
    p.add_argument(
        "--bml", dest="bml", action=argparse.BooleanOptionalAction, default=None,
        help="Block metal layer under the panel",
    )
    p.add_argument("--scan", choices=list(SCAN_DIRECTIONS), default=None, help="ELA scan axis")
    p.add_argument("--factor", type=float, default=None, help="Process correction factor")
    p.add_argument(
        "--out", type=Path, default=None,
        help="Output directory (default: runs/<config stem>, or runs/default without --config)",
    )
    p.add_argument("--no-png", action="store_true", help="Skip the layout figure")
    p.add_argument("--debug", action="store_true", help="Print [diag] summaries")
    p.set_defaults(cmd="run")
    return p


def _run_args_from_ns(ns: argparse.Namespace, parser: argparse.ArgumentParser) -> _RunArgs:
    if ns.overrides and ns.config is None:
        log.error("--set given without --config")
        parser.error("--set requires --config")

    # explicit flags win over the config file
    changes = {
        k: v for k, v in {
            "width_mm": ns.width,
            "height_mm": ns.height,
            "has_bml": ns.bml,
            "scan_direction": ns.scan,
            "correction_factor": ns.factor,
        }.items() if v is not None
    }
    lo, hi, _ = CORRECTION_FACTOR_RANGE
    if ns.factor is not None and not lo <= ns.factor <= hi:
        log.warn(f"correction factor {ns.factor:g} outside the usual {lo:g}..{hi:g} range")

    return _RunArgs(
        params=DEFAULT_PARAMS.replace(**changes),
        config=ns.config,
        overrides=list(ns.overrides),
        changes=changes,
        out_dir=ns.out,
        png=not ns.no_png,
        debug=bool(ns.debug),
    )


def _run(args: _RunArgs, parser: argparse.ArgumentParser) -> None:
    if args.config is not None:
        out_dir = args.out_dir if args.out_dir is not None else default_run_dir(args.config)
        try:
            res = run_from_config(
                args.config, out_dir, overrides=args.overrides, changes=args.changes,
                png=args.png, debug=args.debug,
            )
        except (OSError, ValueError) as exc:
            log.error(f"config {args.config}: {exc}")
            parser.error(str(exc))
    else:
        out_dir = args.out_dir if args.out_dir is not None else Path("runs") / "default"
        res = run_params(args.params, out_dir, png=args.png, debug=args.debug)

    s = axis_summary(res)
    for name in ("config.yaml", "metrics.json", "cells.csv") + (("layout.png",) if args.png else ()):
        print(f"[ok] wrote {out_dir / name}")
    print(
        f"cell long axis: {s.long_axis_ppm} PPM ({s.long_axis_label}) | "
        f"cell short axis: {s.short_axis_ppm} PPM ({s.short_axis_label})"
    )


# ------------------------------ sweep subcommand ----------------------------


def _add_sweep_subparser(
    subparsers: argparse._SubParsersAction,
) -> argparse.ArgumentParser:
    p = subparsers.add_parser("sweep", help="Sweep one numeric parameter")
    p.add_argument(
        "--field", choices=["correction_factor", "width_mm", "height_mm"],
        default="correction_factor", help="Parameter to vary",
    )
    p.add_argument("--start", type=float, default=0.5)
    p.add_argument("--stop", type=float, default=2.0)
    p.add_argument("--num", type=int, default=16, help="Number of points (>=1)")
    p.add_argument("--no-bml", action="store_true", help="Base case without BML")
    p.add_argument("--scan", choices=list(SCAN_DIRECTIONS), default=DEFAULT_PARAMS.scan_direction)
    p.add_argument("--csv", default="shrinkage_sweep.csv", help="CSV output path")
    p.set_defaults(cmd="sweep")
    return p


def _sweep(ns: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    if ns.num < 1:
        parser.error("--num must be >= 1")
    base = DEFAULT_PARAMS.replace(has_bml=not ns.no_bml, scan_direction=ns.scan)
    values = np.linspace(ns.start, ns.stop, ns.num).tolist()
    df = run_sweep(base, ns.field, values)
    df.to_csv(ns.csv, index=False)
    print(f"[ok] wrote {ns.csv}  ({len(df)} rows)")


# --------------------------------- main() ------------------------------------


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="ShrinkSim — ELA substrate shrinkage")
    sub = parser.add_subparsers(dest="cmd")

    run_parser = _add_run_subparser(sub)
    sweep_parser = _add_sweep_subparser(sub)

    argv = list(sys.argv[1:] if argv is None else argv)

    # If no subcommand given, default to 'run' with defaults
    if not argv:
        log.info("no subcommand; running defaults")
        _run(_run_args_from_ns(run_parser.parse_args([]), run_parser), run_parser)
        return

    ns = parser.parse_args(argv)
    if ns.cmd == "run":
        _run(_run_args_from_ns(ns, run_parser), run_parser)
        return
    if ns.cmd == "sweep":
        _sweep(ns, sweep_parser)
        return

    parser.error("Unknown command (try: run, sweep)")


if __name__ == "__main__":
    main()
