# -*- coding: utf-8 -*-
"""
YAML config → params, overrides, metrics/cells writers.
"""
import json

import pandas as pd
import pytest
import yaml

from shrinksim.io.config import (
    apply_overrides, build_params, load_config, params_to_raw, save_config,
)
from shrinksim.io.results import CELL_COLUMNS, cells_frame, save_cells_csv, write_metrics
from shrinksim.models.params import DEFAULT_PARAMS, SHORT_AXIS
from shrinksim.physics.shrinkage import compute
from shrinksim.postprocess.metrics import summary_metrics


def _write(tmp_path, data):
    path = tmp_path / "case.yaml"
    path.write_text(yaml.safe_dump(data))
    return path


def test_full_config(tmp_path):
    path = _write(tmp_path, {
        "glass": {"width_mm": 1300, "height_mm": 1500},
        "process": {"has_bml": False, "scan_direction": "short_axis", "correction_factor": 1.2},
        "display": {"exaggeration": 50},
    })
    p = build_params(load_config(path))
    assert (p.width_mm, p.height_mm) == (1300.0, 1500.0)
    assert p.has_bml is False
    assert p.scan_direction == SHORT_AXIS
    assert p.correction_factor == 1.2
    assert p.exaggeration == 50.0


def test_missing_keys_fall_back_to_defaults(tmp_path):
    p = build_params(load_config(_write(tmp_path, {"glass": {}})))
    assert p == DEFAULT_PARAMS


def test_params_round_trip_through_raw(tmp_path):
    p = DEFAULT_PARAMS.replace(has_bml=False, correction_factor=0.7)
    assert build_params(load_config(_write(tmp_path, params_to_raw(p)))) == p


@pytest.mark.parametrize("data", [[1, 2], {"process": {}}])
def test_bad_top_level(tmp_path, data):
    with pytest.raises(ValueError):
        load_config(_write(tmp_path, data))


def test_unknown_scan_direction(tmp_path):
    cfg = load_config(_write(tmp_path, {"glass": {}, "process": {"scan_direction": "diagonal"}}))
    with pytest.raises(ValueError):
        build_params(cfg)


def test_overrides(tmp_path):
    cfg = load_config(_write(tmp_path, {"glass": {"width_mm": 1500}}))
    apply_overrides(cfg, ["process.correction_factor=1.5", "process.has_bml=false",
                          "glass.width_mm=1200"])
    p = build_params(cfg)
    assert p.correction_factor == 1.5
    assert p.has_bml is False
    assert p.width_mm == 1200.0


@pytest.mark.parametrize("bad", ["process.correction_factor", "=1.0", "glass.width_mm.x=1"])
def test_bad_override(tmp_path, bad):
    cfg = load_config(_write(tmp_path, {"glass": {"width_mm": 1500}}))
    with pytest.raises(ValueError):
        apply_overrides(cfg, [bad])


def test_write_metrics(tmp_path):
    res = compute(DEFAULT_PARAMS)
    out = write_metrics(tmp_path / "run", summary_metrics(res))
    data = json.loads(out.read_text())
    assert data["cell_long_axis_ppm"] == 100
    assert data["cell_short_axis_ppm"] == 249
    assert data["grid_layout"] == "4 x 10"
    assert data["n_cells"] == 40


def test_cells_csv(tmp_path):
    res = compute(DEFAULT_PARAMS)
    assert list(cells_frame(res).columns) == CELL_COLUMNS
    df = pd.read_csv(save_cells_csv(tmp_path, res))
    assert len(df) == 40
    assert df["id"].tolist() == list(range(40))
    assert df.loc[0, "x"] == pytest.approx(18.75)


@pytest.mark.parametrize("value", ["false", "yes", 0, 1])
def test_has_bml_must_be_a_yaml_bool(tmp_path, value):
    cfg = load_config(_write(tmp_path, {"glass": {}, "process": {"has_bml": value}}))
    with pytest.raises(ValueError):
        build_params(cfg)


def test_has_bml_unquoted_override_is_bool(tmp_path):
    cfg = load_config(_write(tmp_path, {"glass": {}}))
    apply_overrides(cfg, ["process.has_bml=false"])
    assert build_params(cfg).has_bml is False


def test_save_config_reloads_to_same_params(tmp_path):
    p = DEFAULT_PARAMS.replace(scan_direction=SHORT_AXIS, correction_factor=1.3)
    out = save_config(tmp_path / "run", p)
    assert out.name == "config.yaml"
    assert build_params(load_config(out)) == p
