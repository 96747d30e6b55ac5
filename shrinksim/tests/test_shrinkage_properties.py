# -*- coding: utf-8 -*-
"""
Calculator invariants: determinism, axis exclusivity, monotonicity, BML
effect, unclamped correction and non-finite propagation.
"""
import math

import numpy as np
import pytest

from shrinksim.models.params import DEFAULT_PARAMS, LONG_AXIS, SHORT_AXIS
from shrinksim.physics.shrinkage import (
    anisotropy_multipliers,
    base_strain_ppm,
    compute,
    compute_cached,
    round_ppm,
    shrinkage_breakdown,
)
from shrinksim.utils.constants import ANISOTROPY_FACTOR


def test_deterministic():
    p = DEFAULT_PARAMS.replace(width_mm=1234.5, height_mm=987.6, correction_factor=1.37)
    assert compute(p) == compute(p)


def test_cached_result_is_shared_for_equal_params():
    a = compute_cached(DEFAULT_PARAMS.replace(correction_factor=1.1))
    b = compute_cached(DEFAULT_PARAMS.replace(correction_factor=1.1))
    assert a is b
    assert a == compute(DEFAULT_PARAMS.replace(correction_factor=1.1))


@pytest.mark.parametrize("scan", [LONG_AXIS, SHORT_AXIS])
def test_exactly_one_axis_boosted(scan):
    m_w, m_h = anisotropy_multipliers(scan)
    assert sorted([m_w, m_h]) == [1.0, ANISOTROPY_FACTOR]
    bd = shrinkage_breakdown(DEFAULT_PARAMS.replace(scan_direction=scan))
    assert (bd.multiplier_w, bd.multiplier_h) == (m_w, m_h)


def test_boost_follows_scan_direction_only():
    for has_bml in (True, False):
        for factor in (0.5, 1.0, 2.0):
            p = DEFAULT_PARAMS.replace(has_bml=has_bml, correction_factor=factor)
            assert shrinkage_breakdown(p.replace(scan_direction=LONG_AXIS)).multiplier_h == ANISOTROPY_FACTOR
            assert shrinkage_breakdown(p.replace(scan_direction=SHORT_AXIS)).multiplier_w == ANISOTROPY_FACTOR


@pytest.mark.parametrize("scan", [LONG_AXIS, SHORT_AXIS])
def test_monotone_in_correction_factor(scan):
    prev_w = prev_h = -1
    for f in np.linspace(0.0, 3.0, 61):
        res = compute(DEFAULT_PARAMS.replace(scan_direction=scan, correction_factor=float(f)))
        assert res.shrinkage_width_ppm >= prev_w
        assert res.shrinkage_height_ppm >= prev_h
        prev_w, prev_h = res.shrinkage_width_ppm, res.shrinkage_height_ppm


def test_bml_lowers_shrinkage():
    assert base_strain_ppm(True) < base_strain_ppm(False)
    for scan in (LONG_AXIS, SHORT_AXIS):
        for f in (0.5, 1.0, 1.7):
            p = DEFAULT_PARAMS.replace(scan_direction=scan, correction_factor=f)
            on = compute(p.replace(has_bml=True))
            off = compute(p.replace(has_bml=False))
            assert on.shrinkage_width_ppm <= off.shrinkage_width_ppm
            assert on.shrinkage_height_ppm <= off.shrinkage_height_ppm


def test_ppm_values_are_ints():
    res = compute(DEFAULT_PARAMS.replace(correction_factor=1.33))
    assert isinstance(res.shrinkage_width_ppm, int)
    assert isinstance(res.shrinkage_height_ppm, int)
    assert res.shrinkage_width_ppm >= 0 and res.shrinkage_height_ppm >= 0


def test_correction_factor_is_not_clamped():
    res = compute(DEFAULT_PARAMS.replace(correction_factor=4.0))
    assert res.shrinkage_width_ppm == 399       # 99.75 * 4
    assert res.shrinkage_height_ppm == 998      # 99.75 * 4 * 2.5 = 997.5


def test_round_half_away_from_zero():
    assert round_ppm(0.5) == 1
    assert round_ppm(2.5) == 3
    assert round_ppm(99.75) == 100
    assert round_ppm(249.375) == 249
    assert round_ppm(-2.5) == -3
    assert round_ppm(0.0) == 0


def test_exaggeration_field_is_not_read():
    assert compute(DEFAULT_PARAMS.replace(exaggeration=1)) == compute(DEFAULT_PARAMS)


def test_non_finite_input_propagates_without_raising():
    res = compute(DEFAULT_PARAMS.replace(correction_factor=float("nan")))
    assert math.isnan(res.shrinkage_width_ppm)
    assert math.isnan(res.new_width_mm)
    assert math.isnan(res.cells[0].shrunken_x)

    res = compute(DEFAULT_PARAMS.replace(width_mm=float("inf")))
    assert len(res.cells) == 40
    assert res.shrinkage_width_ppm == 100


def test_degenerate_glass_does_not_raise():
    for w, h in [(0.0, 0.0), (-100.0, 200.0), (0.0, 1850.0)]:
        res = compute(DEFAULT_PARAMS.replace(width_mm=w, height_mm=h))
        assert len(res.cells) == 40


def test_round_just_below_half_stays_down():
    # floor(x + 0.5) would round these up through float addition
    assert round_ppm(0.49999999999999994) == 0
    assert round_ppm(-0.49999999999999994) == 0
    assert round_ppm(1.4999999999999998) == 1
    assert round_ppm(497.5) == 498
