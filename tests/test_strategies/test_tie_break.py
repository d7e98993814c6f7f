from __future__ import annotations

from ladder_rounder import BANKERS_ROUNDING, CEIL, FLOOR, HALF_UP


def test_floor_keeps_lower_step_unless_on_upper():
    assert FLOOR(15, 10, 20, 1) == 10
    assert FLOOR(19.99, 10, 20, 1) == 10
    assert FLOOR(20, 10, 20, 1) == 20


def test_ceil_keeps_upper_step_unless_on_lower():
    assert CEIL(10, 10, 20, 1) == 10
    assert CEIL(10.01, 10, 20, 1) == 20


def test_half_up_nearest_with_ties_up():
    assert HALF_UP(14, 10, 20, 1) == 10
    assert HALF_UP(16, 10, 20, 1) == 20
    assert HALF_UP(15, 10, 20, 2) == 20


def test_bankers_nearest_off_ties():
    assert BANKERS_ROUNDING(14, 10, 20, 1) == 10
    assert BANKERS_ROUNDING(16, 10, 20, 2) == 20


def test_bankers_ties_use_index_parity():
    assert BANKERS_ROUNDING(15, 10, 20, 2) == 10
    assert BANKERS_ROUNDING(15, 10, 20, 3) == 20
    assert BANKERS_ROUNDING(15, 10, 20, 0) == 10
    assert BANKERS_ROUNDING(15, 10, 20, -3) == 20
    assert BANKERS_ROUNDING(15, 10, 20, -4) == 10
