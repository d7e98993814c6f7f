from __future__ import annotations

import pytest

from ladder_rounder import BANKERS_ROUNDING, CEIL, FLOOR, HALF_UP, Ladder

CASH_DECADE = [10, 11, 13, 15, 17, 20, 25, 30, 35, 40, 45, 50, 60, 70, 80, 90]

LADDERS = [
    Ladder(CASH_DECADE),
    Ladder([10, 20, 40, 60], 10, HALF_UP),
    Ladder([1, 2, 5], 10),
    Ladder([3, 4], 2, FLOOR),
    Ladder([100], 3, CEIL),
]


@pytest.mark.parametrize("ladder", LADDERS, ids=repr)
def test_every_step_is_a_fixed_point(ladder: Ladder):
    for step in ladder.steps_between(100, 100_000):
        assert ladder.round(step) == step
        assert ladder.floor(step) == step
        assert ladder.ceil(step) == step


@pytest.mark.parametrize("ladder", LADDERS, ids=repr)
def test_steps_below_unscaled_decade_are_fixed_points(ladder: Ladder):
    steps = ladder.steps_between(0.01, 1)
    assert steps
    for step in steps:
        assert ladder.round(step) == step
        assert ladder.floor(step) == step
        assert ladder.ceil(step) == step


@pytest.mark.parametrize("ladder", LADDERS, ids=repr)
def test_floor_and_ceil_enclose_amount(ladder: Ladder):
    for i in range(1, 3000):
        amount = i * 0.37
        lo = ladder.floor(amount)
        hi = ladder.ceil(amount)
        assert lo <= amount <= hi
        assert ladder.round(amount) in (lo, hi)


@pytest.mark.parametrize("ladder", LADDERS, ids=repr)
def test_floor_and_ceil_land_on_steps(ladder: Ladder):
    steps = set(ladder.steps_between(ladder.floor(100), 1_000_000))
    for amount in range(100, 20_000, 7):
        assert ladder.floor(amount) in steps
        assert ladder.ceil(amount) in steps


@pytest.mark.parametrize("ladder", LADDERS, ids=repr)
def test_floor_and_ceil_land_on_small_steps(ladder: Ladder):
    steps = set(ladder.steps_between(ladder.floor(0.01), 10))
    for i in range(700):
        amount = 0.01 + i * 0.0013
        assert ladder.floor(amount) in steps
        assert ladder.ceil(amount) in steps


def test_odd_decade_matches_even_decade_with_squared_base():
    odd = Ladder([10, 30, 60], 10, BANKERS_ROUNDING)
    even = Ladder([10, 30, 60, 100, 300, 600], 100, BANKERS_ROUNDING)
    for amount in [5, 20, 45, 80, 200, 450, 800]:
        assert odd.round(amount) == even.round(amount)
    for amount in range(1, 2001):
        assert odd.round(amount) == even.round(amount), amount
