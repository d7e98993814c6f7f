"""
Tie-break strategies.

Each one receives an amount and the two adjacent ladder steps that form a closed
interval around it, plus the global index of the upper step, and returns one of
the two steps.
"""

from __future__ import annotations


def floor(amount: float, step_below: float, step_above: float, index: int = 0) -> float:
    """Always round towards minus infinity."""
    if amount == step_above:
        return step_above
    return step_below


def ceil(amount: float, step_below: float, step_above: float, index: int = 0) -> float:
    """Always round towards plus infinity."""
    if amount == step_below:
        return step_below
    return step_above


def half_up(amount: float, step_below: float, step_above: float, index: int = 0) -> float:
    """Nearest step; an amount exactly between the two goes to the upper one."""
    if abs(amount - step_below) < abs(amount - step_above):
        return step_below
    return step_above


def bankers_rounding(amount: float, step_below: float, step_above: float, index: int) -> float:
    """
    Nearest step; an amount exactly between the two goes to the even-indexed step.

    `index` is the position of `step_above` on the whole ladder, not within the
    decade, so the alternation carries across decade boundaries.
    """
    halfway = (step_below + step_above) / 2
    if amount < halfway:
        return step_below
    if amount > halfway:
        return step_above
    if index % 2 == 0:
        return step_below
    return step_above


FLOOR = floor
CEIL = ceil
HALF_UP = half_up
BANKERS_ROUNDING = bankers_rounding
