from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

# (amount, step_below, step_above, index of step_above) -> step_below | step_above
TieBreakStrategy = Callable[[float, float, float, int], float]


@dataclass(frozen=True)
class Segment:
    """One scaled copy of the decade: every step multiplied by base ** index."""

    multiplier: float
    index: int


@dataclass(frozen=True)
class Bracket:
    below: float
    above: float
    # global position of `above` on the infinite ladder
    index: int
