from __future__ import annotations

from typing import Sequence

from ladder_rounder.core.types import Bracket, Segment
from ladder_rounder.ladder.segment import scale


def scaled_steps(decade: Sequence[float], base: float, segment: Segment) -> list[float]:
    """Decade scaled into `segment`, followed by the first step of the next segment."""
    steps = [step * segment.multiplier for step in decade]
    steps.append(decade[0] * scale(base, segment.index + 1))
    return steps


def find_bracket(amount: float, decade: Sequence[float], base: float, segment: Segment) -> Bracket:
    """
    Adjacent steps around `amount` inside `segment`.

    Assumes amount >= decade[0] * segment.multiplier, which `locate` guarantees.
    """
    steps = scaled_steps(decade, base, segment)
    i = 1
    # the last entry is the upper sentinel, so the scan always stops on it
    while i < len(steps) - 1 and amount > steps[i]:
        i += 1
    return Bracket(
        below=steps[i - 1],
        above=steps[i],
        index=i + segment.index * len(decade),
    )
