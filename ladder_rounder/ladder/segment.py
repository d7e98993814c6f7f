from __future__ import annotations

from typing import Iterator, Sequence

from ladder_rounder.core.types import Segment


def scale(base: float, index: int) -> float:
    """Multiplier of segment `index`. Derived from the index alone, so every caller gets the same value."""
    return base ** index


def locate(amount: float, decade: Sequence[float], base: float) -> Segment:
    """
    Find the segment holding `amount` (> 0).

    The result satisfies decade[0] * m <= amount < decade[0] * m_next, where m and
    m_next are the multipliers of this segment and the next. Walks one segment at a
    time from the unscaled decade, so the cost grows with the distance in orders of
    magnitude.
    """
    first = decade[0]
    index = 0
    while amount < first * scale(base, index):
        index -= 1
    while amount >= first * scale(base, index + 1):
        index += 1
    return Segment(multiplier=scale(base, index), index=index)


def next_segment(segment: Segment, base: float) -> Segment:
    return Segment(multiplier=scale(base, segment.index + 1), index=segment.index + 1)


def walk_up(start: Segment, base: float) -> Iterator[Segment]:
    segment = start
    while True:
        yield segment
        segment = next_segment(segment, base)
