from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

from ladder_rounder.core.errors import (
    DecadeOrderError,
    EmptyDecadeError,
    LadderConfigError,
    LadderInvariantError,
)
from ladder_rounder.core.types import Bracket, Segment, TieBreakStrategy
from ladder_rounder.ladder.bracket import find_bracket, scaled_steps
from ladder_rounder.ladder.segment import locate, walk_up
from ladder_rounder.monitoring.logger import get_logger
from ladder_rounder.strategies.tie_break import BANKERS_ROUNDING, CEIL, FLOOR

logger = get_logger(__name__)


def _validate(decade: tuple[float, ...], base: float) -> None:
    if not decade:
        raise EmptyDecadeError()
    if not math.isfinite(base):
        raise LadderConfigError(f"Base must be a finite number, got {base!r}")
    prev = None
    for pos, step in enumerate(decade):
        if not math.isfinite(step):
            raise DecadeOrderError(pos, f"must be finite, got {step!r}")
        if step <= 0:
            raise DecadeOrderError(pos, f"must be positive, got {step!r}")
        if prev is not None and step <= prev:
            raise DecadeOrderError(pos, f"must be larger than the previous step ({step!r} <= {prev!r})")
        prev = step
    # Tiling would otherwise produce a step that is not larger than the one before it.
    if not decade[-1] < decade[0] * base:
        raise LadderInvariantError()


@dataclass(frozen=True)
class Ladder:
    """
    Rounds non-negative numbers to the nearest step on a logarithmic ladder.

    decade: the steps of one segment, in ascending order.
    base: ratio between consecutive segments; segment k is the decade times base ** k.
    strategy: picks one of the two steps around an amount for `round`.
    """

    decade: Sequence[float]
    base: float = 10
    strategy: TieBreakStrategy = field(default=BANKERS_ROUNDING, repr=False)

    def __post_init__(self) -> None:
        decade = tuple(self.decade)
        _validate(decade, self.base)
        object.__setattr__(self, "decade", decade)
        logger.debug(
            "ladder ready steps=%d base=%s strategy=%s",
            len(decade),
            self.base,
            getattr(self.strategy, "__name__", self.strategy),
        )

    def round(self, amount: float) -> float:
        """Nearest step, ties broken by the configured strategy."""
        return self._search(amount, self.strategy)

    def floor(self, amount: float) -> float:
        """Largest step smaller than or equal to `amount`."""
        return self._search(amount, FLOOR)

    def ceil(self, amount: float) -> float:
        """Smallest step larger than or equal to `amount`."""
        return self._search(amount, CEIL)

    def locate(self, amount: float) -> Segment:
        _check_amount(amount)
        return locate(amount, self.decade, self.base)

    def bracket(self, amount: float) -> Bracket:
        segment = self.locate(amount)
        return find_bracket(amount, self.decade, self.base, segment)

    def steps_between(self, low: float, high: float) -> list[float]:
        """All ladder steps in [low, high], ascending."""
        _check_amount(low)
        _check_amount(high)
        if high < low:
            raise ValueError(f"high ({high!r}) must not be smaller than low ({low!r})")
        out: list[float] = []
        for segment in walk_up(locate(low, self.decade, self.base), self.base):
            if self.decade[0] * segment.multiplier > high:
                break
            out.extend(s for s in scaled_steps(self.decade, self.base, segment)[:-1] if low <= s <= high)
        return out

    def _search(self, amount: float, strategy: TieBreakStrategy) -> float:
        if amount == 0:
            return 0
        b = self.bracket(amount)
        return strategy(amount, b.below, b.above, b.index)


def _check_amount(amount: float) -> None:
    if not math.isfinite(amount) or amount <= 0:
        raise ValueError(f"amount must be a finite positive number, got {amount!r}")
