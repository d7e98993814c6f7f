from ladder_rounder.core.errors import (
    DecadeOrderError,
    EmptyDecadeError,
    LadderConfigError,
    LadderInvariantError,
)
from ladder_rounder.core.types import Bracket, Segment, TieBreakStrategy
from ladder_rounder.ladder.rounder import Ladder
from ladder_rounder.strategies.tie_break import BANKERS_ROUNDING, CEIL, FLOOR, HALF_UP

__all__ = [
    "Ladder",
    "FLOOR",
    "CEIL",
    "HALF_UP",
    "BANKERS_ROUNDING",
    "TieBreakStrategy",
    "Segment",
    "Bracket",
    "LadderConfigError",
    "EmptyDecadeError",
    "LadderInvariantError",
    "DecadeOrderError",
]
