from __future__ import annotations

from ladder_rounder.core.config import LadderConfig
from ladder_rounder.ladder.rounder import Ladder
from ladder_rounder.strategies.registry import get_strategy


def build_ladder(cfg: LadderConfig) -> Ladder:
    return Ladder(
        decade=list(cfg.decade),
        base=float(cfg.base),
        strategy=get_strategy(cfg.strategy),
    )
