from __future__ import annotations

from dataclasses import dataclass

from ladder_rounder.core.types import TieBreakStrategy
from ladder_rounder.strategies.tie_break import bankers_rounding, ceil, floor, half_up

_STRATEGIES: dict[str, TieBreakStrategy] = {
    "floor": floor,
    "ceil": ceil,
    "half_up": half_up,
    "bankers_rounding": bankers_rounding,
}


@dataclass(frozen=True)
class StrategySpec:
    name: str
    label: str


class StrategyRegistry:
    def list_available(self) -> list[StrategySpec]:
        return [
            StrategySpec("floor", "Floor (towards minus infinity)"),
            StrategySpec("ceil", "Ceil (towards plus infinity)"),
            StrategySpec("half_up", "Nearest, ties up"),
            StrategySpec("bankers_rounding", "Nearest, ties to even step"),
        ]


def get_strategy(name: str) -> TieBreakStrategy:
    key = str(name).strip().lower()
    if key not in _STRATEGIES:
        raise ValueError(f"Unknown strategy: {name}")
    return _STRATEGIES[key]
