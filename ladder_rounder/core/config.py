from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    level: str = "INFO"


class LadderConfig(BaseModel):
    decade: list[float]
    base: float = 10.0
    strategy: str = "bankers_rounding"  # floor | ceil | half_up | bankers_rounding


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    ladder: LadderConfig | None = None
    # named overlays merged on top of `ladder`
    presets: dict[str, dict[str, Any]] = Field(default_factory=dict)

    def resolve_ladder(self, preset: str | None = None) -> LadderConfig:
        base = self.ladder.model_dump() if self.ladder is not None else {}
        if preset is None:
            if not base:
                raise KeyError("no ladder configured")
            return LadderConfig.model_validate(base)
        if preset not in self.presets:
            raise KeyError(f"unknown preset: {preset}")
        return LadderConfig.model_validate(_deep_merge(base, self.presets[preset] or {}))


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def load_config(path: str) -> AppConfig:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)
    data = yaml.safe_load(p.read_text()) or {}
    return AppConfig.model_validate(data)
