from __future__ import annotations

import argparse
import sys
from typing import Any

from ladder_rounder.core.config import AppConfig, LadderConfig, load_config
from ladder_rounder.ladder.factory import build_ladder
from ladder_rounder.monitoring.logger import get_logger, setup_logging
from ladder_rounder.strategies.registry import StrategyRegistry

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ladder-round")
    p.add_argument("op", choices=["round", "floor", "ceil"])
    p.add_argument("amounts", nargs="+", help="Non-negative amounts")
    p.add_argument("--config", help="Path to YAML config (e.g., configs/default.yaml)")
    p.add_argument("--preset", help="Named preset from the config's `presets` section")
    p.add_argument("--decade", help="Comma separated steps, e.g. 10,20,50 (overrides config)")
    p.add_argument("--base", type=float, help="Ratio between segments (overrides config)")
    strategies = StrategyRegistry().list_available()
    p.add_argument(
        "--strategy",
        type=str.lower,
        choices=[s.name for s in strategies],
        help="; ".join(f"{s.name}: {s.label}" for s in strategies),
    )
    p.add_argument("--log-level", help="Overrides logging.level from the config")
    return p


def _parse_decade(text: str) -> list[float]:
    return [float(part) for part in text.split(",") if part.strip()]


def _ladder_config(cfg: AppConfig, args: argparse.Namespace) -> LadderConfig:
    data: dict[str, Any] = {}
    if args.preset is not None or cfg.ladder is not None:
        data = cfg.resolve_ladder(args.preset).model_dump()
    if args.decade:
        data["decade"] = _parse_decade(args.decade)
    if args.base is not None:
        data["base"] = args.base
    if args.strategy:
        data["strategy"] = args.strategy
    return LadderConfig.model_validate(data)


def run(argv: list[str]) -> int:
    args = _build_parser().parse_args(argv)
    try:
        cfg = load_config(args.config) if args.config else AppConfig()
        setup_logging(args.log_level or cfg.logging.level)
        ladder = build_ladder(_ladder_config(cfg, args))
        amounts = [float(a) for a in args.amounts]
    except (FileNotFoundError, KeyError, ValueError) as e:
        print(f"ladder-round: {e}", file=sys.stderr)
        return 2
    logger.info("using %s", ladder)

    op = getattr(ladder, args.op)
    for amount in amounts:
        try:
            result = op(amount)
        except ValueError as e:
            print(f"ladder-round: {e}", file=sys.stderr)
            return 2
        print(f"{amount:.15g} -> {result:.15g}")
    return 0


def main() -> None:
    raise SystemExit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
