"""Command-line interface."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from knightstour.core.errors import KnightsTourError
from knightstour.core.search import STRATEGIES
from knightstour.core.tour import run_tour

from . import config, render


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Knight's tour solver (Warnsdorff ordering with backtracking)")
    ap.add_argument("config", nargs="?", help="Path to a YAML run file")
    ap.add_argument("--size", type=int, help="Board width and height")
    ap.add_argument("--border", type=int, help="Padding around the board (>= 2)")
    ap.add_argument("--start", type=int, nargs=2, metavar=("ROW", "COL"), help="Start square, random if omitted")
    ap.add_argument("--seed", type=int, help="Seed for random start squares")
    ap.add_argument("--strategy", choices=STRATEGIES, help="Search implementation")
    ap.add_argument("--attempts", type=int, dest="max_attempts", help="Start squares to try before giving up")
    ap.add_argument("--output", choices=config.OUTPUTS, help="Result format")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log search progress")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = config.load_config(Path(args.config)) if args.config else config.TourConfig()
        cfg = cfg.with_overrides(
            size=args.size,
            border=args.border,
            start=tuple(args.start) if args.start else None,
            seed=args.seed,
            strategy=args.strategy,
            max_attempts=args.max_attempts,
            output=args.output,
        )
        result = run_tour(
            cfg.size,
            start=cfg.start,
            border=cfg.border,
            strategy=cfg.strategy,
            seed=cfg.seed,
            max_attempts=cfg.max_attempts,
        )
    except KnightsTourError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if cfg.output == "json":
        print(json.dumps(render.result_to_dict(result), indent=2))
    elif cfg.output == "yaml":
        print(yaml.safe_dump(render.result_to_dict(result), sort_keys=False), end="")
    elif result.found:
        print(render.format_board(result.board))
    else:
        print(render.NO_RESULT)
    return 0 if result.found else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
