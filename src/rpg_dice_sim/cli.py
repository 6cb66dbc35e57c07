from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Sequence

from .dice import RandInt, default_randint, roll_many
from .errors import DiceError
from .models import Mode, RollResult, Stats
from .parser import parse
from .stats import compute_stats


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="rpg-dice",
        description="Roll tabletop dice expressions like 2d6+3, 3d6+2d8-1 or d20+5.",
    )
    p.add_argument("expression", help="dice expression, e.g. 2d6+3")
    p.add_argument(
        "-t", "--times", type=int, default=1, help="roll N times and print stats (default: 1)"
    )
    adv = p.add_mutually_exclusive_group()
    adv.add_argument("--adv", action="store_true", help="advantage (only on a lone d20 term)")
    adv.add_argument("--dis", action="store_true", help="disadvantage (only on a lone d20 term)")
    p.add_argument("-q", "--quiet", action="store_true", help="print only the totals")
    p.add_argument("--seed", type=int, default=None, help="seed for reproducible rolls")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    return p


def format_result(index: int, result: RollResult, quiet: bool = False) -> list[str]:
    if quiet:
        return [f"total: {result.total}"]
    lines = [f"--- roll {index} ---"]
    lines.extend(str(d) for d in result.details)
    if result.flat_total != 0:
        lines.append(f"mods: {result.flat_total}")
    lines.append(f"total: {result.total}")
    return lines


def format_stats(stats: Stats) -> list[str]:
    return [
        "=== stats ===",
        f"rolls: {stats.count}",
        f"min:   {stats.min}",
        f"max:   {stats.max}",
        f"mean:  {stats.mean:.2f}",
    ]


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="[%(levelname)s] [%(name)s] - %(message)s",
        stream=sys.stderr,
    )

    mode: Mode = "advantage" if args.adv else "disadvantage" if args.dis else "none"
    randint: RandInt = random.Random(args.seed).randint if args.seed is not None else default_randint()

    try:
        expr = parse(args.expression)
        results = roll_many(expr, args.times, mode, randint)
    except DiceError as e:
        logger.debug("rejected %r", args.expression)
        print(f"error: {e}", file=sys.stderr)
        return 1

    for i, result in enumerate(results, start=1):
        print("\n".join(format_result(i, result, args.quiet)))
        if not args.quiet and i != len(results):
            print()

    if len(results) > 1:
        stats = compute_stats([r.total for r in results])
        if stats is not None:
            print()
            print("\n".join(format_stats(stats)))

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
