from __future__ import annotations

import logging
import secrets
from typing import Callable, TypeAlias

from .errors import DiceError
from .models import MODES, DiceTerm, Expression, Mode, RollDetail, RollResult


logger = logging.getLogger(__name__)

RandInt: TypeAlias = Callable[[int, int], int]


def default_randint() -> RandInt:
    return secrets.SystemRandom().randint


def _roll_die(term: DiceTerm, mode: Mode, randint: RandInt) -> int:
    # Advantage only ever touches a lone d20 term; 2d20 rolls as two plain dice.
    if mode != "none" and term.sides == 20 and term.count == 1:
        a = randint(1, 20)
        b = randint(1, 20)
        kept = max(a, b) if mode == "advantage" else min(a, b)
        logger.debug("d20 %s: rolls [%d, %d] -> keep %d", mode, a, b, kept)
        return kept
    return randint(1, term.sides)


def roll(expr: Expression, mode: Mode = "none", randint: RandInt | None = None) -> RollResult:
    """Roll every dice term of ``expr`` once and add the flat modifiers.

    ``randint(a, b)`` must return a uniform integer in the closed range
    ``[a, b]``; it defaults to a fresh ``secrets.SystemRandom``.
    """

    if mode not in MODES:
        raise DiceError(f"[INVALID_MODE] Unknown mode '{mode}'. Use one of: {', '.join(MODES)}.")
    if randint is None:
        randint = default_randint()

    details: list[RollDetail] = []
    total = 0

    for term in expr.dice:
        rolls = [_roll_die(term, mode, randint) for _ in range(term.count)]
        subtotal = term.sign * sum(rolls)
        details.append(RollDetail(term=term, rolls=tuple(rolls), subtotal=subtotal))
        total += subtotal

    flat_total = sum(flat.signed_value for flat in expr.flats)
    total += flat_total

    return RollResult(details=tuple(details), flat_total=flat_total, total=total)


def roll_many(
    expr: Expression, times: int, mode: Mode = "none", randint: RandInt | None = None
) -> list[RollResult]:
    if times < 1:
        raise DiceError(f"[INVALID_TIMES] Number of rolls must be at least 1, got {times}.")
    if randint is None:
        randint = default_randint()
    return [roll(expr, mode, randint) for _ in range(times)]
