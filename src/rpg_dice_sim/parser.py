from __future__ import annotations

import logging
import re

from .errors import (
    EMPTY_EXPRESSION,
    INVALID_COUNT,
    INVALID_FLAT_MODIFIER,
    INVALID_SIDES,
    MALFORMED_TERM,
    NON_POSITIVE_VALUE,
    NOTHING_TO_ROLL,
    ParseError,
)
from .models import DiceTerm, Expression, FlatMod, Sign


logger = logging.getLogger(__name__)

_EXAMPLE = "Example: '2d6 + 3' or 'd20 + 5'."

_INT_RE = re.compile(r"^-?[0-9]+$")
_UINT_RE = re.compile(r"^[0-9]+$")

UINT_MAX = 2**32 - 1
INT_MIN, INT_MAX = -(2**31), 2**31 - 1


def normalize_text(text: str) -> str:
    # Every '-' starts a new negative term, so the whole thing splits on '+'.
    s = re.sub(r"\s+", "", text)
    return s.replace("-", "+-")


def _parse_flat(token: str) -> FlatMod:
    if not _INT_RE.match(token) or not INT_MIN <= int(token) <= INT_MAX:
        raise ParseError(INVALID_FLAT_MODIFIER, f"Invalid modifier '{token}'. {_EXAMPLE}")
    value = int(token)
    sign: Sign = 1 if value >= 0 else -1
    return FlatMod(value=abs(value), sign=sign)


def _parse_dice(token: str) -> DiceTerm:
    sign: Sign = 1
    core = token
    if core.startswith("-"):
        sign = -1
        core = core[1:]

    parts = core.split("d")
    if len(parts) != 2:
        raise ParseError(MALFORMED_TERM, f"Could not understand term '{token}'. {_EXAMPLE}")
    count_str, sides_str = parts

    if not count_str:
        count = 1
    elif _UINT_RE.match(count_str) and int(count_str) <= UINT_MAX:
        count = int(count_str)
    else:
        raise ParseError(INVALID_COUNT, f"Invalid dice count in '{token}'. {_EXAMPLE}")

    if not _UINT_RE.match(sides_str) or int(sides_str) > UINT_MAX:
        raise ParseError(INVALID_SIDES, f"Invalid number of sides in '{token}'. {_EXAMPLE}")
    sides = int(sides_str)

    if count == 0 or sides == 0:
        raise ParseError(
            NON_POSITIVE_VALUE, f"Dice count and sides must be greater than zero in '{token}'. {_EXAMPLE}"
        )

    return DiceTerm(count=count, sides=sides, sign=sign)


def parse(text: str) -> Expression:
    """Parse a dice expression such as ``3d6+2d8-1`` into an :class:`Expression`.

    Raises :class:`ParseError` for anything outside ``[-]?[count]d<sides>``
    terms and signed integer modifiers joined by ``+`` / ``-``.
    """

    normalized = normalize_text(text or "")
    if not normalized:
        raise ParseError(EMPTY_EXPRESSION, f"Empty expression. {_EXAMPLE}")
    logger.debug("normalized %r -> %r", text, normalized)

    dice: list[DiceTerm] = []
    flats: list[FlatMod] = []

    for tok in normalized.split("+"):
        if not tok:
            continue

        if "d" not in tok and (_INT_RE.match(tok) or tok.startswith("-")):
            flats.append(_parse_flat(tok))
            continue

        dice.append(_parse_dice(tok))

    if not dice and not flats:
        raise ParseError(NOTHING_TO_ROLL, f"No dice or modifiers found. {_EXAMPLE}")

    return Expression(dice=tuple(dice), flats=tuple(flats))


def format_expression(expr: Expression) -> str:
    chunks: list[str] = []

    def append_signed(piece: str, sign: int) -> None:
        if not chunks:
            chunks.append(f"- {piece}" if sign < 0 else piece)
            return
        chunks.append(f"- {piece}" if sign < 0 else f"+ {piece}")

    for term in expr.dice:
        base = f"{term.count}d{term.sides}" if term.count != 1 else f"d{term.sides}"
        append_signed(base, term.sign)

    for flat in expr.flats:
        append_signed(str(flat.value), flat.sign)

    return " ".join(chunks)
