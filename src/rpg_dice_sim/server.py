from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any

from mcp.server.fastmcp import FastMCP

from .dice import roll_many
from .errors import DiceError
from .models import Mode
from .parser import format_expression, parse
from .stats import compute_stats


mcp = FastMCP("rpg-dice-sim")


def _now_utc_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def roll_from_text(expression: str, mode: Mode = "none", times: int = 1) -> dict[str, Any]:
    """Parse, validate, then roll ``times`` times. Raises DiceError for invalid input."""

    expr = parse(expression)
    results = roll_many(expr, times, mode)
    totals = [r.total for r in results]
    stats = compute_stats(totals)

    last = results[-1]
    explanation_parts = [str(d) for d in last.details]
    if last.flat_total:
        explanation_parts.append(f"mods {last.flat_total:+d}")
    explanation = "; ".join(explanation_parts) + f" => {last.total}"

    return {
        "request_id": uuid.uuid4().hex,
        "timestamp": _now_utc_iso(),
        "input": expression,
        "normalized_expression": format_expression(expr),
        "mode": mode,
        "rng": {
            "source": "secrets.SystemRandom",
            "nonce": str(uuid.uuid4()),
        },
        "rolls": [r.to_dict() for r in results],
        "totals": totals,
        "stats": stats.to_dict() if stats else None,
        "explanation": explanation,
    }


@mcp.tool()
def roll_dice(expression: str, mode: Mode = "none", times: int = 1):
    """Roll a dice expression like '3d6+2d8-1' or 'd20+5'.

    Input: expression (string), mode ('none', 'advantage' or 'disadvantage'),
    times (how many times to roll; stats are included for the run)
    Output: structured JSON with per-term rolls, totals and stats

    Raises a hard error (exception) on invalid input.
    """

    try:
        return roll_from_text(expression, mode, times)
    except DiceError as e:
        # Fail-fast: surface stable error codes in the message.
        raise ValueError(str(e)) from None


def run() -> None:
    mcp.run()


if __name__ == "__main__":
    run()
