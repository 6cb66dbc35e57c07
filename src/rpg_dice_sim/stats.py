from __future__ import annotations

from typing import Sequence

from .models import Stats


def compute_stats(values: Sequence[int]) -> Stats | None:
    """Count, min, max and mean of a run of totals; ``None`` when there are none."""

    if not values:
        return None

    lo = hi = values[0]
    acc = 0
    for v in values:
        if v < lo:
            lo = v
        if v > hi:
            hi = v
        acc += v

    return Stats(count=len(values), min=lo, max=hi, mean=acc / len(values))
