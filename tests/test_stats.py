import random

import pytest

from rpg_dice_sim.dice import roll_many
from rpg_dice_sim.models import Stats
from rpg_dice_sim.parser import parse
from rpg_dice_sim.stats import compute_stats


def test_empty_is_none():
    assert compute_stats([]) is None


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ([5], Stats(count=1, min=5, max=5, mean=5.0)),
        ([1, 2, 3], Stats(count=3, min=1, max=3, mean=2.0)),
        ([3, -4, 10, 0], Stats(count=4, min=-4, max=10, mean=2.25)),
        ((2**31 - 1, 2**31 - 1), Stats(count=2, min=2**31 - 1, max=2**31 - 1, mean=2**31 - 1)),
    ],
)
def test_compute_stats(values, expected):
    assert compute_stats(values) == expected


def test_mean_is_float():
    assert isinstance(compute_stats([1, 2]).mean, float)


def test_stats_bound_repeated_rolls():
    totals = [r.total for r in roll_many(parse("2d6+d8-1"), 50, randint=random.Random(3).randint)]
    stats = compute_stats(totals)

    assert stats.count == 50
    assert all(stats.min <= t <= stats.max for t in totals)
    assert 2 <= stats.min and stats.max <= 19
