from typing import get_type_hints

import pytest

from rpg_dice_sim.models import Mode
from rpg_dice_sim.server import roll_dice, roll_from_text


def test_roll_dice_structured_output():
    out = roll_dice("2d1 + 3", times=3)

    assert out["input"] == "2d1 + 3"
    assert out["normalized_expression"] == "2d1 + 3"
    assert out["mode"] == "none"
    assert out["totals"] == [5, 5, 5]
    assert out["stats"] == {"count": 3, "min": 5, "max": 5, "mean": 5.0}
    assert out["rolls"][0]["details"] == [
        {"sign": 1, "count": 2, "sides": 1, "rolls": [1, 1], "subtotal": 2}
    ]
    assert out["explanation"] == "+2d1: [1, 1] = 2; mods +3 => 5"
    assert out["timestamp"].endswith("Z")
    assert len(out["request_id"]) == 32


def test_roll_dice_advantage_in_range():
    out = roll_dice("d20", mode="advantage")
    assert 1 <= out["totals"][0] <= 20


@pytest.mark.parametrize(
    ("kwargs", "prefix"),
    [
        ({"expression": ""}, "[EMPTY_EXPRESSION]"),
        ({"expression": "2d6d8"}, "[MALFORMED_TERM]"),
        ({"expression": "d20", "mode": "sideways"}, "[INVALID_MODE]"),
        ({"expression": "d20", "times": 0}, "[INVALID_TIMES]"),
    ],
)
def test_roll_dice_rejections(kwargs, prefix):
    with pytest.raises(ValueError) as exc:
        roll_dice(**kwargs)
    assert str(exc.value).startswith(prefix)


def test_roll_from_text_mode_is_typed():
    assert get_type_hints(roll_from_text)["mode"] == Mode
    assert get_type_hints(roll_dice)["mode"] == Mode
