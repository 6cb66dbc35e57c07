from rpg_dice_sim.parser import format_expression, normalize_text, parse


def test_parse_is_deterministic():
    text = "3d6 + 2d8 - 1"
    a = parse(text)
    b = parse(text)

    assert a == b
    assert format_expression(a) == format_expression(b)


def test_normalize_text_rewrites_minus():
    assert normalize_text(" 3d6 - 1 ") == "3d6+-1"
    assert normalize_text("-d4") == "+-d4"
