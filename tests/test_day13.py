import pytest

from advent2024.day13 import (
    Machine,
    get_presses,
    get_token_cost,
    parse_input,
    total_tokens,
    validate,
)

FIRST = Machine((94.0, 34.0), (22.0, 67.0), (8400.0, 5400.0))
SECOND = Machine((26.0, 66.0), (67.0, 21.0), (12748.0, 12176.0))

TEXT = (
    "Button A: X+94, Y+34\n"
    "Button B: X+22, Y+67\n"
    "Prize: X=8400, Y=5400\n"
    "\n"
    "Button A: X+26, Y+66\n"
    "Button B: X+67, Y+21\n"
    "Prize: X=12748, Y=12176\n"
)


def test_part1_solvable_machine():
    presses = get_presses(FIRST)
    assert presses == (80.0, 40.0)
    assert validate(presses)
    assert get_token_cost(presses) == 280.0


def test_part1_unsolvable_machine():
    assert not validate(get_presses(SECOND))


def test_validate_rejects_fractions():
    assert validate((3.0, 0.0))
    assert not validate((2.5, 1.0))
    assert not validate((1.0, 0.25))


def test_parse_input():
    machines = parse_input(TEXT)
    assert machines == [FIRST, SECOND]


def test_parse_incomplete_machine():
    with pytest.raises(ValueError):
        parse_input("Button A: X+1, Y+2\n")


def test_parse_line_without_numbers():
    with pytest.raises(ValueError):
        parse_input("Button A: X, Y\nButton B: X+1, Y+1\nPrize: X=1, Y=1\n")


def test_total_tokens():
    assert total_tokens(parse_input(TEXT)) == 280.0


def test_total_tokens_empty():
    assert total_tokens([]) == 0.0