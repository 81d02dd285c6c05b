import pytest

from advent2024.day07 import (
    can_make,
    can_make_concat,
    concat,
    get_calibration_result,
    parse_input,
)

EXAMPLE = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""


def test_can_make():
    assert can_make(190, [10, 19])
    assert can_make(3267, [81, 40, 27])
    assert can_make(292, [11, 6, 16, 20])

    assert not can_make(20, [5])
    assert not can_make(100, [10, 9])
    assert not can_make(161011, [16, 10, 13])

    assert not can_make(83, [17, 5])


def test_concat():
    assert concat(15, 3) == 153
    assert concat(1, 300) == 1300


def test_can_make_concat():
    assert can_make_concat(156, [15, 6])
    assert can_make_concat(7290, [6, 8, 6, 15])
    assert not can_make_concat(83, [17, 5])


def test_parse_input():
    equations = parse_input(EXAMPLE)
    assert equations[0] == (190, [10, 19])
    assert len(equations) == 9


def test_part1():
    assert get_calibration_result(parse_input(EXAMPLE), can_make) == 3749


def test_part2():
    assert get_calibration_result(parse_input(EXAMPLE), can_make_concat) == 11387


def test_empty_numbers_rejected():
    with pytest.raises(ValueError):
        can_make(5, [])


def test_missing_colon_rejected():
    with pytest.raises(ValueError):
        parse_input("190 10 19")