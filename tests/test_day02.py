import io

from advent2024.day02 import is_safe, is_safe_dampened, main, parse_input

EXAMPLE = """\
7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


def test_part1():
    reports = parse_input(EXAMPLE)
    assert sum(1 for r in reports if is_safe(r)) == 2


def test_part2():
    reports = parse_input(EXAMPLE)
    assert sum(1 for r in reports if is_safe_dampened(r)) == 4


def test_individual_reports():
    reports = parse_input(EXAMPLE)
    assert [is_safe(r) for r in reports] == [True, False, False, False, False, True]
    assert [is_safe_dampened(r) for r in reports] == [True, False, False, True, True, True]


def test_parse_input():
    reports = parse_input(EXAMPLE)
    assert len(reports) == 6
    assert reports[0] == [7, 6, 4, 2, 1]
    assert reports[-1] == [1, 3, 6, 7, 9]


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(EXAMPLE))
    main([])
    out = capsys.readouterr().out
    assert "Part 1: 2 in" in out
    assert "Part 2: 4 in" in out