import io

import pytest

from advent2024.day01 import main, parse_input, similarity, sorted_difference

A = [3, 4, 2, 1, 3, 3]
B = [4, 3, 5, 3, 9, 3]
TEXT = "".join(f"{x}   {y}\n" for x, y in zip(A, B))


def test_part1():
    assert sorted_difference(A, B) == 11


def test_part2():
    assert similarity(A, B) == 31


def test_parse_input():
    assert parse_input(TEXT) == (A, B)


def test_parse_input_rejects_short_line():
    with pytest.raises(ValueError):
        parse_input("3\n")


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(TEXT))
    main([])
    out = capsys.readouterr().out
    assert "Part 1: 11" in out
    assert "Part 2: 31" in out