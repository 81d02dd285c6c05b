import io

from advent2024.day11 import blink, blink_multiple, count_digits, main, split_number


def test_split_tests():
    assert split_number(1234) == (12, 34)
    assert split_number(123456) == (123, 456)
    assert split_number(12345678) == (1234, 5678)


def test_blink_tests():
    memo = {}
    assert blink_multiple([125, 17], 6, memo) == 22
    assert blink_multiple([125, 17], 25, memo) == 55312


def test_blink_zero_steps_is_one_stone():
    assert blink(0, 125, {}) == 1


def test_count_digits():
    assert count_digits(1234) == 4
    assert count_digits(0) == 0


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("125 17\n"))
    main([])
    out = capsys.readouterr().out
    assert "Part 1: 55312 in" in out
    assert "Part 2:" in out