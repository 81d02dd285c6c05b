"""Day 4: word search for XMAS."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from itertools import product

from .helpers import micros, read_stdin, timed

Array = list[list[str]]

_DIRECTIONS = [
    (1, 0),
    (0, -1),
    (0, 1),
    (-1, 0),
    (-1, -1),
    (1, -1),
    (-1, 1),
    (1, 1),
]


def string_to_array(text: str) -> Array:
    return [list(line) for line in text.splitlines()]


def _get(data: Array, x: int, y: int) -> str | None:
    if x < 0 or y < 0 or y >= len(data) or x >= len(data[y]):
        return None
    return data[y][x]


def _positions(data: Array):
    width = len(data[0])
    height = len(data)
    return product(range(width), range(height))


def _count_xmas_from(data: Array, x: int, y: int) -> int:
    return sum(
        1
        for dx, dy in _DIRECTIONS
        if _get(data, x + dx, y + dy) == "M"
        and _get(data, x + 2 * dx, y + 2 * dy) == "A"
        and _get(data, x + 3 * dx, y + 3 * dy) == "S"
    )


def find_matches(data: Array) -> int:
    """Occurrences of XMAS in any of the eight directions."""
    return sum(
        _count_xmas_from(data, x, y)
        for x, y in _positions(data)
        if _get(data, x, y) == "X"
    )


def _is_cross(data: Array, x: int, y: int) -> bool:
    up_left = _get(data, x - 1, y - 1)
    up_right = _get(data, x + 1, y - 1)
    down_left = _get(data, x - 1, y + 1)
    down_right = _get(data, x + 1, y + 1)
    if None in (up_left, up_right, down_left, down_right):
        return False
    ends = {"M", "S"}
    return {up_left, down_right} == ends and {down_left, up_right} == ends


def find_matches_2(data: Array) -> int:
    """Occurrences of two MAS crossing in an X."""
    return sum(
        1
        for x, y in _positions(data)
        if _get(data, x, y) == "A" and _is_cross(data, x, y)
    )


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(description="Search a word grid read from stdin.").parse_args(argv)
    array = string_to_array(read_stdin())

    elapsed, count = timed(lambda: find_matches(array))
    print(f"Part 1: {count} in {micros(elapsed)}μs")

    elapsed, count = timed(lambda: find_matches_2(array))
    print(f"Part 2: {count} in {micros(elapsed)}μs")