"""Day 1: comparing two location lists."""

from __future__ import annotations

import argparse
from collections import Counter
from collections.abc import Sequence

from .helpers import read_stdin


def sorted_difference(a: Sequence[int], b: Sequence[int]) -> int:
    """Sum of distances between the lists' elements paired in sorted order."""
    return sum(abs(x - y) for x, y in zip(sorted(a), sorted(b)))


def similarity(a: Sequence[int], b: Sequence[int]) -> int:
    """Sum of each left value times how often it occurs on the right."""
    occurrences = Counter(b)
    return sum(x * occurrences[x] for x in a)


def parse_input(text: str) -> tuple[list[int], list[int]]:
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        first, second, *_ = line.split()
        left.append(int(first))
        right.append(int(second))
    return left, right


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(description="Compare two location lists read from stdin.").parse_args(argv)
    a, b = parse_input(read_stdin())
    print(f"Part 1: {sorted_difference(a, b)}")
    print(f"Part 2: {similarity(a, b)}")