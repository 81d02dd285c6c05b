"""Day 2: checking reactor reports for safety."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from itertools import pairwise

from .helpers import micros, read_stdin, timed, timed_repeated


def is_safe(seq: Sequence[int]) -> bool:
    """Levels strictly move one way, by steps of 1 to 3."""
    last_change: int | None = None
    for previous, current in pairwise(seq):
        diff = current - previous
        sign_changed = last_change is not None and (last_change < 0) != (diff < 0)
        if diff == 0 or abs(diff) > 3 or sign_changed:
            return False
        last_change = diff
    return True


def is_safe_dampened(seq: Sequence[int]) -> bool:
    """Safe, or safe after removing a single level."""
    if is_safe(seq):
        return True
    items = list(seq)
    return any(is_safe(items[:i] + items[i + 1 :]) for i in range(len(items)))


def parse_input(text: str) -> list[list[int]]:
    return [[int(x) for x in line.split()] for line in text.splitlines()]


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(description="Count safe reports read from stdin.").parse_args(argv)
    text = read_stdin()

    elapsed, reports = timed(lambda: parse_input(text))
    print(f"Time to parse: {micros(elapsed)}μs")

    elapsed, count = timed_repeated(10, lambda: sum(1 for r in reports if is_safe(r)))
    print(f"Part 1: {count} in {micros(elapsed)}μs")

    elapsed, count = timed_repeated(10, lambda: sum(1 for r in reports if is_safe_dampened(r)))
    print(f"Part 2: {count} in {micros(elapsed)}μs")