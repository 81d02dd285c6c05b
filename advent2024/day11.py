"""Day 11: counting stones that split as you blink."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

from .helpers import read_stdin, timed

Memo = dict[tuple[int, int], int]


def count_digits(x: int) -> int:
    """Number of decimal digits; zero counts as having none."""
    return len(str(x)) if x > 0 else 0


def split_number(x: int) -> tuple[int, int]:
    """Split into the high and low halves of its digits."""
    power = 10 ** (count_digits(x) // 2)
    return divmod(x, power)


def blink(n: int, stone: int, memo: Memo) -> int:
    """Number of stones one stone becomes after n blinks."""
    if n == 0:
        count = 1
    elif (n, stone) in memo:
        count = memo[(n, stone)]
    elif stone == 0:
        count = blink(n - 1, 1, memo)
    elif count_digits(stone) % 2 == 0:
        high, low = split_number(stone)
        count = blink(n - 1, high, memo) + blink(n - 1, low, memo)
    else:
        count = blink(n - 1, stone * 2024, memo)
    memo[(n, stone)] = count
    return count


def blink_multiple(items: Iterable[int], n: int, memo: Memo) -> int:
    return sum(blink(n, stone, memo) for stone in items)


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(description="Count stones after blinking, reading stdin.").parse_args(argv)
    stones = [int(x) for x in read_stdin().split()]
    memo: Memo = {}

    elapsed, count = timed(lambda: blink_multiple(stones, 25, memo))
    print(f"Part 1: {count} in {int(elapsed * 1000)}ms")

    elapsed, count = timed(lambda: blink_multiple(stones, 75, memo))
    print(f"Part 2: {count} in {int(elapsed * 1000)}ms")