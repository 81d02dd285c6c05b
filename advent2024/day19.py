"""Day 19: arranging towel patterns into designs."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence

from .helpers import read_stdin, timed


def parse_input(text: str) -> tuple[list[str], list[str]]:
    """Towel patterns from the first line; designs after the blank line."""
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("input needs a towel line and a separator line")
    towels = [towel.strip() for towel in lines[0].split(",")]
    return towels, lines[2:]


def count_matching_designs(towels: Sequence[str], designs: Iterable[str]) -> int:
    """Number of designs made of one or more towels laid end to end."""
    patterns = [towel for towel in towels if towel]
    cache: dict[str, bool] = {"": True}

    def buildable(design: str) -> bool:
        if design not in cache:
            cache[design] = any(
                buildable(design[len(towel) :])
                for towel in patterns
                if design.startswith(towel)
            )
        return cache[design]

    def matches(design: str) -> bool:
        if not design:
            return "" in towels
        return buildable(design)

    return sum(1 for design in designs if matches(design))


def count_possible_designs(towels: Sequence[str], designs: Iterable[str]) -> int:
    """Total number of ways to build every design from the towels."""
    cache: dict[str, int] = {}

    def count(design: str) -> int:
        if design in cache:
            return cache[design]
        if not design:
            return 1
        total = sum(
            count(design[len(towel) :]) for towel in towels if design.startswith(towel)
        )
        cache[design] = total
        return total

    return sum(count(design) for design in designs)


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(description="Count towel arrangements read from stdin.").parse_args(argv)
    towels, designs = parse_input(read_stdin())

    elapsed, possible = timed(lambda: count_matching_designs(towels, designs))
    print(f"Part 1: {possible} in {int(elapsed * 1000)}ms")

    elapsed, combinations = timed(lambda: count_possible_designs(towels, designs))
    print(f"Part 2: {combinations} in {int(elapsed * 1000)}ms")