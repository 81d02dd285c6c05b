"""Day 5: checking print queue updates against page ordering rules."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass, field

from .helpers import micros, read_stdin, timed

Requirements = dict[int, set[int]]
Update = list[int]


@dataclass
class Input:
    """Ordering rules (page -> pages that must come after it) and updates."""

    requirements: Requirements = field(default_factory=dict)
    updates: list[Update] = field(default_factory=list)


def parse_input(text: str) -> Input:
    lines = iter(text.splitlines())
    requirements: Requirements = {}

    for line in lines:
        if not line:
            break
        before, after = line.split("|", 1)
        requirements.setdefault(int(before), set()).add(int(after))

    updates = [[int(x) for x in line.split(",")] for line in lines]
    return Input(requirements, updates)


def is_correctly_ordered(requirements: Requirements, update: Sequence[int]) -> bool:
    """No page appears after one it must precede."""
    encountered: set[int] = set()
    for page in update:
        if requirements.get(page, set()) & encountered:
            return False
        encountered.add(page)
    return True


def get_middle(update: Sequence[int]) -> int:
    return update[len(update) // 2]


def get_ordered_middles(data: Input) -> list[int]:
    return [
        get_middle(update)
        for update in data.updates
        if is_correctly_ordered(data.requirements, update)
    ]


def reorder_incorrect(requirements: Requirements, update: Sequence[int]) -> Update:
    """Insertion sort moving each page before those it must precede."""
    result: Update = []
    for page in update:
        must_precede = requirements.get(page, set())
        index = len(result)
        while index > 0 and result[index - 1] in must_precede:
            index -= 1
        result.insert(index, page)
    return result


def get_unordered_middles(data: Input) -> list[int]:
    return [
        get_middle(reorder_incorrect(data.requirements, update))
        for update in data.updates
        if not is_correctly_ordered(data.requirements, update)
    ]


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(description="Check page updates read from stdin.").parse_args(argv)
    data = parse_input(read_stdin())

    elapsed, result = timed(lambda: sum(get_ordered_middles(data)))
    print(f"Part 1: {result} in {micros(elapsed)}μs")

    elapsed, result = timed(lambda: sum(get_unordered_middles(data)))
    print(f"Part 2: {result} in {micros(elapsed)}μs")