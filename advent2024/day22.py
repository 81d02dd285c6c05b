"""Day 22: pseudorandom secret numbers and banana prices."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence

from .helpers import read_stdin, timed

Sequence4 = tuple[int, int, int, int]


def mix(secret: int, value: int) -> int:
    return value ^ secret


def prune(secret: int) -> int:
    return secret % 16777216


def mix_prune(secret: int, value: int) -> int:
    return prune(mix(secret, value))


class NumberGenerator:
    """Secret number evolution with a cache of computed successors."""

    def __init__(self) -> None:
        self._cache: dict[int, int] = {}

    def generate(self, number: int) -> int:
        """The next secret after number."""
        cached = self._cache.get(number)
        if cached is not None:
            return cached
        a = mix_prune(number, number * 64)
        b = mix_prune(a, a // 32)
        c = mix_prune(b, b * 2048)
        self._cache[number] = c
        return c

    def generate_n(self, start: int, n: int) -> int:
        """The n-th secret after start."""
        value = start
        for _ in range(n):
            value = self.generate(value)
        return value

    def generate_n_iter(self, start: int, n: int) -> Iterator[int]:
        """The next n secrets after start, excluding start itself."""
        value = start
        for _ in range(n):
            value = self.generate(value)
            yield value


def parse_input(text: str) -> list[int]:
    return [int(line) for line in text.splitlines()]


def price(number: int) -> int:
    return number % 10


def get_numbers(start: int, rng: NumberGenerator) -> list[int]:
    return list(rng.generate_n_iter(start, 2000))


def get_changes(numbers: Sequence[int]) -> list[int]:
    """Price differences between consecutive numbers, led by a 0."""
    return [0] + [price(b) - price(a) for a, b in zip(numbers, numbers[1:])]


def find_first_occurrence(changes: Sequence[int], sequence: Sequence[int]) -> int | None:
    """Index of the last change of the first window equal to sequence."""
    target = tuple(sequence)
    for i in range(3, len(changes)):
        if tuple(changes[i - 3 : i + 1]) == target:
            return i
    return None


def find_best_sequence(
    numbers: Sequence[Sequence[int]], changes: Sequence[Sequence[int]]
) -> tuple[Sequence4, int]:
    """The four-change sequence earning the most bananas, and that total."""
    totals: dict[Sequence4, int] = {}
    for monkey_numbers, monkey_changes in zip(numbers, changes):
        seen: set[Sequence4] = set()
        for i in range(3, len(monkey_changes)):
            seq = tuple(monkey_changes[i - 3 : i + 1])
            if seq in seen:
                continue
            seen.add(seq)
            totals[seq] = totals.get(seq, 0) + price(monkey_numbers[i])
    if not totals:
        raise ValueError("no sequence of four changes found")
    return max(totals.items(), key=lambda item: item[1])


def get_most_bananas(inputs: Sequence[int], rng: NumberGenerator) -> int:
    numbers = [get_numbers(x, rng) for x in inputs]
    changes = [get_changes(n) for n in numbers]
    sequence, _ = find_best_sequence(numbers, changes)
    total = 0
    for monkey_numbers, monkey_changes in zip(numbers, changes):
        index = find_first_occurrence(monkey_changes, sequence)
        if index is not None:
            total += price(monkey_numbers[index])
    return total


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(description="Evolve secret numbers read from stdin.").parse_args(argv)
    inputs = parse_input(read_stdin())
    rng = NumberGenerator()

    elapsed, total = timed(lambda: sum(rng.generate_n(x, 2000) for x in inputs))
    print(f"Part 1: {total} in {int(elapsed * 1000)}ms")

    elapsed, bananas = timed(lambda: get_most_bananas(inputs, rng))
    print(f"Part 2: {bananas} in {int(elapsed * 1000)}ms")