"""Day 7: finding operators that make calibration equations true."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable, Sequence

from .helpers import read_stdin, timed

Equation = tuple[int, list[int]]


def _split(numbers: Sequence[int]) -> tuple[int, Sequence[int]]:
    if not numbers:
        raise ValueError("an equation needs at least one number")
    return numbers[0], numbers[1:]


def can_make(target: int, numbers: Sequence[int]) -> bool:
    """Whether + and * applied left to right can reach the target."""

    def search(rest: Sequence[int], acc: int) -> bool:
        if not rest:
            return acc == target
        head, tail = rest[0], rest[1:]
        return search(tail, acc + head) or search(tail, acc * head)

    first, rest = _split(numbers)
    return search(rest, first)


def concat(a: int, b: int) -> int:
    """Digits of a followed by digits of b."""
    places = len(str(b)) if b > 0 else 0
    return a * 10**places + b


def can_make_concat(target: int, numbers: Sequence[int]) -> bool:
    """Whether +, * and concatenation left to right can reach the target."""

    def search(rest: Sequence[int], acc: int) -> bool:
        if not rest:
            return acc == target
        head, tail = rest[0], rest[1:]
        return (
            search(tail, acc + head)
            or search(tail, acc * head)
            or search(tail, concat(acc, head))
        )

    first, rest = _split(numbers)
    return search(rest, first)


def _parse_ints(words: Iterable[str]) -> list[int]:
    numbers = []
    for word in words:
        try:
            numbers.append(int(word))
        except ValueError:
            continue
    return numbers


def parse_input(text: str) -> list[Equation]:
    equations = []
    for line in text.splitlines():
        target, sep, rest = line.partition(":")
        if not sep:
            raise ValueError(f"missing ':' in line {line!r}")
        equations.append((int(target), _parse_ints(rest.split())))
    return equations


def get_calibration_result(
    equations: Iterable[Equation], predicate: Callable[[int, Sequence[int]], bool]
) -> int:
    return sum(target for target, numbers in equations if predicate(target, numbers))


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(description="Check calibration equations read from stdin.").parse_args(argv)
    equations = parse_input(read_stdin())

    elapsed, result = timed(lambda: get_calibration_result(equations, can_make))
    print(f"Part 1: {result} in {int(elapsed * 1_000_000)}μs")

    elapsed, result = timed(lambda: get_calibration_result(equations, can_make_concat))
    print(f"Part 2: {result} in {int(elapsed * 1000)}ms")