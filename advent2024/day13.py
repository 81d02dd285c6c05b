"""Day 13: pressing buttons on claw machines to reach prizes."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace

from .helpers import micros, read_stdin, timed

Point = tuple[float, float]
Presses = tuple[float, float]

PART_2_OFFSET = 10_000_000_000_000.0


@dataclass(frozen=True)
class Machine:
    """How far each button moves the claw, and where the prize is."""

    a_incr: Point
    b_incr: Point
    target: Point


def get_presses(machine: Machine) -> Presses:
    """Solve the two linear equations for the presses of A and B.

    Raises ZeroDivisionError when the buttons leave the system unsolvable.
    """
    a, d = machine.a_incr
    b, e = machine.b_incr
    c, f = machine.target

    x = (c * e - b * f) / (a * e - b * d)
    y = (c - a * x) / b
    return x, y


def validate(presses: Presses) -> bool:
    """A solution counts only if both press counts are whole numbers."""
    a_presses, b_presses = presses
    return a_presses == math.floor(a_presses) and b_presses == math.floor(b_presses)


def get_token_cost(presses: Presses) -> float:
    a, b = presses
    return a * 3.0 + b


def _read_part(part: str) -> float:
    digits = "".join(ch for ch in part if ch.isascii() and ch.isdigit())
    if not digits:
        raise ValueError(f"no number in {part!r}")
    return float(digits)


def _read_line(line: str) -> Point:
    x, sep, y = line.partition(",")
    if not sep:
        raise ValueError(f"missing ',' in line {line!r}")
    return _read_part(x), _read_part(y)


def parse_input(text: str) -> list[Machine]:
    """Machines of three lines each, separated by blank lines."""
    lines = iter(text.splitlines())
    machines = []
    for a_line in lines:
        b_line = next(lines, None)
        target_line = next(lines, None)
        if b_line is None or target_line is None:
            raise ValueError("incomplete machine description")
        machines.append(Machine(_read_line(a_line), _read_line(b_line), _read_line(target_line)))
        if next(lines, None) is None:
            break
    return machines


def total_tokens(machines: Iterable[Machine], offset: float = 0.0) -> float:
    """Tokens to win every winnable prize, with targets moved by offset."""
    total = 0.0
    for machine in machines:
        tx, ty = machine.target
        presses = get_presses(replace(machine, target=(tx + offset, ty + offset)))
        if validate(presses):
            total += get_token_cost(presses)
    return total


def _format(value: float) -> str:
    return str(int(value)) if value.is_integer() else str(value)


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(description="Count tokens for claw machines read from stdin.").parse_args(argv)
    machines = parse_input(read_stdin())

    elapsed, tokens = timed(lambda: total_tokens(machines))
    print(f"Part 1: {_format(tokens)} in {micros(elapsed)}μs")

    elapsed, tokens = timed(lambda: total_tokens(machines, PART_2_OFFSET))
    print(f"Part 2: {_format(tokens)} in {micros(elapsed)}μs")