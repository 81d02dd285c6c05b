"""Day 3: scanning corrupted memory for multiplication instructions."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .helpers import micros, read_stdin, timed

_DIGITS = "0123456789"


@dataclass(frozen=True)
class Mul:
    """A mul(a,b) instruction and whether it was enabled when read."""

    a: int
    b: int
    enabled: bool = True

    def product(self) -> int:
        return self.a * self.b


class _Cursor:
    """Character reader with one character of lookahead."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def peek(self) -> str | None:
        if self._pos < len(self._text):
            return self._text[self._pos]
        return None

    def advance(self) -> str | None:
        ch = self.peek()
        if ch is not None:
            self._pos += 1
        return ch

    def accept(self, expected: str) -> bool:
        """Consume the next character only if it is the expected one."""
        if self.peek() == expected:
            self._pos += 1
            return True
        return False

    def is_digit_next(self) -> bool:
        ch = self.peek()
        return ch is not None and ch in _DIGITS

    def number(self) -> int:
        total = 0
        while self.is_digit_next():
            total = total * 10 + int(self.advance())
        return total


def _read_mul(cursor: _Cursor) -> tuple[int, int] | None:
    """Read the rest of a mul instruction after its leading 'm'.

    Returns None when the text is not a well-formed instruction. A closed
    instruction with fewer than two numbers raises IndexError.
    """
    if not (cursor.accept("u") and cursor.accept("l") and cursor.accept("(")):
        return None

    numbers: list[int] = []
    while True:
        ch = cursor.peek()
        if cursor.is_digit_next():
            numbers.append(cursor.number())
        elif ch == ",":
            cursor.advance()
        elif ch == ")":
            cursor.advance()
            break
        else:
            return None

    return numbers[0], numbers[1]


def tokenize_part_1(text: str) -> list[Mul]:
    """Every mul instruction in the text, all enabled."""
    cursor = _Cursor(text)
    ops: list[Mul] = []
    while (ch := cursor.advance()) is not None:
        if ch == "m" and (operands := _read_mul(cursor)) is not None:
            ops.append(Mul(*operands, enabled=True))
    return ops


def _is_parens(cursor: _Cursor) -> bool:
    return cursor.accept("(") and cursor.accept(")")


def tokenize_part_2(text: str) -> list[Mul]:
    """Every mul instruction, enabled or not by the preceding do/don't."""
    cursor = _Cursor(text)
    ops: list[Mul] = []
    enabled = True

    while (ch := cursor.advance()) is not None:
        if ch == "m":
            operands = _read_mul(cursor)
            if operands is not None:
                ops.append(Mul(*operands, enabled=enabled))
        elif ch == "d":
            if not cursor.accept("o"):
                continue
            if _is_parens(cursor):
                enabled = True
                continue
            if not (cursor.accept("n") and cursor.accept("'") and cursor.accept("t")):
                continue
            enabled = False

    return ops


def parse_instructions(ops: Iterable[Mul]) -> int:
    """Sum of the products of the enabled instructions."""
    return sum(op.product() for op in ops if op.enabled)


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(description="Sum multiplications found in stdin.").parse_args(argv)
    text = read_stdin()

    elapsed, result = timed(lambda: parse_instructions(tokenize_part_1(text)))
    print(f"Part 1: {result} in {micros(elapsed)}μs")

    elapsed, result = timed(lambda: parse_instructions(tokenize_part_2(text)))
    print(f"Part 2: {result} in {micros(elapsed)}μs")