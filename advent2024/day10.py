"""Day 10: scoring hiking trails on a topographic map."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from .helpers import micros, read_stdin, timed
from .pos import Pos
from .vectors import CARDINAL

BLOCKED = 255
"""Height used for impassable squares, and for trail ends already counted."""


def _height(ch: str) -> int:
    return BLOCKED if ch == "." else ord(ch) - ord("0")


@dataclass
class TopoMap:
    """Heights 0 to 9 laid out in rows; width comes from the first row."""

    data: list[list[int]] = field(default_factory=list)

    @property
    def width(self) -> int:
        return len(self.data[0]) if self.data else 0

    @property
    def height(self) -> int:
        return len(self.data)

    @classmethod
    def from_text(cls, text: str) -> TopoMap:
        rows = [[_height(ch) for ch in line] for line in text.splitlines()]
        if not rows:
            raise ValueError("map is empty")
        return cls(rows)

    def get(self, x: int, y: int) -> int:
        if not self.is_inside(x, y):
            raise IndexError(f"Pos: [{x}, {y}] not inside grid")
        return self.data[y][x]

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self) -> Iterator[tuple[int, Pos]]:
        """Every height with its position, row by row."""
        for y, row in enumerate(self.data):
            for x, value in enumerate(row[: self.width]):
                yield value, Pos(x, y)

    def copy(self) -> TopoMap:
        return TopoMap([list(row) for row in self.data])


def _neighbours(grid: TopoMap, pos: Pos) -> Iterator[Pos]:
    for vec in CARDINAL:
        candidate = pos + vec
        if grid.is_inside(candidate.x, candidate.y):
            yield candidate


def _search_for_trails(grid: TopoMap, pos: Pos) -> int:
    """Count reachable 9s, blanking each one once it is counted."""
    current = grid.get(pos.x, pos.y)
    score = 0
    for nxt in _neighbours(grid, pos):
        node = grid.get(nxt.x, nxt.y)
        if current == 8 and node == 9:
            score += 1
            grid.data[nxt.y][nxt.x] = BLOCKED
        elif node == current + 1:
            score += _search_for_trails(grid, nxt)
    return score


def _search_for_trails_distinct(grid: TopoMap, pos: Pos) -> int:
    """Count distinct uphill paths to any 9."""
    current = grid.get(pos.x, pos.y)
    score = 0
    for nxt in _neighbours(grid, pos):
        node = grid.get(nxt.x, nxt.y)
        if current == 8 and node == 9:
            score += 1
        elif node == current + 1:
            score += _search_for_trails_distinct(grid, nxt)
    return score


def find_trails(grid: TopoMap) -> int:
    """Sum over trailheads of the number of 9s each can reach."""
    return sum(
        _search_for_trails(grid.copy(), pos) for value, pos in grid.cells() if value == 0
    )


def find_trails_distinct(grid: TopoMap) -> int:
    """Sum over trailheads of the number of distinct trails from each."""
    return sum(
        _search_for_trails_distinct(grid, pos) for value, pos in grid.cells() if value == 0
    )


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(description="Score hiking trails on a map read from stdin.").parse_args(argv)
    grid = TopoMap.from_text(read_stdin())

    elapsed, score = timed(lambda: find_trails(grid))
    print(f"Part 1: {score} in {micros(elapsed)}μs")

    elapsed, score = timed(lambda: find_trails_distinct(grid))
    print(f"Part 2: {score} in {micros(elapsed)}μs")