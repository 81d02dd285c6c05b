"""Day 6: following a patrolling guard around a lab."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from enum import Enum

from .helpers import micros, read_stdin, timed
from .pos import Pos


class Direction(Enum):
    """Facing of the guard."""

    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    def rotate(self) -> Direction:
        """Turn 90 degrees to the right."""
        return _ROTATION[self]

    def vector(self) -> Pos:
        return _VECTORS[self]


_ROTATION = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}

_VECTORS = {
    Direction.UP: Pos(0, -1),
    Direction.RIGHT: Pos(1, 0),
    Direction.DOWN: Pos(0, 1),
    Direction.LEFT: Pos(-1, 0),
}


@dataclass(frozen=True)
class LabMap:
    """The lab's size and the positions of its obstructions."""

    width: int = 0
    height: int = 0
    obstructions: frozenset[Pos] = field(default_factory=frozenset)

    def is_inside(self, pos: Pos) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def is_obstruction(self, pos: Pos) -> bool:
        return pos in self.obstructions

    def with_obstruction(self, pos: Pos) -> LabMap:
        """A copy of the map with one more obstruction."""
        return replace(self, obstructions=self.obstructions | {pos})


@dataclass(frozen=True)
class Guard:
    """Where the guard stands and which way it faces."""

    position: Pos = Pos(0, 0)
    direction: Direction = Direction.UP

    def step(self, grid: LabMap) -> Guard:
        """Turn right until the way ahead is clear, then move one square."""
        direction = self.direction
        next_pos = self.position + direction.vector()
        turns = 0
        while grid.is_obstruction(next_pos):
            if turns >= 4:
                raise RuntimeError(f"guard at {self.position} is boxed in")
            direction = direction.rotate()
            next_pos = self.position + direction.vector()
            turns += 1
        return Guard(next_pos, direction)


def build_grid(text: str) -> tuple[LabMap, Guard]:
    """Parse the lab map and the guard's starting state."""
    max_x = 0
    last_y = 0
    guard = Guard()
    obstructions: set[Pos] = set()

    for y, row in enumerate(text.splitlines()):
        for x, ch in enumerate(row):
            max_x = max(max_x, x)
            if ch == "^":
                guard = Guard(Pos(x, y), Direction.UP)
            elif ch == "#":
                obstructions.add(Pos(x, y))
        last_y = y

    return LabMap(max_x + 1, last_y + 1, frozenset(obstructions)), guard


def get_visited_squares(grid: LabMap, guard: Guard) -> set[Pos]:
    """Every square the guard stands on before leaving the lab."""
    visited = {guard.position}
    while grid.is_inside(guard.position):
        guard = guard.step(grid)
        if grid.is_inside(guard.position):
            visited.add(guard.position)
    return visited


def get_in_loop(grid: LabMap, guard: Guard) -> bool:
    """Whether the guard repeats a state instead of leaving the lab."""
    seen = {guard}
    while grid.is_inside(guard.position):
        guard = guard.step(grid)
        if guard in seen:
            return True
        if not grid.is_inside(guard.position):
            break
        seen.add(guard)
    return False


def create_loops(grid: LabMap, guard: Guard) -> int:
    """Number of single added obstructions that trap the guard in a loop."""
    return sum(
        1
        for x in range(grid.width)
        for y in range(grid.height)
        if get_in_loop(grid.with_obstruction(Pos(x, y)), guard)
    )


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(description="Trace a guard's patrol read from stdin.").parse_args(argv)
    grid, guard = build_grid(read_stdin())

    elapsed, visited = timed(lambda: get_visited_squares(grid, guard))
    print(f"Part 1: {len(visited)} in {micros(elapsed)}μs")

    elapsed, loops = timed(lambda: create_loops(grid, guard))
    print(f"Part 2: {loops} in {int(elapsed)}s")