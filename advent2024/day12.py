"""Day 12: pricing fences around garden plots."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from .helpers import micros, read_stdin, timed
from .pos import Pos
from .vectors import CARDINAL, DOWN, LEFT, RIGHT, UP

Patch = tuple[str, set[Pos]]


@dataclass
class Garden:
    """Plant types laid out in rows; width comes from the first row."""

    data: list[list[str]] = field(default_factory=list)

    @property
    def width(self) -> int:
        return len(self.data[0]) if self.data else 0

    @property
    def height(self) -> int:
        return len(self.data)

    @classmethod
    def from_text(cls, text: str) -> Garden:
        rows = [list(line) for line in text.splitlines()]
        if not rows:
            raise ValueError("garden is empty")
        return cls(rows)

    def get(self, pos: Pos) -> str:
        if not self.is_inside(pos):
            raise IndexError(f"position {pos} outside garden")
        return self.data[pos.y][pos.x]

    def is_inside(self, pos: Pos) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def cells(self) -> Iterator[tuple[str, Pos]]:
        """Every plant with its position, row by row."""
        for y, row in enumerate(self.data):
            for x, plant in enumerate(row):
                yield plant, Pos(x, y)


def _is_different(c: str, pos: Pos, grid: Garden) -> bool:
    return not grid.is_inside(pos) or grid.get(pos) != c


def get_area(c: str, pos: Pos, grid: Garden, visited: set[Pos]) -> set[Pos]:
    """The connected patch of plant c containing pos; marks it visited."""
    visited.add(pos)
    area = {pos}
    stack = [pos]
    while stack:
        current = stack.pop()
        for vec in CARDINAL:
            nxt = current + vec
            if nxt in visited or _is_different(c, nxt, grid):
                continue
            visited.add(nxt)
            area.add(nxt)
            stack.append(nxt)
    return area


def get_all_areas(grid: Garden) -> list[Patch]:
    """Every patch, in the order its first cell appears row by row."""
    visited: set[Pos] = set()
    return [
        (plant, get_area(plant, pos, grid, visited))
        for plant, pos in grid.cells()
        if pos not in visited
    ]


def get_perimeter(c: str, patch: Iterable[Pos], grid: Garden) -> int:
    return sum(
        1 for pos in patch for vec in CARDINAL if _is_different(c, pos + vec, grid)
    )


def _tangents(vec: Pos) -> tuple[Pos, Pos]:
    if vec in (UP, DOWN):
        return LEFT, RIGHT
    if vec in (RIGHT, LEFT):
        return UP, DOWN
    raise ValueError(f"unexpected vector {vec}")


def _visit_direction(
    c: str, pos: Pos, vec: Pos, tangent: Pos, grid: Garden, visited: set[Pos]
) -> None:
    cursor = pos + tangent
    while grid.is_inside(cursor) and grid.get(cursor) == c:
        if not _is_different(c, cursor + vec, grid):
            break
        visited.add(cursor)
        cursor = cursor + tangent


def _sides_facing(c: str, patch: Iterable[Pos], grid: Garden, vec: Pos) -> int:
    visited: set[Pos] = set()
    sides = 0
    for pos in patch:
        if pos in visited:
            continue
        visited.add(pos)
        if _is_different(c, pos + vec, grid):
            for tangent in _tangents(vec):
                _visit_direction(c, pos, vec, tangent, grid, visited)
            sides += 1
    return sides


def get_sides(c: str, patch: Iterable[Pos], grid: Garden) -> int:
    """Number of straight fence sides around the patch."""
    cells = list(patch)
    return sum(_sides_facing(c, cells, grid, vec) for vec in CARDINAL)


def get_total_price(patches: Iterable[Patch], grid: Garden) -> int:
    return sum(get_perimeter(c, patch, grid) * len(patch) for c, patch in patches)


def get_total_price_with_discount(patches: Iterable[Patch], grid: Garden) -> int:
    return sum(get_sides(c, patch, grid) * len(patch) for c, patch in patches)


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(description="Price garden fences for a map read from stdin.").parse_args(argv)
    grid = Garden.from_text(read_stdin())
    areas = get_all_areas(grid)

    elapsed, price = timed(lambda: get_total_price(areas, grid))
    print(f"Part 1: {price} in {micros(elapsed)}μs")

    elapsed, price = timed(lambda: get_total_price_with_discount(areas, grid))
    print(f"Part 2: {price} in {micros(elapsed)}μs")