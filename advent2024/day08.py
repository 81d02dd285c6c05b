"""Day 8: antinodes of resonant antennas."""

from __future__ import annotations

import argparse
import string
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field, replace

from .helpers import micros, read_stdin, timed
from .pos import Pos

_ANTENNA_CHARS = frozenset(string.ascii_letters + string.digits)


@dataclass
class AntennaMap:
    """Antenna positions by frequency, plus known antinodes."""

    width: int
    height: int
    nodes: dict[str, list[Pos]] = field(default_factory=dict)
    antinodes: set[Pos] = field(default_factory=set)

    def is_inside(self, pos: Pos) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height


def _antenna_pairs(grid: AntennaMap) -> Iterator[tuple[Pos, Pos, Pos]]:
    """(antenna, other antenna, vector from the first to the other)."""
    for positions in grid.nodes.values():
        for pos in positions:
            for other in positions:
                if other != pos:
                    yield pos, other, other - pos


def create_antinodes(grid: AntennaMap) -> AntennaMap:
    """Antinodes one antenna spacing beyond each pair."""
    antinodes = {
        candidate
        for pos, other, vec in _antenna_pairs(grid)
        for candidate in (other + vec, pos - vec)
        if grid.is_inside(candidate)
    }
    return replace(grid, antinodes=antinodes)


def create_antinodes_extended(grid: AntennaMap) -> AntennaMap:
    """Antinodes at every multiple of the spacing along each pair's line."""
    antinodes: set[Pos] = set()
    for pos, other, vec in _antenna_pairs(grid):
        node = other
        while grid.is_inside(node):
            antinodes.add(node)
            node = node + vec
        node = pos
        while grid.is_inside(node):
            antinodes.add(node)
            node = node - vec
    return replace(grid, antinodes=antinodes)


def create_grid(text: str) -> AntennaMap:
    max_x = 0
    last_y = 0
    nodes: dict[str, list[Pos]] = {}
    antinodes: set[Pos] = set()

    for y, row in enumerate(text.splitlines()):
        for x, ch in enumerate(row):
            max_x = max(max_x, x)
            if ch in _ANTENNA_CHARS:
                nodes.setdefault(ch, []).append(Pos(x, y))
            elif ch == "#":
                antinodes.add(Pos(x, y))
        last_y = y

    return AntennaMap(max_x + 1, last_y + 1, nodes, antinodes)


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(description="Find antinodes in a map read from stdin.").parse_args(argv)
    grid = create_grid(read_stdin())

    elapsed, result = timed(lambda: create_antinodes(grid))
    print(f"Part 1: {len(result.antinodes)} in {micros(elapsed)}μs")

    elapsed, result = timed(lambda: create_antinodes_extended(grid))
    print(f"Part 2: {len(result.antinodes)} in {micros(elapsed)}μs")