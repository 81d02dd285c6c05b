"""Day 25: fitting keys into locks."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass, field

from .helpers import read_stdin

Heights = tuple[int, int, int, int, int]

_WIDTH = 5
_BODY_ROWS = range(1, 6)


def _heights(rows: list[str]) -> Heights:
    return tuple(
        sum(1 for y in _BODY_ROWS if rows[y][x] == "#") for x in range(_WIDTH)
    )  # type: ignore[return-value]


@dataclass
class Schematics:
    """Pin heights of the keys and locks, in input order."""

    keys: list[Heights] = field(default_factory=list)
    locks: list[Heights] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> Schematics:
        """Blocks separated by blank lines; a filled top row marks a lock."""
        schematics = cls()
        for block in text.split("\n\n"):
            rows = block.splitlines()
            heights = _heights(rows)
            if all(ch == "#" for ch in rows[0]):
                schematics.locks.append(heights)
            else:
                schematics.keys.append(heights)
        return schematics

    def find_matches(self) -> list[tuple[Heights, Heights]]:
        """Every (lock, key) pair whose pins do not overlap."""
        return [
            (lock, key)
            for lock in self.locks
            for key in self.keys
            if all(a + b <= 5 for a, b in zip(lock, key))
        ]


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(description="Match keys and locks read from stdin.").parse_args(argv)
    schematics = Schematics.from_text(read_stdin())
    print(f"Part 1: {len(schematics.find_matches())}")