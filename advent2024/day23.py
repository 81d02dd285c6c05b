"""Day 23: finding groups of interconnected computers."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator, Sequence

from .helpers import read_stdin, timed
from .iterutils import unique

Triple = tuple[str, str, str]


def parse_input(text: str) -> Iterator[tuple[str, str]]:
    """Connections 'a-b', each returned with its names in order."""
    for line in text.splitlines():
        a, sep, b = line.partition("-")
        if not sep:
            continue
        yield (a, b) if a < b else (b, a)


class Connections:
    """Undirected links between computers."""

    def __init__(self, pairs: Iterable[tuple[str, str]]) -> None:
        self.connections: dict[str, set[str]] = {}
        for a, b in pairs:
            self.connections.setdefault(a, set()).add(b)
            self.connections.setdefault(b, set()).add(a)

    def get_connected(self, computer: str) -> list[Triple] | None:
        """Triangles containing computer, or None if it is unknown."""
        neighbours = self.connections.get(computer)
        if neighbours is None:
            return None
        groups: list[Triple] = []
        seen: set[tuple[str, str]] = set()
        for a in neighbours:
            a_links = self.connections[a]
            for b in neighbours:
                if a == b:
                    continue
                key = (a, b) if a < b else (b, a)
                if b in a_links and key not in seen:
                    seen.add(key)
                    groups.append((computer, a, b))
        return groups

    def sets(self) -> list[Triple]:
        """Every triangle once, with names sorted."""
        triples = (
            tuple(sorted(group))
            for pc in self.connections
            for group in (self.get_connected(pc) or [])
        )
        return list(unique(triples))

    def get_all_connected(self, computer: str) -> set[str]:
        """Computer and its neighbours that share a neighbour with it."""
        neighbours = self.connections[computer]
        return {
            other
            for c in neighbours
            for other in self.connections[c]
            if other == computer or other in neighbours
        }

    def get_all_inter_connected(self, computer: str) -> set[str]:
        connected = self.get_all_connected(computer)
        for other in list(connected):
            connected &= self.get_all_connected(other)
        return connected


def get_most_connected(connections: Connections) -> list[str]:
    """The largest group of mutually linked computers, sorted by name."""
    groups = unique(
        tuple(sorted(connections.get_all_inter_connected(pc)))
        for pc in connections.connections
    )
    best = max(groups, key=len, default=None)
    if best is None:
        raise ValueError("no computers")
    return list(best)


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(description="Find computer groups read from stdin.").parse_args(argv)
    connections = Connections(parse_input(read_stdin()))

    elapsed, t_sets = timed(
        lambda: [s for s in connections.sets() if any(pc.startswith("t") for pc in s)]
    )
    print(f"Part 1: {len(t_sets)} in {int(elapsed * 1000)}ms")

    elapsed, most = timed(lambda: ",".join(get_most_connected(connections)))
    print(f"Part 2: {most} in {int(elapsed * 1000)}ms")