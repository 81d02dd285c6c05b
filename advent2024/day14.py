"""Day 14: robots patrolling a wrapping lobby."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from .helpers import micros, read_stdin, timed
from .pos import Pos


@dataclass(frozen=True)
class Robot:
    position: Pos
    velocity: Pos


@dataclass(frozen=True)
class Lobby:
    """A lobby whose edges wrap around, and the robots in it."""

    width: int
    height: int
    robots: tuple[Robot, ...] = field(default_factory=tuple)

    def wrap_position(self, pos: Pos) -> Pos:
        return Pos(pos.x % self.width, pos.y % self.height)

    def step_robot(self, robot: Robot, steps: int) -> Robot:
        moved = robot.position + robot.velocity * steps
        return replace(robot, position=self.wrap_position(moved))

    def simulate(self, steps: int) -> Lobby:
        """The lobby after every robot has moved for the given steps."""
        return replace(self, robots=tuple(self.step_robot(r, steps) for r in self.robots))

    def count_quadrants(self) -> int:
        """Product of robot counts per quadrant; middle lines are ignored."""
        x_middle = self.width // 2
        y_middle = self.height // 2
        counts = {(False, False): 0, (True, False): 0, (False, True): 0, (True, True): 0}
        for robot in self.robots:
            x, y = robot.position.x, robot.position.y
            if x == x_middle or y == y_middle:
                continue
            counts[(x > x_middle, y > y_middle)] += 1
        product = 1
        for count in counts.values():
            product *= count
        return product

    def is_tree(self) -> bool:
        """Whether no two robots share a position."""
        positions = [robot.position for robot in self.robots]
        return len(set(positions)) == len(positions)


def _parse_number(part: str) -> int:
    kept = "".join(ch for ch in part if (ch.isascii() and ch.isdigit()) or ch == "-")
    return int(kept)


def parse_positions(text: str) -> list[Robot]:
    """Robots from lines such as 'p=0,4 v=3,-3'."""
    robots = []
    for line in text.splitlines():
        parts = line.replace(" ", ",").split(",")
        if len(parts) < 4:
            raise ValueError(f"malformed robot line {line!r}")
        px, py, vx, vy = (_parse_number(part) for part in parts[:4])
        robots.append(Robot(Pos(px, py), Pos(vx, vy)))
    return robots


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(description="Simulate lobby robots read from stdin.").parse_args(argv)
    lobby = Lobby(101, 103, tuple(parse_positions(read_stdin())))

    elapsed, safety = timed(lambda: lobby.simulate(100).count_quadrants())
    print(f"Part 1: {safety} in {micros(elapsed)}μs")

    def find_tree() -> int:
        current = lobby
        iterations = 0
        while not current.is_tree():
            current = current.simulate(1)
            iterations += 1
        return iterations

    elapsed, iterations = timed(find_tree)
    print(f"Part 2: {iterations} in {int(elapsed * 1000)}ms")