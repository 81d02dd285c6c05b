"""Integer 2D positions."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _round_half_away(value: float) -> int:
    rounded = math.floor(abs(value) + 0.5)
    return rounded if value >= 0 else -rounded


@dataclass(frozen=True)
class Pos:
    """A point or offset on an integer grid; y grows downwards."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Pos) -> Pos:
        if not isinstance(other, Pos):
            return NotImplemented
        return Pos(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Pos | int) -> Pos:
        if isinstance(other, Pos):
            return Pos(self.x - other.x, self.y - other.y)
        if isinstance(other, int):
            return Pos(self.x - other, self.y - other)
        return NotImplemented

    def __mul__(self, factor: int) -> Pos:
        if not isinstance(factor, int):
            return NotImplemented
        return Pos(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"[{self.x}, {self.y}]"

    def distance(self, other: Pos) -> float:
        """Distance heuristic: sqrt(dx * dx + 2 * dy)."""
        dx = abs(self.x - other.x)
        dy = abs(self.y - other.y)
        return math.sqrt(dx * dx + (dy + dy))

    def manhattan_distance(self, other: Pos) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def normalize(self) -> tuple[float, float]:
        """Unit vector in the direction of this position."""
        length = math.sqrt(self.x * self.x + self.y * self.y)
        return self.x / length, self.y / length

    def normalize_int(self) -> Pos:
        x, y = self.normalize()
        return Pos(_round_half_away(x), _round_half_away(y))