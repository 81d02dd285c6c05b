"""Unit direction vectors on the grid."""

from __future__ import annotations

from enum import Enum

from .pos import Pos


class Vector(Enum):
    """The eight neighbouring directions."""

    UP = Pos(0, -1)
    RIGHT = Pos(1, 0)
    DOWN = Pos(0, 1)
    LEFT = Pos(-1, 0)

    UP_LEFT = Pos(-1, -1)
    UP_RIGHT = Pos(1, -1)
    DOWN_LEFT = Pos(-1, 1)
    DOWN_RIGHT = Pos(1, 1)

    def to_pos(self) -> Pos:
        return self.value

    def rotate_clockwise(self) -> Vector:
        return _CLOCKWISE[self]

    def rotate_counter_clockwise(self) -> Vector:
        return _COUNTER_CLOCKWISE[self]

    @classmethod
    def cardinal(cls) -> list[Vector]:
        return [cls.UP, cls.RIGHT, cls.DOWN, cls.LEFT]

    @classmethod
    def diagonal(cls) -> list[Vector]:
        return [cls.UP_LEFT, cls.UP_RIGHT, cls.DOWN_LEFT, cls.DOWN_RIGHT]

    @classmethod
    def all(cls) -> list[Vector]:
        return cls.cardinal() + cls.diagonal()


_CLOCKWISE = {
    Vector.UP: Vector.RIGHT,
    Vector.RIGHT: Vector.DOWN,
    Vector.DOWN: Vector.LEFT,
    Vector.LEFT: Vector.UP,
    Vector.UP_LEFT: Vector.UP_RIGHT,
    Vector.UP_RIGHT: Vector.DOWN_RIGHT,
    Vector.DOWN_LEFT: Vector.UP_LEFT,
    Vector.DOWN_RIGHT: Vector.DOWN_LEFT,
}

_COUNTER_CLOCKWISE = {
    Vector.UP: Vector.LEFT,
    Vector.RIGHT: Vector.UP,
    Vector.DOWN: Vector.RIGHT,
    Vector.LEFT: Vector.DOWN,
    Vector.UP_LEFT: Vector.DOWN_LEFT,
    Vector.UP_RIGHT: Vector.UP_LEFT,
    Vector.DOWN_LEFT: Vector.DOWN_RIGHT,
    Vector.DOWN_RIGHT: Vector.UP_RIGHT,
}

UP = Vector.UP.value
RIGHT = Vector.RIGHT.value
DOWN = Vector.DOWN.value
LEFT = Vector.LEFT.value

UP_LEFT = Vector.UP_LEFT.value
UP_RIGHT = Vector.UP_RIGHT.value
DOWN_LEFT = Vector.DOWN_LEFT.value
DOWN_RIGHT = Vector.DOWN_RIGHT.value

CARDINAL = (UP, RIGHT, DOWN, LEFT)
DIAGONAL = (UP_LEFT, UP_RIGHT, DOWN_LEFT, DOWN_RIGHT)
ALL = CARDINAL + DIAGONAL