"""A rectangular grid of values addressed by position."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar, Union

from . import vectors
from .pos import Pos

T = TypeVar("T")

Key = Union[Pos, "tuple[int, int]"]


class Grid(Generic[T]):
    """Rows of values; width comes from the first row."""

    def __init__(self, data: Iterable[Iterable[T]] | None = None) -> None:
        self.data: list[list[T]] = [list(row) for row in data] if data else []

    @property
    def width(self) -> int:
        return len(self.data[0]) if self.data else 0

    @property
    def height(self) -> int:
        return len(self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.data == other.data

    def __repr__(self) -> str:
        return f"Grid({self.data!r})"

    def _coords(self, key: Key) -> tuple[int, int]:
        x, y = (key.x, key.y) if isinstance(key, Pos) else key
        if not self.is_inside(Pos(x, y)):
            raise IndexError(f"position [{x}, {y}] outside grid")
        return x, y

    def __getitem__(self, key: Key) -> T:
        x, y = self._coords(key)
        return self.data[y][x]

    def __setitem__(self, key: Key, value: T) -> None:
        x, y = self._coords(key)
        self.data[y][x] = value

    def get(self, pos: Pos) -> T | None:
        """Value at pos, or None when pos lies outside."""
        if self.is_inside(pos):
            return self.data[pos.y][pos.x]
        return None

    def is_inside(self, pos: Pos) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def cells(self) -> Iterator[tuple[T, Pos]]:
        """Every value with its position, row by row."""
        for y, row in enumerate(self.data):
            for x, value in enumerate(row):
                yield value, Pos(x, y)

    def _neighbours(self, pos: Pos, offsets: Iterable[Pos]) -> Iterator[tuple[T, Pos]]:
        for offset in offsets:
            candidate = pos + offset
            if self.is_inside(candidate):
                yield self.data[candidate.y][candidate.x], candidate

    def adjacent_diagonal(self, pos: Pos) -> Iterator[tuple[T, Pos]]:
        return self._neighbours(pos, vectors.DIAGONAL)

    def adjacent_cardinal(self, pos: Pos) -> Iterator[tuple[T, Pos]]:
        return self._neighbours(pos, vectors.CARDINAL)

    def adjacent(self, pos: Pos) -> Iterator[tuple[T, Pos]]:
        return self._neighbours(pos, vectors.ALL)

    def swap(self, a: Key, b: Key) -> None:
        self[a], self[b] = self[b], self[a]

    def to_char_grid(self) -> Grid[str]:
        """Grid of the first character of each value's text."""
        return Grid([[str(value)[0] for value in row] for row in self.data])

    def __str__(self) -> str:
        return "\n".join("".join(str(value) for value in row) for row in self.data)