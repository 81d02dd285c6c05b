"""Day 15: a robot pushing boxes around a warehouse."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from .grid import Grid
from .helpers import micros, read_stdin, timed
from .iterutils import unique
from .pos import Pos
from .vectors import DOWN, LEFT, RIGHT, UP

BoxPair = tuple[Pos, Pos]


class Block(Enum):
    """What occupies a warehouse square, valued by its map character."""

    EMPTY = "."
    WALL = "#"
    BOX = "O"
    LARGE_BOX_LEFT = "["
    LARGE_BOX_RIGHT = "]"
    ROBOT = "@"

    def __str__(self) -> str:
        return self.value


class Command(Enum):
    """A move instruction for the robot."""

    UP = "^"
    DOWN = "v"
    LEFT = "<"
    RIGHT = ">"

    @property
    def vector(self) -> Pos:
        return _COMMAND_VECTORS[self]


_COMMAND_VECTORS = {
    Command.UP: UP,
    Command.DOWN: DOWN,
    Command.LEFT: LEFT,
    Command.RIGHT: RIGHT,
}

_COMMANDS = {command.value: command for command in Command}

_PARSED_BLOCKS = {
    "#": Block.WALL,
    "O": Block.BOX,
    "@": Block.ROBOT,
    "[": Block.LARGE_BOX_LEFT,
    "]": Block.LARGE_BOX_RIGHT,
}


def _match_vertical(grid: Grid[Block], pos: Pos, vec: Pos) -> list[BoxPair]:
    above = pos + vec
    block = grid.get(above)
    if block is Block.LARGE_BOX_LEFT:
        left, right = above, above + RIGHT
    elif block is Block.LARGE_BOX_RIGHT:
        left, right = above + LEFT, above
    else:
        return []
    return [(left, right), *_large_boxes_in_dir(grid, left, right, vec)]


def _large_boxes_in_dir(grid: Grid[Block], left: Pos, right: Pos, vec: Pos) -> list[BoxPair]:
    """Large boxes pushed along by the box at (left, right) moving by vec."""
    if vec == LEFT:
        nxt = left + vec
        if grid.get(nxt) is Block.LARGE_BOX_RIGHT:
            return [(nxt + vec, nxt), *_large_boxes_in_dir(grid, nxt + vec, nxt, vec)]
        return []
    if vec == RIGHT:
        nxt = right + vec
        if grid.get(nxt) is Block.LARGE_BOX_LEFT:
            return [(nxt, nxt + vec), *_large_boxes_in_dir(grid, nxt, nxt + vec, vec)]
        return []
    if vec == UP or vec == DOWN:
        boxes = _match_vertical(grid, left, vec) + _match_vertical(grid, right, vec)
        descending = vec == UP
        return sorted(boxes, key=lambda box: -box[1].y if descending else box[1].y)
    raise ValueError(f"unexpected vector {vec}")


def _is_moveable(grid: Grid[Block], pos: Pos) -> bool:
    return grid.get(pos) in (Block.EMPTY, Block.LARGE_BOX_LEFT, Block.LARGE_BOX_RIGHT)


def _can_move_large_box(grid: Grid[Block], left: Pos, right: Pos, vec: Pos) -> bool:
    if vec == LEFT:
        return _is_moveable(grid, left + vec)
    if vec == RIGHT:
        return _is_moveable(grid, right + vec)
    if vec == UP or vec == DOWN:
        return _is_moveable(grid, left + vec) and _is_moveable(grid, right + vec)
    raise ValueError(f"unexpected vector {vec}")


def _move_large_box(grid: Grid[Block], left: Pos, right: Pos, vec: Pos) -> None:
    if vec == LEFT:
        grid.swap(left + vec, left)
        grid.swap(right, left)
    elif vec == RIGHT:
        grid.swap(right + vec, right)
        grid.swap(left, right)
    elif vec == UP or vec == DOWN:
        grid.swap(left, left + vec)
        grid.swap(right, right + vec)
    else:
        raise ValueError(f"unexpected vector {vec}")


@dataclass
class Warehouse:
    """The warehouse grid and where the robot stands in it."""

    robot: Pos
    grid: Grid[Block]

    def copy(self) -> Warehouse:
        return Warehouse(self.robot, Grid(self.grid.data))

    def expand(self) -> Warehouse:
        """A warehouse twice as wide, with boxes turned into large boxes."""
        rows: list[list[Block]] = []
        robot = Pos()
        for y, row in enumerate(self.grid.data):
            line: list[Block] = []
            for block in row:
                if block is Block.ROBOT:
                    robot = Pos(len(line), y)
                    line += [Block.ROBOT, Block.EMPTY]
                elif block is Block.BOX:
                    line += [Block.LARGE_BOX_LEFT, Block.LARGE_BOX_RIGHT]
                else:
                    line += [block, block]
            rows.append(line)
        return Warehouse(robot, Grid(rows))

    def _advance(self, nxt: Pos) -> None:
        self.grid.swap(self.robot, nxt)
        self.robot = nxt

    def _push_boxes(self, nxt: Pos, vec: Pos) -> None:
        last = nxt
        while self.grid.get(last + vec) is Block.BOX:
            last = last + vec
        if self.grid.get(last + vec) is Block.EMPTY:
            self.grid.swap(last, last + vec)
            self.grid.swap(nxt, last)
            self._advance(nxt)

    def _push_large_boxes(self, nxt: Pos, left: Pos, right: Pos, vec: Pos) -> None:
        boxes = list(unique([(left, right), *_large_boxes_in_dir(self.grid, left, right, vec)]))
        if all(_can_move_large_box(self.grid, l, r, vec) for l, r in reversed(boxes)):
            for l, r in reversed(boxes):
                _move_large_box(self.grid, l, r, vec)
            self._advance(nxt)

    def run(self, command: Command) -> Warehouse:
        """Apply one command in place and return this warehouse."""
        vec = command.vector
        nxt = self.robot + vec
        block = self.grid.get(nxt)

        if block is None:
            raise IndexError(f"out of bounds: {nxt}")
        if block is Block.WALL:
            return self
        if block is Block.BOX:
            self._push_boxes(nxt, vec)
        elif block is Block.LARGE_BOX_LEFT:
            self._push_large_boxes(nxt, nxt, nxt + RIGHT, vec)
        elif block is Block.LARGE_BOX_RIGHT:
            self._push_large_boxes(nxt, nxt + LEFT, nxt, vec)
        elif block is Block.EMPTY:
            self._advance(nxt)
        else:
            raise RuntimeError(f"multiple robots?\n{self.grid}")
        return self

    def run_all(self, commands: Iterable[Command]) -> Warehouse:
        """Apply every command in place and return this warehouse."""
        for command in commands:
            self.run(command)
        return self

    def get_box_coords(self) -> int:
        """Sum of 100 * y + x over the boxes (left halves of large ones)."""
        return sum(
            100 * pos.y + pos.x
            for block, pos in self.grid.cells()
            if block in (Block.BOX, Block.LARGE_BOX_LEFT)
        )


def parse_map(text: str) -> Warehouse:
    robot = Pos()
    rows: list[list[Block]] = []
    for y, line in enumerate(text.splitlines()):
        row = []
        for x, ch in enumerate(line):
            block = _PARSED_BLOCKS.get(ch, Block.EMPTY)
            if block is Block.ROBOT:
                robot = Pos(x, y)
            row.append(block)
        rows.append(row)
    return Warehouse(robot, Grid(rows))


def parse_commands(text: str) -> list[Command]:
    """Commands from arrow characters; anything else is ignored."""
    return [_COMMANDS[ch] for ch in text if ch in _COMMANDS]


def parse_input(text: str) -> tuple[Warehouse, list[Command]]:
    map_text, sep, commands = text.partition("\n\n")
    if not sep:
        raise ValueError("missing blank line between map and commands")
    return parse_map(map_text), parse_commands(commands)


def main(argv: Sequence[str] | None = None) -> None:
    argparse.ArgumentParser(description="Move warehouse boxes read from stdin.").parse_args(argv)
    warehouse, commands = parse_input(read_stdin())

    elapsed, small = timed(lambda: warehouse.copy().run_all(commands))
    print(f"Part 1: {small.get_box_coords()} in {micros(elapsed)}μs")

    elapsed, large = timed(lambda: warehouse.expand().run_all(commands))
    print(f"Part 2: {large.get_box_coords()} in {micros(elapsed)}μs")