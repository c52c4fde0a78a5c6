"""Langton's ant on a toroidal grid."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Direction(IntEnum):
    """Heading of the ant, in clockwise order."""

    N = 0
    E = 1
    S = 2
    W = 3

    def turned_right(self) -> "Direction":
        return Direction((self + 1) % 4)

    def turned_left(self) -> "Direction":
        return Direction((self + 3) % 4)


_STEPS = {
    Direction.N: (0, -1),
    Direction.E: (1, 0),
    Direction.S: (0, 1),
    Direction.W: (-1, 0),
}


@dataclass
class Ant:
    """An ant that walks a grid of ``max_x`` columns and ``max_y`` rows."""

    x: int
    y: int
    direction: Direction
    max_x: int
    max_y: int

    def move(self, grid: list[list[bool]]) -> None:
        """Turn by the colour of the current cell, flip it and step forward."""
        if grid[self.y][self.x]:
            self.direction = self.direction.turned_left()
            grid[self.y][self.x] = False
        else:
            self.direction = self.direction.turned_right()
            grid[self.y][self.x] = True
        dx, dy = _STEPS[self.direction]
        self.x = (self.x + dx) % self.max_x
        self.y = (self.y + dy) % self.max_y