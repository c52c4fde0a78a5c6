"""Conway's Game of Life rules and grid helpers."""

from __future__ import annotations

import random
from collections.abc import Sequence

Grid = list[list[bool]]

_NEIGHBOR_OFFSETS = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)

_default_rng = random.Random()


def new_grid(columns: int, rows: int) -> Grid:
    """Return an empty grid of ``rows`` rows, each ``columns`` cells wide."""
    return [[False] * columns for _ in range(rows)]


def count_alive_cells(grid: Sequence[Sequence[bool]]) -> int:
    """Count the cells that are alive."""
    return sum(list(row).count(True) for row in grid)


def count_alive_neighbors(
    grid: Sequence[Sequence[bool]], x: int, y: int, width: int, height: int
) -> int:
    """Count live cells around (x, y); the grid edges do not wrap."""
    return sum(
        1
        for dx, dy in _NEIGHBOR_OFFSETS
        if 0 <= x + dx < width and 0 <= y + dy < height and grid[y + dy][x + dx]
    )


def next_generation(grid: Sequence[Sequence[bool]]) -> Grid:
    """Return the grid that follows ``grid`` under the B3/S23 rules."""
    height = len(grid)
    width = len(grid[0]) if height else 0
    result: Grid = []
    for y, row in enumerate(grid):
        new_row = []
        for x, cell in enumerate(row):
            alive = count_alive_neighbors(grid, x, y, width, height)
            new_row.append(alive in (2, 3) if cell else alive == 3)
        result.append(new_row)
    return result


def fill_random(grid: Grid, rng: random.Random | None = None) -> None:
    """Set every cell of ``grid`` to a random state, in place."""
    rng = rng if rng is not None else _default_rng
    for row in grid:
        row[:] = [rng.randint(0, 1) == 1 for _ in row]


def clear(grid: Grid) -> None:
    """Kill every cell of ``grid``, in place."""
    for row in grid:
        row[:] = [False] * len(row)


def place_pattern(
    grid: Grid, pattern: Sequence[Sequence[bool]], x: int, y: int
) -> None:
    """Copy ``pattern`` onto ``grid`` with its top-left corner at (x, y).

    Every pattern cell overwrites the grid cell under it; parts that fall
    outside the grid are dropped.
    """
    for py, pattern_row in enumerate(pattern):
        gy = y + py
        if not 0 <= gy < len(grid):
            continue
        target = grid[gy]
        for px, cell in enumerate(pattern_row):
            gx = x + px
            if 0 <= gx < len(target):
                target[gx] = bool(cell)