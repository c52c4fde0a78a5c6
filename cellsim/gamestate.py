"""Saving and loading a grid with its step counter."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import NamedTuple

_FIELD = re.compile(r"\S+")


class GameState(NamedTuple):
    """A loaded grid and the step it was saved at."""

    grid: list[list[bool]]
    step: int


def save_state(
    grid: list[list[bool]], step: int, filename: str | os.PathLike[str]
) -> None:
    """Write ``grid`` and ``step`` to ``filename``, creating parent directories."""
    if not grid:
        raise ValueError("cannot save an empty grid")
    path = Path(filename)
    if str(path.parent) not in ("", ".") and not path.parent.exists():
        path.parent.mkdir(parents=True)
    lines = [str(step), f"{len(grid)} {len(grid[0])}"]
    lines.extend("".join("1" if cell else "0" for cell in row) for row in grid)
    with open(path, "w", encoding="utf-8", newline="") as out:
        out.write("\n".join(lines) + "\n")


def load_state(filename: str | os.PathLike[str]) -> GameState:
    """Read a grid saved by :func:`save_state`.

    Rows shorter than the declared width are padded with dead cells.
    """
    path = Path(filename)
    if not path.exists():
        raise FileNotFoundError(f"Plik nie istnieje: {path}")
    with open(path, encoding="utf-8", newline="") as source:
        text = source.read()

    fields = []
    for match in _FIELD.finditer(text):
        fields.append(match)
        if len(fields) == 3:
            break
    if len(fields) < 3:
        raise ValueError(f"truncated header in {path}")
    step, rows, cols = (int(field.group()) for field in fields)
    if rows < 0 or cols < 0:
        raise ValueError(f"negative grid size in {path}")

    body = text[fields[2].end() + 1 :]
    lines = body.split("\n")
    grid = []
    for y in range(rows):
        line = lines[y] if y < len(lines) else ""
        row = [False] * cols
        for x, char in enumerate(line[:cols]):
            row[x] = char != "0"
        grid.append(row)
    return GameState(grid, step)