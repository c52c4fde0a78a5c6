"""Loading placeable patterns from a folder of text files."""

from __future__ import annotations

import os
from pathlib import Path

Pattern = list[list[bool]]


def load_pattern(path: str | os.PathLike[str]) -> Pattern:
    """Read a pattern: one row per line, ``1`` marks a live cell."""
    with open(path, encoding="utf-8", newline="") as source:
        text = source.read()
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [[char == "1" for char in line] for line in lines]


class PatternLoader:
    """The ``.txt`` patterns of a folder, with a movable current selection."""

    def __init__(self, folder: str | os.PathLike[str]) -> None:
        self.folder = Path(folder)
        self.patterns: list[Pattern] = []
        self.index = 0
        self.load_patterns()

    def load_patterns(self) -> None:
        """Reload every pattern from the folder and select the first."""
        self.index = 0
        self.patterns = [
            load_pattern(entry)
            for entry in sorted(self.folder.iterdir())
            if entry.suffix == ".txt"
        ]

    def current(self) -> Pattern:
        """Return the selected pattern."""
        if not self.patterns:
            raise IndexError(f"no patterns in {self.folder}")
        return self.patterns[self.index]

    def next(self) -> None:
        """Select the following pattern, wrapping around."""
        if self.patterns:
            self.index = (self.index + 1) % len(self.patterns)

    def previous(self) -> None:
        """Select the preceding pattern, wrapping around."""
        if self.patterns:
            self.index = (self.index - 1) % len(self.patterns)