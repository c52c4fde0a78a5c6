"""Run statistics for a simulation, written to a text summary."""

from __future__ import annotations

import contextlib
import os
import time
from collections.abc import Iterable


class SimulationLogger:
    """Counts steps and live cells over a run and writes a summary."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.total_alive_cells = 0
        self.steps = 0
        self._start_time = time.monotonic()

    def start(self) -> None:
        """Restart the run clock."""
        self._start_time = time.monotonic()

    def log_step(self, grid: Iterable[Iterable[object]]) -> None:
        """Record one step and add its live cells to the running total."""
        self.steps += 1
        self.total_alive_cells += sum(1 for row in grid for cell in row if cell)

    def save(self, filename: str | os.PathLike[str]) -> None:
        """Write the summary to ``filename``; a file that cannot be opened is skipped."""
        duration = int(time.monotonic() - self._start_time)
        summary = (
            f"Nazwa symulacji: {self.name}\n"
            f"Czas trwania: {duration}s\n"
            f"Liczba kroków: {self.steps}\n"
            f"Sumaryczna liczba żywych komórek: {self.total_alive_cells}\n"
        )
        with contextlib.suppress(OSError):
            with open(filename, "w", encoding="utf-8") as file:
                file.write(summary)