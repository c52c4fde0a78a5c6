"""Interactive Game of Life: state, controls and the display loop."""

from __future__ import annotations

import os
import random
import sys
from collections.abc import Iterator

import pygame

from cellsim.gamestate import load_state, save_state
from cellsim.life import (
    clear,
    count_alive_cells,
    fill_random,
    new_grid,
    next_generation,
    place_pattern,
)
from cellsim.patterns import PatternLoader
from cellsim.simlog import SimulationLogger
from cellsim.ui import BLACK, WHITE, InfoPanel, draw_grid_lines, make_cell

SAVE_FILE = "save.txt"
LOG_FILE = "log_simulacji.txt"
PATTERN_FOLDER = "patterns"
MIN_SPEED = 1
MAX_SPEED = 1000
INFO_FONT_SIZE = 20
SHADOW_COLOR = (100, 100, 100, 150)


class ConwaySimulation:
    """The grid, the selected pattern and the controls of a Life run."""

    def __init__(
        self,
        columns: int,
        rows: int,
        speed: int,
        patterns: PatternLoader,
        save_file: str | os.PathLike[str] = SAVE_FILE,
    ) -> None:
        self.columns = columns
        self.rows = rows
        self.speed = speed
        self.patterns = patterns
        self.save_file = save_file
        self.grid = new_grid(columns, rows)
        self.steps = 0
        self.paused = False
        self.show_shadow = True
        self.rng = random.Random()
        self.current_pattern = patterns.current()
        self.logger = SimulationLogger("Conway Game of Life")
        self.logger.start()

    @property
    def alive_count(self) -> int:
        """Number of live cells on the grid."""
        return count_alive_cells(self.grid)

    def handle_key(self, key: int) -> None:
        """React to a pressed key (a pygame key code)."""
        if key == pygame.K_s:
            self._save()
        elif key == pygame.K_l:
            self._load()
        elif key == pygame.K_r:
            fill_random(self.grid, self.rng)
        elif key == pygame.K_c:
            clear(self.grid)
            self.steps = 0
        elif key == pygame.K_SPACE:
            self.paused = not self.paused
        elif key == pygame.K_UP:
            self.speed = min(MAX_SPEED, self.speed + 1)
        elif key == pygame.K_DOWN:
            self.speed = max(MIN_SPEED, self.speed - 1)

    def _save(self) -> None:
        try:
            save_state(self.grid, self.steps, self.save_file)
        except (OSError, ValueError) as error:
            print(error, file=sys.stderr)

    def _load(self) -> None:
        try:
            state = load_state(self.save_file)
        except (OSError, ValueError) as error:
            print(error, file=sys.stderr)
            return
        self.grid = state.grid
        self.steps = state.step

    def scroll(self, delta: float) -> None:
        """Select the next pattern on upward scroll, the previous otherwise."""
        if delta > 0:
            self.patterns.next()
        else:
            self.patterns.previous()
        self.current_pattern = self.patterns.current()

    def click(self, grid_x: int, grid_y: int) -> None:
        """Stamp the selected pattern with its corner at (grid_x, grid_y)."""
        place_pattern(self.grid, self.current_pattern, grid_x, grid_y)

    def tick(self) -> None:
        """Advance one generation unless paused."""
        if self.paused:
            return
        self.grid = next_generation(self.grid)
        self.steps += 1
        self.logger.log_step(self.grid)

    def shadow_cells(self, grid_x: int, grid_y: int) -> Iterator[tuple[int, int]]:
        """Yield the on-grid cells the selected pattern would make alive."""
        for py, row in enumerate(self.current_pattern):
            for px, cell in enumerate(row):
                gx, gy = grid_x + px, grid_y + py
                if cell and 0 <= gx < self.columns and 0 <= gy < self.rows:
                    yield gx, gy


def _draw(
    window: pygame.Surface,
    sim: ConwaySimulation,
    cell_size: float,
    ghost: pygame.Surface,
    mouse_cell: tuple[int, int],
) -> None:
    window.fill(WHITE)
    draw_grid_lines(window, cell_size)
    for y, row in enumerate(sim.grid):
        for x, cell in enumerate(row):
            if cell:
                window.fill(BLACK, make_cell(x, y, cell_size))
    if sim.show_shadow:
        for gx, gy in sim.shadow_cells(*mouse_cell):
            window.blit(ghost, make_cell(gx, gy, cell_size))


def run_conway(window: pygame.Surface, speed: int, cell_size: float) -> None:
    """Run the Game of Life in ``window`` until it is closed."""
    width, height = window.get_size()
    sim = ConwaySimulation(
        int(width // cell_size),
        int(height // cell_size),
        speed,
        PatternLoader(PATTERN_FOLDER),
        SAVE_FILE,
    )
    font = pygame.font.Font(None, INFO_FONT_SIZE)
    panel = InfoPanel(width - 260.0, 5.0, font)
    ghost = pygame.Surface((int(cell_size), int(cell_size)), pygame.SRCALPHA)
    ghost.fill(SHADOW_COLOR)

    running = True
    while running:
        mouse_x, mouse_y = pygame.mouse.get_pos()
        mouse_cell = (int(mouse_x // cell_size), int(mouse_y // cell_size))
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                sim.handle_key(event.key)
            elif event.type == pygame.MOUSEWHEEL and event.y:
                sim.scroll(event.y)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                sim.click(*mouse_cell)
        if not running:
            break

        sim.tick()
        _draw(window, sim, cell_size, ghost, mouse_cell)
        panel.update(sim.alive_count, sim.steps)
        panel.draw(window)
        pygame.display.flip()
        pygame.time.wait(sim.speed)

    sim.logger.save(LOG_FILE)