"""Interactive Langton's ant: state, controls and the display loop."""

from __future__ import annotations

import pygame

from cellsim.ant import Ant, Direction
from cellsim.life import clear, new_grid
from cellsim.simlog import SimulationLogger
from cellsim.ui import BLACK, RED, WHITE, InfoPanel, draw_grid_lines, make_cell

LOG_FILE = "log_simulacji.txt"
MIN_SPEED = 1
MAX_SPEED = 1000
INFO_FONT_SIZE = 20


class LangtonSimulation:
    """The grid, the ant and the controls of a Langton's ant run."""

    def __init__(self, columns: int, rows: int, speed: int) -> None:
        self.columns = columns
        self.rows = rows
        self.speed = speed
        self.paused = False
        self.grid = new_grid(columns, rows)
        self.steps = 0
        self.ant = self._new_ant()
        self.logger = SimulationLogger("Langton's Ant")
        self.logger.start()

    def _new_ant(self) -> Ant:
        return Ant(
            self.columns // 2, self.rows // 2, Direction.N, self.columns, self.rows
        )

    def reset(self) -> None:
        """Clear the grid and put a fresh ant in the middle."""
        clear(self.grid)
        self.ant = self._new_ant()
        self.steps = 0

    def handle_key(self, key: int) -> None:
        """React to a pressed key (a pygame key code)."""
        if key == pygame.K_SPACE:
            self.paused = not self.paused
        elif key == pygame.K_r:
            self.reset()
        elif key == pygame.K_UP:
            self.speed = max(MIN_SPEED, self.speed - 1)
        elif key == pygame.K_DOWN:
            self.speed = min(MAX_SPEED, self.speed + 1)

    def tick(self) -> None:
        """Move the ant once unless paused."""
        if self.paused:
            return
        self.ant.move(self.grid)
        self.steps += 1
        self.logger.log_step(self.grid)


def run_langtons_ant(window: pygame.Surface, speed: int, cell_size: float) -> None:
    """Run Langton's ant in ``window`` until it is closed."""
    width, height = window.get_size()
    sim = LangtonSimulation(int(width // cell_size), int(height // cell_size), speed)
    font = pygame.font.Font(None, INFO_FONT_SIZE)
    panel = InfoPanel(width - 260.0, 5.0, font)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                sim.handle_key(event.key)
        if not running:
            break

        sim.tick()
        window.fill(WHITE)
        draw_grid_lines(window, cell_size)
        for y, row in enumerate(sim.grid):
            for x, cell in enumerate(row):
                if cell:
                    window.fill(BLACK, make_cell(x, y, cell_size))
        window.fill(RED, make_cell(sim.ant.x, sim.ant.y, cell_size))
        panel.update(0, sim.steps)
        panel.draw(window)
        pygame.display.flip()
        pygame.time.wait(sim.speed)

    sim.logger.save(LOG_FILE)