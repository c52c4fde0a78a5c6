"""Widgets and drawing helpers shared by the menu and the simulations."""

from __future__ import annotations

import math
from collections.abc import Sequence

import pygame

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
GRID_LINE_COLOR = (200, 200, 200)

_PANEL_BORDER_SIZE = (200, 90)
_PANEL_BACKGROUND_SIZE = (190, 80)
_BUTTON_TEXT_LIFT = 6


def make_cell(x: int, y: int, cell_size: float) -> pygame.Rect:
    """Return the screen rectangle of grid cell (x, y)."""
    size = int(cell_size)
    return pygame.Rect(int(x * cell_size), int(y * cell_size), size, size)


def draw_grid_lines(surface: pygame.Surface, cell_size: float) -> None:
    """Draw light grey grid lines across the whole surface."""
    step = int(cell_size)
    if step <= 0:
        raise ValueError(f"cell size must be positive, got {cell_size!r}")
    width, height = surface.get_size()
    for x in range(0, width + 1, step):
        pygame.draw.line(surface, GRID_LINE_COLOR, (x, 0), (x, height))
    for y in range(0, height + 1, step):
        pygame.draw.line(surface, GRID_LINE_COLOR, (0, y), (width, y))


class Button:
    """A white rectangle with a centred black label."""

    def __init__(
        self,
        label: str,
        position: Sequence[float],
        size: Sequence[float],
        font: pygame.font.Font,
    ) -> None:
        self.label = label
        self.rect = pygame.Rect(
            int(position[0]), int(position[1]), int(size[0]), int(size[1])
        )
        self._text = font.render(label, True, BLACK)

    def is_clicked(self, mouse_pos: Sequence[float]) -> bool:
        """Tell whether ``mouse_pos`` lies inside the button."""
        point = (math.floor(mouse_pos[0]), math.floor(mouse_pos[1]))
        return bool(self.rect.collidepoint(point))

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the button onto ``surface``."""
        if self.rect.width > 0 and self.rect.height > 0:
            pygame.draw.rect(surface, WHITE, self.rect)
        text_rect = self._text.get_rect(center=self.rect.center)
        text_rect.y -= _BUTTON_TEXT_LIFT
        surface.blit(self._text, text_rect)


class InfoPanel:
    """A framed box showing the live cell count and the step number."""

    def __init__(self, x: float, y: float, font: pygame.font.Font) -> None:
        x, y = int(x), int(y)
        self.border = pygame.Rect((x, y), _PANEL_BORDER_SIZE)
        self.background = pygame.Rect((x + 5, y + 5), _PANEL_BACKGROUND_SIZE)
        self.text_position = (x + 10, y + 13)
        self.text = ""
        self._font = font

    def update(self, alive_count: int, steps: int) -> None:
        """Set the panel text for the current state."""
        self.text = f"Zywe komorki: {alive_count}\nKroki: {steps}"

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the panel onto ``surface``."""
        pygame.draw.rect(surface, BLACK, self.border)
        pygame.draw.rect(surface, WHITE, self.background)
        underlined = self._font.get_underline()
        self._font.set_underline(True)
        try:
            line_height = self._font.get_linesize()
            text_x, text_y = self.text_position
            for number, line in enumerate(self.text.split("\n")):
                rendered = self._font.render(line, True, RED)
                surface.blit(rendered, (text_x, text_y + number * line_height))
        finally:
            self._font.set_underline(underlined)