"""Start screen and menus that lead to a simulation."""

from __future__ import annotations

import argparse
import os
import re
import sys
from enum import Enum, auto

import pygame

from cellsim.conway import run_conway
from cellsim.gamestate import load_state
from cellsim.langton import run_langtons_ant
from cellsim.ui import WHITE, Button

WINDOW_SIZE = (1000, 1000)
SAVE_FILE = "save.txt"
BACKGROUND_FILE = "puls.png"

SMALL_CELL = 25.0
MEDIUM_CELL = 20.0
LARGE_CELL = 10.0

_SPEED_PATTERN = re.compile(r"[0-9]{1,3}")
_DIGITS = frozenset("0123456789")
_BACKSPACE = "\b"
_BACKGROUND_COLOR = (0, 0, 0)


class AppState(Enum):
    """Screens of the application, in the order they are shown."""

    START = auto()
    MENU = auto()
    SIZE_SELECTION = auto()
    SPEED_INPUT = auto()
    SIMULATION = auto()


class SimulationType(Enum):
    """The simulation chosen in the menu."""

    NONE = auto()
    LANGTON = auto()
    GAME_OF_LIFE = auto()


class Menu:
    """Choices made on the way from the start screen to a simulation."""

    def __init__(self, save_file: str | os.PathLike[str] = SAVE_FILE) -> None:
        self.save_file = save_file
        self.state = AppState.START
        self.sim_type = SimulationType.NONE
        self.cell_size: float | None = None
        self.speed_input = ""

    def click_start(self) -> None:
        """Leave the start screen for the simulation menu."""
        if self.state is AppState.START:
            self.state = AppState.MENU

    def click_load(self) -> bool:
        """Try to load the saved state; on success go straight to the simulation."""
        if self.state is not AppState.START:
            return False
        try:
            load_state(self.save_file)
        except (OSError, ValueError) as error:
            print(error, file=sys.stderr)
            print("blad wczytywania")
            return False
        self.state = AppState.SIMULATION
        return True

    def choose_simulation(self, sim_type: SimulationType) -> None:
        """Pick the simulation to run and move on to the board size."""
        if self.state is not AppState.MENU:
            return
        if sim_type is SimulationType.NONE:
            raise ValueError("a simulation must be chosen")
        self.sim_type = sim_type
        self.state = AppState.SIZE_SELECTION

    def choose_size(self, cell_size: float) -> None:
        """Pick the cell size and move on to the speed prompt."""
        if self.state is not AppState.SIZE_SELECTION:
            return
        if cell_size <= 0:
            raise ValueError(f"cell size must be positive, got {cell_size!r}")
        self.cell_size = float(cell_size)
        self.state = AppState.SPEED_INPUT

    def enter_text(self, char: str, start_requested: bool) -> None:
        """Handle one typed character of the speed prompt.

        Digits are appended and a backspace removes the last one; other
        characters are ignored. Once the input is a positive number of at
        most three digits, ``start_requested`` starts the simulation.
        """
        if self.state is not AppState.SPEED_INPUT:
            return
        if char == _BACKSPACE:
            self.speed_input = self.speed_input[:-1]
        elif char in _DIGITS:
            self.speed_input += char

        if _SPEED_PATTERN.fullmatch(self.speed_input):
            speed = int(self.speed_input)
            if speed > 0:
                if start_requested:
                    self.state = AppState.SIMULATION
                print(f"Uruchamianie symulacji z predkoscia: {speed} ms")
            else:
                print("Podaj liczbe wieksza od zera")
                self.speed_input = ""

    def speed(self) -> int:
        """Return the entered delay between steps, in milliseconds."""
        if not self.speed_input:
            raise ValueError("no speed entered")
        return int(self.speed_input)


def _centered_text(
    font: pygame.font.Font, text: str, center: tuple[float, float]
) -> tuple[pygame.Surface, pygame.Rect]:
    rendered = font.render(text, True, WHITE)
    return rendered, rendered.get_rect(center=(int(center[0]), int(center[1])))


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cellsim", description="Langton's ant and Conway's Game of Life."
    )
    parser.add_argument(
        "--background", default=BACKGROUND_FILE, help="image shown on the start screen"
    )
    parser.add_argument(
        "--save-file", default=SAVE_FILE, help="file the saved state is loaded from"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the menus and the chosen simulation."""
    args = _parse_args(argv)
    pygame.init()
    try:
        return _run(args)
    finally:
        pygame.quit()


def _run(args: argparse.Namespace) -> int:
    window = pygame.display.set_mode(WINDOW_SIZE)
    pygame.display.set_caption("Symulacje")
    try:
        background = pygame.image.load(args.background)
    except (pygame.error, OSError):
        print("Błąd ładowania tła", file=sys.stderr)
        return 1
    background = pygame.transform.scale(background, window.get_size())

    button_font = pygame.font.Font(None, 30)
    title_font = pygame.font.Font(None, 70)
    label_font = pygame.font.Font(None, 30)
    input_font = pygame.font.Font(None, 24)
    center_x = window.get_width() / 2

    start_button = Button("Start", (350, 400), (300, 80), button_font)
    load_button = Button("", (0, 0), (0, 0), button_font)
    langton_button = Button("Langton's Ant", (350, 300), (300, 80), button_font)
    life_button = Button("Game of Life", (350, 400), (300, 80), button_font)
    size_buttons = [
        (Button("Mala", (350, 250), (300, 70), button_font), SMALL_CELL),
        (Button("Srednia", (350, 350), (300, 70), button_font), MEDIUM_CELL),
        (Button("Duza", (350, 450), (300, 70), button_font), LARGE_CELL),
    ]

    start_title = _centered_text(title_font, "CONWAY'S GAME OF LIFE", (center_x, 300))
    title_text = _centered_text(label_font, "Wybierz symulacje:", (center_x, 200))
    size_text = _centered_text(label_font, "Wybierz rozmiar planszy:", (center_x, 200))
    speed_text = _centered_text(label_font, "Podaj predkosc (ms):", (center_x, 300))

    menu = Menu(args.save_file)
    clock = pygame.time.Clock()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                _handle_click(
                    menu,
                    event.pos,
                    start_button,
                    load_button,
                    langton_button,
                    life_button,
                    size_buttons,
                )
            elif event.type == pygame.TEXTINPUT and menu.state is AppState.SPEED_INPUT:
                start_requested = bool(pygame.key.get_pressed()[pygame.K_s])
                for char in event.text:
                    menu.enter_text(char, start_requested)
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_BACKSPACE:
                menu.enter_text(_BACKSPACE, False)
        if not running:
            break

        if menu.state is AppState.SIMULATION and menu.cell_size is not None:
            if menu.sim_type is SimulationType.LANGTON:
                run_langtons_ant(window, menu.speed(), menu.cell_size)
                break
            if menu.sim_type is SimulationType.GAME_OF_LIFE:
                run_conway(window, menu.speed(), menu.cell_size)
                break

        window.fill(_BACKGROUND_COLOR)
        if menu.state is AppState.START:
            window.blit(background, (0, 0))
            window.blit(*start_title)
            start_button.draw(window)
            load_button.draw(window)
        elif menu.state is AppState.MENU:
            window.blit(*title_text)
            langton_button.draw(window)
            life_button.draw(window)
        elif menu.state is AppState.SIZE_SELECTION:
            window.blit(*size_text)
            for button, _ in size_buttons:
                button.draw(window)
        elif menu.state is AppState.SPEED_INPUT:
            window.blit(*speed_text)
            window.blit(input_font.render(menu.speed_input, True, WHITE), (350, 350))
        pygame.display.flip()
        clock.tick(60)
    return 0


def _handle_click(
    menu: Menu,
    pos: tuple[int, int],
    start_button: Button,
    load_button: Button,
    langton_button: Button,
    life_button: Button,
    size_buttons: list[tuple[Button, float]],
) -> None:
    if menu.state is AppState.START:
        if start_button.is_clicked(pos):
            menu.click_start()
        elif load_button.is_clicked(pos):
            menu.click_load()
    elif menu.state is AppState.MENU:
        if langton_button.is_clicked(pos):
            menu.choose_simulation(SimulationType.LANGTON)
        elif life_button.is_clicked(pos):
            menu.choose_simulation(SimulationType.GAME_OF_LIFE)
    elif menu.state is AppState.SIZE_SELECTION:
        for button, cell_size in size_buttons:
            if button.is_clicked(pos):
                menu.choose_size(cell_size)
                break


if __name__ == "__main__":
    sys.exit(main())