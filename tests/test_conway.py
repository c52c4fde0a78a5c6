import random

import pygame
import pytest

from cellsim.conway import ConwaySimulation
from cellsim.life import fill_random, new_grid
from cellsim.patterns import PatternLoader

ROW = [[True, True, True]]
COLUMN = [[True], [True]]


@pytest.fixture
def loader(tmp_path):
    folder = tmp_path / "patterns"
    folder.mkdir()
    (folder / "a_row.txt").write_text("111\n")
    (folder / "b_column.txt").write_text("1\n1\n")
    (folder / "notes.md").write_text("111")
    return PatternLoader(folder)


@pytest.fixture
def sim(loader, tmp_path):
    return ConwaySimulation(5, 5, 50, loader, tmp_path / "save" / "state.txt")


def test_initial_state(sim):
    assert sim.current_pattern == ROW
    assert sim.grid == new_grid(5, 5)
    assert sim.steps == 0
    assert sim.alive_count == 0
    assert sim.paused is False


def test_click_places_pattern(sim):
    sim.click(1, 2)
    assert sim.grid[2] == [False, True, True, True, False]
    assert sim.alive_count == len(ROW[0])


def test_click_clips_outside_grid(sim):
    sim.click(-1, 4)
    assert sim.grid[4] == [True, True, False, False, False]
    assert sim.alive_count == 2


def test_tick_turns_blinker(sim):
    sim.click(1, 2)
    sim.tick()
    assert [row[2] for row in sim.grid] == [False, True, True, True, False]
    assert sim.grid[2] == [False, False, True, False, False]
    assert sim.steps == 1
    assert sim.logger.steps == 1
    assert sim.logger.total_alive_cells == sim.alive_count


def test_blinker_has_period_two(sim):
    sim.click(1, 2)
    start = [row[:] for row in sim.grid]
    sim.tick()
    sim.tick()
    assert sim.grid == start
    assert sim.steps == 2


def test_pause_stops_ticks(sim):
    sim.click(1, 2)
    before = [row[:] for row in sim.grid]
    sim.handle_key(pygame.K_SPACE)
    sim.tick()
    assert sim.paused is True
    assert sim.grid == before
    assert sim.steps == 0
    sim.handle_key(pygame.K_SPACE)
    sim.tick()
    assert sim.steps == 1


def test_speed_keys_and_limits(loader, tmp_path):
    fast = ConwaySimulation(5, 5, 1, loader, tmp_path / "s.txt")
    fast.handle_key(pygame.K_DOWN)
    assert fast.speed == 1
    slow = ConwaySimulation(5, 5, 1000, loader, tmp_path / "s.txt")
    slow.handle_key(pygame.K_UP)
    assert slow.speed == 1000
    slow.handle_key(pygame.K_DOWN)
    assert slow.speed == 999


def test_clear_key_resets_grid_and_steps(sim):
    sim.click(1, 2)
    sim.tick()
    sim.handle_key(pygame.K_c)
    assert sim.alive_count == 0
    assert sim.steps == 0


def test_random_key_uses_rng(sim):
    sim.rng = random.Random(7)
    sim.handle_key(pygame.K_r)
    expected = new_grid(5, 5)
    fill_random(expected, random.Random(7))
    assert sim.grid == expected
    assert all(isinstance(cell, bool) for row in sim.grid for cell in row)


def test_save_and_load_round_trip(sim):
    sim.click(1, 2)
    sim.tick()
    saved = [row[:] for row in sim.grid]
    sim.handle_key(pygame.K_s)
    assert sim.save_file.exists()
    sim.handle_key(pygame.K_c)
    sim.tick()
    sim.handle_key(pygame.K_l)
    assert sim.grid == saved
    assert sim.steps == 1


def test_load_missing_file_keeps_grid(sim, capsys):
    sim.click(0, 0)
    before = [row[:] for row in sim.grid]
    sim.handle_key(pygame.K_l)
    assert sim.grid == before
    assert "Plik nie istnieje" in capsys.readouterr().err


def test_scroll_cycles_patterns(sim):
    sim.scroll(1)
    assert sim.current_pattern == COLUMN
    sim.scroll(1)
    assert sim.current_pattern == ROW
    sim.scroll(-1)
    assert sim.current_pattern == COLUMN


def test_shadow_cells_are_clipped(sim):
    assert list(sim.shadow_cells(3, 4)) == [(3, 4), (4, 4)]
    assert list(sim.shadow_cells(0, 0)) == [(0, 0), (1, 0), (2, 0)]
    assert list(sim.shadow_cells(5, 5)) == []