import pytest

from cellsim.ant import Ant, Direction


def empty(columns, rows):
    return [[False] * columns for _ in range(rows)]


def test_white_cell_turns_right_and_paints():
    grid = empty(5, 5)
    ant = Ant(2, 2, Direction.N, 5, 5)
    ant.move(grid)
    assert grid[2][2] is True
    assert ant.direction is Direction.E
    assert (ant.x, ant.y) == (3, 2)


def test_black_cell_turns_left_and_clears():
    grid = empty(5, 5)
    grid[2][2] = True
    ant = Ant(2, 2, Direction.N, 5, 5)
    ant.move(grid)
    assert grid[2][2] is False
    assert ant.direction is Direction.W
    assert (ant.x, ant.y) == (1, 2)


def test_moves_wrap_around_edges():
    grid = empty(4, 3)
    ant = Ant(3, 0, Direction.N, 4, 3)
    ant.move(grid)
    assert ant.x == 0
    grid[0][0] = True
    ant = Ant(0, 0, Direction.E, 4, 3)
    ant.move(grid)
    assert ant.direction is Direction.N
    assert ant.y == 2


def test_four_moves_on_empty_grid_return_home():
    grid = empty(6, 6)
    ant = Ant(3, 3, Direction.N, 6, 6)
    for _ in range(4):
        ant.move(grid)
    assert (ant.x, ant.y, ant.direction) == (3, 3, Direction.N)
    assert sum(row.count(True) for row in grid) == 4


@pytest.mark.parametrize(
    "start, expected, position",
    [
        (Direction.N, Direction.E, (3, 2)),
        (Direction.E, Direction.S, (2, 3)),
        (Direction.S, Direction.W, (1, 2)),
        (Direction.W, Direction.N, (2, 1)),
    ],
)
def test_turns_right_from_every_direction(start, expected, position):
    grid = empty(5, 5)
    ant = Ant(2, 2, start, 5, 5)
    ant.move(grid)
    assert ant.direction is expected
    assert (ant.x, ant.y) == position


@pytest.mark.parametrize(
    "start, expected, position",
    [
        (Direction.N, Direction.W, (1, 2)),
        (Direction.E, Direction.N, (2, 1)),
        (Direction.S, Direction.E, (3, 2)),
        (Direction.W, Direction.S, (2, 3)),
    ],
)
def test_turns_left_from_every_direction(start, expected, position):
    grid = empty(5, 5)
    grid[2][2] = True
    ant = Ant(2, 2, start, 5, 5)
    ant.move(grid)
    assert ant.direction is expected
    assert (ant.x, ant.y) == position


def test_ant_stays_inside_grid():
    grid = empty(7, 5)
    ant = Ant(3, 2, Direction.N, 7, 5)
    for _ in range(500):
        ant.move(grid)
        assert 0 <= ant.x < 7 and 0 <= ant.y < 5