# cellsim

Two classic cellular automata that you can watch in a pygame window and play with:

- **Conway's Game of Life** (`cellsim.conway`): each cell lives or dies by its
  eight neighbours. The board edges do not wrap.
- **Langton's Ant** (`cellsim.langton`): an ant walks a board that wraps at
  the edges and flips each cell it leaves.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
cellsim
```

The window is 1000×1000 pixels. The start screen shows a background image,
read from `puls.png` in the current directory by default. If the image cannot
be loaded, the command prints `Błąd ładowania tła` and exits with status 1.

Options:

| Option               | Default     | Meaning                                          |
|----------------------|-------------|--------------------------------------------------|
| `--background PATH`  | `puls.png`  | image shown on the start screen                  |
| `--save-file PATH`   | `save.txt`  | file the start screen's load action reads        |

The screens come in this order:

1. **Start**: click **Start**.
2. **Wybierz symulacje**: choose *Langton's Ant* or *Game of Life*.
3. **Wybierz rozmiar planszy**: choose the cell size. *Mala* is 25 px,
   *Srednia* is 20 px and *Duza* is 10 px.
4. **Podaj predkosc (ms)**: type the delay between steps, as 1 to 3 digits.
   Only digits and Backspace are taken. An input of zero is cleared. The
   simulation starts when you type a digit while holding **S**, as long as
   the input is then a positive number.

When the simulation window is closed, the program ends.

### Game of Life controls

| Key / action | Effect                                                  |
|--------------|---------------------------------------------------------|
| Space        | pause / resume                                          |
| R            | fill the board at random                                |
| C            | clear the board and reset the step counter              |
| S            | save the board and step count to `save.txt`             |
| L            | load the board and step count from `save.txt`           |
| Up           | lengthen the delay by 1 ms (at most 1000 ms)            |
| Down         | shorten the delay by 1 ms (at least 1 ms)               |
| Mouse wheel  | select the next (up) or previous (down) pattern         |
| Left click   | stamp the selected pattern with its corner at the cursor |

A grey shadow under the cursor shows the live cells of the selected pattern.
When the pattern is stamped, every one of its cells, dead ones too, overwrites
the board beneath it.

Patterns are read from the `*.txt` files in a `patterns` folder in the current
directory, in file-name order. That folder must exist and hold at least one
pattern. In a pattern file each line is a row, and a `1` marks a live cell.
Any other character marks a dead one.

The info panel shows the number of live cells and the step count.

### Langton's Ant controls

| Key   | Effect                                               |
|-------|------------------------------------------------------|
| Space | pause / resume                                       |
| R     | clear the board, put the ant back in the middle facing north, reset the step count |
| Up    | shorten the delay by 1 ms (at least 1 ms)            |
| Down  | lengthen the delay by 1 ms (at most 1000 ms)         |

The ant is drawn in red. The info panel shows the step count. Its live-cell
figure always reads 0 for this simulation.

### Run summary

When a simulation window is closed, a summary is written to
`log_simulacji.txt`. It holds the simulation's name, the run time in seconds,
the number of steps and the live cells summed over all steps.

## Using the library

The rules work without a window.

```python
from cellsim.life import new_grid, place_pattern, next_generation, count_alive_cells

grid = new_grid(10, 10)                      # 10 columns, 10 rows of False
place_pattern(grid, [[0, 1, 0], [0, 0, 1], [1, 1, 1]], 1, 1)
grid = next_generation(grid)                 # returns a new grid
print(count_alive_cells(grid))
```

`cellsim.life` also provides these:

- `count_alive_neighbors(grid, x, y, width, height)`
- `fill_random(grid, rng=None)`, which takes an optional `random.Random`
- `clear(grid)`

The ant:

```python
from cellsim.ant import Ant, Direction
from cellsim.life import new_grid

grid = new_grid(11, 11)
ant = Ant(5, 5, Direction.N, 11, 11)
for _ in range(100):
    ant.move(grid)   # turn right on a dead cell, left on a live one; flip; step
print(ant.x, ant.y, ant.direction)
```

Saving and loading boards:

```python
from cellsim.gamestate import save_state, load_state

save_state(grid, 100, "saves/board.txt")    # creates missing parent directories
state = load_state("saves/board.txt")       # GameState(grid, step)
```

A saved file has three parts:

- the step number on the first line;
- `rows columns` on the second line;
- one line of `0`/`1` for each row.

`save_state` raises `ValueError` for an empty grid. `load_state` raises
`FileNotFoundError` for a missing file and `ValueError` for a malformed
header.

Other pieces:

- `cellsim.patterns`: `load_pattern(path)` reads one pattern file. A
  `PatternLoader(folder)` offers `current()`, `next()`, `previous()` and
  `load_patterns()`.
- `cellsim.simlog`: `SimulationLogger(name)` offers `start()`,
  `log_step(grid)` and `save(filename)`.
- `cellsim.conway.ConwaySimulation` and `cellsim.langton.LangtonSimulation`
  hold a simulation's state and controls apart from the drawing.
  `run_conway(window, speed, cell_size)` and
  `run_langtons_ant(window, speed, cell_size)` run them in a pygame surface.
- `cellsim.app.Menu` holds the menu choices.

## What it does not do

The start screen has no visible button for loading a saved board. Its load
action only checks that the save file can be read, and it does not carry the
board into a simulation. To restore a Game of Life board, start the
simulation and press **L**. The `--save-file` option does not change the file
that **S** and **L** use inside the Game of Life: that is always `save.txt`.