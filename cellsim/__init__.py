"""Interactive cellular automata: Conway's Game of Life and Langton's Ant."""

__version__ = "0.1.0"