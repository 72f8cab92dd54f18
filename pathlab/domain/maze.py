"""Maze carving with a randomized, stack-based recursive backtracker."""

import logging
from typing import List, Optional, Tuple

import numpy as np

from .types import Coord, Grid, Trace
from ..utils.rng import ChoicePolicy, default_rng

logger = logging.getLogger(__name__)

# (neighbor row offset, neighbor col offset, wall row offset, wall col offset)
# in the order north, east, south, west. Logical maze cells are two units apart.
CARVE_DIRECTIONS: Tuple[Tuple[int, int, int, int], ...] = (
    (-2, 0, -1, 0),
    (0, 2, 0, 1),
    (2, 0, 1, 0),
    (0, -2, 0, -1),
)


def _unvisited_neighbors(coord: Coord, visited: np.ndarray) -> List[Tuple[Coord, Coord]]:
    """Return (next_cell, wall_between) pairs for logical neighbors not yet carved."""
    rows, cols = visited.shape
    row, col = coord
    neighbors = []
    for d_row, d_col, w_row, w_col in CARVE_DIRECTIONS:
        next_row, next_col = row + d_row, col + d_col
        if 0 <= next_row < rows and 0 <= next_col < cols and not visited[next_row, next_col]:
            neighbors.append(((next_row, next_col), (row + w_row, col + w_col)))
    return neighbors


def carve_maze(rows: int, cols: int, start: Coord,
               rng: Optional[ChoicePolicy] = None) -> Trace:
    """
    Carve a perfect maze over a rows x cols lattice starting at `start`.

    Returns the cells whose wall must be cleared, in carve order: for every
    carving step the wall between two logical cells, then the logical cell
    entered. Logical cells that the start's parity cannot reach stay walled.
    """
    if rng is None:
        rng = default_rng

    visited = np.zeros((rows, cols), dtype=bool)
    visited[start] = True
    stack: List[Coord] = [start]
    carved: List[Coord] = []

    while stack:
        current = stack[-1]
        neighbors = _unvisited_neighbors(current, visited)

        if not neighbors:
            # Backtrack
            stack.pop()
            continue

        next_cell, wall_between = rng.choice(neighbors)
        visited[wall_between] = True
        visited[next_cell] = True
        carved.append(wall_between)
        carved.append(next_cell)
        stack.append(next_cell)

    return tuple(carved)


def generate_maze(grid: Grid, start: Optional[Coord] = None,
                  rng: Optional[ChoicePolicy] = None) -> Trace:
    """
    Produce the carve trace for `grid` without touching it.

    Only the grid dimensions and start are read. Replaying the trace onto a
    grid prepared with `prepare_maze_grid` yields the maze.
    """
    start = grid.start if start is None else start

    trace = carve_maze(grid.rows, grid.cols, start, rng)
    logger.debug("Carved maze from %s: %d wall removals", start, len(trace))
    return trace


def prepare_maze_grid(grid: Grid):
    """Clear search state and wall in every cell except start and end."""
    grid.reset_search_state()
    grid.fill_walls()
