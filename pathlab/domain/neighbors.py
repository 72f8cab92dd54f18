"""Neighbor generation for 4-directional grid movement."""

from typing import List, Tuple
from .types import Coord, Grid, Cell

# Fixed order: north, south, west, east. Trace ordering depends on it.
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def get_neighbor_coords(coord: Coord, rows: int, cols: int) -> List[Coord]:
    """
    Get the orthogonally adjacent coordinates of `coord` that lie inside
    [0, rows) x [0, cols). No wraparound.
    """
    row, col = coord
    neighbors = []
    for d_row, d_col in DIRECTIONS:
        new_row, new_col = row + d_row, col + d_col
        if 0 <= new_row < rows and 0 <= new_col < cols:
            neighbors.append((new_row, new_col))
    return neighbors


def get_neighbors(cell: Cell, grid: Grid) -> List[Cell]:
    """Get neighbor cells of `cell`, walls included. Callers filter as needed."""
    return [
        grid.cells[row][col]
        for row, col in get_neighbor_coords(cell.coord, grid.rows, grid.cols)
    ]


def are_adjacent(a: Coord, b: Coord) -> bool:
    """Check whether two coordinates are orthogonal neighbors."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1
