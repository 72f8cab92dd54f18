"""Path reconstruction and validation shared by all search algorithms."""

from typing import List, Optional, Sequence
from .types import Coord, Grid, Trace
from .neighbors import are_adjacent


def reconstruct_path(target_coord: Coord, grid: Grid) -> Trace:
    """
    Reconstruct the path from target back to start using predecessor links.
    Returns the path from start to target (reversed from the predecessor chain).
    """
    path: List[Coord] = []
    current: Optional[Coord] = target_coord
    seen = set()

    while current is not None and current not in seen:
        seen.add(current)
        path.append(current)
        cell = grid.get_cell(current)
        if cell is None:
            break
        current = cell.predecessor

    path.reverse()
    return tuple(path)


def validate_path(path: Sequence[Coord], grid: Grid) -> bool:
    """
    Validate that a path runs from start to end through passable, orthogonally
    connected cells without repeating a cell.
    """
    if not path:
        return False
    if path[0] != grid.start or path[-1] != grid.end:
        return False
    if len(set(path)) != len(path):
        return False

    for coord in path:
        cell = grid.get_cell(coord)
        if cell is None or cell.is_wall:
            return False

    for prev, curr in zip(path, path[1:]):
        if not are_adjacent(prev, curr):
            return False

    return True
