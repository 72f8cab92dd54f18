"""Breadth-first search over an unweighted grid."""

from collections import deque
from typing import Deque, List

from .types import Algorithm, Cell, Coord, Grid, SearchResult
from .neighbors import get_neighbors
from .path import reconstruct_path


def breadth_first_search(grid: Grid, start: Coord, end: Coord) -> SearchResult:
    """
    Run BFS from `start` to `end`, mutating the working fields of `grid`.

    Cells are appended to the visit trace when dequeued. A neighbor is marked
    visited as soon as it is enqueued so it is never queued twice.
    Returns an empty path when the queue drains without reaching `end`.
    """
    visited: List[Coord] = []
    start_cell = grid.get_cell(start)
    start_cell.distance = 0
    start_cell.is_visited = True
    queue: Deque[Cell] = deque([start_cell])

    while queue:
        current = queue.popleft()
        visited.append(current.coord)

        if current.coord == end:
            return SearchResult(
                algorithm=Algorithm.BFS,
                visited=tuple(visited),
                path=reconstruct_path(end, grid),
            )

        for neighbor in get_neighbors(current, grid):
            if neighbor.is_wall or neighbor.is_visited:
                continue
            neighbor.is_visited = True
            neighbor.distance = current.distance + 1
            neighbor.predecessor = current.coord
            queue.append(neighbor)

    return SearchResult(algorithm=Algorithm.BFS, visited=tuple(visited))
