"""Dijkstra's algorithm with a linear minimum scan over all unvisited cells."""

import math
from typing import List

from .types import Algorithm, Cell, Coord, Grid, SearchResult
from .neighbors import get_neighbors
from .path import reconstruct_path


def _distance_key(cell: Cell) -> float:
    return cell.distance


def dijkstra(grid: Grid, start: Coord, end: Coord) -> SearchResult:
    """
    Run Dijkstra from `start` to `end`, mutating the working fields of `grid`.

    The whole grid is the unvisited frontier. Each iteration stably sorts the
    remaining cells by distance and takes the head, so ties resolve by their
    current position in the list (row-major at the start). This is the
    quadratic baseline the other strategies are compared against; a heap
    would change tie ordering and therefore the visit trace.
    """
    visited: List[Coord] = []
    grid.get_cell(start).distance = 0
    unvisited: List[Cell] = list(grid.iter_cells())

    while unvisited:
        unvisited.sort(key=_distance_key)
        closest = unvisited.pop(0)

        if closest.is_wall:
            continue

        # Nothing left is reachable
        if closest.distance == math.inf:
            break

        closest.is_visited = True
        visited.append(closest.coord)

        if closest.coord == end:
            return SearchResult(
                algorithm=Algorithm.DIJKSTRA,
                visited=tuple(visited),
                path=reconstruct_path(end, grid),
            )

        for neighbor in get_neighbors(closest, grid):
            if neighbor.is_visited:
                continue
            tentative = closest.distance + 1
            if tentative < neighbor.distance:
                neighbor.distance = tentative
                neighbor.predecessor = closest.coord

    return SearchResult(algorithm=Algorithm.DIJKSTRA, visited=tuple(visited))
