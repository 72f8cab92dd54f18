"""A* search with a Manhattan heuristic on a uniform-cost grid."""

import math
from typing import List, Optional, Set

from .types import Algorithm, Cell, Coord, Grid, SearchResult
from .heuristics import manhattan_distance
from .neighbors import get_neighbors
from .path import reconstruct_path


def _total_cost_key(cell: Cell) -> float:
    return cell.total_cost


class AStarSearch:
    """
    A* over a grid snapshot.

    The open list only ever holds discovered cells. It is stably sorted by
    total cost before each extraction, so equal-cost cells come out in the
    order they were first opened.
    """

    def __init__(self, grid: Grid, start: Coord, end: Coord):
        self.grid = grid
        self.start = start
        self.end = end
        self.visited: List[Coord] = []
        self.open_list: List[Cell] = []
        self._open_coords: Set[Coord] = set()
        self.result: Optional[SearchResult] = None

        start_cell = grid.get_cell(start)
        start_cell.distance = 0
        start_cell.heuristic = manhattan_distance(start, end)
        start_cell.total_cost = start_cell.heuristic
        self.open_list.append(start_cell)
        self._open_coords.add(start)

    def is_complete(self) -> bool:
        return self.result is not None

    def step(self) -> Optional[SearchResult]:
        """
        Extract one cell from the open list.
        Returns the SearchResult once the search has finished, None otherwise.
        """
        if self.result is not None:
            return self.result

        if not self.open_list:
            return self._finish(found=False)

        self.open_list.sort(key=_total_cost_key)
        current = self.open_list.pop(0)
        self._open_coords.discard(current.coord)

        if current.is_wall:
            return None

        if current.distance == math.inf:
            return self._finish(found=False)

        current.is_visited = True
        self.visited.append(current.coord)

        if current.coord == self.end:
            return self._finish(found=True)

        for neighbor in get_neighbors(current, self.grid):
            if neighbor.is_visited:
                continue

            tentative = current.distance + 1
            if tentative < neighbor.distance:
                neighbor.predecessor = current.coord
                neighbor.distance = tentative
                neighbor.heuristic = manhattan_distance(neighbor.coord, self.end)
                neighbor.total_cost = neighbor.distance + neighbor.heuristic

                if neighbor.coord not in self._open_coords:
                    self.open_list.append(neighbor)
                    self._open_coords.add(neighbor.coord)

        return None

    def run_complete(self) -> SearchResult:
        """Step until the search finishes. Bounded by the number of cells."""
        result = self.step()
        while result is None:
            result = self.step()
        return result

    def _finish(self, found: bool) -> SearchResult:
        path = reconstruct_path(self.end, self.grid) if found else ()
        self.result = SearchResult(
            algorithm=Algorithm.ASTAR,
            visited=tuple(self.visited),
            path=path,
        )
        return self.result


def astar(grid: Grid, start: Coord, end: Coord) -> SearchResult:
    """Convenience function to run A* from start to finish."""
    return AStarSearch(grid, start, end).run_complete()
