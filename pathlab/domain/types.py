"""Core type definitions for grid search and maze generation."""

import copy
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple

# Grid position as (row, col)
Coord = Tuple[int, int]

# Ordered, immutable sequence of coordinates produced by one algorithm run
Trace = Tuple[Coord, ...]


class PathlabError(Exception):
    """Base class for errors raised by pathlab."""


class UnknownAlgorithmError(PathlabError, ValueError):
    """Raised when a search algorithm identifier is not registered."""


class Algorithm(Enum):
    """Available search strategies."""
    BFS = "bfs"
    DIJKSTRA = "dijkstra"
    ASTAR = "astar"

    @classmethod
    def parse(cls, value) -> "Algorithm":
        """Accept an Algorithm or its case-insensitive string id."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(a.value for a in cls)
            raise UnknownAlgorithmError(
                f"Unknown algorithm {value!r}, expected one of: {names}"
            ) from None


@dataclass
class Cell:
    """A single addressable grid position with its search working state."""
    row: int
    col: int
    is_start: bool = False
    is_end: bool = False
    is_wall: bool = False
    is_visited: bool = False
    is_path: bool = False
    distance: float = math.inf  # Cost from start (g)
    heuristic: float = 0.0      # Estimate to end (h), A* only
    total_cost: float = 0.0     # distance + heuristic (f), A* only
    predecessor: Optional[Coord] = None

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    @property
    def is_endpoint(self) -> bool:
        return self.is_start or self.is_end

    def reset_search_state(self):
        """Restore every field that belongs to a single algorithm run."""
        self.is_visited = False
        self.is_path = False
        self.distance = math.inf
        self.heuristic = 0.0
        self.total_cost = 0.0
        self.predecessor = None


@dataclass
class Grid:
    """Fixed-size rectangular grid with exactly one start and one end cell."""
    rows: int
    cols: int
    cells: List[List[Cell]]
    start: Coord
    end: Coord

    def get_cell(self, coord: Coord) -> Optional[Cell]:
        """Get cell at coordinate, returns None if out of bounds."""
        if not self.is_valid_coord(coord):
            return None
        row, col = coord
        return self.cells[row][col]

    def is_valid_coord(self, coord: Coord) -> bool:
        """Check if coordinate is within grid bounds."""
        row, col = coord
        return 0 <= row < self.rows and 0 <= col < self.cols

    def iter_cells(self) -> Iterator[Cell]:
        """Yield every cell in row-major order."""
        for row in self.cells:
            yield from row

    @property
    def start_cell(self) -> Cell:
        return self.cells[self.start[0]][self.start[1]]

    @property
    def end_cell(self) -> Cell:
        return self.cells[self.end[0]][self.end[1]]

    def snapshot(self) -> "Grid":
        """Return an independent copy that algorithms may mutate freely."""
        return copy.deepcopy(self)

    def toggle_wall(self, row: int, col: int) -> bool:
        """
        Flip the wall flag of a cell.
        Returns False without changing anything for start/end or out-of-bounds cells.
        """
        cell = self.get_cell((row, col))
        if cell is None or cell.is_endpoint:
            return False
        cell.is_wall = not cell.is_wall
        return True

    def set_wall(self, coord: Coord, is_wall: bool) -> bool:
        """Set the wall flag explicitly; start/end cells are never walls."""
        cell = self.get_cell(coord)
        if cell is None or cell.is_endpoint:
            return False
        cell.is_wall = is_wall
        return True

    def reset_search_state(self):
        """Clear visited/path/distance/predecessor/heuristic fields grid-wide."""
        for cell in self.iter_cells():
            cell.reset_search_state()

    def fill_walls(self):
        """Turn every cell except start and end into a wall."""
        for cell in self.iter_cells():
            cell.is_wall = not cell.is_endpoint

    def clear_walls(self):
        """Remove every wall, leaving search state untouched."""
        for cell in self.iter_cells():
            cell.is_wall = False

    def wall_coords(self) -> List[Coord]:
        return [cell.coord for cell in self.iter_cells() if cell.is_wall]


@dataclass(frozen=True)
class SearchResult:
    """Result of one search run: cells in discovery order plus the shortest path."""
    algorithm: Algorithm
    visited: Trace = field(default_factory=tuple)
    path: Trace = field(default_factory=tuple)

    @property
    def found(self) -> bool:
        """Whether the end cell was reached."""
        return len(self.path) > 0

    @property
    def path_length(self) -> int:
        """Number of edges on the path, 0 when no path exists."""
        return max(len(self.path) - 1, 0)

    @property
    def nodes_explored(self) -> int:
        return len(self.visited)
