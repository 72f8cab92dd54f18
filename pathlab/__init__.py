"""Grid pathfinding and maze generation with replayable traces.

Breadth-first search, Dijkstra and A* run on grid snapshots and return the
cells they visited in order plus the shortest path. A recursive backtracker
carves perfect mazes the same way. A replay controller turns either kind of
trace into an incremental state machine a display layer can step through.
"""

__version__ = "1.0.0"

from .domain.types import (
    Algorithm,
    Cell,
    Coord,
    Grid,
    PathlabError,
    SearchResult,
    Trace,
    UnknownAlgorithmError,
)
from .domain.search import run_search
from .domain.maze import generate_maze, prepare_maze_grid
from .app.replay import Effect, ReplayController, ReplayError, ReplayState, ReplayStep, TraceKind
from .utils.grid_factory import create_empty_grid, grid_from_ascii, grid_to_ascii
from .utils.rng import SeededRNG

__all__ = [
    "Algorithm",
    "Cell",
    "Coord",
    "Effect",
    "Grid",
    "PathlabError",
    "ReplayController",
    "ReplayError",
    "ReplayState",
    "ReplayStep",
    "SearchResult",
    "SeededRNG",
    "Trace",
    "TraceKind",
    "UnknownAlgorithmError",
    "create_empty_grid",
    "generate_maze",
    "grid_from_ascii",
    "grid_to_ascii",
    "prepare_maze_grid",
    "run_search",
]
