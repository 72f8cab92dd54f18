"""Search registry and the snapshot-in, trace-out entry point."""

import logging
from typing import Callable, Dict, Optional, Union

from .types import Algorithm, Coord, Grid, SearchResult
from .bfs import breadth_first_search
from .dijkstra import dijkstra
from .astar import astar

logger = logging.getLogger(__name__)

SearchFunction = Callable[[Grid, Coord, Coord], SearchResult]

# Mapping from algorithm ids to implementations
SEARCH_ALGORITHMS: Dict[Algorithm, SearchFunction] = {
    Algorithm.BFS: breadth_first_search,
    Algorithm.DIJKSTRA: dijkstra,
    Algorithm.ASTAR: astar,
}


def get_search_function(algorithm: Union[Algorithm, str]) -> SearchFunction:
    """Get search implementation by id."""
    return SEARCH_ALGORITHMS[Algorithm.parse(algorithm)]


def run_search(algorithm: Union[Algorithm, str], grid: Grid,
               start: Optional[Coord] = None,
               end: Optional[Coord] = None) -> SearchResult:
    """
    Run a search on a private snapshot of `grid`.

    The caller's grid is never mutated. Working state on the snapshot is
    reset first, so repeated runs over the same walls give identical traces.
    Start and end default to the grid's own endpoints and must be valid
    cells; that is the caller's responsibility.
    """
    algo = Algorithm.parse(algorithm)
    search = SEARCH_ALGORITHMS[algo]

    snapshot = grid.snapshot()
    snapshot.reset_search_state()
    start = grid.start if start is None else start
    end = grid.end if end is None else end

    result = search(snapshot, start, end)
    logger.debug(
        "%s from %s to %s: %d visited, path length %d",
        algo.value, start, end, result.nodes_explored, result.path_length,
    )
    return result
