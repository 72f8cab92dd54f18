"""Heuristic functions for A* search."""

from .types import Coord


def manhattan_distance(start: Coord, target: Coord) -> float:
    """
    Manhattan (L1) distance heuristic.
    Admissible and consistent for uniform-cost 4-directional movement.
    """
    return abs(start[0] - target[0]) + abs(start[1] - target[1])
