"""Shared fixtures for the pathlab test suite."""

import sys
from collections import deque

import pytest

from pathlab.domain.neighbors import get_neighbor_coords
from pathlab.utils.grid_factory import create_empty_grid, create_grid_with_walls


@pytest.fixture(scope="session")
def qapp():
    """A QCoreApplication shared by every Qt-dependent test."""
    from PySide6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication(sys.argv[:1])
    yield app


@pytest.fixture
def open_grid():
    """10x10 grid, start (5,2), end (5,7), no walls."""
    return create_empty_grid(10, 10)


@pytest.fixture
def blocked_grid():
    """10x10 grid with column 5 fully walled between start and end."""
    return create_grid_with_walls(10, 10, [(row, 5) for row in range(10)])


def true_distance(grid, start, end):
    """Independent BFS distance over the grid's walls, None if unreachable."""
    distances = {start: 0}
    queue = deque([start])
    while queue:
        coord = queue.popleft()
        if coord == end:
            return distances[coord]
        for neighbor in get_neighbor_coords(coord, grid.rows, grid.cols):
            if neighbor in distances or grid.get_cell(neighbor).is_wall:
                continue
            distances[neighbor] = distances[coord] + 1
            queue.append(neighbor)
    return None
