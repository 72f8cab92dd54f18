"""Tests for BFS, Dijkstra and A* search."""

import random

import pytest

from conftest import true_distance
from pathlab.domain.astar import AStarSearch
from pathlab.domain.path import reconstruct_path, validate_path
from pathlab.domain.search import get_search_function, run_search
from pathlab.domain.types import Algorithm, UnknownAlgorithmError
from pathlab.utils.grid_factory import create_empty_grid, create_grid_with_walls, grid_from_ascii

ALGORITHMS = [Algorithm.BFS, Algorithm.DIJKSTRA, Algorithm.ASTAR]


def random_grid(seed, rows=12, cols=15, density=0.3):
    rng = random.Random(seed)
    walls = [
        (row, col)
        for row in range(rows)
        for col in range(cols)
        if rng.random() < density
    ]
    start = (rng.randrange(rows), rng.randrange(cols))
    end = (rng.randrange(rows), rng.randrange(cols))
    while end == start:
        end = (rng.randrange(rows), rng.randrange(cols))
    return create_grid_with_walls(rows, cols, walls, start, end)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_open_grid_path_length_five(open_grid, algorithm):
    result = run_search(algorithm, open_grid)
    assert result.found
    assert result.path_length == 5
    assert result.path[0] == (5, 2)
    assert result.path[-1] == (5, 7)
    assert result.visited[0] == (5, 2)
    assert result.visited[-1] == (5, 7)
    assert validate_path(result.path, open_grid)


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_full_wall_column_gives_empty_path(blocked_grid, algorithm):
    result = run_search(algorithm, blocked_grid)
    assert not result.found
    assert result.path == ()
    assert result.path_length == 0
    # Every open cell on the start side (columns 0-4) is explored
    assert len(result.visited) == 50
    assert all(col < 5 for _, col in result.visited)


def test_bfs_visits_neighbors_in_fixed_order(open_grid):
    result = run_search("bfs", open_grid)
    assert result.visited[:5] == ((5, 2), (4, 2), (6, 2), (5, 1), (5, 3))


def test_dijkstra_breaks_ties_by_list_position(open_grid):
    result = run_search("dijkstra", open_grid)
    assert result.visited[:5] == ((5, 2), (4, 2), (5, 1), (5, 3), (6, 2))


def test_astar_goes_straight_on_open_grid(open_grid):
    result = run_search("astar", open_grid)
    assert result.visited == result.path
    assert result.path == ((5, 2), (5, 3), (5, 4), (5, 5), (5, 6), (5, 7))


@pytest.mark.parametrize("seed", range(25))
def test_all_algorithms_agree_with_true_distance(seed):
    grid = random_grid(seed)
    expected = true_distance(grid, grid.start, grid.end)
    for algorithm in ALGORITHMS:
        result = run_search(algorithm, grid)
        if expected is None:
            assert result.path == (), algorithm
        else:
            assert result.path_length == expected, algorithm
            assert validate_path(result.path, grid), algorithm


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_search_does_not_mutate_callers_grid(open_grid, algorithm):
    before = open_grid.snapshot()
    run_search(algorithm, open_grid)
    assert open_grid == before


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_rerun_after_reset_is_identical(algorithm):
    grid = random_grid(7, density=0.25)
    first = run_search(algorithm, grid)
    grid.reset_search_state()
    second = run_search(algorithm, grid)
    assert first == second


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_stale_working_state_is_ignored(open_grid, algorithm):
    for cell in open_grid.iter_cells():
        cell.is_visited = True
        cell.distance = 0
        cell.predecessor = (0, 0)
    result = run_search(algorithm, open_grid)
    assert result.path_length == 5


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_start_equals_end(algorithm):
    grid = create_empty_grid(10, 10, start=(3, 3), end=(3, 3))
    result = run_search(algorithm, grid)
    assert result.visited == ((3, 3),)
    assert result.path == ((3, 3),)
    assert result.path_length == 0


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_walled_in_start(algorithm):
    grid = grid_from_ascii("""
.#....
#S#...
.#...E
""")
    result = run_search(algorithm, grid)
    assert result.visited == ((1, 1),)
    assert result.path == ()


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_detour_around_wall(algorithm):
    grid = grid_from_ascii("""
......
.####.
.S..#E
.####.
......
""")
    result = run_search(algorithm, grid)
    assert result.path_length == true_distance(grid, grid.start, grid.end) == 10
    assert validate_path(result.path, grid)


def test_explicit_endpoints_override_grid_endpoints(open_grid):
    result = run_search("bfs", open_grid, start=(0, 0), end=(0, 3))
    assert result.path == ((0, 0), (0, 1), (0, 2), (0, 3))


def test_astar_explores_no_more_than_dijkstra():
    for seed in range(10):
        grid = random_grid(seed, density=0.2)
        astar_result = run_search("astar", grid)
        dijkstra_result = run_search("dijkstra", grid)
        if dijkstra_result.found:
            assert astar_result.nodes_explored <= dijkstra_result.nodes_explored


def test_astar_step_by_step_matches_run_complete(open_grid):
    snapshot = open_grid.snapshot()
    search = AStarSearch(snapshot, open_grid.start, open_grid.end)
    steps = 0
    while not search.is_complete():
        search.step()
        steps += 1
    assert search.result == run_search("astar", open_grid)
    assert steps == 6


def test_astar_open_list_stays_unique_and_skips_walls():
    walls = [(row, 6) for row in range(11)]
    grid = create_grid_with_walls(12, 12, walls, start=(2, 1), end=(9, 10))
    search = AStarSearch(grid.snapshot(), grid.start, grid.end)
    while not search.is_complete():
        search.step()
        open_coords = [cell.coord for cell in search.open_list]
        assert len(open_coords) == len(set(open_coords))
    assert search.result.found
    assert not set(walls) & set(search.visited)
    assert validate_path(search.result.path, grid)


def test_reconstruct_path_follows_predecessors(open_grid):
    open_grid.get_cell((0, 2)).predecessor = (0, 1)
    open_grid.get_cell((0, 1)).predecessor = (0, 0)
    assert reconstruct_path((0, 2), open_grid) == ((0, 0), (0, 1), (0, 2))


def test_validate_path_rejects_gaps_and_repeats(open_grid):
    assert not validate_path([], open_grid)
    assert not validate_path([(5, 2), (5, 4), (5, 7)], open_grid)
    assert not validate_path([(5, 2), (5, 3), (5, 2), (5, 3), (5, 4), (5, 5), (5, 6), (5, 7)],
                             open_grid)


@pytest.mark.parametrize("name", ["BFS", "Dijkstra", " astar "])
def test_algorithm_ids_are_case_insensitive(name):
    assert get_search_function(name) is not None


def test_unknown_algorithm_raises(open_grid):
    with pytest.raises(UnknownAlgorithmError):
        run_search("greedy", open_grid)
    with pytest.raises(ValueError):
        Algorithm.parse("")
