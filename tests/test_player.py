"""Tests for timer-driven replay playback."""

import pytest

from pathlab.app.player import ReplayPlayer
from pathlab.app.replay import ReplayController
from pathlab.domain.search import run_search


@pytest.fixture
def player(qapp, open_grid):
    replay = ReplayController(open_grid)
    player = ReplayPlayer(replay, speed=10, path_delay_factor=3)
    yield player
    player.pause()


def test_speed_is_clamped(player):
    player.speed = 1
    assert player.speed == 5
    player.speed = 500
    assert player.speed == 100


def test_play_without_trace_does_nothing(player):
    assert not player.play()
    assert not player.is_playing()


def test_timer_ticks_advance_until_finished(player, open_grid):
    result = run_search("astar", open_grid)
    player.replay.start_search(result)
    finished = []
    applied = []
    player.finished.connect(lambda: finished.append(True))
    player.step_applied.connect(applied.append)

    assert player.play()
    assert player.is_playing()

    for _ in range(len(result.visited) + len(result.path)):
        player._on_timer_tick()

    assert finished == [True]
    assert len(applied) == len(result.visited) + len(result.path)
    assert not player.is_playing()
    assert player.replay.is_complete()


def test_path_segment_uses_slower_interval(player, open_grid):
    result = run_search("astar", open_grid)
    player.replay.start_search(result)
    player.play()
    assert player._timer.interval() == 10
    for _ in range(len(result.visited)):
        player._on_timer_tick()
    assert player._timer.interval() == 30


def test_finish_applies_the_rest(player, open_grid):
    result = run_search("bfs", open_grid)
    player.replay.start_search(result)
    player.play()
    player._on_timer_tick()
    applied = player.finish()
    assert applied == len(result.visited) + len(result.path) - 1
    assert player.replay.is_complete()
    assert not player.is_playing()


def test_step_and_stop(player, open_grid):
    player.replay.start_search(run_search("dijkstra", open_grid))
    step = player.step()
    assert step.index == 0
    player.stop()
    assert player.replay.is_idle()
    assert player.step() is None
