"""Application controller connecting a display layer to the search and maze core."""

import logging
from typing import Optional, Union

from PySide6.QtCore import QObject, Signal

from ..domain.maze import generate_maze, prepare_maze_grid
from ..domain.search import run_search
from ..domain.types import Algorithm, Coord, Grid, SearchResult, Trace
from ..utils.grid_factory import create_empty_grid
from ..utils.rng import default_rng, set_global_seed
from .config import AppConfig
from .player import ReplayPlayer
from .replay import ReplayController, ReplayStep, TraceKind

logger = logging.getLogger(__name__)


class VisualizerController(QObject):
    """
    Owns the live grid and drives searches and maze generation through replay.

    Searches and mazes are computed on snapshots, then their traces are
    replayed onto the live grid either by the timer (visualize,
    generate_maze) or one element per call (step). Only one trace is
    replayed at a time; every new computation resets the previous replay.

    Signals:
        grid_updated: Emitted when the grid needs to be redrawn
        step_applied: Emitted with each ReplayStep applied to the grid
        search_completed: Emitted with the SearchResult when its replay ends
        maze_completed: Emitted with the carve trace when its replay ends
        busy_changed: Emitted when timed playback starts or stops
        error_occurred: Emitted when an operation fails
    """

    grid_updated = Signal()
    step_applied = Signal(object)  # ReplayStep
    search_completed = Signal(object)  # SearchResult
    maze_completed = Signal(object)  # Trace
    busy_changed = Signal(bool)
    error_occurred = Signal(str)

    def __init__(self, config: Optional[AppConfig] = None, parent: Optional[QObject] = None):
        super().__init__(parent)

        self._config = config or AppConfig()
        self._grid = create_empty_grid(self._config.rows, self._config.cols)
        self._last_result: Optional[SearchResult] = None
        self._last_maze: Optional[Trace] = None
        self._stepping = False

        self._replay = ReplayController(self._grid)
        self._player = ReplayPlayer(
            self._replay,
            speed=self._config.speed,
            path_delay_factor=self._config.path_delay_factor,
            parent=self,
        )
        self._player.step_applied.connect(self._on_step_applied)
        self._player.finished.connect(self._on_replay_finished)
        self._player.playing_changed.connect(self.busy_changed)

    # Properties

    @property
    def grid(self) -> Grid:
        """Get the live grid."""
        return self._grid

    @property
    def config(self) -> AppConfig:
        return self._config

    @property
    def algorithm(self) -> Algorithm:
        return self._config.algorithm

    @property
    def replay(self) -> ReplayController:
        return self._replay

    @property
    def player(self) -> ReplayPlayer:
        return self._player

    @property
    def last_result(self) -> Optional[SearchResult]:
        """The most recently computed search result."""
        return self._last_result

    @property
    def speed(self) -> int:
        """Get the current speed (timer interval in ms)."""
        return self._player.speed

    @speed.setter
    def speed(self, interval_ms: int):
        self._player.speed = interval_ms
        self._config.speed = self._player.speed

    def is_busy(self) -> bool:
        """A search or maze is being played back on the timer."""
        return self._player.is_playing()

    def is_stepping_active(self) -> bool:
        return self._stepping

    def is_stepping_complete(self) -> bool:
        return self._stepping and self._replay.is_complete()

    # Grid editing

    def toggle_wall(self, row: int, col: int) -> bool:
        """Toggle a wall. Rejected while busy and on start/end cells."""
        if self._reject_if_busy("toggle wall"):
            return False
        self._reset_replay()
        if not self._grid.toggle_wall(row, col):
            return False
        self.grid_updated.emit()
        return True

    def clear_path(self) -> bool:
        """Remove search marks and working state, keeping walls."""
        if self._reject_if_busy("clear path"):
            return False
        self._reset_replay()
        self._grid.reset_search_state()
        self.grid_updated.emit()
        return True

    def clear_grid(self) -> bool:
        """Rebuild the grid at the current size with no walls."""
        if self._reject_if_busy("clear grid"):
            return False
        self._rebuild_grid(self._grid.rows, self._grid.cols,
                           self._grid.start, self._grid.end)
        return True

    def resize(self, rows: int, cols: int,
               start: Optional[Coord] = None, end: Optional[Coord] = None) -> bool:
        """
        Rebuild the grid with new dimensions. Rows are clamped to [10, 50],
        columns to [10, 100]. Endpoints not given move to their default spots.
        """
        if self._reject_if_busy("resize"):
            return False
        rows, cols = AppConfig.clamp_dimensions(rows, cols)
        try:
            self._rebuild_grid(rows, cols, start, end)
        except ValueError as e:
            self.error_occurred.emit(f"Failed to resize grid: {str(e)}")
            return False
        self._config.rows, self._config.cols = rows, cols
        return True

    def set_algorithm(self, algorithm: Union[Algorithm, str]) -> bool:
        """Select the search strategy for the next run."""
        try:
            self._config.algorithm = Algorithm.parse(algorithm)
        except ValueError as e:
            self.error_occurred.emit(str(e))
            return False
        if not self.is_busy():
            self._reset_replay()
        return True

    # Algorithm control

    def visualize(self) -> bool:
        """Compute the selected search and play it back on the timer."""
        if self._reject_if_busy("visualize"):
            return False
        result = self._compute_search()
        if result is None:
            return False
        self._replay.start_search(result)
        return self._play_or_finish()

    def step(self) -> bool:
        """
        Apply one element of the search trace. The first call computes the
        search and applies its first element.
        """
        if self.is_busy() or self.is_stepping_complete():
            return False

        if not self._stepping:
            result = self._compute_search()
            if result is None:
                return False
            self._replay.start_search(result)
            self._stepping = True

        return self._player.step() is not None

    def finish(self) -> int:
        """Apply the rest of the active replay immediately."""
        return self._player.finish()

    def pause(self):
        self._player.pause()

    def resume(self) -> bool:
        return self._player.play()

    def generate_maze(self, seed: Optional[int] = None) -> bool:
        """
        Wall in the whole grid except start and end, then carve a maze from
        the start cell by playing back the carve trace.
        """
        if self._reject_if_busy("generate maze"):
            return False

        if seed is None:
            seed = self._config.seed
        try:
            if seed is not None:
                set_global_seed(seed)
            self._rebuild_grid(self._grid.rows, self._grid.cols,
                               self._grid.start, self._grid.end)
            prepare_maze_grid(self._grid)
            trace = generate_maze(self._grid, rng=default_rng)
        except Exception as e:
            logger.error("Maze generation failed: %s", e)
            self.error_occurred.emit(f"Failed to generate maze: {str(e)}")
            return False

        self._last_maze = trace
        self.grid_updated.emit()
        self._replay.start_maze(trace)
        return self._play_or_finish()

    # Internals

    def _compute_search(self) -> Optional[SearchResult]:
        self._reset_replay()
        self._grid.reset_search_state()
        try:
            result = run_search(self._config.algorithm, self._grid)
        except Exception as e:
            logger.error("Search failed: %s", e)
            self.error_occurred.emit(f"Algorithm error: {str(e)}")
            return None
        self._last_result = result
        self.grid_updated.emit()
        return result

    def _play_or_finish(self) -> bool:
        if self._replay.is_complete():
            self._on_replay_finished()
            return True
        return self._player.play()

    def _rebuild_grid(self, rows: int, cols: int,
                      start: Optional[Coord] = None, end: Optional[Coord] = None):
        self._reset_replay()
        self._grid = create_empty_grid(rows, cols, start, end)
        self._replay.grid = self._grid
        self.grid_updated.emit()

    def _reset_replay(self):
        self._stepping = False
        self._replay.reset()

    def _reject_if_busy(self, action: str) -> bool:
        if self.is_busy():
            logger.warning("Ignoring %s while a replay is playing", action)
            return True
        return False

    def _on_step_applied(self, step: ReplayStep):
        self.step_applied.emit(step)
        self.grid_updated.emit()

    def _on_replay_finished(self):
        if self._replay.kind == TraceKind.SEARCH and self._last_result is not None:
            result = self._last_result
            if result.found:
                logger.info("%s found a path of length %d after visiting %d cells",
                            result.algorithm.value, result.path_length, result.nodes_explored)
            else:
                logger.info("%s found no path after visiting %d cells",
                            result.algorithm.value, result.nodes_explored)
            self.search_completed.emit(result)
        elif self._replay.kind == TraceKind.MAZE and self._last_maze is not None:
            logger.info("Maze generated with %d carved cells", len(self._last_maze))
            self.maze_completed.emit(self._last_maze)
