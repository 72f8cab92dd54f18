"""Application settings for the visualizer controller."""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..domain.types import Algorithm

# Grid size limits enforced by the controller when resizing
MIN_ROWS = 10
MAX_ROWS = 50
MIN_COLS = 10
MAX_COLS = 100

# Replay interval limits in milliseconds (lower is faster)
MIN_SPEED = 5
MAX_SPEED = 100


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


@dataclass
class AppConfig:
    """Configuration for grid size, replay speed and algorithm selection."""
    rows: int = 20
    cols: int = 50
    speed: int = 10              # Milliseconds between replay steps
    path_delay_factor: int = 3   # Path steps replay this many times slower
    algorithm: Algorithm = Algorithm.DIJKSTRA
    seed: Optional[int] = None   # Maze seed, None for nondeterministic

    def __post_init__(self):
        self.algorithm = Algorithm.parse(self.algorithm)
        self.rows, self.cols = self.clamp_dimensions(self.rows, self.cols)
        self.speed = clamp(self.speed, MIN_SPEED, MAX_SPEED)
        if self.path_delay_factor < 1:
            raise ValueError(f"path_delay_factor must be >= 1, got {self.path_delay_factor}")

    @staticmethod
    def clamp_dimensions(rows: int, cols: int) -> Tuple[int, int]:
        """Clamp rows to [10, 50] and columns to [10, 100]."""
        return clamp(rows, MIN_ROWS, MAX_ROWS), clamp(cols, MIN_COLS, MAX_COLS)
