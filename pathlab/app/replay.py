"""Finite state machine that replays precomputed traces onto a grid."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Set, Tuple

from ..domain.types import Coord, Grid, PathlabError, SearchResult

logger = logging.getLogger(__name__)


class ReplayError(PathlabError):
    """Raised when the replay controller is driven out of order."""


class ReplayState(Enum):
    """States of the replay controller."""
    IDLE = "idle"
    ACTIVE = "active"
    COMPLETE = "complete"


class TraceKind(Enum):
    """What a trace describes, which decides the effect of each element."""
    SEARCH = "search"
    MAZE = "maze"


class Effect(Enum):
    """Mutation applied to a cell by one replay step."""
    VISIT = "visit"
    PATH = "path"
    CARVE = "carve"


@dataclass(frozen=True)
class ReplayStep:
    """One applied trace element."""
    index: int
    coord: Coord
    effect: Effect
    mutated: bool  # False for start/end cells, which are never changed


class ReplayController:
    """
    Exposes a precomputed trace one element at a time.

    State Transitions:
    IDLE -> ACTIVE (start with a non-empty trace)
    IDLE -> COMPLETE (start with an empty trace)
    ACTIVE -> COMPLETE (cursor reaches the end of the trace)
    ACTIVE/COMPLETE -> IDLE (reset)

    A search trace is the visit sequence followed by the path sequence. The
    grid state after N advances depends only on the trace and N.
    """

    def __init__(self, grid: Optional[Grid] = None):
        self.grid = grid
        self._state = ReplayState.IDLE
        self._kind: Optional[TraceKind] = None
        self._sequence: Tuple[Coord, ...] = ()
        self._visited_count = 0
        self._cursor = 0
        self._state_callbacks: Dict[ReplayState, Callable[[], None]] = {}
        self._valid_transitions = self._build_transition_map()

    def _build_transition_map(self) -> Dict[ReplayState, Set[ReplayState]]:
        """Build the valid state transition map."""
        return {
            ReplayState.IDLE: {ReplayState.ACTIVE, ReplayState.COMPLETE, ReplayState.IDLE},
            ReplayState.ACTIVE: {ReplayState.COMPLETE, ReplayState.IDLE},
            ReplayState.COMPLETE: {ReplayState.IDLE},
        }

    # Properties

    @property
    def state(self) -> ReplayState:
        return self._state

    @property
    def kind(self) -> Optional[TraceKind]:
        return self._kind

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def total(self) -> int:
        return len(self._sequence)

    @property
    def visited_count(self) -> int:
        """Length of the visit segment of a search trace (the whole trace for mazes)."""
        return self._visited_count

    @property
    def path_count(self) -> int:
        """Length of the path segment of a search trace."""
        return self.total - self._visited_count

    @property
    def progress(self) -> float:
        """Fraction of the trace applied so far."""
        if self.total == 0:
            return 1.0 if self._state == ReplayState.COMPLETE else 0.0
        return self._cursor / self.total

    def is_idle(self) -> bool:
        return self._state == ReplayState.IDLE

    def is_active(self) -> bool:
        return self._state == ReplayState.ACTIVE

    def is_complete(self) -> bool:
        return self._state == ReplayState.COMPLETE

    def on_state_enter(self, state: ReplayState, callback: Callable[[], None]):
        """Register a callback for when entering a specific state."""
        self._state_callbacks[state] = callback

    # Transitions

    def start(self, kind: TraceKind, *sequences: Sequence[Coord]):
        """
        Load a trace and move IDLE -> ACTIVE with the cursor at 0.

        SEARCH takes (visited, path); MAZE takes (carve,). A new trace can
        only be started after reset().
        """
        if self._state != ReplayState.IDLE:
            raise ReplayError(f"Cannot start a replay while {self._state.value}; reset first")

        kind = TraceKind(kind)
        if kind == TraceKind.SEARCH:
            if len(sequences) != 2:
                raise ReplayError("A search replay needs a visited trace and a path trace")
            visited, path = sequences
        else:
            if len(sequences) != 1:
                raise ReplayError("A maze replay needs exactly one carve trace")
            visited, path = sequences[0], ()

        self._kind = kind
        self._sequence = tuple(visited) + tuple(path)
        self._visited_count = len(visited)
        self._cursor = 0
        logger.debug("Replay started: %s trace of %d steps", kind.value, self.total)

        if self.total == 0:
            self._transition_to(ReplayState.COMPLETE)
        else:
            self._transition_to(ReplayState.ACTIVE)

    def start_search(self, result: SearchResult):
        """Start replaying a search result."""
        self.start(TraceKind.SEARCH, result.visited, result.path)

    def start_maze(self, carve_trace: Sequence[Coord]):
        """Start replaying a maze carve trace."""
        self.start(TraceKind.MAZE, carve_trace)

    def advance(self) -> Optional[ReplayStep]:
        """
        Apply the element at the cursor and move forward.
        Returns None without doing anything unless ACTIVE.
        """
        if self._state != ReplayState.ACTIVE:
            return None

        index = self._cursor
        coord = self._sequence[index]
        effect = self._effect_at(index)
        mutated = self._apply(coord, effect)
        self._cursor += 1

        if self._cursor >= self.total:
            self._transition_to(ReplayState.COMPLETE)

        return ReplayStep(index=index, coord=coord, effect=effect, mutated=mutated)

    def advance_many(self, count: int) -> List[ReplayStep]:
        """Advance up to `count` times, stopping early once complete."""
        steps = []
        for _ in range(count):
            step = self.advance()
            if step is None:
                break
            steps.append(step)
        return steps

    def run_to_completion(self) -> List[ReplayStep]:
        """Apply every remaining element."""
        return self.advance_many(self.total - self._cursor)

    def reset(self):
        """Drop the trace and return to IDLE from any state."""
        self._kind = None
        self._sequence = ()
        self._visited_count = 0
        self._cursor = 0
        self._transition_to(ReplayState.IDLE)

    def peek_effect(self) -> Optional[Effect]:
        """Effect the next advance() would apply, None unless ACTIVE."""
        if self._state != ReplayState.ACTIVE:
            return None
        return self._effect_at(self._cursor)

    # Internals

    def _effect_at(self, index: int) -> Effect:
        if self._kind == TraceKind.MAZE:
            return Effect.CARVE
        return Effect.VISIT if index < self._visited_count else Effect.PATH

    def _apply(self, coord: Coord, effect: Effect) -> bool:
        if self.grid is None:
            return False
        cell = self.grid.get_cell(coord)
        if cell is None:
            return False

        if effect == Effect.CARVE:
            cell.is_wall = False
            return True

        if cell.is_endpoint:
            return False
        if effect == Effect.VISIT:
            cell.is_visited = True
        else:
            cell.is_path = True
        return True

    def _transition_to(self, target_state: ReplayState):
        if target_state not in self._valid_transitions[self._state]:
            raise ReplayError(
                f"Invalid replay transition {self._state.value} -> {target_state.value}"
            )
        old_state = self._state
        self._state = target_state
        if old_state != target_state:
            logger.debug("Replay %s -> %s", old_state.value, target_state.value)
        callback = self._state_callbacks.get(target_state)
        if callback is not None:
            callback()
