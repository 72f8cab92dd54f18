"""Timer-driven playback of a ReplayController."""

import logging
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

from .config import MAX_SPEED, MIN_SPEED, clamp
from .replay import Effect, ReplayController, ReplayState, ReplayStep

logger = logging.getLogger(__name__)


class ReplayPlayer(QObject):
    """
    Plays a replay at a fixed interval, one trace element per timer tick.

    Path elements of a search trace are shown `path_delay_factor` times
    slower than visit elements. Timing only decides when advance() is
    called, never what it does.

    Signals:
        step_applied: Emitted with the ReplayStep after each advance
        finished: Emitted once when the replay becomes complete
        playing_changed: Emitted with True/False when the timer starts or stops
    """

    step_applied = Signal(object)  # ReplayStep
    finished = Signal()
    playing_changed = Signal(bool)

    def __init__(self, replay: ReplayController, speed: int = 10,
                 path_delay_factor: int = 3, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._replay = replay
        self._speed = clamp(speed, MIN_SPEED, MAX_SPEED)
        self._path_delay_factor = path_delay_factor

        self._timer = QTimer(self)
        self._timer.timeout.connect(self._on_timer_tick)

    @property
    def replay(self) -> ReplayController:
        return self._replay

    @property
    def speed(self) -> int:
        """Get the current speed (timer interval in ms)."""
        return self._speed

    @speed.setter
    def speed(self, interval_ms: int):
        """Set the speed (timer interval in ms)."""
        self._speed = clamp(interval_ms, MIN_SPEED, MAX_SPEED)
        if self._timer.isActive():
            self._timer.setInterval(self._current_interval())

    def is_playing(self) -> bool:
        return self._timer.isActive()

    def play(self) -> bool:
        """Start advancing on the timer. Returns False if nothing is active."""
        if not self._replay.is_active():
            return False
        if not self._timer.isActive():
            self._timer.start(self._current_interval())
            self.playing_changed.emit(True)
        return True

    def pause(self):
        if self._timer.isActive():
            self._timer.stop()
            self.playing_changed.emit(False)

    def step(self) -> Optional[ReplayStep]:
        """Advance exactly one element outside the timer."""
        return self._advance()

    def finish(self) -> int:
        """Stop the timer and apply everything that is left at once."""
        self.pause()
        applied = 0
        while self._advance() is not None:
            applied += 1
        return applied

    def stop(self):
        """Stop the timer and reset the underlying replay to idle."""
        self.pause()
        self._replay.reset()

    def _current_interval(self) -> int:
        if self._replay.peek_effect() == Effect.PATH:
            return self._speed * self._path_delay_factor
        return self._speed

    def _advance(self) -> Optional[ReplayStep]:
        step = self._replay.advance()
        if step is None:
            return None

        self.step_applied.emit(step)
        if self._replay.state == ReplayState.COMPLETE:
            self.pause()
            logger.debug("Replay finished after %d steps", self._replay.total)
            self.finished.emit()
        elif self._timer.isActive():
            self._timer.setInterval(self._current_interval())
        return step

    def _on_timer_tick(self):
        """Called on each timer tick during playback."""
        if self._advance() is None:
            self.pause()
