"""A pausable frame timer."""

from __future__ import annotations

import time
from typing import Callable, Optional

__all__ = ["GameTimer"]


class GameTimer:
    """Measures frame deltas and total running time, excluding paused time.

    ``clock`` returns the current time in seconds; it defaults to a
    high-resolution monotonic clock.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock if clock is not None else time.perf_counter
        self._delta_time = -1.0
        self._base_time = 0.0
        self._paused_time = 0.0
        self._stop_time = 0.0
        self._prev_time = 0.0
        self._curr_time = 0.0
        self._stopped = False

    @property
    def stopped(self) -> bool:
        return self._stopped

    def total_time(self) -> float:
        """Seconds since reset, not counting time spent stopped."""
        end = self._stop_time if self._stopped else self._curr_time
        return (end - self._paused_time) - self._base_time

    def delta_time(self) -> float:
        """Seconds between the last two ticks."""
        return self._delta_time

    def reset(self) -> None:
        """Restart the timer; call before the main loop."""
        now = self._clock()
        self._base_time = now
        self._prev_time = now
        self._stop_time = 0.0
        self._stopped = False

    def start(self) -> None:
        """Resume after a stop."""
        if self._stopped:
            now = self._clock()
            self._paused_time += now - self._stop_time
            self._prev_time = now
            self._stop_time = 0.0
            self._stopped = False

    def stop(self) -> None:
        """Pause the timer."""
        if not self._stopped:
            self._stop_time = self._clock()
            self._stopped = True

    def tick(self) -> None:
        """Advance one frame."""
        if self._stopped:
            self._delta_time = 0.0
            return
        self._curr_time = self._clock()
        self._delta_time = max(0.0, self._curr_time - self._prev_time)
        self._prev_time = self._curr_time