"""Frame clock that measures frame time and caps the frame rate at 60 FPS."""

from __future__ import annotations

import time
from typing import Callable, Optional

MS_60_FPS = 1000.0 / 60.0

Timer = Callable[[], float]
Sleeper = Callable[[float], None]


class Clock:
    """Measures time since :meth:`start` and the duration of each frame.

    ``timer`` returns a monotonic time in seconds and ``sleeper`` waits for a
    number of seconds.  A frame shorter than a 60 FPS budget is padded by
    sleeping whole milliseconds.
    """

    def __init__(self, timer: Timer = time.perf_counter, sleeper: Sleeper = time.sleep) -> None:
        self._timer = timer
        self._sleeper = sleeper
        self.t0: Optional[float] = None
        self.curr_time = 0.0
        self.delta = 0.0

    def start(self) -> None:
        """Set the time origin and reset the frame measurements."""
        self.t0 = self._timer()
        self.curr_time = 0.0
        self.delta = 0.0

    def tick(self) -> float:
        """Advance one frame and return its duration in seconds."""
        if self.t0 is None:
            raise RuntimeError("clock has not been started")
        last_frame_time = self.curr_time
        self.curr_time = self._timer() - self.t0
        self.delta = self.curr_time - last_frame_time

        frame_ms = self.delta * 1000.0
        if frame_ms < MS_60_FPS:
            self._sleeper(int(MS_60_FPS - frame_ms) / 1000.0)
        return self.delta