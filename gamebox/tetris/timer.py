"""A polled interval timer that drives the falling pieces."""

from __future__ import annotations

import time
from typing import Callable, Optional

SLOW_SPEED = 5.0
HIGH_SPEED = 0.05
DEFAULT_INTERVAL = 1.0

TimerCallback = Callable[[float], object]


class Timer:
    """Calls ``on_timer`` with the elapsed seconds once ``interval`` has passed.

    The timer does nothing on its own: :meth:`drive` has to be called
    regularly, typically once per frame. ``clock`` returns the current time in
    seconds and defaults to :func:`time.monotonic`.
    """

    def __init__(
        self,
        on_timer: Optional[TimerCallback] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.on_timer = on_timer
        self._clock = clock
        self._interval = DEFAULT_INTERVAL
        self._start = clock()

    @property
    def interval(self) -> float:
        """Seconds between two timer events, kept between HIGH_SPEED and SLOW_SPEED."""
        return self._interval

    @interval.setter
    def interval(self, value: float) -> None:
        self._interval = min(max(value, HIGH_SPEED), SLOW_SPEED)

    @property
    def elapsed(self) -> float:
        """Seconds since the last reset."""
        return self._clock() - self._start

    def drive(self) -> bool:
        """Fire the callback and restart if the interval is over; True if it fired."""
        elapsed = self.elapsed
        if elapsed < self._interval or self.on_timer is None:
            return False
        self.on_timer(elapsed)
        self.reset()
        return True

    def reset(self) -> None:
        """Start counting from zero again."""
        self._start = self._clock()