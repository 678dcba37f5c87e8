"""
Rate Gauge
==========
Moving-average rate over a 5 second window of clock ticks.

The buffer holds one cumulative total per tick. Idle ticks carry the
previous total forward, so the rate is simply the newest total minus
the oldest retained one, scaled to per-second by the clock resolution.
"""

from threading import Lock

from ..config import MAX_TICK, WINDOW_SECONDS
from .clock import Clock, tick_distance


class Gauge:
    """
    Ring-buffer rate estimator bound to a Clock.

    Not thread-safe: one gauge per writer, or wrap it in LockedGauge.
    The gauge never starts its clock.
    """

    def __init__(self, clock: Clock):
        """
        Initialize gauge.

        Args:
            clock: Shared tick source; the caller owns its lifecycle
        """
        if not isinstance(clock, Clock):
            raise TypeError(f"clock must provide start/tick/resolution, got {clock!r}")

        self.clock = clock
        self._size = clock.resolution() * WINDOW_SECONDS
        self._buffer = [0] * self._size
        self._filled = 1
        self._cursor = 1
        # One tick behind so the first call opens slot 1
        self._last_tick = (clock.tick() - 1) & MAX_TICK

    @property
    def window_size(self) -> int:
        return self._size

    @property
    def filled(self) -> int:
        return self._filled

    @property
    def resolution(self) -> int:
        return self.clock.resolution()

    @property
    def total(self) -> int:
        """Most recent cumulative total."""
        return self._buffer[self._cursor - 1]

    def progress(self, delta: int) -> float:
        """
        Report `delta` new units and return the current rate.

        Args:
            delta: Units since the previous call (may be zero or negative)

        Returns:
            Units per second. Until one second of ticks is retained this is
            the raw cumulative total.
        """
        tick = self.clock.tick()
        dist = min(tick_distance(tick, self._last_tick), self._size)
        self._last_tick = tick

        buffer = self._buffer
        size = self._size
        for _ in range(dist):
            if self._cursor == size:
                self._cursor = 0

            # Carry the previous total into the new slot
            buffer[self._cursor] = buffer[self._cursor - 1]

            if self._filled - 1 < self._cursor:
                self._filled += 1

            self._cursor += 1

        if delta != 0:
            buffer[self._cursor - 1] += delta

        top = buffer[self._cursor - 1]
        if self._filled < size:
            btm = 0
        else:
            btm = buffer[self._cursor % size]

        resolution = self.clock.resolution()
        if self._filled < resolution:
            return float(top)

        return (top - btm) * resolution / self._filled

    def read(self) -> float:
        """Current rate without reporting new units."""
        return self.progress(0)

    def get_stats(self) -> dict:
        """Get current statistics (advances the window like read())."""
        rate = self.read()
        return {
            'rate': rate,
            'total': self.total,
            'filled': self._filled,
            'window_size': self._size,
            'resolution': self.resolution,
            'tick': self._last_tick,
        }


class LockedGauge:
    """
    Gauge shared by several writer threads.

    Every call takes a mutex; prefer one plain Gauge per stream where
    possible.
    """

    def __init__(self, gauge: Gauge):
        self._gauge = gauge
        self._lock = Lock()

    @property
    def gauge(self) -> Gauge:
        return self._gauge

    def progress(self, delta: int) -> float:
        with self._lock:
            return self._gauge.progress(delta)

    def read(self) -> float:
        with self._lock:
            return self._gauge.read()

    def get_stats(self) -> dict:
        with self._lock:
            return self._gauge.get_stats()
