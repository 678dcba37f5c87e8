"""
Tick Clock
==========
Discrete free-running time source for rate gauges.

Time is a 16-bit counter advanced `resolution` times per second by a
background thread. Tick differences must always go through
`tick_distance()`; the counter wraps from 65535 to 0.
"""

import time
import logging
from threading import Thread, Lock
from typing import Protocol, runtime_checkable

from ..config import MAX_TICK

logger = logging.getLogger(__name__)


def tick_distance(current: int, previous: int) -> int:
    """Ticks elapsed from `previous` to `current`, modulo the counter width."""
    return (current - previous) & MAX_TICK


def next_deadline(deadline: float, now: float, period: float) -> float:
    """First grid point after `now`, skipping periods that already passed."""
    deadline += period
    if deadline <= now:
        missed = int((now - deadline) // period) + 1
        deadline += missed * period
    return deadline


@runtime_checkable
class Clock(Protocol):
    """Periodic ticker consumed by gauges."""

    def start(self) -> None:
        ...

    def tick(self) -> int:
        ...

    def resolution(self) -> int:
        ...


class TickClock:
    """
    Unsynchronized tick clock.

    The background thread writes the counter without a lock, so share it
    between threads only through LockedClock.
    """

    def __init__(self, resolution: int):
        """
        Initialize clock.

        Args:
            resolution: Ticks per second, must be a positive integer
        """
        if isinstance(resolution, bool) or not isinstance(resolution, int):
            raise TypeError(f"resolution must be an integer, got {resolution!r}")
        if resolution <= 0:
            raise ValueError("resolution must be positive")

        self._resolution = resolution
        self._tick = 1
        self._thread = None

    @property
    def period(self) -> float:
        """Seconds between ticks."""
        return 1.0 / self._resolution

    @property
    def started(self) -> bool:
        return self._thread is not None

    def start(self):
        """Start ticking in the background. Later calls are no-ops."""
        if self._thread is not None:
            logger.debug("Clock already started, ignoring start()")
            return

        self._thread = Thread(
            target=self._tick_loop,
            daemon=True,
            name=f"TickClock-{self._resolution}Hz"
        )
        self._thread.start()
        logger.debug(f"Clock started at {self._resolution} ticks/sec")

    def tick(self) -> int:
        return self._tick

    def resolution(self) -> int:
        return self._resolution

    def _tick_loop(self):
        """
        Advance once per period until the process exits.

        Deadlines stay on the original period grid. Ticks missed during a
        stall are dropped, not replayed in a burst.
        """
        period = self.period
        deadline = time.monotonic() + period

        while True:
            delay = deadline - time.monotonic()
            if delay > 0:
                time.sleep(delay)
            self._do_tick()
            deadline = next_deadline(deadline, time.monotonic(), period)

    def _do_tick(self) -> int:
        self._tick = (self._tick + 1) & MAX_TICK
        return self._tick


class ManualClock(TickClock):
    """
    Tick clock stepped by hand.

    start() spawns nothing; time moves only through advance().
    """

    def __init__(self, resolution: int):
        super().__init__(resolution)
        self._manual_started = False

    @property
    def started(self) -> bool:
        return self._manual_started

    def start(self):
        self._manual_started = True

    def advance(self, ticks: int = 1) -> int:
        """
        Advance the counter.

        Args:
            ticks: Number of ticks to step forward

        Returns:
            Tick value after stepping
        """
        if ticks < 0:
            raise ValueError("ticks cannot be negative")

        for _ in range(ticks):
            self._do_tick()
        return self._tick


class LockedClock:
    """
    Thread-safe decorator around any Clock.

    start() and tick() are serialized with a mutex; resolution() is
    immutable and passes straight through.
    """

    def __init__(self, clock: Clock):
        self._clock = clock
        self._lock = Lock()

    @property
    def inner(self) -> Clock:
        return self._clock

    def start(self):
        with self._lock:
            self._clock.start()

    def tick(self) -> int:
        with self._lock:
            return self._clock.tick()

    def resolution(self) -> int:
        return self._clock.resolution()


def new_clock(resolution: int, locked: bool = True) -> Clock:
    """
    Create a clock ticking `resolution` times per second.

    The clock is not started. With `locked` (the default) it is wrapped
    in LockedClock so many gauges and threads may share it.
    """
    clock = TickClock(resolution)
    if locked:
        return LockedClock(clock)
    return clock
