"""
SpeedGauge
==========
Smoothed per-second rate estimation from irregular progress updates.

    gauge = new_gauge()
    gauge.progress(len(chunk))
    print(gauge.read(), "bytes/s")
"""

from .config import (
    SpeedGaugeConfig,
    load_config,
    DEFAULT_RESOLUTION,
    MAX_TICK,
    WINDOW_SECONDS,
)
from .speed import (
    Clock,
    TickClock,
    ManualClock,
    LockedClock,
    new_clock,
    tick_distance,
    Gauge,
    LockedGauge,
)
from .defaults import configure_default_clock, get_default_clock, new_gauge

__all__ = [
    'SpeedGaugeConfig', 'load_config', 'DEFAULT_RESOLUTION', 'MAX_TICK', 'WINDOW_SECONDS',
    'Clock', 'TickClock', 'ManualClock', 'LockedClock', 'new_clock', 'tick_distance',
    'Gauge', 'LockedGauge',
    'configure_default_clock', 'get_default_clock', 'new_gauge',
]
