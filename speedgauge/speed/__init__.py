# SpeedGauge speed subpackage
from .clock import Clock, TickClock, ManualClock, LockedClock, new_clock, next_deadline, tick_distance
from .gauge import Gauge, LockedGauge

__all__ = [
    'Clock', 'TickClock', 'ManualClock', 'LockedClock', 'new_clock', 'next_deadline', 'tick_distance',
    'Gauge', 'LockedGauge',
]
