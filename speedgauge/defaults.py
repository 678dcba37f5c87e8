"""
Default Clock
=============
Process-wide shared clock for gauges that do not bring their own.

The clock is created and started on first use and runs until the
process exits.
"""

import logging
from threading import Lock
from typing import Optional

from .config import SpeedGaugeConfig
from .speed.clock import Clock, new_clock
from .speed.gauge import Gauge

logger = logging.getLogger(__name__)

_lock = Lock()
_config = SpeedGaugeConfig()
_default_clock: Optional[Clock] = None


def configure_default_clock(config: SpeedGaugeConfig):
    """
    Set the settings used to build the default clock.

    Must be called before the first get_default_clock().
    """
    global _config

    errors = config.validate()
    if errors:
        raise ValueError("; ".join(errors))

    with _lock:
        if _default_clock is not None:
            raise RuntimeError("default clock already created")
        _config = config


def get_default_clock() -> Clock:
    """Return the shared clock, creating and starting it on first call."""
    global _default_clock

    with _lock:
        if _default_clock is None:
            clock = new_clock(_config.resolution, locked=_config.locked)
            clock.start()
            _default_clock = clock
            logger.debug(f"Default clock created at {_config.resolution} ticks/sec")
        return _default_clock


def new_gauge(clock: Optional[Clock] = None) -> Gauge:
    """
    Create a gauge.

    Args:
        clock: Clock to bind to. The caller starts it. When omitted the
            gauge uses the shared default clock, already running.
    """
    if clock is None:
        clock = get_default_clock()
    return Gauge(clock)


def _reset_default_clock():
    """Forget the shared clock and settings (tests only)."""
    global _default_clock, _config

    with _lock:
        _default_clock = None
        _config = SpeedGaugeConfig()
