"""
SpeedGauge Test Fixtures
========================
Shared pytest fixtures for all test modules.
"""

import pytest

from speedgauge.config import SpeedGaugeConfig
from speedgauge.speed.clock import ManualClock
from speedgauge.speed.gauge import Gauge
from speedgauge import defaults


# ============================================================================
# CLOCK FIXTURES
# ============================================================================

@pytest.fixture
def manual_clock():
    """Hand-stepped clock at the default 4 ticks/sec."""
    return ManualClock(4)


@pytest.fixture
def gauge(manual_clock):
    """Gauge bound to the manual clock (window of 20 slots)."""
    return Gauge(manual_clock)


# ============================================================================
# CONFIG FIXTURES
# ============================================================================

@pytest.fixture
def default_config():
    """Default SpeedGauge configuration."""
    return SpeedGaugeConfig()


@pytest.fixture
def temp_config_file(tmp_path):
    """Temporary YAML config file."""
    config_content = """
clock:
  resolution: 10
  locked: false
"""
    config_file = tmp_path / "test_config.yaml"
    config_file.write_text(config_content)
    return config_file


@pytest.fixture
def no_user_config(monkeypatch, tmp_path):
    """Point the user config at a missing file and clear env overrides."""
    monkeypatch.setattr(
        'speedgauge.config.USER_CONFIG_FILE',
        tmp_path / "missing" / "config.yaml"
    )
    monkeypatch.delenv('SPEEDGAUGE_RESOLUTION', raising=False)


# ============================================================================
# DEFAULT CLOCK FIXTURES
# ============================================================================

@pytest.fixture
def fresh_defaults():
    """Reset the shared default clock around a test."""
    defaults._reset_default_clock()
    yield
    defaults._reset_default_clock()
