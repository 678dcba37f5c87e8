"""
SpeedGauge Configuration Module
===============================
Clock constants, config dataclass with validation, YAML/JSON loading.
"""

import os
import json
import logging
from pathlib import Path
from dataclasses import dataclass
from typing import Optional

import yaml

logger = logging.getLogger(__name__)


# ============================================================================
# CONFIG PATHS
# ============================================================================

USER_CONFIG_FILE = Path.home() / ".speedgauge" / "config.yaml"
RESOLUTION_ENV = "SPEEDGAUGE_RESOLUTION"


# ============================================================================
# CLOCK CONSTANTS
# ============================================================================

# Ticks per second of the process-wide default clock
DEFAULT_RESOLUTION = 4

# Tick counter is 16 bits wide; all tick arithmetic is masked with this
MAX_TICK = 0xFFFF

# Lookback span of a gauge, in seconds
WINDOW_SECONDS = 5


# ============================================================================
# VALIDATION CONSTANTS
# ============================================================================

MIN_RESOLUTION = 1
MAX_RESOLUTION = 1000  # 1 ms period


# ============================================================================
# CONFIG DATACLASS
# ============================================================================

@dataclass
class SpeedGaugeConfig:
    """Settings for the default clock."""

    resolution: int = DEFAULT_RESOLUTION
    locked: bool = True

    def validate(self) -> list[str]:
        """
        Validates configuration. Returns list of errors.
        """
        errors = []

        if isinstance(self.resolution, bool) or not isinstance(self.resolution, int):
            errors.append(f"resolution must be an integer, got {self.resolution!r}")
        elif not (MIN_RESOLUTION <= self.resolution <= MAX_RESOLUTION):
            errors.append(
                f"resolution must be between {MIN_RESOLUTION} and {MAX_RESOLUTION}, "
                f"got {self.resolution}"
            )

        if not isinstance(self.locked, bool):
            errors.append(f"locked must be true or false, got {self.locked!r}")

        return errors

    @classmethod
    def from_yaml(cls, path: Path) -> "SpeedGaugeConfig":
        """Load config from YAML file."""
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        return cls._from_dict(data or {})

    @classmethod
    def from_json(cls, path: Path) -> "SpeedGaugeConfig":
        """Load config from JSON file."""
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict) -> "SpeedGaugeConfig":
        """Create config from dictionary. Values are not coerced; see validate()."""
        config = cls()

        clock = data.get('clock', {})
        if 'resolution' in clock:
            config.resolution = clock['resolution']
        if 'locked' in clock:
            config.locked = clock['locked']

        return config


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def _apply_env(config: SpeedGaugeConfig) -> SpeedGaugeConfig:
    """Override resolution from the environment, if set."""
    raw = os.environ.get(RESOLUTION_ENV)
    if raw is None:
        return config

    try:
        resolution = int(raw)
    except ValueError:
        logger.warning(f"Ignoring {RESOLUTION_ENV}={raw!r}: not an integer")
        return config

    previous = config.resolution
    config.resolution = resolution

    errors = config.validate()
    if errors:
        logger.warning(f"Ignoring {RESOLUTION_ENV}={raw!r}: {'; '.join(errors)}")
        config.resolution = previous

    return config


def load_config(config_path: Optional[Path] = None) -> SpeedGaugeConfig:
    """
    Load configuration with fallback chain:
    1. Explicit path
    2. User config (~/.speedgauge/config.yaml)
    3. Defaults

    SPEEDGAUGE_RESOLUTION overrides whichever source wins.
    """
    paths_to_try = []

    if config_path:
        paths_to_try.append(Path(config_path))

    paths_to_try.append(USER_CONFIG_FILE)

    for path in paths_to_try:
        if not path.exists():
            continue
        try:
            if path.suffix in ('.yaml', '.yml'):
                config = SpeedGaugeConfig.from_yaml(path)
            elif path.suffix == '.json':
                config = SpeedGaugeConfig.from_json(path)
            else:
                logger.warning(f"Unsupported config format: {path}")
                continue
        except (OSError, ValueError, TypeError, AttributeError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config {path}: {e}")
            continue

        errors = config.validate()
        if errors:
            logger.warning(f"Invalid config {path}: {'; '.join(errors)}")
            continue

        logger.debug(f"Loaded config from {path}")
        return _apply_env(config)

    return _apply_env(SpeedGaugeConfig())
