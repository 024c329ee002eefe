"""Run configuration for the lifegrid command line.

Values come from defaults, then LIFEGRID_* environment variables, then
command-line flags. The core Grid/World never read configuration.
"""

import os
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidArgumentError

ENV_PREFIX = 'LIFEGRID_'

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off', ''}

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class SimulationConfig:
    """Settings for one simulation run."""
    width: Optional[int] = None   # World width; None keeps the source grid's width
    height: Optional[int] = None  # World height; None keeps the source grid's height
    steps: int = 0                # Generations to advance
    toroidal: bool = False        # Wrap neighbours around the edges
    log_level: str = 'WARNING'

    def __post_init__(self):
        for name in ('width', 'height'):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise InvalidArgumentError(f"{name} must be positive, got {value}")
        if self.steps < 0:
            raise InvalidArgumentError(f"steps must be non-negative, got {self.steps}")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise InvalidArgumentError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}")

    @classmethod
    def from_env(cls) -> 'SimulationConfig':
        """Create configuration from LIFEGRID_* environment variables."""
        return cls(
            width=_env_int('WIDTH'),
            height=_env_int('HEIGHT'),
            steps=_env_int('STEPS') or 0,
            toroidal=_env_bool('TOROIDAL'),
            log_level=os.getenv(ENV_PREFIX + 'LOG_LEVEL', 'WARNING'),
        )


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or raw.strip() == '':
        return None
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgumentError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None


def _env_bool(name: str) -> bool:
    raw = os.getenv(ENV_PREFIX + name, '').strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise InvalidArgumentError(f"{ENV_PREFIX}{name} must be a boolean, got {raw!r}")
