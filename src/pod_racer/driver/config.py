"""Driver tuning constants with environment overrides.

Scripts call ``dotenv.load_dotenv()`` before :meth:`DriverConfig.from_env`, so
values may also come from a ``.env`` file at the project root.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace

ENV_PREFIX = "POD_RACER_"

BOOST_TOKEN = "BOOST"
FULL_THRUST = 100


class ConfigError(ValueError):
    """Raised when an environment override cannot be parsed."""


@dataclass(frozen=True)
class DriverConfig:
    """Thresholds and magnitudes used by the pod, the map and the navigator."""

    min_boost_distance: float = 8000.0   # boost only on approaches longer than this
    min_velocity_floor: float = 300.0    # keep thrusting while coasting below this speed
    cardinal_shift: float = 500.0        # corner-cut offset along one axis
    diagonal_shift: float = 350.0        # corner-cut offset per axis on diagonals
    skip_ticks_on_overshoot: int = 3     # coasting window armed on projected overshoot
    target_switch_radius: float = 600.0  # switch target once this close to the checkpoint
    classify_threshold: float = 10.0     # dead-zone for direction classification
    lookahead_angle: float = 3.0         # degrees; max heading error for look-ahead
    lookahead_distance: float = 2000.0   # look past the checkpoint within this range
    overshoot_horizon: float = 3.0       # ticks of travel projected for overshoot

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DriverConfig:
        """Build a config, overriding defaults with ``POD_RACER_<FIELD>`` variables.

        Raises
        ------
        ConfigError
            If a variable is set but is not a number of the field's type.
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, float | int] = {}

        for f in fields(cls):
            key = ENV_PREFIX + f.name.upper()
            raw = env.get(key)
            if raw is None or raw.strip() == "":
                continue
            convert = int if f.type in (int, "int") else float
            try:
                overrides[f.name] = convert(raw)
            except ValueError:
                raise ConfigError(f"{key}={raw!r} is not a valid {convert.__name__}") from None

        return replace(cls(), **overrides)
