"""Telemetry data models."""

from __future__ import annotations

import math
from dataclasses import dataclass

from pod_racer.track.models import Point


@dataclass(frozen=True)
class TelemetryFrame:
    """One tick of race telemetry: own pod, next checkpoint, opponent."""

    x: float
    """Own pod X position."""

    y: float
    """Own pod Y position."""

    checkpoint_x: float
    """X position of the next checkpoint."""

    checkpoint_y: float
    """Y position of the next checkpoint."""

    checkpoint_dist: float
    """Distance from the pod to the next checkpoint."""

    checkpoint_angle: float
    """Signed angle in degrees between the pod's heading and the next checkpoint."""

    opponent_x: float
    """Opponent X position. Carried but not used by any decision."""

    opponent_y: float
    """Opponent Y position."""

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    @property
    def checkpoint(self) -> Point:
        return Point(self.checkpoint_x, self.checkpoint_y)

    @property
    def opponent(self) -> Point:
        return Point(self.opponent_x, self.opponent_y)

    def is_valid(self) -> bool:
        """Return True if all fields are finite (no NaN/Inf)."""
        values = (
            self.x,
            self.y,
            self.checkpoint_x,
            self.checkpoint_y,
            self.checkpoint_dist,
            self.checkpoint_angle,
            self.opponent_x,
            self.opponent_y,
        )
        return all(math.isfinite(v) for v in values)
