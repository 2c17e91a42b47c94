"""Pod — own kinematics, thrust, one-shot boost and coasting."""

from __future__ import annotations

import logging

from pod_racer.driver.config import BOOST_TOKEN, FULL_THRUST, DriverConfig
from pod_racer.track.geometry import distance
from pod_racer.track.models import Point

_logger = logging.getLogger(__name__)


class Pod:
    """The agent's own vehicle as seen by the decision loop.

    ``angle`` and ``distance_to_next`` hold the *previous* tick's telemetry
    (see :meth:`observe`); ``velocity`` is a finite-difference estimate from
    consecutive positions.

    Parameters
    ----------
    config:
        Boost and coasting thresholds.
    """

    def __init__(self, config: DriverConfig | None = None) -> None:
        self._cfg = config or DriverConfig()

        self.position: Point | None = None
        self.velocity: float = 0.0
        self.moving: bool = False
        self.angle: float = 0.0
        self.thrust: int = FULL_THRUST
        self.boosts_used: int = 0
        self.is_boosting: bool = False
        self.distance_to_next: float = 0.0
        self.ticks_to_skip: int = 0

    # ------------------------------------------------------------------
    # Kinematics
    # ------------------------------------------------------------------

    def calculate_velocity(self, new_pos: Point) -> None:
        """Update the speed estimate from the distance travelled since last tick."""
        if not self.moving or self.position is None:
            self.velocity = 0.0
            self.moving = True
        else:
            self.velocity = distance(self.position, new_pos)
        self.position = new_pos

    def observe(self, angle: float, distance_to_next: float) -> None:
        """Store this tick's heading error and checkpoint distance for the next tick."""
        self.angle = angle
        self.distance_to_next = distance_to_next

    # ------------------------------------------------------------------
    # Thrust decisions
    # ------------------------------------------------------------------

    def reset_tick(self) -> None:
        self.is_boosting = False

    def boost(self) -> None:
        """Spend the race's single boost. Does nothing once it has been used."""
        if self.boosts_used > 0:
            return
        self.is_boosting = True
        self.boosts_used = 1
        _logger.info("BOOST at distance %.0f", self.distance_to_next)

    def run(self) -> None:
        """Decide this tick's thrust (and boost)."""
        self.reset_tick()

        if self.ticks_to_skip > 0:
            self.ticks_to_skip -= 1
            self.thrust = 0
            if self.velocity < self._cfg.min_velocity_floor:
                self.thrust = FULL_THRUST
            return

        self.thrust = FULL_THRUST
        if (
            self.distance_to_next > self._cfg.min_boost_distance
            and self.angle == 0
            and self.thrust == FULL_THRUST
        ):
            self.boost()

    def skip_ticks(self, n: int) -> None:
        """Coast for the next *n* ticks."""
        self.ticks_to_skip = n

    def is_overshooting(self) -> bool:
        """True if the pod will reach the checkpoint within the overshoot horizon."""
        return self.distance_to_next <= self.velocity * self._cfg.overshoot_horizon

    def thrust_token(self) -> str:
        """Thrust as sent to the simulation: ``"BOOST"`` or ``"0"``..``"100"``."""
        if self.is_boosting:
            return BOOST_TOKEN
        return str(self.thrust)
