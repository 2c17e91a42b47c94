"""Navigator — two-state decision machine run once per tick.

``ChangingTarget`` commits to a freshly reached checkpoint (learning it while
the lap is still unknown).  ``Moving`` steers toward the committed target,
decides thrust, and flips back to ``ChangingTarget`` once the pod is close
enough to the checkpoint.
"""

from __future__ import annotations

import logging

from pod_racer.driver.commands import Command
from pod_racer.driver.config import DriverConfig
from pod_racer.driver.pod import Pod
from pod_racer.driver.state import ChangingTarget, Moving, NavigationState
from pod_racer.telemetry.models import TelemetryFrame
from pod_racer.track.checkpoint_map import CheckpointMap
from pod_racer.track.geometry import distance
from pod_racer.track.models import Point, Target

_logger = logging.getLogger(__name__)


class Navigator:
    """Owns the pod, the checkpoint map and the navigation state.

    :meth:`step` is the whole per-tick decision: it touches no I/O, so tests
    can drive it with hand-built :class:`TelemetryFrame` objects.

    Parameters
    ----------
    config:
        Tuning constants shared with the pod and the map.
    pod:
        Pre-built pod; a fresh one is created when omitted.
    checkpoints:
        Pre-built map; a fresh, empty one is created when omitted.
    """

    def __init__(
        self,
        config: DriverConfig | None = None,
        pod: Pod | None = None,
        checkpoints: CheckpointMap | None = None,
    ) -> None:
        self._cfg = config or DriverConfig()
        self.pod = pod or Pod(self._cfg)
        if checkpoints is None:
            checkpoints = CheckpointMap(
                classify_threshold=self._cfg.classify_threshold,
                cardinal_shift=self._cfg.cardinal_shift,
                diagonal_shift=self._cfg.diagonal_shift,
            )
        self.checkpoints = checkpoints
        self.state: NavigationState = ChangingTarget()

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------

    def move_to(self, target: Target) -> None:
        self.state = Moving(target)

    def change_target(self) -> None:
        self.state = ChangingTarget()

    # ------------------------------------------------------------------
    # Per-tick decision
    # ------------------------------------------------------------------

    def step(self, frame: TelemetryFrame) -> Command:
        """Consume one telemetry frame and return this tick's command."""
        self.pod.calculate_velocity(frame.position)

        state = self.state
        if isinstance(state, Moving):
            aim = self._steer(state.target, frame)
        else:
            aim = self._commit(frame)

        self.pod.observe(frame.checkpoint_angle, frame.checkpoint_dist)
        return Command(target=aim, thrust=self.pod.thrust_token())

    def _commit(self, frame: TelemetryFrame) -> Point:
        self.pod.reset_tick()

        if not self.checkpoints.all_mapped:
            self.checkpoints.add(frame.checkpoint)
        self.checkpoints.advance()

        target = self.checkpoints.current_target() or Target(frame.checkpoint)
        self.move_to(target)
        _logger.debug(
            "Target #%d -> (%s, %s)",
            self.checkpoints.current_checkpoint,
            target.effective.x,
            target.effective.y,
        )
        return target.effective

    def _steer(self, target: Target, frame: TelemetryFrame) -> Point:
        pod = self.pod
        cfg = self._cfg
        position = frame.position

        pod.run()

        # Takes effect from the next tick; this tick still steers at *target*.
        if distance(position, target.original) < cfg.target_switch_radius:
            self.change_target()

        aim = target.effective
        if (
            self.checkpoints.all_mapped
            and abs(frame.checkpoint_angle) <= cfg.lookahead_angle
            and distance(position, aim) < cfg.lookahead_distance
        ):
            aim = self.checkpoints.peek_next() or aim

        if pod.is_overshooting():
            pod.skip_ticks(cfg.skip_ticks_on_overshoot)
            _logger.debug("Coasting for %d tick(s), velocity %.0f", cfg.skip_ticks_on_overshoot, pod.velocity)

        return aim
