"""Incremental checkpoint discovery and corner-cut tuning.

The checkpoint layout is not given upfront.  During the first lap each
newly reported checkpoint is appended; the first repeat closes the loop, after
which the map precomputes one corner-cut aim point per checkpoint.
"""

from __future__ import annotations

import logging

from pod_racer.track.geometry import classify, distance, shift_for
from pod_racer.track.models import Point, Target

_logger = logging.getLogger(__name__)


class CheckpointMap:
    """Ordered, cyclic map of the checkpoints seen so far.

    Args:
        classify_threshold: Dead-zone used when classifying the direction of
            a checkpoint's predecessor.
        cardinal_shift: Corner-cut offset along a single axis.
        diagonal_shift: Corner-cut offset on both axes for diagonal approaches.
    """

    def __init__(
        self,
        classify_threshold: float = 10.0,
        cardinal_shift: float = 500.0,
        diagonal_shift: float = 350.0,
    ) -> None:
        self.classify_threshold = classify_threshold
        self.cardinal_shift = cardinal_shift
        self.diagonal_shift = diagonal_shift

        self.checkpoints: list[Point] = []
        self.tuned_checkpoints: list[Point] = []
        self.current_checkpoint: int = 0
        self.all_mapped: bool = False
        self.boost_on: int | None = None

    def __len__(self) -> int:
        return len(self.checkpoints)

    @property
    def is_empty(self) -> bool:
        return not self.checkpoints

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def add(self, point: Point) -> None:
        """Learn *point*, or close the loop if it has been seen before.

        Does nothing once the loop is closed.
        """
        if self.all_mapped:
            return

        if point in self.checkpoints:
            self.all_mapped = True
            _logger.info("Lap mapped: %d checkpoint(s)", len(self.checkpoints))
            self.tune()
            return

        self.checkpoints.append(point)
        _logger.debug("Checkpoint #%d learned at (%s, %s)", len(self.checkpoints) - 1, point.x, point.y)

    def advance(self) -> None:
        """Move the pointer to the following checkpoint, wrapping at the end."""
        if not self.checkpoints:
            self.current_checkpoint = 0
            return
        self.current_checkpoint = (self.current_checkpoint + 1) % len(self.checkpoints)

    def current_target(self) -> Target | None:
        """Checkpoint under the pointer, with its tuned aim point when known.

        Returns ``None`` if no checkpoint has been learned yet.
        """
        if not self.checkpoints:
            return None
        idx = self.current_checkpoint % len(self.checkpoints)
        tuned = self.tuned_checkpoints[idx] if idx < len(self.tuned_checkpoints) else None
        return Target(original=self.checkpoints[idx], tuned=tuned)

    def peek_next(self) -> Point | None:
        """Checkpoint after the one under the pointer (cyclic), or ``None`` if empty."""
        if not self.checkpoints:
            return None
        return self.checkpoints[(self.current_checkpoint + 1) % len(self.checkpoints)]

    def tune(self) -> None:
        """Compute one corner-cut aim point per checkpoint.

        Each checkpoint is shifted toward the side its predecessor lies on, so
        the pod aims at the near edge of the checkpoint instead of its centre.
        Runs at most once; later calls leave ``tuned_checkpoints`` unchanged.
        """
        if self.tuned_checkpoints or not self.checkpoints:
            return

        tuned: list[Point] = []
        longest_leg = -1.0
        for i, nxt in enumerate(self.checkpoints):
            current = self.checkpoints[i - 1]  # i == 0 wraps to the last checkpoint
            direction = classify(nxt, current, self.classify_threshold)
            tuned.append(nxt + shift_for(direction, self.cardinal_shift, self.diagonal_shift))

            leg = distance(current, nxt)
            if leg > longest_leg:
                longest_leg = leg
                self.boost_on = i

        self.tuned_checkpoints = tuned
        _logger.debug("Longest leg ends at checkpoint #%s (%.0f units)", self.boost_on, longest_leg)
