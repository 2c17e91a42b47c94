"""Checkpoint geometry and lap mapping."""

from pod_racer.track.checkpoint_map import CheckpointMap
from pod_racer.track.geometry import classify, distance, shift_for
from pod_racer.track.models import Cardinal, Point, Target, combine

__all__ = [
    "Cardinal",
    "CheckpointMap",
    "Point",
    "Target",
    "classify",
    "combine",
    "distance",
    "shift_for",
]
