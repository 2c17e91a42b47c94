"""Navigation states: committing to a new checkpoint, or moving toward one."""

from __future__ import annotations

from dataclasses import dataclass

from pod_racer.track.models import Target


@dataclass(frozen=True)
class ChangingTarget:
    """The previous checkpoint was reached; pick the next one this tick."""


@dataclass(frozen=True)
class Moving:
    """Steering toward *target*."""

    target: Target


NavigationState = ChangingTarget | Moving
