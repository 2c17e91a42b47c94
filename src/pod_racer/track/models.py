"""Track modeling data structures."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A 2D position or vector in simulation units.

    Screen convention: ``x`` grows to the right, ``y`` grows downward.
    """

    x: float
    """X coordinate."""

    y: float
    """Y coordinate."""

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def length(self) -> float:
        """Euclidean norm of this vector."""
        return math.hypot(self.x, self.y)

    def distance(self, other: Point) -> float:
        """Euclidean distance to *other*."""
        return (self - other).length()


class Cardinal(enum.Enum):
    """8-way direction of one point relative to another.

    Values are a 4-bit mask: bits 0-1 hold the vertical axis (``UP``/``DOWN``),
    bits 2-3 the horizontal axis (``LEFT``/``RIGHT``).  Masks with both bits of
    one axis set have no member and collapse to ``NONE`` in :func:`combine`.
    """

    NONE = 0
    UP = 1
    DOWN = 2
    LEFT = 4
    RIGHT = 8
    UP_LEFT = 5
    DOWN_LEFT = 6
    UP_RIGHT = 9
    DOWN_RIGHT = 10

    @property
    def is_diagonal(self) -> bool:
        return self in _DIAGONALS


_DIAGONALS = frozenset({
    Cardinal.UP_LEFT,
    Cardinal.UP_RIGHT,
    Cardinal.DOWN_LEFT,
    Cardinal.DOWN_RIGHT,
})

_BY_MASK: dict[int, Cardinal] = {c.value: c for c in Cardinal}


def combine(a: Cardinal, b: Cardinal) -> Cardinal:
    """OR two single-axis directions into one named direction.

    Unrecognised bit patterns (e.g. ``UP | DOWN``) yield ``Cardinal.NONE``.
    """
    return _BY_MASK.get(a.value | b.value, Cardinal.NONE)


@dataclass(frozen=True)
class Target:
    """A checkpoint paired with its corner-cut aim point, when known."""

    original: Point
    """Checkpoint centre as observed in telemetry."""

    tuned: Point | None = None
    """Corner-cut aim point; ``None`` until the lap has been mapped."""

    @property
    def effective(self) -> Point:
        """The point to steer at: ``tuned`` if available, else ``original``."""
        return self.tuned if self.tuned is not None else self.original
