"""Geometry primitives for checkpoint layout analysis.

Directions follow screen convention: ``DOWN`` is ``+y`` and ``RIGHT`` is ``+x``.
"""

from __future__ import annotations

from pod_racer.track.models import Cardinal, Point, combine

_ORIGIN = Point(0.0, 0.0)


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between *a* and *b*.

    NaN/Inf coordinates propagate per floating-point semantics.
    """
    return (a - b).length()


# ---------------------------------------------------------------------------
# Direction classification
# ---------------------------------------------------------------------------
#
# The "greater than" branch is checked before the "less than" branch on each
# axis.  For any positive threshold the two conditions overlap, so the first
# branch wins whenever ``other`` lies within ``threshold`` of ``origin``.


def classify_vertical(origin: Point, other: Point, threshold: float) -> Cardinal:
    """Vertical position of *other* relative to *origin*: DOWN, UP or NONE."""
    if other.y + threshold > origin.y:
        return Cardinal.DOWN
    if other.y - threshold < origin.y:
        return Cardinal.UP
    return Cardinal.NONE


def classify_horizontal(origin: Point, other: Point, threshold: float) -> Cardinal:
    """Horizontal position of *other* relative to *origin*: RIGHT, LEFT or NONE."""
    if other.x + threshold > origin.x:
        return Cardinal.RIGHT
    if other.x - threshold < origin.x:
        return Cardinal.LEFT
    return Cardinal.NONE


def classify(origin: Point, other: Point, threshold: float) -> Cardinal:
    """8-way direction of *other* relative to *origin*."""
    return combine(
        classify_vertical(origin, other, threshold),
        classify_horizontal(origin, other, threshold),
    )


def shift_for(cardinal: Cardinal, cardinal_shift: float, diagonal_shift: float) -> Point:
    """Offset vector that moves a point *toward* ``cardinal``.

    Pure axis directions move ``cardinal_shift`` along their axis, diagonals
    move ``diagonal_shift`` along both axes, ``NONE`` does not move.
    """
    if cardinal is Cardinal.NONE:
        return _ORIGIN

    magnitude = diagonal_shift if cardinal.is_diagonal else cardinal_shift
    mask = cardinal.value

    dy = 0.0
    if mask & Cardinal.DOWN.value:
        dy = magnitude
    elif mask & Cardinal.UP.value:
        dy = -magnitude

    dx = 0.0
    if mask & Cardinal.RIGHT.value:
        dx = magnitude
    elif mask & Cardinal.LEFT.value:
        dx = -magnitude

    return Point(dx, dy)
