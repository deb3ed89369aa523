"""Pointer position to gauge value conversion for interactive rings."""

from __future__ import annotations

import math

from percentage_ring.geometry.angles import (
    FULL_TURN_DEG,
    VALUE_MAXIMUM,
    VALUE_MINIMUM,
    NormalizedAngleRange,
)
from percentage_ring.geometry.arcs import Point


def pointer_angle(pointer: Point, center: Point) -> float:
    """Return the pointer angle in degrees (0 at the top, clockwise positive)."""
    dx: float = pointer.x - center.x  # Right of center is positive.
    dy: float = center.y - pointer.y  # Flip y so up is positive.
    # Swapped atan2 arguments measure from the top instead of from 3 o'clock.
    return math.degrees(math.atan2(dx, dy))


def resolve_pointer(
    pointer: Point,
    center: Point,
    angle_range: NormalizedAngleRange,
) -> float | None:
    """Return the value under the pointer, or None if it is outside the scale sector."""
    span: float = angle_range.span % FULL_TURN_DEG
    if span == 0:
        span = FULL_TURN_DEG  # A zero remainder means a full turn.

    # Distance from the scale start, wrapped to [0, 360).
    shifted: float = (pointer_angle(pointer, center) - angle_range.min) % FULL_TURN_DEG
    value: float = VALUE_MINIMUM + (shifted / span) * (VALUE_MAXIMUM - VALUE_MINIMUM)
    if value < VALUE_MINIMUM or value > VALUE_MAXIMUM:
        # Positions outside the scale angle are ignored, not clamped.
        return None
    return value
