"""Drawing primitives for the ring scale and trail on the 200x200 logical canvas."""

from __future__ import annotations

from dataclasses import dataclass
import math

from percentage_ring.geometry.angles import FULL_TURN_DEG, NormalizedAngleRange

CANVAS_SIZE: float = 200.0  # All geometry is computed for a 200x200 square.
CANVAS_RADIUS: float = CANVAS_SIZE / 2.0


@dataclass(frozen=True)
class Point:
    """Point in logical canvas coordinates (y grows downward)."""

    x: float
    y: float


CANVAS_CENTER: Point = Point(x=CANVAS_RADIUS, y=CANVAS_RADIUS)


@dataclass(frozen=True)
class FullCircle:
    """Closed circle, used when the span is exactly one turn."""

    center: Point
    radius: float


@dataclass(frozen=True)
class Arc:
    """Open circular arc from start to end.

    Exactly two circular arcs of a given radius join two points; the sweep
    direction and the large-arc flag pick one of them.
    """

    start: Point
    end: Point
    radius: float
    start_angle: float  # Degrees, 0 at the top, clockwise positive.
    end_angle: float
    is_large_arc: bool
    sweep_clockwise: bool = True


DrawPrimitive = FullCircle | Arc


def middle_radius(scale_width: float, padding: float = 0.0) -> float:
    """Radius through the middle of the scale band, where arc endpoints sit."""
    return CANVAS_RADIUS - padding - (scale_width / 2.0)


def scale_point(angle: float, radius: float) -> Point:
    """Map a clockwise-from-top angle in degrees to a canvas point."""
    rad: float = math.radians(angle)
    return Point(
        x=CANVAS_CENTER.x + math.sin(rad) * radius,
        y=CANVAS_CENTER.y - math.cos(rad) * radius,
    )


def build_arc(start_angle: float, end_angle: float, radius: float) -> DrawPrimitive:
    """Return a full circle for a 360 degree span, otherwise a clockwise arc.

    Degenerate radii are passed through; the primitive is simply degenerate too.
    """
    if end_angle - start_angle == FULL_TURN_DEG:
        # A zero-length arc cannot describe a circle, so special-case it.
        return FullCircle(center=CANVAS_CENTER, radius=radius)

    return Arc(
        start=scale_point(start_angle, radius),
        end=scale_point(end_angle, radius),
        radius=radius,
        start_angle=start_angle,
        end_angle=end_angle,
        is_large_arc=end_angle > start_angle + 180.0,
    )


def build_scale(angle_range: NormalizedAngleRange, radius: float) -> DrawPrimitive:
    """Static scale over the whole normalized range."""
    return build_arc(angle_range.min, angle_range.max, radius)


def build_trail(
    angle_range: NormalizedAngleRange,
    value_angle: float,
    radius: float,
) -> DrawPrimitive | None:
    """Trail from the scale start to the value angle, or None when collapsed."""
    if value_angle <= angle_range.min:
        return None  # No progress: nothing to draw.
    # On overflow, stop the trail at the end of the scale.
    return build_arc(angle_range.min, min(value_angle, angle_range.max), radius)
