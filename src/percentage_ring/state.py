"""
Gauge state and the pure recompute that derives its geometry
i.e. one immutable configuration snapshot in, scale/trail primitives out.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import cached_property
import logging
import math
from typing import Any

from percentage_ring.geometry.angles import (
    OFF_SCALE_POLICIES,
    NormalizedAngleRange,
    OffScalePolicy,
    normalize_angles,
    round_to_step,
    value_to_angle,
)
from percentage_ring.geometry.arcs import (
    DrawPrimitive,
    Point,
    build_scale,
    build_trail,
    middle_radius,
)
from percentage_ring.geometry.pointer import resolve_pointer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RingGeometry:
    """Everything a renderer needs for one state snapshot."""

    angle_range: NormalizedAngleRange
    middle_radius: float
    value: float
    value_angle: float
    scale: DrawPrimitive
    trail: DrawPrimitive | None  # None when the trail is collapsed.
    value_text: str


@dataclass(frozen=True)
class GaugeState:
    """Configuration and current value of one percentage ring."""

    value: float = 0.0
    step_size: float = 0.0  # 0 disables rounding.
    min_angle: int = 0  # Degrees, 0 at the top, clockwise positive.
    max_angle: int = 360
    scale_width: float = 26.0  # In logical units of the 200x200 canvas.
    scale_padding: float = 0.0
    is_interactive: bool = False
    value_format: str = ",.0f"  # format() spec for the value text.
    off_scale_policy: OffScalePolicy = "clamp"

    def __post_init__(self) -> None:
        _validate_state(self)

    @cached_property
    def geometry(self) -> RingGeometry:
        """Derived geometry, computed once per snapshot."""
        return compute_geometry(self)

    @property
    def value_text(self) -> str:
        return self.geometry.value_text

    def with_value(self, value: float) -> GaugeState:
        """Return a copy holding the step-rounded value; NaN leaves the state as is."""
        if math.isnan(value):
            logger.debug("Ignoring NaN value for gauge state.")
            return self
        return replace(self, value=round_to_step(value, self.step_size))

    def with_config(self, **changes: Any) -> GaugeState:
        """Return a validated copy with configuration fields replaced.

        A value in the changes goes through with_value, so NaN is skipped and
        the stored value is always rounded to the (possibly new) step.
        """
        value: float = changes.pop("value", self.value)
        if math.isnan(value):
            logger.debug("Ignoring NaN value in configuration change.")
            value = self.value
        updated: GaugeState = replace(self, **changes) if changes else self
        if value != updated.value or "step_size" in changes:
            updated = updated.with_value(value)
        return updated

    def with_pointer(self, position: Point, width: float, height: float) -> GaugeState:
        """Apply a control-local pointer position; inert when not interactive."""
        if not self.is_interactive:
            return self
        center: Point = Point(x=width / 2.0, y=height / 2.0)
        value: float | None = resolve_pointer(position, center, self.geometry.angle_range)
        if value is None:
            logger.debug("Pointer at (%.1f, %.1f) is outside the scale.", position.x, position.y)
            return self
        return self.with_value(value)


def _validate_state(state: GaugeState) -> None:
    """Guard against configurations that cannot produce a ring."""
    if math.isnan(state.value):
        raise ValueError("value must not be NaN.")
    if state.scale_width < 0:
        raise ValueError("scale_width must be >= 0.")
    if state.scale_padding < 0:
        raise ValueError("scale_padding must be >= 0.")
    if state.step_size < 0:
        raise ValueError("step_size must be >= 0.")
    if state.off_scale_policy not in OFF_SCALE_POLICIES:
        raise ValueError(
            f"off_scale_policy must be one of {OFF_SCALE_POLICIES}, got {state.off_scale_policy!r}."
        )
    if middle_radius(state.scale_width, state.scale_padding) <= 0:
        raise ValueError("scale_width and scale_padding leave no positive ring radius.")


def compute_geometry(state: GaugeState) -> RingGeometry:
    """Derive the ring geometry: normalize, then map the value, then build arcs."""
    angle_range: NormalizedAngleRange = normalize_angles(state.min_angle, state.max_angle)
    radius: float = middle_radius(state.scale_width, state.scale_padding)

    # Round before deriving the angle so the drawing matches the displayed value.
    value: float = round_to_step(state.value, state.step_size)
    value_angle: float = value_to_angle(value, angle_range, policy=state.off_scale_policy)

    return RingGeometry(
        angle_range=angle_range,
        middle_radius=radius,
        value=value,
        value_angle=value_angle,
        scale=build_scale(angle_range, radius),
        trail=build_trail(angle_range, value_angle, radius),
        value_text=format(value, state.value_format),
    )
