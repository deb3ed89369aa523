"""
Angle normalization and value/angle mapping for the percentage ring
i.e. the math that turns a raw (min, max) angle pair into a canonical range,
and places a value in [0, 100] on that range.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

VALUE_MINIMUM: float = 0.0  # Value at the start of the scale.
VALUE_MAXIMUM: float = 100.0  # Value at the end of the scale.
FULL_TURN_DEG: float = 360.0  # One revolution in degrees.
LEGACY_OVERSHOOT_DEG: float = 7.5  # Off-scale offset used by the legacy policy.

OffScalePolicy = Literal["clamp", "legacy_overshoot"]
OFF_SCALE_POLICIES: tuple[str, ...] = ("clamp", "legacy_overshoot")


@dataclass(frozen=True)
class NormalizedAngleRange:
    """Canonical scale range in degrees (0 at the top, clockwise positive)."""

    min: float  # Folded into [-180, 180).
    max: float  # Always >= min, at most min + 360.

    @property
    def span(self) -> float:
        """Angular extent of the scale in degrees."""
        return self.max - self.min

    @property
    def is_full_circle(self) -> bool:
        """True when the scale covers exactly one turn."""
        return self.span == FULL_TURN_DEG


def normalize_angles(raw_min: int, raw_max: int) -> NormalizedAngleRange:
    """Fold a raw (min, max) angle pair into a canonical range, keeping the span."""
    min_angle: float = float(raw_min % 360)  # Floored modulo, always in [0, 360).
    if min_angle >= 180:
        min_angle -= FULL_TURN_DEG  # Move the start into [-180, 180).

    max_angle: float = float(raw_max % 360)  # Same floored modulo for the end.
    if max_angle < 180:
        max_angle += FULL_TURN_DEG  # Provisional end in [180, 540).

    if max_angle > min_angle + FULL_TURN_DEG:
        max_angle -= FULL_TURN_DEG  # Never sweep more than one turn.

    return NormalizedAngleRange(min=min_angle, max=max_angle)


def round_to_step(value: float, step: float) -> float:
    """Round a value to the nearest multiple of step (halves go up).

    A step of zero (or less) disables rounding and returns the value untouched.
    Rounding is idempotent up to float tolerance: steps that are not exact in
    binary (e.g. 0.1) may shift a rounded value by one ulp on a second pass.
    """
    if step <= 0:
        return value
    remainder: float = value % step  # Floored, so negatives round consistently.
    if step - remainder <= remainder:
        return value + (step - remainder)  # Advance to the next multiple.
    return value - remainder  # Retreat to the previous multiple.


def value_to_angle(
    value: float,
    angle_range: NormalizedAngleRange,
    *,
    policy: OffScalePolicy = "clamp",
) -> float:
    """Return the scale angle for a value, handling off-scale values per policy."""
    # Off-scale on the left.
    if value < VALUE_MINIMUM:
        if policy == "legacy_overshoot":
            return angle_range.min - LEGACY_OVERSHOOT_DEG
        return angle_range.min

    # Off-scale on the right.
    if value > VALUE_MAXIMUM:
        if policy == "legacy_overshoot":
            return angle_range.max + LEGACY_OVERSHOOT_DEG
        return angle_range.max

    fraction: float = (value - VALUE_MINIMUM) / (VALUE_MAXIMUM - VALUE_MINIMUM)
    return angle_range.min + fraction * angle_range.span


def angle_to_value(angle: float, angle_range: NormalizedAngleRange) -> float:
    """Inverse of the linear part of value_to_angle (no clamping)."""
    fraction: float = (angle - angle_range.min) / angle_range.span
    return VALUE_MINIMUM + fraction * (VALUE_MAXIMUM - VALUE_MINIMUM)
