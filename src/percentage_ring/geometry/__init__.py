"""Ring geometry engine public API."""

# Re-export the stable interfaces so imports stay clean.

from .angles import (  # Re-export angle helpers from angles module.
    LEGACY_OVERSHOOT_DEG,
    NormalizedAngleRange,  # Canonical (min, max) range.
    OffScalePolicy,
    angle_to_value,
    normalize_angles,  # Raw angle pair folding.
    round_to_step,  # Step rounding for values.
    value_to_angle,  # Value to scale angle.
)
from .arcs import (  # Re-export drawing primitives from arcs module.
    CANVAS_CENTER,
    CANVAS_SIZE,
    Arc,
    DrawPrimitive,
    FullCircle,
    Point,
    build_arc,  # Arc or circle for an angle span.
    build_scale,
    build_trail,
    middle_radius,
    scale_point,
)
from .pointer import pointer_angle, resolve_pointer  # Pointer inversion.

__all__ = [  # Define the public symbols for this package.
    "CANVAS_CENTER",
    "CANVAS_SIZE",
    "LEGACY_OVERSHOOT_DEG",
    "Arc",
    "DrawPrimitive",
    "FullCircle",
    "NormalizedAngleRange",
    "OffScalePolicy",
    "Point",
    "angle_to_value",
    "build_arc",
    "build_scale",
    "build_trail",
    "middle_radius",
    "normalize_angles",
    "pointer_angle",
    "resolve_pointer",
    "round_to_step",
    "scale_point",
    "value_to_angle",
]
