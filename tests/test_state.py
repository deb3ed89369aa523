"""Unit tests for GaugeState validation, updates and derived geometry."""

from __future__ import annotations

import math

import pytest

from percentage_ring.geometry.angles import NormalizedAngleRange
from percentage_ring.geometry.arcs import Arc, FullCircle, Point
from percentage_ring.state import GaugeState, RingGeometry, compute_geometry


def make_dial(**changes: object) -> GaugeState:
    """Build a -150..150 dial; keyword arguments override fields."""
    fields: dict[str, object] = {"min_angle": -150, "max_angle": 150}
    fields.update(changes)
    return GaugeState(**fields)  # type: ignore[arg-type]


def test_default_state_is_full_ring_at_zero() -> None:
    """Defaults describe a full ring with the trail collapsed."""
    geometry: RingGeometry = GaugeState().geometry
    assert geometry.angle_range == NormalizedAngleRange(min=0.0, max=360.0)
    assert geometry.middle_radius == pytest.approx(87.0)
    assert isinstance(geometry.scale, FullCircle)
    assert geometry.trail is None
    assert geometry.value_text == "0"


def test_full_ring_half_value_trail() -> None:
    """Value 50 on a full ring draws a 0..180 trail that is not a large arc."""
    geometry: RingGeometry = GaugeState(value=50.0).geometry
    assert geometry.value_angle == pytest.approx(180.0)
    assert isinstance(geometry.trail, Arc)
    assert geometry.trail.start_angle == pytest.approx(0.0)
    assert geometry.trail.end_angle == pytest.approx(180.0)
    assert not geometry.trail.is_large_arc


def test_dial_at_zero_hides_trail() -> None:
    """At the no-progress boundary the trail is collapsed."""
    geometry: RingGeometry = make_dial(value=0.0).geometry
    assert geometry.value_angle == pytest.approx(-150.0)
    assert geometry.trail is None
    assert isinstance(geometry.scale, Arc)
    assert geometry.scale.is_large_arc


def test_step_rounding_applies_before_angle() -> None:
    """Step 10 turns 77 into 80, and the angle follows the rounded value."""
    state: GaugeState = GaugeState(step_size=10.0).with_value(77.0)
    assert state.value == pytest.approx(80.0)
    assert state.geometry.value_angle == pytest.approx(288.0)
    assert state.value_text == "80"


def test_geometry_rounds_directly_constructed_value() -> None:
    """A state built with an unrounded value still renders the rounded value."""
    geometry: RingGeometry = GaugeState(value=77.0, step_size=10.0).geometry
    assert geometry.value == pytest.approx(80.0)


def test_with_config_step_size_rerounds_value() -> None:
    """Changing the step re-rounds the stored value."""
    state: GaugeState = GaugeState(value=77.0).with_config(step_size=10.0)
    assert state.value == pytest.approx(80.0)


def test_with_config_returns_new_validated_state() -> None:
    """Configuration changes produce a fresh snapshot and keep validation."""
    state: GaugeState = GaugeState(value=50.0)
    dial: GaugeState = state.with_config(min_angle=-150, max_angle=150)
    assert dial is not state
    assert dial.geometry.value_angle == pytest.approx(0.0)
    with pytest.raises(ValueError, match="scale_width"):
        state.with_config(scale_width=-1.0)


def test_with_value_nan_is_skipped() -> None:
    """NaN values leave the state, and its geometry, untouched."""
    state: GaugeState = GaugeState(value=40.0)
    assert state.with_value(math.nan) is state


def test_with_config_nan_value_is_skipped() -> None:
    """A NaN value passed as configuration is skipped like any other value change."""
    state: GaugeState = GaugeState(value=40.0)
    assert state.with_config(value=math.nan) is state

    # Other fields in the same change still apply.
    dial: GaugeState = state.with_config(value=math.nan, min_angle=-150, max_angle=150)
    assert dial.value == pytest.approx(40.0)
    assert dial.min_angle == -150


def test_with_config_value_is_step_rounded() -> None:
    """Values set through with_config are stored rounded, matching the text."""
    state: GaugeState = GaugeState(step_size=10.0).with_config(value=77.0)
    assert state.value == pytest.approx(80.0)
    assert state.value_text == "80"

    # Value and step changing together round to the new step.
    both: GaugeState = GaugeState().with_config(value=77.0, step_size=5.0)
    assert both.value == pytest.approx(75.0)


def test_geometry_is_memoized() -> None:
    """Geometry is derived once per snapshot."""
    state: GaugeState = GaugeState(value=25.0)
    assert state.geometry is state.geometry
    assert compute_geometry(state) == state.geometry


def test_off_scale_value_clamps_trail_to_scale() -> None:
    """Values above 100 fill the scale but never overshoot it."""
    geometry: RingGeometry = make_dial(value=150.0).geometry
    assert geometry.value_angle == pytest.approx(150.0)
    assert isinstance(geometry.trail, Arc)
    assert geometry.trail.end_angle == pytest.approx(150.0)
    assert geometry.trail == geometry.scale


def test_legacy_overshoot_still_caps_trail() -> None:
    """The legacy policy moves the value angle but the trail stops at the scale end."""
    high: RingGeometry = make_dial(value=150.0, off_scale_policy="legacy_overshoot").geometry
    assert high.value_angle == pytest.approx(157.5)
    assert isinstance(high.trail, Arc)
    assert high.trail.end_angle == pytest.approx(150.0)

    low: RingGeometry = make_dial(value=-10.0, off_scale_policy="legacy_overshoot").geometry
    assert low.value_angle == pytest.approx(-157.5)
    assert low.trail is None


def test_value_format_is_applied() -> None:
    """The value text uses the caller-supplied format spec."""
    assert GaugeState(value=77.4, value_format=".1f").value_text == "77.4"
    assert GaugeState(value=77.4).value_text == "77"


@pytest.mark.parametrize(
    ("changes", "message"),
    [
        ({"scale_width": -1.0}, "scale_width"),
        ({"scale_padding": -1.0}, "scale_padding"),
        ({"step_size": -5.0}, "step_size"),
        ({"off_scale_policy": "wrap"}, "off_scale_policy"),
        ({"scale_width": 200.0}, "radius"),
        ({"scale_width": 150.0, "scale_padding": 30.0}, "radius"),
        ({"value": math.nan}, "NaN"),
    ],
)
def test_invalid_configuration_raises(changes: dict[str, object], message: str) -> None:
    """Configurations that cannot produce a ring are rejected up front."""
    with pytest.raises(ValueError, match=message):
        GaugeState(**changes)  # type: ignore[arg-type]


def test_with_pointer_ignored_when_not_interactive() -> None:
    """Non-interactive rings ignore pointer input."""
    state: GaugeState = GaugeState(value=10.0)
    assert state.with_pointer(Point(200.0, 100.0), 200.0, 200.0) is state


def test_with_pointer_sets_value_from_control_center() -> None:
    """The control center is half its width and height."""
    state: GaugeState = GaugeState(is_interactive=True)
    updated: GaugeState = state.with_pointer(Point(300.0, 100.0), 400.0, 200.0)
    assert updated.value == pytest.approx(25.0)

    top: GaugeState = updated.with_pointer(Point(200.0, 0.0), 400.0, 200.0)
    assert top.value == pytest.approx(0.0)


def test_with_pointer_outside_sector_keeps_value() -> None:
    """Points in the dial gap do not change the value."""
    state: GaugeState = make_dial(value=42.0, is_interactive=True)
    assert state.with_pointer(Point(100.0, 200.0), 200.0, 200.0) is state


def test_with_pointer_applies_step() -> None:
    """Pointer values are step-rounded like any other value."""
    state: GaugeState = GaugeState(is_interactive=True, step_size=10.0)
    # Angle 100 on a full ring is 27.78, which rounds to 30.
    point: Point = Point(
        100.0 + 100.0 * math.sin(math.radians(100.0)),
        100.0 - 100.0 * math.cos(math.radians(100.0)),
    )
    assert state.with_pointer(point, 200.0, 200.0).value == pytest.approx(30.0)
