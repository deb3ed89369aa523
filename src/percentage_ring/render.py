"""Rendering sinks for ring geometry: SVG path data and OpenCV raster images.

The geometry engine works on a 200x200 logical canvas; the raster sink scales
that canvas to the requested pixel size.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Sequence

import cv2
import numpy as np

from percentage_ring.geometry.arcs import CANVAS_SIZE, Arc, DrawPrimitive, FullCircle
from percentage_ring.state import GaugeState, RingGeometry

Color = tuple[int, int, int]  # OpenCV BGR order.


@dataclass(frozen=True)
class RingColors:
    """Brushes for the three visual parts of a ring, plus the background."""

    scale: Color = (169, 169, 169)  # Dark gray.
    trail: Color = (0, 165, 255)  # Orange.
    value: Color = (255, 255, 255)  # White.
    background: Color = (0, 0, 0)


def svg_path_data(primitive: DrawPrimitive) -> str:
    """Return an SVG path ``d`` attribute for a primitive."""
    if isinstance(primitive, FullCircle):
        # SVG arcs cannot close on themselves, so draw two half circles.
        cx: float = primitive.center.x
        cy: float = primitive.center.y
        r: float = primitive.radius
        return (
            f"M {cx:.2f},{cy - r:.2f} "
            f"A {r:.2f},{r:.2f} 0 1 1 {cx:.2f},{cy + r:.2f} "
            f"A {r:.2f},{r:.2f} 0 1 1 {cx:.2f},{cy - r:.2f} Z"
        )

    large_arc: int = 1 if primitive.is_large_arc else 0
    sweep: int = 1 if primitive.sweep_clockwise else 0
    return (
        f"M {primitive.start.x:.2f},{primitive.start.y:.2f} "
        f"A {primitive.radius:.2f},{primitive.radius:.2f} 0 {large_arc} {sweep} "
        f"{primitive.end.x:.2f},{primitive.end.y:.2f}"
    )


def _draw_primitive(
    image: np.ndarray,
    primitive: DrawPrimitive,
    *,
    scale: float,
    thickness: int,
    color: Color,
) -> None:
    """Stroke one primitive onto the image in place."""
    center_px: int = int(round(CANVAS_SIZE / 2.0 * scale))
    radius_px: int = int(round(primitive.radius * scale))
    if radius_px <= 0:
        return  # Degenerate ring: nothing visible to draw.

    if isinstance(primitive, FullCircle):
        cv2.circle(image, (center_px, center_px), radius_px, color, thickness, cv2.LINE_AA)
        return

    # OpenCV measures ellipse angles from 3 o'clock, clockwise in image coords.
    cv2.ellipse(
        image,
        (center_px, center_px),
        (radius_px, radius_px),
        0.0,
        primitive.start_angle - 90.0,
        primitive.end_angle - 90.0,
        color,
        thickness,
        cv2.LINE_AA,
    )


def render_ring(
    state: GaugeState,
    *,
    size: int = 200,
    colors: RingColors = RingColors(),
) -> np.ndarray:
    """Render a ring state into a square BGR image.

    Args:
        state: Gauge configuration and value to draw.
        size: Output width and height in pixels.
        colors: Brushes for scale, trail, value text and background.

    Returns:
        A ``(size, size, 3)`` uint8 image.
    """
    if size <= 0:
        raise ValueError("size must be > 0.")

    geometry: RingGeometry = state.geometry
    scale: float = size / CANVAS_SIZE
    thickness: int = max(1, int(round(state.scale_width * scale)))

    image: np.ndarray = np.full((size, size, 3), colors.background, dtype=np.uint8)
    _draw_primitive(image, geometry.scale, scale=scale, thickness=thickness, color=colors.scale)
    if geometry.trail is not None:
        _draw_primitive(
            image, geometry.trail, scale=scale, thickness=thickness, color=colors.trail
        )

    # Center the value text; the font scale follows the canvas size.
    font_scale: float = size / 200.0
    text_thickness: int = max(1, int(round(2 * scale)))
    (text_w, text_h), _ = cv2.getTextSize(
        geometry.value_text, cv2.FONT_HERSHEY_SIMPLEX, font_scale, text_thickness
    )
    origin: tuple[int, int] = ((size - text_w) // 2, (size + text_h) // 2)
    cv2.putText(
        image,
        geometry.value_text,
        origin,
        cv2.FONT_HERSHEY_SIMPLEX,
        font_scale,
        colors.value,
        text_thickness,
        cv2.LINE_AA,
    )
    return image


def render_ring_grid(
    states: Sequence[GaugeState],
    *,
    columns: int,
    size: int = 200,
    colors: RingColors | Sequence[RingColors] = RingColors(),
) -> np.ndarray:
    """Tile rendered rings row by row; empty cells keep the background color.

    Args:
        states: Rings to draw, in reading order.
        columns: Number of tiles per row.
        size: Width and height of each tile in pixels.
        colors: One palette for every tile, or one palette per state.

    Returns:
        A ``(rows * size, columns * size, 3)`` uint8 image.
    """
    if columns <= 0:
        raise ValueError("columns must be > 0.")
    if not states:
        raise ValueError("states must not be empty.")

    tile_colors: list[RingColors] = (
        [colors] * len(states) if isinstance(colors, RingColors) else list(colors)
    )
    if len(tile_colors) != len(states):
        raise ValueError(f"Expected {len(states)} color sets, got {len(tile_colors)}.")

    rows: int = math.ceil(len(states) / columns)
    grid: np.ndarray = np.full(
        (rows * size, columns * size, 3), tile_colors[0].background, dtype=np.uint8
    )
    for index, (state, palette) in enumerate(zip(states, tile_colors)):
        row, col = divmod(index, columns)
        grid[row * size : (row + 1) * size, col * size : (col + 1) * size] = render_ring(
            state, size=size, colors=palette
        )
    return grid


def random_ring_colors(count: int, *, seed: int = 21) -> list[RingColors]:
    """Give each ring its own random scale and trail brush; value text stays white."""
    rng: np.random.Generator = np.random.default_rng(seed)
    palettes: list[RingColors] = []
    for _ in range(count):
        scale_bgr, trail_bgr = rng.integers(0, 256, size=(2, 3))
        palettes.append(
            RingColors(
                scale=tuple(int(c) for c in scale_bgr),
                trail=tuple(int(c) for c in trail_bgr),
            )
        )
    return palettes


def random_ring_states(count: int, *, seed: int = 21) -> list[GaugeState]:
    """Build interactive rings with random scale widths (10..59) and values (0..99)."""
    rng: np.random.Generator = np.random.default_rng(seed)
    return [
        GaugeState(
            value=float(rng.integers(0, 100)),
            scale_width=float(10 + rng.integers(0, 50)),
            is_interactive=True,
        )
        for _ in range(count)
    ]
