"""Percentage ring gauge: geometry engine, state and rendering sinks."""

from .state import GaugeState, RingGeometry, compute_geometry

__all__ = [
    "GaugeState",
    "RingGeometry",
    "compute_geometry",
]
