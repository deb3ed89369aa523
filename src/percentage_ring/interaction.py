"""
Replays pointer input (taps and drag positions) against a gauge state.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable

from percentage_ring.geometry.arcs import Point
from percentage_ring.state import GaugeState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InteractionSummary:
    """Counts of pointer events that moved the value versus those ignored."""

    total_events: int
    accepted: int
    ignored: int
    final_value: float


def apply_pointer_events(
    state: GaugeState,
    positions: Iterable[Point],
    *,
    width: float,
    height: float,
) -> tuple[GaugeState, InteractionSummary]:
    """Apply control-local pointer positions in order, as a tap or a drag would.

    Args:
        state: Starting gauge state.
        positions: Pointer positions in the control's local coordinates.
        width: Current control width in pixels.
        height: Current control height in pixels.

    Returns:
        The final state and a summary of accepted and ignored events.
    """
    total: int = 0
    accepted: int = 0
    for position in positions:
        total += 1
        updated: GaugeState = state.with_pointer(position, width, height)
        if updated is state:
            continue  # Outside the scale sector, or interaction disabled.
        accepted += 1
        state = updated

    if total and not accepted:
        logger.debug("All %d pointer events were ignored.", total)

    return state, InteractionSummary(
        total_events=total,
        accepted=accepted,
        ignored=total - accepted,
        final_value=state.value,
    )
