"""
Ring preset loading
i.e. named GaugeState configurations read from a TOML file.
"""

from __future__ import annotations

import logging
from pathlib import Path  # used to locate the presets file
import tomllib  # used for the ring presets file
from typing import Any

from percentage_ring.state import GaugeState

logger = logging.getLogger(__name__)

RING_PRESETS_TOML_PATH: Path = (  # Default location for ring presets.
    Path(__file__).resolve().parent / "ring_presets.toml"
)  # Keep this near the package for portability.

PRESET_KEYS: frozenset[str] = frozenset(  # Keys a preset table may set.
    {
        "min_angle",
        "max_angle",
        "scale_width",
        "scale_padding",
        "step_size",
        "value",
        "is_interactive",
        "value_format",
        "off_scale_policy",
    }
)


def parse_ring_presets(text: str) -> dict[str, GaugeState]:
    """Build GaugeStates from TOML text with one table per preset."""
    raw: dict[str, Any] = tomllib.loads(text)  # Parse TOML text.
    presets: dict[str, GaugeState] = {}  # Prepare the output mapping.
    for preset_id, preset_dict in raw.items():  # Iterate over each preset section.
        if not isinstance(preset_dict, dict):
            raise ValueError(f"Preset '{preset_id}' must be a table.")
        unknown: set[str] = set(preset_dict) - PRESET_KEYS
        if unknown:  # Fail fast on typos rather than silently using defaults.
            raise ValueError(
                f"Unknown keys in preset '{preset_id}': {', '.join(sorted(unknown))}"
            )
        try:
            presets[preset_id] = GaugeState(**preset_dict)  # Validates on construction.
        except ValueError as exc:
            raise ValueError(f"Invalid preset '{preset_id}': {exc}") from exc
    return presets  # Return the completed mapping.


def load_ring_presets(path: Path = RING_PRESETS_TOML_PATH) -> dict[str, GaugeState]:
    """Load named ring presets from a TOML file."""
    presets: dict[str, GaugeState] = parse_ring_presets(
        path.read_text(encoding="utf-8")  # Read file contents as UTF-8.
    )
    logger.debug("Loaded %d ring presets from %s", len(presets), path)
    return presets
