"""Render one percentage ring (or a grid of random rings) and save artifacts."""

from __future__ import annotations

import argparse
from dataclasses import asdict, replace
from datetime import datetime
import json
import logging
from pathlib import Path
import sys
from typing import Any

import cv2

# Add `src` to sys.path so this script works even before `poetry install`.
PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
SRC_DIR: Path = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from percentage_ring.geometry.arcs import Point
from percentage_ring.interaction import apply_pointer_events
from percentage_ring.presets import RING_PRESETS_TOML_PATH, load_ring_presets
from percentage_ring.render import (
    random_ring_colors,
    random_ring_states,
    render_ring,
    render_ring_grid,
    svg_path_data,
)
from percentage_ring.state import GaugeState


def parse_point(text: str) -> Point:
    """Parse an ``x,y`` pointer position."""
    try:
        x_str, y_str = text.split(",")
        return Point(x=float(x_str), y=float(y_str))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected x,y but got {text!r}.") from exc


def parse_args() -> argparse.Namespace:
    """Parse CLI arguments for a ring render."""
    parser = argparse.ArgumentParser(description="Render a percentage ring gauge.")
    parser.add_argument("--preset", type=str, default="", help="Preset id to start from.")
    parser.add_argument("--presets-file", type=Path, default=RING_PRESETS_TOML_PATH)
    parser.add_argument("--min-angle", type=int, default=None)
    parser.add_argument("--max-angle", type=int, default=None)
    parser.add_argument("--scale-width", type=float, default=None)
    parser.add_argument("--step-size", type=float, default=None)
    parser.add_argument("--value", type=float, default=None)
    parser.add_argument("--value-format", type=str, default=None)
    parser.add_argument(
        "--pointer",
        type=parse_point,
        action="append",
        default=[],
        help="Pointer position x,y in image pixels; repeat to replay a drag.",
    )
    parser.add_argument("--size", type=int, default=200, help="Image size in pixels.")
    parser.add_argument(
        "--grid",
        type=int,
        default=0,
        help="Render this many random rings in a grid instead of one ring.",
    )
    parser.add_argument("--columns", type=int, default=4)
    parser.add_argument("--seed", type=int, default=21)
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=PROJECT_ROOT / "artifacts" / "renders",
    )
    parser.add_argument(
        "--run-name",
        type=str,
        default="",
        help="Optional run folder name. Defaults to timestamp.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
    )
    return parser.parse_args()


def build_state(args: argparse.Namespace) -> GaugeState:
    """Start from the preset (if any) and apply explicit flag overrides."""
    state: GaugeState = GaugeState()
    if args.preset:
        presets: dict[str, GaugeState] = load_ring_presets(args.presets_file)
        if args.preset not in presets:
            raise SystemExit(f"Unknown preset '{args.preset}'. Known: {', '.join(presets)}")
        state = presets[args.preset]

    overrides: dict[str, Any] = {
        "min_angle": args.min_angle,
        "max_angle": args.max_angle,
        "scale_width": args.scale_width,
        "step_size": args.step_size,
        "value_format": args.value_format,
    }
    state = state.with_config(**{k: v for k, v in overrides.items() if v is not None})
    if args.value is not None:
        state = state.with_value(args.value)
    return state


def main() -> None:
    """Render the ring, then persist image + geometry."""
    args = parse_args()
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    # Create a unique run folder so repeated renders do not overwrite each other.
    run_name: str = args.run_name or datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir: Path = args.output_dir / run_name
    run_dir.mkdir(parents=True, exist_ok=True)
    image_path: Path = run_dir / "ring.png"

    if args.grid > 0:
        states: list[GaugeState] = random_ring_states(args.grid, seed=args.seed)
        # Each ring gets its own scale and trail brush.
        grid = render_ring_grid(
            states,
            columns=args.columns,
            size=args.size,
            colors=random_ring_colors(len(states), seed=args.seed),
        )
        cv2.imwrite(str(image_path), grid)
        print(f"Run directory: {run_dir}")
        print(f"Grid saved: {image_path} ({len(states)} rings)")
        return

    state: GaugeState = build_state(args)
    if args.pointer:
        # Pointer events only move interactive rings.
        state = replace(state, is_interactive=True)
        state, summary = apply_pointer_events(
            state, args.pointer, width=args.size, height=args.size
        )
        print(f"Pointer summary: {summary}")

    cv2.imwrite(str(image_path), render_ring(state, size=args.size))

    geometry = state.geometry
    geometry_payload: dict[str, Any] = {
        "state": asdict(state),
        "geometry": asdict(geometry),
        "svg": {
            "scale": svg_path_data(geometry.scale),
            "trail": svg_path_data(geometry.trail) if geometry.trail is not None else None,
        },
    }
    geometry_path: Path = run_dir / "geometry.json"
    geometry_path.write_text(json.dumps(geometry_payload, indent=2), encoding="utf-8")

    # Print a concise summary for quick feedback in terminal.
    print(f"Run directory: {run_dir}")
    print(f"Image saved: {image_path}")
    print(f"Angle range: {geometry.angle_range}")
    print(f"Value: {geometry.value_text} at {geometry.value_angle:.2f} deg")


if __name__ == "__main__":
    main()
