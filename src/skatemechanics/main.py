"""
Application Entry Point
=======================
Command-line adapter around the simulation pipeline.

Why is this file needed?
------------------------
It is the only place that touches the environment. It:
1. Parses the command line into a flat field mapping (preset + overrides).
2. Sets up logging.
3. Runs the simulation and prints the results table.
4. Renders the absolute and the skater-relative views to PNG files.

Usage:
    $ python -m skatemechanics --preset willow --set h=0.005 --out results
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from skatemechanics.config import DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH
from skatemechanics.controller.simulation import SimulationResult, run_simulation
from skatemechanics.logging_config import setup_logging
from skatemechanics.model.inputs import RawInputs
from skatemechanics.model.presets import Preset, preset_inputs
from skatemechanics.utils import fmt
from skatemechanics.view.renderer import RenderOptions, render_paths

logger = logging.getLogger(__name__)


def parse_overrides(items: Sequence[str]) -> dict[str, str]:
    """Turn ['key=value', ...] into a mapping; malformed items are skipped."""
    fields: dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            logger.warning(f"Ignoring malformed override {item!r} (expected key=value)")
            continue
        fields[key.strip()] = value.strip()
    return fields


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skatemechanics",
        description="Swing trajectories of a skater's foot under Coriolis and centrifugal effects.",
    )
    parser.add_argument("--preset", choices=[p.value for p in Preset], default=None,
                        help="start from a predefined pattern")
    parser.add_argument("--set", dest="overrides", action="append", default=[], metavar="KEY=VALUE",
                        help="override one input field, e.g. bpm=120 or direction=cw (repeatable)")
    parser.add_argument("--reverse-at-midpoint", action="store_true",
                        help="swing out and back instead of a single swing")
    parser.add_argument("--out", default=".", help="output directory for the images")
    parser.add_argument("--width", type=int, default=DEFAULT_CANVAS_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_CANVAS_HEIGHT)
    parser.add_argument("--no-images", action="store_true", help="only print the results table")
    parser.add_argument("--plot", action="store_true", help="also save a lateral-drift plot (matplotlib)")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None)
    return parser


def format_summary(result: SimulationResult, sig: int = 3) -> str:
    rows = result.summary()
    width = max(len(k) for k in rows)
    return "\n".join(f"{key:<{width}}  {fmt(value, sig)}" for key, value in rows.items())


def render_images(result: SimulationResult, out_dir: str, width: int, height: int) -> list[str]:
    """Render both views to PNG files and return their paths."""
    # Imported here so the pipeline works without a Qt installation
    from PySide6.QtGui import QGuiApplication

    from skatemechanics.view.surfaces import QImageSurface

    # Images are rendered off-screen, no display server required
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QGuiApplication.instance() or QGuiApplication(sys.argv[:1])

    os.makedirs(out_dir, exist_ok=True)
    written: list[str] = []

    views = [
        ("absolute.png", result.absolute_paths(), RenderOptions(grid=True, pad=0.5)),
        ("relative.png", result.relative_paths(), RenderOptions(grid=True, axes=True, pad=0.2, grid_step=0.1)),
    ]
    for filename, paths, options in views:
        surface = QImageSurface(width, height)
        render_paths(surface, paths, options)
        target = os.path.join(out_dir, filename)
        if surface.save(target):
            written.append(target)
    return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    base = preset_inputs(args.preset) if args.preset else RawInputs()
    inputs = RawInputs.from_fields(parse_overrides(args.overrides), base=base)
    logger.debug(f"Inputs: {inputs}")

    result = run_simulation(inputs, reverse_at_midpoint=args.reverse_at_midpoint)
    print(format_summary(result))

    if not args.no_images:
        render_images(result, args.out, args.width, args.height)

    if args.plot:
        from skatemechanics.view.plots import plot_lateral_drift

        os.makedirs(args.out, exist_ok=True)
        plot_lateral_drift(result, save_path=os.path.join(args.out, "lateral_drift.png"))

    return 0


if __name__ == "__main__":
    sys.exit(main())
