"""Entry point printing arc-length spaced markers for a cubic Bezier curve."""

from __future__ import annotations

import argparse
import json
import logging
import math
from typing import List, Sequence

from src.beziermarks import (
    DEFAULT_CONTROL_POINTS,
    DEFAULT_SPACING,
    DEFAULT_STEP,
    Marker,
    SamplingConfig,
    SamplingConfigError,
    Vec2,
    curve_length,
    place_markers,
)


def main(argv: Sequence[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    control_points = _parse_points(args.points)
    config = SamplingConfig(offset=args.offset, spacing=args.spacing, step=args.step)
    try:
        markers = place_markers(control_points, config)
    except SamplingConfigError as exc:
        parser.error(str(exc))

    if args.json:
        print(json.dumps(_markers_to_payload(markers), indent=2))
    else:
        _print_marker_table(markers)

    if args.length:
        total = curve_length(*control_points, step=config.step)
        print(f"Curve length: {total:.3f}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Place evenly spaced markers along a cubic Bezier curve"
    )
    parser.add_argument(
        "--points",
        type=float,
        nargs=8,
        metavar=("X0", "Y0", "X1", "Y1", "X2", "Y2", "X3", "Y3"),
        help="Control point coordinates (defaults to the sketch curve)",
    )
    parser.add_argument(
        "--offset",
        type=float,
        default=0.0,
        help="Arc length before the first marker",
    )
    parser.add_argument(
        "--spacing",
        type=float,
        default=DEFAULT_SPACING,
        help="Arc length between consecutive markers",
    )
    parser.add_argument(
        "--step",
        type=float,
        default=DEFAULT_STEP,
        help="Parametric step used by the arc-length integrator",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print markers as JSON instead of a table",
    )
    parser.add_argument(
        "--length",
        action="store_true",
        help="Also print the total curve length",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _parse_points(raw: Sequence[float] | None) -> List[Vec2]:
    if raw is None:
        return list(DEFAULT_CONTROL_POINTS)
    return [(raw[i], raw[i + 1]) for i in range(0, 8, 2)]


def _markers_to_payload(markers: Sequence[Marker]) -> list:
    return [
        {
            "t": marker.t,
            "position": list(marker.position),
            "tangent": list(marker.tangent),
            "angle": marker.angle,
        }
        for marker in markers
    ]


def _print_marker_table(markers: Sequence[Marker]) -> None:
    if not markers:
        print("No markers fit on the curve.")
        return
    print(f"{'#':>4s}  {'t':>8s}  {'x':>10s}  {'y':>10s}  {'heading':>8s}")
    for index, marker in enumerate(markers):
        x, y = marker.position
        heading = math.degrees(marker.angle)
        print(f"{index:4d}  {marker.t:8.4f}  {x:10.3f}  {y:10.3f}  {heading:8.2f}")


if __name__ == "__main__":
    main()
