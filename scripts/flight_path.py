"""Print flight-path SVG data for a disc.

Usage:
  uv run python scripts/flight_path.py schematic \\
      --speed 12 --glide 5 --turn -1 --fade 3 \\
      --throw-type rhbh

  uv run python scripts/flight_path.py chart \\
      --speed 2 --glide 3 --turn 0 --fade 1 --hand left --style forehand

  uv run python scripts/flight_path.py overlay \\
      --speed 7 --glide 5 --turn -1 --fade 2 \\
      --release-angle hyzer --hand right \\
      --tee 10 90 --basket 90 10 --canvas 300 300
"""

from __future__ import annotations

import argparse
import logging
import sys

from disc_flight.geometry.chart import build_chart
from disc_flight.geometry.models import (
    CanvasConfig,
    FlightNumbers,
    InvalidInputError,
    Point,
    ReleaseAngle,
    ThrowingHand,
    ThrowStyle,
    ThrowType,
)
from disc_flight.geometry.path_generator import compute_overlay_path, compute_schematic_paths


def _add_flight_numbers(ap: argparse.ArgumentParser, required: bool) -> None:
    ap.add_argument("--speed", type=float, required=required)
    ap.add_argument("--glide", type=float, required=required)
    ap.add_argument("--turn", type=float, required=required)
    ap.add_argument("--fade", type=float, required=required)


def _print_paths(paths: dict[str, str]) -> None:
    for angle, path in paths.items():
        print(f"{angle:8s} {path}")


def main() -> None:
    ap = argparse.ArgumentParser(description="Generate disc flight-path SVG data")
    ap.add_argument("--log-level", default="WARNING", help="Python logging level")
    sub = ap.add_subparsers(dest="mode", required=True)

    sp = sub.add_parser("schematic", help="Hyzer/flat/anhyzer paths on a fixed canvas")
    _add_flight_numbers(sp, required=True)
    sp.add_argument("--throw-type", choices=[t.value for t in ThrowType], default="rhbh")
    sp.add_argument(
        "--canvas",
        type=float,
        nargs=5,
        metavar=("WIDTH", "HEIGHT", "START_X", "START_Y", "MAX_DISTANCE_FT"),
        help="Canvas geometry (default 200 300 100 280 400)",
    )

    cp = sub.add_parser("chart", help="Schematic chart with auto-scaled distance markers")
    _add_flight_numbers(cp, required=True)
    cp.add_argument("--hand", choices=[h.value for h in ThrowingHand], default="right")
    cp.add_argument("--style", choices=[s.value for s in ThrowStyle], default="backhand")

    op = sub.add_parser("overlay", help="Tee-to-basket path over a photo")
    _add_flight_numbers(op, required=False)
    op.add_argument("--release-angle", choices=[a.value for a in ReleaseAngle], default="flat")
    op.add_argument("--hand", choices=[h.value for h in ThrowingHand], default="right")
    op.add_argument("--tee", type=float, nargs=2, required=True, metavar=("X_PCT", "Y_PCT"))
    op.add_argument("--basket", type=float, nargs=2, required=True, metavar=("X_PCT", "Y_PCT"))
    op.add_argument("--canvas", type=float, nargs=2, required=True, metavar=("WIDTH", "HEIGHT"))

    args = ap.parse_args()
    logging.basicConfig(level=args.log_level.upper())

    try:
        if args.mode == "schematic":
            fn = FlightNumbers(args.speed, args.glide, args.turn, args.fade)
            canvas = CanvasConfig(*args.canvas) if args.canvas else None
            _print_paths(compute_schematic_paths(fn, args.throw_type, canvas).as_dict())

        elif args.mode == "chart":
            fn = FlightNumbers(args.speed, args.glide, args.turn, args.fade)
            chart = build_chart(fn, args.hand, args.style)
            print(f"Throw     : {chart.throw_type.value}")
            print(f"Scale     : {chart.canvas.max_distance} ft")
            for m in chart.markers:
                print(f"  {m.distance_ft:>4d} ft  y={m.y:.1f}")
            _print_paths(chart.paths.as_dict())

        else:
            fn = FlightNumbers.from_partial(args.speed, args.glide, args.turn, args.fade)
            print(
                compute_overlay_path(
                    fn,
                    args.release_angle,
                    args.hand,
                    Point(*args.tee),
                    Point(*args.basket),
                    *args.canvas,
                )
            )
    except InvalidInputError as exc:
        print(f"  [!] {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
