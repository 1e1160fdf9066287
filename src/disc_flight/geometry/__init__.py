"""Flight-path geometry: flight numbers to SVG Bézier paths."""

from disc_flight.geometry.chart import DistanceMarker, FlightChart, build_chart
from disc_flight.geometry.models import (
    DEFAULT_FLIGHT_NUMBERS,
    BezierPath,
    CanvasConfig,
    FlightNumbers,
    InvalidInputError,
    Point,
    ReleaseAngle,
    SchematicFlightPaths,
    ThrowingHand,
    ThrowStyle,
    ThrowType,
)
from disc_flight.geometry.path_generator import compute_overlay_path, compute_schematic_paths
from disc_flight.geometry.svg_path import format_path, parse_path

__all__ = [
    "DEFAULT_FLIGHT_NUMBERS",
    "BezierPath",
    "CanvasConfig",
    "DistanceMarker",
    "FlightChart",
    "FlightNumbers",
    "InvalidInputError",
    "Point",
    "ReleaseAngle",
    "SchematicFlightPaths",
    "ThrowStyle",
    "ThrowType",
    "ThrowingHand",
    "build_chart",
    "compute_overlay_path",
    "compute_schematic_paths",
    "format_path",
    "parse_path",
]
