"""Schematic flight chart layout.

Picks a distance scale that suits the disc (putters zoom in, distance
drivers zoom out), places the distance markers, and renders the three
release-angle paths onto the chart canvas.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from disc_flight.geometry.models import (
    CanvasConfig,
    FlightNumbers,
    InvalidInputError,
    SchematicFlightPaths,
    ThrowingHand,
    ThrowStyle,
    ThrowType,
)
from disc_flight.geometry.path_generator import (
    TOP_MARGIN,
    compute_schematic_paths,
    estimated_distance,
)

CHART_WIDTH = 240
CHART_HEIGHT = 300
LABEL_MARGIN = 40
"""Space on the left for the distance labels."""

SCALE_STEP_FT = 50
MIN_SCALE_FT = 100
MAX_SCALE_FT = 400


@dataclass(frozen=True)
class DistanceMarker:
    y: float
    """Canvas y coordinate of the gridline."""

    distance_ft: int
    """Label value in feet from the tee."""


@dataclass(frozen=True)
class FlightChart:
    throw_type: ThrowType
    """Hand and style the paths were drawn for."""

    canvas: CanvasConfig
    """Chart canvas; ``max_distance`` is the auto-picked scale."""

    markers: list[DistanceMarker]
    """Distance gridlines, nearest the tee first."""

    paths: SchematicFlightPaths
    """Hyzer, flat and anhyzer paths on :attr:`canvas`."""


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _require_finite_flight_numbers(fn: FlightNumbers) -> None:
    if not all(math.isfinite(v) for v in (fn.speed, fn.glide, fn.turn, fn.fade)):
        raise InvalidInputError(f"Flight numbers must be finite, got {fn!r}")


def chart_max_distance(speed: float, glide: float) -> int:
    """Return the chart scale in feet for a disc.

    The estimated carry is rounded up to the next 50 ft and kept within
    100–400 ft.

    Examples
    --------
    >>> chart_max_distance(12, 5)
    400
    >>> chart_max_distance(2, 1)
    100

    Raises
    ------
    InvalidInputError
        If *speed* or *glide* is non-finite.
    """
    if not (math.isfinite(speed) and math.isfinite(glide)):
        raise InvalidInputError(f"speed and glide must be finite, got {speed!r}, {glide!r}")
    estimated = estimated_distance(speed, glide, math.inf)
    # Huge finite inputs overflow to ±inf (or inf - inf); clamp before rounding.
    if math.isnan(estimated):
        estimated = MAX_SCALE_FT
    estimated = max(MIN_SCALE_FT, min(MAX_SCALE_FT, estimated))
    return math.ceil(estimated / SCALE_STEP_FT) * SCALE_STEP_FT


def distance_markers(start_y: float, max_distance: float, count: int = 4) -> list[DistanceMarker]:
    """Evenly spaced gridlines from the tee up to *max_distance*.

    The tee line itself (0 ft) is not included.
    """
    if count < 1:
        raise ValueError("count must be >= 1")
    pixels_per_foot = (start_y - TOP_MARGIN) / max_distance
    interval = max_distance / count
    return [
        DistanceMarker(
            y=start_y - i * interval * pixels_per_foot,
            distance_ft=_round_half_up(i * interval),
        )
        for i in range(1, count + 1)
    ]


def build_chart(
    flight_numbers: FlightNumbers,
    hand: ThrowingHand | str = ThrowingHand.RIGHT,
    style: ThrowStyle | str = ThrowStyle.BACKHAND,
) -> FlightChart:
    """Lay out the full schematic chart for one disc and one way of throwing it.

    Raises
    ------
    InvalidInputError
        If any flight number is non-finite.
    """
    _require_finite_flight_numbers(flight_numbers)
    throw_type = ThrowType.from_hand_and_style(hand, style)
    tee_y = CHART_HEIGHT - TOP_MARGIN
    canvas = CanvasConfig(
        width=CHART_WIDTH,
        height=CHART_HEIGHT,
        start_x=LABEL_MARGIN + (CHART_WIDTH - LABEL_MARGIN) / 2,
        start_y=tee_y,
        max_distance=chart_max_distance(flight_numbers.speed, flight_numbers.glide),
    )
    return FlightChart(
        throw_type=throw_type,
        canvas=canvas,
        markers=distance_markers(tee_y, canvas.max_distance),
        paths=compute_schematic_paths(flight_numbers, throw_type, canvas),
    )
