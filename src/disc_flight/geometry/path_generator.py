"""Flight path generation from disc flight numbers.

Two entry points share one lateral-effect routine:

* :func:`compute_schematic_paths`: fixed vertical canvas, one path per
  release angle, for comparing hyzer / flat / anhyzer side by side.
* :func:`compute_overlay_path`: an arbitrary tee→basket segment on a photo,
  one path for the release angle the player picked.

Both return SVG path data (see :mod:`disc_flight.geometry.svg_path`).  This is
a decorative curve, not a physics simulation.
"""

from __future__ import annotations

import logging
import math

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
    ThrowType,
)
from disc_flight.geometry.svg_path import format_path

_logger = logging.getLogger(__name__)

# (turn multiplier, fade multiplier) per release angle
_RELEASE_MULTIPLIERS: dict[ReleaseAngle, tuple[float, float]] = {
    ReleaseAngle.HYZER: (0.5, 1.4),
    ReleaseAngle.FLAT: (1.0, 1.0),
    ReleaseAngle.ANHYZER: (1.6, 0.6),
}

_MIRRORED_THROWS = frozenset({ThrowType.RHFH, ThrowType.LHBH})

# Pixels kept free above the end of the flight on the schematic canvas.
TOP_MARGIN = 20

# Schematic distance model (feet).
_BASE_DISTANCE_FT = 30
_FEET_PER_SPEED = 28
_FEET_PER_GLIDE = 5

_SCHEMATIC_SCALE_PX = 250
_SCHEMATIC_TURN_GAIN = 10
_SCHEMATIC_FADE_GAIN = 15
_SCHEMATIC_ARC_GAIN = 6

_OVERLAY_SCALE_PX = 200
_OVERLAY_TURN_GAIN = 8
_OVERLAY_FADE_GAIN = 12


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def should_mirror(throw_type: ThrowType | str) -> bool:
    """Return True if *throw_type* flies the mirror image of RHBH."""
    return ThrowType(throw_type) in _MIRRORED_THROWS


def estimated_distance(speed: float, glide: float, max_distance: float) -> float:
    """Rough carry distance in feet, capped at *max_distance*."""
    raw = _BASE_DISTANCE_FT + speed * _FEET_PER_SPEED + glide * _FEET_PER_GLIDE
    if raw > max_distance:
        _logger.debug("Distance %.1f ft clamped to chart scale %.1f ft", raw, max_distance)
    return min(raw, max_distance)


def lateral_effects(
    turn: float,
    fade: float,
    release_angle: ReleaseAngle | str,
    effect_scale: float,
    mirror: bool,
    turn_gain: float,
    fade_gain: float,
) -> tuple[float, float]:
    """Return ``(turn_effect, fade_effect)`` in pixels.

    Negative turn pushes the curve right for RHBH, positive fade pulls it
    back left.  Hyzer damps turn and boosts fade; anhyzer does the opposite.
    """
    turn_mult, fade_mult = _RELEASE_MULTIPLIERS[ReleaseAngle(release_angle)]
    turn_effect = turn * turn_gain * effect_scale * turn_mult
    fade_effect = fade * fade_gain * effect_scale * fade_mult
    if mirror:
        turn_effect = -turn_effect
        fade_effect = -fade_effect
    return turn_effect, fade_effect


def _require_finite(what: str, *values: float) -> None:
    if not all(math.isfinite(v) for v in values):
        raise InvalidInputError(f"{what} must be finite, got {values!r}")


# ---------------------------------------------------------------------------
# Schematic mode
# ---------------------------------------------------------------------------


def schematic_curve(
    flight_numbers: FlightNumbers,
    release_angle: ReleaseAngle | str,
    mirror: bool,
    canvas: CanvasConfig,
) -> BezierPath:
    """Build the schematic curve for one release angle.

    The disc leaves ``(start_x, start_y)`` heading straight up the canvas.
    Control point 1 carries the turn phase at 40 % of the flight; control
    point 2 sits near the apex and blends turn into fade; the end point is
    displaced by the fade alone.
    """
    fn = flight_numbers
    start_x, start_y = canvas.start_x, canvas.start_y

    pixels_per_foot = (start_y - TOP_MARGIN) / canvas.max_distance
    flight_length = estimated_distance(fn.speed, fn.glide, canvas.max_distance) * pixels_per_foot
    effect_scale = flight_length / _SCHEMATIC_SCALE_PX

    turn_effect, fade_effect = lateral_effects(
        fn.turn,
        fn.fade,
        release_angle,
        effect_scale,
        mirror,
        _SCHEMATIC_TURN_GAIN,
        _SCHEMATIC_FADE_GAIN,
    )
    arc_height = fn.glide * _SCHEMATIC_ARC_GAIN * effect_scale

    end_y = start_y - flight_length
    end_x = start_x - fade_effect

    return BezierPath(
        start=Point(start_x, start_y),
        control1=Point(start_x + turn_effect, start_y - flight_length * 0.4),
        control2=Point(start_x + turn_effect * 0.5 - fade_effect * 0.3, end_y + arc_height),
        end=Point(end_x, end_y),
    )


def compute_schematic_paths(
    flight_numbers: FlightNumbers,
    throw_type: ThrowType | str,
    canvas: CanvasConfig | None = None,
) -> SchematicFlightPaths:
    """Return hyzer, flat and anhyzer paths for one disc and throw type.

    Raises
    ------
    InvalidInputError
        If any flight number or canvas value is non-finite, ``max_distance``
        is not positive, or ``start_y`` leaves no room above the top margin.
    """
    canvas = canvas or CanvasConfig()
    _require_finite("Flight numbers", flight_numbers.speed, flight_numbers.glide,
                    flight_numbers.turn, flight_numbers.fade)
    _require_finite("Canvas", canvas.width, canvas.height, canvas.start_x,
                    canvas.start_y, canvas.max_distance)
    if canvas.max_distance <= 0:
        raise InvalidInputError(f"max_distance must be > 0, got {canvas.max_distance}")
    if canvas.start_y <= TOP_MARGIN:
        raise InvalidInputError(f"start_y must be > {TOP_MARGIN}, got {canvas.start_y}")

    mirror = should_mirror(throw_type)
    paths = {
        angle.value: format_path(schematic_curve(flight_numbers, angle, mirror, canvas))
        for angle in ReleaseAngle
    }
    return SchematicFlightPaths(**paths)


# ---------------------------------------------------------------------------
# Overlay mode
# ---------------------------------------------------------------------------


def overlay_curve(
    flight_numbers: FlightNumbers | None,
    release_angle: ReleaseAngle | str,
    throwing_hand: ThrowingHand | str,
    start_point: Point,
    end_point: Point,
    canvas_width: float,
    canvas_height: float,
) -> BezierPath:
    """Build the overlay curve between a tee and a basket.

    *start_point* and *end_point* are percentages (0–100) of the canvas.
    Lateral offsets are applied along the unit perpendicular of the
    tee→basket line: turn at 35 % of the way, turn fading into fade at 75 %.
    """
    fn = flight_numbers or DEFAULT_FLIGHT_NUMBERS
    _require_finite("Flight numbers", fn.speed, fn.glide, fn.turn, fn.fade)
    _require_finite("Overlay geometry", start_point.x, start_point.y, end_point.x,
                    end_point.y, canvas_width, canvas_height)

    tee_x = (start_point.x / 100) * canvas_width
    tee_y = (start_point.y / 100) * canvas_height
    basket_x = (end_point.x / 100) * canvas_width
    basket_y = (end_point.y / 100) * canvas_height

    dx = basket_x - tee_x
    dy = basket_y - tee_y
    distance = math.sqrt(dx * dx + dy * dy)
    if distance == 0:
        raise InvalidInputError("Tee and basket positions coincide")

    mirror = ThrowingHand(throwing_hand) is ThrowingHand.LEFT
    turn_effect, fade_effect = lateral_effects(
        fn.turn,
        fn.fade,
        release_angle,
        distance / _OVERLAY_SCALE_PX,
        mirror,
        _OVERLAY_TURN_GAIN,
        _OVERLAY_FADE_GAIN,
    )

    perp_x = -dy / distance
    perp_y = dx / distance
    late_offset = turn_effect * 0.3 - fade_effect

    return BezierPath(
        start=Point(tee_x, tee_y),
        control1=Point(
            tee_x + dx * 0.35 + perp_x * turn_effect,
            tee_y + dy * 0.35 + perp_y * turn_effect,
        ),
        control2=Point(
            tee_x + dx * 0.75 + perp_x * late_offset,
            tee_y + dy * 0.75 + perp_y * late_offset,
        ),
        end=Point(basket_x, basket_y),
    )


def compute_overlay_path(
    flight_numbers: FlightNumbers | None,
    release_angle: ReleaseAngle | str,
    throwing_hand: ThrowingHand | str,
    start_point: Point,
    end_point: Point,
    canvas_width: float,
    canvas_height: float,
) -> str:
    """Return the overlay path for one throw from tee to basket.

    ``flight_numbers=None`` falls back to :data:`DEFAULT_FLIGHT_NUMBERS`.

    Raises
    ------
    InvalidInputError
        If tee and basket coincide in pixel space or any input is non-finite.
    """
    return format_path(
        overlay_curve(
            flight_numbers,
            release_angle,
            throwing_hand,
            start_point,
            end_point,
            canvas_width,
            canvas_height,
        )
    )
