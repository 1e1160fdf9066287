"""FlightPathService — maps Web API requests onto the geometry package."""

from __future__ import annotations

import logging

from disc_flight.geometry.chart import FlightChart, build_chart
from disc_flight.geometry.models import (
    CanvasConfig,
    FlightNumbers,
    InvalidInputError,
    Point,
    SchematicFlightPaths,
    ThrowingHand,
    ThrowType,
)
from disc_flight.geometry.path_generator import compute_overlay_path, compute_schematic_paths
from disc_flight.web.schemas import (
    ChartRequest,
    FlightNumbersIn,
    OverlayRequest,
    SchematicRequest,
)

_logger = logging.getLogger(__name__)


def _flight_numbers(fn: FlightNumbersIn) -> FlightNumbers:
    return FlightNumbers(speed=fn.speed, glide=fn.glide, turn=fn.turn, fade=fn.fade)


class FlightPathService:
    """Stateless adapter between request schemas and the path generator.

    Parameters
    ----------
    default_hand:
        Throwing hand used when a request does not name one (normally the
        player's profile setting).
    """

    def __init__(self, default_hand: ThrowingHand | str = ThrowingHand.RIGHT) -> None:
        self._default_hand = ThrowingHand(default_hand)

    def schematic(self, req: SchematicRequest) -> SchematicFlightPaths:
        """Compute the three release-angle paths.

        Raises
        ------
        InvalidInputError
            Propagated from the path generator.
        """
        throw_type = req.throw_type or ThrowType.from_hand_and_style(
            req.hand or self._default_hand, req.style
        )
        canvas = CanvasConfig(**req.canvas.model_dump()) if req.canvas else None
        _logger.debug("Schematic paths for %s (%s)", req.flight_numbers, throw_type.value)
        try:
            return compute_schematic_paths(_flight_numbers(req.flight_numbers), throw_type, canvas)
        except InvalidInputError as exc:
            _logger.warning("Rejected schematic request: %s", exc)
            raise

    def overlay(self, req: OverlayRequest) -> str:
        """Compute the tee→basket overlay path.

        Returns an empty string while the photo has no size yet (not laid
        out), so callers can render nothing instead of failing.

        Raises
        ------
        InvalidInputError
            If tee and basket coincide or any value is non-finite.
        """
        if req.canvas_width <= 0 or req.canvas_height <= 0:
            _logger.debug("Overlay canvas not sized yet (%sx%s)", req.canvas_width, req.canvas_height)
            return ""

        flight_numbers = None
        if req.flight_numbers is not None:
            flight_numbers = FlightNumbers.from_partial(**req.flight_numbers.model_dump())

        try:
            return compute_overlay_path(
                flight_numbers,
                req.release_angle,
                req.hand or self._default_hand,
                Point(req.tee.x, req.tee.y),
                Point(req.basket.x, req.basket.y),
                req.canvas_width,
                req.canvas_height,
            )
        except InvalidInputError as exc:
            _logger.warning("Rejected overlay request: %s", exc)
            raise

    def chart(self, req: ChartRequest) -> FlightChart:
        try:
            return build_chart(
                _flight_numbers(req.flight_numbers),
                req.hand or self._default_hand,
                req.style,
            )
        except InvalidInputError as exc:
            _logger.warning("Rejected chart request: %s", exc)
            raise
