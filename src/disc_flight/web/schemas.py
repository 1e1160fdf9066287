"""Pydantic request/response schemas for the flight-path Web API."""

from __future__ import annotations

from pydantic import BaseModel, model_validator

from disc_flight.geometry.models import ReleaseAngle, ThrowingHand, ThrowStyle, ThrowType


class FlightNumbersIn(BaseModel):
    speed: float
    glide: float
    turn: float
    fade: float


class PartialFlightNumbersIn(BaseModel):
    """Flight numbers from an identification result; any field may be unknown."""

    speed: float | None = None
    glide: float | None = None
    turn: float | None = None
    fade: float | None = None


class PointIn(BaseModel):
    x: float
    y: float


class CanvasIn(BaseModel):
    width: float = 200
    height: float = 300
    start_x: float = 100
    start_y: float = 280
    max_distance: float = 400


class SchematicRequest(BaseModel):
    flight_numbers: FlightNumbersIn
    throw_type: ThrowType | None = None
    hand: ThrowingHand | None = None
    style: ThrowStyle = ThrowStyle.BACKHAND
    canvas: CanvasIn | None = None

    @model_validator(mode="after")
    def _throw_type_or_hand(self) -> SchematicRequest:
        if self.throw_type is not None and self.hand is not None:
            raise ValueError("Give either throw_type or hand/style, not both")
        return self


class SchematicResponse(BaseModel):
    hyzer: str
    flat: str
    anhyzer: str


class OverlayRequest(BaseModel):
    flight_numbers: PartialFlightNumbersIn | None = None
    release_angle: ReleaseAngle = ReleaseAngle.FLAT
    hand: ThrowingHand | None = None
    tee: PointIn
    basket: PointIn
    canvas_width: float
    canvas_height: float


class OverlayResponse(BaseModel):
    path: str


class ChartRequest(BaseModel):
    flight_numbers: FlightNumbersIn
    hand: ThrowingHand | None = None
    style: ThrowStyle = ThrowStyle.BACKHAND


class MarkerOut(BaseModel):
    y: float
    distance_ft: int


class ChartResponse(BaseModel):
    throw_type: ThrowType
    width: float
    height: float
    start_x: float
    start_y: float
    max_distance: float
    markers: list[MarkerOut]
    paths: SchematicResponse


class HealthResponse(BaseModel):
    status: str
    version: str
