"""FastAPI Web application — flight-path rendering API."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException

from disc_flight.geometry.models import InvalidInputError
from disc_flight.web.schemas import (
    ChartRequest,
    ChartResponse,
    HealthResponse,
    MarkerOut,
    OverlayRequest,
    OverlayResponse,
    SchematicRequest,
    SchematicResponse,
)
from disc_flight.web.service import FlightPathService

load_dotenv()  # loads .env from project root; must run before env vars are consumed

logging.basicConfig(level=os.environ.get("DISC_FLIGHT_LOG_LEVEL", "WARNING").upper())

# ---------------------------------------------------------------------------
# App setup
# ---------------------------------------------------------------------------

VERSION = "0.1.0"

app = FastAPI(title="Disc Flight Paths", version=VERSION)

_DEFAULT_HAND = os.environ.get("DISC_FLIGHT_DEFAULT_HAND", "right")


def _service() -> FlightPathService:
    return FlightPathService(default_hand=_DEFAULT_HAND)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", version=VERSION)


@app.post("/api/flight-path/schematic", response_model=SchematicResponse)
def schematic(req: SchematicRequest) -> SchematicResponse:
    """Hyzer, flat and anhyzer paths on the schematic canvas."""
    svc = _service()
    try:
        paths = svc.schematic(req)
    except InvalidInputError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return SchematicResponse(**paths.as_dict())


@app.post("/api/flight-path/overlay", response_model=OverlayResponse)
def overlay(req: OverlayRequest) -> OverlayResponse:
    """One path from tee to basket over a hole photo."""
    svc = _service()
    try:
        path = svc.overlay(req)
    except InvalidInputError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return OverlayResponse(path=path)


@app.post("/api/flight-chart", response_model=ChartResponse)
def flight_chart(req: ChartRequest) -> ChartResponse:
    """Full schematic chart: scale, distance markers and paths."""
    svc = _service()
    try:
        chart = svc.chart(req)
    except InvalidInputError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except Exception as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return ChartResponse(
        throw_type=chart.throw_type,
        width=chart.canvas.width,
        height=chart.canvas.height,
        start_x=chart.canvas.start_x,
        start_y=chart.canvas.start_y,
        max_distance=chart.canvas.max_distance,
        markers=[MarkerOut(y=m.y, distance_ft=m.distance_ft) for m in chart.markers],
        paths=SchematicResponse(**chart.paths.as_dict()),
    )
