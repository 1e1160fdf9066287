"""Shared fixtures for web tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from disc_flight.web.app import app


@pytest.fixture
def client():
    """FastAPI test client."""
    with TestClient(app) as c:
        yield c


def make_overlay_payload(**overrides) -> dict:
    """Build a valid POST /api/flight-path/overlay body."""
    payload = {
        "flight_numbers": None,
        "release_angle": "flat",
        "hand": "right",
        "tee": {"x": 10, "y": 90},
        "basket": {"x": 90, "y": 10},
        "canvas_width": 300,
        "canvas_height": 300,
    }
    payload.update(overrides)
    return payload
