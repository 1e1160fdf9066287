"""FlightPathService unit tests (no HTTP)."""

from __future__ import annotations

import logging

import pytest

from disc_flight.geometry.models import FlightNumbers, InvalidInputError, ThrowType
from disc_flight.geometry.path_generator import compute_schematic_paths
from disc_flight.web.schemas import ChartRequest, OverlayRequest, SchematicRequest
from disc_flight.web.service import FlightPathService
from tests.web.conftest import make_overlay_payload

_DRIVER = {"speed": 12, "glide": 5, "turn": -1, "fade": 3}


def test_default_hand_applies_to_schematic():
    svc = FlightPathService(default_hand="left")
    paths = svc.schematic(SchematicRequest(flight_numbers=_DRIVER, style="forehand"))
    assert paths == compute_schematic_paths(FlightNumbers(12, 5, -1, 3), ThrowType.LHFH)


def test_explicit_throw_type_wins_over_default_hand():
    svc = FlightPathService(default_hand="left")
    paths = svc.schematic(SchematicRequest(flight_numbers=_DRIVER, throw_type="rhbh"))
    assert paths == compute_schematic_paths(FlightNumbers(12, 5, -1, 3), ThrowType.RHBH)


def test_default_hand_applies_to_overlay():
    payload = make_overlay_payload(hand=None, flight_numbers=_DRIVER)
    left = FlightPathService(default_hand="left").overlay(OverlayRequest(**payload))
    right = FlightPathService(default_hand="right").overlay(OverlayRequest(**payload))
    assert left != right


def test_default_hand_applies_to_chart():
    chart = FlightPathService(default_hand="left").chart(ChartRequest(flight_numbers=_DRIVER))
    assert chart.throw_type is ThrowType.LHBH


def test_invalid_default_hand_raises():
    with pytest.raises(ValueError):
        FlightPathService(default_hand="both")


def test_negative_canvas_returns_empty_path():
    req = OverlayRequest(**make_overlay_payload(canvas_width=-1))
    assert FlightPathService().overlay(req) == ""


def test_rejected_overlay_is_logged_and_raised(caplog):
    req = OverlayRequest(**make_overlay_payload(basket={"x": 10, "y": 90}))
    with caplog.at_level(logging.WARNING, logger="disc_flight.web.service"):
        with pytest.raises(InvalidInputError):
            FlightPathService().overlay(req)
    assert "Rejected overlay request" in caplog.text


def test_rejected_schematic_is_logged_and_raised(caplog):
    req = SchematicRequest(flight_numbers=_DRIVER, canvas={"start_y": 10})
    with caplog.at_level(logging.WARNING, logger="disc_flight.web.service"):
        with pytest.raises(InvalidInputError):
            FlightPathService().schematic(req)
    assert "Rejected schematic request" in caplog.text


def test_rejected_chart_is_logged_and_raised(caplog):
    req = ChartRequest(flight_numbers={"speed": float("nan"), "glide": 5, "turn": 0, "fade": 1})
    with caplog.at_level(logging.WARNING, logger="disc_flight.web.service"):
        with pytest.raises(InvalidInputError):
            FlightPathService().chart(req)
    assert "Rejected chart request" in caplog.text
