"""Tests for SVG path-data formatting and parsing."""

from __future__ import annotations

import math

import pytest

from disc_flight.geometry.models import BezierPath, InvalidInputError, Point
from disc_flight.geometry.svg_path import format_number, format_path, parse_path

# ---------------------------------------------------------------------------
# format_number
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "value, expected",
    [
        (30.0, "30"),
        (30, "30"),
        (-12.0, "-12"),
        (91.5, "91.5"),
        (0.1 + 0.2, "0.30000000000000004"),
        (-0.0, "0"),
        (0.0, "0"),
        (1e-05, "0.00001"),
        (1e16, "10000000000000000"),
        (1e-06, "0.000001"),
        (1e-07, "1e-7"),
        (1.5e-07, "1.5e-7"),
        (-2e-08, "-2e-8"),
        (1e21, "1e+21"),
        (2.5e22, "2.5e+22"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_number_non_finite():
    assert format_number(math.nan) == "NaN"
    assert format_number(math.inf) == "Infinity"
    assert format_number(-math.inf) == "-Infinity"


# ---------------------------------------------------------------------------
# format_path / parse_path
# ---------------------------------------------------------------------------


def _curve() -> BezierPath:
    return BezierPath(
        start=Point(100, 280),
        control1=Point(92.5, 176),
        control2=Point(91.25, 40.4),
        end=Point(107.5, 20),
    )


def test_format_path_layout():
    assert format_path(_curve()) == "M 100 280 C 92.5 176, 91.25 40.4, 107.5 20"


def test_parse_path_recovers_points():
    assert parse_path("M 100 280 C 92.5 176, 91.25 40.4, 107.5 20") == _curve()


def test_parse_path_tolerates_extra_whitespace_and_commas():
    assert parse_path("  M 100,280  C 92.5,176 91.25,40.4 107.5,20 ") == _curve()


@pytest.mark.parametrize(
    "data",
    [
        "",
        "M 0 0",
        "M 0 0 L 10 10",
        "M 0 0 C 1 1, 2 2, 3 3 C 4 4, 5 5, 6 6",
        "M 0 0 Q 1 1, 2 2, 3 3",
        "M a 0 C 1 1, 2 2, 3 3",
    ],
)
def test_parse_path_rejects_other_shapes(data):
    with pytest.raises(InvalidInputError):
        parse_path(data)
