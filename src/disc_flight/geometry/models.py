"""Flight-path geometry data structures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class InvalidInputError(ValueError):
    """Raised when path geometry cannot be built from the given input."""


class ThrowingHand(str, Enum):
    RIGHT = "right"
    LEFT = "left"


class ThrowStyle(str, Enum):
    BACKHAND = "backhand"
    FOREHAND = "forehand"


class ReleaseAngle(str, Enum):
    """Angle of the disc relative to the ground at release."""

    HYZER = "hyzer"
    FLAT = "flat"
    ANHYZER = "anhyzer"


class ThrowType(str, Enum):
    """Throwing hand and style combined.

    ``RHBH`` and ``LHFH`` fly the same (unmirrored) line; ``RHFH`` and
    ``LHBH`` fly its mirror image.
    """

    RHBH = "rhbh"
    RHFH = "rhfh"
    LHBH = "lhbh"
    LHFH = "lhfh"

    @classmethod
    def from_hand_and_style(cls, hand: ThrowingHand, style: ThrowStyle) -> ThrowType:
        if ThrowingHand(hand) is ThrowingHand.RIGHT:
            return cls.RHBH if ThrowStyle(style) is ThrowStyle.BACKHAND else cls.RHFH
        return cls.LHBH if ThrowStyle(style) is ThrowStyle.BACKHAND else cls.LHFH


@dataclass(frozen=True)
class FlightNumbers:
    """The four published flight numbers of a disc.

    No range is enforced; values outside the usual disc-golf ranges are
    extrapolated linearly by the path generator.
    """

    speed: float
    """Typically 1–15."""

    glide: float
    """Typically 1–7."""

    turn: float
    """Typically -5..1. Negative = turns right for RHBH."""

    fade: float
    """Typically 0–5. Positive = fades left for RHBH."""

    @classmethod
    def from_partial(
        cls,
        speed: float | None = None,
        glide: float | None = None,
        turn: float | None = None,
        fade: float | None = None,
    ) -> FlightNumbers:
        """Build flight numbers, filling each missing field from :data:`DEFAULT_FLIGHT_NUMBERS`."""
        return cls(
            speed=DEFAULT_FLIGHT_NUMBERS.speed if speed is None else speed,
            glide=DEFAULT_FLIGHT_NUMBERS.glide if glide is None else glide,
            turn=DEFAULT_FLIGHT_NUMBERS.turn if turn is None else turn,
            fade=DEFAULT_FLIGHT_NUMBERS.fade if fade is None else fade,
        )


# A straight, stable fairway driver; used when no disc has been identified.
DEFAULT_FLIGHT_NUMBERS = FlightNumbers(speed=9, glide=5, turn=0, fade=2)


@dataclass(frozen=True)
class CanvasConfig:
    """Schematic canvas in pixels.

    The disc is launched from ``(start_x, start_y)`` and flies towards
    ``y = 20``; *max_distance* (feet) maps onto that vertical span.
    """

    width: float = 200
    height: float = 300
    start_x: float = 100
    start_y: float = 280
    max_distance: float = 400


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class BezierPath:
    """A single-segment cubic Bézier curve."""

    start: Point
    control1: Point
    control2: Point
    end: Point


@dataclass(frozen=True)
class SchematicFlightPaths:
    """Path strings for the three release angles of one throw."""

    hyzer: str
    flat: str
    anhyzer: str

    def __getitem__(self, angle: ReleaseAngle | str) -> str:
        return getattr(self, ReleaseAngle(angle).value)

    def as_dict(self) -> dict[str, str]:
        return {"hyzer": self.hyzer, "flat": self.flat, "anhyzer": self.anhyzer}
