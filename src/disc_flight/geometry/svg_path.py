"""SVG path-data formatting and parsing for single-segment cubic curves.

Output looks like ``"M 100 280 C 92 180, 91.5 40.4, 107.5 20"``: one
moveto followed by one cubic-curve command.  Numbers are written the way a
JavaScript renderer stringifies them (``30`` rather than ``30.0``, shortest
round-trip digits otherwise, exponent form such as ``1e-7`` outside
``1e-6 <= |x| < 1e21``) so the strings can be compared byte for byte.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal

from disc_flight.geometry.models import BezierPath, InvalidInputError, Point

_SEPARATORS = re.compile(r"[\s,]+")


def format_number(value: float) -> str:
    """Format *value* for path data.

    Examples
    --------
    >>> format_number(30.0)
    '30'
    >>> format_number(-0.0)
    '0'
    >>> format_number(91.5)
    '91.5'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    text = repr(float(value))
    if "e" in text:
        if 1e-6 <= abs(value) < 1e21:
            text = format(Decimal(text), "f")
        else:
            mantissa, exponent = text.split("e")
            exp = int(exponent)
            return f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_path(path: BezierPath) -> str:
    """Serialise *path* as ``M x y C c1x c1y, c2x c2y, ex ey``."""
    s, c1, c2, e = path.start, path.control1, path.control2, path.end
    f = format_number
    return (
        f"M {f(s.x)} {f(s.y)} "
        f"C {f(c1.x)} {f(c1.y)}, {f(c2.x)} {f(c2.y)}, {f(e.x)} {f(e.y)}"
    )


def parse_path(data: str) -> BezierPath:
    """Parse path data produced by :func:`format_path`.

    Raises
    ------
    InvalidInputError
        If *data* is not exactly one moveto followed by one cubic curve.
    """
    tokens = [t for t in _SEPARATORS.split(data.strip()) if t]
    if len(tokens) != 10 or tokens[0] != "M" or tokens[3] != "C":
        raise InvalidInputError(f"Not a single cubic Bézier path: {data!r}")
    try:
        nums = [float(t) for t in tokens[1:3] + tokens[4:]]
    except ValueError as exc:
        raise InvalidInputError(f"Bad coordinate in path {data!r}: {exc}") from exc

    return BezierPath(
        start=Point(nums[0], nums[1]),
        control1=Point(nums[2], nums[3]),
        control2=Point(nums[4], nums[5]),
        end=Point(nums[6], nums[7]),
    )
