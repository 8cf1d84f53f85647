"""Well-Known Text rendering.

Output is compact: no space after commas, one space between x and y,
e.g. ``POLYGON((0 0,1 0,1 1,0 1,0 0))``. Geometries with nothing in them
render as the bare token ``EMPTY``.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from planar_geometry.models.geometry import Point
    from planar_geometry.models.polygon import MultiRing, Polygon
    from planar_geometry.models.ring import Ring

EMPTY = "EMPTY"

# Decimal exponents in [EXPONENT_MIN, EXPONENT_MAX) print in plain notation
EXPONENT_MIN = -4
EXPONENT_MAX = 6


def format_coordinate(value: float) -> str:
    """Shortest round-trip digits, in the style of a ``%g`` verb.

    Examples: ``0``, ``0.5``, ``123456.789``, ``1.5e+06``, ``1e-05``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    prefix = "-" if sign else ""

    # position of the decimal point relative to the first digit
    point = len(digits) + exponent
    exp10 = point - 1

    if exp10 < EXPONENT_MIN or exp10 >= EXPONENT_MAX:
        mantissa = digits[0]
        if len(digits) > 1:
            mantissa += "." + digits[1:]
        exp_sign = "-" if exp10 < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp10):02d}"

    if point <= 0:
        return f"{prefix}0.{'0' * -point}{digits}"
    if point >= len(digits):
        return f"{prefix}{digits}{'0' * (point - len(digits))}"
    return f"{prefix}{digits[:point]}.{digits[point:]}"


def _coordinates(point: Point) -> str:
    return f"{format_coordinate(point.x)} {format_coordinate(point.y)}"


def _points(ring: Ring) -> str:
    return "(" + ",".join(_coordinates(p) for p in ring.points) + ")"


def point_wkt(point: Point) -> str:
    return f"POINT({_coordinates(point)})"


def ring_wkt(ring: Ring) -> str:
    """A ring renders as a LINESTRING."""
    if not ring.points:
        return EMPTY
    return "LINESTRING" + _points(ring)


def multi_ring_wkt(multi_ring: MultiRing) -> str:
    if not multi_ring.rings:
        return EMPTY
    return "MULTILINESTRING(" + ",".join(_points(r) for r in multi_ring.rings) + ")"


def polygon_wkt(polygon: Polygon) -> str:
    """Render as ``POLYGON(outer,hole,...)``, or ``EMPTY`` with no rings."""
    if not polygon.rings:
        return EMPTY
    return "POLYGON(" + ",".join(_points(r) for r in polygon.rings) + ")"
