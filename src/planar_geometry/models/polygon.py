"""Polygons: an outer ring plus zero or more holes."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field, model_validator

from planar_geometry.errors import DegenerateGeometryError
from planar_geometry.models.geometry import Bound, Point
from planar_geometry.models.ring import Ring

logger = logging.getLogger(__name__)


def _wrap_sequence(key: str, data: Any) -> Any:
    if isinstance(data, Sequence) and not isinstance(data, (str, bytes)):
        return {key: list(data)}
    return data


class MultiRing(BaseModel):
    """Ordered collection of rings."""

    rings: list[Ring] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def from_coordinates(cls, data: Any) -> Any:
        return _wrap_sequence("rings", data)

    def __len__(self) -> int:
        return len(self.rings)

    def bound(self) -> Bound:
        bound = Bound.empty()
        for ring in self.rings:
            bound = bound.union(ring.bound())
        return bound

    def equal(self, other: MultiRing) -> bool:
        """Same number of rings and every ring equal, in order."""
        if len(self.rings) != len(other.rings):
            return False
        return all(a.equal(b) for a, b in zip(self.rings, other.rings))

    def clone(self) -> MultiRing:
        return MultiRing(rings=[ring.clone() for ring in self.rings])

    def wkt(self) -> str:
        from planar_geometry.export.wkt import multi_ring_wkt

        return multi_ring_wkt(self)


class Polygon(BaseModel):
    """Closed area. ``rings[0]`` is the outer ring, the rest are holes.

    Holes are assumed to lie inside the outer ring without overlapping
    each other; this is not checked. A polygon with no rings is the
    empty geometry and every measure below handles it.

    Build from models or from GeoJSON-style nested coordinates:

        Polygon.model_validate([[(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)]])
    """

    rings: list[Ring] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def from_coordinates(cls, data: Any) -> Any:
        return _wrap_sequence("rings", data)

    @property
    def is_empty(self) -> bool:
        return not self.rings

    @property
    def outer(self) -> Ring | None:
        return self.rings[0] if self.rings else None

    @property
    def holes(self) -> list[Ring]:
        return self.rings[1:]

    def area(self) -> float:
        """Outer ring area minus the area of the holes."""
        if self.is_empty:
            return 0.0

        area = self.rings[0].area()
        for hole in self.holes:
            area -= hole.area()
        return area

    def centroid_area(self) -> tuple[Point, float]:
        """Area-weighted centroid and net area, holes removed.

        Cheaper than calling ``centroid()`` and ``area()`` separately since
        the area falls out of the centroid sums.

        Raises:
            DegenerateGeometryError: If the polygon is empty or its net
                area is zero.
        """
        if self.is_empty:
            raise DegenerateGeometryError("Empty polygon has no centroid")

        centroid, outer_area = self.rings[0]._centroid_moments()
        if centroid is None:
            raise DegenerateGeometryError("Outer ring has zero area, centroid undefined")
        outer_area = abs(outer_area)

        hole_area = 0.0
        hole_x = 0.0
        hole_y = 0.0
        for i, hole in enumerate(self.holes, start=1):
            hc, ha = hole._centroid_moments()
            if hc is None:
                logger.debug("Skipping zero-area hole %d in centroid", i)
                continue
            ha = abs(ha)
            hole_area += ha
            hole_x += hc.x * ha
            hole_y += hc.y * ha

        net_area = outer_area - hole_area
        if net_area == 0:
            raise DegenerateGeometryError(
                "Holes cancel the outer ring, centroid undefined"
            )

        combined = Point(
            x=(outer_area * centroid.x - hole_x) / net_area,
            y=(outer_area * centroid.y - hole_y) / net_area,
        )
        return combined, net_area

    def centroid(self) -> Point:
        """Area-weighted centroid with the contribution of holes removed."""
        return self.centroid_area()[0]

    def contains(self, point: Point) -> bool:
        """Points on the outer boundary are in, points on a hole boundary are out."""
        if self.is_empty:
            return False

        if not self.rings[0].contains(point):
            return False

        return not any(hole.contains(point) for hole in self.holes)

    def distance_from(self, point: Point) -> float:
        """Distance to the nearest boundary, 0 for points in the interior.

        A point inside a hole measures to that hole. A point exactly on a
        hole boundary is not contained but is 0 away from it.
        """
        if self.is_empty:
            return math.inf

        outer = self.rings[0]
        if not outer.contains(point):
            return outer.distance_from(point)

        for hole in self.holes:
            if hole.contains(point):
                return hole.distance_from(point)

        return 0.0

    def bound(self) -> Bound:
        """Bound of the outer ring; holes sit inside it."""
        if self.is_empty:
            return Bound.empty()
        return self.rings[0].bound()

    def equal(self, other: Polygon) -> bool:
        return MultiRing(rings=self.rings).equal(MultiRing(rings=other.rings))

    def clone(self) -> Polygon:
        """Deep copy, every ring and point is new."""
        return Polygon(rings=MultiRing(rings=self.rings).clone().rings)

    def wkt(self) -> str:
        from planar_geometry.export.wkt import polygon_wkt

        return polygon_wkt(self)
