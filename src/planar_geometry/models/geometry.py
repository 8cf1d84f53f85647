"""Geometric primitives: points and axis-aligned bounds."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import BaseModel, model_validator


class Point(BaseModel):
    """2D point in the XY plane.

    Accepts keyword fields or any ``(x, y)`` pair, so coordinate lists
    can be passed wherever a Point is expected.
    """

    x: float
    y: float

    @model_validator(mode="before")
    @classmethod
    def from_pair(cls, data: Any) -> Any:
        if isinstance(data, Sequence) and not isinstance(data, (str, bytes)):
            if len(data) != 2:
                raise ValueError(f"Point needs exactly 2 coordinates, got {len(data)}")
            return {"x": data[0], "y": data[1]}
        return data

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def equal(self, other: Point) -> bool:
        """Exact coordinate comparison, no tolerance."""
        return self.x == other.x and self.y == other.y

    def clone(self) -> Point:
        return Point(x=self.x, y=self.y)

    def wkt(self) -> str:
        from planar_geometry.export.wkt import point_wkt

        return point_wkt(self)


class Bound(BaseModel):
    """Axis-aligned rectangle spanned by a min and a max corner.

    The empty bound has ``min=(+inf, +inf)`` and ``max=(-inf, -inf)``; it
    contains nothing and extending it by a point yields that point's bound.
    """

    min: Point
    max: Point

    @classmethod
    def empty(cls) -> Bound:
        return cls(
            min=Point(x=math.inf, y=math.inf),
            max=Point(x=-math.inf, y=-math.inf),
        )

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> Bound:
        """Bound of a sequence of points, computed in a single pass."""
        min_x = min_y = math.inf
        max_x = max_y = -math.inf
        for p in points:
            if p.x < min_x:
                min_x = p.x
            if p.x > max_x:
                max_x = p.x
            if p.y < min_y:
                min_y = p.y
            if p.y > max_y:
                max_y = p.y
        return cls(min=Point(x=min_x, y=min_y), max=Point(x=max_x, y=max_y))

    @property
    def is_empty(self) -> bool:
        return self.min.x > self.max.x or self.min.y > self.max.y

    @property
    def width(self) -> float:
        return 0.0 if self.is_empty else self.max.x - self.min.x

    @property
    def height(self) -> float:
        return 0.0 if self.is_empty else self.max.y - self.min.y

    @property
    def center(self) -> Point:
        return Point(
            x=(self.min.x + self.max.x) / 2,
            y=(self.min.y + self.max.y) / 2,
        )

    def contains(self, point: Point) -> bool:
        """True if the point is inside or on the edge of the rectangle."""
        return (
            self.min.x <= point.x <= self.max.x
            and self.min.y <= point.y <= self.max.y
        )

    def extend(self, point: Point) -> Bound:
        """New bound grown to include the point."""
        return Bound(
            min=Point(x=min(self.min.x, point.x), y=min(self.min.y, point.y)),
            max=Point(x=max(self.max.x, point.x), y=max(self.max.y, point.y)),
        )

    def union(self, other: Bound) -> Bound:
        if other.is_empty:
            return self.model_copy(deep=True)
        if self.is_empty:
            return other.model_copy(deep=True)
        return self.extend(other.min).extend(other.max)
