"""Rings: closed ordered point sequences and the predicates computed over them.

A ring is expected to be closed (first point equals last). Nothing here
checks that; see ``planar_geometry.validators.rings`` for opt-in checks.
Results on unclosed or self-intersecting rings are unspecified.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field, model_validator

from planar_geometry.errors import DegenerateGeometryError
from planar_geometry.models.geometry import Bound, Point


def ray_intersect(point: Point, start: Point, end: Point) -> tuple[bool, bool]:
    """Test a horizontal ray cast from ``point`` toward +x against one edge.

    Returns ``(intersects, on_boundary)``. When ``on_boundary`` is true the
    point lies exactly on the edge (or one of its endpoints) and
    ``intersects`` carries no meaning.

    A point sharing its x with an endpoint is nudged to the next float
    toward +inf, so a ray passing exactly through a vertex is counted
    against one of the two edges meeting there, never both.
    """
    s, e = start, end
    if s.x > e.x:
        s, e = e, s

    px, py = point.x, point.y

    if px == s.x:
        if py == s.y:
            return False, True
        if s.x == e.x:
            # vertical edge
            if s.y > e.y and s.y >= py >= e.y:
                return False, True
            if e.y > s.y and e.y >= py >= s.y:
                return False, True
        px = math.nextafter(px, math.inf)
    elif px == e.x:
        if py == e.y:
            return False, True
        px = math.nextafter(px, math.inf)

    if px < s.x or px > e.x:
        return False, False

    if s.y > e.y:
        if py > s.y:
            return False, False
        if py < e.y:
            return True, False
    else:
        if py > e.y:
            return False, False
        if py < s.y:
            return True, False

    ray_slope = (py - s.y) / (px - s.x)
    edge_slope = (e.y - s.y) / (e.x - s.x)

    if ray_slope == edge_slope:
        return False, True

    return ray_slope <= edge_slope, False


def segment_distance(point: Point, start: Point, end: Point) -> float:
    """Distance from a point to the closest point of a segment."""
    x, y = start.x, start.y
    dx = end.x - x
    dy = end.y - y

    if dx != 0 or dy != 0:
        t = ((point.x - x) * dx + (point.y - y) * dy) / (dx * dx + dy * dy)
        if t > 1:
            x, y = end.x, end.y
        elif t > 0:
            x += dx * t
            y += dy * t

    return math.hypot(point.x - x, point.y - y)


class Ring(BaseModel):
    """Closed ordered sequence of points, one boundary loop of a polygon.

    Can be built from ``Ring(points=[...])`` or ``Ring.model_validate(coords)``
    with ``coords`` a plain list of ``(x, y)`` pairs.
    """

    points: list[Point] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def from_coordinates(cls, data: Any) -> Any:
        if isinstance(data, Sequence) and not isinstance(data, (str, bytes)):
            return {"points": list(data)}
        return data

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    def is_closed(self) -> bool:
        return len(self.points) > 0 and self.points[0].equal(self.points[-1])

    def bound(self) -> Bound:
        return Bound.from_points(self.points)

    def signed_area(self) -> float:
        """Shoelace area, positive for counter-clockwise winding."""
        pts = self.points
        n = len(pts)
        if n < 3:
            return 0.0

        area = 0.0
        for i in range(1, n - 1):
            area += pts[i].x * (pts[i + 1].y - pts[i - 1].y)

        # wrap-around terms for the last and first vertex
        area += pts[-1].x * (pts[0].y - pts[-2].y)
        area += pts[0].x * (pts[1].y - pts[-1].y)

        return area / 2.0

    def area(self) -> float:
        """Unsigned area; independent of winding direction."""
        return abs(self.signed_area())

    def _centroid_moments(self) -> tuple[Point | None, float]:
        """Centroid (None when the area is zero) and signed area.

        Coordinates are taken relative to the first vertex while summing,
        which keeps the cross terms small for rings far from the origin.
        The edges touching the first vertex drop out since it sits at the
        shifted origin.
        """
        pts = self.points
        if len(pts) < 3:
            return None, 0.0

        offset_x = pts[0].x
        offset_y = pts[0].y

        area = 0.0
        cx = 0.0
        cy = 0.0
        for i in range(1, len(pts) - 1):
            x0 = pts[i].x - offset_x
            y0 = pts[i].y - offset_y
            x1 = pts[i + 1].x - offset_x
            y1 = pts[i + 1].y - offset_y

            a = x0 * y1 - x1 * y0
            area += a
            cx += (x0 + x1) * a
            cy += (y0 + y1) * a

        area /= 2
        if area == 0:
            return None, 0.0

        centroid = Point(
            x=cx / (6 * area) + offset_x,
            y=cy / (6 * area) + offset_y,
        )
        return centroid, area

    def centroid_area(self) -> tuple[Point, float]:
        """Area-weighted centroid and signed area of the ring.

        Raises:
            DegenerateGeometryError: If the ring encloses no area.
        """
        centroid, area = self._centroid_moments()
        if centroid is None:
            raise DegenerateGeometryError(
                f"Ring of {len(self.points)} points has zero area, centroid undefined"
            )
        return centroid, area

    def centroid(self) -> Point:
        return self.centroid_area()[0]

    def contains(self, point: Point) -> bool:
        """Ray-casting containment test. Points on the boundary are in."""
        pts = self.points
        if not pts:
            return False

        if not self.bound().contains(point):
            return False

        # closing edge first, then each consecutive pair
        inside, on = ray_intersect(point, pts[0], pts[-1])
        if on:
            return True

        for i in range(len(pts) - 1):
            crosses, on = ray_intersect(point, pts[i], pts[i + 1])
            if on:
                return True
            if crosses:
                inside = not inside

        return inside

    def distance_from(self, point: Point) -> float:
        """Minimum distance from the point to any edge of the ring."""
        pts = self.points
        if not pts:
            return math.inf
        if len(pts) == 1:
            return pts[0].distance_to(point)

        return min(
            segment_distance(point, pts[i], pts[i + 1]) for i in range(len(pts) - 1)
        )

    def reversed(self) -> Ring:
        """Copy of the ring with the opposite winding."""
        return Ring(points=[p.clone() for p in reversed(self.points)])

    def equal(self, other: Ring) -> bool:
        """Same length and pairwise exactly equal points, in order."""
        if len(self.points) != len(other.points):
            return False
        return all(a.equal(b) for a, b in zip(self.points, other.points))

    def clone(self) -> Ring:
        return Ring(points=[p.clone() for p in self.points])

    def wkt(self) -> str:
        from planar_geometry.export.wkt import ring_wkt

        return ring_wkt(self)
