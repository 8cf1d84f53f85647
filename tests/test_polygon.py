"""Tests for polygons: holes, containment, area, centroid, distance."""

import math

import pytest

from planar_geometry.errors import DegenerateGeometryError
from planar_geometry.models import MultiRing, Point, Polygon, Ring

SQUARE = [(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)]
OUTER = [(0, 0), (4, 0), (4, 4), (0, 4), (0, 0)]
HOLE = [(1, 1), (3, 1), (3, 3), (1, 3), (1, 1)]


def _poly(*rings) -> Polygon:
    return Polygon.model_validate(list(rings))


@pytest.fixture
def unit_square() -> Polygon:
    return _poly(SQUARE)


@pytest.fixture
def square_with_hole() -> Polygon:
    return _poly(OUTER, HOLE)


class TestConstruction:
    def test_from_coordinates(self, square_with_hole):
        assert len(square_with_hole.rings) == 2
        assert square_with_hole.outer.points[1] == Point(x=4, y=0)
        assert len(square_with_hole.holes) == 1

    def test_from_models(self):
        poly = Polygon(rings=[Ring(points=[Point(x=x, y=y) for x, y in SQUARE])])
        assert poly.equal(_poly(SQUARE))

    def test_empty(self):
        poly = Polygon()
        assert poly.is_empty
        assert poly.outer is None
        assert poly.holes == []


class TestUnitSquare:
    def test_area(self, unit_square):
        assert unit_square.area() == 1.0

    def test_centroid(self, unit_square):
        assert unit_square.centroid() == Point(x=0.5, y=0.5)

    def test_contains(self, unit_square):
        assert unit_square.contains(Point(x=0.5, y=0.5))
        assert unit_square.contains(Point(x=0, y=0))
        assert not unit_square.contains(Point(x=1.5, y=0.5))

    def test_wkt(self, unit_square):
        assert unit_square.wkt() == "POLYGON((0 0,1 0,1 1,0 1,0 0))"


class TestHoles:
    def test_area(self, square_with_hole):
        assert square_with_hole.area() == 12.0

    def test_area_is_outer_minus_holes(self):
        hole2 = [(3.5, 3.5), (3.75, 3.5), (3.75, 3.75), (3.5, 3.75), (3.5, 3.5)]
        poly = _poly(OUTER, HOLE, hole2)
        expected = _poly(OUTER).area() - Ring.model_validate(HOLE).area() - Ring.model_validate(hole2).area()
        assert math.isclose(poly.area(), expected)

    def test_contains(self, square_with_hole):
        assert not square_with_hole.contains(Point(x=2, y=2))
        assert square_with_hole.contains(Point(x=0.5, y=0.5))
        assert square_with_hole.contains(Point(x=4, y=2))

    def test_hole_boundary_is_out(self, square_with_hole):
        assert not square_with_hole.contains(Point(x=1, y=2))
        assert not square_with_hole.contains(Point(x=3, y=3))

    def test_symmetric_hole_centroid(self, square_with_hole):
        c, area = square_with_hole.centroid_area()
        assert c == Point(x=2, y=2)
        assert area == 12.0

    def test_offset_hole_centroid(self):
        poly = _poly(OUTER, [(2, 1), (3, 1), (3, 3), (2, 3), (2, 1)])
        c, area = poly.centroid_area()
        assert math.isclose(c.x, 27 / 14)
        assert math.isclose(c.y, 2.0)
        assert area == 14.0

    def test_hole_winding_does_not_matter(self):
        hole = [(2, 1), (3, 1), (3, 3), (2, 3), (2, 1)]
        a = _poly(OUTER, hole)
        b = _poly(OUTER, list(reversed(hole)))
        assert a.area() == b.area()
        assert a.centroid() == b.centroid()

    def test_zero_area_hole_ignored_in_centroid(self):
        flat = [(1, 1), (2, 1), (3, 1), (1, 1)]
        c, area = _poly(OUTER, flat).centroid_area()
        assert c == Point(x=2, y=2)
        assert area == 16.0

    def test_centroid_area_matches_area(self, square_with_hole):
        _, area = square_with_hole.centroid_area()
        assert area == square_with_hole.area()


class TestDistance:
    def test_outside(self, square_with_hole):
        assert square_with_hole.distance_from(Point(x=6, y=2)) == 2.0

    def test_in_hole(self, square_with_hole):
        assert square_with_hole.distance_from(Point(x=2, y=2)) == 1.0
        assert square_with_hole.distance_from(Point(x=1.5, y=2)) == 0.5

    def test_interior(self, square_with_hole):
        assert square_with_hole.distance_from(Point(x=0.5, y=0.5)) == 0.0

    def test_on_outer_boundary(self, square_with_hole):
        assert square_with_hole.distance_from(Point(x=0, y=2)) == 0.0

    def test_on_hole_boundary(self, square_with_hole):
        p = Point(x=1, y=2)
        assert not square_with_hole.contains(p)
        assert square_with_hole.distance_from(p) == 0.0

    def test_zero_iff_contained(self, square_with_hole):
        # grid avoids the hole boundary, where a point is out but 0 away
        coords = [-0.5, 0, 0.5, 1.5, 2.5, 3.5, 4, 4.5]
        for x in coords:
            for y in coords:
                p = Point(x=x, y=y)
                d = square_with_hole.distance_from(p)
                assert d >= 0
                assert (d == 0) == square_with_hole.contains(p), (x, y)


class TestConvex:
    HEXAGON = [(0, 0), (4, 0), (6, 2), (4, 4), (0, 4), (-2, 2), (0, 0)]

    def test_vertices_and_midpoints_are_in(self):
        poly = _poly(self.HEXAGON)
        pts = poly.outer.points
        for a, b in zip(pts, pts[1:]):
            assert poly.contains(a)
            assert poly.contains(Point(x=(a.x + b.x) / 2, y=(a.y + b.y) / 2))

    def test_area_invariant_under_reversal(self):
        poly = _poly(self.HEXAGON)
        rev = _poly(list(reversed(self.HEXAGON)))
        assert poly.area() == rev.area() == 24.0


class TestEmpty:
    def test_measures(self):
        poly = Polygon()
        assert poly.area() == 0.0
        assert not poly.contains(Point(x=0, y=0))
        assert poly.distance_from(Point(x=0, y=0)) == math.inf
        assert poly.bound().is_empty
        assert poly.wkt() == "EMPTY"

    def test_centroid_raises(self):
        with pytest.raises(DegenerateGeometryError, match="Empty polygon"):
            Polygon().centroid()

    def test_equal_and_clone(self):
        assert Polygon().equal(Polygon())
        assert Polygon().clone().is_empty
        assert not Polygon().equal(_poly(SQUARE))


class TestDegenerate:
    def test_collapsed_outer(self):
        poly = _poly([(0, 0), (1, 1), (2, 2), (0, 0)])
        assert poly.area() == 0.0
        with pytest.raises(DegenerateGeometryError, match="Outer ring"):
            poly.centroid_area()

    def test_hole_cancels_outer(self):
        poly = _poly(SQUARE, SQUARE)
        assert poly.area() == 0.0
        with pytest.raises(DegenerateGeometryError, match="cancel"):
            poly.centroid()


class TestEqualityAndClone:
    def test_equal(self, square_with_hole):
        assert square_with_hole.equal(_poly(OUTER, HOLE))

    def test_ring_count_differs(self, square_with_hole):
        assert not square_with_hole.equal(_poly(OUTER))

    def test_rotation_not_normalized(self):
        rotated = [(4, 0), (4, 4), (0, 4), (0, 0), (4, 0)]
        assert not _poly(OUTER).equal(_poly(rotated))

    def test_exact_comparison(self):
        nudged = [(0, 0), (4, 0), (4, 4), (0, 4.0000000001), (0, 0)]
        assert not _poly(OUTER).equal(_poly(nudged))

    def test_clone_is_deep(self, square_with_hole):
        clone = square_with_hole.clone()
        assert clone.equal(square_with_hole)

        clone.rings[1].points[0].x = 99
        clone.rings[0].points.pop()
        assert square_with_hole.rings[1].points[0].x == 1
        assert len(square_with_hole.rings[0]) == 5
        assert not clone.equal(square_with_hole)

    def test_bound_ignores_holes(self, square_with_hole):
        b = square_with_hole.bound()
        assert b.min == Point(x=0, y=0)
        assert b.max == Point(x=4, y=4)


class TestMultiRing:
    def test_equal_and_clone(self):
        mr = MultiRing.model_validate([SQUARE, HOLE])
        clone = mr.clone()
        assert mr.equal(clone)
        clone.rings[0].points[0].y = -1
        assert mr.rings[0].points[0].y == 0
        assert not mr.equal(clone)

    def test_bound_covers_all_rings(self):
        mr = MultiRing.model_validate([SQUARE, [(5, 5), (6, 5), (6, 7), (5, 5)]])
        b = mr.bound()
        assert b.min == Point(x=0, y=0)
        assert b.max == Point(x=6, y=7)
        assert MultiRing().bound().is_empty
