"""Geometry data models."""

from planar_geometry.models.geometry import Bound, Point
from planar_geometry.models.ring import Ring, ray_intersect, segment_distance
from planar_geometry.models.polygon import MultiRing, Polygon

__all__ = [
    "Bound",
    "Point",
    "Ring",
    "ray_intersect",
    "segment_distance",
    "MultiRing",
    "Polygon",
]
