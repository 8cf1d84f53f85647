"""Exceptions raised by geometry operations."""


class GeometryError(ValueError):
    """Base class for geometry failures."""


class DegenerateGeometryError(GeometryError):
    """The requested measure is undefined for this geometry.

    Raised for centroids of shapes whose net area is zero: empty polygons,
    collapsed outer rings, or holes that cancel the outer ring entirely.
    """
