"""Planar polygon geometry: containment, area, centroid, distance, WKT."""

__version__ = "0.1.0"
