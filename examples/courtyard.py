"""Courtyard plot — a square lot with a square courtyard cut out.

Lot: 40m x 40m, courtyard 10m x 10m offset toward the north-east.

Layout (top view):
   (0,40) ------------------ (40,40)
     |                          |
     |        (20,35)--(30,35)  |
     |          | court |       |
     |        (20,25)--(30,25)  |
     |                          |
   (0,0) ------------------- (40,0)
"""

from planar_geometry.models import Point, Polygon
from planar_geometry.validators.rings import validate_polygon

LOT = [(0, 0), (40, 0), (40, 40), (0, 40), (0, 0)]
COURTYARD = [(20, 25), (30, 25), (30, 35), (20, 35), (20, 25)]

plot = Polygon.model_validate([LOT, COURTYARD])

issues = validate_polygon(plot)
for issue in issues:
    print(f"  [{issue.severity}] {issue.message}")
if any(i.severity == "error" for i in issues):
    raise SystemExit(1)

centroid, area = plot.centroid_area()
print(f"WKT:       {plot.wkt()}")
print(f"Area:      {area:.1f} m²")
print(f"Centroid:  ({centroid.x:.3f}, {centroid.y:.3f})")

# Probe points: garden, courtyard, street, lot line
for label, point in [
    ("garden", Point(x=5, y=5)),
    ("courtyard", Point(x=25, y=30)),
    ("street", Point(x=45, y=10)),
    ("lot line", Point(x=40, y=20)),
]:
    print(
        f"{label:>10}: contains={plot.contains(point)!s:<5} "
        f"distance={plot.distance_from(point):.2f} m"
    )
