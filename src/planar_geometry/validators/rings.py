"""Ring and polygon well-formedness validation.

Finds input that geometry operations would silently compute garbage for:
unclosed rings, too few vertices, collapsed rings, holes escaping the
outer ring. Self-intersection is not detected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from planar_geometry.models.polygon import Polygon
from planar_geometry.models.ring import Ring

logger = logging.getLogger(__name__)

# first point repeated at the end, so a triangle is 4 points
MIN_RING_POINTS = 4


@dataclass
class ValidationError:
    """A single validation issue."""

    severity: str  # "error" | "warning"
    ring_index: int  # 0 for the outer ring, -1 for standalone rings
    message: str


def validate_ring(ring: Ring, ring_index: int = -1) -> list[ValidationError]:
    """Check that a ring is closed and encloses some area."""
    errors: list[ValidationError] = []
    if ring_index < 0:
        label = "Ring"
    elif ring_index == 0:
        label = "Outer ring"
    else:
        label = f"Hole {ring_index}"

    if len(ring) < MIN_RING_POINTS:
        errors.append(
            ValidationError(
                severity="error",
                ring_index=ring_index,
                message=f"{label} has {len(ring)} points, needs at least {MIN_RING_POINTS}",
            )
        )

    if ring.points and not ring.is_closed():
        first, last = ring.points[0], ring.points[-1]
        errors.append(
            ValidationError(
                severity="error",
                ring_index=ring_index,
                message=(
                    f"{label} is not closed "
                    f"(starts at {first.x}, {first.y}, ends at {last.x}, {last.y})"
                ),
            )
        )

    if len(ring) >= 3 and ring.area() == 0:
        errors.append(
            ValidationError(
                severity="error",
                ring_index=ring_index,
                message=f"{label} has zero area",
            )
        )

    return errors


def validate_polygon(polygon: Polygon) -> list[ValidationError]:
    """Validate every ring of a polygon and the placement of its holes.

    Hole vertices must lie inside (or on) the outer ring. Holes whose
    bounds overlap are reported as warnings: their areas may be subtracted
    twice.
    """
    errors: list[ValidationError] = []
    if polygon.is_empty:
        return errors

    for i, ring in enumerate(polygon.rings):
        errors.extend(validate_ring(ring, ring_index=i))

    outer = polygon.rings[0]
    for i, hole in enumerate(polygon.holes, start=1):
        outside = [p for p in hole.points if not outer.contains(p)]
        if outside:
            errors.append(
                ValidationError(
                    severity="error",
                    ring_index=i,
                    message=f"Hole {i} has {len(outside)} points outside the outer ring",
                )
            )

    bounds = [hole.bound() for hole in polygon.holes]
    for a in range(len(bounds)):
        for b in range(a + 1, len(bounds)):
            ba, bb = bounds[a], bounds[b]
            if (
                ba.min.x < bb.max.x
                and bb.min.x < ba.max.x
                and ba.min.y < bb.max.y
                and bb.min.y < ba.max.y
            ):
                errors.append(
                    ValidationError(
                        severity="warning",
                        ring_index=a + 1,
                        message=f"Hole {a + 1} bound overlaps hole {b + 1}",
                    )
                )

    if errors:
        logger.debug("Polygon validation found %d issues", len(errors))
    return errors
