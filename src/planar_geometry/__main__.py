"""Planar geometry CLI.

Usage:
    python -m planar_geometry <command> [x y] [polygon] [options]

Every command reads one polygon as GeoJSON-style nested coordinates,
outer ring first, then holes:

    [[[0, 0], [4, 0], [4, 4], [0, 4], [0, 0]], [[1, 1], [3, 1], [3, 3], [1, 3], [1, 1]]]

given as an argument, via --file, or via --stdin. Output is one JSON object
with an "ok" key.
"""
from __future__ import annotations

import json
import logging
import math
import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from planar_geometry.errors import GeometryError
from planar_geometry.models import Point, Polygon
from planar_geometry.validators.rings import validate_polygon

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="planar_geometry",
    help="Planar geometry: area, centroid, containment, distance and WKT for polygons.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _finite(value):
    """Replace NaN and infinities with None, recursively; JSON has neither."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_finite(v) for v in value]
    return value


def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(_finite(data), indent=2, allow_nan=False))


def _fail(message: str) -> None:
    _output({"ok": False, "error": message})
    raise typer.Exit(1)


def _load_polygon(polygon_json: Optional[str], file: Optional[str], stdin: bool) -> Polygon:
    """Parse a polygon from one of: positional arg, --file, --stdin."""
    if stdin:
        raw = sys.stdin.read()
    elif file:
        path = Path(file)
        if not path.exists():
            _fail(f"File not found: {path}")
        raw = path.read_text()
    elif polygon_json:
        raw = polygon_json
    else:
        _fail("Provide polygon as argument, --file, or --stdin")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        _fail(f"Invalid JSON: {e}")

    try:
        polygon = Polygon.model_validate(data)
    except ValidationError as e:
        _fail(f"Invalid polygon: {e.errors()[0]['msg']}")

    logger.debug("Loaded polygon with %d rings", len(polygon.rings))
    return polygon


PolygonArg = typer.Argument(None, help="Polygon coordinates as JSON")
FileOpt = typer.Option(None, "--file", "-f", help="Read polygon from JSON file")
StdinOpt = typer.Option(False, "--stdin", help="Read polygon from stdin")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# Measures
# ---------------------------------------------------------------------------

@app.command()
def version():
    """Show version."""
    from planar_geometry import __version__

    _output({"ok": True, "version": __version__})


@app.command()
def area(
    polygon: Optional[str] = PolygonArg,
    file: Optional[str] = FileOpt,
    stdin: bool = StdinOpt,
):
    """Area of the outer ring minus its holes."""
    poly = _load_polygon(polygon, file, stdin)
    _output({"ok": True, "area": poly.area()})


@app.command()
def centroid(
    polygon: Optional[str] = PolygonArg,
    file: Optional[str] = FileOpt,
    stdin: bool = StdinOpt,
):
    """Area-weighted centroid, holes removed."""
    poly = _load_polygon(polygon, file, stdin)
    try:
        point, net_area = poly.centroid_area()
    except GeometryError as e:
        _fail(str(e))
    _output({"ok": True, "centroid": [point.x, point.y], "area": net_area})


# negative coordinates such as -1 would otherwise parse as unknown options
@app.command(context_settings={"ignore_unknown_options": True})
def contains(
    x: float = typer.Argument(..., help="Point x"),
    y: float = typer.Argument(..., help="Point y"),
    polygon: Optional[str] = PolygonArg,
    file: Optional[str] = FileOpt,
    stdin: bool = StdinOpt,
):
    """Whether the point is in the polygon. The outer boundary counts as in."""
    poly = _load_polygon(polygon, file, stdin)
    _output({"ok": True, "point": [x, y], "contains": poly.contains(Point(x=x, y=y))})


@app.command(context_settings={"ignore_unknown_options": True})
def distance(
    x: float = typer.Argument(..., help="Point x"),
    y: float = typer.Argument(..., help="Point y"),
    polygon: Optional[str] = PolygonArg,
    file: Optional[str] = FileOpt,
    stdin: bool = StdinOpt,
):
    """Distance from the point to the nearest boundary, 0 inside."""
    poly = _load_polygon(polygon, file, stdin)
    d = poly.distance_from(Point(x=x, y=y))
    # an empty polygon is infinitely far away and reports null
    _output({"ok": True, "point": [x, y], "distance": d})


# ---------------------------------------------------------------------------
# Serialization and validation
# ---------------------------------------------------------------------------

@app.command()
def wkt(
    polygon: Optional[str] = PolygonArg,
    file: Optional[str] = FileOpt,
    stdin: bool = StdinOpt,
):
    """Render the polygon as Well-Known Text."""
    poly = _load_polygon(polygon, file, stdin)
    _output({"ok": True, "wkt": poly.wkt()})


@app.command()
def validate(
    polygon: Optional[str] = PolygonArg,
    file: Optional[str] = FileOpt,
    stdin: bool = StdinOpt,
):
    """Check ring closure, vertex counts, areas and hole placement."""
    poly = _load_polygon(polygon, file, stdin)
    issues = validate_polygon(poly)
    errors = sum(1 for i in issues if i.severity == "error")

    _output({
        "ok": errors == 0,
        "validation": {
            "errors": errors,
            "warnings": sum(1 for i in issues if i.severity == "warning"),
            "details": [
                {"severity": i.severity, "ring": i.ring_index, "message": i.message}
                for i in issues
            ],
        },
    })
    if errors:
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    app()
