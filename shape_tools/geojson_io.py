"""GeoJSON input/output utilities for shape-tools."""

import json
import sys
from typing import List, Optional, Sequence

import numpy as np

from . import config
from .errors import InvalidArgumentError
from .geometry import Polygon


def ring_to_polygon(ring: Sequence[Sequence[float]]) -> Polygon:
    """Convert a GeoJSON linear ring into an implicitly closed Polygon.

    The closing point (a repeat of the first) is dropped.
    """
    polygon = Polygon.from_tuples(ring)
    if len(polygon) > 1 and polygon[0] == polygon[-1]:
        polygon.points.pop()
    return polygon


def polygon_to_ring(polygon: Polygon) -> List[List[float]]:
    """Convert a Polygon into a GeoJSON linear ring, closed by repeating the first point."""
    ring = [[p.x, p.y] for p in polygon]
    if ring:
        ring.append(list(ring[0]))
    return ring


def _random_color(rng: np.random.Generator) -> str:
    low, high = config.COLOR_CHANNEL_RANGE
    r, g, b = (int(c) for c in rng.integers(low, high, size=3))
    return f"#{r:02X}{g:02X}{b:02X}"


def polygon_to_feature(polygon: Polygon, color: str) -> dict:
    """Wrap a polygon in a GeoJSON Feature with simplestyle properties."""
    return {
        "type": "Feature",
        "geometry": {
            "type": "Polygon",
            "coordinates": [polygon_to_ring(polygon)],
        },
        "properties": {
            "fill": color,
            "stroke": color,
            "fill-opacity": config.FILL_OPACITY,
            "stroke-width": config.STROKE_WIDTH,
        },
    }


def polygons_to_geojson(
    polygons: Sequence[Polygon],
    rng: Optional[np.random.Generator] = None,
    indent: Optional[int] = 2
) -> str:
    """Serialize polygons as a GeoJSON FeatureCollection.

    Args:
        polygons: Polygons to write, one Feature each
        rng: numpy random generator used to pick each feature's colour
        indent: JSON indentation (None for compact output)

    Returns:
        GeoJSON document as string
    """
    if rng is None:
        rng = np.random.default_rng()
    collection = {
        "type": "FeatureCollection",
        "features": [polygon_to_feature(p, _random_color(rng)) for p in polygons],
    }
    return json.dumps(collection, indent=indent)


def extract_polygons_from_geojson(content: str) -> List[Polygon]:
    """Extract the outer ring of every Polygon feature.

    Accepts a FeatureCollection, a single Feature or a bare Polygon geometry.
    Other geometry types are skipped.

    Raises:
        InvalidArgumentError: if the content is not valid GeoJSON
    """
    try:
        document = json.loads(content)
    except json.JSONDecodeError as e:
        raise InvalidArgumentError(f"invalid GeoJSON: {e}") from e

    if not isinstance(document, dict):
        raise InvalidArgumentError("GeoJSON document must be an object")

    kind = document.get("type")
    if kind == "FeatureCollection":
        geometries = [f.get("geometry") or {} for f in document.get("features", [])]
    elif kind == "Feature":
        geometries = [document.get("geometry") or {}]
    elif kind == "Polygon":
        geometries = [document]
    else:
        raise InvalidArgumentError(f"unsupported GeoJSON type: {kind!r}")

    polygons: List[Polygon] = []
    for geometry in geometries:
        if geometry.get("type") != "Polygon":
            continue
        rings = geometry.get("coordinates") or []
        if not rings:
            continue
        try:
            polygons.append(ring_to_polygon(rings[0]))
        except (TypeError, ValueError, IndexError) as e:
            raise InvalidArgumentError(f"malformed polygon ring: {e}") from e

    return polygons


def read_geojson(path: Optional[str] = None) -> str:
    """Read GeoJSON content from file or stdin.

    Args:
        path: File path, or None to read from stdin

    Returns:
        GeoJSON content as string
    """
    if path is None or path == '-':
        return sys.stdin.read()
    else:
        with open(path, 'r') as f:
            return f.read()


def write_geojson(content: str, path: Optional[str] = None):
    """Write GeoJSON content to file or stdout.

    Args:
        content: GeoJSON content
        path: File path, or None to write to stdout
    """
    if path is None or path == '-':
        sys.stdout.write(content)
        sys.stdout.write('\n')
    else:
        with open(path, 'w') as f:
            f.write(content)
