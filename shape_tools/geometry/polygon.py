"""Polygon operations for shape-tools: intersections and point classification."""

import logging
from typing import List, Optional, Tuple

from .. import config
from .types import Coordinate, Polygon, Segment

log = logging.getLogger(__name__)


def polygon_signed_area(polygon: Polygon) -> float:
    """Calculate the signed area of a polygon.

    Positive = counter-clockwise, negative = clockwise.
    """
    if len(polygon) < 3:
        return 0.0

    area = 0.0
    n = len(polygon)
    for i in range(n):
        j = (i + 1) % n
        area += polygon[i].x * polygon[j].y
        area -= polygon[j].x * polygon[i].y

    return area / 2.0


def ensure_counter_clockwise(polygon: Polygon) -> Polygon:
    """Return a copy of the polygon wound counter-clockwise."""
    result = polygon.copy()
    if polygon_signed_area(polygon) < 0:
        result.points.reverse()
    return result


def _turn(a: Coordinate, b: Coordinate, c: Coordinate) -> float:
    """Cross product of a->b and b->c; zero when the three are collinear."""
    return (b.x - a.x) * (c.y - b.y) - (b.y - a.y) * (c.x - b.x)


def remove_collinear_points(polygon: Polygon) -> Polygon:
    """Return a copy without vertices lying on the line through their neighbours.

    Repeated points and zero-width spikes are removed too. Stops at 3 points.
    """
    points = list(polygon.points)
    changed = True
    while changed and len(points) > 3:
        changed = False
        for i in range(len(points)):
            a, b, c = points[i - 1], points[i], points[(i + 1) % len(points)]
            if abs(_turn(a, b, c)) < config.PARALLEL_TOLERANCE:
                del points[i]
                changed = True
                break
    return Polygon(points)


def is_simple(polygon: Polygon) -> bool:
    """Check that a ring neither crosses nor touches itself.

    Non-adjacent edges may not meet at all, endpoints included, and adjacent
    edges may not fold back onto each other.
    """
    n = len(polygon)
    if n < 3:
        return False

    edges = list(polygon.segments())
    for i in range(n):
        a, b, c = polygon[i - 1], polygon[i], polygon[(i + 1) % n]
        if abs(_turn(a, b, c)) < config.PARALLEL_TOLERANCE:
            forward = (b.x - a.x) * (c.x - b.x) + (b.y - a.y) * (c.y - b.y)
            if forward <= 0:
                return False

        for j in range(i + 2, n):
            # Skip adjacent edges
            if i == 0 and j == n - 1:
                continue
            if segment_parameters(edges[i], edges[j]) is not None:
                return False

    return True


def is_inside(point: Coordinate, polygon: Polygon) -> bool:
    """Check if a point is inside a polygon using ray casting.

    Points exactly on the boundary may be classified either way.
    """
    if len(polygon) < 3:
        return False

    inside = False
    n = len(polygon)

    j = n - 1
    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y

        if ((yi > point.y) != (yj > point.y)) and \
           (point.x < (xj - xi) * (point.y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def segment_parameters(a: Segment, b: Segment) -> Optional[Tuple[float, float]]:
    """Solve for the line parameters (ua, ub) where two segments cross.

    Returns None when the segments are (nearly) parallel or when the crossing
    lies outside either segment. Collinear overlaps are reported as parallel.
    """
    x1, y1 = a.start
    x2, y2 = a.end
    x3, y3 = b.start
    x4, y4 = b.end

    denom = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
    if abs(denom) < config.PARALLEL_TOLERANCE:
        return None

    ua = ((x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)) / denom
    ub = ((x2 - x1) * (y1 - y3) - (y2 - y1) * (x1 - x3)) / denom

    if ua < 0 or ua > 1 or ub < 0 or ub > 1:
        return None

    return ua, ub


def point_along(segment: Segment, t: float) -> Coordinate:
    """Point at parameter t on the segment (0 = start, 1 = end)."""
    x1, y1 = segment.start
    x2, y2 = segment.end
    return Coordinate(x1 + t * (x2 - x1), y1 + t * (y2 - y1))


def intersect(a: Segment, b: Segment) -> Optional[Coordinate]:
    """Intersection point of two segments, endpoints included, or None."""
    params = segment_parameters(a, b)
    if params is None:
        return None
    return point_along(a, params[0])


def all_intersections(polygon_a: Polygon, polygon_b: Polygon) -> List[Coordinate]:
    """Every edge-edge intersection between two polygons.

    Ordered by edge of A, then edge of B. Duplicates are kept, so a crossing
    through a shared vertex shows up once per edge pair that touches it.
    """
    intersections: List[Coordinate] = []
    for edge_a in polygon_a.segments():
        for edge_b in polygon_b.segments():
            point = intersect(edge_a, edge_b)
            if point is not None:
                intersections.append(point)

    log.debug("found %d intersections between polygons of %d and %d points",
              len(intersections), len(polygon_a), len(polygon_b))
    return intersections
