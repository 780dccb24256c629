"""Two-polygon union by angular sort of the retained boundary points.

Only correct when the true union is star-shaped with respect to the first
vertex of the first polygon; concave unions come out with crossed edges.
Use the vertex graph tracer in ``shape_tools.union.trace`` for the general case.
"""

import logging
import math
from functools import reduce
from typing import Dict, List, Sequence, Tuple

from ..errors import InvalidArgumentError
from ..geometry import Coordinate, Polygon, all_intersections, coordinate_key, is_inside

log = logging.getLogger(__name__)


def _require_polygon(polygon: Polygon, name: str):
    if polygon is None or len(polygon) == 0:
        raise InvalidArgumentError(f"{name} must be a non-empty polygon")


def retained_points(polygon_a: Polygon, polygon_b: Polygon) -> List[Coordinate]:
    """Points that lie on the union boundary, deduplicated, unsorted.

    Vertices of A outside B, then vertices of B outside A, then the
    intersections between the two boundaries.
    """
    candidates = [p for p in polygon_a if not is_inside(p, polygon_b)]
    candidates += [p for p in polygon_b if not is_inside(p, polygon_a)]
    candidates += all_intersections(polygon_a, polygon_b)

    seen: Dict[Tuple[float, float], Coordinate] = {}
    for point in candidates:
        seen.setdefault(coordinate_key(point), point)
    return list(seen.values())


def union(polygon_a: Polygon, polygon_b: Polygon) -> Polygon:
    """Union of two polygons, sorted by polar angle around A's first vertex.

    Args:
        polygon_a: First polygon; its first point is the sort origin
        polygon_b: Second polygon

    Returns:
        A new polygon. Neither input is modified.

    Raises:
        InvalidArgumentError: if either polygon is None or empty
    """
    _require_polygon(polygon_a, "polygon_a")
    _require_polygon(polygon_b, "polygon_b")

    points = retained_points(polygon_a, polygon_b)
    origin = polygon_a[0]

    # sorted() is stable, so points at equal angles keep their retained order
    points = sorted(points, key=lambda p: math.atan2(p.y - origin.y, p.x - origin.x))

    log.debug("angle-sort union kept %d of %d input vertices",
              len(points), len(polygon_a) + len(polygon_b))
    return Polygon(points)


def union_all(polygons: Sequence[Polygon]) -> Polygon:
    """Fold union() left to right over two or more polygons."""
    if polygons is None or len(polygons) < 2:
        raise InvalidArgumentError("union_all needs at least two polygons")
    return reduce(union, polygons)
