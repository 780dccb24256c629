"""shape-tools: union of simple polygons and GeoJSON polygon utilities."""

__version__ = "0.1.0"

from .geometry import Coordinate, Segment, Polygon
from .union import union, build_graph, trace_boundary, union_polygons
from .errors import ShapeToolsError, InvalidArgumentError, GraphTraversalError

__all__ = [
    "Coordinate",
    "Segment",
    "Polygon",
    "union",
    "build_graph",
    "trace_boundary",
    "union_polygons",
    "ShapeToolsError",
    "InvalidArgumentError",
    "GraphTraversalError",
]
