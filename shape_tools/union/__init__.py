"""Polygon union engines: angle-sort merge and vertex graph tracing."""

from .merge import union, union_all
from .graph import VertexGraph, build_graph, insert_intersections
from .trace import trace_boundary, turn_angle, union_polygons

__all__ = [
    "union",
    "union_all",
    "VertexGraph",
    "build_graph",
    "insert_intersections",
    "trace_boundary",
    "turn_angle",
    "union_polygons",
]
