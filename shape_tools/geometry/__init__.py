"""Geometry primitives and intersection utilities for shape-tools."""

from .types import Coordinate, Segment, Polygon, coordinate_key
from .polygon import (
    polygon_signed_area,
    ensure_counter_clockwise,
    remove_collinear_points,
    is_simple,
    is_inside,
    segment_parameters,
    intersect,
    all_intersections,
)

__all__ = [
    "Coordinate",
    "Segment",
    "Polygon",
    "coordinate_key",
    "polygon_signed_area",
    "ensure_counter_clockwise",
    "remove_collinear_points",
    "is_simple",
    "is_inside",
    "segment_parameters",
    "intersect",
    "all_intersections",
]
