"""Vertex graph over polygon vertices and their mutual intersection points.

Nodes live in an arena and are addressed by integer index. Each node keeps a
list of successor indices in insertion order, one per polygon that leaves the
point. Coordinates are resolved to nodes through coordinate_key(), so a point
shared by several polygons becomes a single node.
"""

import itertools
import logging
from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Tuple

from ..errors import InvalidArgumentError
from ..geometry import Coordinate, Polygon, coordinate_key, segment_parameters
from ..geometry.polygon import point_along

log = logging.getLogger(__name__)

# edge index -> [(parameter along the edge, point)]
Splits = Dict[int, List[Tuple[float, Coordinate]]]


def _splice(polygon: Polygon, edges, splits: Splits):
    # Work from the last edge backwards so earlier indices stay valid
    for index in sorted(splits, reverse=True):
        edge = edges[index]
        taken = {coordinate_key(edge.start), coordinate_key(edge.end)}
        new_points = []
        for _, point in sorted(splits[index], key=lambda s: s[0]):
            key = coordinate_key(point)
            if key in taken:
                continue
            taken.add(key)
            new_points.append(point)
        polygon.points[index + 1:index + 1] = new_points


def insert_intersections(polygon_a: Polygon, polygon_b: Polygon) -> int:
    """Splice every A/B edge intersection into both polygons.

    Each intersection is inserted right after the start vertex of the edge it
    lies on, ordered along that edge. Points that coincide with an edge
    endpoint, or with a point already spliced into that edge, are skipped.
    Both polygons are modified in place.

    Returns:
        Number of edge pairs that intersect
    """
    edges_a = list(polygon_a.segments())
    edges_b = list(polygon_b.segments())
    splits_a: Splits = defaultdict(list)
    splits_b: Splits = defaultdict(list)

    found = 0
    for i, edge_a in enumerate(edges_a):
        for j, edge_b in enumerate(edges_b):
            params = segment_parameters(edge_a, edge_b)
            if params is None:
                continue
            ua, ub = params
            # The same object goes into both rings
            point = point_along(edge_a, ua)
            splits_a[i].append((ua, point))
            splits_b[j].append((ub, point))
            found += 1

    _splice(polygon_a, edges_a, splits_a)
    _splice(polygon_b, edges_b, splits_b)
    return found


class VertexGraph:
    """Directed graph of boundary points with polygon-traversal edges."""

    def __init__(self):
        self.nodes: List[Coordinate] = []
        self.children: List[List[int]] = []
        self.root = 0
        self._index: Dict[Tuple[float, float], int] = {}

    @classmethod
    def from_polygon(cls, polygon: Polygon) -> "VertexGraph":
        """Graph holding a single polygon as a cycle; its first point is the root."""
        graph = cls()
        graph.add_polygon(polygon)
        return graph

    def __len__(self) -> int:
        return len(self.nodes)

    def find(self, coordinate: Coordinate) -> Optional[int]:
        return self._index.get(coordinate_key(coordinate))

    def node_for(self, coordinate: Coordinate) -> int:
        """Index of the node at this coordinate, creating it if needed."""
        index = self.find(coordinate)
        if index is None:
            index = len(self.nodes)
            self.nodes.append(coordinate)
            self.children.append([])
            self._index[coordinate_key(coordinate)] = index
        return index

    def add_edge(self, parent: int, child: int) -> bool:
        """Link parent -> child. Self-loops and repeated edges are ignored.

        When two polygons run along the same edge in the same direction they
        share one edge rather than contributing one each. The walk breaks
        ties in favour of the first edge, so a parallel copy would never be
        chosen anyway.

        Returns:
            True if a new edge was added
        """
        if parent == child or child in self.children[parent]:
            return False
        self.children[parent].append(child)
        return True

    def add_polygon(self, polygon: Polygon):
        """Insert the polygon as a directed cycle, closing edge included."""
        if len(polygon) == 0:
            return
        first = previous = self.node_for(polygon[0])
        for point in polygon.points[1:]:
            current = self.node_for(point)
            self.add_edge(previous, current)
            previous = current
        self.add_edge(previous, first)

    def edge_count(self) -> int:
        return sum(len(c) for c in self.children)

    def lowest_node(self) -> int:
        """Node with the smallest (y, x); always on the outer silhouette."""
        if not self.nodes:
            raise InvalidArgumentError("graph has no nodes")
        return min(range(len(self.nodes)),
                   key=lambda i: (self.nodes[i].y, self.nodes[i].x))


def build_graph(polygons: Sequence[Polygon], in_place: bool = False) -> VertexGraph:
    """Build the vertex graph of a set of polygons.

    Intersections between every pair of polygons are spliced into the rings
    first, then each ring is added as a directed cycle. The root is the first
    point of the first polygon.

    Args:
        polygons: Input polygons, at least one
        in_place: If True, splice intersections into the caller's polygons;
            otherwise work on copies and leave the inputs untouched

    Raises:
        InvalidArgumentError: if no polygons are given or one of them is empty
    """
    if not polygons:
        raise InvalidArgumentError("build_graph needs at least one polygon")
    for n, polygon in enumerate(polygons):
        if polygon is None or len(polygon) == 0:
            raise InvalidArgumentError(f"polygon {n} is empty")

    rings = list(polygons) if in_place else [p.copy() for p in polygons]

    crossings = 0
    for a, b in itertools.combinations(rings, 2):
        crossings += insert_intersections(a, b)

    graph = VertexGraph.from_polygon(rings[0])
    for ring in rings:
        graph.add_polygon(ring)

    log.debug("vertex graph: %d polygons, %d crossings, %d nodes, %d edges",
              len(rings), crossings, len(graph), graph.edge_count())
    return graph
