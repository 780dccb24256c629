"""Outer boundary extraction by walking the vertex graph.

At every node the walk takes the outgoing edge that turns most clockwise
relative to the incoming direction. For counter-clockwise rings this keeps
the walk on the outside of the combined shape at shared points.
"""

import logging
import math
from typing import Optional, Sequence, Tuple

from .. import config
from ..errors import GraphTraversalError, InvalidArgumentError
from ..geometry import Coordinate, Polygon, ensure_counter_clockwise
from .graph import VertexGraph, build_graph

log = logging.getLogger(__name__)

Vector = Tuple[float, float]


def _direction(start: Coordinate, end: Coordinate) -> Vector:
    return (end.x - start.x, end.y - start.y)


def turn_angle(incoming: Vector, outgoing: Vector) -> float:
    """Rank of an outgoing direction in degrees, in [0, 360).

    180 is straight ahead, larger values turn clockwise (270 is a right
    angle to the right), smaller values turn counter-clockwise and 0 is a
    full reversal.
    """
    cross = incoming[0] * outgoing[1] - incoming[1] * outgoing[0]
    dot = incoming[0] * outgoing[0] + incoming[1] * outgoing[1]
    turn = math.degrees(math.atan2(cross, dot))
    return (180.0 - turn) % 360.0


def _sharpest_turn(graph: VertexGraph, node: int, incoming: Vector) -> int:
    origin = graph.nodes[node]
    best = None
    best_angle = -1.0
    for child in graph.children[node]:
        angle = turn_angle(incoming, _direction(origin, graph.nodes[child]))
        # strict > keeps the earliest inserted edge on ties
        if angle > best_angle:
            best, best_angle = child, angle
    return best


def trace_boundary(graph: VertexGraph, max_steps: Optional[int] = None) -> Polygon:
    """Walk the graph from its root and return the traced boundary.

    The walk stops when the next node is the root or any node already on
    the boundary. After each step the incoming direction is taken from the
    node just left towards its first child, not towards the child chosen.

    Args:
        graph: Vertex graph, e.g. from build_graph()
        max_steps: Upper bound on walk steps (default: graph edge count + 1)

    Returns:
        Boundary polygon starting at the root, not repeating it at the end

    Raises:
        InvalidArgumentError: if the graph is empty
        GraphTraversalError: if a node has no outgoing edge or the walk
            runs past max_steps
    """
    if len(graph) == 0:
        raise InvalidArgumentError("cannot trace an empty graph")
    if max_steps is None:
        max_steps = graph.edge_count() + 1

    current = graph.root
    incoming: Vector = config.NORTH
    visited = {current}
    boundary = [graph.nodes[current]]

    steps = 0
    while True:
        steps += 1
        if steps > max_steps:
            raise GraphTraversalError(
                f"boundary did not close within {max_steps} steps")

        children = graph.children[current]
        if not children:
            point = graph.nodes[current]
            raise GraphTraversalError(
                f"node at ({point.x}, {point.y}) has no outgoing edge")

        chosen = _sharpest_turn(graph, current, incoming)
        if chosen in visited:
            break

        boundary.append(graph.nodes[chosen])
        visited.add(chosen)
        incoming = _direction(graph.nodes[current], graph.nodes[children[0]])
        current = chosen

    log.debug("traced %d boundary points in %d steps", len(boundary), steps)
    return Polygon(boundary)


def union_polygons(polygons: Sequence[Polygon]) -> Polygon:
    """Union of any number of polygons through the vertex graph.

    Rings are reoriented counter-clockwise and the walk starts at the lowest
    point, so input winding and order do not matter. The inputs are not
    modified.
    """
    if not polygons:
        raise InvalidArgumentError("union_polygons needs at least one polygon")
    for n, polygon in enumerate(polygons):
        if polygon is None or len(polygon) == 0:
            raise InvalidArgumentError(f"polygon {n} is empty")

    rings = [ensure_counter_clockwise(p) for p in polygons]
    graph = build_graph(rings, in_place=True)
    graph.root = graph.lowest_node()
    return trace_boundary(graph)
