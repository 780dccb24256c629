"""Random polygon generator.

Builds star-shaped rings around a random centre with jittered, smoothed
radii, snapped to integer lon/lat-style coordinates.
"""

import logging
from typing import List, Optional

import numpy as np

from . import config
from .geometry import Coordinate, Polygon, is_simple, remove_collinear_points

log = logging.getLogger(__name__)


def _candidate(rng: np.random.Generator) -> Polygon:
    params = config.GENERATOR

    n = int(rng.integers(params["MIN_POINTS"], params["MAX_POINTS"]))
    center_x = float(rng.integers(*params["CENTER_X_RANGE"]))
    center_y = float(rng.integers(*params["CENTER_Y_RANGE"]))
    base_radius = float(rng.integers(*params["RADIUS_RANGE"]))

    radii = base_radius * rng.uniform(*params["RADIUS_VARIATION"], size=n)
    # Average each radius with its neighbours for a smoother outline
    radii = (np.roll(radii, 1) + radii + np.roll(radii, -1)) / 3

    angles = 2 * np.pi * np.arange(n) / n
    xs = np.clip(center_x + radii * np.cos(angles), *params["X_BOUNDS"])
    ys = np.clip(center_y + radii * np.sin(angles), *params["Y_BOUNDS"])
    xs = np.round(xs)
    ys = np.round(ys)

    points: List[Coordinate] = []
    for x, y in zip(xs, ys):
        point = Coordinate(float(x), float(y))
        if points and points[-1] == point:
            continue
        points.append(point)
    if len(points) > 1 and points[-1] == points[0]:
        points.pop()

    # Clamping to the bounds lines points up along the border
    return remove_collinear_points(Polygon(points))


def generate_polygon(rng: Optional[np.random.Generator] = None) -> Polygon:
    """Generate one random counter-clockwise polygon.

    Candidates whose ring touches or crosses itself after snapping are
    thrown away and drawn again.

    Args:
        rng: numpy random generator (default: a fresh unseeded one)

    Returns:
        Simple polygon with integer coordinates and no collinear vertices
    """
    if rng is None:
        rng = np.random.default_rng()

    while True:
        polygon = _candidate(rng)
        if len(polygon) >= 3 and is_simple(polygon):
            return polygon
        log.debug("discarding self-touching candidate of %d points", len(polygon))


def generate_polygons(count: int, seed: Optional[int] = None) -> List[Polygon]:
    """Generate several random polygons from one (optionally seeded) generator."""
    rng = np.random.default_rng(seed)
    return [generate_polygon(rng) for _ in range(count)]
