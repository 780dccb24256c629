#!/usr/bin/env python3
"""
Compare shape-tools unions against Shapely's unary_union.

Generates random overlapping polygon pairs, unions them with both
shape-tools methods and with Shapely, and reports timing plus how far the
union areas drift from Shapely's.

Usage:
    python benchmark_shapely.py [pairs] [seed]
    python benchmark_shapely.py 200 42
"""

import time
import sys

try:
    from shapely.geometry import Polygon as ShapelyPolygon
    from shapely.ops import unary_union
    import numpy as np
except ImportError as e:
    print(f"Missing dependency: {e}")
    print("Install with: pip install shapely numpy")
    sys.exit(1)

from shape_tools.generator import generate_polygon
from shape_tools.geometry import Coordinate, Polygon, polygon_signed_area
from shape_tools.union import union_all, union_polygons


def shifted(polygon: Polygon, dx: float, dy: float) -> Polygon:
    return Polygon([Coordinate(p.x + dx, p.y + dy) for p in polygon])


def make_pairs(count: int, seed: int) -> list[tuple[Polygon, Polygon]]:
    """Random polygon plus a shifted copy of another, so the two overlap."""
    rng = np.random.default_rng(seed)
    pairs = []
    for _ in range(count):
        a = generate_polygon(rng)
        b = generate_polygon(rng)
        # Move b's first vertex onto a's centroid
        cx = sum(p.x for p in a) / len(a)
        cy = sum(p.y for p in a) / len(a)
        pairs.append((a, shifted(b, cx - b[0].x, cy - b[0].y)))
    return pairs


def relative_area_error(result: Polygon, reference: float) -> float:
    if reference == 0:
        return 0.0
    return abs(abs(polygon_signed_area(result)) - reference) / reference


def benchmark(count: int = 100, seed: int = 0):
    """Run the full benchmark."""
    pairs = make_pairs(count, seed)
    print(f"Generated {len(pairs)} overlapping pairs (seed={seed})")

    start = time.perf_counter()
    reference = [
        unary_union([ShapelyPolygon(a.to_tuples()).buffer(0),
                     ShapelyPolygon(b.to_tuples()).buffer(0)]).area
        for a, b in pairs
    ]
    shapely_time = time.perf_counter() - start

    results = {}
    for name, method in (('graph', union_polygons), ('merge', union_all)):
        start = time.perf_counter()
        unions = [method([a, b]) for a, b in pairs]
        elapsed = time.perf_counter() - start
        errors = np.array([relative_area_error(u, r) for u, r in zip(unions, reference)])
        results[name] = (elapsed, errors)

    print()
    print("=" * 50)
    print("RESULTS (shape-tools vs Shapely)")
    print("=" * 50)
    print(f"Shapely unary_union: {shapely_time*1000:.1f}ms")
    for name, (elapsed, errors) in results.items():
        print(f"{name:6s} {elapsed*1000:8.1f}ms  "
              f"median area error {np.median(errors):.4f}  "
              f"within 1%: {np.mean(errors < 0.01)*100:.0f}%")
    print("=" * 50)

    return results


if __name__ == "__main__":
    count = int(sys.argv[1]) if len(sys.argv) > 1 else 100
    seed = int(sys.argv[2]) if len(sys.argv) > 2 else 0
    benchmark(count, seed)
