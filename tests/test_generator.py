"""Tests for the random polygon generator."""

import numpy as np
from shape_tools.generator import generate_polygon, generate_polygons
from shape_tools.geometry import is_simple, polygon_signed_area


def test_point_count_and_bounds():
    rng = np.random.default_rng(7)

    for _ in range(20):
        polygon = generate_polygon(rng)

        assert 3 <= len(polygon) < 100
        for p in polygon:
            assert -180 <= p.x <= 180
            assert -90 <= p.y <= 90
            assert p.x == int(p.x) and p.y == int(p.y)


def test_counter_clockwise():
    for polygon in generate_polygons(10, seed=3):
        assert polygon_signed_area(polygon) > 0


def test_no_repeated_neighbours():
    for polygon in generate_polygons(10, seed=11):
        points = polygon.points
        for i in range(len(points)):
            assert points[i] != points[(i + 1) % len(points)]


def test_rings_are_simple():
    for polygon in generate_polygons(400, seed=0):
        assert is_simple(polygon)


def test_rings_are_valid_for_shapely():
    from shapely.geometry import Polygon as ShapelyPolygon

    for polygon in generate_polygons(400, seed=0):
        assert ShapelyPolygon(polygon.to_tuples()).is_valid


def test_seed_is_reproducible():
    assert generate_polygons(3, seed=42) == generate_polygons(3, seed=42)


def test_count():
    assert len(generate_polygons(5, seed=1)) == 5
