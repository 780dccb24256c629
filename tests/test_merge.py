"""Tests for the angle-sort two-polygon union."""

import pytest
from shape_tools.errors import InvalidArgumentError
from shape_tools.geometry import Coordinate, Polygon, is_inside
from shape_tools.union import union, union_all
from shape_tools.union.merge import retained_points


def square(x, y, size):
    return Polygon.from_tuples([(x, y), (x + size, y), (x + size, y + size), (x, y + size)])


def test_overlapping_squares_retained_points():
    """Outside vertices of both squares plus the two crossings."""
    a = square(0, 0, 2)
    b = square(1, 1, 2)

    points = retained_points(a, b)

    assert points == [
        Coordinate(0, 0), Coordinate(2, 0), Coordinate(0, 2),
        Coordinate(3, 1), Coordinate(3, 3), Coordinate(1, 3),
        Coordinate(2, 1), Coordinate(1, 2),
    ]


def test_overlapping_squares_sorted_by_angle():
    a = square(0, 0, 2)
    b = square(1, 1, 2)

    result = union(a, b)

    assert result.points == [
        Coordinate(0, 0), Coordinate(2, 0), Coordinate(3, 1), Coordinate(2, 1),
        Coordinate(3, 3), Coordinate(1, 2), Coordinate(1, 3), Coordinate(0, 2),
    ]


def test_contains_all_outside_vertices():
    """Every vertex of one polygon outside the other survives the union."""
    a = Polygon.from_tuples([(0, 0), (6, 0), (6, 4), (3, 6), (0, 4)])
    b = Polygon.from_tuples([(4, 1), (9, 2), (8, 5), (5, 3)])

    result = set(union(a, b).points)

    for p in a:
        if not is_inside(p, b):
            assert p in result
    for p in b:
        if not is_inside(p, a):
            assert p in result


def test_shared_intersections_are_deduplicated():
    a = square(0, 0, 2)
    b = Polygon.from_tuples([(1, 0), (3, -1), (3, 1)])

    result = union(a, b)

    assert result.points.count(Coordinate(1, 0)) == 1


def test_inputs_are_not_modified():
    a = square(0, 0, 2)
    b = square(1, 1, 2)

    union(a, b)

    assert a == square(0, 0, 2)
    assert b == square(1, 1, 2)


def test_contained_polygon_disappears():
    outer = square(0, 0, 10)
    inner = square(2, 2, 2)

    result = union(outer, inner)

    assert sorted(result.to_tuples()) == sorted(outer.to_tuples())


@pytest.mark.parametrize("a, b", [
    (None, Polygon.from_tuples([(0, 0), (1, 0), (0, 1)])),
    (Polygon.from_tuples([(0, 0), (1, 0), (0, 1)]), None),
    (Polygon(), Polygon.from_tuples([(0, 0), (1, 0), (0, 1)])),
])
def test_missing_input(a, b):
    with pytest.raises(InvalidArgumentError):
        union(a, b)


def test_union_all_folds_pairs():
    polygons = [square(0, 0, 2), square(1, 1, 2), square(2, 2, 2)]

    result = union_all(polygons)

    assert Coordinate(0, 0) in result.points
    assert Coordinate(4, 4) in result.points


def test_union_all_needs_two():
    with pytest.raises(InvalidArgumentError):
        union_all([square(0, 0, 1)])
