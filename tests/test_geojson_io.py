"""Tests for GeoJSON reading and writing."""

import json

import numpy as np
import pytest
from shape_tools.errors import InvalidArgumentError
from shape_tools.geojson_io import (
    extract_polygons_from_geojson,
    polygons_to_geojson,
    read_geojson,
    write_geojson,
)
from shape_tools.geometry import Coordinate, Polygon


TRIANGLE = Polygon.from_tuples([(0, 0), (4, 0), (2, 3)])


def test_feature_collection_layout():
    document = json.loads(polygons_to_geojson([TRIANGLE], rng=np.random.default_rng(0)))

    assert document["type"] == "FeatureCollection"
    feature = document["features"][0]
    assert feature["type"] == "Feature"
    assert feature["geometry"]["type"] == "Polygon"
    # ring is closed by repeating the first point
    assert feature["geometry"]["coordinates"] == [[[0, 0], [4, 0], [2, 3], [0, 0]]]


def test_style_properties():
    document = json.loads(polygons_to_geojson([TRIANGLE], rng=np.random.default_rng(0)))
    properties = document["features"][0]["properties"]

    assert properties["fill"] == properties["stroke"]
    assert properties["fill"].startswith("#") and len(properties["fill"]) == 7
    assert properties["fill-opacity"] == 0.4
    assert properties["stroke-width"] == 2


def test_written_polygons_read_back():
    squares = [
        Polygon.from_tuples([(0, 0), (2, 0), (2, 2), (0, 2)]),
        Polygon.from_tuples([(1, 1), (3, 1), (3, 3), (1, 3)]),
    ]

    polygons = extract_polygons_from_geojson(polygons_to_geojson(squares))

    assert polygons == squares


def test_non_polygon_features_are_skipped():
    content = json.dumps({
        "type": "FeatureCollection",
        "features": [
            {"type": "Feature", "geometry": {"type": "Point", "coordinates": [1, 2]}},
            {"type": "Feature", "geometry": None},
            {"type": "Feature", "geometry": {
                "type": "Polygon",
                "coordinates": [[[0, 0], [1, 0], [0, 1], [0, 0]], [[0.1, 0.1], [0.2, 0.1], [0.1, 0.2]]],
            }},
        ],
    })

    polygons = extract_polygons_from_geojson(content)

    assert len(polygons) == 1
    assert polygons[0].points == [Coordinate(0, 0), Coordinate(1, 0), Coordinate(0, 1)]


def test_bare_geometry():
    content = json.dumps({"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [0, 1]]]})

    assert len(extract_polygons_from_geojson(content)[0]) == 3


@pytest.mark.parametrize("content", [
    "not json",
    "[1, 2, 3]",
    '{"type": "Topology"}',
    '{"type": "Polygon", "coordinates": [[["a", "b"], [1]]]}',
])
def test_invalid_content(content):
    with pytest.raises(InvalidArgumentError):
        extract_polygons_from_geojson(content)


def test_file_round_trip(tmp_path):
    path = tmp_path / "out.geojson"

    write_geojson('{"type": "FeatureCollection", "features": []}', str(path))

    assert json.loads(read_geojson(str(path)))["features"] == []
