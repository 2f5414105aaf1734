"""Tests for the device declaration writer."""

import numpy as np

from polyimg.encoding.emitter import emit_polygons, format_polygon
from polyimg.engine.context import Polygon

TRIANGLE = Polygon(points=np.array([[0, 0], [10, 0], [10, 10]], dtype=float), fill="#ff0080")


def test_format_polygon():
    assert format_polygon(TRIANGLE) == '  {fill: "#ff0080", points: new Uint8Array(E.toArrayBuffer(atob("AAAKAAoK")))}'


def test_format_polygon_with_both_paints():
    polygon = Polygon(points=np.array([[0.5, 1]]), fill="#000000", stroke="#ffffff")
    assert format_polygon(polygon, "decimal") == '  {fill: "#000000", stroke: "#ffffff", points: [0.5,1]}'


def test_emit_polygons():
    stroked = Polygon(points=np.array([[1, 2]], dtype=float), stroke="#336699")
    text = emit_polygons([TRIANGLE, stroked])
    lines = text.split("\n")
    assert lines[0] == "var polyImg = ["
    assert lines[1].endswith("},")
    assert lines[2] == '  {stroke: "#336699", points: new Uint8Array(E.toArrayBuffer(atob("AQI=")))}'
    assert lines[3] == "];"


def test_emit_empty_list():
    assert emit_polygons([]) == "var polyImg = [\n\n];"


def test_custom_variable_name():
    assert emit_polygons([], name="icon").startswith("var icon = [")
