"""Tests for path data normalization and basic shapes."""

import math

import pytest

from polyimg.exceptions import UnsupportedPathCommand
from polyimg.geometry.commands import ClosePath, CurveTo, LineTo, MoveTo
from polyimg.svg.path_data import arc_to_commands, parse_path_data
from polyimg.svg.shapes import ellipse_commands, poly_commands, rect_commands, shape_commands
from polyimg.svg.tree import SvgNode


def test_absolute_lines_and_close():
    assert parse_path_data("M0 0 L10 0 L10 10 Z") == [
        MoveTo((0.0, 0.0)),
        LineTo((10.0, 0.0)),
        LineTo((10.0, 10.0)),
        ClosePath(),
    ]


def test_relative_and_axis_commands():
    assert parse_path_data("m1 1 l2 0 h3 v4 z") == [
        MoveTo((1.0, 1.0)),
        LineTo((3.0, 1.0)),
        LineTo((6.0, 1.0)),
        LineTo((6.0, 5.0)),
        ClosePath(),
    ]


def test_implicit_lineto_after_moveto():
    assert parse_path_data("M0,0 10,0 10,10") == [
        MoveTo((0.0, 0.0)),
        LineTo((10.0, 0.0)),
        LineTo((10.0, 10.0)),
    ]


def test_quadratic_is_elevated_to_cubic():
    commands = parse_path_data("M0 0 Q 3 3 6 0")
    curve = commands[1]
    assert isinstance(curve, CurveTo)
    assert curve.control1 == pytest.approx((2.0, 2.0))
    assert curve.control2 == pytest.approx((4.0, 2.0))
    assert curve.end == (6.0, 0.0)


def test_smooth_cubic_reflects_previous_control():
    commands = parse_path_data("M0 0 C 1 1 2 1 3 0 S 5 -1 6 0")
    second = commands[2]
    assert second.control1 == (4.0, -1.0)
    assert second.control2 == (5.0, -1.0)
    assert second.end == (6.0, 0.0)


def test_smooth_cubic_without_previous_curve_uses_current_point():
    commands = parse_path_data("M2 2 S 5 5 6 2")
    assert commands[1].control1 == (2.0, 2.0)


def test_semicircle_arc_splits_into_quarter_pieces():
    commands = parse_path_data("M0 0 A 5 5 0 0 1 10 0")
    curves = commands[1:]
    assert len(curves) == 2
    assert all(isinstance(c, CurveTo) for c in curves)
    assert curves[-1].end == (10.0, 0.0)
    mid = curves[0].end
    assert mid[0] == pytest.approx(5.0)
    assert abs(mid[1]) == pytest.approx(5.0)


def test_degenerate_arcs():
    assert arc_to_commands((0.0, 0.0), 0, 5, 0, False, True, (3.0, 4.0)) == [LineTo((3.0, 4.0))]
    assert arc_to_commands((1.0, 1.0), 5, 5, 0, False, True, (1.0, 1.0)) == []


def test_commands_after_close_restart_at_subpath_start():
    commands = parse_path_data("M0 0 L1 0 L1 1 Z L 5 5")
    assert commands[-3:] == [ClosePath(), MoveTo((0.0, 0.0)), LineTo((5.0, 5.0))]


def test_relative_moveto_after_close_uses_subpath_start():
    commands = parse_path_data("M10 10 L20 10 z m5 5 l1 0")
    assert commands[3] == MoveTo((15.0, 15.0))
    assert commands[4] == LineTo((16.0, 15.0))


@pytest.mark.parametrize("d", ["L 1 1", "M0 0 Z 5", "M0 0 L 1"])
def test_malformed_path_data_raises(d):
    with pytest.raises(ValueError):
        parse_path_data(d)


def test_unknown_command_letter():
    with pytest.raises(UnsupportedPathCommand):
        parse_path_data("M0 0 L 5 5 X 1 1")


def test_explicit_return_to_start_closes_subpath():
    assert parse_path_data("M0 0 L4 0 L4 4 L0 0") == [
        MoveTo((0.0, 0.0)),
        LineTo((4.0, 0.0)),
        LineTo((4.0, 4.0)),
        ClosePath(),
    ]


def test_curve_ending_on_start_keeps_the_curve():
    commands = parse_path_data("M0 0 C 5 -5 5 5 0 0 Z")
    assert isinstance(commands[1], CurveTo)
    assert commands[1].end == (0.0, 0.0)
    assert commands[-1] == ClosePath()


def test_disjoint_subpaths_split_on_moveto():
    commands = parse_path_data("M0 0 L1 0 M5 5 L6 5")
    assert [type(c) for c in commands] == [MoveTo, LineTo, MoveTo, LineTo]
    assert commands[2] == MoveTo((5.0, 5.0))


def test_empty_path_data():
    assert parse_path_data("") == []


def test_plain_rect():
    assert rect_commands(0, 0, 10, 10) == [
        MoveTo((0, 0)),
        LineTo((10, 0)),
        LineTo((10, 10)),
        LineTo((0, 10)),
        ClosePath(),
    ]


def test_rounded_rect_has_corner_curves():
    commands = rect_commands(0, 0, 10, 10, rx=2)
    assert sum(isinstance(c, CurveTo) for c in commands) == 4
    assert commands[0] == MoveTo((2, 0))
    assert isinstance(commands[-1], ClosePath)


def test_empty_rect_renders_nothing():
    assert rect_commands(0, 0, 0, 10) == []


def test_circle_is_four_arcs():
    commands = ellipse_commands(5, 5, 5, 5)
    assert commands[0] == MoveTo((10, 5))
    assert sum(isinstance(c, CurveTo) for c in commands) == 4
    assert isinstance(commands[-1], ClosePath)
    # Quarter-arc ends sit on the circle
    for c in commands[1:-1]:
        assert math.hypot(c.end[0] - 5, c.end[1] - 5) == pytest.approx(5.0)


def test_polygon_and_polyline():
    assert poly_commands("0,0 10,0 10,10", closed=True)[-1] == ClosePath()
    polyline = poly_commands("0 0 10 0 10", closed=False)
    assert polyline == [MoveTo((0.0, 0.0)), LineTo((10.0, 0.0))]


def test_shape_commands_dispatch():
    line = SvgNode(index=0, tag="line", attributes={"x1": "1", "y1": "2", "x2": "3", "y2": "4"})
    assert shape_commands(line) == [MoveTo((1.0, 2.0)), LineTo((3.0, 4.0))]

    circle = SvgNode(index=0, tag="circle", attributes={"cx": "0", "cy": "0", "r": "0"})
    assert shape_commands(circle) == []

    with pytest.raises(ValueError):
        shape_commands(SvgNode(index=0, tag="rect", attributes={"width": "50%", "height": "1"}))
