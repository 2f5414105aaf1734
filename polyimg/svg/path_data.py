"""SVG path data → normalized commands.

svgpathtools parses the d attribute (relative coordinates, H/V, the S/T
shorthands and arc endpoints). Its segments are then reduced to MoveTo /
LineTo / CurveTo / ClosePath in the element's local coordinate space:
quadratics are degree-elevated and arcs are split into cubic pieces.
"""

from __future__ import annotations

import math
import re

from svgpathtools import Arc, CubicBezier, Line, Path, QuadraticBezier, parse_path

from polyimg.exceptions import UnsupportedPathCommand
from polyimg.geometry.commands import ClosePath, CurveTo, LineTo, MoveTo, PathCommand, Point

# Anything that is neither a path command letter nor part of a number
_UNSUPPORTED_RE = re.compile(r"[^MmZzLlHhVvCcSsQqTtAa0-9eE+\-.,\s]")


def parse_path_data(d: str) -> list[PathCommand]:
    """Parse a path "d" attribute into normalized absolute commands.

    A subpath whose segments return to its start point is closed.
    Raises UnsupportedPathCommand for unknown command letters and ValueError
    for otherwise malformed data.
    """
    text = d.strip()
    if not text:
        return []
    unsupported = _UNSUPPORTED_RE.search(text)
    if unsupported is not None:
        raise UnsupportedPathCommand(f"Unsupported path command {unsupported.group(0)!r}")
    if text[0] not in "Mm":
        raise ValueError("path data must start with a moveto command")

    try:
        path = parse_path(text)
    except Exception as e:
        raise ValueError(f"malformed path data: {e}") from e

    commands: list[PathCommand] = []
    if not path:
        return commands
    for subpath in path.continuous_subpaths():
        commands.extend(_subpath_commands(subpath))
    return commands


def _subpath_commands(subpath: Path) -> list[PathCommand]:
    commands: list[PathCommand] = []
    start: complex | None = None
    for segment in subpath:
        if start is None:
            start = segment.start
            commands.append(MoveTo(_point(start)))
        # The closing edge is drawn by ClosePath itself
        if not (isinstance(segment, Line) and segment.end == start):
            commands.extend(_segment_commands(segment))
        if segment.end == start:
            commands.append(ClosePath())
            start = None
    return commands


def _segment_commands(segment) -> list[PathCommand]:
    if isinstance(segment, Line):
        return [LineTo(_point(segment.end))]
    if isinstance(segment, CubicBezier):
        return [CurveTo(_point(segment.control1), _point(segment.control2), _point(segment.end))]
    if isinstance(segment, QuadraticBezier):
        return [quad_to_cubic(_point(segment.start), _point(segment.control), _point(segment.end))]
    if isinstance(segment, Arc):
        return arc_curves(segment)
    raise UnsupportedPathCommand(f"Unsupported path segment: {type(segment).__name__}")


def _point(z: complex) -> Point:
    return (float(z.real), float(z.imag))


def quad_to_cubic(start: Point, control: Point, end: Point) -> CurveTo:
    """Exact degree elevation of a quadratic Bézier."""
    c1 = (start[0] + 2.0 / 3.0 * (control[0] - start[0]), start[1] + 2.0 / 3.0 * (control[1] - start[1]))
    c2 = (end[0] + 2.0 / 3.0 * (control[0] - end[0]), end[1] + 2.0 / 3.0 * (control[1] - end[1]))
    return CurveTo(c1, c2, end)


def arc_to_commands(
    start: Point,
    rx: float,
    ry: float,
    rotation: float,
    large_arc: bool,
    sweep: bool,
    end: Point,
) -> list[PathCommand]:
    """Elliptical arc from endpoint parameters, following the SVG implementation
    notes: coincident endpoints draw nothing, a zero radius degrades to a line.
    """
    if start == end:
        return []
    rx, ry = abs(rx), abs(ry)
    if rx == 0 or ry == 0:
        return [LineTo(end)]
    arc = Arc(
        start=complex(*start),
        radius=complex(rx, ry),
        rotation=rotation,
        large_arc=large_arc,
        sweep=sweep,
        end=complex(*end),
    )
    return arc_curves(arc)


def arc_curves(arc: Arc) -> list[PathCommand]:
    """Cubic pieces spanning at most 90 degrees each; the last ends exactly on arc.end."""
    # svgpathtools scales the radii up when they cannot span the endpoints
    rx, ry = arc.radius.real, arc.radius.imag
    rot = arc.rot_matrix
    center = arc.center

    pieces = max(1, int(math.ceil(abs(arc.delta) / 90.0 - 1e-9)))
    step = math.radians(arc.delta) / pieces
    alpha = 4.0 / 3.0 * math.tan(step / 4.0)

    def on_ellipse(angle: float) -> complex:
        return center + rot * complex(rx * math.cos(angle), ry * math.sin(angle))

    def tangent(angle: float) -> complex:
        return rot * complex(-rx * math.sin(angle), ry * math.cos(angle))

    commands: list[PathCommand] = []
    angle = math.radians(arc.theta)
    p0 = arc.start
    for i in range(pieces):
        next_angle = angle + step
        p3 = arc.end if i == pieces - 1 else on_ellipse(next_angle)
        c1 = p0 + alpha * tangent(angle)
        c2 = p3 - alpha * tangent(next_angle)
        commands.append(CurveTo(_point(c1), _point(c2), _point(p3)))
        angle, p0 = next_angle, p3
    return commands
