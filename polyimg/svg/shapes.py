"""Basic shape elements → normalized path commands.

https://www.w3.org/TR/SVG/shapes.html
"""

from __future__ import annotations

from polyimg.geometry.commands import ClosePath, LineTo, MoveTo, PathCommand
from polyimg.svg.path_data import arc_to_commands, parse_path_data
from polyimg.svg.transforms import FLOAT_RE, parse_number
from polyimg.svg.tree import SvgNode


def shape_commands(node: SvgNode) -> list[PathCommand]:
    """Normalized commands for any shape element, in its local coordinates."""
    attrs = node.attributes
    tag = node.tag
    if tag == "path":
        return parse_path_data(attrs.get("d", ""))
    if tag == "rect":
        return rect_commands(
            parse_number(attrs.get("x")),
            parse_number(attrs.get("y")),
            parse_number(attrs.get("width")),
            parse_number(attrs.get("height")),
            _optional_number(attrs.get("rx")),
            _optional_number(attrs.get("ry")),
        )
    if tag == "circle":
        r = parse_number(attrs.get("r"))
        return ellipse_commands(parse_number(attrs.get("cx")), parse_number(attrs.get("cy")), r, r)
    if tag == "ellipse":
        rx = _optional_number(attrs.get("rx"))
        ry = _optional_number(attrs.get("ry"))
        # rx/ry="auto" borrows the other radius
        rx, ry = (rx if rx is not None else ry), (ry if ry is not None else rx)
        if rx is None or ry is None:
            return []
        return ellipse_commands(parse_number(attrs.get("cx")), parse_number(attrs.get("cy")), rx, ry)
    if tag == "line":
        return [
            MoveTo((parse_number(attrs.get("x1")), parse_number(attrs.get("y1")))),
            LineTo((parse_number(attrs.get("x2")), parse_number(attrs.get("y2")))),
        ]
    if tag in ("polyline", "polygon"):
        return poly_commands(attrs.get("points", ""), closed=tag == "polygon")
    raise ValueError(f"<{tag}> is not a shape element")


def _optional_number(text: str | None) -> float | None:
    if text is None or text.strip() in ("", "auto"):
        return None
    return parse_number(text)


def rect_commands(
    x: float,
    y: float,
    width: float,
    height: float,
    rx: float | None = None,
    ry: float | None = None,
) -> list[PathCommand]:
    if width <= 0 or height <= 0:
        return []
    if rx is None:
        rx = ry
    if ry is None:
        ry = rx
    rx = min(max(rx or 0.0, 0.0), width / 2)
    ry = min(max(ry or 0.0, 0.0), height / 2)

    if rx == 0 or ry == 0:
        return [
            MoveTo((x, y)),
            LineTo((x + width, y)),
            LineTo((x + width, y + height)),
            LineTo((x, y + height)),
            ClosePath(),
        ]

    commands: list[PathCommand] = [MoveTo((x + rx, y)), LineTo((x + width - rx, y))]
    commands += arc_to_commands((x + width - rx, y), rx, ry, 0, False, True, (x + width, y + ry))
    commands.append(LineTo((x + width, y + height - ry)))
    commands += arc_to_commands((x + width, y + height - ry), rx, ry, 0, False, True, (x + width - rx, y + height))
    commands.append(LineTo((x + rx, y + height)))
    commands += arc_to_commands((x + rx, y + height), rx, ry, 0, False, True, (x, y + height - ry))
    commands.append(LineTo((x, y + ry)))
    commands += arc_to_commands((x, y + ry), rx, ry, 0, False, True, (x + rx, y))
    commands.append(ClosePath())
    return commands


def ellipse_commands(cx: float, cy: float, rx: float, ry: float) -> list[PathCommand]:
    if rx <= 0 or ry <= 0:
        return []
    quadrants = [(cx + rx, cy), (cx, cy + ry), (cx - rx, cy), (cx, cy - ry), (cx + rx, cy)]
    commands: list[PathCommand] = [MoveTo(quadrants[0])]
    for start, end in zip(quadrants, quadrants[1:]):
        commands += arc_to_commands(start, rx, ry, 0, False, True, end)
    commands.append(ClosePath())
    return commands


def poly_commands(points_attr: str, closed: bool) -> list[PathCommand]:
    values = [float(v) for v in FLOAT_RE.findall(points_attr)]
    # An odd trailing coordinate is ignored
    pairs = [(values[i], values[i + 1]) for i in range(0, len(values) - 1, 2)]
    if not pairs:
        return []
    commands: list[PathCommand] = [MoveTo(pairs[0])]
    commands += [LineTo(p) for p in pairs[1:]]
    if closed:
        commands.append(ClosePath())
    return commands
