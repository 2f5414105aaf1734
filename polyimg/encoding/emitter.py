"""Write the polygon list as a JavaScript declaration for the device."""

from __future__ import annotations

from polyimg.encoding.numeric import encode_points
from polyimg.engine.context import Polygon


def format_polygon(polygon: Polygon, number_format: str = "int") -> str:
    fields = []
    if polygon.fill:
        fields.append(f'fill: "{polygon.fill}"')
    if polygon.stroke:
        fields.append(f'stroke: "{polygon.stroke}"')
    fields.append(f"points: {encode_points(polygon.flat_coordinates(), number_format)}")
    return "  {" + ", ".join(fields) + "}"


def emit_polygons(polygons: list[Polygon], number_format: str = "int", name: str = "polyImg") -> str:
    body = ",\n".join(format_polygon(p, number_format) for p in polygons)
    return f"var {name} = [\n{body}\n];"
