"""Polygon assembly: subpaths + paints → output polygons."""

from __future__ import annotations

import logging
import re

import numpy as np

from polyimg.engine.context import Polygon, Subpath

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"\d+")


def rgb_to_hex(color: str) -> str:
    """Convert "rgb(r, g, b)" into "#rrggbb"."""
    channels = _INT_RE.findall(color)[:3]
    if len(channels) != 3:
        raise ValueError(f"expected rgb(r, g, b), got {color!r}")
    return "#" + "".join(f"{min(int(c), 255):02x}" for c in channels)


def assemble_polygons(
    subpaths: list[Subpath],
    fill: str | None,
    stroke: str | None,
    origin: tuple[float, float] = (0.0, 0.0),
    scale: float = 1.0,
    max_points: int | None = None,
) -> list[Polygon]:
    """One Polygon per non-empty subpath, shifted by -origin * scale."""
    if fill is None and stroke is None:
        return []
    fill_hex = rgb_to_hex(fill) if fill is not None else None
    stroke_hex = rgb_to_hex(stroke) if stroke is not None else None
    offset = np.array(origin, dtype=np.float64) * scale

    polygons: list[Polygon] = []
    for subpath in subpaths:
        if len(subpath) == 0:
            continue
        if max_points is not None and len(subpath) > max_points:
            logger.warning("Polygon has %d points, above the device cap of %d", len(subpath), max_points)
        polygons.append(Polygon(points=subpath.points - offset, fill=fill_hex, stroke=stroke_hex))
    return polygons
