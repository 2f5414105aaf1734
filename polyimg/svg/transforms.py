"""SVG transform, length and viewport attribute parsing."""

from __future__ import annotations

import math
import re

import numpy as np
from numpy.typing import NDArray

from polyimg.geometry import affine

FLOAT_RE = re.compile(r"[-+]?(?:(?:\d*\.\d+)|(?:\d+\.?))(?:[Ee][+-]?\d+)?")
TRANSFORM_RE = re.compile(r"\s*(translate|scale|rotate|skewX|skewY|matrix)\s*\(([^\)]*)\)\s*,?")
LENGTH_RE = re.compile(r"^\s*([-+]?(?:(?:\d*\.\d+)|(?:\d+\.?))(?:[Ee][+-]?\d+)?)\s*(px|pt|pc|mm|cm|in|em|ex|%)?\s*$")

# CSS absolute units in px
_UNITS = {
    None: 1.0,
    "px": 1.0,
    "pt": 4.0 / 3.0,
    "pc": 16.0,
    "mm": 96.0 / 25.4,
    "cm": 96.0 / 2.54,
    "in": 96.0,
    # Font-relative units against the 16px CSS default
    "em": 16.0,
    "ex": 8.0,
}

_ALIGN_FACTORS = {"min": 0.0, "mid": 0.5, "max": 1.0}


def parse_transform(text: str | None) -> NDArray[np.float64]:
    """Parse an SVG transform list into one 3x3 matrix."""
    result = affine.identity()
    if not text:
        return result

    rest = text.strip()
    while rest:
        match = TRANSFORM_RE.match(rest)
        if match is None:
            raise ValueError(f"failed to parse transform: {rest}")
        rest = rest[match.end():]

        op, raw_args = match.groups()
        args = [float(a) for a in FLOAT_RE.findall(raw_args)]
        if op == "matrix":
            _require(op, args, 6)
            m = affine.matrix(*args)
        elif op == "translate":
            _require(op, args, 1, 2)
            m = affine.translate(*args)
        elif op == "scale":
            _require(op, args, 1, 2)
            m = affine.scale(*args)
        elif op == "rotate":
            _require(op, args, 1, 3)
            m = affine.rotate(*args)
        elif op == "skewX":
            _require(op, args, 1)
            m = affine.skew_x(args[0])
        else:
            _require(op, args, 1)
            m = affine.skew_y(args[0])
        result = result @ m
    return result


def _require(name: str, args: list[float], *counts: int) -> None:
    if len(args) not in counts:
        expected = " or ".join(str(c) for c in counts)
        raise ValueError(f"`{name}` transform requires {expected} arguments, {len(args)} given")


def parse_length(text: str | None) -> tuple[float, bool] | None:
    """Parse a length into (value, is_percentage). Returns None when absent or 'auto'."""
    if text is None or text.strip() in ("", "auto"):
        return None
    match = LENGTH_RE.match(text)
    if match is None:
        raise ValueError(f"invalid length: {text!r}")
    value = float(match.group(1))
    if not math.isfinite(value):
        raise ValueError(f"length out of range: {text!r}")
    unit = match.group(2)
    if unit == "%":
        return value, True
    return value * _UNITS[unit], False


def parse_number(text: str | None, default: float = 0.0) -> float:
    """Parse a coordinate attribute; percentages are not meaningful here and rejected."""
    length = parse_length(text)
    if length is None:
        return default
    value, is_percent = length
    if is_percent:
        raise ValueError(f"percentage not supported here: {text!r}")
    return value


def parse_viewbox(text: str | None) -> tuple[float, float, float, float] | None:
    """Parse viewBox="minx miny width height". Degenerate boxes are ignored."""
    if not text:
        return None
    values = [float(v) for v in FLOAT_RE.findall(text)]
    if len(values) != 4 or values[2] <= 0 or values[3] <= 0:
        return None
    return values[0], values[1], values[2], values[3]


def viewport_transform(
    viewport: tuple[float, float, float, float],
    viewbox: tuple[float, float, float, float] | None,
    preserve_aspect_ratio: str | None = None,
) -> NDArray[np.float64]:
    """Map viewBox user space into the viewport rectangle (x, y, width, height)."""
    x, y, width, height = viewport
    if viewbox is None:
        return affine.translate(x, y)

    vx, vy, vw, vh = viewbox
    sx, sy = width / vw, height / vh
    align, meet_or_slice = _parse_aspect_ratio(preserve_aspect_ratio)
    if align is None:
        ax = ay = 0.0
    else:
        s = min(sx, sy) if meet_or_slice == "meet" else max(sx, sy)
        sx = sy = s
        ax, ay = align
    tx = x - vx * sx + ax * (width - vw * sx)
    ty = y - vy * sy + ay * (height - vh * sy)
    return affine.translate(tx, ty) @ affine.scale(sx, sy)


def _parse_aspect_ratio(text: str | None) -> tuple[tuple[float, float] | None, str]:
    """Returns ((align_x, align_y) or None for 'none', 'meet' | 'slice')."""
    parts = (text or "").split()
    if parts and parts[0] == "defer":
        parts = parts[1:]
    align = parts[0] if parts else "xMidYMid"
    meet_or_slice = parts[1] if len(parts) > 1 and parts[1] == "slice" else "meet"
    if align == "none":
        return None, meet_or_slice
    match = re.fullmatch(r"x(Min|Mid|Max)Y(Min|Mid|Max)", align)
    if match is None:
        return (0.5, 0.5), meet_or_slice
    return (_ALIGN_FACTORS[match.group(1).lower()], _ALIGN_FACTORS[match.group(2).lower()]), meet_or_slice
