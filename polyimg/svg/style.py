"""Computed paint resolution: fill, stroke and color inheritance down the tree.

Paints come out in the functional "rgb(r, g, b)" form, the same shape a
browser's computed style reports, so the polygon assembler has a single input
format to normalize.
"""

from __future__ import annotations

import logging
import re

from polyimg.svg.colors import NAMED_COLORS
from polyimg.svg.tree import DocumentTree, SvgNode

logger = logging.getLogger(__name__)

COLOR_HEX_RE = re.compile(r"^#([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")
COLOR_RGB_RE = re.compile(r"^rgba?\(([^\)]*)\)$", re.IGNORECASE)
URL_PAINT_RE = re.compile(r"^url\([^\)]*\)\s*(.*)$")

RGB = tuple[int, int, int]

# Initial values of the inherited paint properties
_INITIAL = {"fill": "black", "stroke": "none", "color": "black"}


def parse_style_attr(style: str | None) -> dict[str, str]:
    """Split an inline style="a: b; c: d" attribute into a dict."""
    declarations: dict[str, str] = {}
    if not style:
        return declarations
    for item in style.split(";"):
        if ":" not in item:
            continue
        key, value = item.split(":", 1)
        value = value.replace("!important", "").strip()
        if key.strip():
            declarations[key.strip()] = value
    return declarations


def node_declarations(node: SvgNode) -> dict[str, str]:
    """Presentation attributes overridden by the inline style attribute."""
    declared = {k: node.attributes[k] for k in ("fill", "stroke", "color", "display") if k in node.attributes}
    declared.update(parse_style_attr(node.attributes.get("style")))
    return declared


def parse_color(value: str, current_color: RGB | None = None) -> RGB | None:
    """Parse an SVG color. Returns None for 'none'/'transparent'; raises ValueError if invalid."""
    text = value.strip()
    lowered = text.lower()
    if lowered in ("none", "transparent"):
        return None
    if lowered == "currentcolor":
        return current_color

    hex_match = COLOR_HEX_RE.match(text)
    if hex_match:
        digits = hex_match.group(1)
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)

    rgb_match = COLOR_RGB_RE.match(text)
    if rgb_match:
        channels = [c for c in re.split(r"[\s,/]+", rgb_match.group(1).strip()) if c]
        if len(channels) < 3:
            raise ValueError(f"invalid rgb color: {value!r}")
        return tuple(_parse_channel(c) for c in channels[:3])  # type: ignore[return-value]

    named = NAMED_COLORS.get(lowered)
    if named is not None:
        return parse_color(named)
    raise ValueError(f"invalid svg color: {value!r}")


def _parse_channel(text: str) -> int:
    if text.endswith("%"):
        value = float(text[:-1]) * 255.0 / 100.0
    else:
        value = float(text)
    return max(0, min(255, int(round(value))))


def format_rgb(color: RGB | None) -> str | None:
    if color is None:
        return None
    r, g, b = color
    return f"rgb({r}, {g}, {b})"


def compute_paint(tree: DocumentTree, index: int) -> tuple[str | None, str | None]:
    """Computed (fill, stroke) of a node as rgb() strings, None when unpainted."""
    color: RGB | None = parse_color(_INITIAL["color"])
    fill: RGB | None = parse_color(_INITIAL["fill"])
    stroke: RGB | None = None

    for node in tree.path_from_root(index):
        declared = node_declarations(node)
        if "color" in declared and declared["color"] != "inherit":
            color = _safe_color(declared["color"], color, color, node)
        if "fill" in declared:
            fill = _resolve_paint(declared["fill"], fill, color, node)
        if "stroke" in declared:
            stroke = _resolve_paint(declared["stroke"], stroke, color, node)

    return format_rgb(fill), format_rgb(stroke)


def _resolve_paint(value: str, inherited: RGB | None, current: RGB | None, node: SvgNode) -> RGB | None:
    value = value.strip()
    if value == "inherit":
        return inherited
    url_match = URL_PAINT_RE.match(value)
    if url_match:
        fallback = url_match.group(1).strip()
        if fallback:
            return _safe_color(fallback, inherited, current, node)
        logger.warning("Unsupported paint server %r on <%s>, treating as none", value, node.tag)
        return None
    return _safe_color(value, inherited, current, node)


def _safe_color(value: str, inherited: RGB | None, current: RGB | None, node: SvgNode) -> RGB | None:
    """Invalid declarations are ignored, leaving the inherited value in place."""
    try:
        return parse_color(value, current)
    except ValueError as e:
        logger.warning("Ignoring paint on <%s>: %s", node.tag, e)
        return inherited
