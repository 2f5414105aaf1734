"""Transform resolution: local → document matrix for any node.

The ancestor chain is walked root-first. Every node contributes its own
transform attribute; every <svg> contributes the mapping of its viewBox into
its viewport. The outermost viewport is where the conversion scale enters, so
the result maps local coordinates straight to scaled document space.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from polyimg.geometry import affine
from polyimg.svg.transforms import parse_length, parse_transform, parse_viewbox, viewport_transform
from polyimg.svg.tree import DocumentTree, SvgNode

# Browser default size of a replaced element without intrinsic dimensions
DEFAULT_VIEWPORT = (300.0, 150.0)


def root_viewport(root: SvgNode, scale: float = 1.0) -> tuple[NDArray[np.float64], tuple[float, float]]:
    """Outermost viewport matrix and the user-space size it establishes.

    A root without width/height takes its size from the viewBox. The viewport,
    never the viewBox, is multiplied by scale.
    """
    viewbox = parse_viewbox(root.get("viewBox"))
    width = _absolute(root.get("width"))
    height = _absolute(root.get("height"))

    if viewbox is None:
        size = (width or DEFAULT_VIEWPORT[0], height or DEFAULT_VIEWPORT[1])
        return affine.scale(scale), size

    vx, vy, vw, vh = viewbox
    if width is None and height is None:
        width, height = vw, vh
    elif width is None:
        width = vw * height / vh
    elif height is None:
        height = vh * width / vw
    m = viewport_transform((0.0, 0.0, width * scale, height * scale), viewbox, root.get("preserveAspectRatio"))
    return m, (vw, vh)


def nested_viewport(node: SvgNode, parent_size: tuple[float, float]) -> tuple[NDArray[np.float64], tuple[float, float]]:
    """Viewport matrix of a nested <svg> and the user-space size inside it."""
    pw, ph = parent_size
    x = _relative(node.get("x"), pw, 0.0)
    y = _relative(node.get("y"), ph, 0.0)
    width = _relative(node.get("width"), pw, pw)
    height = _relative(node.get("height"), ph, ph)
    viewbox = parse_viewbox(node.get("viewBox"))
    m = viewport_transform((x, y, width, height), viewbox, node.get("preserveAspectRatio"))
    size = (viewbox[2], viewbox[3]) if viewbox is not None else (width, height)
    return m, size


def viewport_size(tree: DocumentTree, index: int) -> tuple[float, float]:
    """User-space size that percentages inside the node resolve against."""
    chain = tree.path_from_root(index)
    _, size = root_viewport(chain[0])
    for node in chain[1:]:
        if node.tag == "svg":
            _, size = nested_viewport(node, size)
    return size


def resolve_transform(tree: DocumentTree, index: int, scale: float = 1.0) -> NDArray[np.float64]:
    """Cumulative matrix from the node's local space to document space."""
    chain = tree.path_from_root(index)
    m, size = root_viewport(chain[0], scale)
    m = m @ parse_transform(chain[0].get("transform"))
    for node in chain[1:]:
        m = m @ parse_transform(node.get("transform"))
        if node.tag == "svg":
            viewport, size = nested_viewport(node, size)
            m = m @ viewport
    return m


def _absolute(text: str | None) -> float | None:
    length = parse_length(text)
    if length is None or length[1]:
        return None
    return length[0]


def _relative(text: str | None, reference: float, default: float) -> float:
    length = parse_length(text)
    if length is None:
        return default
    value, is_percent = length
    return value * reference / 100.0 if is_percent else value
