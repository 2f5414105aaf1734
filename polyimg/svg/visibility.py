"""Visibility filter: decides whether a shape takes part in conversion at all."""

from __future__ import annotations

from polyimg.svg.style import parse_style_attr
from polyimg.svg.tree import DocumentTree, SvgNode

# Containers whose content is only ever rendered by reference
TEMPLATE_TAGS = frozenset({"defs", "symbol", "clipPath", "mask", "marker", "pattern"})


def is_display_none(node: SvgNode) -> bool:
    display = parse_style_attr(node.get("style")).get("display", node.get("display"))
    return display is not None and display.strip() == "none"


def is_visible(tree: DocumentTree, index: int) -> bool:
    """False if the node or an ancestor is display:none or a template-only container."""
    for node in tree.ancestors(index, include_self=True):
        if is_display_none(node):
            return False
        if node.tag in TEMPLATE_TAGS:
            return False
    return True
