"""Reference resolution: materialize every <use> into a literal subtree copy.

The input tree is never mutated: resolution walks it once and writes a fresh
tree through a TreeBuilder. Each <use> becomes a <g> carrying the use's own
attributes plus translate(x, y); its target is copied underneath, or
instantiated as a nested <svg> viewport when the target is a <symbol>/<svg>.
"""

from __future__ import annotations

import logging

from polyimg.exceptions import ResourceLimitExceeded, UnresolvedReference
from polyimg.svg.ctm import viewport_size
from polyimg.svg.transforms import parse_length
from polyimg.svg.tree import DocumentTree, SvgNode, TreeBuilder

logger = logging.getLogger(__name__)

# Positioning/reference attributes consumed by the materialization itself
_USE_ONLY_ATTRS = {"x", "y", "width", "height", "href"}

VIEWPORT_TARGETS = {"symbol", "svg"}


def resolve_references(tree: DocumentTree, max_nodes: int = 100_000) -> DocumentTree:
    """Return a new tree with no <use> elements left."""
    builder = TreeBuilder()
    expansions = 0

    # (source index, new parent, targets being expanded on this branch, inside a copy)
    stack: list[tuple[int, int | None, tuple[int, ...], bool]] = [(0, None, (), False)]
    while stack:
        source_index, parent, active, in_copy = stack.pop()
        node = tree[source_index]
        if len(builder.tree) >= max_nodes:
            raise ResourceLimitExceeded(f"Reference expansion exceeded {max_nodes} nodes")

        attrs = dict(node.attributes)
        # Copies would duplicate ids; the first occurrence keeps them
        if in_copy:
            attrs.pop("id", None)

        if node.tag != "use":
            index = builder.add(node.tag, attrs, parent)
            stack.extend((child, index, active, in_copy) for child in reversed(node.children))
            continue

        href = node.get("href", "") or ""
        target_index = tree.ids.get(href[1:]) if href.startswith("#") else None
        if target_index is None:
            raise UnresolvedReference(href)
        if target_index in active:
            raise UnresolvedReference(href, "reference cycle")
        if parent is None:
            raise UnresolvedReference(href, "<use> cannot be the document root")
        expansions += 1

        group_attrs = {k: v for k, v in attrs.items() if k not in _USE_ONLY_ATTRS}
        if node.get("x") is not None or node.get("y") is not None:
            x, y = _use_offset(node, builder.tree, parent)
            group_attrs["transform"] = f"{attrs.get('transform', '')} translate({x!r}, {y!r})".strip()
        group = builder.add("g", group_attrs, parent)

        target = tree[target_index]
        branch = active + (target_index,)
        if target.tag in VIEWPORT_TARGETS:
            viewport_attrs = {k: v for k, v in target.attributes.items() if k != "id"}
            for dimension in ("width", "height"):
                if node.get(dimension) is not None:
                    viewport_attrs[dimension] = node.attributes[dimension]
                elif target.tag == "symbol" or dimension not in viewport_attrs:
                    viewport_attrs[dimension] = "100%"
            viewport = builder.add("svg", viewport_attrs, group)
            stack.extend((child, viewport, branch, True) for child in reversed(target.children))
        else:
            stack.append((target_index, group, branch, True))

    resolved = builder.build()
    logger.debug("Resolved %d references: %d → %d nodes", expansions, len(tree), len(resolved))
    return resolved


def _use_offset(node: SvgNode, tree: DocumentTree, parent: int) -> tuple[float, float]:
    """x/y of a <use> in user units; percentages refer to the enclosing viewport."""
    offset = []
    try:
        width, height = viewport_size(tree, parent)
        for name, reference in (("x", width), ("y", height)):
            length = parse_length(node.get(name))
            if length is None:
                offset.append(0.0)
            else:
                value, is_percent = length
                offset.append(value * reference / 100.0 if is_percent else value)
    except ValueError as e:
        logger.warning("Ignoring position of <use href=%r>: %s", node.get("href"), e)
        return 0.0, 0.0
    return offset[0], offset[1]
