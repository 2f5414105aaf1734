"""Owned arena tree for SVG documents.

Nodes live in a flat list and refer to each other by index, so ancestor walks
are plain loops and copying a tree never aliases the original.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

SHAPE_TAGS = frozenset({"rect", "circle", "ellipse", "line", "polyline", "polygon", "path"})


@dataclass
class SvgNode:
    index: int
    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    parent: int | None = None
    children: list[int] = field(default_factory=list)

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.attributes.get(name, default)


@dataclass
class DocumentTree:
    """Flat node list; index 0 is the document root."""

    nodes: list[SvgNode] = field(default_factory=list)
    ids: dict[str, int] = field(default_factory=dict)

    @property
    def root(self) -> SvgNode:
        return self.nodes[0]

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> SvgNode:
        return self.nodes[index]

    def ancestors(self, index: int, include_self: bool = False) -> Iterator[SvgNode]:
        """Yield ancestors from the nearest parent up to the root."""
        node = self.nodes[index]
        if include_self:
            yield node
        while node.parent is not None:
            node = self.nodes[node.parent]
            yield node

    def path_from_root(self, index: int) -> list[SvgNode]:
        chain = list(self.ancestors(index, include_self=True))
        chain.reverse()
        return chain

    def iter_preorder(self, start: int = 0) -> Iterator[SvgNode]:
        """Document-order traversal without recursion."""
        stack = [start]
        while stack:
            node = self.nodes[stack.pop()]
            yield node
            stack.extend(reversed(node.children))

    def iter_shapes(self) -> Iterator[SvgNode]:
        for node in self.iter_preorder():
            if node.tag in SHAPE_TAGS:
                yield node


class TreeBuilder:
    """Appends nodes to a fresh DocumentTree."""

    def __init__(self) -> None:
        self.tree = DocumentTree()

    def add(self, tag: str, attributes: dict[str, str] | None = None, parent: int | None = None) -> int:
        if parent is None and self.tree.nodes:
            raise ValueError("Only the first node may be added without a parent")
        index = len(self.tree.nodes)
        node = SvgNode(index=index, tag=tag, attributes=dict(attributes or {}), parent=parent)
        self.tree.nodes.append(node)
        if parent is not None:
            self.tree.nodes[parent].children.append(index)
        element_id = node.attributes.get("id")
        if element_id and element_id not in self.tree.ids:
            self.tree.ids[element_id] = index
        return index

    def build(self) -> DocumentTree:
        return self.tree
