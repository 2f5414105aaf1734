"""SVG parser: facade over xml.etree.

Converts raw SVG string → ConversionContext with the owned DocumentTree populated.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from polyimg.engine.context import ConversionContext
from polyimg.exceptions import SvgParseError
from polyimg.models.options import ConversionOptions
from polyimg.svg.tree import DocumentTree, TreeBuilder

logger = logging.getLogger(__name__)

# Elements that never contribute geometry and are dropped while building the tree
_SKIP_TAGS = {"title", "desc", "metadata", "style", "script", "text", "foreignObject"}


def parse_svg(svg_text: str, options: ConversionOptions | None = None) -> ConversionContext:
    """Parse raw SVG string into a ConversionContext."""
    tree = parse_document(svg_text)
    ctx = ConversionContext(document=tree, options=options or ConversionOptions())
    logger.info("Parsed SVG: %d nodes, %d ids", len(tree), len(tree.ids))
    return ctx


def parse_document(svg_text: str) -> DocumentTree:
    """Build a DocumentTree from SVG markup."""
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise SvgParseError(f"Malformed SVG: {e}") from e

    if _local_name(root.tag) != "svg":
        raise SvgParseError(f"Root element is <{_local_name(root.tag)}>, expected <svg>")

    builder = TreeBuilder()
    stack: list[tuple[ET.Element, int | None]] = [(root, None)]
    while stack:
        element, parent = stack.pop()
        tag = _local_name(element.tag)
        if tag in _SKIP_TAGS:
            continue
        index = builder.add(tag, _extract_attrs(element), parent)
        stack.extend((child, index) for child in reversed(list(element)))
    return builder.build()


def _local_name(name: str) -> str:
    """Strip an ElementTree '{namespace}' prefix."""
    return name.rsplit("}", 1)[-1] if isinstance(name, str) else ""


def _extract_attrs(element: ET.Element) -> dict[str, str]:
    """Attributes keyed by local name, so xlink:href and href both become href."""
    attrs: dict[str, str] = {}
    for key, value in element.attrib.items():
        name = _local_name(key)
        # Plain href wins over xlink:href when both are present
        if name == "href" and "href" in attrs and key != "href":
            continue
        attrs[name] = value.strip()
    return attrs
