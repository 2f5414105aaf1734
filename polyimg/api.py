"""Library entry points."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from polyimg.engine.context import ConversionContext, Polygon
from polyimg.engine.pipeline import create_pipeline
from polyimg.models.options import ConversionOptions
from polyimg.svg.parser import parse_svg
from polyimg.svg.tree import DocumentTree


@dataclass
class ConversionResult:
    polygons: list[Polygon]
    text: str
    # Shape id → reason the shape was skipped
    warnings: dict[str, str] = field(default_factory=dict)


def build_options(options: ConversionOptions | dict[str, Any] | None = None, **overrides: Any) -> ConversionOptions:
    """Merge an options object or dict with keyword overrides (snake_case or camelCase)."""
    if isinstance(options, ConversionOptions):
        data = options.model_dump()
    else:
        data = dict(options or {})
    aliases = {f.alias: name for name, f in ConversionOptions.model_fields.items() if f.alias}
    for key, value in {**data, **overrides}.items():
        data.pop(key, None)
        data[aliases.get(key, key)] = value
    return ConversionOptions.model_validate(data)


def convert_svg(svg_text: str, options: ConversionOptions | dict[str, Any] | None = None, **overrides: Any) -> ConversionResult:
    """Convert SVG markup into polygons and the device declaration text."""
    ctx = parse_svg(svg_text, build_options(options, **overrides))
    return _run(ctx)


def convert_tree(tree: DocumentTree, options: ConversionOptions | dict[str, Any] | None = None, **overrides: Any) -> ConversionResult:
    """Convert an already-built document tree. The tree is not modified."""
    ctx = ConversionContext(document=tree, options=build_options(options, **overrides))
    return _run(ctx)


def _run(ctx: ConversionContext) -> ConversionResult:
    create_pipeline().run(ctx)
    return ConversionResult(polygons=ctx.polygons, text=ctx.output_text, warnings=dict(ctx.warnings))
