"""S2.02: Emission.

Serialize the polygon list into the device-side declaration.
"""

from __future__ import annotations

from polyimg.encoding.emitter import emit_polygons
from polyimg.engine.context import ConversionContext
from polyimg.engine.registry import Phase, stage


@stage(
    id="S2.02",
    phase=Phase.OUTPUT,
    dependencies=["S2.01"],
    description="Emit polygons as a JavaScript declaration",
)
def emission(ctx: ConversionContext) -> None:
    ctx.output_text = emit_polygons(ctx.polygons, ctx.options.number_format)
