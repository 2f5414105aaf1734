"""S2.01: Polygon Assembly.

One polygon per subpath, with hex fill/stroke and the origin offset applied.
"""

from __future__ import annotations

from polyimg.engine.context import ConversionContext
from polyimg.engine.registry import Phase, stage
from polyimg.geometry.assemble import assemble_polygons


@stage(
    id="S2.01",
    phase=Phase.OUTPUT,
    dependencies=["S1.03"],
    description="Assemble polygons with colors in output space",
)
def polygon_assembly(ctx: ConversionContext) -> None:
    options = ctx.options
    for shape in ctx.active_shapes():
        ctx.polygons.extend(
            assemble_polygons(
                shape.subpaths,
                shape.fill,
                shape.stroke,
                origin=(options.origin_x, options.origin_y),
                scale=options.scale,
                max_points=options.max_points,
            )
        )
