"""S1.01: Transform Resolution.

Compose each shape's transform with every ancestor transform and viewport up
to the root, so one matrix maps local coordinates to scaled document space.
"""

from __future__ import annotations

import logging

from polyimg.engine.context import ConversionContext
from polyimg.engine.registry import Phase, stage
from polyimg.svg.ctm import resolve_transform

logger = logging.getLogger(__name__)


@stage(
    id="S1.01",
    phase=Phase.GEOMETRY,
    dependencies=["S0.02"],
    description="Resolve local → document transform per shape",
)
def transform_resolution(ctx: ConversionContext) -> None:
    for shape in ctx.active_shapes():
        try:
            shape.ctm = resolve_transform(ctx.resolved, shape.node, scale=ctx.options.scale)
        except ValueError as e:
            logger.warning("Skipping %s: %s", shape.id, e)
            ctx.skip_shape(shape, str(e))
