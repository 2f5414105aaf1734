"""S1.03: Path Flattening.

Turn each shape's commands into simplified point subpaths in document space.
Curves are sampled sample_count times and simplified under the tolerance.
"""

from __future__ import annotations

import logging

from polyimg.engine.context import ConversionContext
from polyimg.engine.registry import Phase, stage
from polyimg.exceptions import EmptyGeometry, InvalidShapeData, UnsupportedPathCommand
from polyimg.geometry.flatten import flatten_commands

logger = logging.getLogger(__name__)


@stage(
    id="S1.03",
    phase=Phase.GEOMETRY,
    dependencies=["S1.01", "S1.02"],
    description="Flatten curves and simplify subpaths",
)
def path_flattening(ctx: ConversionContext) -> None:
    options = ctx.options
    for shape in ctx.active_shapes():
        try:
            shape.subpaths = flatten_commands(
                shape.commands,
                shape.ctm,
                sample_count=options.sample_count,
                tolerance=options.tolerance,
                stroked=shape.stroked,
            )
            if not any(len(sp) for sp in shape.subpaths):
                raise EmptyGeometry(shape.id)
        except EmptyGeometry:
            logger.debug("%s has no geometry", shape.id)
            shape.skipped = True
        except (UnsupportedPathCommand, InvalidShapeData) as e:
            logger.warning("Skipping %s: %s", shape.id, e)
            ctx.skip_shape(shape, str(e))
