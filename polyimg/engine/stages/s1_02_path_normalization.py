"""S1.02: Path Normalization.

Reduce path data and basic shapes to MoveTo / LineTo / CurveTo / ClosePath.
Malformed geometry skips the shape, never the document.
"""

from __future__ import annotations

import logging

from polyimg.engine.context import ConversionContext
from polyimg.engine.registry import Phase, stage
from polyimg.exceptions import UnsupportedPathCommand
from polyimg.svg.shapes import shape_commands

logger = logging.getLogger(__name__)


@stage(
    id="S1.02",
    phase=Phase.GEOMETRY,
    dependencies=["S0.02"],
    description="Normalize shape geometry into path commands",
)
def path_normalization(ctx: ConversionContext) -> None:
    for shape in ctx.active_shapes():
        try:
            shape.commands = shape_commands(ctx.resolved[shape.node])
        except (ValueError, UnsupportedPathCommand) as e:
            logger.warning("Skipping %s: malformed <%s>: %s", shape.id, shape.tag, e)
            ctx.skip_shape(shape, str(e))
