"""S0.02: Shape Collection.

Walk the resolved tree in document order, drop shapes hidden by display:none or
living in template-only containers, and resolve each survivor's paints. Shapes
with neither fill nor stroke contribute nothing and are not collected.
"""

from __future__ import annotations

import logging

from polyimg.engine.context import ConversionContext, ShapeData
from polyimg.engine.registry import Phase, stage
from polyimg.svg.style import compute_paint
from polyimg.svg.visibility import is_visible

logger = logging.getLogger(__name__)


@stage(
    id="S0.02",
    phase=Phase.RESOLUTION,
    dependencies=["S0.01"],
    description="Collect visible, painted shapes",
)
def shape_collection(ctx: ConversionContext) -> None:
    tree = ctx.resolved
    hidden = unpainted = 0
    seen: set[str] = set()
    for z_order, node in enumerate(tree.iter_shapes()):
        if not is_visible(tree, node.index):
            hidden += 1
            continue
        fill, stroke = compute_paint(tree, node.index)
        if fill is None and stroke is None:
            unpainted += 1
            continue
        shape_id = node.get("id") or f"E{z_order + 1}"
        # Generated ids may clash with authored ones; warnings are keyed by id
        if shape_id in seen:
            shape_id = f"{shape_id}#{node.index}"
        seen.add(shape_id)
        ctx.shapes.append(
            ShapeData(
                id=shape_id,
                node=node.index,
                tag=node.tag,
                fill=fill,
                stroke=stroke,
            )
        )
    logger.debug("Collected %d shapes (%d hidden, %d unpainted)", len(ctx.shapes), hidden, unpainted)
