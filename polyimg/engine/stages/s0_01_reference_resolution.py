"""S0.01: Reference Resolution.

Materialize every <use> into a literal copy of its target so downstream stages
never see indirection. Missing targets and cycles abort the conversion.
"""

from __future__ import annotations

from polyimg.engine.context import ConversionContext
from polyimg.engine.registry import Phase, stage
from polyimg.svg.resolver import resolve_references


@stage(
    id="S0.01",
    phase=Phase.RESOLUTION,
    description="Expand <use> references into owned subtree copies",
)
def reference_resolution(ctx: ConversionContext) -> None:
    ctx.resolved = resolve_references(ctx.document, max_nodes=ctx.options.max_nodes)
