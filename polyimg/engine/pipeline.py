"""Pipeline orchestrator: runs every registered stage over one ConversionContext."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from polyimg.engine.context import ConversionContext
from polyimg.engine.registry import StageRegistry, StageSpec, get_registry

logger = logging.getLogger(__name__)

_STAGE_PACKAGE = "polyimg.engine.stages"


def register_stages() -> None:
    """Import all stage modules so their @stage decorators fire."""
    package = importlib.import_module(_STAGE_PACKAGE)
    for module in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{_STAGE_PACKAGE}.{module.name}")


class Pipeline:
    """Runs stages in registry order.

    Stages isolate per-shape problems themselves. Anything a stage raises is
    fatal to the conversion: it is recorded in ctx.errors and re-raised.
    """

    def __init__(self, registry: StageRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def run(self, ctx: ConversionContext) -> ConversionContext:
        start = time.perf_counter()
        for spec in self.registry.ordered():
            self._run_stage(spec, ctx)
        logger.info(
            "Converted %d shapes into %d polygons in %.0fms (%d skipped)",
            ctx.num_shapes,
            len(ctx.polygons),
            (time.perf_counter() - start) * 1000,
            len(ctx.warnings),
        )
        return ctx

    def _run_stage(self, spec: StageSpec, ctx: ConversionContext) -> None:
        t0 = time.perf_counter()
        try:
            spec.fn(ctx)
        except Exception as e:
            ctx.errors[spec.id] = str(e)
            logger.error("%s (%s) failed: %s", spec.id, spec.description, e)
            raise
        ctx.completed_stages.add(spec.id)
        logger.debug("%s (%s) took %.1fms", spec.id, spec.description, (time.perf_counter() - t0) * 1000)


def create_pipeline() -> Pipeline:
    register_stages()
    return Pipeline()
