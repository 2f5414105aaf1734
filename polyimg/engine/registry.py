"""Stage registry.

Each conversion stage is a plain function over the ConversionContext,
registered with @stage. The pipeline asks the registry for an execution order:
phases run in sequence, and inside a phase a stage runs after the stages it
names in `dependencies`.
"""

from __future__ import annotations

import enum
import graphlib
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from polyimg.engine.context import ConversionContext

logger = logging.getLogger(__name__)

StageFn = Callable[["ConversionContext"], None]


class Phase(enum.IntEnum):
    # Whole-document work on the SVG tree
    RESOLUTION = 0
    # Per-shape geometry
    GEOMETRY = 1
    # Polygons and text
    OUTPUT = 2


@dataclass(frozen=True)
class StageSpec:
    id: str
    phase: Phase
    fn: StageFn
    dependencies: tuple[str, ...] = ()
    description: str = ""


class StageRegistry:
    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s (%s)", spec.id, spec.phase.name)

    def ordered(self) -> list[StageSpec]:
        """Execution order; raises ValueError on unknown, later-phase or circular dependencies."""
        for spec in self._stages.values():
            for dep in spec.dependencies:
                other = self._stages.get(dep)
                if other is None:
                    raise ValueError(f"Stage {spec.id} depends on unknown stage {dep}")
                if other.phase > spec.phase:
                    raise ValueError(f"Stage {spec.id} ({spec.phase.name}) depends on later stage {dep} ({other.phase.name})")

        # Every stage also waits for all stages of earlier phases
        graph = {
            sid: set(spec.dependencies) | {o.id for o in self._stages.values() if o.phase < spec.phase}
            for sid, spec in self._stages.items()
        }
        sorter = graphlib.TopologicalSorter(graph)
        try:
            sorter.prepare()
        except graphlib.CycleError as e:
            raise ValueError(f"Circular dependency detected among: {e.args[1]}") from e

        ordered: list[StageSpec] = []
        while sorter.is_active():
            ready = sorted(sorter.get_ready())
            for sid in ready:
                ordered.append(self._stages[sid])
                sorter.done(sid)
        return ordered


_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(*, id: str, phase: Phase, dependencies: list[str] | None = None, description: str = ""):
    """Register the decorated function as a conversion stage."""

    def decorator(fn: StageFn) -> StageFn:
        _registry.register(StageSpec(id, phase, fn, tuple(dependencies or ()), description))
        return fn

    return decorator
