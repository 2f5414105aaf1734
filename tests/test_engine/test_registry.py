"""Tests for the stage registry."""

import pytest

from polyimg.engine.context import ConversionContext
from polyimg.engine.pipeline import create_pipeline
from polyimg.engine.registry import Phase, StageRegistry, StageSpec


def _noop(ctx: ConversionContext) -> None:
    pass


def _ids(reg: StageRegistry) -> list[str]:
    return [s.id for s in reg.ordered()]


def test_duplicate_id_rejected():
    reg = StageRegistry()
    reg.register(StageSpec("S0.01", Phase.RESOLUTION, _noop))
    with pytest.raises(ValueError):
        reg.register(StageSpec("S0.01", Phase.RESOLUTION, _noop))


def test_dependencies_run_first():
    reg = StageRegistry()
    reg.register(StageSpec("S1.02", Phase.GEOMETRY, _noop, dependencies=("S1.03",)))
    reg.register(StageSpec("S1.03", Phase.GEOMETRY, _noop))
    assert _ids(reg) == ["S1.03", "S1.02"]


def test_phases_run_in_sequence():
    reg = StageRegistry()
    reg.register(StageSpec("Z", Phase.RESOLUTION, _noop))
    reg.register(StageSpec("A", Phase.OUTPUT, _noop))
    reg.register(StageSpec("M", Phase.GEOMETRY, _noop))
    assert _ids(reg) == ["Z", "M", "A"]


def test_unknown_dependency_rejected():
    reg = StageRegistry()
    reg.register(StageSpec("S0.01", Phase.RESOLUTION, _noop, dependencies=("S9.99",)))
    with pytest.raises(ValueError, match="unknown stage"):
        reg.ordered()


def test_dependency_on_later_phase_rejected():
    reg = StageRegistry()
    reg.register(StageSpec("S0.01", Phase.RESOLUTION, _noop, dependencies=("S2.01",)))
    reg.register(StageSpec("S2.01", Phase.OUTPUT, _noop))
    with pytest.raises(ValueError, match="later stage"):
        reg.ordered()


def test_circular_dependency_detected():
    reg = StageRegistry()
    reg.register(StageSpec("A", Phase.RESOLUTION, _noop, dependencies=("B",)))
    reg.register(StageSpec("B", Phase.RESOLUTION, _noop, dependencies=("A",)))
    with pytest.raises(ValueError, match="Circular"):
        reg.ordered()


def test_builtin_stage_order():
    ids = [s.id for s in create_pipeline().registry.ordered()]
    assert ids == ["S0.01", "S0.02", "S1.01", "S1.02", "S1.03", "S2.01", "S2.02"]
