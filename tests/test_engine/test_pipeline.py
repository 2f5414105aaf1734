"""Tests for the pipeline orchestrator."""

import pytest

from polyimg.engine.context import ConversionContext
from polyimg.engine.pipeline import Pipeline, create_pipeline
from polyimg.engine.registry import Phase, StageRegistry, StageSpec
from polyimg.svg.parser import parse_svg
from tests.conftest import MIXED_SVG


def test_pipeline_runs_stages():
    reg = StageRegistry()
    results = []

    def s1(ctx: ConversionContext) -> None:
        results.append("s1")

    def s2(ctx: ConversionContext) -> None:
        results.append("s2")

    reg.register(StageSpec("S0.02", Phase.RESOLUTION, s2, dependencies=("S0.01",)))
    reg.register(StageSpec("S0.01", Phase.RESOLUTION, s1))

    ctx = ConversionContext()
    Pipeline(registry=reg).run(ctx)

    assert results == ["s1", "s2"]
    assert ctx.completed_stages == {"S0.01", "S0.02"}


def test_pipeline_stops_on_error():
    reg = StageRegistry()
    later = []

    def fail(ctx: ConversionContext) -> None:
        raise ValueError("test error")

    reg.register(StageSpec("S0.01", Phase.RESOLUTION, fail))
    reg.register(StageSpec("S0.02", Phase.RESOLUTION, later.append, dependencies=("S0.01",)))

    ctx = ConversionContext()
    with pytest.raises(ValueError):
        Pipeline(registry=reg).run(ctx)

    assert "test error" in ctx.errors["S0.01"]
    assert later == []
    assert "S0.01" not in ctx.completed_stages


def test_context_tracks_skipped_shapes():
    ctx = create_pipeline().run(parse_svg(MIXED_SVG))
    assert ctx.num_shapes == 4
    assert [s.id for s in ctx.active_shapes()] == ["E1", "E2", "E3"]
    assert ctx.shapes[3].skipped
    assert "E4" in ctx.warnings
    assert len(ctx.completed_stages) == 7
