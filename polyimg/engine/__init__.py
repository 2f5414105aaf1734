"""polyimg conversion stage engine."""

from polyimg.engine.registry import stage, Phase, get_registry
from polyimg.engine.context import ConversionContext, ShapeData, Subpath, Polygon
from polyimg.engine.pipeline import Pipeline, create_pipeline

__all__ = [
    "stage",
    "Phase",
    "get_registry",
    "ConversionContext",
    "ShapeData",
    "Subpath",
    "Polygon",
    "Pipeline",
    "create_pipeline",
]
