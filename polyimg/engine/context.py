"""ConversionContext: the single mutable state object flowing through all stages.

Per-shape results → ShapeData
Whole-document results → ConversionContext.* (resolved tree, polygons, output text)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

from polyimg.models.options import ConversionOptions
from polyimg.svg.tree import DocumentTree


@dataclass
class Subpath:
    """One contiguous run of points, open (polyline) or closed (ring)."""

    points: NDArray[np.float64] = field(default_factory=lambda: np.empty((0, 2)))
    closed: bool = False

    def __len__(self) -> int:
        return len(self.points)


@dataclass
class Polygon:
    """Output unit: points in final output space plus resolved colors."""

    points: NDArray[np.float64]
    fill: str | None = None
    stroke: str | None = None

    def flat_coordinates(self) -> list[float]:
        return [float(v) for v in self.points.reshape(-1)]


@dataclass
class ShapeData:
    """Data for a single drawable shape of the resolved document."""

    id: str
    # Node index in the resolved tree
    node: int
    tag: str
    # Computed paints as functional rgb() strings; None means not painted
    fill: str | None = None
    stroke: str | None = None
    # Normalized PathCommand sequence
    commands: list[Any] = field(default_factory=list)
    # Local → document 3x3 matrix
    ctm: NDArray[np.float64] = field(default_factory=lambda: np.eye(3))
    # Flattened subpaths in document coordinates
    subpaths: list[Subpath] = field(default_factory=list)
    skipped: bool = False

    @property
    def filled(self) -> bool:
        return self.fill is not None

    @property
    def stroked(self) -> bool:
        return self.stroke is not None


@dataclass
class ConversionContext:
    """Shared state flowing through the entire pipeline."""

    # Document as handed to the pipeline, never mutated
    document: DocumentTree = field(default_factory=DocumentTree)
    # Document with every <use> materialized
    resolved: DocumentTree | None = None
    options: ConversionOptions = field(default_factory=ConversionOptions)
    # Visible, painted shapes in document order
    shapes: list[ShapeData] = field(default_factory=list)
    polygons: list[Polygon] = field(default_factory=list)
    output_text: str = ""

    # --- Pipeline metadata ---
    completed_stages: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)
    # Shape id → reason the shape was skipped
    warnings: dict[str, str] = field(default_factory=dict)

    @property
    def num_shapes(self) -> int:
        return len(self.shapes)

    def active_shapes(self) -> list[ShapeData]:
        return [shape for shape in self.shapes if not shape.skipped]

    def skip_shape(self, shape: ShapeData, reason: str) -> None:
        shape.skipped = True
        self.warnings[shape.id] = reason
