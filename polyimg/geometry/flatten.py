"""Path flattening: normalized commands → simplified point subpaths.

Control and end points are mapped to document space before any curve math,
so curves are sampled in the final coordinate space.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from polyimg.engine.context import Subpath
from polyimg.exceptions import InvalidShapeData, UnsupportedPathCommand
from polyimg.geometry import affine
from polyimg.geometry.bezier import sample_bezier
from polyimg.geometry.commands import ClosePath, CurveTo, LineTo, MoveTo, PathCommand, command_points
from polyimg.geometry.simplify import simplify


class _SubpathBuilder:
    """Accumulates point runs for the current subpath and seals them."""

    def __init__(self) -> None:
        self.runs: list[NDArray[np.float64]] = []
        self.sealed: list[Subpath] = []

    def __bool__(self) -> bool:
        return bool(self.runs)

    @property
    def first(self) -> NDArray[np.float64]:
        return self.runs[0][0]

    @property
    def last(self) -> NDArray[np.float64]:
        return self.runs[-1][-1]

    def push(self, points: NDArray[np.float64]) -> None:
        if len(points):
            self.runs.append(points.reshape(-1, 2))

    def seal(self, closed: bool) -> None:
        if self.runs:
            self.sealed.append(Subpath(points=np.vstack(self.runs), closed=closed))
        self.runs = []


def flatten_commands(
    commands: list[PathCommand],
    transform: NDArray[np.float64],
    sample_count: int = 1000,
    tolerance: float = 0.0,
    stroked: bool = True,
) -> list[Subpath]:
    """Flatten a command sequence into subpaths in document coordinates."""
    current = _SubpathBuilder()

    for command in commands:
        if isinstance(command, MoveTo):
            if current:
                current.seal(closed=False)
            current.push(affine.apply(transform, command_points(command)))
        elif isinstance(command, LineTo):
            current.push(affine.apply(transform, command_points(command)))
        elif isinstance(command, CurveTo):
            if not current:
                raise InvalidShapeData("curve has no current point")
            controls = affine.apply(transform, command_points(command))
            samples = sample_bezier(np.vstack([current.last, controls]), sample_count)
            current.push(simplify(samples, tolerance))
        elif isinstance(command, ClosePath):
            if current:
                # A run that already ends on its start is not closed twice
                if not np.array_equal(current.last, current.first):
                    current.push(current.first.copy())
                current.seal(closed=True)
        else:
            raise UnsupportedPathCommand(f"Unsupported path command: {type(command).__name__}")

    if current:
        current.seal(closed=False)

    subpaths: list[Subpath] = []
    for subpath in current.sealed:
        points = subpath.points
        if not np.isfinite(points).all():
            raise InvalidShapeData("geometry has non-finite coordinates")
        # Fill-only rings need no zero-length closing edge
        if not stroked and len(points) > 1 and np.array_equal(points[0], points[-1]):
            points = points[:-1]
        subpaths.append(Subpath(points=simplify(points, tolerance, closed=subpath.closed), closed=subpath.closed))
    return subpaths
