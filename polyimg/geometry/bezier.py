"""Cubic Bézier evaluation and uniform sampling."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def bezier(points: NDArray[np.float64], t: float | NDArray[np.float64]) -> NDArray[np.float64]:
    """Evaluate the cubic through 4 control points at t.

    B(t) = (1-t)³·P0 + 3(1-t)²t·P1 + 3(1-t)t²·P2 + t³·P3

    Scalar t returns a single (x, y); an array of N values returns Nx2.
    Exact at the ends: t=0 gives P0, t=1 gives P3.
    """
    p = np.asarray(points, dtype=np.float64).reshape(4, 2)
    t_arr = np.asarray(t, dtype=np.float64)
    tt = t_arr[..., None]
    n = 1.0 - tt
    result = p[0] * n * n * n + p[1] * 3 * n * n * tt + p[2] * 3 * n * tt * tt + p[3] * tt * tt * tt
    return result


def sample_bezier(points: NDArray[np.float64], samples: int) -> NDArray[np.float64]:
    """Sample at t = i/samples for i in 1..samples; the start point is excluded."""
    if samples < 1:
        raise ValueError("samples must be >= 1")
    t = np.arange(1, samples + 1, dtype=np.float64) / samples
    return bezier(points, t)
