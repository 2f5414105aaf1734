"""Leaf-node affine helpers on 3x3 homogeneous matrices. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def identity() -> NDArray[np.float64]:
    return np.eye(3)


def matrix(a: float, b: float, c: float, d: float, e: float, f: float) -> NDArray[np.float64]:
    """SVG matrix(a b c d e f) as a 3x3 array."""
    return np.array([[a, c, e], [b, d, f], [0.0, 0.0, 1.0]])


def translate(tx: float, ty: float = 0.0) -> NDArray[np.float64]:
    return matrix(1.0, 0.0, 0.0, 1.0, tx, ty)


def scale(sx: float, sy: float | None = None) -> NDArray[np.float64]:
    return matrix(sx, 0.0, 0.0, sx if sy is None else sy, 0.0, 0.0)


def rotate(degrees: float, cx: float = 0.0, cy: float = 0.0) -> NDArray[np.float64]:
    rad = math.radians(degrees)
    cos, sin = math.cos(rad), math.sin(rad)
    rot = matrix(cos, sin, -sin, cos, 0.0, 0.0)
    if cx == 0.0 and cy == 0.0:
        return rot
    return translate(cx, cy) @ rot @ translate(-cx, -cy)


def skew_x(degrees: float) -> NDArray[np.float64]:
    return matrix(1.0, 0.0, math.tan(math.radians(degrees)), 1.0, 0.0, 0.0)


def skew_y(degrees: float) -> NDArray[np.float64]:
    return matrix(1.0, math.tan(math.radians(degrees)), 0.0, 1.0, 0.0, 0.0)


def apply(m: NDArray[np.float64], points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Map an Nx2 point array through m."""
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    return pts @ m[:2, :2].T + m[:2, 2]
