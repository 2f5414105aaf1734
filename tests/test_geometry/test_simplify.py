"""Tests for polyline simplification."""

import numpy as np

from polyimg.geometry.simplify import douglas_peucker, simplify


def test_zero_tolerance_is_identity():
    pts = np.array([[0, 0], [1, 0.001], [2, 0], [3, 0]], dtype=float)
    assert np.array_equal(simplify(pts, 0), pts)


def test_collinear_points_removed():
    pts = np.array([[0, 0], [1, 0], [2, 0], [3, 0]], dtype=float)
    assert simplify(pts, 0.1).tolist() == [[0, 0], [3, 0]]


def test_corner_kept():
    pts = np.array([[0, 0], [5, 0.05], [10, 0], [10, 10]], dtype=float)
    assert simplify(pts, 0.5).tolist() == [[0, 0], [10, 0], [10, 10]]


def test_error_stays_within_tolerance():
    t = np.linspace(0, np.pi, 200)
    pts = np.column_stack([t * 10, np.sin(t) * 10])
    out = simplify(pts, 0.25)
    assert len(out) < len(pts)
    assert np.array_equal(out[0], pts[0])
    assert np.array_equal(out[-1], pts[-1])
    # Every input point lies near the output polyline
    for p in pts:
        d = min(
            _distance(p, out[i], out[i + 1]) for i in range(len(out) - 1)
        )
        assert d <= 0.25 + 1e-9


def test_closed_ring_keeps_duplicate():
    ring = np.array([[0, 0], [5, 0], [10, 0], [10, 10], [0, 10], [0, 0]], dtype=float)
    assert simplify(ring, 0.5, closed=True).tolist() == [[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]]


def test_closed_ring_without_duplicate():
    ring = np.array([[0, 0], [5, 0], [10, 0], [10, 10], [0, 10]], dtype=float)
    assert simplify(ring, 0.5, closed=True).tolist() == [[0, 0], [10, 0], [10, 10], [0, 10]]


def test_short_runs_untouched():
    pts = np.array([[0, 0], [1, 1]], dtype=float)
    assert np.array_equal(douglas_peucker(pts, 10), pts)


def _distance(p, a, b):
    seg = b - a
    denom = float(seg @ seg)
    if denom == 0:
        return float(np.hypot(*(p - a)))
    t = min(max(float((p - a) @ seg) / denom, 0.0), 1.0)
    return float(np.hypot(*(p - a - t * seg)))
